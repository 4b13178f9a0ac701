"""
Sequence file I/O.

This module provides functions for reading and writing common
sequence file formats:
- FASTA: Sequence storage format
- FASTQ: Sequence + quality scores (NGS data)
- SnapGene: Binary DNA editor files (read only)
"""

from seqformats.io.records import (
    sequence_tuple,
    SequenceRecord,
)

from seqformats.io.quality import (
    QualityEncoding,
    QualityScore,
    decode_quality,
    encode_quality,
    PHRED33_OFFSET,
    PHRED64_OFFSET,
)

from seqformats.io.fasta import (
    read_fasta,
    write_fasta,
    parse_fasta_string,
    format_fasta,
)

from seqformats.io.fastq import (
    read_fastq,
    write_fastq,
    parse_fastq_string,
    format_fastq,
    FastqEntry,
)

from seqformats.io.snapgene import (
    read_snapgene,
    parse_snapgene_bytes,
    iter_packets,
    SnapGeneDocument,
)

__all__ = [
    "sequence_tuple",
    "SequenceRecord",
    "QualityEncoding",
    "QualityScore",
    "decode_quality",
    "encode_quality",
    "PHRED33_OFFSET",
    "PHRED64_OFFSET",
    "read_fasta",
    "write_fasta",
    "parse_fasta_string",
    "format_fasta",
    "read_fastq",
    "write_fastq",
    "parse_fastq_string",
    "format_fastq",
    "FastqEntry",
    "read_snapgene",
    "parse_snapgene_bytes",
    "iter_packets",
    "SnapGeneDocument",
]
