"""
seqformats: Input/output for common bioinformatics file types

This package provides readers and writers for:
- FASTA sequence files
- FASTQ sequence + quality files (Phred+33, Phred+64, decimal scores)
- SnapGene .dna files, with features, notes and primers as XML

Records are built through a caller supplied factory, so parsed data can
land directly in whatever sequence type the caller works with.
"""

__version__ = "0.1.1"
__author__ = "seqformats Contributors"

from seqformats.exceptions import (
    SeqFormatsError,
    ParseError,
    DecodeError,
    MalformedPacketError,
    LengthMismatchError,
    UnknownEncodingError,
)

from seqformats.io import (
    read_fasta,
    write_fasta,
    parse_fasta_string,
    read_fastq,
    write_fastq,
    parse_fastq_string,
    read_snapgene,
    parse_snapgene_bytes,
    decode_quality,
    QualityEncoding,
    QualityScore,
    FastqEntry,
    SnapGeneDocument,
    SequenceRecord,
    sequence_tuple,
)

__all__ = [
    # Errors
    "SeqFormatsError",
    "ParseError",
    "DecodeError",
    "MalformedPacketError",
    "LengthMismatchError",
    "UnknownEncodingError",
    # FASTA
    "read_fasta",
    "write_fasta",
    "parse_fasta_string",
    # FASTQ
    "read_fastq",
    "write_fastq",
    "parse_fastq_string",
    "decode_quality",
    "QualityEncoding",
    "QualityScore",
    "FastqEntry",
    # SnapGene
    "read_snapgene",
    "parse_snapgene_bytes",
    "SnapGeneDocument",
    # Records
    "SequenceRecord",
    "sequence_tuple",
]
