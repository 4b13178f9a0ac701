"""
Example: Summarise FASTA, FASTQ and SnapGene files.

Usage:
    python examples/inspect_files.py FILE [FILE ...]
"""

import logging
import sys
from pathlib import Path

from seqformats import SequenceRecord, read_fasta, read_fastq, read_snapgene

FASTA_SUFFIXES = {".fasta", ".fa", ".fna", ".faa"}
FASTQ_SUFFIXES = {".fastq", ".fq"}


def _suffix(path: Path) -> str:
    suffixes = path.suffixes
    if suffixes and suffixes[-1] == ".gz":
        suffixes = suffixes[:-1]
    return suffixes[-1] if suffixes else ""


def summarise(path: Path) -> None:
    suffix = _suffix(path)

    if suffix in FASTA_SUFFIXES:
        records = read_fasta(path, record_factory=SequenceRecord.new)
        print(f"{path}: {len(records)} FASTA records")
        for record in records[:5]:
            print(f"  {record.label}: {len(record)} residues")

    elif suffix in FASTQ_SUFFIXES:
        entries = read_fastq(path)
        print(f"{path}: {len(entries)} FASTQ reads")
        for (label, sequence), quality in entries[:5]:
            print(f"  {label}: {len(sequence)} bp, mean Q {quality.mean():.1f}")

    elif suffix == ".dna":
        doc = read_snapgene(path)
        topology = "circular" if doc.circular else "linear"
        print(f"{path}: {doc.length} bp {topology}, valid={doc.valid}")
        if doc.features is not None:
            for feature in doc.features.findall("Feature"):
                print(f"  {feature.get('type')}: {feature.get('name')}")

    else:
        print(f"{path}: unrecognised file type", file=sys.stderr)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    for arg in sys.argv[1:]:
        summarise(Path(arg))


if __name__ == "__main__":
    main()
