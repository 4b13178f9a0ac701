"""
Record construction and shared helpers for the sequence readers/writers.

Parsers never build records themselves. They hand every (sequence, label)
pair to a record factory: any callable accepting ``(sequence, label)``.
The default factory, :func:`sequence_tuple`, returns a plain
``(label, sequence)`` tuple.
"""

import gzip
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Tuple, TypeVar, Union

T = TypeVar("T")

RecordFactory = Callable[..., T]
HeaderTransform = Callable[[str], Any]

TEXT_ENCODING = "latin-1"


def sequence_tuple(sequence: str, label: Any = None) -> Tuple[Any, str]:
    """
    Build a ``(label, sequence)`` tuple.

    This is the default record factory for every reader.

    Example:
        >>> sequence_tuple("tagctag", label="header1")
        ('header1', 'tagctag')
    """
    return (label, sequence)


@dataclass(frozen=True)
class SequenceRecord:
    """
    An immutable labelled sequence.

    Attributes:
        label: Header text (or whatever the header transform produced)
        sequence: The raw sequence; the alphabet is not checked
    """
    label: Any
    sequence: str

    @classmethod
    def new(cls, sequence: str, label: Any = "") -> "SequenceRecord":
        """Record factory with the ``(sequence, label)`` calling convention."""
        return cls(label=label, sequence=sequence)

    def __len__(self) -> int:
        return len(self.sequence)

    def to_fasta(self) -> str:
        """Format as a FASTA entry; the sequence is not wrapped."""
        return f">{self.label}\n{self.sequence}\n"


def header_and_sequence(record: Any) -> Tuple[Any, str]:
    """
    Extract the header and sequence of a record for output.

    Accepts ``(header, sequence)`` tuples or lists, and objects exposing
    ``label`` and ``sequence`` attributes.

    Raises:
        TypeError: If the record has neither shape
    """
    if isinstance(record, (tuple, list)):
        if len(record) != 2:
            raise TypeError(
                f"Expected a (header, sequence) pair, got {len(record)} items"
            )
        return record[0], record[1]
    if hasattr(record, "label") and hasattr(record, "sequence"):
        return record.label, record.sequence
    raise TypeError(f"Cannot extract header and sequence from {type(record).__name__}")


def open_file(filepath: Union[str, Path], mode: str = "rt"):
    """
    Open a text file as latin-1, handling gzip compression if needed.

    Every byte maps to one character, so reading a file gives the same
    text as passing its raw bytes to the string parsers.
    """
    filepath = Path(filepath)
    if filepath.suffix == ".gz":
        return gzip.open(filepath, mode, encoding=TEXT_ENCODING)
    return open(filepath, mode, encoding=TEXT_ENCODING)
