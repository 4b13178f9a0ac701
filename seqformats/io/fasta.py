"""
FASTA file format reader and writer.

A '>' character starts a header; everything up to the next line break is
header text. The lines that follow, up to the next '>' or the end of the
file, are sequence data and are concatenated with no separator, so these
two files hold the same record::

    >header1
    atgcatgca

    >header1
    atgc
    atgca

The sequence alphabet is not checked: DNA, RNA, amino acids or anything
else ASCII encoded is accepted.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from seqformats.exceptions import LengthMismatchError
from seqformats.io.records import (
    HeaderTransform,
    TEXT_ENCODING,
    RecordFactory,
    header_and_sequence,
    open_file,
    sequence_tuple,
)

_LOGGER = logging.getLogger(__name__)

_LINE_BREAKS = ("\n", "\r")


class _State(Enum):
    HEADER = 0
    SEQUENCE = 1


def _scan(content: str) -> List[Tuple[str, str]]:
    """Split FASTA text into (header, sequence) pairs in file order."""
    state = _State.HEADER
    buffer: List[str] = []
    header = ""
    opened = False
    pairs: List[Tuple[str, str]] = []

    for char in content:
        if state is _State.HEADER:
            if char == ">":
                # Repeated '>' glyphs inside a header are absorbed
                opened = True
            elif char in _LINE_BREAKS:
                header = "".join(buffer)
                buffer = []
                state = _State.SEQUENCE
            else:
                buffer.append(char)
        else:
            if char == ">":
                if opened or header or buffer:
                    pairs.append((header, "".join(buffer)))
                buffer = []
                opened = True
                state = _State.HEADER
            elif char in _LINE_BREAKS:
                continue
            else:
                buffer.append(char)

    if state is _State.SEQUENCE:
        tail = (header, "".join(buffer))
    else:
        tail = ("".join(buffer), "")
    if opened or tail[0] or tail[1]:
        pairs.append(tail)

    return pairs


def parse_fasta_string(
    content: Union[str, bytes],
    record_factory: RecordFactory = sequence_tuple,
    parse_header: Optional[HeaderTransform] = None
) -> List[Any]:
    """
    Parse FASTA format from a string.

    Args:
        content: FASTA formatted text (bytes are decoded as latin-1)
        record_factory: Callable ``(sequence, label)`` building each record
        parse_header: Callable applied to each header before it is passed
            to ``record_factory`` as the label. Defaults to identity.

    Returns:
        List of records in file order

    Example:
        >>> parse_fasta_string(">header1\\natgc\\natgca\\n")
        [('header1', 'atgcatgca')]

        Headers of the form ``key:value|key:value`` can be turned into
        mappings:

        >>> def parse_parts(header):
        ...     return dict(part.split(":") for part in header.split("|"))
        >>> parse_fasta_string(">genus:Escherichia|species:coli\\nat\\n",
        ...                    parse_header=parse_parts)
        [({'genus': 'Escherichia', 'species': 'coli'}, 'at')]
    """
    if isinstance(content, bytes):
        content = content.decode(TEXT_ENCODING)
    if parse_header is None:
        parse_header = _identity

    return [
        record_factory(sequence, label=parse_header(header))
        for header, sequence in _scan(content)
    ]


def _identity(header: str) -> str:
    return header


def read_fasta(
    filepath: Union[str, Path],
    record_factory: RecordFactory = sequence_tuple,
    parse_header: Optional[HeaderTransform] = None
) -> List[Any]:
    """
    Read sequences from a FASTA file.

    Supports both plain text and gzip-compressed files. An empty file
    yields an empty list.

    Args:
        filepath: Path to FASTA file (.fasta, .fa, .fna, or .gz)
        record_factory: Callable ``(sequence, label)`` building each record
        parse_header: Optional header transform, see :func:`parse_fasta_string`

    Returns:
        List of records in file order

    Raises:
        OSError: If the file cannot be read

    Example:
        >>> for label, sequence in read_fasta("sequences.fasta"):
        ...     print(f"{label}: {len(sequence)} bp")
    """
    with open_file(filepath, "rt") as f:
        content = f.read()
    records = parse_fasta_string(content, record_factory, parse_header)
    _LOGGER.debug("Read %d FASTA records from %s", len(records), filepath)
    return records


def _pairs_from_data(data: Any) -> List[Any]:
    """Normalise the accepted writer inputs to a list of entries."""
    if isinstance(data, Mapping):
        headers = list(data["headers"])
        sequences = list(data["sequences"])
        if len(headers) != len(sequences):
            raise LengthMismatchError(
                f"Got {len(headers)} headers but {len(sequences)} sequences"
            )
        return list(zip(headers, sequences))

    if isinstance(data, tuple) and len(data) == 2 and isinstance(data[1], str):
        return [data]
    if hasattr(data, "to_fasta") or (
        hasattr(data, "label") and hasattr(data, "sequence")
    ):
        return [data]

    items = list(data)
    if items and all(isinstance(item, str) for item in items):
        if len(items) % 2:
            raise LengthMismatchError(
                "Alternating header/sequence list has an unpaired header"
            )
        return list(zip(items[0::2], items[1::2]))
    return items


def _render(entry: Any) -> str:
    if hasattr(entry, "to_fasta"):
        line = entry.to_fasta()
        return line if line.endswith("\n") else line + "\n"
    header, sequence = header_and_sequence(entry)
    return f">{header}\n{sequence}\n"


def format_fasta(data: Any) -> str:
    """
    Render records as FASTA text.

    Accepted inputs:
    - a single ``(header, sequence)`` tuple
    - a flat list alternating header, sequence, header, sequence, ...
    - a list of ``(header, sequence)`` tuples
    - a list of objects with a ``to_fasta()`` method, or with ``label``
      and ``sequence`` attributes
    - a mapping with parallel ``headers`` and ``sequences`` lists

    Sequences are not line-wrapped unless the object's own ``to_fasta``
    does so.

    Raises:
        LengthMismatchError: If headers and sequences cannot be paired
    """
    return "".join(_render(entry) for entry in _pairs_from_data(data))


def write_fasta(
    records: Any,
    filepath: Union[str, Path],
    mode: str = "w"
) -> Path:
    """
    Write sequences to a FASTA file.

    The whole output is rendered first and written in a single call. See
    :func:`format_fasta` for the accepted ``records`` shapes.

    Args:
        records: Records to write
        filepath: Output file path; a .gz suffix writes gzip-compressed
        mode: "w" to truncate or "a" to append

    Returns:
        The path written to

    Example:
        >>> write_fasta(["header1", "atgc", "header2", "ggcc"], "output.fasta")
        PosixPath('output.fasta')
    """
    filepath = Path(filepath)
    output = format_fasta(records)
    with open_file(filepath, mode.rstrip("t") + "t") as f:
        f.write(output)
    _LOGGER.debug("Wrote %d bytes of FASTA to %s", len(output), filepath)
    return filepath
