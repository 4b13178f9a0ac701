"""
FASTQ file format reader and writer.

FASTQ is a text-based format for storing nucleotide sequences
along with quality scores. Each record consists of:
1. Header line starting with '@'
2. One or more sequence lines
3. '+' line (anything after the '+' is ignored)
4. Quality line, terminated by a line break

Quality strings are decoded with Phred+33 unless another encoding is
requested. Sequence length and quality length are not cross-checked.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, List, NamedTuple, Tuple, Union

from seqformats.exceptions import ParseError
from seqformats.io.quality import QualityEncoding, QualityScore
from seqformats.io.records import (
    TEXT_ENCODING,
    RecordFactory,
    header_and_sequence,
    open_file,
    sequence_tuple,
)

_LOGGER = logging.getLogger(__name__)


class FastqEntry(NamedTuple):
    """A sequence record paired with its quality scores."""
    record: Any
    quality: QualityScore


class _State(Enum):
    HEADER = 0
    SEQUENCE = 1
    SCORE = 2


def _scan(content: str) -> List[Tuple[str, str, str]]:
    """Split trimmed FASTQ text into (header, sequence, score) triples."""
    state = _State.HEADER
    buffer: List[str] = []
    header = sequence = ""
    triples: List[Tuple[str, str, str]] = []

    i = 0
    length = len(content)
    while i < length:
        char = content[i]
        i += 1

        if state is _State.HEADER:
            if char == "@":
                continue
            if char in ("\n", "\r"):
                header = "".join(buffer)
                buffer = []
                state = _State.SEQUENCE
            else:
                buffer.append(char)

        elif state is _State.SEQUENCE:
            if char in ("\n", "\r"):
                continue
            if char == "+":
                sequence = "".join(buffer)
                buffer = []
                state = _State.SCORE
                # The separator line's description is ignored
                newline = content.find("\n", i)
                i = length if newline == -1 else newline + 1
            else:
                buffer.append(char)

        else:
            # Carriage returns are kept in the quality string
            if char == "\n":
                triples.append((header, sequence, "".join(buffer)))
                buffer = []
                state = _State.HEADER
            else:
                buffer.append(char)

    if state is _State.SCORE:
        triples.append((header, sequence, "".join(buffer)))
    elif state is _State.SEQUENCE or buffer:
        raise ParseError(
            f"Truncated FASTQ record {header or ''.join(buffer)!r}: "
            "missing '+' separator or quality line"
        )

    return triples


def parse_fastq_string(
    content: Union[str, bytes],
    record_factory: RecordFactory = sequence_tuple,
    quality_encoding: Union[str, QualityEncoding] = QualityEncoding.PHRED_33
) -> List[FastqEntry]:
    """
    Parse FASTQ format from a string.

    Leading and trailing whitespace is removed before scanning.

    Args:
        content: FASTQ formatted text (bytes are decoded as latin-1)
        record_factory: Callable ``(sequence, label)`` building each record
        quality_encoding: "phred_33" (default), "phred_64" or "decimal"

    Returns:
        List of ``FastqEntry(record, quality)`` in file order

    Raises:
        DecodeError: If a decimal quality token is not an integer
        ParseError: If the text ends in the middle of a record
    """
    if isinstance(content, bytes):
        content = content.decode(TEXT_ENCODING)
    encoding = QualityEncoding.coerce(quality_encoding)

    return [
        FastqEntry(
            record_factory(sequence, label=header),
            QualityScore.from_string(score, encoding, label=header),
        )
        for header, sequence, score in _scan(content.strip())
    ]


def read_fastq(
    filepath: Union[str, Path],
    record_factory: RecordFactory = sequence_tuple,
    quality_encoding: Union[str, QualityEncoding] = QualityEncoding.PHRED_33
) -> List[FastqEntry]:
    """
    Read records from a FASTQ file into memory.

    Supports both plain text and gzip-compressed files.

    Args:
        filepath: Path to FASTQ file (.fastq, .fq, or .gz)
        record_factory: Callable ``(sequence, label)`` building each record
        quality_encoding: "phred_33" (default), "phred_64" or "decimal"

    Returns:
        List of ``FastqEntry(record, quality)`` in file order

    Example:
        >>> for (label, sequence), quality in read_fastq("reads.fastq.gz"):
        ...     if quality.mean() > 20:
        ...         print(label)
    """
    with open_file(filepath, "rt") as f:
        content = f.read()
    entries = parse_fastq_string(content, record_factory, quality_encoding)
    _LOGGER.debug("Read %d FASTQ records from %s", len(entries), filepath)
    return entries


def format_fastq(entries: Iterable[Tuple[Any, Union[QualityScore, str]]]) -> str:
    """Render ``(record, quality)`` pairs as FASTQ text."""
    lines = []
    for record, quality in entries:
        label, sequence = header_and_sequence(record)
        if isinstance(quality, QualityScore):
            quality = quality.scoring_characters
        lines.append(f"@{label}\n{sequence}\n+\n{quality}\n")
    return "".join(lines)


def write_fastq(
    entries: Iterable[Tuple[Any, Union[QualityScore, str]]],
    filepath: Union[str, Path],
    mode: str = "w"
) -> Path:
    """
    Write records to a FASTQ file.

    Args:
        entries: ``(record, quality)`` pairs, as returned by :func:`read_fastq`
        filepath: Output file path; a .gz suffix writes gzip-compressed
        mode: "w" to truncate or "a" to append

    Returns:
        The path written to
    """
    filepath = Path(filepath)
    output = format_fastq(entries)
    with open_file(filepath, mode.rstrip("t") + "t") as f:
        f.write(output)
    _LOGGER.debug("Wrote %d bytes of FASTQ to %s", len(output), filepath)
    return filepath
