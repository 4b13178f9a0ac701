"""
Quality score decoding for FASTQ data.

Three encodings are understood:
- phred_33: ASCII offset 33 (Sanger / Illumina 1.8+)
- phred_64: ASCII offset 64 (Illumina 1.3-1.7)
- decimal: space separated integers

Decoded scores are passed through unchanged; no clamping or range
validation is performed.
"""

import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Union

import numpy as np

from seqformats.exceptions import DecodeError, UnknownEncodingError

# Phred quality score encoding offsets
PHRED33_OFFSET = 33  # Sanger/Illumina 1.8+
PHRED64_OFFSET = 64  # Illumina 1.3-1.7

_DECIMAL_TOKEN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -2 ** 63
_INT64_MAX = 2 ** 63 - 1


class QualityEncoding(str, Enum):
    PHRED_33 = "phred_33"
    PHRED_64 = "phred_64"
    DECIMAL = "decimal"

    @classmethod
    def coerce(cls, value: Union[str, "QualityEncoding"]) -> "QualityEncoding":
        """Accept either an enum member or its string value."""
        try:
            return cls(value)
        except ValueError:
            raise UnknownEncodingError(
                f"Unknown quality encoding {value!r}; expected one of "
                + ", ".join(member.value for member in cls)
            ) from None


_OFFSETS = {
    QualityEncoding.PHRED_33: PHRED33_OFFSET,
    QualityEncoding.PHRED_64: PHRED64_OFFSET,
}


def decode_quality(
    raw: str,
    encoding: Union[str, QualityEncoding] = QualityEncoding.PHRED_33
) -> np.ndarray:
    """
    Convert a raw quality string to integer scores.

    Args:
        raw: Quality string as it appears in the file
        encoding: One of "phred_33", "phred_64" or "decimal"

    Returns:
        numpy array of int64 scores. For character encodings there is one
        score per character; for decimal there is one per token.

    Raises:
        DecodeError: If a decimal token is not an integer or overflows int64
        UnknownEncodingError: If the encoding is not recognised

    Example:
        >>> decode_quality("I").tolist()
        [40]
        >>> decode_quality("10 20 30", "decimal").tolist()
        [10, 20, 30]
    """
    encoding = QualityEncoding.coerce(encoding)

    if encoding is QualityEncoding.DECIMAL:
        if raw == "":
            return np.zeros(0, dtype=np.int64)
        scores = []
        for position, token in enumerate(raw.split(" ")):
            if not _DECIMAL_TOKEN.fullmatch(token):
                raise DecodeError(token, position)
            score = int(token)
            if not _INT64_MIN <= score <= _INT64_MAX:
                raise DecodeError(token, position)
            scores.append(score)
        return np.array(scores, dtype=np.int64)

    offset = _OFFSETS[encoding]
    codes = np.fromiter((ord(c) for c in raw), dtype=np.int64, count=len(raw))
    return codes - offset


def encode_quality(
    scores: Iterable[int],
    encoding: Union[str, QualityEncoding] = QualityEncoding.PHRED_33
) -> str:
    """
    Convert integer scores back to a quality string.

    The inverse of :func:`decode_quality`.

    Raises:
        ValueError: If a Phred score has no character at the encoding's offset
    """
    encoding = QualityEncoding.coerce(encoding)
    if encoding is QualityEncoding.DECIMAL:
        return " ".join(str(int(score)) for score in scores)
    offset = _OFFSETS[encoding]
    chars = []
    for position, score in enumerate(scores):
        code = int(score) + offset
        if not 0 <= code <= sys.maxunicode:
            raise ValueError(
                f"Score {int(score)} at position {position} cannot be encoded "
                f"as {encoding.value}; scores must be at least {-offset}"
            )
        chars.append(chr(code))
    return "".join(chars)


@dataclass(frozen=True)
class QualityScore:
    """
    Decoded quality scores of one FASTQ record.

    Attributes:
        scoring_characters: The raw quality string
        scores: Read-only int64 array of decoded scores
        label: Header of the record the scores belong to
        encoding: Encoding used to decode ``scoring_characters``
    """
    scoring_characters: str
    scores: np.ndarray = field(compare=False, repr=False)
    label: str = ""
    encoding: QualityEncoding = QualityEncoding.PHRED_33

    @classmethod
    def from_string(
        cls,
        raw: str,
        encoding: Union[str, QualityEncoding] = QualityEncoding.PHRED_33,
        label: str = ""
    ) -> "QualityScore":
        """Decode ``raw`` and wrap the result."""
        encoding = QualityEncoding.coerce(encoding)
        scores = decode_quality(raw, encoding)
        scores.flags.writeable = False
        return cls(
            scoring_characters=raw,
            scores=scores,
            label=label,
            encoding=encoding,
        )

    def __len__(self) -> int:
        return len(self.scores)

    def mean(self) -> float:
        """Mean quality score (nan for an empty record)."""
        if len(self.scores) == 0:
            return float("nan")
        return float(np.mean(self.scores))

    def error_probabilities(self) -> np.ndarray:
        """
        Convert quality scores to error probabilities.

        P(error) = 10^(-Q/10)
        """
        return np.power(10.0, -self.scores / 10.0)
