"""
Exception hierarchy for sequence file parsing and writing.

Operating-system failures (missing files, permissions) are never wrapped:
they propagate as the builtin OSError subclasses.
"""


class SeqFormatsError(Exception):
    """Base class for all errors raised by seqformats."""


class ParseError(SeqFormatsError, ValueError):
    """Raised when input data cannot be parsed."""


class DecodeError(ParseError):
    """Raised when a decimal quality token is not a valid 64-bit integer."""

    def __init__(self, token: str, position: int):
        self.token = token
        self.position = position
        super().__init__(
            f"Invalid decimal quality score {token!r} at position {position}"
        )


class MalformedPacketError(ParseError):
    """Raised when a SnapGene packet is truncated or too short."""

    def __init__(self, message: str, offset: int):
        self.offset = offset
        super().__init__(f"{message} (packet at byte offset {offset})")


class LengthMismatchError(SeqFormatsError, ValueError):
    """Raised when headers and sequences cannot be paired one-to-one."""


class UnknownEncodingError(SeqFormatsError, ValueError):
    """Raised for a quality encoding other than phred_33, phred_64 or decimal."""
