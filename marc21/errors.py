"""Errors raised while decoding a MARC leader.

All errors derive from ``ParseLeaderError``, which is itself a ``ValueError``
so callers that only care about "malformed binary data" can catch that.

- ``InvalidRecordLength``: a byte in the record length field is not an
  ASCII digit.
- ``Incomplete``: the input ended before the field was complete. ``needed``
  tells how many more bytes are required.
- ``GenericParseError``: a low-level matching failure, tagged with the
  ``ErrorKind`` of the combinator that failed.
"""

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Identifies which matching primitive failed."""

    SATISFY = "satisfy"
    MANY_MN = "many_m_n"

    def __str__(self) -> str:
        return self.value


class Needed:
    """Number of additional bytes required to continue parsing."""

    __slots__ = ("size",)

    def __init__(self, size: int):
        if size <= 0:
            raise ValueError(f"Needed size must be positive, got {size}")
        self.size = size

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Needed):
            return self.size == other.size
        if isinstance(other, int) and not isinstance(other, bool):
            return self.size == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.size)

    def __int__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"Needed({self.size})"


class ParseLeaderError(ValueError):
    """Base class for every leader decoding failure."""


class InvalidRecordLength(ParseLeaderError):
    """The record length field contains a byte that is not an ASCII digit."""

    def __init__(self, message: str = "invalid record length"):
        super().__init__(message)


class Incomplete(ParseLeaderError):
    """The input is too short to hold the field.

    Attributes:
        needed: How many more bytes must be buffered before retrying.
    """

    def __init__(self, needed: Needed):
        self.needed = needed
        noun = "byte" if needed.size == 1 else "bytes"
        super().__init__(f"incomplete leader, missing: {needed.size} {noun}")


class GenericParseError(ParseLeaderError):
    """A low-level combinator failure.

    Attributes:
        kind: The ``ErrorKind`` of the primitive that rejected the input.
        offset: Position in the parsed input where matching failed.
    """

    def __init__(self, kind: ErrorKind, offset: int = 0):
        self.kind = kind
        self.offset = offset
        super().__init__(f"parse error: {kind} at offset {offset}")


__all__ = [
    "ErrorKind",
    "Needed",
    "ParseLeaderError",
    "InvalidRecordLength",
    "Incomplete",
    "GenericParseError",
]
