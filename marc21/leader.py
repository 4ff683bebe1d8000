"""The MARC 21 record leader.

The leader is the fixed-length header of every ISO 2709 record. Only the
record length (positions 00-04) is decoded here: five right justified ASCII
digits, with unused positions set to zero.
"""

import logging
from typing import Any, Tuple

from .errors import GenericParseError, Incomplete, InvalidRecordLength
from .parser import (
    BytesLike,
    ParseResult,
    finish,
    fixed_width,
    fold_many_m_n,
    is_ascii_digit,
    satisfy,
)

logger = logging.getLogger(__name__)

RECORD_LENGTH_WIDTH = 5
MAX_RECORD_LENGTH = 99999

_record_len = fixed_width(
    RECORD_LENGTH_WIDTH,
    fold_many_m_n(
        RECORD_LENGTH_WIDTH,
        RECORD_LENGTH_WIDTH,
        satisfy(is_ascii_digit),
        lambda: 0,
        lambda acc, byte: acc * 10 + (byte - 0x30),
    ),
)


class Leader:
    """The leader contains information for the processing of the record.

    Leaders are immutable values. Decode one with ``Leader.from_bytes``:

        >>> leader = Leader.from_bytes(b"00827")
        >>> leader.record_length()
        827
    """

    __slots__ = ("_record_len",)

    def __init__(self, record_len: int):
        """Create a leader for a record of ``record_len`` bytes.

        Raises:
            TypeError: If ``record_len`` is not an int.
            ValueError: If ``record_len`` is outside 0..99999.
        """
        if not isinstance(record_len, int) or isinstance(record_len, bool):
            raise TypeError(f"Record length must be an int, got {type(record_len).__name__}")
        if not 0 <= record_len <= MAX_RECORD_LENGTH:
            raise ValueError(
                f"Record length must be between 0 and {MAX_RECORD_LENGTH}, got {record_len}"
            )
        object.__setattr__(self, "_record_len", record_len)

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "Leader":
        """Creates a leader from a byte buffer.

        Only the first five bytes are read. Anything after them is left for
        the caller to parse.

        Args:
            data: bytes, bytearray or memoryview starting at the leader.

        Returns:
            The decoded Leader.

        Raises:
            InvalidRecordLength: If one of the first five bytes is not a digit.
            Incomplete: If fewer than five bytes are available.
            TypeError: If ``data`` is not a byte buffer.

        Example:
            >>> Leader.from_bytes(b"00123nam a2200").record_length()
            123
        """
        _, leader = parse_leader(data)
        return leader

    def record_length(self) -> int:
        """Returns the length of the entire record, including the leader
        and the record terminator.

        The maximum length of a record is 99999 bytes/octets.
        """
        return self._record_len

    def to_bytes(self) -> bytes:
        """Encode the record length as a zero-padded five digit field."""
        return str(self._record_len).zfill(RECORD_LENGTH_WIDTH).encode("ascii")

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __reduce__(self):
        return (Leader, (self._record_len,))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Leader is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Leader is immutable")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Leader):
            return NotImplemented
        return self._record_len == other._record_len

    def __hash__(self) -> int:
        return hash((Leader, self._record_len))

    def __repr__(self) -> str:
        return f"Leader(record_len={self._record_len})"


def parse_record_len(i: BytesLike) -> ParseResult:
    """Parse the record length field.

    The record length is encoded as five right justified ASCII digits. An
    unused position is set to zero. The record length is between 0 and
    99999.

    Returns:
        ``(rest, record_len)`` where ``rest`` is a memoryview over the bytes
        following the field.

    Raises:
        Incomplete: Fewer than five bytes were given.
        GenericParseError: A byte in the field is not a digit.
    """
    return finish(_record_len, i)


def parse_leader(i: BytesLike) -> Tuple[memoryview, Leader]:
    """Parse a leader, returning it with the unconsumed input.

    Content mismatches are reported as ``InvalidRecordLength``; a short
    buffer is reported as ``Incomplete`` so streaming callers can read more
    and try again.
    """
    try:
        rest, record_len = parse_record_len(i)
    except GenericParseError as e:
        logger.debug("Rejected record length at offset %d: %s", e.offset, e)
        raise InvalidRecordLength() from e
    except Incomplete as e:
        logger.debug("Leader truncated: %s", e)
        raise
    return rest, Leader(record_len)


__all__ = [
    "Leader",
    "MAX_RECORD_LENGTH",
    "RECORD_LENGTH_WIDTH",
    "parse_leader",
    "parse_record_len",
]
