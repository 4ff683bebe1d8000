"""Parser combinators for fixed-width MARC fields.

A parser is any callable taking a ``memoryview`` and returning a tuple of
``(rest, value)``, where ``rest`` is the unconsumed tail of the input. Parsers
signal failure by raising ``Incomplete`` (not enough input) or
``GenericParseError`` (the input does not match). Slicing a ``memoryview``
never copies, so a chain of parsers walks the caller's buffer in place.

Example:
    >>> digits = fold_many_m_n(3, 3, satisfy(is_ascii_digit), lambda: 0,
    ...                        lambda acc, b: acc * 10 + (b - 0x30))
    >>> rest, value = finish(digits, b"042abc")
    >>> value, bytes(rest)
    (42, b'abc')
"""

from typing import Any, Callable, Tuple, TypeVar, Union

from .errors import ErrorKind, GenericParseError, Incomplete, Needed

T = TypeVar("T")
A = TypeVar("A")

BytesLike = Union[bytes, bytearray, memoryview]
ParseResult = Tuple[memoryview, T]
Parser = Callable[[memoryview], ParseResult]


def is_ascii_digit(byte: int) -> bool:
    """Return True for the bytes ``b'0'`` through ``b'9'``."""
    return 0x30 <= byte <= 0x39


def satisfy(predicate: Callable[[int], bool]) -> Parser:
    """Match a single byte accepted by ``predicate``.

    Args:
        predicate: Called with the byte value (an int from 0 to 255).

    Returns:
        A parser yielding the matched byte value.
    """

    def parse(i: memoryview) -> ParseResult:
        if len(i) == 0:
            raise Incomplete(Needed(1))
        byte = i[0]
        if not predicate(byte):
            raise GenericParseError(ErrorKind.SATISFY)
        return i[1:], byte

    return parse


def fold_many_m_n(
    m: int,
    n: int,
    parser: Parser,
    init: Callable[[], A],
    fold: Callable[[A, Any], A],
) -> Parser:
    """Apply ``parser`` between ``m`` and ``n`` times, folding the results.

    Repetition stops after ``n`` matches, so input past the n-th match is
    never touched. A mismatch after at least ``m`` matches ends the
    repetition normally; a mismatch before that raises
    ``GenericParseError(ErrorKind.MANY_MN)`` chained to the inner error, with
    ``offset`` pointing at the offending byte. ``Incomplete`` from the inner
    parser propagates while fewer than ``m`` matches have been made.

    Args:
        m: Minimum number of matches.
        n: Maximum number of matches.
        parser: The repeated parser.
        init: Factory for the initial accumulator.
        fold: Combines the accumulator with each parsed value.

    Raises:
        ValueError: If the bounds are negative or ``m > n``.
    """
    if m < 0 or n < 0:
        raise ValueError(f"Repetition bounds must be non-negative, got {m}..{n}")
    if m > n:
        raise ValueError(f"Minimum repetitions {m} exceeds maximum {n}")

    def parse(i: memoryview) -> ParseResult:
        acc = init()
        rest = i
        for count in range(n):
            try:
                tail, value = parser(rest)
            except GenericParseError as e:
                if count < m:
                    offset = len(i) - len(rest) + e.offset
                    raise GenericParseError(ErrorKind.MANY_MN, offset) from e
                break
            except Incomplete:
                if count < m:
                    raise
                break
            if len(tail) == len(rest):
                # a parser that consumes nothing would repeat forever
                raise GenericParseError(ErrorKind.MANY_MN, len(i) - len(rest))
            acc = fold(acc, value)
            rest = tail
        return rest, acc

    return parse


def fixed_width(count: int, parser: Parser) -> Parser:
    """Require ``count`` bytes of input before running ``parser``.

    Short input raises ``Incomplete`` with the exact shortfall, before any
    byte is inspected.
    """

    def parse(i: memoryview) -> ParseResult:
        if len(i) < count:
            raise Incomplete(Needed(count - len(i)))
        return parser(i)

    return parse


def finish(parser: Parser, data: BytesLike) -> ParseResult:
    """Run ``parser`` over any bytes-like object.

    Raises:
        TypeError: If ``data`` does not support the buffer protocol or is
            not a byte buffer.
    """
    view = memoryview(data)
    if view.ndim != 1 or view.itemsize != 1:
        raise TypeError("Parser input must be a one-dimensional byte buffer")
    if view.format != "B":
        view = view.cast("B")
    return parser(view)


__all__ = [
    "BytesLike",
    "ParseResult",
    "Parser",
    "is_ascii_digit",
    "satisfy",
    "fold_many_m_n",
    "fixed_width",
    "finish",
]
