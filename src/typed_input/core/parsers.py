"""Strict text-to-value parsers for fixed-width integers and booleans.

Python's :func:`int` accepts surrounding whitespace and digit-group
underscores (``int(" 1_000 ")`` is ``1000``).  These parsers accept only
an optional sign followed by ASCII digits, and enforce the range of the
target width, so a line such as ``"  42  "`` is rejected rather than
silently cleaned up.

All rejections raise :class:`ValueError` subclasses, so they are caught
by :func:`~typed_input.core.reader.read_input_from` with its default
``parse_errors``.
"""

from __future__ import annotations

import enum
from collections.abc import Callable

_DIGITS = frozenset("0123456789")


# ---------------------------------------------------------------------------
# Integer errors
# ---------------------------------------------------------------------------

class IntErrorKind(enum.Enum):
    """Why an integer parse failed."""

    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"
    POS_OVERFLOW = "number too large to fit in target type"
    NEG_OVERFLOW = "number too small to fit in target type"


class ParseIntError(ValueError):
    """Raised when text is not a valid integer of the requested width."""

    def __init__(self, kind: IntErrorKind) -> None:
        super().__init__(kind.value)
        self.kind: IntErrorKind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseIntError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


# ---------------------------------------------------------------------------
# Integer parsers
# ---------------------------------------------------------------------------

def int_parser(bits: int, *, signed: bool) -> Callable[[str], int]:
    """Build a parser for a *bits*-wide integer.

    >>> parse_u8 = int_parser(8, signed=False)
    >>> parse_u8("+7")
    7
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")

    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    high_digits = len(str(high))
    low_digits = len(str(-low))

    def parse(text: str) -> int:
        if not text:
            raise ParseIntError(IntErrorKind.EMPTY)

        digits = text
        negative = False
        if text[0] in "+-":
            negative = text[0] == "-"
            digits = text[1:]
            if not digits:
                raise ParseIntError(IntErrorKind.INVALID_DIGIT)

        if not _DIGITS.issuperset(digits):
            raise ParseIntError(IntErrorKind.INVALID_DIGIT)

        significant = digits.lstrip("0")
        if negative and not signed and significant:
            raise ParseIntError(IntErrorKind.INVALID_DIGIT)
        # int() refuses strings past sys.get_int_max_str_digits().
        if len(significant) > (low_digits if negative else high_digits):
            raise ParseIntError(
                IntErrorKind.NEG_OVERFLOW if negative else IntErrorKind.POS_OVERFLOW
            )

        value = int(significant or "0")
        if negative:
            value = -value
        if value > high:
            raise ParseIntError(IntErrorKind.POS_OVERFLOW)
        if value < low:
            raise ParseIntError(IntErrorKind.NEG_OVERFLOW)
        return value

    parse.__name__ = f"parse_{'i' if signed else 'u'}{bits}"
    parse.__qualname__ = parse.__name__
    return parse


parse_u8 = int_parser(8, signed=False)
parse_u16 = int_parser(16, signed=False)
parse_u32 = int_parser(32, signed=False)
parse_u64 = int_parser(64, signed=False)
parse_i8 = int_parser(8, signed=True)
parse_i16 = int_parser(16, signed=True)
parse_i32 = int_parser(32, signed=True)
parse_i64 = int_parser(64, signed=True)


# ---------------------------------------------------------------------------
# Booleans
# ---------------------------------------------------------------------------

class ParseBoolError(ValueError):
    """Raised when text is neither ``"true"`` nor ``"false"``."""

    def __init__(self) -> None:
        super().__init__("provided string was not `true` or `false`")


def parse_bool(text: str) -> bool:
    """Accept exactly ``"true"`` or ``"false"`` (case-sensitive)."""
    if text == "true":
        return True
    if text == "false":
        return False
    raise ParseBoolError()
