"""Deferred numeric interpretation of number text.

Number values keep their source text. These helpers read that text as an
integer or a float on demand, always in a locale-invariant format: ASCII
digits, ``.`` as the only decimal separator, no grouping, no whitespace.
"""

import math
import re
from decimal import Decimal
from typing import Final

from ._constants import MAX_INT, MAX_LONG, MIN_INT, MIN_LONG
from ._exceptions import NumericParseError, RangeOverflowError

__all__ = [
    "numeric_key",
    "parse_double",
    "parse_integer",
    "parse_integer_lenient",
]

_INTEGER_PATTERN: Final = re.compile(r"[-+]?[0-9]+")
_FLOAT_PATTERN: Final = re.compile(
    r"[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?"
)

_WIDTHS: Final[dict[str, tuple[int, int]]] = {
    "int": (MIN_INT, MAX_INT),
    "long": (MIN_LONG, MAX_LONG),
}


# Longer digit strings cannot fit 64 bits; checked before int() so huge
# literals never reach the interpreter's digit limit.
_MAX_DIGITS: Final[int] = 19


def _check_range(value: int, name: str, text: str, form: str) -> int:
    low, high = _WIDTHS[form]
    if not low <= value <= high:
        raise RangeOverflowError(name, text, form)
    return value


def _to_int(text: str, name: str, form: str) -> int:
    if len(text.lstrip("+-").lstrip("0")) > _MAX_DIGITS:
        raise RangeOverflowError(name, text, form)
    return _check_range(int(text), name, text, form)


def parse_double(text: str, name: str) -> float:
    """Parse number text as a float.

    Magnitudes beyond the float range follow IEEE 754 and become infinite.

    Raises:
        NumericParseError: If the text is not a float literal.
    """
    if _FLOAT_PATTERN.fullmatch(text) is None:
        raise NumericParseError(name, text, "double")
    return float(text)


def parse_integer(text: str, name: str, form: str) -> int:
    """Parse number text strictly as an integer of the given width.

    Args:
        text: The stored number text.
        name: Name of the owning value, for error messages.
        form: ``"int"`` (32-bit) or ``"long"`` (64-bit).

    Raises:
        NumericParseError: If the text is not an integer literal.
        RangeOverflowError: If the integer does not fit ``form``.
    """
    if _INTEGER_PATTERN.fullmatch(text) is None:
        raise NumericParseError(name, text, form)
    return _to_int(text, name, form)


def parse_integer_lenient(text: str, name: str, form: str) -> int:
    """Parse number text as an integer, falling back to float truncation.

    ``"3.7"`` becomes ``3`` and ``"-3.7"`` becomes ``-3``.

    Raises:
        NumericParseError: If the text is neither an integer nor a float.
        RangeOverflowError: If the result does not fit ``form``.
    """
    if _INTEGER_PATTERN.fullmatch(text) is not None:
        return _to_int(text, name, form)
    if _FLOAT_PATTERN.fullmatch(text) is None:
        raise NumericParseError(name, text, form)
    value = float(text)
    if math.isinf(value):
        raise RangeOverflowError(name, text, form)
    return _check_range(math.trunc(value), name, text, form)


def numeric_key(text: str) -> "Decimal | str":
    """Return a key under which equal numbers compare equal.

    Float literals map to their exact Decimal value; anything else compares
    as plain text.
    """
    if _FLOAT_PATTERN.fullmatch(text) is None:
        return text
    return Decimal(text)
