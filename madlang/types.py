"""Runtime value helpers for Madlang.

Madlang has exactly two value kinds, Integer and Boolean, represented by
Python ``int`` and ``bool``. Since ``bool`` is a subclass of ``int`` in
Python, every kind check in the interpreter goes through the helpers in
this module rather than a bare ``isinstance(value, int)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import re


_INTEGER_TEXT = re.compile(r'[+-]?[0-9]+')


@dataclass(frozen=True)
class NoneVal:
    """Marker for "no value": statement results, void returns and
    variables declared without an initializer."""

    def __repr__(self) -> str:
        return 'None'


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def same_kind(a: Any, b: Any) -> bool:
    """True when both values are Integers or both are Booleans."""
    return (is_integer(a) and is_integer(b)) or (is_boolean(a) and is_boolean(b))


def type_name(value: Any) -> str:
    """Return the Madlang type name of a runtime value."""
    if is_boolean(value):
        return 'Boolean'
    if is_integer(value):
        return 'Integer'
    if isinstance(value, NoneVal):
        return 'None'
    return type(value).__name__


def to_string(value: Any) -> str:
    if is_boolean(value):
        return 'true' if value else 'false'
    return str(value)


def truncating_divide(a: int, b: int) -> int:
    """Integer division rounding toward zero.

    Python's ``//`` floors, so the quotient is computed on magnitudes and
    the sign applied afterwards.
    """
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def truncating_remainder(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend, pairing with
    `truncating_divide` so that ``(a / b) * b + a % b == a``."""
    return a - b * truncating_divide(a, b)


def parse_integer(text: str) -> int:
    """Parse an optionally signed decimal integer.

    Raises ValueError for anything else, including surrounding whitespace
    and digit separators that ``int()`` would otherwise accept.
    """
    if not _INTEGER_TEXT.fullmatch(text):
        raise ValueError(f'cannot parse int from {text!r}')
    return int(text)
