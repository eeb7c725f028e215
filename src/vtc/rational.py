"""
Rational Values
===============

Exact fraction helpers used throughout vtc.

Rational values are plain ``fractions.Fraction`` instances, which already hold
the invariants vtc depends on:
    - Always reduced to lowest terms
    - Denominator is always positive (sign lives on the numerator)
    - Zero is ``0/1``
    - Arbitrary precision: intermediate products never overflow

This module adds what Fraction does not provide: the rounding modes used for
whole-frame snapping, truncating div/rem, strict string parsing, imprecise
float intake, and the signed 64-bit bound checked at the codec boundary.

Rounding (Round):
    closest: nearest integer, ties away from zero (like SQL ROUND)
    floor:   toward negative infinity
    ceil:    toward positive infinity
    trunc:   toward zero
    off:     no rounding, the value passes through unchanged

Example:
    from vtc import rational
    from vtc.rational import Round

    x = rational.new(18018, 5)
    rational.round(x * rational.new(24000, 1001), Round.CLOSEST)  # 86400
"""

import math
import re
from decimal import Decimal, InvalidOperation
from enum import Enum
from fractions import Fraction
from typing import Tuple, Union

from vtc.errors import (
    ArithmeticOverflowError,
    DivideByZeroError,
    ImpreciseError,
    UnrecognizedFormatError,
)


Rational = Fraction
RationalLike = Union[Fraction, int]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_RATIO_RE = re.compile(r"^\s*(?P<num>[+-]?[0-9]+)\s*/\s*(?P<den>[+-]?[0-9]+)\s*$")
_DECIMAL_RE = re.compile(r"^\s*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)\s*$")


class Round(str, Enum):
    """Rounding strategies for snapping rational values to whole numbers."""

    CLOSEST = "closest"
    FLOOR = "floor"
    CEIL = "ceil"
    TRUNC = "trunc"
    OFF = "off"

    # Alias used when talking about framestamps
    NEAREST_FRAME = "closest"


def new(numerator: RationalLike, denominator: RationalLike = 1) -> Fraction:
    """
    Build a reduced rational value.

    Args:
        numerator: Integer or rational numerator
        denominator: Integer or rational denominator

    Returns:
        Reduced Fraction with a positive denominator.

    Raises:
        DivideByZeroError: If ``denominator`` is zero.
    """
    if denominator == 0:
        raise DivideByZeroError()
    return Fraction(numerator, denominator)


def div(a: RationalLike, b: RationalLike) -> Fraction:
    """Exact division, raising DivideByZeroError rather than ZeroDivisionError."""
    if b == 0:
        raise DivideByZeroError()
    return Fraction(a) / Fraction(b)


def is_whole(value: RationalLike) -> bool:
    return Fraction(value).denominator == 1


def round(value: RationalLike, method: Round = Round.CLOSEST) -> Union[int, Fraction]:
    """
    Round ``value`` with ``method``.

    Returns an int for every method except ``Round.OFF``, which returns the
    value unchanged.
    """
    value = Fraction(value)
    method = Round(method)

    if method is Round.CLOSEST:
        return _round_closest(value.numerator, value.denominator)
    if method is Round.FLOOR:
        return math.floor(value)
    if method is Round.CEIL:
        return math.ceil(value)
    if method is Round.TRUNC:
        return math.trunc(value)
    return value


def _round_closest(n: int, d: int) -> int:
    # Ties round away from zero, unlike Python's round() which rounds to even.
    if n < 0:
        return -_round_closest(-n, d)
    quotient, remainder = divmod(n, d)
    if remainder * 2 < d:
        return quotient
    return quotient + 1


def floor(value: RationalLike) -> int:
    return math.floor(Fraction(value))


def divrem(value: RationalLike, divisor: RationalLike) -> Tuple[int, Fraction]:
    """
    Truncating division.

    The quotient is rounded toward zero and the remainder carries the sign of
    ``value``, so ``quotient * divisor + remainder == value`` always holds.

    Raises:
        DivideByZeroError: If ``divisor`` is zero.
    """
    value = Fraction(value)
    quotient = math.trunc(div(value, divisor))
    remainder = value - Fraction(divisor) * quotient
    return quotient, remainder


def rem(value: RationalLike, divisor: RationalLike) -> Fraction:
    return divrem(value, divisor)[1]


def to_float(value: RationalLike) -> float:
    return float(Fraction(value))


def to_string(value: RationalLike) -> str:
    """Render as ``"N/D"``, always including the denominator."""
    value = Fraction(value)
    return f"{value.numerator}/{value.denominator}"


def from_float(value: float, allow_imprecise: bool = False) -> Fraction:
    """
    Convert a float to an exact rational.

    Floats are read through their shortest round-tripping repr, so ``0.1``
    becomes ``1/10`` rather than its binary expansion.

    Args:
        value: Float to convert
        allow_imprecise: Whether the call site accepts a non-whole float

    Raises:
        ImpreciseError: If ``value`` is not whole and imprecision is not allowed.
        UnrecognizedFormatError: If ``value`` is NaN or infinite.
    """
    if not math.isfinite(value):
        raise UnrecognizedFormatError(f"non-finite float {value!r} is not a rational value")
    if not allow_imprecise and not value.is_integer():
        raise ImpreciseError()
    return Fraction(repr(value))


def parse(text: str) -> Fraction:
    """
    Parse ``"N/D"``, ``"N"`` or decimal ``"N.D"`` strings exactly.

    Raises:
        UnrecognizedFormatError: If the string is not one of the above.
        DivideByZeroError: If a ratio string has a zero denominator.
    """
    if match := _RATIO_RE.match(text):
        return new(int(match.group("num")), int(match.group("den")))
    if _DECIMAL_RE.match(text):
        try:
            return Fraction(Decimal(text.strip()))
        except InvalidOperation as error:
            raise UnrecognizedFormatError(cause=error) from error
    raise UnrecognizedFormatError(f"{text!r} is not a rational value")


def is_decimal_string(text: str) -> bool:
    """Whether ``text`` is a decimal literal with a fractional part, like ``"23.98"``."""
    return bool(_DECIMAL_RE.match(text)) and "." in text


def ensure_int64(value: int, name: str = "value") -> int:
    """
    Check that ``value`` fits in a signed 64-bit integer.

    Raises:
        ArithmeticOverflowError: If it does not.
    """
    if not INT64_MIN <= value <= INT64_MAX:
        raise ArithmeticOverflowError(f"`{name}` ({value}) does not fit in a signed 64-bit integer")
    return value
