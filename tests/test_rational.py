"""
Rational Tests
==============

Tests for exact fraction helpers, rounding modes and the int64 bound.
"""

import math
from fractions import Fraction

import pytest

from vtc import rational
from vtc.errors import (
    ArithmeticOverflowError,
    DivideByZeroError,
    EncodeError,
    ImpreciseError,
    UnrecognizedFormatError,
)
from vtc.rational import Round


class TestNew:
    """Tests for rational construction."""

    def test_reduces_and_normalizes_sign(self):
        """Denominator is positive and the value is fully reduced."""
        value = rational.new(2, -4)
        assert value == Fraction(-1, 2)
        assert value.denominator > 0

    def test_zero_is_canonical(self):
        """Zero is stored as 0/1."""
        value = rational.new(0, -7)
        assert (value.numerator, value.denominator) == (0, 1)

    def test_reduction_holds_over_a_grid(self):
        """Every constructed value is reduced with a positive denominator."""
        for numerator in range(-30, 31, 7):
            for denominator in (-1001, -24, -1, 1, 24, 1001):
                value = rational.new(numerator, denominator)
                assert value.denominator > 0
                assert math.gcd(abs(value.numerator), value.denominator) == 1

    def test_zero_denominator(self):
        """A zero denominator raises DivideByZeroError."""
        with pytest.raises(DivideByZeroError) as info:
            rational.new(1, 0)
        assert info.value.reason == "divide_by_zero"

    def test_divide_by_zero_is_zero_division(self):
        """DivideByZeroError can be caught as ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            rational.div(Fraction(1, 2), 0)


class TestRound:
    """Tests for the rounding modes."""

    @pytest.mark.parametrize(
        "value, method, expected",
        [
            (Fraction(5, 2), Round.CLOSEST, 3),
            (Fraction(-5, 2), Round.CLOSEST, -3),
            (Fraction(7, 3), Round.CLOSEST, 2),
            (Fraction(-5, 2), Round.FLOOR, -3),
            (Fraction(5, 2), Round.FLOOR, 2),
            (Fraction(5, 2), Round.CEIL, 3),
            (Fraction(-5, 2), Round.CEIL, -2),
            (Fraction(-5, 2), Round.TRUNC, -2),
            (Fraction(5, 2), Round.TRUNC, 2),
        ],
    )
    def test_modes(self, value, method, expected):
        """Each mode rounds to the expected integer."""
        assert rational.round(value, method) == expected

    def test_off_passes_value_through(self):
        """Round.OFF returns the value unchanged."""
        assert rational.round(Fraction(5, 2), Round.OFF) == Fraction(5, 2)

    def test_nearest_frame_alias(self):
        """NEAREST_FRAME is the same member as CLOSEST."""
        assert Round.NEAREST_FRAME is Round.CLOSEST

    def test_mode_from_string(self):
        """Modes can be passed by value."""
        assert rational.round(Fraction(5, 2), "floor") == 2

    def test_floor_goes_toward_negative_infinity(self):
        assert rational.floor(Fraction(-1, 3)) == -1


class TestDivrem:
    """Tests for truncating division."""

    def test_positive(self):
        assert rational.divrem(7, 2) == (3, Fraction(1))

    def test_negative_dividend(self):
        """Quotient truncates toward zero, remainder follows the dividend."""
        assert rational.divrem(-7, 2) == (-3, Fraction(-1))

    def test_identity(self):
        """quotient * divisor + remainder is the original value."""
        value, divisor = Fraction(-86401, 3), Fraction(7, 2)
        quotient, remainder = rational.divrem(value, divisor)
        assert quotient * divisor + remainder == value

    def test_rem(self):
        assert rational.rem(Fraction(9, 2), 2) == Fraction(1, 2)

    def test_zero_divisor(self):
        with pytest.raises(DivideByZeroError):
            rational.divrem(5, 0)


class TestConversions:
    """Tests for float and string conversion."""

    def test_from_float_uses_shortest_repr(self):
        """0.1 converts to exactly 1/10."""
        assert rational.from_float(0.1, allow_imprecise=True) == Fraction(1, 10)

    def test_from_float_whole(self):
        assert rational.from_float(24.0) == Fraction(24)

    def test_from_float_rejects_imprecise(self):
        """Non-whole floats need explicit permission."""
        with pytest.raises(ImpreciseError):
            rational.from_float(23.98)

    def test_from_float_rejects_non_finite(self):
        with pytest.raises(UnrecognizedFormatError):
            rational.from_float(float("inf"), allow_imprecise=True)

    def test_to_float(self):
        assert rational.to_float(Fraction(1, 4)) == 0.25

    def test_to_string(self):
        assert rational.to_string(Fraction(24000, 1001)) == "24000/1001"
        assert rational.to_string(Fraction(24)) == "24/1"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("24000/1001", Fraction(24000, 1001)),
            ("24", Fraction(24)),
            ("23.98", Fraction(2398, 100)),
            (" -3/6 ", Fraction(-1, 2)),
            (".5", Fraction(1, 2)),
        ],
    )
    def test_parse(self, text, expected):
        assert rational.parse(text) == expected

    @pytest.mark.parametrize("text", ["abc", "1/2/3", "", "1e5"])
    def test_parse_rejects(self, text):
        with pytest.raises(UnrecognizedFormatError):
            rational.parse(text)

    def test_parse_zero_denominator(self):
        with pytest.raises(DivideByZeroError):
            rational.parse("1/0")

    def test_is_decimal_string(self):
        assert rational.is_decimal_string("23.98")
        assert not rational.is_decimal_string("24")
        assert not rational.is_decimal_string("24000/1001")


class TestInt64:
    """Tests for the signed 64-bit bound."""

    def test_within_bound(self):
        assert rational.ensure_int64(rational.INT64_MAX) == rational.INT64_MAX
        assert rational.ensure_int64(rational.INT64_MIN) == rational.INT64_MIN

    def test_out_of_bound(self):
        """Values past the bound raise ArithmeticOverflowError, an EncodeError."""
        with pytest.raises(ArithmeticOverflowError) as info:
            rational.ensure_int64(2**63, "numerator")
        assert isinstance(info.value, EncodeError)
        assert "numerator" in str(info.value)
