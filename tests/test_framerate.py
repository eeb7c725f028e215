"""
Framerate Tests
===============

Tests for framerate parsing, NTSC validation and coercion, and rendering.
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from vtc import rates
from vtc.errors import (
    BadDropRateError,
    CoerceRequiresNtscError,
    FramerateParseError,
    ImpreciseError,
    InvalidNtscError,
    InvalidNtscRateError,
    NonPositiveError,
    UnrecognizedFramerateError,
)
from vtc.framerate import CoerceNtsc, Framerate, Ntsc


class TestParse:
    """Tests for accepted rate inputs."""

    @pytest.mark.parametrize(
        "rate, ntsc, coerce, playback",
        [
            (24, None, False, Fraction(24)),
            (24.0, None, False, Fraction(24)),
            ("24", None, False, Fraction(24)),
            ("24/1", None, False, Fraction(24)),
            (Fraction(48), None, False, Fraction(48)),
            (Decimal("60"), None, False, Fraction(60)),
            (Fraction(24000, 1001), Ntsc.NON_DROP, False, Fraction(24000, 1001)),
            ("24000/1001", "non_drop", False, Fraction(24000, 1001)),
            ("30000/1001", "drop", False, Fraction(30000, 1001)),
            (23.98, Ntsc.NON_DROP, True, Fraction(24000, 1001)),
            ("23.976", Ntsc.NON_DROP, True, Fraction(24000, 1001)),
            (29.97, Ntsc.DROP, True, Fraction(30000, 1001)),
            (Decimal("59.94"), Ntsc.DROP, True, Fraction(60000, 1001)),
            (24, Ntsc.NON_DROP, True, Fraction(24000, 1001)),
        ],
    )
    def test_valid(self, rate, ntsc, coerce, playback):
        """Each accepted shape produces the exact playback rate."""
        assert Framerate.new(rate, ntsc=ntsc, coerce_ntsc=coerce).playback == playback

    def test_default_ntsc_is_non_drop(self):
        rate = Framerate.new(Fraction(24000, 1001))
        assert rate.ntsc is Ntsc.NON_DROP

    def test_float_23_98_coerced(self):
        """A fuzzy float snaps to the canonical NTSC rate."""
        rate = Framerate.new(23.98, ntsc=Ntsc.NON_DROP, coerce_ntsc=True)
        assert rate.playback == Fraction(24000, 1001)
        assert rate == rates.F23_98


class TestValidation:
    """Tests for rejected rate inputs."""

    @pytest.mark.parametrize(
        "rate, ntsc, coerce, error",
        [
            (0, None, False, NonPositiveError),
            (-24, None, False, NonPositiveError),
            ("-24000/1001", Ntsc.NON_DROP, True, NonPositiveError),
            (0.4, Ntsc.NON_DROP, True, NonPositiveError),
            (0.4, Ntsc.NON_DROP, "if_trunc", NonPositiveError),
            (0.4, Ntsc.DROP, True, NonPositiveError),
            (24, Ntsc.NON_DROP, False, InvalidNtscRateError),
            ("23.98", Ntsc.NON_DROP, False, InvalidNtscRateError),
            (Fraction(24000, 1001), Ntsc.DROP, False, BadDropRateError),
            (23.98, Ntsc.DROP, True, BadDropRateError),
            (23.98, None, False, ImpreciseError),
            ("23.98", None, False, ImpreciseError),
            (Decimal("23.98"), None, False, ImpreciseError),
            (24, None, True, CoerceRequiresNtscError),
            (24, None, "if_trunc", CoerceRequiresNtscError),
            ("fast", None, False, UnrecognizedFramerateError),
            ("24/0", None, False, UnrecognizedFramerateError),
            (float("nan"), Ntsc.NON_DROP, True, UnrecognizedFramerateError),
            (True, None, False, UnrecognizedFramerateError),
            ([24], None, False, UnrecognizedFramerateError),
            (24, "ntsc", False, InvalidNtscError),
            (24, 5, False, InvalidNtscError),
        ],
    )
    def test_invalid(self, rate, ntsc, coerce, error):
        """Each invalid input raises its specific error."""
        with pytest.raises(error):
            Framerate.new(rate, ntsc=ntsc, coerce_ntsc=coerce)

    def test_parse_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            Framerate.new(-1, ntsc=None)

    def test_bad_coerce_option(self):
        with pytest.raises(FramerateParseError):
            Framerate.new(24, ntsc=Ntsc.NON_DROP, coerce_ntsc="always")

    def test_try_new_returns_error(self):
        """try_new reports failures without raising."""
        result = Framerate.try_new(24, ntsc=Ntsc.NON_DROP)
        assert not result.is_ok
        assert isinstance(result.error, InvalidNtscRateError)
        assert result.error.reason == "invalid_ntsc_rate"

    def test_try_new_returns_value(self):
        result = Framerate.try_new(24, ntsc=None)
        assert result.is_ok
        assert result.unwrap() == rates.F24


class TestIfTrunc:
    """Tests for conditional NTSC coercion."""

    def test_coerces_when_whole_part_matches(self):
        """23.976 truncates like 24000/1001, so it is coerced."""
        rate = Framerate.new(23.976, ntsc=Ntsc.NON_DROP, coerce_ntsc=CoerceNtsc.IF_TRUNC)
        assert rate.playback == Fraction(24000, 1001)
        assert rate.ntsc is Ntsc.NON_DROP

    def test_passes_through_when_whole_part_differs(self):
        """24 truncates to 24 but 24000/1001 truncates to 23, so 24 stays non-NTSC."""
        rate = Framerate.new(24, ntsc=Ntsc.NON_DROP, coerce_ntsc="if_trunc")
        assert rate.playback == Fraction(24)
        assert rate.ntsc is Ntsc.NONE


class TestProperties:
    """Tests for derived framerate values."""

    def test_timebase(self):
        assert rates.F23_98.timebase == Fraction(24)
        assert rates.F29_97_DF.timebase == Fraction(30)
        assert rates.F24.timebase == Fraction(24)

    def test_smpte_timebase(self):
        assert rates.F23_98.smpte_timebase == 24
        assert rates.F59_94_DF.smpte_timebase == 60
        assert rates.F48.smpte_timebase == 48

    def test_smpte_validity(self):
        assert rates.F23_98.is_smpte_valid
        assert rates.F24.is_smpte_valid
        assert not Framerate.new(Fraction(48, 5), ntsc=None).is_smpte_valid

    def test_ntsc_tags(self):
        assert rates.F24.ntsc_tags == []
        assert rates.F23_98.ntsc_tags == ["non_drop"]
        assert rates.F29_97_DF.ntsc_tags == ["drop"]

    def test_hashable(self):
        """Equal rates collapse in a set."""
        assert len({rates.F23_98, Framerate.new("24000/1001"), rates.F24}) == 2


class TestRender:
    """Tests for framerate text."""

    @pytest.mark.parametrize(
        "rate, expected",
        [
            (rates.F24, "<24.0 fps>"),
            (rates.F23_98, "<23.98 NTSC>"),
            (rates.F47_95, "<47.95 NTSC>"),
            (rates.F29_97_NDF, "<29.97 NTSC NDF>"),
            (rates.F29_97_DF, "<29.97 NTSC DF>"),
            (rates.F59_94_NDF, "<59.94 NTSC NDF>"),
            (rates.F59_94_DF, "<59.94 NTSC DF>"),
            (rates.F60, "<60.0 fps>"),
        ],
    )
    def test_str(self, rate, expected):
        assert str(rate) == expected
        assert repr(rate) == expected


class TestRates:
    """Tests for the common rate table."""

    def test_functions_match_constants(self):
        assert rates.f23_98() is rates.F23_98
        assert rates.f29_97_df() is rates.F29_97_DF
        assert rates.f60() is rates.F60

    def test_table_values(self):
        assert rates.F29_97_NDF.playback == rates.F29_97_DF.playback == Fraction(30000, 1001)
        assert rates.F59_94_DF.is_drop
        assert not rates.F59_94_NDF.is_drop
        assert len(rates.ALL) == 10
