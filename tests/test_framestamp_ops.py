"""
Framestamp Operation Tests
==========================

Tests for comparison, arithmetic, rebasing and time-of-day wrapping.
"""

from fractions import Fraction

import pytest

from vtc import rates
from vtc.errors import InvalidSMPTERateError, MixedRateError
from vtc.framerate import Framerate
from vtc.framestamp import Framestamp, Inherit, parse_inherit
from vtc.rational import Round


class TestComparison:
    """Tests for ordering and equality."""

    def test_same_rate(self, tc):
        assert tc("01:00:00:00") < tc("01:00:00:01")
        assert tc("01:00:00:00") <= tc("01:00:00:00")
        assert tc("02:00:00:00") > tc("01:00:00:00")
        assert tc("02:00:00:00") >= tc("02:00:00:00")
        assert tc("01:00:00:00") == tc("01:00:00:00")

    def test_compare_values(self, tc):
        assert tc("01:00:00:00").compare(tc("01:00:00:01")) == -1
        assert tc("01:00:00:00").compare(tc("01:00:00:00")) == 0
        assert tc("01:00:00:01").compare(tc("01:00:00:00")) == 1

    def test_cross_rate_compares_real_time(self, tc, f24):
        """01:00:00:00 at 23.98 runs longer than 01:00:00:00 at 24."""
        ntsc = tc("01:00:00:00")
        whole = tc("01:00:00:00", f24)
        assert ntsc > whole
        assert ntsc.compare(whole) == 1

    def test_equal_seconds_across_rates(self):
        """Stamps at the same real time are equal whatever their rate."""
        assert Framestamp.with_frames(24, rates.F24) == Framestamp.with_frames(48, rates.F48)

    def test_casts_frames_inputs(self, tc):
        """Non-framestamp operands are read at the framestamp's rate."""
        stamp = tc("01:00:00:00")
        assert stamp > 86399
        assert stamp == tc("01:00:00:00")
        assert stamp.eq("01:00:00:00")
        assert stamp.lt("01:00:00:01")
        assert stamp.gte(86400)
        assert Framestamp.lte("00:59:59:23", stamp)

    def test_eq_with_other_types(self, stamp_1h):
        assert (stamp_1h == 86400) is False
        assert stamp_1h != "01:00:00:00"

    def test_agrees_with_frame_order(self, f23_98):
        stamps = [Framestamp.with_frames(frames, f23_98) for frames in range(-50, 50, 9)]
        for a in stamps:
            for b in stamps:
                assert a.compare(b) == (a.frames() > b.frames()) - (a.frames() < b.frames())

    def test_sorted(self, tc):
        values = [tc("02:00:00:00"), tc("00:00:00:01"), tc("01:00:00:00")]
        assert [stamp.smpte_timecode() for stamp in sorted(values)] == [
            "00:00:00:01",
            "01:00:00:00",
            "02:00:00:00",
        ]

    def test_hashable(self, tc):
        assert len({tc("01:00:00:00"), tc("01:00:00:00"), tc("02:00:00:00")}) == 2


class TestAddSub:
    """Tests for addition and subtraction."""

    def test_add(self, tc):
        assert (tc("01:00:00:00") + tc("00:30:00:00")).smpte_timecode() == "01:30:00:00"

    def test_sub(self, tc):
        assert (tc("01:00:00:00") - tc("00:00:00:01")).smpte_timecode() == "00:59:59:23"

    def test_negative_result(self, tc):
        assert (tc("00:00:00:00") - tc("00:00:01:00")).smpte_timecode() == "-00:00:01:00"

    def test_add_frames_inputs(self, tc):
        stamp = tc("01:00:00:00")
        assert (stamp + 1).frames() == 86401
        assert (stamp + "00:00:01:00").smpte_timecode() == "01:00:01:00"
        assert (1 + stamp).frames() == 86401
        assert ("02:00:00:00" - stamp).smpte_timecode() == "01:00:00:00"

    def test_mixed_rate_raises(self, tc, f24):
        with pytest.raises(MixedRateError) as info:
            tc("01:00:00:00") + tc("01:00:00:00", f24)
        assert info.value.reason == "mixed_rate"
        assert info.value.func_name == "add"

    def test_mixed_rate_inherit_left(self, tc, f23_98, f24):
        result = tc("01:00:00:00").add(tc("00:00:01:00", f24), inherit_rate="left")
        assert result.rate == f23_98
        assert (result.seconds * f23_98.playback).denominator == 1

    def test_mixed_rate_inherit_right(self, tc, f24):
        result = tc("00:00:02:00").sub(tc("00:00:01:00", f24), inherit_rate=Inherit.RIGHT)
        assert result.rate == f24
        assert result.seconds == 1

    def test_mixed_rate_round(self, f24):
        """The snapped result follows the round option."""
        a = Framestamp.with_frames(0, f24)
        b = Framestamp.with_frames(1, rates.F48)
        assert a.add(b, inherit_rate="left").frames() == 1
        assert a.add(b, inherit_rate="left", round=Round.FLOOR).frames() == 0

    def test_bad_inherit_option(self, tc):
        with pytest.raises(ValueError):
            tc("01:00:00:00").add(tc("01:00:00:00"), inherit_rate="both")

    def test_parse_inherit(self):
        assert parse_inherit(False) is None
        assert parse_inherit(None) is None
        assert parse_inherit("left") is Inherit.LEFT

    def test_unsupported_operand(self, stamp_1h):
        with pytest.raises(TypeError):
            stamp_1h + 1.5


class TestScaling:
    """Tests for multiplication, division and remainders."""

    def test_mult(self, tc):
        assert (tc("01:00:00:00") * 2).smpte_timecode() == "02:00:00:00"
        assert (2 * tc("01:00:00:00")).smpte_timecode() == "02:00:00:00"
        assert tc("01:00:00:00").mult(Fraction(1, 2)).smpte_timecode() == "00:30:00:00"

    def test_mult_rounds_to_frame(self, tc):
        """Scaling 1 frame by 1.5 snaps to 2 frames, ties away from zero."""
        assert (tc("00:00:00:01") * 1.5).frames() == 2
        assert tc("00:00:00:01").mult(1.5, round=Round.FLOOR).frames() == 1

    def test_div_truncates_by_default(self, tc):
        assert (tc("00:00:00:03") / 2).frames() == 1
        assert tc("00:00:00:03").div(2, round=Round.CLOSEST).frames() == 2

    def test_div_by_zero(self, tc):
        with pytest.raises(ZeroDivisionError):
            tc("00:00:00:03") / 0

    def test_divrem(self, f23_98):
        quotient, remainder = divmod(Framestamp.with_frames(86401, f23_98), 2)
        assert quotient.frames() == 43200
        assert remainder.frames() == 1

    def test_divrem_negative(self, f23_98):
        """Quotient truncates toward zero; remainder keeps the sign."""
        quotient, remainder = Framestamp.with_frames(-86401, f23_98).divrem(2)
        assert quotient.frames() == -43200
        assert remainder.frames() == -1

    def test_floordiv_and_mod(self, f23_98):
        stamp = Framestamp.with_frames(100, f23_98)
        assert (stamp // 3).frames() == 33
        assert (stamp % 3).frames() == 1
        assert stamp.rem(7).frames() == 2

    def test_divrem_rejects_round_off(self, stamp_1h):
        with pytest.raises(ValueError):
            stamp_1h.divrem(2, round_frames=Round.OFF)

    def test_neg_and_abs(self, tc):
        stamp = tc("01:00:00:00")
        assert (-stamp).smpte_timecode() == "-01:00:00:00"
        assert abs(-stamp) == stamp
        assert +stamp is stamp
        assert stamp.neg().abs() == stamp


class TestRebase:
    """Tests for moving a frame count to a new rate."""

    def test_keeps_frame_count(self, stamp_1h):
        rebased = stamp_1h.rebase(rates.F47_95)
        assert rebased.frames() == 86400
        assert rebased.smpte_timecode() == "00:30:00:00"

    def test_same_rate_is_identity(self, stamp_1h, f23_98):
        assert stamp_1h.rebase(f23_98) is stamp_1h

    def test_round_trip(self):
        for rate in rates.ALL:
            for other in (rates.F24, rates.F29_97_DF, rates.F59_94_NDF):
                stamp = Framestamp.with_frames(12345, rate)
                assert stamp.rebase(other).rebase(rate) == stamp

    def test_drop_frame_limit(self):
        """Rebasing past 24 hours of drop-frame fails with a Result error."""
        stamp = Framestamp.with_frames(3_000_000, rates.F30)
        assert not stamp.try_rebase(rates.F29_97_DF).is_ok


class TestWrapTod:
    """Tests for wrapping into a 24-hour clock."""

    @pytest.mark.parametrize(
        "timecode, expected",
        [
            ("01:00:00:00", "01:00:00:00"),
            ("24:00:00:00", "00:00:00:00"),
            ("25:00:00:00", "01:00:00:00"),
            ("-01:00:00:00", "23:00:00:00"),
            ("49:00:00:01", "01:00:00:01"),
        ],
    )
    def test_wrap(self, f24, timecode, expected):
        stamp = Framestamp.with_frames(timecode, f24)
        assert stamp.smpte_wrap_tod().smpte_timecode() == expected

    def test_drop_frame(self, f29_97_df):
        stamp = Framestamp.with_frames("23:59:59;29", f29_97_df) + 1
        assert stamp.smpte_wrap_tod().smpte_timecode() == "00:00:00;00"

    def test_rejects_non_smpte_rate(self):
        rate = Framerate.new(Fraction(48, 5), ntsc=None)
        with pytest.raises(InvalidSMPTERateError):
            Framestamp.with_frames(10, rate).smpte_wrap_tod()
