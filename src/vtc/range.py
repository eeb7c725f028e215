"""
Framestamp Range
================

An interval between two framestamps at the same rate.

Out Types:
    exclusive: ``stamp_out`` is the boundary where the range ends, ``[in, out)``.
               The convention of Final Cut and Premiere. This is the default.
    inclusive: ``stamp_out`` is the last frame of the range, ``[in, out]``.
               The convention of Avid.

Both representations convert into each other without loss by moving
``stamp_out`` one frame. Interval math is always done on the exclusive form
and converted back afterwards.

Mixed Operands:
    Binary range operations whose operands differ in rate or out type need an
    explicit ``inherit_rate`` / ``inherit_out_type`` of ``"left"`` or
    ``"right"``. Left as ``False``, they raise MixedRateError or
    MixedOutTypeError.

Example:
    from vtc import Framestamp, Range, rates

    stamp_in = Framestamp.with_frames("01:00:00:00", rates.F23_98)
    clip = Range.new(stamp_in, "02:00:00:00")
    clip.duration()                     # <01:00:00:00 <23.98 NTSC>>
    "01:30:00:00" in clip               # True
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Union

from vtc.errors import (
    MixedOutTypeError,
    MixedRateError,
    NoOverlapError,
    RangeDurationError,
    RangeOrderError,
)
from vtc.framerate import Framerate
from vtc.framestamp import Framestamp, Inherit, InheritLike, parse_inherit, resolve_rate
from vtc.rational import Round
from vtc.result import Result, capture


logger = logging.getLogger(__name__)


class OutType(str, Enum):
    """Whether ``stamp_out`` is the range's boundary or its last frame."""

    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"


OutTypeLike = Union[OutType, str]


@dataclass(frozen=True, slots=True)
class Range:
    """
    Frame-accurate interval.

    Build with ``Range.new`` or ``Range.with_duration``. The dataclass
    constructor performs no validation.

    Attributes:
        stamp_in: First frame of the range
        stamp_out: End of the range, interpreted by ``out_type``
        out_type: Whether ``stamp_out`` is inclusive or exclusive
    """

    stamp_in: Framestamp
    stamp_out: Framestamp
    out_type: OutType = OutType.EXCLUSIVE

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def try_new(
        cls,
        stamp_in: Framestamp,
        stamp_out: Any,
        out_type: OutTypeLike = OutType.EXCLUSIVE,
    ) -> Result["Range"]:
        """
        Build a validated range, returning a Result.

        Args:
            stamp_in: Start of the range
            stamp_out: End of the range as a Framestamp, or any frames input
                read at ``stamp_in.rate``
            out_type: How ``stamp_out`` is interpreted

        Returns:
            Result holding the Range, MixedRateError, RangeOrderError or a
            FramestampParseError from reading ``stamp_out``.
        """
        def build() -> "Range":
            out = stamp_out
            if not isinstance(out, Framestamp):
                out = Framestamp.with_frames(out, stamp_in.rate)
            if out.rate != stamp_in.rate:
                raise MixedRateError("new", stamp_in.rate, out.rate)

            new_range = cls(stamp_in=stamp_in, stamp_out=out, out_type=OutType(out_type))
            if new_range.with_exclusive_out().stamp_out < stamp_in:
                raise RangeOrderError()
            return new_range

        return capture(build)

    @classmethod
    def new(cls, stamp_in: Framestamp, stamp_out: Any, out_type: OutTypeLike = OutType.EXCLUSIVE) -> "Range":
        """As ``try_new``, raising on failure."""
        return cls.try_new(stamp_in, stamp_out, out_type).unwrap()

    @classmethod
    def try_with_duration(
        cls,
        stamp_in: Framestamp,
        duration: Any,
        out_type: OutTypeLike = OutType.EXCLUSIVE,
    ) -> Result["Range"]:
        """
        Build a range starting at ``stamp_in`` and running for ``duration``.

        A zero ``duration`` gives a valid zero-length range.

        Returns:
            Result holding the Range, MixedRateError or RangeDurationError.
        """
        def build() -> "Range":
            length = duration
            if not isinstance(length, Framestamp):
                length = Framestamp.with_frames(length, stamp_in.rate)
            if length.rate != stamp_in.rate:
                raise MixedRateError("with_duration", stamp_in.rate, length.rate)
            if length.seconds < 0:
                raise RangeDurationError()

            exclusive = cls.new(stamp_in, stamp_in + length, OutType.EXCLUSIVE)
            return exclusive.with_out_type(out_type)

        return capture(build)

    @classmethod
    def with_duration(
        cls,
        stamp_in: Framestamp,
        duration: Any,
        out_type: OutTypeLike = OutType.EXCLUSIVE,
    ) -> "Range":
        return cls.try_with_duration(stamp_in, duration, out_type).unwrap()

    # =========================================================================
    # Out type
    # =========================================================================

    @property
    def rate(self) -> Framerate:
        return self.stamp_in.rate

    def with_out_type(self, out_type: OutTypeLike) -> "Range":
        out_type = OutType(out_type)
        if out_type is self.out_type:
            return self
        if out_type is OutType.INCLUSIVE:
            return replace(self, stamp_out=self.stamp_out - 1, out_type=out_type)
        return replace(self, stamp_out=self.stamp_out + 1, out_type=out_type)

    def with_inclusive_out(self) -> "Range":
        """Same frames, with ``stamp_out`` moved back to the last frame."""
        return self.with_out_type(OutType.INCLUSIVE)

    def with_exclusive_out(self) -> "Range":
        """Same frames, with ``stamp_out`` moved forward to the boundary."""
        return self.with_out_type(OutType.EXCLUSIVE)

    # =========================================================================
    # Inspection
    # =========================================================================

    def duration(self) -> Framestamp:
        """Length of the range. Inclusive ranges count their out frame."""
        exclusive = self.with_exclusive_out()
        return exclusive.stamp_out - exclusive.stamp_in

    def contains(self, stamp: Any) -> bool:
        """
        Whether ``stamp`` falls inside the range.

        ``stamp`` may be a Framestamp at any rate, or any frames input read at
        this range's rate.
        """
        if not isinstance(stamp, Framestamp):
            stamp = Framestamp.with_frames(stamp, self.rate)

        exclusive = self.with_exclusive_out()
        return exclusive.stamp_in <= stamp < exclusive.stamp_out

    def overlaps(self, other: "Range") -> bool:
        """
        Whether the two ranges share any frames.

        Exclusive ranges that only touch at a boundary do not overlap.
        """
        a = self.with_exclusive_out()
        b = other.with_exclusive_out()
        return not (a.stamp_in >= b.stamp_out or a.stamp_out <= b.stamp_in)

    # =========================================================================
    # Manipulation
    # =========================================================================

    def shift(self, by: Any, inherit_rate: InheritLike = False, round: Optional[Round] = None) -> "Range":
        """Move both ends of the range by ``by``, keeping the out type."""
        stamp_in = self.stamp_in.add(by, inherit_rate=inherit_rate, round=round)
        stamp_out = self.stamp_out.add(by, inherit_rate=inherit_rate, round=round)
        return Range.new(stamp_in, stamp_out, self.out_type)

    def smpte_wrap_tod(self) -> "Range":
        """
        Wrap ``stamp_in`` into a 24-hour time-of-day, keeping the duration.

        The out point may land past ``24:00:00:00`` when the duration needs it.

        Raises:
            InvalidSMPTERateError: If the rate is not NTSC or whole-frame.
        """
        return Range.with_duration(self.stamp_in.smpte_wrap_tod(), self.duration(), self.out_type)

    # =========================================================================
    # Set operations
    # =========================================================================

    def try_intersection(
        self,
        other: "Range",
        inherit_rate: InheritLike = False,
        inherit_out_type: InheritLike = False,
    ) -> Result["Range"]:
        """
        The range where both ranges overlap.

        Returns:
            Result holding the overlap, or a NoOverlapError.

        Raises:
            MixedRateError: If rates differ and ``inherit_rate`` is False.
            MixedOutTypeError: If out types differ and ``inherit_out_type`` is False.
        """
        return self._calc_overlap(other, "intersection", True, inherit_rate, inherit_out_type)

    def intersection(
        self,
        other: "Range",
        inherit_rate: InheritLike = False,
        inherit_out_type: InheritLike = False,
    ) -> "Range":
        return self.try_intersection(other, inherit_rate, inherit_out_type).unwrap()

    def intersection_or_zero(
        self,
        other: "Range",
        inherit_rate: InheritLike = False,
        inherit_out_type: InheritLike = False,
    ) -> "Range":
        """As ``intersection``, returning a zero-length range at 00:00:00:00 when there is no overlap."""
        result = self.try_intersection(other, inherit_rate, inherit_out_type)
        if result.is_ok:
            return result.value
        return self._zero_range(other, "intersection", inherit_rate, inherit_out_type)

    def try_separation(
        self,
        other: "Range",
        inherit_rate: InheritLike = False,
        inherit_out_type: InheritLike = False,
    ) -> Result["Range"]:
        """
        The gap between two ranges that do not overlap.

        Returns:
            Result holding the gap, or a NoOverlapError when the ranges overlap.
        """
        return self._calc_overlap(other, "separation", False, inherit_rate, inherit_out_type)

    def separation(
        self,
        other: "Range",
        inherit_rate: InheritLike = False,
        inherit_out_type: InheritLike = False,
    ) -> "Range":
        return self.try_separation(other, inherit_rate, inherit_out_type).unwrap()

    def separation_or_zero(
        self,
        other: "Range",
        inherit_rate: InheritLike = False,
        inherit_out_type: InheritLike = False,
    ) -> "Range":
        """As ``separation``, returning a zero-length range at 00:00:00:00 when the ranges overlap."""
        result = self.try_separation(other, inherit_rate, inherit_out_type)
        if result.is_ok:
            return result.value
        return self._zero_range(other, "separation", inherit_rate, inherit_out_type)

    def _calc_overlap(
        self,
        other: "Range",
        func_name: str,
        want_overlap: bool,
        inherit_rate: InheritLike,
        inherit_out_type: InheritLike,
    ) -> Result["Range"]:
        out_type = _mixed_out_type(self, other, parse_inherit(inherit_out_type), func_name)
        rate = resolve_rate(self.stamp_in, other.stamp_in, parse_inherit(inherit_rate), func_name)

        if self.overlaps(other) is not want_overlap:
            if want_overlap:
                return Result.err(NoOverlapError("ranges do not overlap"))
            return Result.err(NoOverlapError("ranges overlap, so have no separation"))

        a = self.with_exclusive_out()
        b = other.with_exclusive_out()

        stamp_in = Framestamp.with_seconds(max(a.stamp_in, b.stamp_in).seconds, rate)
        stamp_out = Framestamp.with_seconds(min(a.stamp_out, b.stamp_out).seconds, rate)
        stamp_in, stamp_out = sorted([stamp_in, stamp_out])

        exclusive = Range(stamp_in=stamp_in, stamp_out=stamp_out, out_type=OutType.EXCLUSIVE)
        return Result.ok(exclusive.with_out_type(out_type))

    def _zero_range(
        self,
        other: "Range",
        func_name: str,
        inherit_rate: InheritLike,
        inherit_out_type: InheritLike,
    ) -> "Range":
        out_type = _mixed_out_type(self, other, parse_inherit(inherit_out_type), func_name)
        rate = resolve_rate(self.stamp_in, other.stamp_in, parse_inherit(inherit_rate), func_name)

        zero = Framestamp.with_frames(0, rate)
        return Range.with_duration(zero, zero, out_type)

    # =========================================================================
    # Operators
    # =========================================================================

    def __contains__(self, stamp: Any) -> bool:
        return self.contains(stamp)

    def __str__(self) -> str:
        return (
            f"<{self.stamp_in.smpte_timecode()} - {self.stamp_out.smpte_timecode()}"
            f" :{self.out_type.value} {self.rate}>"
        )

    def __repr__(self) -> str:
        return str(self)


def _mixed_out_type(a: Range, b: Range, inherit: Optional[Inherit], func_name: str) -> OutType:
    if inherit is Inherit.LEFT:
        return a.out_type
    if inherit is Inherit.RIGHT:
        return b.out_type
    if a.out_type is not b.out_type:
        raise MixedOutTypeError(func_name, a.out_type, b.out_type)
    return a.out_type
