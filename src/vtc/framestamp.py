"""
Framestamp
==========

An exact point in time, tied to the framerate it was recorded at.

A Framestamp stores real-world ``seconds`` as an exact fraction and always
lands on a whole frame of its ``rate``. Every other representation (frame
count, SMPTE timecode, runtime, feet+frames, Premiere ticks) is derived
from those two values.

Design Rules:
    - Immutable: every operation returns a new Framestamp
    - ``seconds * rate.playback`` is always a whole number
    - Equality and ordering use ``seconds`` only, so stamps at different
      rates compare by real-world time
    - Arithmetic between mixed rates needs an explicit ``inherit_rate``

Auto-casting:
    Binary operations accept a frames input (frame count, timecode string,
    feet+frames string) on either side and read it at the other operand's
    rate, so ``stamp + "00:00:01:00"`` works.

Example:
    from vtc import Framestamp, rates

    stamp = Framestamp.with_frames("01:00:00:00", rates.F23_98)
    stamp.frames()          # 86400
    stamp.seconds           # Fraction(18018, 5)
    stamp.runtime()         # "01:00:03.6"
    stamp + "00:00:00:01"   # <01:00:00:01 <23.98 NTSC>>
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, Optional, Tuple, Union

from vtc import config, rational
from vtc.errors import (
    DropFrameMaximumExceededError,
    InvalidSMPTERateError,
    MixedRateError,
    PartialFrameError,
)
from vtc.film_format import FeetAndFrames, FilmFormat
from vtc.framerate import Framerate
from vtc.rational import Round
from vtc.result import Result, capture
from vtc.source import frames as frames_source
from vtc.source import seconds as seconds_source
from vtc.source.frames import FramesSource, Sections, SMPTETimecodeStr
from vtc.source.seconds import PremiereTicks, RuntimeStr
from vtc.utils import drop_frame


logger = logging.getLogger(__name__)

Scalar = Union[Fraction, int, float, Decimal, str]


class Inherit(str, Enum):
    """Which operand a mixed binary operation takes its rate or out type from."""

    LEFT = "left"
    RIGHT = "right"


InheritLike = Union[Inherit, str, bool, None]


def parse_inherit(value: InheritLike) -> Optional[Inherit]:
    """Normalize an inherit option. ``False`` and ``None`` mean no inheritance."""
    if value is False or value is None:
        return None
    try:
        return Inherit(value)
    except ValueError as error:
        raise ValueError(f"inherit option must be 'left', 'right' or False, got {value!r}") from error


def _round_or_default(round: Optional[Round]) -> Round:
    if round is None:
        return config.settings.framestamp.default_round
    return Round(round)


def _ensure_round_enabled(round: Round, option: str = "round") -> Round:
    # Used where the result must be an integer.
    if round is Round.OFF:
        raise ValueError(f"`{option}` cannot be `off`")
    return round


@dataclass(frozen=True, slots=True, eq=False)
class Framestamp:
    """
    Exact, frame-aligned point in time.

    Build with the ``with_*`` constructors. The dataclass constructor does not
    check frame alignment.

    Attributes:
        seconds: Exact real-world seconds since 00:00:00:00
        rate: Framerate the stamp is counted at
    """

    seconds: Fraction
    rate: Framerate

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def try_with_seconds(
        cls,
        seconds: Any,
        rate: Framerate,
        round: Optional[Round] = None,
    ) -> Result["Framestamp"]:
        """
        Build a framestamp from real-world seconds, returning a Result.

        Args:
            seconds: Any seconds input: Fraction, int, float, Decimal, runtime
                or ratio string, RuntimeStr, PremiereTicks or SecondsSource
            rate: Framerate of the new stamp
            round: How to snap ``seconds`` to a whole frame. ``Round.OFF``
                rejects values that are not already frame-aligned.
                Defaults to ``framestamp.default_round`` from config.

        Returns:
            Result holding the Framestamp or a FramestampParseError.
        """
        return capture(lambda: cls._from_seconds(seconds, rate, _round_or_default(round)))

    @classmethod
    def with_seconds(cls, seconds: Any, rate: Framerate, round: Optional[Round] = None) -> "Framestamp":
        """As ``try_with_seconds``, raising on failure."""
        return cls.try_with_seconds(seconds, rate, round).unwrap()

    @classmethod
    def _from_seconds(cls, value: Any, rate: Framerate, round: Round) -> "Framestamp":
        seconds = seconds_source.to_seconds(value, rate)
        frames = seconds * rate.playback

        if round is Round.OFF:
            if not rational.is_whole(frames):
                raise PartialFrameError()
            return cls(seconds=seconds, rate=rate)

        return cls(seconds=rational.round(frames, round) / rate.playback, rate=rate)

    @classmethod
    def try_with_frames(
        cls,
        frames: Any,
        rate: Framerate,
        film_format: Optional[FilmFormat] = None,
    ) -> Result["Framestamp"]:
        """
        Build a framestamp from a frame count, returning a Result.

        Args:
            frames: Any frames input: int, timecode or feet+frames string,
                SMPTETimecodeStr, FeetAndFrames or FramesSource
            rate: Framerate of the new stamp
            film_format: Film format for feet+frames strings. Defaults to
                ``framestamp.film_format`` from config.

        Returns:
            Result holding the Framestamp or a FramestampParseError.
        """
        return capture(lambda: cls._from_frames(frames, rate, film_format))

    @classmethod
    def with_frames(cls, frames: Any, rate: Framerate, film_format: Optional[FilmFormat] = None) -> "Framestamp":
        """As ``try_with_frames``, raising on failure."""
        return cls.try_with_frames(frames, rate, film_format).unwrap()

    @classmethod
    def _from_frames(cls, value: Any, rate: Framerate, film_format: Optional[FilmFormat]) -> "Framestamp":
        if film_format is None:
            film_format = config.settings.framestamp.film_format

        frames = frames_source.to_frames(value, rate, film_format)
        if rate.is_drop and abs(frames) > drop_frame.max_frames(rate):
            raise DropFrameMaximumExceededError()

        return cls(seconds=Fraction(frames) / rate.playback, rate=rate)

    @classmethod
    def try_with_smpte_timecode(cls, timecode: str, rate: Framerate) -> Result["Framestamp"]:
        """Build from a SMPTE timecode string only, with no feet+frames fallback."""
        return cls.try_with_frames(SMPTETimecodeStr(timecode), rate)

    @classmethod
    def with_smpte_timecode(cls, timecode: str, rate: Framerate) -> "Framestamp":
        return cls.try_with_smpte_timecode(timecode, rate).unwrap()

    @classmethod
    def try_with_feet_and_frames(
        cls,
        feet_and_frames: Union[str, FeetAndFrames],
        rate: Framerate,
        film_format: Optional[FilmFormat] = None,
    ) -> Result["Framestamp"]:
        """Build from a feet+frames string or value."""
        def build() -> "Framestamp":
            value = feet_and_frames
            if isinstance(value, str):
                value = FeetAndFrames.from_string(value, film_format or config.settings.framestamp.film_format)
            return cls._from_frames(value, rate, film_format)

        return capture(build)

    @classmethod
    def with_feet_and_frames(
        cls,
        feet_and_frames: Union[str, FeetAndFrames],
        rate: Framerate,
        film_format: Optional[FilmFormat] = None,
    ) -> "Framestamp":
        return cls.try_with_feet_and_frames(feet_and_frames, rate, film_format).unwrap()

    @classmethod
    def try_with_runtime(cls, runtime: str, rate: Framerate, round: Optional[Round] = None) -> Result["Framestamp"]:
        """Build from a runtime string only, with no ratio fallback."""
        return cls.try_with_seconds(RuntimeStr(runtime), rate, round)

    @classmethod
    def with_runtime(cls, runtime: str, rate: Framerate, round: Optional[Round] = None) -> "Framestamp":
        return cls.try_with_runtime(runtime, rate, round).unwrap()

    @classmethod
    def try_with_premiere_ticks(
        cls,
        ticks: int,
        rate: Framerate,
        round: Optional[Round] = None,
    ) -> Result["Framestamp"]:
        """Build from an Adobe Premiere Pro tick count."""
        return cls.try_with_seconds(PremiereTicks(ticks), rate, round)

    @classmethod
    def with_premiere_ticks(cls, ticks: int, rate: Framerate, round: Optional[Round] = None) -> "Framestamp":
        return cls.try_with_premiere_ticks(ticks, rate, round).unwrap()

    # =========================================================================
    # Conversion
    # =========================================================================

    def frames(self, round: Optional[Round] = None) -> int:
        """
        Frame count since 00:00:00:00.

        This is the number an NLE shows as the frame number, like the
        ``<frame>`` field of FCP7 XML.
        """
        round = _round_or_default(round)
        frames = self.seconds * self.rate.playback
        if round is Round.OFF:
            return int(frames)
        return rational.round(frames, round)

    def smpte_timecode_sections(self, round: Optional[Round] = None) -> Sections:
        """The individual hours, minutes, seconds and frames fields."""
        round = _ensure_round_enabled(_round_or_default(round))
        return Sections.from_frames(self.frames(round), self.rate, round)

    def smpte_timecode(self, round: Optional[Round] = None) -> str:
        """
        SMPTE timecode, like ``01:00:00:00``.

        Drop-frame timecode uses ``;`` before the frames field. Frame numbers
        skipped by drop-frame are never produced.
        """
        sections = self.smpte_timecode_sections(round)
        return str(SMPTETimecodeStr.from_sections(sections, self.rate))

    def runtime(self, precision: Optional[int] = None, trim_zeros: bool = True) -> str:
        """
        True real-world runtime as ``HH:MM:SS.fff``.

        Runtime drifts from the timecode fields at NTSC rates:
        ``<01:00:00:00 <23.98 NTSC>>`` runs ``01:00:03.6``.

        Args:
            precision: Decimal places to round to. Defaults to
                ``framestamp.runtime_precision`` from config.
            trim_zeros: Whether to trim trailing zeros.
        """
        if precision is None:
            precision = config.settings.framestamp.runtime_precision
        return str(RuntimeStr.from_seconds(self.seconds, precision, trim_zeros))

    def premiere_ticks(self, round: Optional[Round] = None) -> int:
        """Elapsed Adobe Premiere Pro ticks (254016000000 per second)."""
        round = _ensure_round_enabled(_round_or_default(round))
        return PremiereTicks.from_seconds(self.seconds, round).ticks

    def feet_and_frames(
        self,
        film_format: Optional[FilmFormat] = None,
        round: Optional[Round] = None,
    ) -> FeetAndFrames:
        """Film footage this stamp would be if shot on ``film_format``."""
        round = _ensure_round_enabled(_round_or_default(round))
        if film_format is None:
            film_format = config.settings.framestamp.film_format
        return FeetAndFrames.from_frames(self.frames(round), film_format)

    # =========================================================================
    # Manipulation
    # =========================================================================

    def try_rebase(self, new_rate: Framerate) -> Result["Framestamp"]:
        """
        Reinterpret the same frame count at ``new_rate``.

        Seconds are recalculated as if the frames were played back at
        ``new_rate``: ``01:00:00:00`` at 23.98 becomes ``00:30:00:00`` at 47.95.
        """
        if new_rate == self.rate:
            return Result.ok(self)
        logger.debug(f"Rebasing {self} to {new_rate}")
        return Framestamp.try_with_frames(self.frames(), new_rate)

    def rebase(self, new_rate: Framerate) -> "Framestamp":
        return self.try_rebase(new_rate).unwrap()

    def smpte_wrap_tod(self, round: Optional[Round] = None) -> "Framestamp":
        """
        Wrap into a 24-hour time-of-day, ``[00:00:00:00, 24:00:00:00)``.

        Raises:
            InvalidSMPTERateError: If the rate is not NTSC or whole-frame.
        """
        if not self.rate.is_smpte_valid:
            raise InvalidSMPTERateError()

        frames_per_day = SMPTETimecodeStr("24:00:00:00").to_frames(self.rate)
        round = _ensure_round_enabled(_round_or_default(round))
        return Framestamp.with_frames(self.frames(round) % frames_per_day, self.rate)

    # =========================================================================
    # Comparison
    # =========================================================================

    def compare(self, other: Any) -> int:
        """
        Compare real-world time: -1, 0 or 1.

        Stamps at different rates compare by ``seconds``. A non-Framestamp
        operand is read as frames at the other operand's rate.
        """
        a, b = _cast_pair(self, other)
        if a.seconds < b.seconds:
            return -1
        if a.seconds > b.seconds:
            return 1
        return 0

    def eq(self, other: Any) -> bool:
        return Framestamp.compare(self, other) == 0

    def lt(self, other: Any) -> bool:
        return Framestamp.compare(self, other) < 0

    def lte(self, other: Any) -> bool:
        return Framestamp.compare(self, other) <= 0

    def gt(self, other: Any) -> bool:
        return Framestamp.compare(self, other) > 0

    def gte(self, other: Any) -> bool:
        return Framestamp.compare(self, other) >= 0

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def add(self, other: Any, inherit_rate: InheritLike = False, round: Optional[Round] = None) -> "Framestamp":
        """
        Add two stamps by their real-world seconds.

        Args:
            other: Framestamp, or a frames input read at this stamp's rate
            inherit_rate: ``"left"`` or ``"right"`` to pick the result rate
                when rates differ. ``False`` raises MixedRateError instead.
            round: How to snap a mixed-rate result to a whole frame

        Raises:
            MixedRateError: If rates differ and ``inherit_rate`` is False.
        """
        return _arithmetic(self, other, "add", lambda x, y: x + y, inherit_rate, round)

    def sub(self, other: Any, inherit_rate: InheritLike = False, round: Optional[Round] = None) -> "Framestamp":
        """Subtract ``other``; see ``add`` for the options."""
        return _arithmetic(self, other, "sub", lambda x, y: x - y, inherit_rate, round)

    def mult(self, scalar: Scalar, round: Optional[Round] = None) -> "Framestamp":
        """Scale by ``scalar``, snapping the result to a whole frame."""
        seconds = self.seconds * _to_scalar(scalar)
        return Framestamp.with_seconds(seconds, self.rate, round)

    def div(self, divisor: Scalar, round: Optional[Round] = None) -> "Framestamp":
        """
        Divide by ``divisor``, snapping the result to a whole frame.

        Rounds with ``framestamp.divide_round`` (``trunc`` by default) so
        ``div`` matches the quotient of ``divrem``.
        """
        if round is None:
            round = config.settings.framestamp.divide_round
        seconds = rational.div(self.seconds, _to_scalar(divisor))
        return Framestamp.with_seconds(seconds, self.rate, round)

    def divrem(
        self,
        divisor: Scalar,
        round_frames: Optional[Round] = None,
        round_remainder: Optional[Round] = None,
    ) -> Tuple["Framestamp", "Framestamp"]:
        """
        Divide the frame count, returning quotient and remainder stamps.

        The quotient is truncated toward zero; the remainder carries the sign
        of this stamp.

        Args:
            divisor: Value to divide the frame count by
            round_frames: How to round the frame count first
            round_remainder: How to round a non-whole remainder
        """
        round_frames = _ensure_round_enabled(_round_or_default(round_frames), "round_frames")
        round_remainder = _ensure_round_enabled(_round_or_default(round_remainder), "round_remainder")

        quotient, remainder = rational.divrem(self.frames(round_frames), _to_scalar(divisor))
        remainder = rational.round(remainder, round_remainder)
        return Framestamp.with_frames(quotient, self.rate), Framestamp.with_frames(remainder, self.rate)

    def rem(
        self,
        divisor: Scalar,
        round_frames: Optional[Round] = None,
        round_remainder: Optional[Round] = None,
    ) -> "Framestamp":
        """Remainder of ``divrem``."""
        return self.divrem(divisor, round_frames, round_remainder)[1]

    def neg(self) -> "Framestamp":
        return Framestamp(seconds=-self.seconds, rate=self.rate)

    def abs(self) -> "Framestamp":
        return Framestamp(seconds=abs(self.seconds), rate=self.rate)

    # =========================================================================
    # Operators
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Framestamp):
            return NotImplemented
        return self.seconds == other.seconds

    def __hash__(self) -> int:
        return hash(self.seconds)

    def __lt__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.gte(other)

    def __add__(self, other: Any) -> "Framestamp":
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "Framestamp":
        if not _is_operand(other):
            return NotImplemented
        return Framestamp.add(other, self)

    def __sub__(self, other: Any) -> "Framestamp":
        if not _is_operand(other):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: Any) -> "Framestamp":
        if not _is_operand(other):
            return NotImplemented
        return Framestamp.sub(other, self)

    def __mul__(self, scalar: Any) -> "Framestamp":
        if not _is_scalar(scalar):
            return NotImplemented
        return self.mult(scalar)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Any) -> "Framestamp":
        if not _is_scalar(divisor):
            return NotImplemented
        return self.div(divisor)

    def __floordiv__(self, divisor: Any) -> "Framestamp":
        if not _is_scalar(divisor):
            return NotImplemented
        return self.divrem(divisor)[0]

    def __mod__(self, divisor: Any) -> "Framestamp":
        if not _is_scalar(divisor):
            return NotImplemented
        return self.rem(divisor)

    def __divmod__(self, divisor: Any) -> Tuple["Framestamp", "Framestamp"]:
        if not _is_scalar(divisor):
            return NotImplemented
        return self.divrem(divisor)

    def __neg__(self) -> "Framestamp":
        return self.neg()

    def __pos__(self) -> "Framestamp":
        return self

    def __abs__(self) -> "Framestamp":
        return self.abs()

    def __str__(self) -> str:
        return f"<{self.smpte_timecode()} {self.rate}>"

    def __repr__(self) -> str:
        return str(self)


# =============================================================================
# Helpers
# =============================================================================

def _is_operand(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (Framestamp, int, str, FramesSource))


def _is_scalar(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (Fraction, int, float, Decimal))


def _to_scalar(value: Scalar) -> Fraction:
    match value:
        case Fraction() | int():
            return Fraction(value)
        case float():
            return rational.from_float(value, allow_imprecise=True)
        case Decimal():
            return Fraction(value)
        case str():
            return rational.parse(value)
        case _:
            raise TypeError(f"{type(value).__name__} is not a scalar")


def _cast_pair(a: Any, b: Any) -> Tuple[Framestamp, Framestamp]:
    """Read a non-Framestamp operand as frames at the other operand's rate."""
    if isinstance(a, Framestamp) and isinstance(b, Framestamp):
        return a, b
    if isinstance(a, Framestamp):
        return a, Framestamp.with_frames(b, a.rate)
    if isinstance(b, Framestamp):
        return Framestamp.with_frames(a, b.rate), b
    raise TypeError("at least one operand must be a Framestamp")


def resolve_rate(a: Any, b: Any, inherit: Optional[Inherit], func_name: str) -> Framerate:
    """
    Pick the result rate of a binary operation.

    A non-Framestamp operand takes the other operand's rate, so only two
    Framestamps at different rates need an ``inherit`` policy.

    Raises:
        MixedRateError: If both rates differ and ``inherit`` is None.
    """
    a_stamp = isinstance(a, Framestamp)
    b_stamp = isinstance(b, Framestamp)

    if a_stamp and b_stamp and a.rate != b.rate and inherit is None:
        raise MixedRateError(func_name, a.rate, b.rate)
    if a_stamp and (inherit is Inherit.LEFT or not b_stamp):
        return a.rate
    if b_stamp:
        return b.rate
    raise TypeError("at least one operand must be a Framestamp")


def _arithmetic(a: Any, b: Any, func_name: str, operation, inherit_rate: InheritLike, round: Optional[Round]):
    rate = resolve_rate(a, b, parse_inherit(inherit_rate), func_name)
    a, b = _cast_pair(a, b)
    return Framestamp.with_seconds(operation(a.seconds, b.seconds), rate, round)
