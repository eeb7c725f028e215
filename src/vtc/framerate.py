"""
Framerate
=========

The rate at which video frames are played back, in frames-per-second.

A Framerate pairs an exact ``playback`` speed with the NTSC convention it
follows. NTSC rates run at ``timebase * 1000/1001`` frames-per-second but are
counted in timecode at their whole ``timebase``; drop-frame NTSC rates also
skip frame numbers to stay in sync with wall-clock time.

Validation Rules:
    - ``playback`` must be positive
    - NTSC rates must equal ``round(playback) * 1000/1001`` unless coerced
    - Drop-frame rates must be a whole multiple of 30000/1001
    - Non-whole floats (and decimal strings) are rejected for non-NTSC rates,
      since ``23.98`` is ambiguous without NTSC framing

Example:
    from vtc import Framerate, Ntsc

    rate = Framerate.new(23.98, ntsc=Ntsc.NON_DROP, coerce_ntsc=True)
    print(rate.playback)  # 24000/1001
    print(rate)           # <23.98 NTSC>
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, List, Union

from vtc import rational
from vtc.errors import (
    BadDropRateError,
    CoerceRequiresNtscError,
    FramerateParseError,
    ImpreciseError,
    InvalidNtscError,
    InvalidNtscRateError,
    NonPositiveError,
    UnrecognizedFormatError,
    UnrecognizedFramerateError,
    VtcError,
)
from vtc.result import Result, capture


logger = logging.getLogger(__name__)

# Every drop-frame rate is a whole multiple of this.
DROP_FRAME_BASE = Fraction(30000, 1001)

NTSC_FACTOR = Fraction(1000, 1001)


class Ntsc(str, Enum):
    """
    Which, if any, NTSC convention a framerate follows.

    NONE: Not an NTSC rate
    NON_DROP: NTSC rate counted without skipping frame numbers
    DROP: NTSC rate that skips frame numbers every non-tenth minute
    """

    NONE = "none"
    NON_DROP = "non_drop"
    DROP = "drop"


class CoerceNtsc(str, Enum):
    """Conditional coercion mode for ``Framerate.new``."""

    IF_TRUNC = "if_trunc"


NtscLike = Union[Ntsc, str, None]
CoerceLike = Union[bool, CoerceNtsc, str]
RateInput = Union[Fraction, int, float, Decimal, str]


@dataclass(frozen=True, slots=True)
class Framerate:
    """
    Validated playback rate.

    Build with ``Framerate.new`` / ``Framerate.try_new`` rather than calling
    the dataclass constructor, which performs no validation.

    Attributes:
        playback: Exact real-world frames-per-second
        ntsc: NTSC convention of this rate
    """

    playback: Fraction
    ntsc: Ntsc = Ntsc.NONE

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def try_new(
        cls,
        rate: RateInput,
        ntsc: NtscLike = Ntsc.NON_DROP,
        coerce_ntsc: CoerceLike = False,
    ) -> Result["Framerate"]:
        """
        Build a validated framerate, returning a Result.

        Args:
            rate: Playback rate as a Fraction, int, float, Decimal or string
                (``"24"``, ``"23.98"``, ``"24/1"``, ``"24000/1001"``)
            ntsc: ``Ntsc`` member, ``"non_drop"``, ``"drop"`` or None
            coerce_ntsc: True to snap any input to the nearest NTSC rate,
                ``"if_trunc"`` to snap only inputs whose whole part matches
                that NTSC rate's whole part

        Returns:
            Result holding the Framerate or a FramerateParseError.
        """
        return capture(lambda: cls._build(rate, ntsc, coerce_ntsc))

    @classmethod
    def new(
        cls,
        rate: RateInput,
        ntsc: NtscLike = Ntsc.NON_DROP,
        coerce_ntsc: CoerceLike = False,
    ) -> "Framerate":
        """As ``try_new``, raising a FramerateParseError on failure."""
        return cls.try_new(rate, ntsc, coerce_ntsc).unwrap()

    @classmethod
    def _build(cls, rate: RateInput, ntsc: NtscLike, coerce_ntsc: CoerceLike) -> "Framerate":
        ntsc = _parse_ntsc(ntsc)
        coerce = _parse_coerce(coerce_ntsc)

        if coerce is not False and ntsc is Ntsc.NONE:
            raise CoerceRequiresNtscError()

        playback = _parse_rate(rate, ntsc)
        if playback <= 0:
            raise NonPositiveError()

        if ntsc is not Ntsc.NONE:
            playback, ntsc = _apply_ntsc(playback, ntsc, coerce)
            # Coercion can round small rates down to 0.
            if playback <= 0:
                raise NonPositiveError()

        if ntsc is Ntsc.DROP and not rational.is_whole(playback / DROP_FRAME_BASE):
            raise BadDropRateError()

        return cls(playback=playback, ntsc=ntsc)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def timebase(self) -> Fraction:
        """
        Rate at which timecode counts frames.

        Equal to ``playback`` for non-NTSC rates and to the rounded
        ``playback`` (24 for 23.98) for NTSC rates.
        """
        if self.ntsc is Ntsc.NONE:
            return self.playback
        return Fraction(rational.round(self.playback))

    @property
    def smpte_timebase(self) -> int:
        """Whole frames-per-second used for SMPTE frame fields."""
        return rational.round(self.timebase)

    @property
    def is_ntsc(self) -> bool:
        return self.ntsc is not Ntsc.NONE

    @property
    def is_drop(self) -> bool:
        return self.ntsc is Ntsc.DROP

    @property
    def is_smpte_valid(self) -> bool:
        """Whether SMPTE timecode is well defined: an NTSC or whole-frame rate."""
        return self.is_ntsc or rational.is_whole(self.playback)

    @property
    def is_drop_compatible(self) -> bool:
        """Whether this playback speed could be counted as drop-frame."""
        return self.is_ntsc and rational.is_whole(self.playback / DROP_FRAME_BASE)

    @property
    def ntsc_tags(self) -> List[str]:
        """Wire tags for this rate: ``["drop"]``, ``["non_drop"]`` or ``[]``."""
        if self.ntsc is Ntsc.NONE:
            return []
        return [self.ntsc.value]

    # =========================================================================
    # Text
    # =========================================================================

    def __str__(self) -> str:
        rate_str = str(round(float(self.playback), 2))

        if self.ntsc is Ntsc.NONE:
            return f"<{rate_str} fps>"
        if self.ntsc is Ntsc.DROP:
            return f"<{rate_str} NTSC DF>"
        if self.is_drop_compatible:
            return f"<{rate_str} NTSC NDF>"
        return f"<{rate_str} NTSC>"

    def __repr__(self) -> str:
        return str(self)


# =============================================================================
# Parsing helpers
# =============================================================================

def _parse_ntsc(value: Any) -> Ntsc:
    if value is None:
        return Ntsc.NONE
    if isinstance(value, Ntsc):
        return value
    if isinstance(value, str):
        try:
            return Ntsc(value)
        except ValueError as error:
            raise InvalidNtscError(cause=error) from error
    raise InvalidNtscError()


def _parse_coerce(value: Any) -> Union[bool, CoerceNtsc]:
    if isinstance(value, bool):
        return value
    if value == CoerceNtsc.IF_TRUNC.value:
        return CoerceNtsc.IF_TRUNC
    raise FramerateParseError(f"coerce_ntsc must be True, False or 'if_trunc', got {value!r}")


def _parse_rate(rate: Any, ntsc: Ntsc) -> Fraction:
    """Convert any accepted rate shape to an exact Fraction."""
    match rate:
        case bool():
            raise UnrecognizedFramerateError(f"{rate!r} is not a framerate")
        case Fraction() | int():
            return Fraction(rate)
        case float():
            try:
                return rational.from_float(rate, allow_imprecise=ntsc is not Ntsc.NONE)
            except UnrecognizedFormatError as error:
                raise UnrecognizedFramerateError(cause=error) from error
        case Decimal():
            return _parse_decimal(Fraction(rate), ntsc)
        case str():
            return _parse_rate_string(rate, ntsc)
        case _:
            raise UnrecognizedFramerateError(f"{type(rate).__name__} is not a framerate")


def _parse_rate_string(text: str, ntsc: Ntsc) -> Fraction:
    try:
        value = rational.parse(text)
    except VtcError as error:
        raise UnrecognizedFramerateError(cause=error) from error

    if rational.is_decimal_string(text):
        return _parse_decimal(value, ntsc)
    return value


def _parse_decimal(value: Fraction, ntsc: Ntsc) -> Fraction:
    # Decimal input gets the same treatment as a float.
    if ntsc is Ntsc.NONE and not rational.is_whole(value):
        raise ImpreciseError()
    return value


def _apply_ntsc(playback: Fraction, ntsc: Ntsc, coerce: Union[bool, CoerceNtsc]):
    candidate = rational.round(playback) * NTSC_FACTOR

    if coerce is CoerceNtsc.IF_TRUNC:
        if rational.round(playback, rational.Round.TRUNC) != rational.round(candidate, rational.Round.TRUNC):
            logger.debug(f"Rate {playback} does not truncate like {candidate}, keeping as non-NTSC")
            return playback, Ntsc.NONE
        coerce = True

    if coerce:
        if playback.denominator != 1001:
            logger.debug(f"Coercing rate {playback} to NTSC rate {candidate}")
            return candidate, ntsc
        return playback, ntsc

    if playback != candidate:
        raise InvalidNtscRateError()
    return playback, ntsc
