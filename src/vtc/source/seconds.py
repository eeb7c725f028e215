"""
Seconds Sources
===============

Values that can be read as real-world seconds for ``Framestamp.with_seconds``.

Accepted Inputs:
    - Fraction / int: exact seconds
    - float: fuzzy seconds, converted to an exact value immediately
    - Decimal: exact decimal seconds
    - str: runtime (``"01:00:03.6"``, ``"3600.5"``) or a ratio (``"18018/5"``)
    - RuntimeStr: runtime only, with no ratio fallback
    - PremiereTicks: Adobe Premiere Pro tick count
    - any object implementing the SecondsSource protocol
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Protocol, runtime_checkable

from vtc import rational
from vtc.errors import UnrecognizedFormatError
from vtc.framerate import Framerate
from vtc.rational import Round
from vtc.utils.consts import PREMIERE_TICKS_PER_SECOND, SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from vtc.utils.parse import apply_regex, extract_time_sections, pop_time_section


_RUNTIME_RE = re.compile(
    r"^(?P<negative>-)?"
    r"((?P<section_1>[0-9]+)[:;])?"
    r"((?P<section_2>[0-9]+)[:;])?"
    r"(?P<seconds>[0-9]+(\.[0-9]+)?)$"
)


@runtime_checkable
class SecondsSource(Protocol):
    """
    Protocol for custom seconds inputs.

    Implement ``to_seconds`` to make a type accepted by
    ``Framestamp.with_seconds``.
    """

    def to_seconds(self, rate: Framerate) -> Fraction:
        ...


@dataclass(frozen=True, slots=True)
class RuntimeStr:
    """
    Runtime string: timecode-like, but with decimal seconds in place of frames.

    Attributes:
        value: Runtime such as ``"01:00:03.6"``
    """

    value: str

    def to_seconds(self, rate: Framerate) -> Fraction:
        """
        Parse the runtime into exact seconds.

        Raises:
            UnrecognizedFormatError: If the string is not a runtime.
        """
        groups = apply_regex(_RUNTIME_RE, self.value.strip())

        sections = extract_time_sections(groups, 2)
        minutes, sections = pop_time_section(sections)
        hours, _ = pop_time_section(sections)

        seconds = rational.parse(groups["seconds"])
        seconds += minutes * SECONDS_PER_MINUTE + hours * SECONDS_PER_HOUR
        return -seconds if groups["negative"] == "-" else seconds

    @classmethod
    def from_seconds(cls, seconds: Fraction, precision: int = 9, trim_zeros: bool = True) -> "RuntimeStr":
        """
        Render exact seconds as ``[-]HH:MM:SS.fff``.

        The fractional part is rounded to ``precision`` places. With
        ``trim_zeros``, trailing zeros are removed; ``.0`` is kept when
        nothing would remain.
        """
        if precision < 0:
            raise ValueError(f"`precision` must be zero or more, got {precision}")

        negative = seconds < 0
        scale = 10**precision

        # Rounding the total first lets a carry propagate into seconds and up.
        scaled = rational.round(abs(seconds) * scale, Round.CLOSEST)
        whole, fractional = divmod(scaled, scale)
        hours, whole = divmod(whole, SECONDS_PER_HOUR)
        minutes, whole = divmod(whole, SECONDS_PER_MINUTE)

        digits = f"{fractional:0{precision}d}" if precision else ""
        if trim_zeros:
            digits = digits.rstrip("0")
        digits = digits or "0"

        sign = "-" if negative else ""
        return cls(f"{sign}{hours:02d}:{minutes:02d}:{whole:02d}.{digits}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class PremiereTicks:
    """
    Adobe Premiere Pro tick count.

    Premiere divides every second into 254016000000 ticks regardless of
    framerate. Ticks show up in Premiere panel scripts and in the
    ``pproTicksIn`` / ``pproTicksOut`` fields of FCP7 XML it exports.

    Attributes:
        ticks: Elapsed ticks
    """

    ticks: int

    PER_SECOND = PREMIERE_TICKS_PER_SECOND

    def to_seconds(self, rate: Framerate) -> Fraction:
        return Fraction(self.ticks, PREMIERE_TICKS_PER_SECOND)

    @classmethod
    def from_seconds(cls, seconds: Fraction, round: Round = Round.CLOSEST) -> "PremiereTicks":
        return cls(rational.round(seconds * PREMIERE_TICKS_PER_SECOND, round))


def to_seconds(value: Any, rate: Framerate) -> Fraction:
    """
    Read any accepted seconds input as exact seconds.

    Raises:
        FramestampParseError: If the value is not a recognized seconds input.
    """
    match value:
        case bool():
            raise UnrecognizedFormatError(f"{value!r} is not a seconds value")
        case Fraction() | int():
            return Fraction(value)
        case float():
            return rational.from_float(value, allow_imprecise=True)
        case Decimal():
            if not value.is_finite():
                raise UnrecognizedFormatError(f"{value!r} is not a seconds value")
            return Fraction(value)
        case str():
            return _string_to_seconds(value, rate)
        case SecondsSource():
            return value.to_seconds(rate)
        case _:
            raise UnrecognizedFormatError(f"{type(value).__name__} cannot be read as seconds")


def _string_to_seconds(value: str, rate: Framerate) -> Fraction:
    try:
        return RuntimeStr(value).to_seconds(rate)
    except UnrecognizedFormatError:
        return rational.parse(value)
