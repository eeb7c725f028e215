"""
Frames Sources
==============

Values that can be read as a frame count for ``Framestamp.with_frames``.

Accepted Inputs:
    - int: a frame count, used as-is
    - str: SMPTE timecode (``"01:00:00:00"``, ``"01:00:00;00"``, ``"86400"``),
      falling back to feet+frames (``"5400+00"``)
    - SMPTETimecodeStr: timecode only, with no feet+frames fallback
    - FeetAndFrames: film footage in any film format
    - any object implementing the FramesSource protocol

SMPTE Timecode Rules:
    - Leading sections may be omitted: ``"04"`` is ``00:00:00:04``
    - Either ``:`` or ``;`` may separate any section
    - Out-of-range fields roll over: ``"00:59:59:24"`` at 23.98 is ``01:00:00:00``
    - Drop-frame rates reject skipped frame numbers (``"00:01:00;01"``)
"""

import re
from dataclasses import dataclass
from typing import Any, Protocol, Union, runtime_checkable

from vtc import rational
from vtc.errors import UnrecognizedFormatError
from vtc.film_format import FeetAndFrames, FilmFormat
from vtc.framerate import Framerate
from vtc.rational import Round
from vtc.utils import drop_frame
from vtc.utils.consts import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from vtc.utils.parse import apply_regex, extract_time_sections, pop_time_section


_TIMECODE_RE = re.compile(
    r"^(?P<negative>-)?"
    r"((?P<section_1>[0-9]+)[:;])?"
    r"((?P<section_2>[0-9]+)[:;])?"
    r"((?P<section_3>[0-9]+)[:;])?"
    r"(?P<frames>[0-9]+)$"
)


@runtime_checkable
class FramesSource(Protocol):
    """
    Protocol for custom frame count inputs.

    Implement ``to_frames`` to make a type accepted by
    ``Framestamp.with_frames``.
    """

    def to_frames(self, rate: Framerate) -> int:
        """
        Return the value as a frame count at ``rate``.

        Raises:
            FramestampParseError: If the value cannot be read as frames.
        """
        ...


@dataclass(frozen=True, slots=True)
class Sections:
    """
    The individual fields of a SMPTE timecode.

    Fields are place values, not totals: ``minutes`` is the minutes added to
    ``hours``, and so on.

    Attributes:
        negative: Whether the timecode is less than zero
        hours: Hours place value
        minutes: Minutes place value
        seconds: Seconds place value
        frames: Frames place value
    """

    negative: bool
    hours: int
    minutes: int
    seconds: int
    frames: int

    @classmethod
    def from_frames(
        cls,
        frames: int,
        rate: Framerate,
        round: Round = Round.CLOSEST,
    ) -> "Sections":
        """Split a signed frame count at ``rate`` into timecode fields."""
        timebase = rate.timebase
        total_frames = abs(frames)
        total_frames += drop_frame.frame_num_adjustment(total_frames, rate)

        hours, remainder = rational.divrem(total_frames, timebase * SECONDS_PER_HOUR)
        minutes, remainder = rational.divrem(remainder, timebase * SECONDS_PER_MINUTE)
        seconds, remainder = rational.divrem(remainder, timebase)

        return cls(
            negative=frames < 0,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            frames=rational.round(remainder, round),
        )

    def to_frames(self, rate: Framerate) -> int:
        """
        Total frame count these fields name at ``rate``.

        Raises:
            BadDropFramesError: If the fields name a skipped drop-frame number.
        """
        adjustment = drop_frame.parse_adjustment(
            self.hours, self.minutes, self.seconds, self.frames, rate
        )
        seconds = self.seconds + self.minutes * SECONDS_PER_MINUTE + self.hours * SECONDS_PER_HOUR
        frames = rational.round(seconds * rate.timebase + self.frames + adjustment)
        return -frames if self.negative else frames

    def timecode(self, drop: bool = False) -> str:
        """Render as ``[-]HH:MM:SS:FF``, using ``;`` before frames for drop-frame."""
        sign = "-" if self.negative else ""
        frame_sep = ";" if drop else ":"
        return f"{sign}{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}{frame_sep}{self.frames:02d}"


@dataclass(frozen=True, slots=True)
class SMPTETimecodeStr:
    """
    SMPTE timecode string input.

    Plain strings passed to ``with_frames`` are tried as timecode first and
    feet+frames second. Wrap a string in this class to skip the fallback.
    """

    value: str

    def sections(self) -> Sections:
        """
        Parse into timecode fields without applying any rate.

        Raises:
            UnrecognizedFormatError: If the string is not timecode.
        """
        groups = apply_regex(_TIMECODE_RE, self.value.strip())

        sections = extract_time_sections(groups, 3)
        seconds, sections = pop_time_section(sections)
        minutes, sections = pop_time_section(sections)
        hours, _ = pop_time_section(sections)

        return Sections(
            negative=groups["negative"] == "-",
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            frames=int(groups["frames"]),
        )

    def to_frames(self, rate: Framerate) -> int:
        return self.sections().to_frames(rate)

    @classmethod
    def from_sections(cls, sections: Sections, rate: Framerate) -> "SMPTETimecodeStr":
        return cls(sections.timecode(drop=rate.is_drop))

    def __str__(self) -> str:
        return self.value


FramesInput = Union[int, str, FramesSource]


def to_frames(value: Any, rate: Framerate, film_format: FilmFormat = FilmFormat.FF35MM_4PERF) -> int:
    """
    Read any accepted frames input as a frame count at ``rate``.

    Args:
        value: Frame count, string, or FramesSource
        rate: Framerate the value is read at
        film_format: Film format for feet+frames strings

    Raises:
        FramestampParseError: If the value is not a recognized frames input.
    """
    match value:
        case bool():
            raise UnrecognizedFormatError(f"{value!r} is not a frame count")
        case int():
            return value
        case str():
            return _string_to_frames(value, rate, film_format)
        case FramesSource():
            return value.to_frames(rate)
        case _:
            raise UnrecognizedFormatError(f"{type(value).__name__} cannot be read as frames")


def _string_to_frames(value: str, rate: Framerate, film_format: FilmFormat) -> int:
    try:
        return SMPTETimecodeStr(value).to_frames(rate)
    except UnrecognizedFormatError:
        return FeetAndFrames.from_string(value, film_format).to_frames(rate)
