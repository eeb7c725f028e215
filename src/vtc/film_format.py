"""
Film Formats
============

Physical film formats and the feet+frames notation built on them.

On physical film each foot holds a fixed number of frames, so a position can
be written as ``FEET+FRAMES`` (``5400+13``). Sound departments and telecine
reports still use this notation.

Formats:
    ff35mm_4perf: 35mm 4-perf, 16 frames per foot (the common Hollywood format)
    ff35mm_2perf: 35mm 2-perf ("Techniscope"), 32 frames per foot
    ff16mm:       16mm, 40 frames per physical foot, but edge coded every six
                  inches with 20 frames per code, so ``1+19`` is followed by ``2+00``

Example:
    from vtc.film_format import FeetAndFrames, FilmFormat

    ff = FeetAndFrames.from_string("5400+00", FilmFormat.FF16MM)
    ff.total_frames  # 108000
"""

import re
from dataclasses import dataclass
from enum import Enum

from vtc.errors import UnrecognizedFormatError


_FEET_AND_FRAMES_RE = re.compile(r"^(?P<negative>-)?(?P<feet>[0-9]+)\+(?P<frames>[0-9]+)$")


class FilmFormat(str, Enum):
    """Supported physical film formats."""

    FF35MM_4PERF = "ff35mm_4perf"
    FF35MM_2PERF = "ff35mm_2perf"
    FF16MM = "ff16mm"

    def perfs_per_foot(self, physical: bool = False) -> int:
        """
        Perforations in a foot of film.

        Returns the count in a logical foot, meaning each time ``FEET`` rolls
        over in ``FEET+FRAMES`` notation. 16mm has 40 perfs in a physical
        foot but rolls over every 20.
        """
        if self is FilmFormat.FF16MM:
            return 40 if physical else 20
        return 64

    @property
    def perfs_per_frame(self) -> int:
        if self is FilmFormat.FF35MM_4PERF:
            return 4
        if self is FilmFormat.FF35MM_2PERF:
            return 2
        return 1

    @property
    def frames_per_foot(self) -> int:
        """Frames in a logical foot of film."""
        return self.perfs_per_foot() // self.perfs_per_frame


@dataclass(frozen=True, slots=True)
class FeetAndFrames:
    """
    Film footage position.

    Both fields carry the sign of the position, so ``-1+08`` is
    ``feet=-1, frames=-8``.

    Attributes:
        feet: Whole feet of film run through the camera
        frames: Frames left over after ``feet``
        film_format: Film format the footage is counted in
    """

    feet: int
    frames: int
    film_format: FilmFormat = FilmFormat.FF35MM_4PERF

    @classmethod
    def from_string(
        cls,
        text: str,
        film_format: FilmFormat = FilmFormat.FF35MM_4PERF,
    ) -> "FeetAndFrames":
        """
        Parse ``[-]FEET+FRAMES``.

        Raises:
            UnrecognizedFormatError: If ``text`` is not feet+frames.
        """
        match = _FEET_AND_FRAMES_RE.match(text.strip())
        if match is None:
            raise UnrecognizedFormatError(f"{text!r} is not a feet+frames string")

        sign = -1 if match.group("negative") else 1
        return cls(
            feet=int(match.group("feet")) * sign,
            frames=int(match.group("frames")) * sign,
            film_format=FilmFormat(film_format),
        )

    @classmethod
    def from_frames(
        cls,
        frames: int,
        film_format: FilmFormat = FilmFormat.FF35MM_4PERF,
    ) -> "FeetAndFrames":
        """Split a signed frame count into feet and leftover frames."""
        film_format = FilmFormat(film_format)
        per_foot = film_format.frames_per_foot

        # Truncating division keeps both fields on the same side of zero.
        feet = abs(frames) // per_foot
        remainder = abs(frames) % per_foot
        if frames < 0:
            feet, remainder = -feet, -remainder
        return cls(feet=feet, frames=remainder, film_format=film_format)

    @property
    def total_frames(self) -> int:
        return self.feet * self.film_format.frames_per_foot + self.frames

    def to_frames(self, rate) -> int:
        """Frame count of this position. Feet+frames is independent of ``rate``."""
        return self.total_frames

    def __str__(self) -> str:
        sign = "-" if self.feet < 0 or self.frames < 0 else ""
        return f"{sign}{abs(self.feet)}+{abs(self.frames):02d}"
