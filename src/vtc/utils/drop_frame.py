"""
Drop-Frame Math
===============

Skip-frame bookkeeping for NTSC drop-frame timecode.

Drop-frame timecode skips frame numbers ``00`` and ``01`` (``00`` - ``03`` at
59.94) at the start of every minute not divisible by ten. No frames of video
are dropped; only the labels are skipped, so that timecode stays in sync with
wall-clock time at 29.97 frames-per-second.

All values are computed from the exact playback rate, so no float rounding
is involved.

Further Reading:
    https://www.davidheidelberger.com/2010/06/10/drop-frame-timecode/
"""

from fractions import Fraction

from vtc import rational
from vtc.errors import BadDropFramesError
from vtc.utils.consts import HOURS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE


_DROP_FACTOR = Fraction("0.066666")


def dropped_per_minute(rate) -> int:
    """Frame numbers skipped each non-tenth minute: 2 at 29.97, 4 at 59.94."""
    return rational.round(rate.timebase * _DROP_FACTOR)


def parse_adjustment(hours: int, minutes: int, seconds: int, frames: int, rate) -> int:
    """
    Frame count correction for a parsed drop-frame timecode.

    Returns 0 for rates that are not drop-frame.

    Raises:
        BadDropFramesError: If the frames field names a skipped frame number.
    """
    if not rate.is_drop:
        return 0

    drop = dropped_per_minute(rate)
    tenth_minute = minutes % 10 == 0
    if frames < drop and seconds == 0 and not tenth_minute:
        raise BadDropFramesError()

    total_minutes = 60 * hours + minutes
    return -(drop * (total_minutes - total_minutes // 10))


def frame_num_adjustment(frame_number: int, rate) -> int:
    """
    Skipped frame numbers to add to ``frame_number`` before splitting it
    into timecode fields. Returns 0 for rates that are not drop-frame.
    """
    if not rate.is_drop:
        return 0

    dropped = dropped_per_minute(rate)
    frames_per_10_min = rational.round(rate.playback * SECONDS_PER_MINUTE * 10)
    frames_per_min = rational.round(rate.playback) * SECONDS_PER_MINUTE - dropped

    tens_of_mins, remaining = divmod(frame_number, frames_per_10_min)

    adjustment = dropped * 9 * tens_of_mins
    if remaining > dropped:
        adjustment += dropped * ((remaining - dropped) // frames_per_min)
    return adjustment


def max_frames(rate) -> int:
    """Frames in 24 hours of drop-frame timecode: 2589408 at 29.97."""
    frames_per_hour = rational.round(rate.playback * SECONDS_PER_HOUR)
    return frames_per_hour * HOURS_PER_DAY
