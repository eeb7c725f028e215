"""
vtc
===

Exact video timecode arithmetic for film and video production.

This package represents playback rates, frame-accurate positions and ranges
as exact fractions, so converting between frames, timecode, seconds and
editorial formats never drifts.

Components:
    - rational: exact fraction helpers and rounding modes
    - framerate: validated playback rates with NTSC classification
    - rates: the common rates as ready-made constants
    - framestamp: frame-aligned points in time and their arithmetic
    - range: inclusive / exclusive intervals of framestamps
    - source: recognizers for frame and seconds inputs
    - codec: flat-record encoding for storage layers
    - config: YAML + environment settings and logging setup

Example:
    from vtc import Framestamp, Range, rates

    stamp = Framestamp.with_frames("01:00:00:00", rates.F23_98)
    stamp.seconds           # Fraction(18018, 5)
    stamp.premiere_ticks()  # 915372057600000

    clip = Range.new(stamp, "02:00:00:00")
    clip.duration()         # <01:00:00:00 <23.98 NTSC>>
"""

__version__ = "0.1.0"

from vtc import rates
from vtc.errors import (
    MixedOutTypeError,
    MixedRateError,
    VtcError,
)
from vtc.film_format import FeetAndFrames, FilmFormat
from vtc.framerate import CoerceNtsc, Framerate, Ntsc
from vtc.framestamp import Framestamp, Inherit
from vtc.range import OutType, Range
from vtc.rational import Round
from vtc.result import Result
from vtc.source import PremiereTicks, RuntimeStr, SMPTETimecodeStr

__all__ = [
    "__version__",
    # Values
    "Framerate",
    "Framestamp",
    "Range",
    "rates",
    # Options
    "CoerceNtsc",
    "Inherit",
    "Ntsc",
    "OutType",
    "Round",
    # Sources
    "FeetAndFrames",
    "FilmFormat",
    "PremiereTicks",
    "RuntimeStr",
    "SMPTETimecodeStr",
    # Errors
    "Result",
    "VtcError",
    "MixedRateError",
    "MixedOutTypeError",
]
