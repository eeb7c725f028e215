"""
Utilities
=========

Shared constants and helpers for timecode parsing and drop-frame math.
"""

from vtc.utils.consts import (
    PREMIERE_TICKS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

__all__ = [
    "PREMIERE_TICKS_PER_SECOND",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
]
