"""
Sources
=======

Input recognizers feeding Framestamp construction.

Each accepted input shape is dispatched by pattern match to its own parser.
Custom types can join in by implementing one of the protocols.

Protocols:
    - FramesSource: ``to_frames(rate) -> int``, for ``Framestamp.with_frames``
    - SecondsSource: ``to_seconds(rate) -> Fraction``, for ``Framestamp.with_seconds``

Wrappers:
    - SMPTETimecodeStr: timecode strings with no feet+frames fallback
    - FeetAndFrames: film footage positions
    - RuntimeStr: runtime strings with no ratio fallback
    - PremiereTicks: Adobe Premiere Pro tick counts
"""

from vtc.film_format import FeetAndFrames
from vtc.source.frames import FramesSource, Sections, SMPTETimecodeStr, to_frames
from vtc.source.seconds import PremiereTicks, RuntimeStr, SecondsSource, to_seconds

__all__ = [
    # Protocols
    "FramesSource",
    "SecondsSource",
    # Wrappers
    "FeetAndFrames",
    "PremiereTicks",
    "RuntimeStr",
    "Sections",
    "SMPTETimecodeStr",
    # Dispatch
    "to_frames",
    "to_seconds",
]
