"""
Codec
=====

Flat-record encoding of vtc values for storage layers.

Modules:
    - records: Pydantic models validating record shapes
    - convert: encode / decode / cast functions
"""

from vtc.codec.convert import (
    cast_framerate,
    cast_framestamp,
    decode_framerate,
    decode_framestamp,
    decode_range,
    encode_framerate,
    encode_framestamp,
    encode_range,
    encode_rational,
    try_decode_framerate,
    try_decode_framestamp,
    try_decode_range,
)
from vtc.codec.records import FramerateRecord, FramestampRecord, RangeRecord, RationalRecord

__all__ = [
    # Records
    "RationalRecord",
    "FramerateRecord",
    "FramestampRecord",
    "RangeRecord",
    # Encode
    "encode_rational",
    "encode_framerate",
    "encode_framestamp",
    "encode_range",
    # Decode
    "decode_framerate",
    "decode_framestamp",
    "decode_range",
    "try_decode_framerate",
    "try_decode_framestamp",
    "try_decode_range",
    # Casts
    "cast_framerate",
    "cast_framestamp",
]
