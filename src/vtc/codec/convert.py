"""
Codec
=====

Encode vtc values into flat records and decode them back.

This is the boundary storage layers build on: a database binding stores the
records produced here and hands them back for decoding. Records are plain
tuples of ints, bools and tag lists, described in ``vtc.codec.records``.

Design Rules:
    - Encoding is exact: seconds and playback are stored as fractions
    - Encoding checks the signed 64-bit bound when ``codec.enforce_int64`` is on
    - Decoding raises nothing but DecodeError; ``try_decode_*`` returns a Result
    - Decoded framestamps must land on a whole frame; nothing is rounded

Example:
    from vtc import Framestamp, rates
    from vtc.codec import decode_framestamp, encode_framestamp

    stamp = Framestamp.with_frames("01:00:00:00", rates.F23_98)
    record = encode_framestamp(stamp)   # (18018, 5, 24000, 1001, ["non_drop"])
    decode_framestamp(record) == stamp  # True
"""

import logging
from fractions import Fraction
from typing import Any, List, Mapping, Tuple

from vtc import config, rational
from vtc.codec.records import FramerateRecord, FramestampRecord, RangeRecord
from vtc.errors import DecodeError, VtcError
from vtc.framerate import Framerate, Ntsc
from vtc.framestamp import Framestamp
from vtc.range import OutType, Range
from vtc.rational import Round
from vtc.result import Result, capture
from vtc.source.frames import SMPTETimecodeStr


logger = logging.getLogger(__name__)


FramerateTuple = Tuple[int, int, List[str]]
FramestampTuple = Tuple[int, int, int, int, List[str]]
RangeTuple = Tuple[FramestampTuple, bool, FramestampTuple, bool]


# =============================================================================
# Encode
# =============================================================================

def encode_rational(value: Fraction, name: str = "value") -> Tuple[int, int]:
    """
    Encode a fraction as ``(numerator, denominator)``.

    Raises:
        ArithmeticOverflowError: If int64 checks are on and a component is out of range.
    """
    value = Fraction(value)
    if config.settings.codec.enforce_int64:
        rational.ensure_int64(value.numerator, f"{name}.numerator")
        rational.ensure_int64(value.denominator, f"{name}.denominator")
    return (value.numerator, value.denominator)


def encode_framerate(rate: Framerate) -> FramerateTuple:
    """Encode a framerate as ``(numerator, denominator, tags)``."""
    numerator, denominator = encode_rational(rate.playback, "playback")
    return (numerator, denominator, list(rate.ntsc_tags))


def encode_framestamp(stamp: Framestamp) -> FramestampTuple:
    """Encode a framestamp as ``(numerator, denominator, rate_numerator, rate_denominator, tags)``."""
    numerator, denominator = encode_rational(stamp.seconds, "seconds")
    return (numerator, denominator, *encode_framerate(stamp.rate))


def encode_range(value: Range) -> RangeTuple:
    """
    Encode a range as ``(lower, True, upper, upper_inclusive)``.

    The lower bound is always inclusive; the upper bound follows ``out_type``.
    """
    return (
        encode_framestamp(value.stamp_in),
        True,
        encode_framestamp(value.stamp_out),
        value.out_type is OutType.INCLUSIVE,
    )


# =============================================================================
# Decode
# =============================================================================

def try_decode_framerate(record: Any) -> Result[Framerate]:
    return capture(lambda: _framerate_from_record(FramerateRecord.from_tuple(record)))


def decode_framerate(record: Any) -> Framerate:
    """
    Decode a ``(numerator, denominator, tags)`` record.

    Raises:
        DecodeError: If the record is malformed or not a valid framerate.
    """
    return _log_rejected("framerate", record, try_decode_framerate(record)).unwrap()


def try_decode_framestamp(record: Any) -> Result[Framestamp]:
    return capture(lambda: _framestamp_from_record(FramestampRecord.from_tuple(record)))


def decode_framestamp(record: Any) -> Framestamp:
    """
    Decode a ``(num, den, rate_num, rate_den, tags)`` record.

    Raises:
        DecodeError: If the record is malformed, or its seconds do not land on
            a whole frame of its rate.
    """
    return _log_rejected("framestamp", record, try_decode_framestamp(record)).unwrap()


def try_decode_range(record: Any) -> Result[Range]:
    return capture(lambda: _range_from_record(RangeRecord.from_tuple(record)))


def decode_range(record: Any) -> Range:
    """
    Decode a ``(lower, lower_inclusive, upper, upper_inclusive)`` record.

    An exclusive lower bound is moved forward one frame, so the decoded range
    covers the same frames.

    Raises:
        DecodeError: If the record is malformed or not a valid range.
    """
    return _log_rejected("range", record, try_decode_range(record)).unwrap()


# =============================================================================
# Casts
# =============================================================================

def cast_framerate(data: Any) -> Framerate:
    """
    Build a framerate from a JSON-style mapping.

    Accepted Input:
        {"playback": [24000, 1001] | "24000/1001", "ntsc": "non_drop" | "drop" | None}

    A Framerate passes through unchanged.

    Raises:
        DecodeError: If the mapping is malformed or not a valid framerate.
    """
    if isinstance(data, Framerate):
        return data
    if not isinstance(data, Mapping) or "playback" not in data:
        raise DecodeError(f"framerate cast requires a mapping with `playback`, got {data!r}")

    playback = _cast_playback(data["playback"])
    ntsc = data.get("ntsc")
    if ntsc not in (None, Ntsc.NON_DROP.value, Ntsc.DROP.value):
        raise DecodeError(f"framerate cast `ntsc` must be 'non_drop', 'drop' or None, got {ntsc!r}")

    return _decode_step(lambda: Framerate.new(playback, ntsc=ntsc))


def cast_framestamp(data: Any) -> Framestamp:
    """
    Build a framestamp from a JSON-style mapping.

    Accepted Input:
        {"smpte_timecode": "01:00:00:00", "rate": <cast_framerate input>}

    A Framestamp passes through unchanged.

    Raises:
        DecodeError: If the mapping is malformed or the timecode is invalid.
    """
    if isinstance(data, Framestamp):
        return data
    if not isinstance(data, Mapping) or "smpte_timecode" not in data or "rate" not in data:
        raise DecodeError(f"framestamp cast requires `smpte_timecode` and `rate`, got {data!r}")

    timecode = data["smpte_timecode"]
    if not isinstance(timecode, str):
        raise DecodeError(f"`smpte_timecode` must be a string, got {timecode!r}")

    rate = cast_framerate(data["rate"])
    return _decode_step(lambda: Framestamp.with_frames(SMPTETimecodeStr(timecode), rate))


# =============================================================================
# Helpers
# =============================================================================

def _framerate_from_record(record: FramerateRecord) -> Framerate:
    if "drop" in record.tags:
        ntsc = Ntsc.DROP
    elif "non_drop" in record.tags:
        ntsc = Ntsc.NON_DROP
    else:
        ntsc = Ntsc.NONE

    playback = Fraction(*record.playback.to_tuple())
    return _decode_step(lambda: Framerate.new(playback, ntsc=ntsc))


def _framestamp_from_record(record: FramestampRecord) -> Framestamp:
    rate = _framerate_from_record(record.rate)
    seconds = Fraction(*record.seconds.to_tuple())
    return _decode_step(lambda: Framestamp.with_seconds(seconds, rate, round=Round.OFF))


def _range_from_record(record: RangeRecord) -> Range:
    stamp_in = _framestamp_from_record(record.lower)
    if not record.lower_inclusive:
        stamp_in = stamp_in + 1

    stamp_out = _framestamp_from_record(record.upper)
    out_type = OutType.INCLUSIVE if record.upper_inclusive else OutType.EXCLUSIVE
    return _decode_step(lambda: Range.new(stamp_in, stamp_out, out_type))


def _cast_playback(value: Any) -> Fraction:
    match value:
        case [int() as numerator, int() as denominator] if bool not in (type(numerator), type(denominator)):
            return _decode_step(lambda: rational.new(numerator, denominator))
        case str():
            return _decode_step(lambda: rational.parse(value))
        case _:
            raise DecodeError(f"`playback` must be [numerator, denominator] or 'N/D', got {value!r}")


def _decode_step(func):
    """Run one decode step, re-raising any vtc failure as a DecodeError."""
    try:
        return func()
    except DecodeError:
        raise
    except VtcError as error:
        raise DecodeError(error.message, cause=error) from error


def _log_rejected(kind: str, record: Any, result: Result) -> Result:
    if not result.is_ok:
        logger.warning(f"Rejected {kind} record {record!r}: {result.error}")
    return result
