"""
Errors
======

Typed exceptions raised (or carried inside a Result) by vtc operations.

Every error exposes a machine-readable ``reason`` code and a fixed,
human-readable message. Parse errors also subclass ``ValueError`` so that
callers validating user input can catch them the usual way.

Hierarchy:
    VtcError
        DivideByZeroError           (also ZeroDivisionError)
        EncodeError
            ArithmeticOverflowError
        DecodeError
        FramerateParseError         (also ValueError)
            NonPositiveError
            InvalidNtscRateError
            BadDropRateError
            ImpreciseError
            CoerceRequiresNtscError
            InvalidNtscError
            UnrecognizedFramerateError
        FramestampParseError        (also ValueError)
            UnrecognizedFormatError
            BadDropFramesError
            PartialFrameError
            DropFrameMaximumExceededError
        InvalidSMPTERateError       (also ValueError)
        MixedRateError              (also ValueError)
        MixedOutTypeError           (also ValueError)
        RangeError                  (also ValueError)
            RangeOrderError
            RangeDurationError
            NoOverlapError

Example:
    from vtc import Framestamp, rates
    from vtc.errors import BadDropFramesError

    try:
        Framestamp.with_frames("00:01:00;01", rates.F29_97_DF)
    except BadDropFramesError as error:
        print(error.reason)  # "bad_drop_frames"
"""

from enum import Enum
from typing import Any, Optional


class ErrorReason(str, Enum):
    """
    Machine-readable failure codes.

    One code per validation failure site. Codes are stable and safe to
    persist or compare against in calling code.
    """

    DIVIDE_BY_ZERO = "divide_by_zero"
    ARITHMETIC_OVERFLOW = "arithmetic_overflow"

    # Framerate parsing
    NON_POSITIVE = "non_positive"
    INVALID_NTSC_RATE = "invalid_ntsc_rate"
    BAD_DROP_RATE = "bad_drop_rate"
    IMPRECISE = "imprecise"
    COERCE_REQUIRES_NTSC = "coerce_requires_ntsc"
    INVALID_NTSC = "invalid_ntsc"

    # Framestamp parsing
    UNRECOGNIZED_FORMAT = "unrecognized_format"
    BAD_DROP_FRAMES = "bad_drop_frames"
    PARTIAL_FRAME = "partial_frame"
    DROP_FRAME_MAXIMUM_EXCEEDED = "drop_frame_maximum_exceeded"
    INVALID_SMPTE_RATE = "invalid_smpte_rate"

    # Mixed operand arithmetic
    MIXED_RATE = "mixed_rate"
    MIXED_OUT_TYPE = "mixed_out_type"

    # Ranges
    RANGE_ORDER = "range_order"
    RANGE_DURATION = "range_duration"
    NO_OVERLAP = "no_overlap"

    # Codec
    DECODE = "decode"
    ENCODE = "encode"


class VtcError(Exception):
    """Base error type for vtc."""

    reason: ErrorReason = ErrorReason.UNRECOGNIZED_FORMAT
    default_message: str = "vtc operation failed"

    def __init__(self, message: Optional[str] = None, cause: Optional[Exception] = None):
        self.cause = cause
        self._message = message or self.default_message
        super().__init__(self._message + (f" Caused by: {cause}" if cause else ""))

    @property
    def message(self) -> str:
        """Message text without the cause suffix."""
        return self._message


class DivideByZeroError(VtcError, ZeroDivisionError):
    """Raised when a rational value would have a zero denominator."""

    reason = ErrorReason.DIVIDE_BY_ZERO
    default_message = "denominator must not be zero"


class EncodeError(VtcError):
    """Raised when a value cannot be projected into its wire record."""

    reason = ErrorReason.ENCODE
    default_message = "value could not be encoded"


class ArithmeticOverflowError(EncodeError):
    """Raised when a rational component does not fit in a signed 64-bit integer."""

    reason = ErrorReason.ARITHMETIC_OVERFLOW
    default_message = "value does not fit in a signed 64-bit integer"


class DecodeError(VtcError):
    """Raised when a wire record is malformed."""

    reason = ErrorReason.DECODE
    default_message = "record could not be decoded"


# =============================================================================
# Framerate
# =============================================================================

class FramerateParseError(VtcError, ValueError):
    """Base error when a framerate cannot be parsed or validated."""

    default_message = "framerate could not be parsed"


class NonPositiveError(FramerateParseError):
    reason = ErrorReason.NON_POSITIVE
    default_message = "must be positive"


class InvalidNtscRateError(FramerateParseError):
    reason = ErrorReason.INVALID_NTSC_RATE
    default_message = (
        "NTSC rates must be equivalent to `(timebase * 1000)/1001` "
        "when coerce_ntsc is false"
    )


class BadDropRateError(FramerateParseError):
    reason = ErrorReason.BAD_DROP_RATE
    default_message = "drop-frame rates must be divisible by 30000/1001"


class ImpreciseError(FramerateParseError):
    reason = ErrorReason.IMPRECISE
    default_message = "non-whole floats are not precise enough to create a non-NTSC Framerate"


class CoerceRequiresNtscError(FramerateParseError):
    reason = ErrorReason.COERCE_REQUIRES_NTSC
    default_message = "when `coerce_ntsc` is set to `True` or `'if_trunc'`, `ntsc` must not be None"


class InvalidNtscError(FramerateParseError):
    reason = ErrorReason.INVALID_NTSC
    default_message = "ntsc is not a valid value. must be 'non_drop', 'drop', or None"


class UnrecognizedFramerateError(FramerateParseError):
    reason = ErrorReason.UNRECOGNIZED_FORMAT
    default_message = "framerate string format not recognized"


# =============================================================================
# Framestamp
# =============================================================================

class FramestampParseError(VtcError, ValueError):
    """Base error when a framestamp cannot be parsed."""

    default_message = "framestamp could not be parsed"


class UnrecognizedFormatError(FramestampParseError):
    reason = ErrorReason.UNRECOGNIZED_FORMAT
    default_message = "string format not recognized"


class BadDropFramesError(FramestampParseError):
    reason = ErrorReason.BAD_DROP_FRAMES
    default_message = "frames value not allowed for drop-frame timecode. frame should have been dropped"


class PartialFrameError(FramestampParseError):
    reason = ErrorReason.PARTIAL_FRAME
    default_message = "`seconds` is not cleanly divisible by `rate.playback`"


class DropFrameMaximumExceededError(FramestampParseError):
    reason = ErrorReason.DROP_FRAME_MAXIMUM_EXCEEDED
    default_message = "frame number exceeded 24 hours for drop-frame timecode"


class InvalidSMPTERateError(VtcError, ValueError):
    """Raised when an operation expects a whole-frame or NTSC framerate."""

    reason = ErrorReason.INVALID_SMPTE_RATE
    default_message = "framerate not valid SMPTE value. Must be non-drop, drop, or whole-frame."


# =============================================================================
# Mixed operands
# =============================================================================

class MixedRateError(VtcError, ValueError):
    """
    Raised when mixed-rate arithmetic is attempted without an inherit policy.

    Attributes:
        func_name: Name of the operation that was attempted
        left_rate: Rate found on the left side of the operation
        right_rate: Rate found on the right side of the operation
    """

    reason = ErrorReason.MIXED_RATE

    def __init__(self, func_name: str, left_rate: Any, right_rate: Any):
        self.func_name = func_name
        self.left_rate = left_rate
        self.right_rate = right_rate
        super().__init__(
            f"attempted `{func_name}(a, b)` where `a.rate` does not match `b.rate`."
            " try `inherit_rate` option of 'left' or 'right'. alternatively, do your"
            " calculation in seconds, then cast back to `Framestamp` with the"
            " appropriate rate"
        )


class MixedOutTypeError(VtcError, ValueError):
    """
    Raised when mixed-out-type range arithmetic is attempted without an inherit policy.

    Attributes:
        func_name: Name of the operation that was attempted
        left_out_type: Out type found on the left side of the operation
        right_out_type: Out type found on the right side of the operation
    """

    reason = ErrorReason.MIXED_OUT_TYPE

    def __init__(self, func_name: str, left_out_type: Any, right_out_type: Any):
        self.func_name = func_name
        self.left_out_type = left_out_type
        self.right_out_type = right_out_type
        super().__init__(
            f"attempted `Range.{func_name}(a, b)` where `a.out_type` does not match"
            " `b.out_type`. try `inherit_out_type` option of 'left' or 'right'"
        )


# =============================================================================
# Ranges
# =============================================================================

class RangeError(VtcError, ValueError):
    """Base error for invalid range construction or range queries."""

    default_message = "invalid range"


class RangeOrderError(RangeError):
    reason = ErrorReason.RANGE_ORDER
    default_message = "`stamp_out` must be greater than or equal to `stamp_in`"


class RangeDurationError(RangeError):
    reason = ErrorReason.RANGE_DURATION
    default_message = "`duration` must be greater than or equal to `0`"


class NoOverlapError(RangeError):
    """Raised when an intersection or separation has no located result."""

    reason = ErrorReason.NO_OVERLAP
    default_message = "ranges do not produce a result for this operation"
