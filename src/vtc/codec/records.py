"""
Codec Records
=============

Pydantic models for the flat records vtc values are stored as.

These models validate the shape of a record before any vtc value is built from
it, so that a malformed record is rejected as a DecodeError instead of failing
somewhere inside Framerate or Framestamp construction.

Record Layouts:
    rational:   (numerator, denominator)
    framerate:  (numerator, denominator, tags)
    framestamp: (numerator, denominator, rate_numerator, rate_denominator, tags)
    range:      (lower, lower_inclusive, upper, upper_inclusive)

    ``tags`` holds at most one of ``"drop"`` / ``"non_drop"``. An empty list is
    a non-NTSC rate.

Example:
    from vtc.codec.records import FramestampRecord

    record = FramestampRecord.from_tuple((18018, 5, 24000, 1001, ["non_drop"]))
    record.seconds.numerator  # 18018
"""

from typing import Any, List, Tuple

from pydantic import BaseModel, Field, StrictBool, StrictInt, ValidationError, field_validator

from vtc.errors import DecodeError


RATE_TAGS = ("drop", "non_drop")


class RationalRecord(BaseModel):
    """
    Exact fraction as two integers.

    Attributes:
        numerator: Signed numerator
        denominator: Positive denominator
    """

    numerator: StrictInt = Field(
        ...,
        description="Signed numerator",
    )

    denominator: StrictInt = Field(
        ...,
        gt=0,
        description="Denominator, always positive",
    )

    class Config:
        """Pydantic model configuration."""

        frozen = True

    def to_tuple(self) -> Tuple[int, int]:
        return (self.numerator, self.denominator)


class FramerateRecord(BaseModel):
    """
    Framerate as its playback rational plus NTSC tags.

    Attributes:
        playback: Exact frames per second
        tags: Empty, ``["non_drop"]`` or ``["drop"]``
    """

    playback: RationalRecord = Field(
        ...,
        description="Exact playback speed in frames per second",
    )

    tags: List[str] = Field(
        default_factory=list,
        max_length=1,
        description="NTSC tags; at most one of 'drop' / 'non_drop'",
    )

    class Config:
        """Pydantic model configuration."""

        frozen = True
        json_schema_extra = {
            "example": {
                "playback": {"numerator": 30000, "denominator": 1001},
                "tags": ["drop"],
            }
        }

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: List[str]) -> List[str]:
        """Reject unknown tags, and drop alongside non_drop."""
        unknown = [tag for tag in v if tag not in RATE_TAGS]
        if unknown:
            raise ValueError(f"unknown framerate tags: {unknown}")
        if len(set(v)) > 1:
            raise ValueError("framerate cannot be tagged both 'drop' and 'non_drop'")
        return v

    @classmethod
    def from_tuple(cls, record: Any) -> "FramerateRecord":
        """
        Validate a ``(numerator, denominator, tags)`` record.

        Raises:
            DecodeError: If the record is malformed.
        """
        numerator, denominator, tags = _unpack(record, 3, "framerate")
        return _validate(
            cls,
            {"playback": {"numerator": numerator, "denominator": denominator}, "tags": tags},
        )

    def to_tuple(self) -> Tuple[int, int, List[str]]:
        return (*self.playback.to_tuple(), list(self.tags))


class FramestampRecord(BaseModel):
    """
    Framestamp as exact seconds plus its framerate.

    Attributes:
        seconds: Exact real-world seconds
        rate: Framerate record
    """

    seconds: RationalRecord = Field(
        ...,
        description="Exact seconds since 00:00:00:00",
    )

    rate: FramerateRecord = Field(
        ...,
        description="Framerate the seconds are counted at",
    )

    class Config:
        """Pydantic model configuration."""

        frozen = True

    @classmethod
    def from_tuple(cls, record: Any) -> "FramestampRecord":
        """
        Validate a ``(num, den, rate_num, rate_den, tags)`` record.

        Raises:
            DecodeError: If the record is malformed.
        """
        numerator, denominator, rate_numerator, rate_denominator, tags = _unpack(record, 5, "framestamp")
        return _validate(
            cls,
            {
                "seconds": {"numerator": numerator, "denominator": denominator},
                "rate": {
                    "playback": {"numerator": rate_numerator, "denominator": rate_denominator},
                    "tags": tags,
                },
            },
        )

    def to_tuple(self) -> Tuple[int, int, int, int, List[str]]:
        return (*self.seconds.to_tuple(), *self.rate.to_tuple())


class RangeRecord(BaseModel):
    """
    Range as a lower and upper bound, each with an inclusive flag.

    Encoded ranges always have an inclusive lower bound. Records from other
    writers may use an exclusive lower bound, which decoding accepts.

    Attributes:
        lower: Lower bound
        lower_inclusive: Whether ``lower`` is part of the range
        upper: Upper bound
        upper_inclusive: Whether ``upper`` is part of the range
    """

    lower: FramestampRecord
    lower_inclusive: StrictBool = True
    upper: FramestampRecord
    upper_inclusive: StrictBool = False

    class Config:
        """Pydantic model configuration."""

        frozen = True

    @classmethod
    def from_tuple(cls, record: Any) -> "RangeRecord":
        """
        Validate a ``(lower, lower_inclusive, upper, upper_inclusive)`` record.

        Raises:
            DecodeError: If the record is malformed.
        """
        lower, lower_inclusive, upper, upper_inclusive = _unpack(record, 4, "range")
        return _validate(
            cls,
            {
                "lower": FramestampRecord.from_tuple(lower),
                "lower_inclusive": lower_inclusive,
                "upper": FramestampRecord.from_tuple(upper),
                "upper_inclusive": upper_inclusive,
            },
        )

    def to_tuple(self) -> Tuple[tuple, bool, tuple, bool]:
        return (self.lower.to_tuple(), self.lower_inclusive, self.upper.to_tuple(), self.upper_inclusive)


def _unpack(record: Any, size: int, kind: str) -> tuple:
    if not isinstance(record, (tuple, list)) or len(record) != size:
        raise DecodeError(f"{kind} record must be a sequence of {size} values, got {record!r}")
    return tuple(record)


def _validate(model: type, data: dict):
    try:
        return model.model_validate(data)
    except ValidationError as error:
        raise DecodeError(f"invalid {model.__name__}", cause=error) from error
