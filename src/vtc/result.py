"""
Result Container
================

Tagged ok/error result returned by the ``try_*`` constructors.

Every fallible vtc constructor exists in two forms:
    - ``try_*``: returns a Result, never raises for expected failures
    - the plain name: returns the value, raising the error on failure

The raising form is always ``try_*(...).unwrap()``.

Example:
    from vtc import Framestamp, rates

    result = Framestamp.try_with_frames("00:01:00;01", rates.F29_97_DF)
    if not result.is_ok:
        print(result.error.reason)
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from vtc.errors import VtcError


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Operation result container"""

    success: bool
    value: Optional[T] = None
    error: Optional[VtcError] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        """Create success result"""
        return cls(success=True, value=value)

    @classmethod
    def err(cls, error: VtcError) -> "Result[T]":
        """Create error result"""
        return cls(success=False, error=error)

    @property
    def is_ok(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """
        Return the value, or raise the carried error.

        Raises:
            VtcError: The error this result was created with.
        """
        if self.success:
            return self.value  # type: ignore[return-value]
        assert self.error is not None
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return self.value if self.success else default  # type: ignore[return-value]

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        """Apply ``func`` to a success value, passing errors through untouched."""
        if self.success:
            return Result.ok(func(self.value))  # type: ignore[arg-type]
        return Result.err(self.error)  # type: ignore[arg-type]

    def then(self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Chain another fallible step onto a success value."""
        if self.success:
            return func(self.value)  # type: ignore[arg-type]
        return Result.err(self.error)  # type: ignore[arg-type]


def capture(func: Callable[[], T]) -> Result[T]:
    """
    Run ``func`` and wrap its outcome.

    Only VtcError failures are captured; anything else is a bug and propagates.
    """
    try:
        return Result.ok(func())
    except VtcError as error:
        return Result.err(error)
