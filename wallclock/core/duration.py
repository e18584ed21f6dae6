"""Duration class representing a span of time.

This module provides the Duration class for representing signed time spans
with nanosecond precision. The span is bounded to the signed 128-bit
nanosecond range; constructing anything larger raises OverflowError.
"""

from __future__ import annotations

from wallclock._internal.constants import (
    MAX_DURATION_NANOS,
    MIN_DURATION_NANOS,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from wallclock.errors import OverflowError


class Duration:
    """A signed span of time with nanosecond precision.

    Attributes:
        nanoseconds: The total span in nanoseconds.

    Examples:
        >>> Duration.from_hours(25).to_nanoseconds()
        90000000000000

        >>> Duration.from_minutes(1) + Duration.from_seconds(30)
        Duration(nanoseconds=90000000000)
    """

    __slots__ = ("_nanos",)

    def __init__(
        self,
        *,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        All parameters can be positive, negative, or zero; they are summed.

        Raises:
            OverflowError: If the total exceeds the signed 128-bit range.
        """
        total = (
            days * NANOS_PER_DAY
            + hours * NANOS_PER_HOUR
            + minutes * NANOS_PER_MINUTE
            + seconds * NANOS_PER_SECOND
            + nanoseconds
        )
        if not (MIN_DURATION_NANOS <= total <= MAX_DURATION_NANOS):
            raise OverflowError(f"duration of {total} nanoseconds is out of range")
        self._nanos: int = total

    @classmethod
    def zero(cls) -> Duration:
        """Create a zero-length duration."""
        return cls()

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        """Create a Duration from a number of nanoseconds.

        Raises:
            OverflowError: If nanoseconds exceeds the signed 128-bit range.
        """
        return cls(nanoseconds=nanoseconds)

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        """Create a Duration from a number of seconds."""
        return cls(seconds=seconds)

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        """Create a Duration from a number of minutes."""
        return cls(minutes=minutes)

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        """Create a Duration from a number of hours.

        Examples:
            >>> Duration.from_hours(-1)
            Duration(nanoseconds=-3600000000000)
        """
        return cls(hours=hours)

    @classmethod
    def from_days(cls, days: int) -> Duration:
        """Create a Duration from a number of 24-hour days."""
        return cls(days=days)

    def to_nanoseconds(self) -> int:
        """Return the total span in nanoseconds."""
        return self._nanos

    @property
    def nanoseconds(self) -> int:
        """Return the total span in nanoseconds."""
        return self._nanos

    @property
    def is_negative(self) -> bool:
        """Return True if this duration is less than zero."""
        return self._nanos < 0

    @property
    def is_zero(self) -> bool:
        """Return True if this duration is zero."""
        return self._nanos == 0

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self._nanos + other._nanos)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self._nanos - other._nanos)

    def __neg__(self) -> Duration:
        """Return the negation of this duration.

        Raises:
            OverflowError: For the most negative representable duration.
        """
        return Duration(nanoseconds=-self._nanos)

    def __abs__(self) -> Duration:
        return -self if self._nanos < 0 else self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return f"Duration(nanoseconds={self._nanos})"

    def __bool__(self) -> bool:
        """Return False for the zero duration."""
        return self._nanos != 0


__all__ = ["Duration"]
