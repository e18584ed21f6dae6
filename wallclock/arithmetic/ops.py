"""Standalone arithmetic operations for temporal types.

This module provides explicit functions for adding a Duration to a time
point. They are the canonical implementation; the ``+`` and ``-`` operators
on Time, Date and DateTime delegate here.

Type Combinations:
    - Time + Duration -> Time (hour not wrapped)
    - Duration + Time -> Time
    - DateTime + Duration -> DateTime
    - Duration + DateTime -> DateTime
    - Date + Duration -> Date (floored to the containing day)

All accumulation happens on Python integers, so no intermediate sum can
overflow; only constructing the result can fail.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wallclock.core.date import Date
    from wallclock.core.datetime import DateTime
    from wallclock.core.duration import Duration
    from wallclock.core.time import Time


def add_time_and_duration(time: "Time", duration: "Duration") -> "Time":
    """Add a Duration to a Time.

    The result is rebuilt with Time.from_nanos_since_midnight, so the hour
    may leave 0-23; call normalize() for the canonical time of day.

    Raises:
        OverflowError: If the resulting hour does not fit in its field.

    Examples:
        >>> from wallclock.core.duration import Duration
        >>> from wallclock.core.time import Time
        >>> add_time_and_duration(Time(23, 0, 0), Duration.from_hours(2))
        Time(25, 0, 0, nanosecond=0)
    """
    from wallclock.core.time import Time

    return Time.from_nanos_since_midnight(
        time.to_nanos_since_midnight() + duration.to_nanoseconds()
    )


def add_duration_and_time(duration: "Duration", time: "Time") -> "Time":
    """Add a Time to a Duration; same result as add_time_and_duration."""
    return add_time_and_duration(time, duration)


def add_datetime_and_duration(
    datetime: "DateTime",
    duration: "Duration",
) -> "DateTime":
    """Add a Duration to a DateTime.

    Examples:
        >>> from wallclock.core.datetime import DateTime
        >>> from wallclock.core.duration import Duration
        >>> add_datetime_and_duration(DateTime.unix_epoch(), Duration.from_days(365))
        DateTime(1971, 1, 1, 0, 0, 0, nanosecond=0)
    """
    from wallclock.core.datetime import DateTime

    return DateTime.from_nanos_since_epoch(
        datetime.to_nanos_since_epoch() + duration.to_nanoseconds()
    )


def add_duration_and_datetime(
    duration: "Duration",
    datetime: "DateTime",
) -> "DateTime":
    """Add a DateTime to a Duration; same result as add_datetime_and_duration."""
    return add_datetime_and_duration(datetime, duration)


def add_date_and_duration(date: "Date", duration: "Duration") -> "Date":
    """Add a Duration to a Date, keeping the day that contains the result."""
    from wallclock.core.date import Date

    return Date.from_nanos_since_epoch(
        date.to_nanos_since_epoch() + duration.to_nanoseconds()
    )


__all__ = [
    "add_time_and_duration",
    "add_duration_and_time",
    "add_datetime_and_duration",
    "add_duration_and_datetime",
    "add_date_and_duration",
]
