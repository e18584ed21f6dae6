"""Wallclock: wall-clock times and date-times with nanosecond precision.

Wallclock provides time-of-day and date-time values with exact
nanosecond arithmetic and a strict ISO 8601 codec.

Core Types:
    Time: Time of day (hour, minute, second, nanosecond); the hour may
        temporarily leave 0-23 and is folded back by normalize()
    DateTime: A Date paired with a Time
    Date: Calendar date (year, month, day)
    Duration: Signed time span with nanosecond precision

Format Functions:
    parse_iso8601: Parse ISO 8601 date/time/datetime string
    format_iso8601: Format temporal object as ISO 8601 string

Exceptions:
    WallclockError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse string
    InvalidTimeFormat, InvalidDateFormat, InvalidDateTimeFormat
    OverflowError: Arithmetic overflow

Example:
    >>> from wallclock import DateTime, Duration
    >>> DateTime.unix_epoch() + Duration.from_days(365)
    DateTime(1971, 1, 1, 0, 0, 0, nanosecond=0)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from wallclock.core.date import Date
from wallclock.core.datetime import DateTime
from wallclock.core.duration import Duration
from wallclock.core.time import Time

# Exceptions
from wallclock.errors import (
    InvalidDateFormat,
    InvalidDateTimeFormat,
    InvalidTimeFormat,
    OverflowError,
    ParseError,
    ValidationError,
    WallclockError,
)

# Format functions
from wallclock.format import format_iso8601, parse_iso8601

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Duration",
    "Time",
    # Exceptions
    "WallclockError",
    "ValidationError",
    "ParseError",
    "InvalidTimeFormat",
    "InvalidDateFormat",
    "InvalidDateTimeFormat",
    "OverflowError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
]
