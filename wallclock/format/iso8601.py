"""ISO 8601 formatting and parsing.

This module provides functions for converting temporal objects to and from
ISO 8601 string representations without knowing the type up front. The
actual codecs live on Date, Time and DateTime; these functions only pick
the right one.

Functions:
    parse_iso8601: Parse an ISO 8601 string into a temporal object.
    format_iso8601: Format a temporal object as an ISO 8601 string.

Dates:
    - YYYY-MM-DD, YYYYMMDD, YYYY-MM
    - YYYY-DDD, YYYYDDD
    - YYYY-Www-D, YYYYWwwD, YYYY-Www, YYYYWww

Times:
    - HH, HHMM, HH:MM, HHMMSS, HH:MM:SS
    - any of the above with a fraction (``.`` or ``,``)
    - any of the above with ``Z`` or an offset ``+HH``, ``+HHMM``, ``+HH:MM``

DateTimes:
    - a date, ``T``, and a time

Examples:
    >>> parse_iso8601("2024-01-15T14:30:45Z")
    DateTime(2024, 1, 15, 14, 30, 45, nanosecond=0)

    >>> parse_iso8601("T14:30")
    Time(14, 30, 0, nanosecond=0)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from wallclock.errors import InvalidDateFormat, InvalidTimeFormat, ParseError

if TYPE_CHECKING:
    from wallclock.core.date import Date
    from wallclock.core.datetime import DateTime
    from wallclock.core.time import Time

# Type alias for temporal objects
TemporalType = Union["Date", "Time", "DateTime"]


def parse_iso8601(s: str | bytes) -> TemporalType:
    """Parse an ISO 8601 string into a Date, Time or DateTime.

    Detection rules:
        - A ``T`` after the first character -> DateTime
        - A leading ``T`` -> Time
        - Otherwise a Date if it parses as one, else a Time

    Raises:
        InvalidDateTimeFormat: If a DateTime-shaped input is invalid.
        ParseError: If the input is neither a valid Date nor a valid Time.

    Examples:
        >>> parse_iso8601("2024-01-15")
        Date(2024, 1, 15)

        >>> parse_iso8601("14:30:45,25")
        Time(14, 30, 45, nanosecond=250000000)
    """
    # Import here to avoid circular imports
    from wallclock.core.date import Date
    from wallclock.core.datetime import DateTime
    from wallclock.core.time import Time

    data = s.encode("utf-8", "surrogatepass") if isinstance(s, str) else s

    if b"T" in data[1:]:
        return DateTime.from_iso_u8(data)
    if data[:1] == b"T":
        return Time.from_iso_u8(data)

    try:
        return Date.from_iso_u8(data)
    except InvalidDateFormat:
        pass
    try:
        return Time.from_iso_u8(data)
    except InvalidTimeFormat as exc:
        raise ParseError(
            f"not an ISO 8601 date, time or date-time: {data!r}"
        ) from exc


def format_iso8601(value: TemporalType) -> str:
    """Format a Date, Time or DateTime as an ISO 8601 string.

    Raises:
        TypeError: If value is not a Date, Time or DateTime.

    Examples:
        >>> from wallclock import Time
        >>> format_iso8601(Time(14, 30, 45, 120_000_000))
        '14:30:45,12'
    """
    # Import here to avoid circular imports
    from wallclock.core.date import Date
    from wallclock.core.datetime import DateTime
    from wallclock.core.time import Time

    if isinstance(value, (DateTime, Date, Time)):
        return value.to_iso_str()
    raise TypeError(
        f"expected Date, Time, or DateTime, got {type(value).__name__}"
    )


__all__ = ["parse_iso8601", "format_iso8601"]
