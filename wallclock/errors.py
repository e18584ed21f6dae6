"""Wallclock exception hierarchy.

All Wallclock-specific exceptions inherit from WallclockError.
"""

from __future__ import annotations


class WallclockError(Exception):
    """Base exception for all Wallclock errors."""

    pass


class ValidationError(WallclockError):
    """Invalid input values.

    Raised when a constructor receives a component outside its range.

    Examples:
        - Month value outside 1-12
        - Minute value outside 0-59
        - Hour value that does not fit the signed 8-bit hour field
    """

    pass


class ParseError(WallclockError):
    """Failed to parse an ISO 8601 representation.

    This is the common base of the per-type format errors. The subclasses
    carry no detail about why the input was rejected; the original cause,
    when there is one, is chained as ``__cause__``.
    """

    pass


class InvalidTimeFormat(ParseError):
    """Input is not a valid ISO 8601 time of day."""

    pass


class InvalidDateFormat(ParseError):
    """Input is not a valid ISO 8601 calendar, ordinal or week date."""

    pass


class InvalidDateTimeFormat(ParseError):
    """Input is not a valid ISO 8601 date-time."""

    pass


class OverflowError(WallclockError):
    """Arithmetic exceeded a representable range.

    Raised when a result cannot be stored.

    Examples:
        - A Duration larger than the signed 128-bit nanosecond range
        - An hour field that no longer fits in a signed 8-bit integer
    """

    pass


__all__ = [
    "WallclockError",
    "ValidationError",
    "ParseError",
    "InvalidTimeFormat",
    "InvalidDateFormat",
    "InvalidDateTimeFormat",
    "OverflowError",
]
