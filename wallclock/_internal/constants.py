"""Internal constants for Wallclock.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

HOURS_PER_DAY: int = 24

# Time.hour is stored as a signed 8-bit integer
HOUR_MIN: int = -128
HOUR_MAX: int = 127

# Widest field width of an ISO 8601 fraction suffix
FRACTION_DIGITS: int = 9

# Year limits (practical limits for the library)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# MJD (Modified Julian Day) reference points
# MJD 0 = 1858-11-17 00:00 UTC
MJD_UNIX_EPOCH: int = 40587  # 1970-01-01 00:00 UTC

# Bounds on the duration applied when parsing a UTC offset. The applied
# duration has the opposite sign of the written offset, so these admit
# written offsets from -12:00 through +14:00.
MIN_OFFSET_NANOS: int = -14 * NANOS_PER_HOUR
MAX_OFFSET_NANOS: int = 12 * NANOS_PER_HOUR

# Duration is bounded to the signed 128-bit nanosecond range
MIN_DURATION_NANOS: int = -(2**127)
MAX_DURATION_NANOS: int = 2**127 - 1


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "HOURS_PER_DAY",
    "HOUR_MIN",
    "HOUR_MAX",
    "FRACTION_DIGITS",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "MJD_UNIX_EPOCH",
    "MIN_OFFSET_NANOS",
    "MAX_OFFSET_NANOS",
    "MIN_DURATION_NANOS",
    "MAX_DURATION_NANOS",
]
