"""Calendar utilities for Wallclock.

This module provides internal functions for proleptic Gregorian calendar
calculations, including MJD (Modified Julian Day) conversions, ordinal
(year + day-of-year) dates and ISO 8601 week dates.

MJD 0 = 1858-11-17 00:00 UTC (November 17, 1858)

This module is not part of the public API.
"""

from __future__ import annotations

from wallclock._internal.constants import DAYS_IN_MONTH, MAX_YEAR, MIN_YEAR
from wallclock.errors import ValidationError

# Days in a full 400-year Gregorian cycle
_DAYS_PER_400_YEARS = 146097

# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (ordinal 1 = 0001-01-01).

    Floor division makes the formula valid for year 0 and negative years.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal day number to year, month, day.

    Ordinals at or before 0000-12-31 are shifted forward by whole 400-year
    cycles, which repeat exactly in the Gregorian calendar.
    """
    cycles = 0
    if ordinal <= 0:
        cycles = (-ordinal) // _DAYS_PER_400_YEARS + 1
        ordinal += cycles * _DAYS_PER_400_YEARS

    n = ordinal - 1
    n400, n = divmod(n, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, 36524)
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1 - cycles * 400

    # Last day of a leap year lands on the next cycle boundary
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = doy_to_md(year, n + 1)
    return (year, month, day)


def doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-indexed day of year to month and day."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


_MJD_EPOCH_ORDINAL = ymd_to_ordinal(1858, 11, 17)


def ymd_to_mjd(year: int, month: int, day: int) -> int:
    """Convert year, month, day to Modified Julian Day number."""
    return ymd_to_ordinal(year, month, day) - _MJD_EPOCH_ORDINAL


def mjd_to_ymd(mjd: int) -> tuple[int, int, int]:
    """Convert Modified Julian Day number to year, month, day."""
    return ordinal_to_ymd(mjd + _MJD_EPOCH_ORDINAL)


def mjd_to_iso_weekday(mjd: int) -> int:
    """Return the ISO weekday of an MJD (Monday=1, Sunday=7).

    MJD 0 (1858-11-17) was a Wednesday.
    """
    return (mjd + 2) % 7 + 1


def iso_week_one_monday(year: int) -> int:
    """Return the MJD of the Monday that starts ISO week 1 of year.

    Week 1 is the week containing January 4th.
    """
    jan4 = ymd_to_mjd(year, 1, 4)
    return jan4 - (mjd_to_iso_weekday(jan4) - 1)


def iso_weeks_in_year(year: int) -> int:
    """Return 53 for ISO long years, 52 otherwise.

    A year is long when it starts on a Thursday, or is a leap year
    starting on a Wednesday.
    """
    jan1 = mjd_to_iso_weekday(ymd_to_mjd(year, 1, 1))
    if jan1 == 4 or (jan1 == 3 and is_leap_year(year)):
        return 53
    return 52


def ywd_to_mjd(year: int, week: int, weekday: int) -> int:
    """Convert an ISO week date to an MJD number."""
    return iso_week_one_monday(year) + (week - 1) * 7 + (weekday - 1)


def mjd_to_ywd(mjd: int) -> tuple[int, int, int]:
    """Convert an MJD number to (ISO year, ISO week, ISO weekday).

    The ISO year is the calendar year of the Thursday in the same week.
    """
    weekday = mjd_to_iso_weekday(mjd)
    thursday = mjd + (4 - weekday)
    iso_year, _, _ = mjd_to_ymd(thursday)
    week = (thursday - ymd_to_mjd(iso_year, 1, 1)) // 7 + 1
    return (iso_year, week, weekday)


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid date.

    Raises:
        ValidationError: If the date is invalid.
    """
    validate_year(year)
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_year(year: int) -> None:
    """Raise ValidationError if year is outside MIN_YEAR to MAX_YEAR."""
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "doy_to_md",
    "ymd_to_mjd",
    "mjd_to_ymd",
    "mjd_to_iso_weekday",
    "iso_week_one_monday",
    "iso_weeks_in_year",
    "ywd_to_mjd",
    "mjd_to_ywd",
    "validate_date",
    "validate_year",
]
