"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the proleptic Gregorian calendar, along with its ISO 8601 codec
(calendar, ordinal and week dates in basic and extended form).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wallclock._internal.bytestr import (
    is_digits,
    is_single_byte,
    parse_int,
    split_at,
    zero_pad,
)
from wallclock._internal.calendar import (
    days_in_month,
    days_in_year,
    days_before_month,
    doy_to_md,
    iso_weeks_in_year,
    mjd_to_iso_weekday,
    mjd_to_ymd,
    mjd_to_ywd,
    validate_date,
    validate_year,
    ymd_to_mjd,
    ywd_to_mjd,
)
from wallclock._internal.constants import MJD_UNIX_EPOCH, NANOS_PER_DAY
from wallclock.errors import InvalidDateFormat, ValidationError

if TYPE_CHECKING:
    from wallclock.core.duration import Duration

logger = logging.getLogger(__name__)


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Years use astronomical numbering, so year 0 exists and equals 1 BCE.
    The internal representation is a Modified Julian Day number, which
    keeps day arithmetic a plain integer addition.

    Attributes:
        year: The year (can be zero or negative).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> Date(2024, 1, 15).add_days(20)
        Date(2024, 2, 4)

        >>> Date.from_ywd(2020, 53, 5)
        Date(2021, 1, 1)
    """

    __slots__ = ("_days",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Raises:
            ValidationError: If the date is invalid.
        """
        validate_date(year, month, day)
        self._days: int = ymd_to_mjd(year, month, day)

    @classmethod
    def _from_mjd(cls, mjd: int) -> Date:
        """Create a Date from an MJD number, checking only the year range."""
        year, _, _ = mjd_to_ymd(mjd)
        validate_year(year)
        instance = object.__new__(cls)
        instance._days = mjd
        return instance

    @classmethod
    def unix_epoch(cls) -> Date:
        """Return 1970-01-01."""
        return cls._from_mjd(MJD_UNIX_EPOCH)

    @classmethod
    def today(cls) -> Date:
        """Return today's date in the local timezone."""
        import datetime

        now = datetime.date.today()
        return cls(now.year, now.month, now.day)

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> Date:
        """Create a Date from a calendar date."""
        return cls(year, month, day)

    @classmethod
    def from_yd(cls, year: int, day_of_year: int) -> Date:
        """Create a Date from an ordinal date.

        Args:
            year: The year.
            day_of_year: Day of the year, 1-365 (1-366 in leap years).

        Raises:
            ValidationError: If the day of year is out of range.

        Examples:
            >>> Date.from_yd(2024, 60)
            Date(2024, 2, 29)
        """
        validate_year(year)
        max_day = days_in_year(year)
        if not (1 <= day_of_year <= max_day):
            raise ValidationError(
                f"day of year must be between 1 and {max_day} for {year}, "
                f"got {day_of_year}"
            )
        month, day = doy_to_md(year, day_of_year)
        return cls(year, month, day)

    @classmethod
    def from_ywd(cls, year: int, week: int, weekday: int) -> Date:
        """Create a Date from an ISO 8601 week date.

        Args:
            year: The ISO week-numbering year.
            week: The ISO week, 1-52 (1-53 in long years).
            weekday: The ISO weekday, Monday=1 through Sunday=7.

        Raises:
            ValidationError: If the week or weekday is out of range.

        Examples:
            >>> Date.from_ywd(2009, 1, 1)
            Date(2008, 12, 29)
        """
        validate_year(year)
        max_week = iso_weeks_in_year(year)
        if not (1 <= week <= max_week):
            raise ValidationError(
                f"week must be between 1 and {max_week} for {year}, got {week}"
            )
        if not (1 <= weekday <= 7):
            raise ValidationError(f"weekday must be between 1 and 7, got {weekday}")
        return cls._from_mjd(ywd_to_mjd(year, week, weekday))

    @classmethod
    def from_yw(cls, year: int, week: int) -> Date:
        """Create a Date from the Monday of an ISO 8601 week."""
        return cls.from_ywd(year, week, 1)

    @classmethod
    def from_nanos_since_epoch(cls, nanos: int) -> Date:
        """Return the date containing the instant nanos after the Unix epoch.

        Negative values that are not whole days round toward the earlier day.

        Examples:
            >>> Date.from_nanos_since_epoch(-1)
            Date(1969, 12, 31)
        """
        return cls._from_mjd(MJD_UNIX_EPOCH + nanos // NANOS_PER_DAY)

    @classmethod
    def from_iso_str(cls, s: str) -> Date:
        """Parse an ISO 8601 date from text. See from_iso_u8."""
        return cls.from_iso_u8(s.encode("utf-8", "surrogatepass"))

    @classmethod
    def from_iso_u8(cls, data: bytes) -> Date:
        """Parse an ISO 8601 date from bytes.

        Accepted shapes (the year may carry a leading ``+`` or ``-``):
            - YYYY-MM-DD, YYYYMMDD, YYYY-MM (calendar date)
            - YYYY-DDD, YYYYDDD (ordinal date)
            - YYYY-Www-D, YYYYWwwD, YYYY-Www, YYYYWww (week date)

        Raises:
            InvalidDateFormat: If data matches no shape or is out of range.

        Examples:
            >>> Date.from_iso_u8(b"2024-01-15")
            Date(2024, 1, 15)

            >>> Date.from_iso_u8(b"2024W031")
            Date(2024, 1, 15)
        """
        try:
            return _parse_iso_date(data)
        except (ValueError, ValidationError) as exc:
            logger.debug("rejected ISO 8601 date %r: %s", data, exc)
            raise InvalidDateFormat(f"invalid ISO 8601 date: {data!r}") from exc

    @property
    def year(self) -> int:
        """Return the year component."""
        year, _, _ = mjd_to_ymd(self._days)
        return year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        _, month, _ = mjd_to_ymd(self._days)
        return month

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        _, _, day = mjd_to_ymd(self._days)
        return day

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        year, month, day = mjd_to_ymd(self._days)
        return days_before_month(year, month) + day

    @property
    def day_of_week(self) -> int:
        """Return the ISO weekday (Monday=1, Sunday=7)."""
        return mjd_to_iso_weekday(self._days)

    @property
    def iso_week(self) -> tuple[int, int, int]:
        """Return (ISO year, ISO week, ISO weekday).

        Examples:
            >>> Date(2021, 1, 1).iso_week
            (2020, 53, 5)
        """
        return mjd_to_ywd(self._days)

    def to_nanos_since_epoch(self) -> int:
        """Return nanoseconds from the Unix epoch to midnight of this date."""
        return (self._days - MJD_UNIX_EPOCH) * NANOS_PER_DAY

    def add_days(self, days: int) -> Date:
        """Return a new Date offset by the given number of days.

        Raises:
            ValidationError: If the result is out of range.
        """
        return Date._from_mjd(self._days + days)

    def add_months(self, months: int) -> Date:
        """Return a new Date offset by the given number of months.

        If the resulting day is invalid for the new month, it is
        clamped to the last valid day of that month.

        Examples:
            >>> Date(2024, 1, 31).add_months(1)
            Date(2024, 2, 29)
        """
        year, month, day = mjd_to_ymd(self._days)

        total_months = year * 12 + (month - 1) + months
        new_year, new_month = divmod(total_months, 12)
        new_month += 1

        validate_year(new_year)
        new_day = min(day, days_in_month(new_year, new_month))
        return Date(new_year, new_month, new_day)

    def add_years(self, years: int) -> Date:
        """Return a new Date offset by the given number of years.

        Feb 29 becomes Feb 28 when the target year is not a leap year.

        Examples:
            >>> Date(2024, 2, 29).add_years(1)
            Date(2025, 2, 28)
        """
        year, month, day = mjd_to_ymd(self._days)
        new_year = year + years

        validate_year(new_year)
        new_day = min(day, days_in_month(new_year, month))
        return Date(new_year, month, new_day)

    def to_iso_str(self) -> str:
        """Return the date as YYYY-MM-DD (-YYYY-MM-DD for negative years).

        Examples:
            >>> Date(2024, 1, 15).to_iso_str()
            '2024-01-15'

            >>> Date(-44, 3, 15).to_iso_str()
            '-0044-03-15'
        """
        year, month, day = mjd_to_ymd(self._days)
        year_str = zero_pad(year, 4) if year >= 0 else zero_pad(year, 5)
        return f"{year_str}-{zero_pad(month, 2)}-{zero_pad(day, 2)}"

    def to_iso_u8(self) -> bytes:
        """Return the ISO 8601 text of to_iso_str as bytes."""
        return self.to_iso_str().encode("ascii")

    def __add__(self, other: object) -> Date:
        """Add a whole-day Duration to this date."""
        from wallclock.arithmetic.ops import add_date_and_duration
        from wallclock.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return add_date_and_duration(self, other)

    def __radd__(self, other: object) -> Date:
        return self.__add__(other)

    def __sub__(self, other: object) -> Date:
        from wallclock.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self + (-other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days == other._days

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        year, month, day = mjd_to_ymd(self._days)
        return f"Date({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_str()


def _split_year(data: bytes) -> tuple[int, bytes]:
    """Split a signed or unsigned four-digit year off the front of data."""
    sign = b""
    if data[:1] in (b"+", b"-"):
        sign, data = data[:1], data[1:]
    year_digits, rest = split_at(data, 4)
    if len(year_digits) != 4 or not is_digits(year_digits):
        raise ValueError(f"expected a four-digit year, got {year_digits!r}")
    return parse_int(sign + year_digits), rest


def _digits(data: bytes) -> int:
    if not is_digits(data):
        raise ValueError(f"expected digits, got {data!r}")
    return int(data)


def _parse_iso_date(data: bytes) -> Date:
    if not is_single_byte(data):
        raise ValueError("date contains non-ASCII bytes")

    year, rest = _split_year(data)
    extended = rest[:1] == b"-"
    if extended:
        rest = rest[1:]

    if rest[:1] == b"W":
        week_part = rest[1:]
        if len(week_part) == 2:
            return Date.from_yw(year, _digits(week_part))
        if extended and len(week_part) == 4 and week_part[2:3] == b"-":
            week, weekday = split_at(week_part, 2)
            return Date.from_ywd(year, _digits(week), _digits(weekday[1:]))
        if not extended and len(week_part) == 3:
            week, weekday = split_at(week_part, 2)
            return Date.from_ywd(year, _digits(week), _digits(weekday))
        raise ValueError(f"malformed week date: {data!r}")

    if len(rest) == 3:
        return Date.from_yd(year, _digits(rest))

    if extended:
        if len(rest) == 2:
            return Date(year, _digits(rest), 1)
        if len(rest) == 5 and rest[2:3] == b"-":
            month, day = split_at(rest, 2)
            return Date(year, _digits(month), _digits(day[1:]))
    elif len(rest) == 4:
        month, day = split_at(rest, 2)
        return Date(year, _digits(month), _digits(day))

    raise ValueError(f"malformed date: {data!r}")


__all__ = ["Date"]
