"""DateTime class combining a calendar date and a time of day.

This module provides the DateTime class, a plain (date, time) pair with
nanosecond precision. Arithmetic below one day goes through the Time
component and carries whole days into the Date; calendar arithmetic
(days, months, years) is delegated to Date unchanged.
"""

from __future__ import annotations

import datetime as _datetime
import logging
from typing import TYPE_CHECKING

from wallclock._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from wallclock.core.date import Date
from wallclock.core.time import Time
from wallclock.errors import (
    InvalidDateTimeFormat,
    OverflowError,
    ParseError,
    ValidationError,
)

if TYPE_CHECKING:
    from wallclock.core.duration import Duration

logger = logging.getLogger(__name__)


class DateTime:
    """A calendar date combined with a time of day.

    A DateTime holds a Date and a Time. The Time may transiently carry a
    non-canonical hour (for example after combining a parsed time whose
    offset crossed midnight); ``normalize`` folds such an hour into the
    date so that the time is back within 00:00:00 to 23:59:59.999999999.

    Attributes:
        date: The Date component.
        time: The Time component.

    Examples:
        >>> dt = DateTime.from_ymdhmsn(2024, 1, 15, 23, 30, 0, 0)
        >>> dt.add_hours(1)
        DateTime(2024, 1, 16, 0, 30, 0, nanosecond=0)

        >>> DateTime(Date(2024, 1, 15), Time(-1, 30, 0)).normalize()
        DateTime(2024, 1, 14, 23, 30, 0, nanosecond=0)
    """

    __slots__ = ("_date", "_time")

    def __init__(self, date: Date, time: Time | None = None) -> None:
        """Create a DateTime from a Date and an optional Time (midnight)."""
        self._date: Date = date
        self._time: Time = time if time is not None else Time.midnight()

    @classmethod
    def from_ymdhmsn(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> DateTime:
        """Create a DateTime from calendar date and time components.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> DateTime.from_ymdhmsn(1971, 1, 1, 0, 0, 0, 0)
            DateTime(1971, 1, 1, 0, 0, 0, nanosecond=0)
        """
        return cls(
            Date.from_ymd(year, month, day),
            Time.from_hmsn(hour, minute, second, nanosecond),
        )

    @classmethod
    def from_ydhmsn(
        cls,
        year: int,
        day_of_year: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> DateTime:
        """Create a DateTime from an ordinal date and time components."""
        return cls(
            Date.from_yd(year, day_of_year),
            Time.from_hmsn(hour, minute, second, nanosecond),
        )

    @classmethod
    def from_ywdhmsn(
        cls,
        year: int,
        week: int,
        weekday: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> DateTime:
        """Create a DateTime from an ISO week date and time components."""
        return cls(
            Date.from_ywd(year, week, weekday),
            Time.from_hmsn(hour, minute, second, nanosecond),
        )

    @classmethod
    def unix_epoch(cls) -> DateTime:
        """Return 1970-01-01T00:00:00."""
        return cls(Date.unix_epoch(), Time.midnight())

    @classmethod
    def now(cls) -> DateTime:
        """Return the current local date and time."""
        now = _datetime.datetime.now()
        return cls.from_ymdhmsn(
            now.year,
            now.month,
            now.day,
            now.hour,
            now.minute,
            now.second,
            now.microsecond * NANOS_PER_MICROSECOND,
        )

    @classmethod
    def from_nanos_since_epoch(cls, nanos: int) -> DateTime:
        """Create a canonical DateTime from nanoseconds since the Unix epoch.

        Examples:
            >>> DateTime.from_nanos_since_epoch(-1)
            DateTime(1969, 12, 31, 23, 59, 59, nanosecond=999999999)
        """
        # divmod floors, so time_nanos is never negative
        days, time_nanos = divmod(nanos, NANOS_PER_DAY)
        return cls(
            Date.from_nanos_since_epoch(days * NANOS_PER_DAY),
            Time.from_nanos_since_midnight(time_nanos),
        )

    @classmethod
    def from_iso_str(cls, s: str) -> DateTime:
        """Parse a date-time from ISO 8601 text. See from_iso_u8."""
        return cls.from_iso_u8(s.encode("utf-8", "surrogatepass"))

    @classmethod
    def from_iso_u8(cls, data: bytes) -> DateTime:
        """Parse a date-time from ISO 8601 bytes.

        The input is split on ``T``. With one ``T`` the left side is parsed
        as a Date and the right side as a Time (offset included), and the
        pair is normalized, so an offset that crosses midnight moves the
        date. Without a ``T`` the whole input is a Date at midnight.

        Raises:
            InvalidDateTimeFormat: If either part is invalid, or the input
                contains more than one ``T``.

        Examples:
            >>> DateTime.from_iso_u8(b"2024-01-15T14:30:45,5")
            DateTime(2024, 1, 15, 14, 30, 45, nanosecond=500000000)

            >>> DateTime.from_iso_u8(b"2024-01-15T00:30:00+01:00")
            DateTime(2024, 1, 14, 23, 30, 0, nanosecond=0)

            >>> DateTime.from_iso_u8(b"2024-01-15")
            DateTime(2024, 1, 15, 0, 0, 0, nanosecond=0)
        """
        try:
            return _parse_iso_datetime(data)
        except (ValueError, ParseError, ValidationError, OverflowError) as exc:
            logger.debug("rejected ISO 8601 date-time %r: %s", data, exc)
            raise InvalidDateTimeFormat(
                f"invalid ISO 8601 date-time: {data!r}"
            ) from exc

    # Components

    @property
    def date(self) -> Date:
        """Return the Date component."""
        return self._date

    @property
    def time(self) -> Time:
        """Return the Time component."""
        return self._time

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def nanosecond(self) -> int:
        return self._time.nanosecond

    # Conversion and normalization

    def to_nanos_since_epoch(self) -> int:
        """Return the signed number of nanoseconds since the Unix epoch."""
        return (
            self._date.to_nanos_since_epoch()
            + self._time.to_nanos_since_midnight()
        )

    def normalize(self) -> DateTime:
        """Return the same instant with a canonical time.

        The hour is cleared and then added back with add_hours, so any
        hour outside 0-23 becomes a carry of whole days into the date.
        """
        time = self._time
        start_of_hour = DateTime(
            self._date,
            Time.from_hmsn(0, time.minute, time.second, time.nanosecond),
        )
        return start_of_hour.add_hours(time.hour)

    # Arithmetic

    def add_nanoseconds(self, nanoseconds: int) -> DateTime:
        """Return this date-time shifted by nanoseconds.

        Whole days of carry (negative when moving backwards past midnight)
        are added to the date; the time stays canonical.

        Raises:
            ValidationError: If the date leaves the supported year range.
        """
        raw = self._time.to_nanos_since_midnight() + nanoseconds
        # divmod floors, so a negative raw carries into the previous day
        carry_days, time_nanos = divmod(raw, NANOS_PER_DAY)
        return DateTime(
            self._date.add_days(carry_days),
            Time.from_nanos_since_midnight(time_nanos),
        )

    def add_seconds(self, seconds: int) -> DateTime:
        """Return this date-time shifted by seconds."""
        return self.add_nanoseconds(seconds * NANOS_PER_SECOND)

    def add_minutes(self, minutes: int) -> DateTime:
        """Return this date-time shifted by minutes."""
        return self.add_nanoseconds(minutes * NANOS_PER_MINUTE)

    def add_hours(self, hours: int) -> DateTime:
        """Return this date-time shifted by hours."""
        return self.add_nanoseconds(hours * NANOS_PER_HOUR)

    def add_days(self, days: int) -> DateTime:
        """Return this date-time with the date shifted by days."""
        return DateTime(self._date.add_days(days), self._time)

    def add_months(self, months: int) -> DateTime:
        """Return this date-time with the date shifted by months.

        The day is clamped to the end of the target month.
        """
        return DateTime(self._date.add_months(months), self._time)

    def add_years(self, years: int) -> DateTime:
        """Return this date-time with the date shifted by years."""
        return DateTime(self._date.add_years(years), self._time)

    def add_duration(self, duration: Duration) -> DateTime:
        """Return this date-time shifted by a Duration."""
        from wallclock.arithmetic.ops import add_datetime_and_duration

        return add_datetime_and_duration(self, duration)

    # ISO format

    def to_iso_str(self) -> str:
        """Return the date-time as ISO 8601 text.

        Examples:
            >>> DateTime.from_ymdhmsn(2024, 1, 15, 14, 30, 45, 0).to_iso_str()
            '2024-01-15T14:30:45'
        """
        return f"{self._date.to_iso_str()}T{self._time.to_iso_str()}"

    def to_iso_u8(self) -> bytes:
        """Return the ISO 8601 text of to_iso_str as bytes."""
        return self._date.to_iso_u8() + b"T" + self._time.to_iso_u8()

    # Operators

    def __add__(self, other: object) -> DateTime:
        from wallclock.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.add_duration(other)

    def __radd__(self, other: object) -> DateTime:
        from wallclock.arithmetic.ops import add_duration_and_datetime
        from wallclock.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return add_duration_and_datetime(other, self)

    def __sub__(self, other: object) -> DateTime:
        from wallclock.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.add_duration(-other)

    def _sort_key(self) -> tuple[int, Date]:
        # Instant first; the date splits equal instants such as 24:00 and
        # the next day's 00:00
        return self.to_nanos_since_epoch(), self._date

    def __eq__(self, other: object) -> bool:
        """Check component-wise equality of date and time."""
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._date == other._date and self._time == other._time

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __hash__(self) -> int:
        return hash((self._date, self._time))

    def __repr__(self) -> str:
        return (
            f"DateTime({self.year}, {self.month}, {self.day}, {self.hour}, "
            f"{self.minute}, {self.second}, nanosecond={self.nanosecond})"
        )

    def __str__(self) -> str:
        return self.to_iso_str()

    def __bool__(self) -> bool:
        """DateTimes are always truthy."""
        return True


def _parse_iso_datetime(data: bytes) -> DateTime:
    parts = data.split(b"T")
    if len(parts) == 1:
        return DateTime(Date.from_iso_u8(data), Time.midnight())
    if len(parts) == 2:
        date_part, time_part = parts
        date = Date.from_iso_u8(date_part)
        time = Time.from_iso_u8(time_part)
        return DateTime(date, time).normalize()
    raise ValueError(f"expected at most one 'T' designator, got {len(parts) - 1}")


__all__ = ["DateTime"]
