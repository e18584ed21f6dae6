"""Time class representing a time of day.

This module provides the Time class for representing wall-clock
time-of-day values with nanosecond precision, together with its
ISO 8601 codec.

Unlike minute, second and nanosecond, the hour is not confined to 0-23.
Values such as -1 (an hour before midnight) or 24 (midnight at the end of
the day) are legal intermediate representations; ``normalize`` folds them
back into the canonical range.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import math
from enum import Enum
from fractions import Fraction
from typing import TYPE_CHECKING

from wallclock._internal.bytestr import (
    is_digits,
    is_single_byte,
    parse_fraction,
    parse_int,
    split_at,
    split_keep,
    zero_pad,
)
from wallclock._internal.constants import (
    FRACTION_DIGITS,
    HOUR_MAX,
    HOUR_MIN,
    HOURS_PER_DAY,
    MAX_OFFSET_NANOS,
    MIN_OFFSET_NANOS,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from wallclock.errors import (
    InvalidTimeFormat,
    OverflowError,
    ValidationError,
)

if TYPE_CHECKING:
    from wallclock.core.duration import Duration

logger = logging.getLogger(__name__)


class Time:
    """A time of day with nanosecond precision.

    A Time is four fields: a signed hour (stored in the range of a signed
    8-bit integer), and a canonical minute (0-59), second (0-59) and
    nanosecond (0-999999999). A Time is *canonical* when its hour is 0-23.

    Attributes:
        hour: The hour component (-128 to 127, canonical 0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        nanosecond: The nanosecond component (0-999999999).

    Examples:
        >>> t = Time(14, 30, 45)
        >>> t.add_hours(12)
        Time(26, 30, 45, nanosecond=0)
        >>> t.add_hours(12).normalize()
        Time(2, 30, 45, nanosecond=0)

        >>> Time.from_nanos_since_midnight(-123)
        Time(-1, 59, 59, nanosecond=999999877)
    """

    __slots__ = ("_hour", "_minute", "_second", "_nanosecond")

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a Time from component parts.

        Args:
            hour: The hour (-128 to 127; 0-23 for a canonical time).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The nanosecond (0-999999999).

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Time(24, 0, 0)
            Time(24, 0, 0, nanosecond=0)
        """
        if not (HOUR_MIN <= hour <= HOUR_MAX):
            raise ValidationError(
                f"hour must be between {HOUR_MIN} and {HOUR_MAX}, got {hour}"
            )
        if not (0 <= minute <= 59):
            raise ValidationError(f"minute must be between 0 and 59, got {minute}")
        if not (0 <= second <= 59):
            raise ValidationError(f"second must be between 0 and 59, got {second}")
        if not (0 <= nanosecond <= 999_999_999):
            raise ValidationError(
                f"nanosecond must be between 0 and 999999999, got {nanosecond}"
            )

        self._hour: int = hour
        self._minute: int = minute
        self._second: int = second
        self._nanosecond: int = nanosecond

    @classmethod
    def from_hmsn(
        cls,
        hour: int,
        minute: int,
        second: int,
        nanosecond: int,
    ) -> Time:
        """Create a Time from hour, minute, second and nanosecond.

        Raises:
            ValidationError: If any component is out of range.
        """
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def midnight(cls) -> Time:
        """Return a Time representing midnight (00:00:00)."""
        return cls(0, 0, 0, 0)

    @classmethod
    def noon(cls) -> Time:
        """Return a Time representing noon (12:00:00)."""
        return cls(12, 0, 0, 0)

    @classmethod
    def now(cls) -> Time:
        """Return the current local time of day."""
        now = _datetime.datetime.now()
        return cls(
            now.hour,
            now.minute,
            now.second,
            now.microsecond * NANOS_PER_MICROSECOND,
        )

    @classmethod
    def from_nanos_since_midnight(cls, nanos: int) -> Time:
        """Create a Time from a signed count of nanoseconds since midnight.

        Minute, second and nanosecond are taken from the floor remainder of
        nanos modulo one day, so they are always canonical. The hour is
        whatever remains of the original, unreduced value, which lets it
        carry both the sign and any whole days.

        Args:
            nanos: Nanoseconds since midnight (negative or past one day
                allowed).

        Returns:
            A Time whose to_nanos_since_midnight() equals nanos.

        Raises:
            OverflowError: If the resulting hour does not fit in the
                signed 8-bit hour field.

        Examples:
            >>> Time.from_nanos_since_midnight(3_600_000_000_000)
            Time(1, 0, 0, nanosecond=0)

            >>> Time.from_nanos_since_midnight(-123)
            Time(-1, 59, 59, nanosecond=999999877)
        """
        remainder = nanos % NANOS_PER_DAY
        minute = (remainder % NANOS_PER_HOUR) // NANOS_PER_MINUTE
        second = (remainder % NANOS_PER_MINUTE) // NANOS_PER_SECOND
        nanosecond = remainder % NANOS_PER_SECOND

        below_hour = (
            minute * NANOS_PER_MINUTE + second * NANOS_PER_SECOND + nanosecond
        )
        hour = _divide_truncating(nanos - below_hour, NANOS_PER_HOUR)
        if not (HOUR_MIN <= hour <= HOUR_MAX):
            raise OverflowError(
                f"hour {hour} does not fit between {HOUR_MIN} and {HOUR_MAX}"
            )
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def from_iso_str(cls, s: str) -> Time:
        """Parse a time from ISO 8601 text. See from_iso_u8."""
        return cls.from_iso_u8(s.encode("utf-8", "surrogatepass"))

    @classmethod
    def from_iso_u8(cls, data: bytes) -> Time:
        """Parse a time from ISO 8601 bytes.

        Accepts ``HH``, ``HHMM``, ``HH:MM``, ``HHMMSS`` and ``HH:MM:SS``,
        each optionally preceded by ``T``, followed by a fraction of the
        last field (``.`` or ``,``), and then either ``Z`` or an offset
        ``+HH``, ``+HHMM``, ``+HH:MM`` (or ``-``), but not both.

        The offset is subtracted, so the result is the UTC time of day.
        The result is not normalized: ``24:00:00`` keeps hour 24 and an
        offset may leave an hour of -1 or past 23.

        Raises:
            InvalidTimeFormat: If data is not a valid ISO 8601 time.

        Examples:
            >>> Time.from_iso_u8(b"12:30:00,5")
            Time(12, 30, 0, nanosecond=500000000)

            >>> Time.from_iso_u8(b"12:00:00+01:00")
            Time(11, 0, 0, nanosecond=0)

            >>> Time.from_iso_u8(b"T0930.5Z")
            Time(9, 30, 30, nanosecond=0)
        """
        try:
            return _parse_iso_time(data)
        except (ValueError, ValidationError, OverflowError) as exc:
            logger.debug("rejected ISO 8601 time %r: %s", data, exc)
            raise InvalidTimeFormat(f"invalid ISO 8601 time: {data!r}") from exc

    @property
    def hour(self) -> int:
        """Return the hour component (may be outside 0-23)."""
        return self._hour

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return self._minute

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return self._second

    @property
    def nanosecond(self) -> int:
        """Return the nanosecond within the second (0-999999999)."""
        return self._nanosecond

    @property
    def millisecond(self) -> int:
        """Return the millisecond within the second (0-999)."""
        return self._nanosecond // NANOS_PER_MILLISECOND

    @property
    def microsecond(self) -> int:
        """Return the microsecond within the second (0-999999)."""
        return self._nanosecond // NANOS_PER_MICROSECOND

    @property
    def is_canonical(self) -> bool:
        """Return True if the hour is within 0-23."""
        return 0 <= self._hour < HOURS_PER_DAY

    def to_nanos_since_midnight(self) -> int:
        """Return the signed number of nanoseconds since midnight.

        Examples:
            >>> Time(0, 0, 1).to_nanos_since_midnight()
            1000000000
            >>> Time(-1, 59, 59, 999_999_877).to_nanos_since_midnight()
            -123
        """
        return (
            self._hour * NANOS_PER_HOUR
            + self._minute * NANOS_PER_MINUTE
            + self._second * NANOS_PER_SECOND
            + self._nanosecond
        )

    def normalize(self) -> Time:
        """Return the canonical Time for the same time of day.

        The hour is reduced with floor modulo 24, so -1 becomes 23 and 24
        becomes 0.

        Examples:
            >>> Time(-1, 30, 0).normalize()
            Time(23, 30, 0, nanosecond=0)
        """
        return Time.from_hmsn(
            self._hour % HOURS_PER_DAY,
            self._minute,
            self._second,
            self._nanosecond,
        )

    def add_nanoseconds(self, nanoseconds: int) -> Time:
        """Return this time shifted by nanoseconds; the hour is not wrapped.

        Raises:
            OverflowError: If the resulting hour does not fit.
        """
        return Time.from_nanos_since_midnight(
            self.to_nanos_since_midnight() + nanoseconds
        )

    def add_seconds(self, seconds: int) -> Time:
        """Return this time shifted by seconds."""
        return self.add_nanoseconds(seconds * NANOS_PER_SECOND)

    def add_minutes(self, minutes: int) -> Time:
        """Return this time shifted by minutes."""
        return self.add_nanoseconds(minutes * NANOS_PER_MINUTE)

    def add_hours(self, hours: int) -> Time:
        """Return this time shifted by hours.

        Examples:
            >>> Time(1, 0, 0).add_hours(-2)
            Time(-1, 0, 0, nanosecond=0)
        """
        return self.add_nanoseconds(hours * NANOS_PER_HOUR)

    def add_duration(self, duration: Duration) -> Time:
        """Return this time shifted by a Duration."""
        from wallclock.arithmetic.ops import add_time_and_duration

        return add_time_and_duration(self, duration)

    def to_iso_str(self) -> str:
        """Return the time as ISO 8601 extended text.

        The fraction uses a comma and only as many digits as needed; a
        zero nanosecond adds no fraction at all.

        Examples:
            >>> Time(14, 30, 45).to_iso_str()
            '14:30:45'

            >>> Time(14, 30, 45, 500_000_000).to_iso_str()
            '14:30:45,5'

            >>> Time(0, 0, 0, 5).to_iso_str()
            '00:00:00,000000005'
        """
        base = ":".join(
            zero_pad(field, 2) for field in (self._hour, self._minute, self._second)
        )
        return base + _fraction_suffix(self._nanosecond)

    def to_iso_u8(self) -> bytes:
        """Return the ISO 8601 text of to_iso_str as bytes."""
        return self.to_iso_str().encode("ascii")

    def __add__(self, other: object) -> Time:
        from wallclock.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.add_duration(other)

    def __radd__(self, other: object) -> Time:
        from wallclock.arithmetic.ops import add_duration_and_time
        from wallclock.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return add_duration_and_time(other, self)

    def __sub__(self, other: object) -> Time:
        from wallclock.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.add_duration(-other)

    def __eq__(self, other: object) -> bool:
        """Check field-wise equality; 24:00:00 is not equal to 00:00:00."""
        if not isinstance(other, Time):
            return NotImplemented
        return self.to_nanos_since_midnight() == other.to_nanos_since_midnight()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.to_nanos_since_midnight() < other.to_nanos_since_midnight()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.to_nanos_since_midnight() <= other.to_nanos_since_midnight()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.to_nanos_since_midnight() > other.to_nanos_since_midnight()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.to_nanos_since_midnight() >= other.to_nanos_since_midnight()

    def __hash__(self) -> int:
        return hash(self.to_nanos_since_midnight())

    def __repr__(self) -> str:
        return (
            f"Time({self._hour}, {self._minute}, {self._second}, "
            f"nanosecond={self._nanosecond})"
        )

    def __str__(self) -> str:
        return self.to_iso_str()

    def __bool__(self) -> bool:
        """Times are always truthy, even midnight."""
        return True


def _divide_truncating(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def _fraction_suffix(nanosecond: int) -> str:
    """Return the minimal ISO 8601 fraction for nanosecond, or ''."""
    if nanosecond == 0:
        return ""

    width = FRACTION_DIGITS
    remaining = nanosecond
    while remaining % 10 == 0:
        remaining //= 10
        width -= 1

    return ("," + zero_pad(nanosecond, FRACTION_DIGITS))[: width + 1]


# ISO 8601 parsing


class _Shape(Enum):
    """Lexical shapes of a time string once split on its delimiters."""

    WHOLE = "whole"
    FRACTIONAL = "fractional"
    OFFSET = "offset"
    FRACTIONAL_OFFSET = "fractional_offset"


class _Unit(Enum):
    """Finest field of a whole time, valued in nanoseconds."""

    HOUR = NANOS_PER_HOUR
    MINUTE = NANOS_PER_MINUTE
    SECOND = NANOS_PER_SECOND


_DELIMITERS = b".,+-"
_RADIX_POINTS = (b".", b",")
_SIGNS = (b"+", b"-")


def _strip_designators(data: bytes) -> tuple[bytes, bool]:
    """Strip one leading ``T`` and one trailing ``Z``.

    Returns the remaining bytes and whether a ``Z`` was present.
    """
    has_utc = data[-1:] == b"Z"
    if data[:1] == b"T":
        data = data[1:]
    if data[-1:] == b"Z":
        data = data[:-1]
    return data, has_utc


def _classify(segments: list[bytes]) -> _Shape:
    if len(segments) == 1:
        return _Shape.WHOLE
    if len(segments) == 3 and segments[1] in _RADIX_POINTS:
        return _Shape.FRACTIONAL
    if len(segments) == 3 and segments[1] in _SIGNS:
        return _Shape.OFFSET
    if (
        len(segments) == 5
        and segments[1] in _RADIX_POINTS
        and segments[3] in _SIGNS
    ):
        return _Shape.FRACTIONAL_OFFSET
    raise ValueError(f"unrecognized time shape: {b''.join(segments)!r}")


def _field(data: bytes) -> int:
    if not is_digits(data):
        raise ValueError(f"expected digits, got {data!r}")
    return parse_int(data)


def _parse_whole(data: bytes) -> tuple[Time, _Unit]:
    """Parse a time without fraction or offset, and report its finest unit."""
    size = len(data)
    minute = second = 0
    if size == 2:
        hour, unit = _field(data), _Unit.HOUR
    elif size == 4:
        hh, mm = split_at(data, 2)
        hour, minute, unit = _field(hh), _field(mm), _Unit.MINUTE
    elif size == 5 and data[2:3] == b":":
        hh, _, mm = split_at(data, 2, 3)
        hour, minute, unit = _field(hh), _field(mm), _Unit.MINUTE
    elif size == 6:
        hh, mm, ss = split_at(data, 2, 4)
        hour, minute, second = _field(hh), _field(mm), _field(ss)
        unit = _Unit.SECOND
    elif size == 8 and data[2:3] == b":" and data[5:6] == b":":
        hh, _, mm, _, ss = split_at(data, 2, 3, 5, 6)
        hour, minute, second = _field(hh), _field(mm), _field(ss)
        unit = _Unit.SECOND
    else:
        raise ValueError(f"unrecognized time of day: {data!r}")

    if not (0 <= hour <= 24):
        raise ValueError(f"hour out of range: {hour}")
    if minute > 59 or second > 59:
        raise ValueError(f"minute or second out of range: {data!r}")
    # 24:00:00 is the end of the day; no later 24:xx time exists
    if hour == 24 and (minute or second):
        raise ValueError(f"hour 24 only allowed at 24:00:00, got {data!r}")

    return Time(hour, minute, second), unit


def _round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))


def _parse_fractional(whole: bytes, fraction: bytes) -> Time:
    from wallclock.arithmetic.ops import add_time_and_duration
    from wallclock.core.duration import Duration

    time, unit = _parse_whole(whole)
    nanos = _round_half_up(parse_fraction(fraction) * unit.value)
    if time.hour == 24 and nanos:
        raise ValueError("no fraction allowed after 24:00:00")
    return add_time_and_duration(time, Duration.from_nanoseconds(nanos))


def _parse_offset(sign: bytes, data: bytes) -> Duration:
    """Return the duration that moves local time to UTC for an offset."""
    from wallclock.core.duration import Duration

    size = len(data)
    if size == 2:
        hours, minutes = _field(data), 0
    elif size == 4:
        hh, mm = split_at(data, 2)
        hours, minutes = _field(hh), _field(mm)
    elif size == 5 and data[2:3] == b":":
        hh, _, mm = split_at(data, 2, 3)
        hours, minutes = _field(hh), _field(mm)
    else:
        raise ValueError(f"unrecognized offset: {data!r}")

    if minutes > 59:
        raise ValueError(f"offset minute out of range: {minutes}")

    magnitude = hours * NANOS_PER_HOUR + minutes * NANOS_PER_MINUTE
    # Local time ahead of UTC (+) is brought back by subtracting
    correction = -magnitude if sign == b"+" else magnitude
    if not (MIN_OFFSET_NANOS <= correction <= MAX_OFFSET_NANOS):
        raise ValueError(f"offset out of range: {sign + data!r}")
    return Duration.from_nanoseconds(correction)


def _parse_iso_time(data: bytes) -> Time:
    from wallclock.arithmetic.ops import add_time_and_duration

    if not is_single_byte(data):
        raise ValueError("time contains non-ASCII bytes")

    body, has_utc = _strip_designators(data)
    segments = split_keep(body, _DELIMITERS)
    shape = _classify(segments)

    if shape in (_Shape.OFFSET, _Shape.FRACTIONAL_OFFSET) and has_utc:
        raise ValueError("a time cannot carry both Z and a numeric offset")

    if shape is _Shape.WHOLE:
        time, _ = _parse_whole(segments[0])
    elif shape is _Shape.FRACTIONAL:
        time = _parse_fractional(segments[0], segments[2])
    elif shape is _Shape.OFFSET:
        time, _ = _parse_whole(segments[0])
        time = add_time_and_duration(time, _parse_offset(segments[1], segments[2]))
    elif shape is _Shape.FRACTIONAL_OFFSET:
        time = _parse_fractional(segments[0], segments[2])
        time = add_time_and_duration(time, _parse_offset(segments[3], segments[4]))
    else:
        raise AssertionError(f"unhandled time shape: {shape}")

    return time


__all__ = ["Time"]
