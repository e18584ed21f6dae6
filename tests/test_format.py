"""Tests for the type-dispatching ISO 8601 functions."""

import pytest

import wallclock
from wallclock import Date, DateTime, Time, format_iso8601, parse_iso8601
from wallclock.errors import InvalidDateTimeFormat, ParseError


class TestParseIso8601:
    """Tests for parse_iso8601."""

    def test_date(self) -> None:
        """A bare date parses to a Date."""
        assert parse_iso8601("2024-01-15") == Date(2024, 1, 15)
        assert parse_iso8601("2024-W03-1") == Date(2024, 1, 15)

    def test_time(self) -> None:
        """A leading T, or a non-date shape, parses to a Time."""
        assert parse_iso8601("T14:30") == Time(14, 30, 0)
        assert parse_iso8601("14:30:45,25") == Time(14, 30, 45, 250_000_000)
        assert parse_iso8601("14:30Z") == Time(14, 30, 0)

    def test_datetime(self) -> None:
        """A T after the first character parses to a DateTime."""
        result = parse_iso8601("2024-01-15T14:30:45Z")
        assert isinstance(result, DateTime)
        assert result == DateTime.from_ymdhmsn(2024, 1, 15, 14, 30, 45)

    def test_bytes(self) -> None:
        """Bytes are accepted as well as text."""
        assert parse_iso8601(b"2024-01-15") == Date(2024, 1, 15)

    def test_invalid_datetime(self) -> None:
        """A DateTime-shaped input reports InvalidDateTimeFormat."""
        with pytest.raises(InvalidDateTimeFormat):
            parse_iso8601("2024-13-45T00:00")

    @pytest.mark.parametrize("text", ["", "nonsense", "12:61", "2024-1-1", "12:00\ud800"])
    def test_invalid(self, text: str) -> None:
        """Anything else raises ParseError."""
        with pytest.raises(ParseError):
            parse_iso8601(text)


class TestFormatIso8601:
    """Tests for format_iso8601."""

    def test_each_type(self) -> None:
        """Each type formats with its own to_iso_str."""
        assert format_iso8601(Date(2024, 1, 15)) == "2024-01-15"
        assert format_iso8601(Time(14, 30, 45, 120_000_000)) == "14:30:45,12"
        assert format_iso8601(DateTime.from_ymdhmsn(2024, 1, 15, 9)) == (
            "2024-01-15T09:00:00"
        )

    def test_type_error(self) -> None:
        """Other values are rejected."""
        with pytest.raises(TypeError):
            format_iso8601(42)  # type: ignore[arg-type]


def test_package_exports() -> None:
    """The top-level package exposes the public API."""
    for name in ("Date", "DateTime", "Duration", "Time", "parse_iso8601", "format_iso8601"):
        assert name in wallclock.__all__
