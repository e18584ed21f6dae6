"""Tests for the Time ISO 8601 codec."""

import pytest

from wallclock.core.time import Time
from wallclock.errors import InvalidTimeFormat, ParseError


class TestTimeFormat:
    """Tests for Time.to_iso_str and Time.to_iso_u8."""

    def test_no_fraction(self) -> None:
        """A zero nanosecond has no fraction."""
        assert Time(0, 0, 0).to_iso_str() == "00:00:00"
        assert Time(14, 30, 45).to_iso_str() == "14:30:45"

    def test_smallest_fraction(self) -> None:
        """One digit short of nine is never trimmed."""
        assert Time(0, 0, 0, 5).to_iso_str() == "00:00:00,000000005"

    def test_half_second(self) -> None:
        """Trailing zeros are trimmed."""
        assert Time(12, 0, 0, 500_000_000).to_iso_str() == "12:00:00,5"

    @pytest.mark.parametrize(
        ("nanosecond", "suffix"),
        [
            (10, ",00000001"),
            (120_000_000, ",12"),
            (123_000_000, ",123"),
            (123_456_000, ",123456"),
            (123_456_789, ",123456789"),
            (100_000_001, ",100000001"),
        ],
    )
    def test_minimal_fraction(self, nanosecond: int, suffix: str) -> None:
        """The fraction has exactly as many digits as needed."""
        assert Time(1, 2, 3, nanosecond).to_iso_str() == "01:02:03" + suffix

    def test_non_canonical_hours(self) -> None:
        """Hours are padded to two characters and never truncated."""
        assert Time(-1, 59, 59).to_iso_str() == "-1:59:59"
        assert Time(-12, 0, 0).to_iso_str() == "-12:00:00"
        assert Time(24, 0, 0).to_iso_str() == "24:00:00"
        assert Time(100, 0, 0).to_iso_str() == "100:00:00"

    def test_to_iso_u8(self) -> None:
        """Byte output matches the text output."""
        t = Time(9, 5, 1, 250_000_000)
        assert t.to_iso_u8() == b"09:05:01,25"
        assert str(t) == "09:05:01,25"


class TestTimeParseShapes:
    """Tests for the accepted whole-time shapes."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12", Time(12, 0, 0)),
            ("1230", Time(12, 30, 0)),
            ("12:30", Time(12, 30, 0)),
            ("123045", Time(12, 30, 45)),
            ("12:30:45", Time(12, 30, 45)),
            ("00:00:00", Time(0, 0, 0)),
            ("23:59:59", Time(23, 59, 59)),
        ],
    )
    def test_whole_shapes(self, text: str, expected: Time) -> None:
        """Basic and extended forms at hour, minute and second granularity."""
        assert Time.from_iso_str(text) == expected

    @pytest.mark.parametrize("text", ["T12:30:45", "12:30:45Z", "T12:30:45Z", "T123045Z"])
    def test_designators(self, text: str) -> None:
        """A leading T and a trailing Z are stripped."""
        assert Time.from_iso_str(text) == Time(12, 30, 45)

    def test_bytes_and_text_agree(self) -> None:
        """from_iso_str is from_iso_u8 on the UTF-8 bytes."""
        assert Time.from_iso_u8(b"12:30:45,5") == Time.from_iso_str("12:30:45,5")


class TestTimeParseFraction:
    """Tests for fractional times."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12:30:45.5", Time(12, 30, 45, 500_000_000)),
            ("12:30:45,5", Time(12, 30, 45, 500_000_000)),
            ("12:30:45,123456789", Time(12, 30, 45, 123_456_789)),
            ("123045,000000001", Time(12, 30, 45, 1)),
            ("12:30,5", Time(12, 30, 30)),
            ("1230.25", Time(12, 30, 15)),
            ("12,5", Time(12, 30, 0)),
            ("12.25", Time(12, 15, 0)),
            ("00,1", Time(0, 6, 0)),
        ],
    )
    def test_fraction_scales_by_last_field(self, text: str, expected: Time) -> None:
        """The fraction applies to the finest field present."""
        assert Time.from_iso_str(text) == expected

    def test_round_half_up(self) -> None:
        """Half a nanosecond rounds up."""
        assert Time.from_iso_str("12:30:45.0000000005") == Time(12, 30, 45, 1)
        assert Time.from_iso_str("12:30:45.0000000004") == Time(12, 30, 45, 0)

    def test_rounding_carries(self) -> None:
        """Rounding up to a full second carries into the second."""
        assert Time.from_iso_str("12:30:45.9999999999") == Time(12, 30, 46, 0)

    def test_tiny_hour_fraction(self) -> None:
        """A fraction below half a nanosecond of an hour rounds away."""
        assert Time.from_iso_str("00,0000000000001") == Time(0, 0, 0, 0)

    def test_fraction_with_z(self) -> None:
        """A fraction may be followed by Z."""
        assert Time.from_iso_str("T0930.5Z") == Time(9, 30, 30)


class TestTimeParseOffset:
    """Tests for UTC offsets."""

    def test_positive_offset_subtracts(self) -> None:
        """+01:00 is an hour ahead of UTC."""
        assert Time.from_iso_str("12:00:00+01:00") == Time.from_iso_str("11:00:00Z")

    def test_negative_offset_adds(self) -> None:
        """-01:00 is an hour behind UTC."""
        assert Time.from_iso_str("12:00:00-01:00") == Time.from_iso_str("13:00:00Z")

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12+01", Time(11, 0, 0)),
            ("12:00+0130", Time(10, 30, 0)),
            ("1200-00:30", Time(12, 30, 0)),
            ("12:00:00,5+01:00", Time(11, 0, 0, 500_000_000)),
            ("T12:00:00.25-0200", Time(14, 0, 0, 250_000_000)),
        ],
    )
    def test_offset_shapes(self, text: str, expected: Time) -> None:
        """Offsets as HH, HHMM and HH:MM, with and without a fraction."""
        assert Time.from_iso_str(text) == expected

    def test_offset_crossing_midnight_backward(self) -> None:
        """The result is not normalized; the hour may become negative."""
        assert Time.from_iso_str("00:30:00+01:00") == Time(-1, 30, 0)

    def test_offset_crossing_midnight_forward(self) -> None:
        """The hour may pass 23."""
        assert Time.from_iso_str("23:30-01:00") == Time(24, 30, 0)

    def test_offset_bounds_inclusive(self) -> None:
        """Written offsets from -12:00 to +14:00 are accepted."""
        assert Time.from_iso_str("12:00+14:00") == Time(-2, 0, 0)
        assert Time.from_iso_str("12:00-12:00") == Time(24, 0, 0)

    @pytest.mark.parametrize(
        "text",
        ["12:00+14:01", "12:00-12:01", "12:00:00+15:00", "12:00-13", "12:00+01:60"],
    )
    def test_offset_out_of_range(self, text: str) -> None:
        """Offsets beyond the bounds are rejected."""
        with pytest.raises(InvalidTimeFormat):
            Time.from_iso_str(text)

    @pytest.mark.parametrize("text", ["12:00:00+01:00Z", "12:00:00,5-0100Z"])
    def test_z_and_offset_exclusive(self, text: str) -> None:
        """Z and a numeric offset cannot appear together."""
        with pytest.raises(InvalidTimeFormat):
            Time.from_iso_str(text)


class TestTimeParseEndOfDay:
    """Tests for the 24:00:00 allowance."""

    @pytest.mark.parametrize("text", ["24:00:00", "240000", "24:00", "2400", "24"])
    def test_end_of_day(self, text: str) -> None:
        """Hour 24 with zero minute and second is accepted as-is."""
        t = Time.from_iso_str(text)
        assert (t.hour, t.minute, t.second, t.nanosecond) == (24, 0, 0, 0)

    def test_end_of_day_zero_fraction(self) -> None:
        """A zero fraction after 24:00:00 adds nothing."""
        assert Time.from_iso_str("24:00:00,0") == Time(24, 0, 0)

    @pytest.mark.parametrize(
        "text", ["24:00:01", "24:01:00", "2401", "24:00:00,5", "24,5", "25:00:00"]
    )
    def test_past_end_of_day(self, text: str) -> None:
        """Anything later than 24:00:00 is rejected."""
        with pytest.raises(InvalidTimeFormat):
            Time.from_iso_str(text)


class TestTimeParseInvalid:
    """Tests for uniform rejection of malformed input."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "T",
            "Z",
            "TZ",
            "1",
            "123",
            "12:3",
            "12:30:4",
            "1:30:00",
            "12:60",
            "12:30:60",
            "12-30-00",
            "12:30:00.5.5",
            "12:30:00,",
            "12:30:00+",
            "12:30:00+1",
            "12:30:00+01:00:00",
            "ab:cd:ef",
            " 12:30:00",
            "12:30:00 ",
            "TT12:00",
            "12:30:00ZZ",
            "12;30;00",
            "+12:00",
            "12:30:00,5,5",
        ],
    )
    def test_rejected(self, text: str) -> None:
        """Every malformed input raises InvalidTimeFormat."""
        with pytest.raises(InvalidTimeFormat):
            Time.from_iso_str(text)

    @pytest.mark.parametrize("text", ["１２:00", "12:00é", "12:00:00+01:00 "])
    def test_multibyte_rejected(self, text: str) -> None:
        """Non-ASCII characters are rejected."""
        with pytest.raises(InvalidTimeFormat):
            Time.from_iso_str(text)

    @pytest.mark.parametrize("text", ["12:00\ud800", "\udcff12:00", "T12:00:00Z\udc80"])
    def test_lone_surrogate_rejected(self, text: str) -> None:
        """Text that cannot be UTF-8 encoded is rejected, not an encode error."""
        with pytest.raises(InvalidTimeFormat):
            Time.from_iso_str(text)

    def test_error_is_parse_error(self) -> None:
        """InvalidTimeFormat is a ParseError and chains its cause."""
        with pytest.raises(ParseError) as excinfo:
            Time.from_iso_str("12:61")
        assert isinstance(excinfo.value, InvalidTimeFormat)
        assert excinfo.value.__cause__ is not None


class TestTimeIsoRoundTrip:
    """Tests that formatting then parsing returns the same value."""

    @pytest.mark.parametrize(
        "t",
        [
            Time(0, 0, 0, 0),
            Time(0, 0, 0, 5),
            Time(12, 0, 0, 500_000_000),
            Time(7, 8, 9, 10),
            Time(13, 37, 0, 123_456_789),
            Time(23, 59, 59, 999_999_999),
        ],
    )
    def test_round_trip(self, t: Time) -> None:
        """from_iso_str(to_iso_str(t)) == t for canonical times."""
        assert Time.from_iso_str(t.to_iso_str()) == t
        assert Time.from_iso_u8(t.to_iso_u8()) == t
