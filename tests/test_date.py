"""
Tests for nightly dates and unsigned integer parsing.

Validates that:
1. Only plain ASCII digit strings parse as unsigned integers
2. YYYY-MM-DD parses and formats back to the same Date
3. Out-of-range components are rejected
4. Dates order chronologically
"""

import pytest

from rustgate.toolchain.date import Date, parse_unsigned


class TestParseUnsigned:
    """Test the strict unsigned integer parser."""

    @pytest.mark.parametrize("text,expected", [("0", 0), ("7", 7), ("0042", 42), ("65535", 65535)])
    def test_accepts_plain_digits(self, text, expected):
        """Plain ASCII digit strings parse to their value."""
        assert parse_unsigned(text) == expected

    @pytest.mark.parametrize("text", ["", "+1", "-1", " 1", "1 ", "1_000", "1.0", "x", "١"])
    def test_rejects_everything_else(self, text):
        """Signs, whitespace, separators and non-ASCII digits are rejected."""
        with pytest.raises(ValueError, match="not an unsigned integer"):
            parse_unsigned(text)


class TestDate:
    """Test Date construction, parsing and formatting."""

    def test_from_str(self):
        """YYYY-MM-DD parses into its components."""
        assert Date.from_str("2019-04-27") == Date(2019, 4, 27)

    @pytest.mark.parametrize("date", [
        Date(2019, 4, 27),
        Date(2000, 1, 1),
        Date(999, 12, 31),
        Date(0, 0, 0),
        Date(2999, 12, 31),
    ])
    def test_format_then_parse_is_identity(self, date):
        """Formatting a date and parsing it back yields the same date."""
        assert Date.from_str(str(date)) == date

    def test_str_is_zero_padded(self):
        """Components are zero-padded to 4-2-2 digits."""
        assert str(Date(999, 1, 2)) == "0999-01-02"
        assert repr(Date(2019, 1, 2)) == "Date(2019-01-02)"

    def test_no_calendar_check(self):
        """Only the fixed bounds apply; there is no calendar validation."""
        assert Date.from_str("2019-02-31") == Date(2019, 2, 31)

    @pytest.mark.parametrize("year,month,day,match", [
        (3000, 1, 1, "year"),
        (2019, 13, 1, "month"),
        (2019, 1, 32, "day"),
    ])
    def test_out_of_range_rejected(self, year, month, day, match):
        """Year below 3000, month <= 12, day <= 31."""
        with pytest.raises(ValueError, match=match):
            Date(year, month, day)

    @pytest.mark.parametrize("text", ["2019-04", "2019-04-27-1", "2019-4-x", "2019/04/27", "", "-04-27"])
    def test_malformed_text_rejected(self, text):
        """Anything other than three dash-separated numbers is rejected."""
        with pytest.raises(ValueError):
            Date.from_str(text)

    def test_chronological_order(self):
        """Dates order by year, then month, then day."""
        dates = [Date(2020, 1, 1), Date(2019, 2, 1), Date(2019, 1, 2), Date(2019, 1, 1)]
        assert sorted(dates) == [Date(2019, 1, 1), Date(2019, 1, 2), Date(2019, 2, 1), Date(2020, 1, 1)]

    def test_today_is_valid(self):
        """today() produces a Date inside the accepted range."""
        assert isinstance(Date.today(), Date)
