"""Tests for Gregorian calendar rules."""
import calendar
from datetime import date, datetime
from business_logic.calendar_rules import is_leap_year
from utils.date_parser import parse_rfc2822
from utils.time_utils import INVALID_TIMESTAMP


class TestIsLeapYear:
    """Test leap year detection."""

    def test_known_years(self):
        """Test the classic spot checks."""
        assert is_leap_year(datetime(1900, 2, 1)) is False
        assert is_leap_year(datetime(2000, 2, 1)) is True
        assert is_leap_year(datetime(2001, 2, 1)) is False
        assert is_leap_year(datetime(2012, 2, 1)) is True
        assert is_leap_year(datetime(2015, 2, 1)) is False

    def test_plain_dates(self):
        """Dates without a time part are accepted."""
        assert is_leap_year(date(2000, 1, 1))
        assert not is_leap_year(date(2100, 1, 1))

    def test_matches_gregorian_rule(self):
        """Every year agrees with the Gregorian leap rule."""
        for year in range(1, 3001):
            assert is_leap_year(date(year, 6, 15)) == calendar.isleap(year)

    def test_timestamp(self):
        """Parsed timestamps can be checked directly."""
        assert is_leap_year(parse_rfc2822("Tue, 26 Jan 2016 13:48:02 GMT"))
        assert not is_leap_year(parse_rfc2822("Mon, 26 Jan 2015 13:48:02 GMT"))

    def test_timestamp_uses_local_year(self, minus_five_zone, utc_ms):
        """The year is read from local calendar fields."""
        # 2013-01-01 02:00 UTC is still 2012 at UTC-05:00
        assert is_leap_year(utc_ms(2013, 1, 1, 2, 0))

    def test_invalid_date(self):
        """An invalid date is not a leap year."""
        assert is_leap_year(INVALID_TIMESTAMP) is False

    def test_out_of_range_timestamp(self):
        """A timestamp past the year 9999 is treated as an invalid date."""
        assert is_leap_year(568971820800000.0) is False
