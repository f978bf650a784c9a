"""
Tests for calendar-day utilities.

Verifies day-granularity ranges, weekday checks and the wall-clock fallback.
"""

from datetime import date, datetime, timezone
from unittest.mock import patch

from stock_predictor.utils.time import (
    following_dates, format_date, is_friday, is_monday,
    resolve_end_date, today_utc, trailing_dates
)


class TestTrailingDates:
    """Test trailing_dates function."""

    def test_ends_on_end_date(self):
        """Should end on the given date."""
        dates = trailing_dates(date(2024, 3, 13), 5)
        assert dates == [date(2024, 3, 9), date(2024, 3, 10), date(2024, 3, 11),
                         date(2024, 3, 12), date(2024, 3, 13)]

    def test_crosses_month_and_leap_day(self):
        """Should use calendar arithmetic across Feb 29."""
        dates = trailing_dates(date(2024, 3, 1), 3)
        assert dates == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]


class TestFollowingDates:
    """Test following_dates function."""

    def test_starts_day_after(self):
        """Should start the day after the given date."""
        dates = following_dates(date(2023, 12, 30), 3)
        assert dates == [date(2023, 12, 31), date(2024, 1, 1), date(2024, 1, 2)]

    def test_zero_days(self):
        """Should return nothing for zero days."""
        assert following_dates(date(2024, 1, 1), 0) == []


class TestWeekdays:
    """Test weekday checks."""

    def test_monday_and_friday(self):
        """Should detect Monday and Friday."""
        assert is_monday(date(2024, 3, 11))
        assert is_friday(date(2024, 3, 15))
        assert not is_monday(date(2024, 3, 13))
        assert not is_friday(date(2024, 3, 13))


class TestEndDate:
    """Test end date resolution."""

    def test_prefers_explicit_date(self):
        """Should use the explicit end date."""
        assert resolve_end_date(date(2020, 5, 5)) == date(2020, 5, 5)

    def test_falls_back_to_today(self):
        """Should fall back to the UTC wall-clock day."""
        with patch('stock_predictor.utils.time.datetime') as mock_datetime:
            mock_datetime.now.return_value = datetime(2023, 1, 1, 23, 30, tzinfo=timezone.utc)

            assert today_utc() == date(2023, 1, 1)
            assert resolve_end_date(None) == date(2023, 1, 1)
            mock_datetime.now.assert_called_with(timezone.utc)

    def test_format_date(self):
        """Should format as ISO date."""
        assert format_date(date(2024, 3, 1)) == "2024-03-01"
