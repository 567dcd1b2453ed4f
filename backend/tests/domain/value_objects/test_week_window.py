"""Unit tests for WeekWindow and week_bounds."""

from datetime import date, datetime, time, timezone

import pytest
from domain.exceptions import InvalidDateError, ValidationError
from domain.value_objects import WeekWindow, to_date, week_bounds


class TestWeekBounds:
    """Test Monday to Sunday window computation."""

    def test_midweek_date(self):
        """Test that a Wednesday maps to its Monday and Sunday."""
        window = week_bounds(date(2026, 3, 4))
        assert window.first_day == date(2026, 3, 2)
        assert window.last_day == date(2026, 3, 8)

    def test_window_spans_new_year(self):
        """Test the week of Thursday Jan 1 2026 starting in December."""
        window = week_bounds(date(2026, 1, 1))
        assert window.first_day == date(2025, 12, 29)
        assert window.last_day == date(2026, 1, 4)

    def test_sunday_belongs_to_previous_monday(self):
        """Test that Sunday closes the week that started six days before."""
        window = week_bounds(date(2026, 1, 4))
        assert window.first_day == date(2025, 12, 29)

    def test_monday_starts_its_own_week(self):
        """Test that a Monday is the first day of its week."""
        window = week_bounds(date(2026, 1, 5))
        assert window.first_day == date(2026, 1, 5)
        assert window.last_day == date(2026, 1, 11)

    def test_window_times_cover_whole_days(self):
        """Test start at midnight and end at 23:59:59.999."""
        window = week_bounds(date(2026, 3, 4))
        assert window.start == datetime(2026, 3, 2, 0, 0)
        assert window.end.time() == time(23, 59, 59, 999000)

    def test_accepts_iso_strings(self):
        """Test that ISO date and datetime strings are accepted."""
        assert week_bounds("2026-01-01") == week_bounds(date(2026, 1, 1))
        assert week_bounds("2026-01-01T18:30:00Z").first_day == date(2025, 12, 29)

    def test_invalid_string_raises_error(self):
        """Test that unparseable input raises InvalidDateError."""
        with pytest.raises(InvalidDateError):
            week_bounds("next tuesday")

    def test_invalid_date_is_a_validation_error(self):
        """Test that InvalidDateError is reported as a validation failure."""
        with pytest.raises(ValidationError):
            week_bounds("2026-13-45")

    def test_non_date_value_raises_error(self):
        with pytest.raises(InvalidDateError):
            week_bounds(12345)


class TestWeekWindowContains:
    """Test inclusive membership checks."""

    @pytest.fixture
    def window(self) -> WeekWindow:
        return week_bounds(date(2025, 12, 31))

    def test_first_and_last_day_are_inside(self, window):
        """Test that both boundary days are inside the window."""
        assert window.contains(date(2025, 12, 29)) is True
        assert window.contains(date(2026, 1, 4)) is True

    def test_days_outside_are_excluded(self, window):
        """Test the days just before and after the window."""
        assert window.contains(date(2025, 12, 28)) is False
        assert window.contains(date(2026, 1, 5)) is False

    def test_str_formatting(self, window):
        """Test __str__ shows both days."""
        assert str(window) == "2025-12-29 - 2026-01-04"


class TestToDate:
    """Test date coercion."""

    def test_datetime_is_truncated(self):
        value = datetime(2026, 3, 4, 22, 15, tzinfo=timezone.utc)
        assert to_date(value) == date(2026, 3, 4)

    def test_date_is_returned_as_is(self):
        assert to_date(date(2026, 3, 4)) == date(2026, 3, 4)

    def test_whitespace_is_ignored(self):
        assert to_date(" 2026-03-04 ") == date(2026, 3, 4)
