"""Tests for the min/max window checks."""

from datetime import date, datetime

from core.bounds_policy import (
    NO_BOUNDS,
    Bounds,
    clamp_to_bounds,
    is_date_allowed,
    is_month_allowed,
    is_next_month_navigation_allowed,
    is_next_year_navigation_allowed,
    is_prev_month_navigation_allowed,
    is_prev_year_navigation_allowed,
    is_year_allowed,
)


class TestBounds:
    """Tests for the Bounds value."""

    def test_datetimes_are_truncated(self):
        bounds = Bounds(min=datetime(2024, 1, 10, 15, 30), max=datetime(2024, 2, 1, 8, 0))
        assert bounds.min == date(2024, 1, 10)
        assert bounds.max == date(2024, 2, 1)

    def test_empty_bounds(self):
        assert NO_BOUNDS.min is None and NO_BOUNDS.max is None


class TestIsDateAllowed:
    """Tests for is_date_allowed."""

    def test_no_bounds_allows_everything(self):
        assert is_date_allowed(date(1970, 1, 1), NO_BOUNDS)
        assert is_date_allowed(date(2999, 12, 31), NO_BOUNDS)

    def test_bounds_are_inclusive(self):
        bounds = Bounds(min=date(2024, 1, 10), max=date(2024, 1, 20))
        assert is_date_allowed(date(2024, 1, 10), bounds)
        assert is_date_allowed(date(2024, 1, 20), bounds)
        assert not is_date_allowed(date(2024, 1, 9), bounds)
        assert not is_date_allowed(date(2024, 1, 21), bounds)

    def test_time_of_day_is_ignored(self):
        bounds = Bounds(max=date(2024, 1, 20))
        assert is_date_allowed(datetime(2024, 1, 20, 23, 59), bounds)

    def test_only_min(self):
        bounds = Bounds(min=date(2024, 1, 10))
        assert not is_date_allowed(date(2024, 1, 5), bounds)
        assert is_date_allowed(date(2030, 1, 5), bounds)


class TestIsMonthAllowed:
    """Tests for is_month_allowed."""

    def test_partial_overlap_is_allowed(self):
        bounds = Bounds(min=date(2024, 3, 31), max=date(2024, 5, 1))
        assert is_month_allowed(2024, 2, bounds)
        assert is_month_allowed(2024, 4, bounds)

    def test_month_entirely_outside(self):
        bounds = Bounds(min=date(2024, 3, 31), max=date(2024, 5, 1))
        assert not is_month_allowed(2024, 1, bounds)
        assert not is_month_allowed(2024, 5, bounds)

    def test_no_bounds(self):
        assert is_month_allowed(2024, 0, NO_BOUNDS)


class TestMonthNavigation:
    """Tests for the Day-view prev/next predicates."""

    def test_prev_blocked_in_min_month(self):
        bounds = Bounds(min=date(2024, 1, 10))
        assert not is_prev_month_navigation_allowed(2024, 0, bounds)
        assert is_prev_month_navigation_allowed(2024, 1, bounds)

    def test_prev_blocked_when_min_is_first_of_month(self):
        bounds = Bounds(min=date(2024, 2, 1))
        assert not is_prev_month_navigation_allowed(2024, 1, bounds)

    def test_next_blocked_in_max_month(self):
        bounds = Bounds(max=date(2024, 3, 31))
        assert not is_next_month_navigation_allowed(2024, 2, bounds)
        assert is_next_month_navigation_allowed(2024, 1, bounds)

    def test_next_allowed_when_max_is_first_of_next_month(self):
        bounds = Bounds(max=date(2024, 4, 1))
        assert is_next_month_navigation_allowed(2024, 2, bounds)

    def test_next_crosses_year(self):
        bounds = Bounds(max=date(2025, 1, 15))
        assert is_next_month_navigation_allowed(2024, 11, bounds)

    def test_unbounded(self):
        assert is_prev_month_navigation_allowed(2024, 0, NO_BOUNDS)
        assert is_next_month_navigation_allowed(2024, 11, NO_BOUNDS)


class TestYearChecks:
    """Tests for year-level predicates used by the Month and Year views."""

    def test_prev_year(self):
        bounds = Bounds(min=date(2024, 6, 1))
        assert not is_prev_year_navigation_allowed(2024, bounds)
        assert is_prev_year_navigation_allowed(2025, bounds)

    def test_prev_year_when_min_is_new_year(self):
        bounds = Bounds(min=date(2024, 1, 1))
        assert not is_prev_year_navigation_allowed(2024, bounds)

    def test_next_year(self):
        bounds = Bounds(max=date(2024, 6, 1))
        assert not is_next_year_navigation_allowed(2024, bounds)
        assert is_next_year_navigation_allowed(2023, bounds)

    def test_year_allowed(self):
        bounds = Bounds(min=date(2024, 12, 31), max=date(2026, 1, 1))
        assert not is_year_allowed(2023, bounds)
        assert is_year_allowed(2024, bounds)
        assert is_year_allowed(2026, bounds)
        assert not is_year_allowed(2027, bounds)

    def test_calendar_limits(self):
        assert not is_prev_year_navigation_allowed(2, NO_BOUNDS)
        assert not is_next_year_navigation_allowed(9998, NO_BOUNDS)
        assert not is_year_allowed(10000, NO_BOUNDS)


class TestClampToBounds:
    """Tests for clamp_to_bounds."""

    def test_clamps_both_sides(self):
        bounds = Bounds(min=date(2024, 1, 10), max=date(2024, 1, 20))
        assert clamp_to_bounds(date(2024, 1, 1), bounds) == date(2024, 1, 10)
        assert clamp_to_bounds(date(2024, 2, 1), bounds) == date(2024, 1, 20)
        assert clamp_to_bounds(date(2024, 1, 15), bounds) == date(2024, 1, 15)
