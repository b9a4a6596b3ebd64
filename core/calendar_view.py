# core/calendar_view.py
"""
Which grid the picker shows (day / month / year) and where it is pointed.

The Day cursor (year, month_index) and the Month-view year (viewing_year) are
kept apart so browsing years never moves the Day grid until a month is chosen.
"""
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Callable, Optional

from core.bounds_policy import (
    FIRST_NAVIGABLE_YEAR,
    LAST_NAVIGABLE_YEAR,
    Bounds,
    clamp_to_bounds,
    is_month_allowed,
    is_next_month_navigation_allowed,
    is_next_year_navigation_allowed,
    is_prev_month_navigation_allowed,
    is_prev_year_navigation_allowed,
    is_year_allowed,
)
from core.calendar_math import shift_month, to_date_only
from core.config import YEAR_VIEW_SPAN

MONTH_LABELS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


class ViewMode(Enum):
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class ViewState:
    mode: ViewMode
    year: int
    month_index: int
    viewing_year: int


@dataclass(frozen=True)
class MonthOption:
    month_index: int
    label: str
    enabled: bool
    current: bool


def clamp_to_navigable(day: date) -> date:
    """Keep the cursor out of years 1 and 9999, whose grids spill past date.min/date.max."""
    if day.year < FIRST_NAVIGABLE_YEAR:
        return date(FIRST_NAVIGABLE_YEAR, 1, 1)
    if day.year > LAST_NAVIGABLE_YEAR:
        return date(LAST_NAVIGABLE_YEAR, 12, 31)
    return day


def seed_cursor(value_start: Optional[date], bounds: Bounds, today: date) -> date:
    """Day the Day grid opens on: value start, else min if after today, else today."""
    if value_start is not None:
        return clamp_to_navigable(to_date_only(value_start))
    if bounds.min is not None and bounds.min > today:
        return clamp_to_navigable(bounds.min)
    return clamp_to_navigable(clamp_to_bounds(today, bounds))


class CalendarView:
    def __init__(self, bounds: Bounds, today: Callable[[], date] = date.today):
        self.bounds = bounds
        self._today = today
        start = seed_cursor(None, bounds, to_date_only(today()))
        self.state = ViewState(ViewMode.DAY, start.year, start.month - 1, start.year)

    @property
    def mode(self) -> ViewMode:
        return self.state.mode

    def open(self, value_start: Optional[date] = None):
        """Reset to the Day view at the seeded cursor."""
        start = seed_cursor(value_start, self.bounds, to_date_only(self._today()))
        self.state = ViewState(ViewMode.DAY, start.year, start.month - 1, start.year)

    def show_date(self, day: date):
        day = clamp_to_navigable(to_date_only(day))
        self.state = ViewState(ViewMode.DAY, day.year, day.month - 1, day.year)

    # ----- navigation gates -----

    def can_go_prev(self) -> bool:
        s = self.state
        if s.mode is ViewMode.DAY:
            return is_prev_month_navigation_allowed(s.year, s.month_index, self.bounds)
        if s.mode is ViewMode.MONTH:
            return is_prev_year_navigation_allowed(s.viewing_year, self.bounds)
        return False

    def can_go_next(self) -> bool:
        s = self.state
        if s.mode is ViewMode.DAY:
            return is_next_month_navigation_allowed(s.year, s.month_index, self.bounds)
        if s.mode is ViewMode.MONTH:
            return is_next_year_navigation_allowed(s.viewing_year, self.bounds)
        return False

    # ----- transitions (silent no-ops when not permitted) -----

    def prev(self) -> bool:
        if not self.can_go_prev():
            return False
        self._step(-1)
        return True

    def next(self) -> bool:
        if not self.can_go_next():
            return False
        self._step(1)
        return True

    def _step(self, delta: int):
        s = self.state
        if s.mode is ViewMode.DAY:
            year, month_index = shift_month(s.year, s.month_index, delta)
            self.state = replace(s, year=year, month_index=month_index)
        else:
            self.state = replace(s, viewing_year=s.viewing_year + delta)

    def switch_view(self, mode: ViewMode):
        s = self.state
        if mode is s.mode:
            return
        if s.mode is ViewMode.DAY:
            # month and year grids open on the year currently shown in the day grid
            self.state = replace(s, mode=mode, viewing_year=s.year)
        else:
            self.state = replace(s, mode=mode)

    def activate_label(self):
        """Header label: Day -> Month -> Year -> Month."""
        if self.state.mode is ViewMode.DAY:
            self.switch_view(ViewMode.MONTH)
        elif self.state.mode is ViewMode.MONTH:
            self.switch_view(ViewMode.YEAR)
        else:
            self.switch_view(ViewMode.MONTH)

    def choose_month(self, month_index: int) -> bool:
        s = self.state
        if s.mode is not ViewMode.MONTH or not 0 <= month_index <= 11:
            return False
        if not is_month_allowed(s.viewing_year, month_index, self.bounds):
            return False
        self.state = ViewState(ViewMode.DAY, s.viewing_year, month_index, s.viewing_year)
        return True

    def choose_year(self, year: int) -> bool:
        if self.state.mode is not ViewMode.YEAR or year not in self.year_options():
            return False
        self.state = replace(self.state, mode=ViewMode.MONTH, viewing_year=year)
        return True

    # ----- display data -----

    def header_label(self) -> str:
        s = self.state
        if s.mode is ViewMode.DAY:
            return f"{MONTH_LABELS[s.month_index]} {s.year}"
        if s.mode is ViewMode.MONTH:
            return str(s.viewing_year)
        years = self.year_options()
        return f"{years[0]} - {years[-1]}" if years else str(s.viewing_year)

    def month_options(self):
        s = self.state
        return [
            MonthOption(
                month_index=i,
                label=MONTH_LABELS[i],
                enabled=is_month_allowed(s.viewing_year, i, self.bounds),
                current=(s.year == s.viewing_year and s.month_index == i),
            )
            for i in range(12)
        ]

    def year_options(self):
        if self.bounds.min is not None and self.bounds.max is not None:
            first, last = self.bounds.min.year, self.bounds.max.year
        else:
            first = self.state.viewing_year - YEAR_VIEW_SPAN
            last = self.state.viewing_year + YEAR_VIEW_SPAN
        first = max(first, FIRST_NAVIGABLE_YEAR)
        last = min(last, LAST_NAVIGABLE_YEAR)
        return [y for y in range(first, last + 1) if is_year_allowed(y, self.bounds)]
