# core/bounds_policy.py
"""
Selectable/navigable checks for an optional inclusive [min, max] window.
All comparisons are on plain calendar dates.
"""
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from typing import Optional

from core.calendar_math import first_of_month, last_of_month, shift_month, to_date_only

# The grid of the first/last supported month would spill outside date.min/date.max
FIRST_NAVIGABLE_YEAR = MINYEAR + 1
LAST_NAVIGABLE_YEAR = MAXYEAR - 1


@dataclass(frozen=True)
class Bounds:
    min: Optional[date] = None
    max: Optional[date] = None

    def __post_init__(self):
        # frozen dataclass: normalise through object.__setattr__
        if self.min is not None:
            object.__setattr__(self, "min", to_date_only(self.min))
        if self.max is not None:
            object.__setattr__(self, "max", to_date_only(self.max))


NO_BOUNDS = Bounds()


def is_date_allowed(value, bounds: Bounds) -> bool:
    day = to_date_only(value)
    if bounds.min is not None and day < bounds.min:
        return False
    if bounds.max is not None and day > bounds.max:
        return False
    return True


def is_month_allowed(year: int, month_index: int, bounds: Bounds) -> bool:
    """False only when the whole month lies before min or after max."""
    if bounds.min is not None and last_of_month(year, month_index) < bounds.min:
        return False
    if bounds.max is not None and first_of_month(year, month_index) > bounds.max:
        return False
    return True


def is_year_allowed(year: int, bounds: Bounds) -> bool:
    """True if the calendar year contains at least one allowed date."""
    if not MINYEAR <= year <= MAXYEAR:
        return False
    if bounds.min is not None and date(year, 12, 31) < bounds.min:
        return False
    if bounds.max is not None and date(year, 1, 1) > bounds.max:
        return False
    return True


def is_prev_month_navigation_allowed(year: int, month_index: int, bounds: Bounds) -> bool:
    if year <= FIRST_NAVIGABLE_YEAR and month_index == 0:
        return False
    if bounds.min is None:
        return True
    return first_of_month(year, month_index) > bounds.min


def is_next_month_navigation_allowed(year: int, month_index: int, bounds: Bounds) -> bool:
    next_year, next_month = shift_month(year, month_index, 1)
    if next_year > LAST_NAVIGABLE_YEAR:
        return False
    if bounds.max is None:
        return True
    return first_of_month(next_year, next_month) <= bounds.max


def is_prev_year_navigation_allowed(year: int, bounds: Bounds) -> bool:
    if year <= FIRST_NAVIGABLE_YEAR:
        return False
    if bounds.min is None:
        return True
    return date(year, 1, 1) > bounds.min


def is_next_year_navigation_allowed(year: int, bounds: Bounds) -> bool:
    if year >= LAST_NAVIGABLE_YEAR:
        return False
    if bounds.max is None:
        return True
    return date(year + 1, 1, 1) <= bounds.max


def clamp_to_bounds(value, bounds: Bounds) -> date:
    """Nearest allowed date to value."""
    day = to_date_only(value)
    if bounds.min is not None and day < bounds.min:
        return bounds.min
    if bounds.max is not None and day > bounds.max:
        return bounds.max
    return day
