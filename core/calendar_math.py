# core/calendar_math.py
"""
Calendar grid and month arithmetic for the date range picker.
Months are addressed by a zero-based month index (0 = January).
"""
from calendar import monthrange
from dataclasses import dataclass
from datetime import date, datetime, timedelta


@dataclass(frozen=True)
class DayCell:
    date: date
    in_displayed_month: bool


def to_date_only(value) -> date:
    """Truncate a date/datetime to a plain calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def _check_month_index(month_index: int):
    if not 0 <= month_index <= 11:
        raise ValueError(f"month_index must be in [0, 11], got {month_index}")


def days_in_month(year: int, month_index: int) -> int:
    _check_month_index(month_index)
    return monthrange(year, month_index + 1)[1]


def first_of_month(year: int, month_index: int) -> date:
    _check_month_index(month_index)
    return date(year, month_index + 1, 1)


def last_of_month(year: int, month_index: int) -> date:
    return date(year, month_index + 1, days_in_month(year, month_index))


def shift_month(year: int, month_index: int, delta: int):
    """Move (year, month_index) by delta months, carrying the year."""
    return divmod(year * 12 + month_index + delta, 12)


def build_day_grid(year: int, month_index: int):
    """
    Build the Day-view grid for a month.

    The week starts on Sunday. Leading cells come from the previous month,
    trailing cells from the next one, and the grid is always whole rows of 7.
    """
    first = first_of_month(year, month_index)
    # date.weekday(): Monday=0 ... Sunday=6
    offset = (first.weekday() + 1) % 7
    used = offset + days_in_month(year, month_index)
    total = -(-used // 7) * 7

    grid_start = first - timedelta(days=offset)
    cells = []
    for i in range(total):
        day = grid_start + timedelta(days=i)
        cells.append(DayCell(date=day, in_displayed_month=(day.month == first.month)))
    return cells
