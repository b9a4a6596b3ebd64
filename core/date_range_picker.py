# core/date_range_picker.py
"""
Date range picker controller.

Ties the selection reducer, the calendar view and the bounds checks into the
command surface a renderer talks to. The host owns the value: it passes it in,
receives exactly one on_change call per completed pick, and feeds the new
value back with set_value().
"""
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from core.bounds_policy import NO_BOUNDS, Bounds, is_date_allowed
from core.calendar_math import DayCell, build_day_grid, to_date_only
from core.calendar_view import CalendarView, ViewMode
from core.config import DATE_RANGE_PLACEHOLDER
from core.range_selection import (
    Complete,
    DateRange,
    Hover,
    JumpToToday,
    LeaveGrid,
    Pending,
    Pick,
    RangeCompleted,
    Resync,
    SelectionSnapshot,
    is_end,
    is_in_preview,
    is_in_range,
    is_start,
    reduce,
    selected_range,
)

WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def format_date(day: date) -> str:
    return to_date_only(day).strftime("%d/%m/%Y")


def format_range(value: Optional[DateRange], placeholder: str = DATE_RANGE_PLACEHOLDER) -> str:
    """Closed-control text; a reversed range is shown as given."""
    if value is None or value.start is None:
        return placeholder
    if value.end is None:
        return f"{format_date(value.start)} - ..."
    return f"{format_date(value.start)} - {format_date(value.end)}"


@dataclass(frozen=True)
class DayCellView:
    date: date
    in_displayed_month: bool
    selectable: bool
    is_start: bool
    is_end: bool
    in_range: bool
    in_preview: bool
    is_hovered: bool
    is_today: bool


class DateRangePicker:
    def __init__(
        self,
        on_change: Callable[[DateRange], None],
        value: Optional[DateRange] = None,
        bounds: Optional[Bounds] = None,
        disabled: bool = False,
        placeholder: str = DATE_RANGE_PLACEHOLDER,
        today: Callable[[], date] = date.today,
    ):
        self.on_change = on_change
        self.placeholder = placeholder
        self.disabled = disabled
        self._today = today
        self._bounds = bounds or NO_BOUNDS
        self._value = value
        self._open = False
        self.view = CalendarView(self._bounds, today=self._today_date)
        self.selection = SelectionSnapshot()
        self._resync()

    # ----- configuration -----

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @property
    def value(self) -> Optional[DateRange]:
        return self._value

    @property
    def is_open(self) -> bool:
        return self._open

    def set_value(self, value: Optional[DateRange]):
        """Controlled value from the host; applied now if closed, else on next open."""
        self._value = value
        if not self._open:
            self._resync()

    def set_bounds(self, bounds: Optional[Bounds]):
        self._bounds = bounds or NO_BOUNDS
        self.view.bounds = self._bounds

    def set_disabled(self, disabled: bool):
        self.disabled = disabled
        if disabled:
            self.close()

    def _today_date(self) -> date:
        return to_date_only(self._today())

    def _resync(self):
        self.selection, _ = reduce(self.selection, Resync(self._value), self._bounds)
        self.view.open(self._value.start if self._value else None)

    # ----- lifecycle -----

    def open(self) -> bool:
        if self.disabled or self._open:
            return False
        self._resync()
        self._open = True
        return True

    def close(self):
        """Close; an unfinished pick is dropped without calling on_change."""
        if not self._open:
            return
        self._open = False
        self._resync()

    def toggle(self):
        if self._open:
            self.close()
        else:
            self.open()

    # ----- selection commands -----

    def _accepts_commands(self) -> bool:
        return self._open and not self.disabled

    def _dispatch(self, command):
        self.selection, effects = reduce(self.selection, command, self._bounds)
        for effect in effects:
            if isinstance(effect, RangeCompleted):
                self._open = False
                self.on_change(effect.range)

    def pick(self, day: date):
        if not self._accepts_commands():
            return
        self._dispatch(Pick(to_date_only(day)))

    def pick_cell(self, cell: DayCell):
        if not cell.in_displayed_month:
            return
        self.pick(cell.date)

    def hover(self, day: date):
        if not self._accepts_commands():
            return
        self._dispatch(Hover(to_date_only(day)))

    def leave_grid(self):
        if not self._accepts_commands():
            return
        self._dispatch(LeaveGrid())

    def can_jump_to_today(self) -> bool:
        return is_date_allowed(self._today_date(), self._bounds)

    def jump_to_today(self):
        if not self._accepts_commands() or not self.can_jump_to_today():
            return
        today = self._today_date()
        self._dispatch(JumpToToday(today))
        if isinstance(self.selection.state, Pending):
            self.view.show_date(today)

    def today_button_label(self) -> str:
        if not self.can_jump_to_today():
            return "Today is unavailable"
        state = self.selection.state
        if isinstance(state, Pending) and self._today_date() >= state.start:
            return "Use today as end date"
        return "Use today as start date"

    # ----- view commands -----

    def navigate(self, delta: int):
        """Step months in Day view or years in Month view."""
        if not self._accepts_commands() or delta == 0:
            return
        step = self.view.next if delta > 0 else self.view.prev
        for _ in range(abs(delta)):
            if not step():
                break

    def prev(self):
        self.navigate(-1)

    def next(self):
        self.navigate(1)

    def can_go_prev(self) -> bool:
        return self._accepts_commands() and self.view.can_go_prev()

    def can_go_next(self) -> bool:
        return self._accepts_commands() and self.view.can_go_next()

    def switch_view(self, mode: ViewMode):
        if not self._accepts_commands():
            return
        self._dispatch(LeaveGrid())
        self.view.switch_view(mode)

    def activate_label(self):
        if not self._accepts_commands():
            return
        self._dispatch(LeaveGrid())
        self.view.activate_label()

    def choose_month(self, month_index: int):
        if not self._accepts_commands():
            return
        self.view.choose_month(month_index)

    def choose_year(self, year: int):
        if not self._accepts_commands():
            return
        self.view.choose_year(year)

    # ----- display state -----

    @property
    def mode(self) -> ViewMode:
        return self.view.mode

    @property
    def hover_date(self) -> Optional[date]:
        return self.selection.hover

    def current_range(self) -> DateRange:
        return selected_range(self.selection.state)

    def is_complete(self) -> bool:
        return isinstance(self.selection.state, Complete)

    def display_value(self) -> str:
        return format_range(self.current_range(), self.placeholder)

    def header_label(self) -> str:
        return self.view.header_label()

    def weekday_labels(self):
        return list(WEEKDAY_LABELS)

    def day_cells(self):
        s = self.view.state
        state = self.selection.state
        today = self._today_date()
        cells = []
        for cell in build_day_grid(s.year, s.month_index):
            day = cell.date
            cells.append(DayCellView(
                date=day,
                in_displayed_month=cell.in_displayed_month,
                selectable=cell.in_displayed_month and is_date_allowed(day, self._bounds),
                is_start=is_start(day, state),
                is_end=is_end(day, state),
                in_range=is_in_range(day, state),
                in_preview=is_in_preview(day, self.selection, self._bounds),
                is_hovered=(day == self.selection.hover),
                is_today=(day == today),
            ))
        return cells

    def month_options(self):
        return self.view.month_options()

    def year_options(self):
        return self.view.year_options()
