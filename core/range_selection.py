# core/range_selection.py
"""
Range selection state machine.

The selection is always one of three states:

    Empty()                 nothing picked yet
    Pending(start)          first endpoint picked, waiting for the second
    Complete(start, end)    both endpoints picked

`reduce(snapshot, command, bounds)` is a pure function returning the next
snapshot plus a list of effects. The only effect is `RangeCompleted`, which the
picker turns into the host's on_change call. The hover date used for the range
preview sits next to the state in `SelectionSnapshot` and never leaks into the
reported range.

A second pick earlier than the pending start restarts the "from" side: it
replaces start instead of completing a backwards range.
"""
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple, Union

from core.bounds_policy import Bounds, is_date_allowed
from core.calendar_math import to_date_only


@dataclass(frozen=True)
class DateRange:
    start: Optional[date] = None
    end: Optional[date] = None

    def __post_init__(self):
        if self.start is not None:
            object.__setattr__(self, "start", to_date_only(self.start))
        if self.end is not None:
            object.__setattr__(self, "end", to_date_only(self.end))

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None


# ----- states -----

@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Pending:
    start: date


@dataclass(frozen=True)
class Complete:
    start: date
    end: date


SelectionState = Union[Empty, Pending, Complete]


@dataclass(frozen=True)
class SelectionSnapshot:
    state: SelectionState = Empty()
    hover: Optional[date] = None


# ----- commands -----

@dataclass(frozen=True)
class Pick:
    date: date


@dataclass(frozen=True)
class Hover:
    date: date


@dataclass(frozen=True)
class LeaveGrid:
    pass


@dataclass(frozen=True)
class JumpToToday:
    today: date


@dataclass(frozen=True)
class Resync:
    value: Optional[DateRange]


Command = Union[Pick, Hover, LeaveGrid, JumpToToday, Resync]


# ----- effects -----

@dataclass(frozen=True)
class RangeCompleted:
    range: DateRange


Effect = RangeCompleted


def state_from_range(value: Optional[DateRange]) -> SelectionState:
    """Mirror an externally supplied range, as given."""
    if value is None or value.start is None:
        return Empty()
    if value.end is None:
        return Pending(start=value.start)
    return Complete(start=value.start, end=value.end)


def _pick(snapshot: SelectionSnapshot, day: date) -> Tuple[SelectionSnapshot, List[Effect]]:
    state = snapshot.state
    if isinstance(state, Pending):
        if day < state.start:
            return SelectionSnapshot(state=Pending(start=day)), []
        completed = Complete(start=state.start, end=day)
        return SelectionSnapshot(state=completed), [RangeCompleted(DateRange(completed.start, completed.end))]
    # Empty or Complete: start over
    return SelectionSnapshot(state=Pending(start=day)), []


def reduce(snapshot: SelectionSnapshot, command: Command, bounds: Bounds) -> Tuple[SelectionSnapshot, List[Effect]]:
    """Apply one command. Rejected commands return the snapshot unchanged."""
    if isinstance(command, (Pick, JumpToToday)):
        day = to_date_only(command.date if isinstance(command, Pick) else command.today)
        if not is_date_allowed(day, bounds):
            return snapshot, []
        return _pick(snapshot, day)

    if isinstance(command, Hover):
        day = to_date_only(command.date)
        if not isinstance(snapshot.state, Pending) or not is_date_allowed(day, bounds):
            return snapshot, []
        return SelectionSnapshot(state=snapshot.state, hover=day), []

    if isinstance(command, LeaveGrid):
        if snapshot.hover is None:
            return snapshot, []
        return SelectionSnapshot(state=snapshot.state), []

    if isinstance(command, Resync):
        return SelectionSnapshot(state=state_from_range(command.value)), []

    raise TypeError(f"Unknown selection command: {command!r}")


# ----- presentation helpers -----

def selected_range(state: SelectionState) -> DateRange:
    if isinstance(state, Complete):
        return DateRange(state.start, state.end)
    if isinstance(state, Pending):
        return DateRange(start=state.start)
    return DateRange()


def is_start(day: date, state: SelectionState) -> bool:
    return isinstance(state, (Pending, Complete)) and day == state.start


def is_end(day: date, state: SelectionState) -> bool:
    return isinstance(state, Complete) and day == state.end


def is_in_range(day: date, state: SelectionState) -> bool:
    """Strictly between the two endpoints of a complete selection."""
    if not isinstance(state, Complete):
        return False
    low, high = sorted((state.start, state.end))
    return low < day < high


def preview_span(snapshot: SelectionSnapshot) -> Optional[Tuple[date, date]]:
    """(low, high) between the pending start and the hovered date."""
    if not isinstance(snapshot.state, Pending) or snapshot.hover is None:
        return None
    low, high = sorted((snapshot.state.start, snapshot.hover))
    return low, high


def is_in_preview(day: date, snapshot: SelectionSnapshot, bounds: Bounds) -> bool:
    span = preview_span(snapshot)
    if span is None or not is_date_allowed(day, bounds):
        return False
    return span[0] < day < span[1]
