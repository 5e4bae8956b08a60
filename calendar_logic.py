"""Pure calendar calculations, no UI dependencies."""

import calendar
import enum
from datetime import MAXYEAR, MINYEAR, date
from typing import NamedTuple

DAY_ABBR = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")

GRID_CELLS = 42  # 6 rows x 7 columns


class MonthRelation(enum.Enum):
    PREVIOUS = "previous"
    CURRENT = "current"
    NEXT = "next"


class DayCell(NamedTuple):
    """One body cell of the month grid.

    ``date`` is None only for neighbour-month cells beyond year 1 or 9999.
    """

    day: int
    relation: MonthRelation
    is_today: bool
    date: date | None


class MonthGrid(NamedTuple):
    year: int
    month: int
    headers: tuple[str, ...]
    cells: tuple[DayCell, ...]

    def weeks(self) -> list[tuple[DayCell, ...]]:
        """Return the 42 cells split into 6 rows of 7."""
        return [self.cells[i:i + 7] for i in range(0, GRID_CELLS, 7)]


class ViewState(NamedTuple):
    """The (year, month) currently displayed by the calendar window."""

    year: int
    month: int


class Navigation(enum.Enum):
    PREV = "prev"
    NEXT = "next"
    TODAY = "today"


def first_weekday(year: int, month: int) -> int:
    """Weekday of day 1 with Sunday as 0."""
    # date.weekday() is Monday=0 .. Sunday=6
    return (date(year, month, 1).weekday() + 1) % 7


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def _cell_date(year: int, month: int, day: int) -> date | None:
    # Neighbour months of Jan 1 / Dec 9999 fall outside datetime's range
    if MINYEAR <= year <= MAXYEAR:
        return date(year, month, day)
    return None


def month_grid(year: int, month: int, today: date) -> MonthGrid:
    """Return the fixed 6×7 grid for the given month.

    Weeks start on Sunday. The grid always holds 42 cells so the calendar
    height stays constant: the tail of the previous month fills the
    leading slots, the head of the next month fills the rest. *today* is
    compared by year, month and day only, so a datetime works too.
    """
    lead = first_weekday(year, month)
    n_days = days_in_month(year, month)
    today_key = (today.year, today.month, today.day)

    cells: list[DayCell] = []
    # Counting back from the day before the 1st
    py, pm = prev_month(year, month)
    prev_days = days_in_month(py, pm)
    for i in range(lead):
        day = prev_days - i
        cells.append(DayCell(day, MonthRelation.PREVIOUS, False, _cell_date(py, pm, day)))

    for day in range(1, n_days + 1):
        is_today = (year, month, day) == today_key
        cells.append(DayCell(day, MonthRelation.CURRENT, is_today, date(year, month, day)))

    ny, nm = next_month(year, month)
    for day in range(1, GRID_CELLS - lead - n_days + 1):
        cells.append(DayCell(day, MonthRelation.NEXT, False, _cell_date(ny, nm, day)))

    return MonthGrid(year, month, DAY_ABBR, tuple(cells))


def month_title(year: int, month: int) -> str:
    """Header text such as "January 2024" (month name follows LC_TIME)."""
    return f"{calendar.month_name[month]} {year}"


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def navigate(state: ViewState, command: Navigation,
             today: date | None = None) -> ViewState:
    """Apply a navigation command and return the new displayed month."""
    if command is Navigation.PREV:
        return ViewState(*prev_month(state.year, state.month))
    if command is Navigation.NEXT:
        return ViewState(*next_month(state.year, state.month))
    if command is Navigation.TODAY:
        today = today or date.today()
        return ViewState(today.year, today.month)
    raise ValueError(f"Unknown navigation command: {command!r}")
