"""
Per-day and per-month task aggregation for a calendar grid.

Pure functions - no I/O, no clock access, no caching. Every time-relative
query takes ``today`` explicitly.
"""

from dataclasses import dataclass

from .dates import CalendarDate, normalize, same_day
from .navigation import MonthWindow, first_weekday_offset
from .tasks import Task


@dataclass(frozen=True)
class MonthStats:
    """Task totals for one month."""

    total: int
    completed: int
    pending: int


@dataclass(frozen=True)
class DayCell:
    """Everything a renderer needs to decorate one day of the grid."""

    day: CalendarDate
    task_count: int
    completed_count: int
    has_tasks: bool
    all_completed: bool
    is_today: bool
    is_past: bool
    is_weekend: bool
    is_selected: bool
    completion_ratio: float


@dataclass(frozen=True)
class MonthGrid:
    """A Sunday-first month grid: blank leading cells, then one cell per day."""

    window: MonthWindow
    leading_blanks: int
    cells: list[DayCell]
    stats: MonthStats


def tasks_on(tasks: list[Task], day: object) -> list[Task]:
    """All tasks dated ``day``, in input order."""
    return [t for t in tasks if same_day(t.date, day)]


def has_tasks(tasks: list[Task], day: object) -> bool:
    return any(same_day(t.date, day) for t in tasks)


def task_count(tasks: list[Task], day: object) -> int:
    return len(tasks_on(tasks, day))


def completed_count(tasks: list[Task], day: object) -> int:
    return sum(1 for t in tasks_on(tasks, day) if t.is_completed)


def all_completed(tasks: list[Task], day: object) -> bool:
    """True only if the day has tasks and every one is done."""
    day_tasks = tasks_on(tasks, day)
    return len(day_tasks) > 0 and all(t.is_completed for t in day_tasks)


def completion_ratio(tasks: list[Task], day: object) -> float:
    """Fraction of the day's tasks that are done; 0.0 for an empty day."""
    day_tasks = tasks_on(tasks, day)
    if not day_tasks:
        return 0.0
    return sum(1 for t in day_tasks if t.is_completed) / len(day_tasks)


def is_past(day: object, today: object) -> bool:
    """Strictly before today, compared as calendar days."""
    target = normalize(day)
    reference = normalize(today)
    if target is None or reference is None:
        return False
    return target < reference


def is_today(day: object, today: object) -> bool:
    return same_day(day, today)


def is_selected(day: object, selected: object) -> bool:
    return same_day(day, selected)


def is_weekend(day: object) -> bool:
    """Saturday or Sunday."""
    target = normalize(day)
    if target is None:
        return False
    return target.weekday() in (0, 6)


def month_stats(tasks: list[Task], window: MonthWindow) -> MonthStats:
    """Totals for tasks dated anywhere in ``window``; undated tasks are skipped."""
    month_tasks = [t for t in tasks if window.contains(t.date)]
    total = len(month_tasks)
    completed = sum(1 for t in month_tasks if t.is_completed)
    return MonthStats(total=total, completed=completed, pending=total - completed)


def day_cell(
    tasks: list[Task],
    window: MonthWindow,
    day_of_month: int,
    today: object,
    selected: object = None,
) -> DayCell:
    """Assemble the independent flags for one grid cell."""
    day = window.day(day_of_month)
    day_tasks = tasks_on(tasks, day)
    count = len(day_tasks)
    done = sum(1 for t in day_tasks if t.is_completed)

    return DayCell(
        day=day,
        task_count=count,
        completed_count=done,
        has_tasks=count > 0,
        all_completed=count > 0 and done == count,
        is_today=is_today(day, today),
        is_past=is_past(day, today),
        is_weekend=is_weekend(day),
        is_selected=is_selected(day, selected),
        completion_ratio=done / count if count else 0.0,
    )


def month_grid(
    tasks: list[Task],
    window: MonthWindow,
    today: object,
    selected: object = None,
) -> MonthGrid:
    """
    Build the full grid for a month.

    No trailing padding is added after the last day; that is up to the
    renderer.
    """
    cells = [
        day_cell(tasks, window, day.day, today, selected)
        for day in window.days()
    ]
    return MonthGrid(
        window=window,
        leading_blanks=first_weekday_offset(window.year, window.month),
        cells=cells,
        stats=month_stats(tasks, window),
    )
