"""Functional core - pure calendar aggregation with no I/O."""

from .dates import CalendarDate, NativeDate, RawDate, StringDate, as_raw_date, normalize, same_day
from .tasks import Task, format_task_line, filter_by_category, undated
from .navigation import (
    MonthWindow,
    first_weekday_offset,
    month_length,
    next_month,
    previous_month,
    window_of,
)
from .aggregator import (
    DayCell,
    MonthGrid,
    MonthStats,
    all_completed,
    completed_count,
    completion_ratio,
    day_cell,
    has_tasks,
    is_past,
    is_selected,
    is_today,
    is_weekend,
    month_grid,
    month_stats,
    task_count,
    tasks_on,
)

__all__ = [
    # Dates
    "CalendarDate",
    "NativeDate",
    "RawDate",
    "StringDate",
    "as_raw_date",
    "normalize",
    "same_day",
    # Tasks
    "Task",
    "format_task_line",
    "filter_by_category",
    "undated",
    # Navigation
    "MonthWindow",
    "first_weekday_offset",
    "month_length",
    "next_month",
    "previous_month",
    "window_of",
    # Aggregation
    "DayCell",
    "MonthGrid",
    "MonthStats",
    "all_completed",
    "completed_count",
    "completion_ratio",
    "day_cell",
    "has_tasks",
    "is_past",
    "is_selected",
    "is_today",
    "is_weekend",
    "month_grid",
    "month_stats",
    "task_count",
    "tasks_on",
]
