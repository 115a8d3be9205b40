"""Shared workflow layer between the CLI and the functional core.

Resolves the task source and the reference dates, then hands everything to
the pure aggregation functions.
"""

import logging
from datetime import date
from pathlib import Path

from .adapters.json_tasks import JsonTaskFile
from .config import Config
from .core.aggregator import MonthGrid, month_grid, tasks_on
from .core.dates import CalendarDate, normalize
from .core.navigation import MonthWindow, window_of
from .core.tasks import Task, filter_by_category
from .ports.task_source import TaskSource

logger = logging.getLogger(__name__)


def get_task_source(config: Config, tasks_path: str | None = None) -> JsonTaskFile:
    """Resolve the task file from an explicit path or config."""
    return JsonTaskFile(Path(tasks_path or config.tasks_file).expanduser())


def load_tasks(
    config: Config,
    tasks_path: str | None = None,
    source: TaskSource | None = None,
) -> list[Task]:
    """Fetch the task collection, from the JSON file unless a source is given."""
    source = source or get_task_source(config, tasks_path)
    return source.fetch_all()


def resolve_today(value: str | None) -> CalendarDate:
    """Parse a YYYY-MM-DD override, falling back to the system clock."""
    if value is None:
        return CalendarDate.from_date(date.today())
    day = normalize(value)
    if day is None:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD")
    return day


def resolve_window(value: str | None, today: CalendarDate) -> MonthWindow:
    """Parse a YYYY-MM month, defaulting to the month containing today."""
    if value is None:
        return window_of(today)
    # Reuse day parsing by pinning the 1st
    window = window_of(f"{value}-01")
    if window is None:
        raise ValueError(f"Invalid month '{value}', expected YYYY-MM")
    return window


def build_month(
    tasks: list[Task],
    window: MonthWindow,
    today: CalendarDate,
    selected: CalendarDate | None = None,
) -> MonthGrid:
    """Month grid with today selected unless another day is given."""
    grid = month_grid(tasks, window, today, selected or today)
    logger.debug(
        f"Built grid for {window}: {grid.stats.total} tasks, {grid.leading_blanks} leading blanks"
    )
    return grid


def day_agenda(
    config: Config,
    tasks: list[Task],
    day: CalendarDate,
    category: str | None = None,
) -> list[Task]:
    """Tasks for a selected day, optionally narrowed to one category."""
    selected = tasks_on(tasks, day)
    if category:
        known = [c.lower() for c in config.categories]
        if category.lower() not in known:
            logger.warning(f"Category '{category}' is not one of {config.categories}")
        selected = filter_by_category(selected, category)
    return selected
