"""daygrid CLI - month calendar view over a task list."""

import json
import logging
import sys

import click

from .adapters.json_tasks import TaskFileError
from .config import load_config
from .core.aggregator import DayCell, MonthGrid, month_stats
from .core.tasks import Task, format_task_line, undated as undated_tasks
from .workflows import build_month, day_agenda, load_tasks, resolve_today, resolve_window

WEEKDAY_LABELS = ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"]
CELL_WIDTH = 5


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _serialize_task(t: Task) -> dict:
    return t.to_dict()


def _serialize_cell(c: DayCell) -> dict:
    return {
        "day": c.day.isoformat(),
        "task_count": c.task_count,
        "completed_count": c.completed_count,
        "has_tasks": c.has_tasks,
        "all_completed": c.all_completed,
        "is_today": c.is_today,
        "is_past": c.is_past,
        "is_weekend": c.is_weekend,
        "is_selected": c.is_selected,
        "completion_ratio": c.completion_ratio,
    }


def _format_cell(c: DayCell) -> str:
    number = f"{c.day.day:>2}"
    number = f"[{number}]" if c.is_today else f" {number} "
    if c.all_completed:
        marker = "✓"
    elif c.has_tasks:
        marker = "•"
    else:
        marker = " "
    return number + marker


def _render_grid(grid: MonthGrid) -> list[str]:
    """Lay the grid out in Sunday-first rows of seven cells."""
    slots = [" " * CELL_WIDTH] * grid.leading_blanks + [_format_cell(c) for c in grid.cells]
    lines = ["".join(f" {label}  " for label in WEEKDAY_LABELS).rstrip()]
    for start in range(0, len(slots), 7):
        lines.append("".join(slots[start : start + 7]).rstrip())
    return lines


tasks_option = click.option(
    "--tasks", "tasks_path", default=None, help="Path to tasks JSON file (default from config)"
)
today_option = click.option(
    "--today", "today_str", default=None, help="Reference date YYYY-MM-DD (default: system date)"
)
json_option = click.option("--json", "as_json", is_flag=True, help="Output as JSON")


@click.group()
@click.version_option(package_name="daygrid")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """daygrid - calendar day aggregation for to-do lists."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.option("--month", "month_str", default=None, help="Month to show, YYYY-MM")
@click.option("--select", "select_str", default=None, help="Selected day, YYYY-MM-DD")
@tasks_option
@today_option
@json_option
def month(
    month_str: str | None,
    select_str: str | None,
    tasks_path: str | None,
    today_str: str | None,
    as_json: bool,
):
    """Show a month grid with per-day task markers."""
    config = load_config()
    try:
        today = resolve_today(today_str)
        window = resolve_window(month_str, today)
        selected = resolve_today(select_str) if select_str else None
        tasks = load_tasks(config, tasks_path)
    except (TaskFileError, ValueError) as e:
        _fail(str(e))

    grid = build_month(tasks, window, today, selected)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "year": window.year,
                    "month": window.month,
                    "leading_blanks": grid.leading_blanks,
                    "stats": {
                        "total": grid.stats.total,
                        "completed": grid.stats.completed,
                        "pending": grid.stats.pending,
                    },
                    "cells": [_serialize_cell(c) for c in grid.cells],
                },
                indent=2,
            )
        )
        return

    click.echo(window.first_day.to_date().strftime("%B %Y"))
    if grid.stats.total:
        click.echo(f"{grid.stats.total} tasks, {grid.stats.completed} completed")
    click.echo()
    for line in _render_grid(grid):
        click.echo(line)
    click.echo()
    click.echo("[n] today   • has tasks   ✓ all completed")


@main.command()
@click.argument("day_str", required=False, default=None)
@click.option("--category", default=None, help="Only show tasks in this category")
@tasks_option
@today_option
@json_option
def day(
    day_str: str | None,
    category: str | None,
    tasks_path: str | None,
    today_str: str | None,
    as_json: bool,
):
    """List tasks on a day (default: today)."""
    config = load_config()
    try:
        today = resolve_today(today_str)
        target = resolve_today(day_str) if day_str else today
        tasks = load_tasks(config, tasks_path)
    except (TaskFileError, ValueError) as e:
        _fail(str(e))

    selected = day_agenda(config, tasks, target, category)

    if as_json:
        click.echo(json.dumps([_serialize_task(t) for t in selected], indent=2))
        return

    click.echo(f"Tasks for {target.to_date().strftime('%A, %b %d %Y')}:")
    if not selected:
        click.echo("No tasks on this day.")
        return
    for task in selected:
        click.echo(f"  {format_task_line(task, config.completed_suffix)}")


@main.command()
@click.option("--month", "month_str", default=None, help="Month to summarize, YYYY-MM")
@tasks_option
@today_option
@json_option
def stats(month_str: str | None, tasks_path: str | None, today_str: str | None, as_json: bool):
    """Show task totals for a month."""
    config = load_config()
    try:
        today = resolve_today(today_str)
        window = resolve_window(month_str, today)
        tasks = load_tasks(config, tasks_path)
    except (TaskFileError, ValueError) as e:
        _fail(str(e))

    totals = month_stats(tasks, window)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "month": str(window),
                    "total": totals.total,
                    "completed": totals.completed,
                    "pending": totals.pending,
                },
                indent=2,
            )
        )
        return

    click.echo(f"{window}: {totals.total} total, {totals.completed} completed, {totals.pending} pending")


@main.command()
@tasks_option
@json_option
def undated(tasks_path: str | None, as_json: bool):
    """List tasks with no date."""
    config = load_config()
    try:
        tasks = load_tasks(config, tasks_path)
    except TaskFileError as e:
        _fail(str(e))

    no_date = undated_tasks(tasks)

    if as_json:
        click.echo(json.dumps([_serialize_task(t) for t in no_date], indent=2))
        return

    if not no_date:
        click.echo("No undated tasks.")
        return
    for task in no_date:
        click.echo(f"  {format_task_line(task, config.completed_suffix)}")


if __name__ == "__main__":
    main()
