"""Tests for the shared workflow layer."""

import logging
from datetime import date
from pathlib import Path
from unittest.mock import patch

import pytest

from daygrid.config import Config
from daygrid.core.dates import CalendarDate
from daygrid.core.navigation import MonthWindow
from daygrid.core.tasks import Task
from daygrid.workflows import (
    build_month,
    day_agenda,
    get_task_source,
    load_tasks,
    resolve_today,
    resolve_window,
)


@pytest.fixture
def config(tmp_path):
    return Config(tasks_file=str(tmp_path / "tasks.json"))


@pytest.fixture
def tasks():
    return [
        Task(id="1", text="Standup", category="Work", date="2024-03-15"),
        Task(id="2", text="Run", category="Health", is_completed=True, date="2024-03-15"),
        Task(id="3", text="Essay", category="Studies", date="2024-03-16"),
    ]


class TestGetTaskSource:
    def test_uses_configured_file(self, config, tmp_path):
        assert get_task_source(config).path == tmp_path / "tasks.json"

    def test_explicit_path_wins(self, config, tmp_path):
        other = tmp_path / "other.json"
        assert get_task_source(config, str(other)).path == other

    def test_expands_user_path(self):
        source = get_task_source(Config(tasks_file="~/lists/tasks.json"))
        assert source.path == Path.home() / "lists" / "tasks.json"


class TestLoadTasks:
    def test_reads_file(self, config, tmp_path):
        (tmp_path / "tasks.json").write_text('[{"id": "1", "text": "x", "date": "2024-03-15"}]')
        assert load_tasks(config) == [Task(id="1", text="x", date="2024-03-15")]

    def test_custom_source(self, config, tasks):
        class InMemorySource:
            def fetch_all(self) -> list[Task]:
                return tasks

        assert load_tasks(config, source=InMemorySource()) == tasks


class TestResolveToday:
    def test_override(self):
        assert resolve_today("2024-03-20") == CalendarDate(2024, 3, 20)

    @patch("daygrid.workflows.date")
    def test_system_clock(self, mock_date):
        mock_date.today.return_value = date(2025, 1, 15)
        assert resolve_today(None) == CalendarDate(2025, 1, 15)

    def test_invalid(self):
        with pytest.raises(ValueError, match="YYYY-MM-DD"):
            resolve_today("20/03/2024")


class TestResolveWindow:
    def test_defaults_to_today(self):
        assert resolve_window(None, CalendarDate(2024, 3, 20)) == MonthWindow(2024, 3)

    def test_explicit_month(self):
        assert resolve_window("2024-12", CalendarDate(2024, 3, 20)) == MonthWindow(2024, 12)

    @pytest.mark.parametrize("value", ["2024-13", "2024", "March", "2024-3"])
    def test_invalid(self, value):
        with pytest.raises(ValueError, match="YYYY-MM"):
            resolve_window(value, CalendarDate(2024, 3, 20))


class TestBuildMonth:
    def test_selects_today_by_default(self, tasks):
        grid = build_month(tasks, MonthWindow(2024, 3), CalendarDate(2024, 3, 20))
        assert [c.day.day for c in grid.cells if c.is_selected] == [20]

    def test_explicit_selection(self, tasks):
        grid = build_month(
            tasks, MonthWindow(2024, 3), CalendarDate(2024, 3, 20), CalendarDate(2024, 3, 15)
        )
        assert [c.day.day for c in grid.cells if c.is_selected] == [15]
        assert grid.stats.total == 3


class TestDayAgenda:
    def test_all_categories(self, config, tasks):
        agenda = day_agenda(config, tasks, CalendarDate(2024, 3, 15))
        assert [t.id for t in agenda] == ["1", "2"]

    def test_category_filter(self, config, tasks):
        agenda = day_agenda(config, tasks, CalendarDate(2024, 3, 15), category="health")
        assert [t.id for t in agenda] == ["2"]

    def test_unknown_category_warns(self, config, tasks, caplog):
        with caplog.at_level(logging.WARNING):
            agenda = day_agenda(config, tasks, CalendarDate(2024, 3, 15), category="Errands")
        assert agenda == []
        assert "Errands" in caplog.text
