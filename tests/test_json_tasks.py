"""Tests for the JSON task file adapter."""

import json
import logging

import pytest

from daygrid.adapters.json_tasks import JsonTaskFile, TaskFileError
from daygrid.core.tasks import Task


@pytest.fixture
def write_tasks(tmp_path):
    def _write(payload) -> JsonTaskFile:
        path = tmp_path / "tasks.json"
        path.write_text(payload if isinstance(payload, str) else json.dumps(payload))
        return JsonTaskFile(path)
    return _write


class TestJsonTaskFile:
    def test_loads_in_file_order(self, write_tasks):
        source = write_tasks(
            [
                {"id": "1", "text": "B", "category": "Work", "isCompleted": False, "date": "2024-03-15"},
                {"id": "2", "text": "A", "category": "Health", "isCompleted": True, "date": None},
            ]
        )
        tasks = source.fetch_all()
        assert tasks == [
            Task(id="1", text="B", category="Work", is_completed=False, date="2024-03-15"),
            Task(id="2", text="A", category="Health", is_completed=True, date=None),
        ]

    def test_empty_array(self, write_tasks):
        assert write_tasks([]).fetch_all() == []

    def test_skips_malformed_records(self, write_tasks, caplog):
        source = write_tasks([{"id": "1", "text": "ok"}, "nope", {"text": "no id"}, {"id": "4", "text": "ok too"}])
        with caplog.at_level(logging.WARNING):
            tasks = source.fetch_all()
        assert [t.id for t in tasks] == ["1", "4"]
        assert "#1" in caplog.text
        assert "#2" in caplog.text

    def test_keeps_tasks_with_bad_dates(self, write_tasks):
        tasks = write_tasks([{"id": "1", "text": "x", "date": "31/12/2024"}]).fetch_all()
        assert len(tasks) == 1
        assert tasks[0].day is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(TaskFileError, match="not found"):
            JsonTaskFile(tmp_path / "missing.json").fetch_all()

    def test_invalid_json(self, write_tasks):
        with pytest.raises(TaskFileError, match="Invalid JSON"):
            write_tasks("{not json").fetch_all()

    def test_not_a_list(self, write_tasks):
        with pytest.raises(TaskFileError, match="array"):
            write_tasks({"id": "1", "text": "x"}).fetch_all()

    def test_expands_user(self):
        assert "~" not in str(JsonTaskFile("~/tasks.json").path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "tasks.json"
        path.write_bytes(b'[{"id": "1", "text": "\xff\xfe"}]')
        with pytest.raises(TaskFileError, match="UTF-8"):
            JsonTaskFile(path).fetch_all()

    def test_skips_wrongly_typed_fields(self, write_tasks, caplog):
        source = write_tasks(
            [
                {"id": "1", "text": "a", "category": 5, "date": "2024-03-15"},
                {"id": "2", "text": 42},
                {"id": "3", "text": "c", "isCompleted": "false"},
                {"id": "4", "text": "ok", "category": "Work", "isCompleted": True},
            ]
        )
        with caplog.at_level(logging.WARNING):
            tasks = source.fetch_all()
        assert [t.id for t in tasks] == ["4"]
        assert "#0" in caplog.text
        assert "#1" in caplog.text
        assert "#2" in caplog.text
