"""JSON file task source adapter."""

import json
import logging
from pathlib import Path

from daygrid.core.tasks import Task

logger = logging.getLogger(__name__)


class TaskFileError(Exception):
    """Raised when the task file cannot be read as a list of tasks."""

    pass


class JsonTaskFile:
    """
    Read-only task source backed by a JSON file.

    Implements TaskSource protocol. The file holds a JSON array of objects
    with ``id``, ``text``, ``category``, ``isCompleted`` and ``date`` keys.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def fetch_all(self) -> list[Task]:
        """Load every task in file order, skipping malformed records."""
        if not self.path.exists():
            raise TaskFileError(f"Task file not found: {self.path}")

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise TaskFileError(f"Invalid JSON in {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            raise TaskFileError(f"Task file {self.path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise TaskFileError(f"Could not read {self.path}: {e}") from e

        if not isinstance(data, list):
            raise TaskFileError(f"Expected a JSON array of tasks in {self.path}")

        tasks = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                logger.warning(f"Skipping task #{index}: not an object")
                continue
            try:
                task = Task.from_dict(item)
            except KeyError as e:
                logger.warning(f"Skipping task #{index}: missing field {e}")
                continue
            except ValueError as e:
                logger.warning(f"Skipping task #{index}: {e}")
                continue
            if task.date is not None and task.day is None:
                logger.debug(f"Task {task.id} has unusable date {task.date!r}, treating as undated")
            tasks.append(task)

        logger.debug(f"Loaded {len(tasks)} tasks from {self.path}")
        return tasks
