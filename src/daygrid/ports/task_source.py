"""Task source interface."""

from typing import Protocol

from daygrid.core.tasks import Task


class TaskSource(Protocol):
    """Interface for loading the task collection from any backend."""

    def fetch_all(self) -> list[Task]:
        """Fetch all tasks, dated or not."""
        ...
