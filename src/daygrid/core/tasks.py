"""Pure task domain logic - no I/O dependencies."""

import datetime
from dataclasses import dataclass

from .dates import CalendarDate, normalize

DEFAULT_CATEGORIES = ["Work", "Personal", "Studies", "Health"]
COMPLETED_SUFFIX = "(completed)"


@dataclass
class Task:
    """A to-do item, optionally pinned to a calendar day."""

    id: str
    text: str
    category: str = ""
    is_completed: bool = False
    date: str | datetime.date | None = None

    @property
    def day(self) -> CalendarDate | None:
        """The task's calendar day, or None if it has no valid date."""
        return normalize(self.date)

    @property
    def has_date(self) -> bool:
        return self.day is not None

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """
        Create Task from a JSON-like mapping (camelCase keys).

        Raises KeyError for a missing id or text, and ValueError when text,
        category or isCompleted has the wrong JSON type.
        """
        text = data["text"]
        if not isinstance(text, str):
            raise ValueError(f"text must be a string, got {text!r}")
        category = data.get("category") or ""
        if not isinstance(category, str):
            raise ValueError(f"category must be a string, got {category!r}")
        is_completed = data.get("isCompleted", False)
        if not isinstance(is_completed, bool):
            raise ValueError(f"isCompleted must be true or false, got {is_completed!r}")
        return cls(
            id=str(data["id"]),
            text=text,
            category=category,
            is_completed=is_completed,
            date=data.get("date"),
        )

    def to_dict(self) -> dict:
        """Serialize with the same keys from_dict reads."""
        day = self.day
        return {
            "id": self.id,
            "text": self.text,
            "category": self.category,
            "isCompleted": self.is_completed,
            "date": day.isoformat() if day else None,
        }


def format_task_line(task: Task, completed_suffix: str = COMPLETED_SUFFIX) -> str:
    """Single-line display for a task list."""
    line = f"• {task.text}"
    if task.is_completed:
        line += f" {completed_suffix}"
    return line


def filter_by_category(tasks: list[Task], category: str) -> list[Task]:
    """Filter tasks to a specific category (case-insensitive)."""
    return [t for t in tasks if t.category.lower() == category.lower()]


def undated(tasks: list[Task]) -> list[Task]:
    """Tasks with no usable date, in input order."""
    return [t for t in tasks if normalize(t.date) is None]
