"""Adapters - I/O implementations of ports."""

from .json_tasks import JsonTaskFile, TaskFileError

__all__ = [
    "JsonTaskFile",
    "TaskFileError",
]
