# src/ordered_todo/tasks/errors.py

from __future__ import annotations


class TaskRegistryError(Exception):
    """Base class for every error raised by the task registry."""


class ValidationError(TaskRegistryError, ValueError):
    """Malformed input: empty name, empty filter term, bad order value."""


class DuplicateNameError(TaskRegistryError):
    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class NotFoundError(TaskRegistryError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task id {task_id} not found.")
        self.task_id = task_id
