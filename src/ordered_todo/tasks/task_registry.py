# src/ordered_todo/tasks/task_registry.py

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import replace

from .errors import DuplicateNameError, NotFoundError, ValidationError
from .task_models import Task

logger = logging.getLogger(__name__)

ADD_DUPLICATE_MESSAGE = (
    "Oops! Looks like this task is already in your list. How about adding a new one?"
)
RENAME_DUPLICATE_MESSAGE = "Another task already has this description."
EMPTY_NAME_MESSAGE = "Please provide the task description."
EMPTY_FILTER_MESSAGE = "Please provide the search term."


class TaskRegistry:
    """
    In-memory ordered task registry.

    Invariants kept after every call:
    - ids are unique and never reused
    - names are unique (case-sensitive exact match)
    - order values are exactly 1..N

    Every check runs before the first write, so a failed call leaves the
    registry untouched. Tasks handed out are copies; callers never hold the
    registry's own objects.

    Thread-safety:
    - one RLock serializes every public method (reads included)
    """

    def __init__(self, names: Iterable[str] | None = None) -> None:
        self._tasks: dict[int, Task] = {}
        self._ids_by_name: dict[str, int] = {}
        self._next_id = 1
        self._lock = threading.RLock()

        for name in names or ():
            self.add(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    # ---- low-level helpers ----

    def _require(self, task_id: int) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    @staticmethod
    def _check_name(name: object) -> str:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError(EMPTY_NAME_MESSAGE)
        return name

    def _sorted(self, tasks: Iterable[Task]) -> list[Task]:
        return [replace(t) for t in sorted(tasks, key=lambda t: t.order)]

    # ---- queries ----

    def get(self, task_id: int) -> Task:
        with self._lock:
            return replace(self._require(task_id))

    def list(self, filter_name: str | None = None) -> list[Task]:
        """
        Return tasks ascending by order.

        With `filter_name`, only tasks whose name contains it (case-insensitive)
        are returned. The filtered view keeps the same ordering.
        """
        with self._lock:
            if filter_name is None:
                return self._sorted(self._tasks.values())

            if not isinstance(filter_name, str) or filter_name == "":
                raise ValidationError(EMPTY_FILTER_MESSAGE)

            needle = filter_name.casefold()
            return self._sorted(t for t in self._tasks.values() if needle in t.name.casefold())

    def counts(self) -> tuple[int, int]:
        """Return (total, completed)."""
        with self._lock:
            done = sum(1 for t in self._tasks.values() if t.completed)
            return len(self._tasks), done

    # ---- mutations ----

    def add(self, name: str) -> Task:
        with self._lock:
            name = self._check_name(name)
            if name in self._ids_by_name:
                raise DuplicateNameError(name, ADD_DUPLICATE_MESSAGE)

            task = Task(id=self._next_id, name=name, completed=False, order=len(self._tasks) + 1)
            self._next_id += 1

            self._tasks[task.id] = task
            self._ids_by_name[name] = task.id
            logger.debug("Task added id=%s order=%s name=%r", task.id, task.order, name)
            return replace(task)

    def rename(self, task_id: int, new_name: str) -> Task:
        with self._lock:
            task = self._require(task_id)
            new_name = self._check_name(new_name)

            owner = self._ids_by_name.get(new_name)
            if owner is not None and owner != task_id:
                raise DuplicateNameError(new_name, RENAME_DUPLICATE_MESSAGE)

            if new_name != task.name:
                del self._ids_by_name[task.name]
                self._ids_by_name[new_name] = task_id
                logger.debug("Task renamed id=%s %r -> %r", task_id, task.name, new_name)
                task.name = new_name
            return replace(task)

    def delete(self, task_id: int) -> None:
        with self._lock:
            task = self._require(task_id)

            del self._tasks[task_id]
            del self._ids_by_name[task.name]

            # Close the vacated slot.
            for other in self._tasks.values():
                if other.order > task.order:
                    other.order -= 1
            logger.debug("Task deleted id=%s order=%s", task_id, task.order)

    def toggle_complete(self, task_id: int) -> Task:
        with self._lock:
            task = self._require(task_id)
            task.completed = not task.completed
            logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)
            return replace(task)

    def reorder(self, task_id: int, new_order: int) -> None:
        """
        Move a task to the absolute position `new_order` (1-based).

        Tasks strictly between the old and new position shift by one slot in the
        opposite direction of the move; everything else keeps its order.
        """
        with self._lock:
            task = self._require(task_id)

            size = len(self._tasks)
            if isinstance(new_order, bool) or not isinstance(new_order, int):
                raise ValidationError(f"Order must be an integer (got {new_order!r}).")
            if not 1 <= new_order <= size:
                raise ValidationError(f"Order must be between 1 and {size} (got {new_order}).")

            old_order = task.order
            if old_order == new_order:
                return

            for other in self._tasks.values():
                if other is task:
                    continue
                if new_order <= other.order < old_order:
                    # moving earlier: open a slot at new_order
                    other.order += 1
                elif old_order < other.order <= new_order:
                    # moving later: close the slot at old_order
                    other.order -= 1

            task.order = new_order
            logger.debug("Task moved id=%s order %s -> %s", task_id, old_order, new_order)
