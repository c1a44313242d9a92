# src/ordered_todo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the request handlers and console commands.

They depend on a Protocol rather than the concrete registry, so an alternative
backend (or a fake in tests) can be dropped into AppState.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    # Queries
    def list(self, filter_name: str | None = None) -> list[Task]: ...
    def get(self, task_id: int) -> Task: ...
    def counts(self) -> tuple[int, int]: ...

    # Mutations
    def add(self, name: str) -> Task: ...
    def rename(self, task_id: int, new_name: str) -> Task: ...
    def delete(self, task_id: int) -> None: ...
    def toggle_complete(self, task_id: int) -> Task: ...
    def reorder(self, task_id: int, new_order: int) -> None: ...
