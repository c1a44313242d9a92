# src/ordered_todo/tasks/task_api.py

"""
Request handlers for a transport layer (query/mutation resolvers).

Each handler takes the AppState, calls exactly one registry operation and shapes
the outcome. Registry errors become `ok=False` responses carrying the
human-readable message; anything else propagates to the transport.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..core.state import AppState
from .errors import TaskRegistryError

logger = logging.getLogger(__name__)

TaskDict = dict[str, Any]


@dataclass(slots=True)
class QueryResult:
    items: list[TaskDict] = field(default_factory=list)
    error: str | None = None


@dataclass(slots=True)
class MutationResult:
    ok: bool
    error: str | None = None
    task: TaskDict | None = None


def _failed(op: str, exc: TaskRegistryError) -> MutationResult:
    logger.info("%s rejected: %s", op, exc)
    return MutationResult(ok=False, error=str(exc))


async def todo_list(state: AppState, name_filter: str | None = None) -> QueryResult:
    try:
        tasks = state.tasks.list(name_filter)
    except TaskRegistryError as e:
        logger.info("todoList rejected filter=%r: %s", name_filter, e)
        return QueryResult(error=str(e))
    return QueryResult(items=[t.to_dict() for t in tasks])


async def add_item(state: AppState, name: str) -> MutationResult:
    try:
        task = state.tasks.add(name)
    except TaskRegistryError as e:
        return _failed("addItem", e)
    return MutationResult(ok=True, task=task.to_dict())


async def update_item(state: AppState, task_id: int, name: str) -> MutationResult:
    try:
        task = state.tasks.rename(task_id, name)
    except TaskRegistryError as e:
        return _failed("updateItem", e)
    return MutationResult(ok=True, task=task.to_dict())


async def delete_item(state: AppState, task_id: int) -> MutationResult:
    try:
        state.tasks.delete(task_id)
    except TaskRegistryError as e:
        return _failed("deleteItem", e)
    return MutationResult(ok=True)


async def complete_item(state: AppState, task_id: int) -> MutationResult:
    try:
        task = state.tasks.toggle_complete(task_id)
    except TaskRegistryError as e:
        return _failed("completeItem", e)
    return MutationResult(ok=True, task=task.to_dict())


async def move_item(state: AppState, task_id: int, new_order: int) -> MutationResult:
    try:
        state.tasks.reorder(task_id, new_order)
        task = state.tasks.get(task_id)
    except TaskRegistryError as e:
        return _failed("moveItem", e)
    return MutationResult(ok=True, task=task.to_dict())
