# src/ordered_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires a fresh TaskRegistry into AppState, seeded from settings.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.errors import TaskRegistryError
from ..tasks.task_registry import TaskRegistry

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def build_registry(seed_tasks: list[str]) -> TaskRegistry:
    """
    Create a registry holding `seed_tasks` in the given order.

    Duplicate or blank seed entries are skipped with a warning so a bad env var
    doesn't prevent startup.
    """
    registry = TaskRegistry()
    for name in seed_tasks:
        try:
            registry.add(name)
        except TaskRegistryError as e:
            logger.warning("Skipping seed task %r: %s", name, e)
    return registry


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    registry = build_registry(list(getattr(settings, "seed_tasks", []) or []))
    logger.info("TaskRegistry ready total=%s", len(registry))

    return AppState(settings=settings, tasks=registry)
