# src/ordered_todo/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings live on the state so handlers don't reach for globals.
    settings: object

    tasks: TaskRepo
