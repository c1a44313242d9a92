# src/ordered_todo/tasks/task_models.py

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True)
class Task:
    """
    A single named, completable task.

    `order` is the 1-based position in the display sequence. Order values across
    a registry always form a dense 1..N permutation.
    """

    id: int
    name: str
    completed: bool = False
    order: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
