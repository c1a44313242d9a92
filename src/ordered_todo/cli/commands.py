# src/ordered_todo/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.errors import TaskRegistryError
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Registry errors are turned into the reply text; anything else propagates.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except TaskRegistryError as e:
            logger.debug("/%s rejected: %s", name, e)
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"{task.order}. [{mark}] {task.name} (id={task.id})"


def _parse_int(raw: str, what: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        logger.debug("Not an integer %s: %r", what, raw)
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    total, done = state.tasks.counts()
    return f"Status:\n  Tasks: {total}\n  Completed: {done}\n  Open: {total - done}"


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list         -> all tasks in order
    /list <term>  -> tasks whose name contains <term> (case-insensitive)
    """
    term = " ".join(args) if args else None
    tasks = state.tasks.list(term)
    if not tasks:
        return f'No tasks match "{term}".' if term else "The list is empty."
    return "\n".join(format_task(t) for t in tasks)


def cmd_add(state: AppState, args: list[str]) -> str:
    task = state.tasks.add(" ".join(args))
    return f"Added: {format_task(task)}"


def cmd_rename(state: AppState, args: list[str]) -> str:
    """/rename <id> <new name>"""
    if len(args) < 2:
        return "Usage: /rename <id> <new name>."
    task_id = _parse_int(args[0], "task id")
    if task_id is None:
        return f"Invalid task id: {args[0]}."
    task = state.tasks.rename(task_id, " ".join(args[1:]))
    return f"Renamed: {format_task(task)}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /delete <id>."
    task_id = _parse_int(args[0], "task id")
    if task_id is None:
        return f"Invalid task id: {args[0]}."
    state.tasks.delete(task_id)
    return f"Task {task_id} removed."


def cmd_done(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /done <id>."
    task_id = _parse_int(args[0], "task id")
    if task_id is None:
        return f"Invalid task id: {args[0]}."
    task = state.tasks.toggle_complete(task_id)
    return f"{'Completed' if task.completed else 'Reopened'}: {format_task(task)}"


def cmd_move(state: AppState, args: list[str]) -> str:
    """/move <id> <position>  (1 = top of the list)"""
    if len(args) != 2:
        return "Usage: /move <id> <position>."
    task_id = _parse_int(args[0], "task id")
    if task_id is None:
        return f"Invalid task id: {args[0]}."
    new_order = _parse_int(args[1], "position")
    if new_order is None:
        return f"Invalid position: {args[1]}."
    state.tasks.reorder(task_id, new_order)
    return f"Moved: {format_task(state.tasks.get(task_id))}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task totals.")
registry.register("list", cmd_list, help_text="List tasks: /list [term].", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <name>.")
registry.register(
    "rename", cmd_rename, help_text="Rename a task: /rename <id> <name>.", aliases=["edit"]
)
registry.register("delete", cmd_delete, help_text="Remove a task: /delete <id>.", aliases=["rm"])
registry.register(
    "done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle"]
)
registry.register(
    "move", cmd_move, help_text="Move a task to a position: /move <id> <pos>.", aliases=["mv"]
)
