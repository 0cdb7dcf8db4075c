# src/sage_tasks/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..core.theme import Theme
from ..tasks.task_models import Task, TaskFilter

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

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
        Returns a reply string (possibly empty) or None if not a command.
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

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Text without a leading slash is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def _resolve_position(state: AppState, args: list[str]) -> Task | str:
    """Map "/cmd N" to the N-th task of the current view, or an error reply."""
    if not args:
        return "Missing task number."
    try:
        pos = int(args[0])
    except ValueError:
        return f"Not a task number: {args[0]}"

    visible = state.manager.view().tasks
    if not 1 <= pos <= len(visible):
        return f"No task #{pos} in the current view."
    return visible[pos - 1]


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    task = state.manager.add_task(" ".join(args))
    return "" if task is None else "Added."


def cmd_toggle(state: AppState, args: list[str]) -> str:
    target = _resolve_position(state, args)
    if isinstance(target, str):
        return target
    if not state.manager.toggle_task(target.id):
        return ""
    # toggle flips in place; the object now carries the new state.
    return f"Marked as {'done' if target.completed else 'pending'}: {target.text}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    target = _resolve_position(state, args)
    if isinstance(target, str):
        return target
    if not state.manager.delete_task(target.id):
        return ""
    return f"Deleted: {target.text}"


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter                        -> show active filter
    /filter all|pending|completed  -> switch filter
    """
    if not args:
        current = state.manager.filters.current()
        options = " | ".join(f.value for f in TaskFilter)
        return f"Filter is {current.value}. Use /filter {options}."

    selected = state.manager.set_filter(args[0])
    return "" if selected is None else f"Showing: {selected.value}"


def cmd_clear(state: AppState, args: list[str]) -> str:
    if state.manager.store.stats().completed == 0:
        return "No completed tasks to clear."

    removed = state.manager.clear_completed()
    if removed == 0:
        return "Nothing cleared."
    return f"Cleared {removed} completed task(s)."


def cmd_list(state: AppState, args: list[str]) -> str:
    state.manager.render()
    return ""


def cmd_stats(state: AppState, args: list[str]) -> str:
    stats = state.manager.store.stats()
    return (
        "Stats:\n"
        f"  Total: {stats.total}\n"
        f"  Completed: {stats.completed}\n"
        f"  Pending: {stats.pending}\n"
        f"  Filter: {state.manager.filters.current().value}"
    )


def cmd_theme(state: AppState, args: list[str]) -> str:
    """
    /theme             -> toggle light/dark
    /theme light|dark  -> set explicitly
    """
    if not args:
        theme = state.theme.toggle()
    else:
        wanted = Theme.from_store(args[0])
        if wanted is None:
            return "Usage: /theme | /theme light | /theme dark."
        theme = state.theme.apply(wanted)

    logger.debug("Theme set to %s", theme.value)
    return f"Dark mode: {'On' if theme is Theme.DARK else 'Off'}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.", aliases=["a"])
registry.register("toggle", cmd_toggle, help_text="Toggle task N of the current view.", aliases=["t", "done"])
registry.register("delete", cmd_delete, help_text="Delete task N of the current view.", aliases=["del", "rm"])
registry.register("filter", cmd_filter, help_text="Filter: /filter all | pending | completed.", aliases=["f"])
registry.register("clear", cmd_clear, help_text="Delete all completed tasks (asks first).")
registry.register("list", cmd_list, help_text="Show the current view.", aliases=["ls"])
registry.register("stats", cmd_stats, help_text="Show task counts.")
registry.register("theme", cmd_theme, help_text="Toggle dark mode: /theme | /theme light | /theme dark.")
