# src/simple_todo/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core import actions
from ..core.state import AppState
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

STRIKE = "\033[9m"
RESET = "\033[0m"


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /edit, ...)."""

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
        Returns a reply string ("" when there is nothing to say)
        or None if the line is not a command.
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
        lines.append("Anything else is the task input: it adds a task, or saves the task being edited.")
        lines.append("Start a task with // to keep one leading slash, e.g. //r/python digest.")
        return "\n".join(lines)


registry = CommandRegistry()


def render_tasks(state: AppState, *, color: bool = False) -> str:
    """The list screen: title, then one numbered row per task."""
    title = str(getattr(state.settings, "app_name", "Simple To-Do List"))
    lines = [title]
    if not state.tasks:
        lines.append("  (no tasks yet)")
    for pos, task in enumerate(state.tasks, start=1):
        mark = "x" if task.is_completed else " "
        text = task.text
        if task.is_completed and color:
            text = f"{STRIKE}{text}{RESET}"
        editing = " ✎" if task.id == state.session.editing_task_id else ""
        lines.append(f"  {pos}. [{mark}] {text}{editing}")
    return "\n".join(lines)


def _resolve_task(state: AppState, args: list[str], usage: str) -> Task | str:
    """Map a 1-based list position to a task, or return an error message."""
    if len(args) != 1:
        return f"Usage: {usage}"
    raw = args[0].rstrip(".")
    if not raw.isdecimal():
        return "Invalid task number."
    pos = int(raw)
    if pos < 1 or pos > len(state.tasks):
        return f"No task #{pos}."
    return state.tasks[pos - 1]


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    color = bool(getattr(state.settings, "color", False))
    return render_tasks(state, color=color)


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit N -> copy task N into the input; the next plain line replaces its text.
    Starting another edit drops the current one without saving it.
    """
    found = _resolve_task(state, args, "/edit <n>")
    if isinstance(found, str):
        return found

    previous = state.session.editing_task_id
    actions.start_edit(state, found.id)

    note = ""
    if previous is not None and previous != found.id:
        note = " (previous edit discarded)"
    return (
        f"Editing: {found.text}{note}\n"
        "Type the new text and press Enter, or /cancel."
    )


def cmd_cancel(state: AppState, args: list[str]) -> str:
    if not state.session.active:
        return "Not editing."
    actions.cancel_edit(state)
    return "Edit cancelled."


def cmd_toggle(state: AppState, args: list[str]) -> str:
    found = _resolve_task(state, args, "/toggle <n>")
    if isinstance(found, str):
        return found
    actions.toggle_task(state, found.id)
    return ""


def cmd_rm(state: AppState, args: list[str]) -> str:
    found = _resolve_task(state, args, "/rm <n>")
    if isinstance(found, str):
        return found
    actions.delete_task(state, found.id)
    return ""


def cmd_status(state: AppState, args: list[str]) -> str:
    done = sum(1 for t in state.tasks if t.is_completed)
    persistence = state.persistence
    key = getattr(persistence, "key", "?")
    pending = getattr(persistence, "pending_writes", 0)
    last_error = getattr(persistence, "last_error", None)
    editing = "yes" if state.session.active else "no"
    return (
        "Status:\n"
        f"  Tasks: {len(state.tasks)} ({done} done)\n"
        f"  Editing: {editing}\n"
        f"  Storage key: {key}\n"
        f"  Pending writes: {pending}\n"
        f"  Last save error: {last_error or 'none'}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("edit", cmd_edit, help_text="Edit task N: /edit 2.", aliases=["e"])
registry.register("cancel", cmd_cancel, help_text="Stop editing without saving.")
registry.register("toggle", cmd_toggle, help_text="Mark task N done/not done: /toggle 2.", aliases=["done", "t"])
registry.register("rm", cmd_rm, help_text="Delete task N: /rm 2.", aliases=["delete", "del"])
registry.register("status", cmd_status, help_text="Show counts and persistence health.")
