# src/simple_todo/connectors/console_connector.py

from __future__ import annotations

import logging
import sys

from ..cli.commands import registry as command_registry
from ..cli.commands import render_tasks
from ..core import actions
from ..core.errors import ValidationError
from ..core.state import AppState
from ..tasks.edit_session import SubmitOutcome

logger = logging.getLogger(__name__)

ADD_PROMPT = "+ "
EDIT_PROMPT = "✓ "
# A line starting with this is task text with one leading slash, not a command.
LITERAL_SLASH = "//"


def _use_color(state: AppState) -> bool:
    if not getattr(state.settings, "color", False):
        return False
    try:
        return sys.stdout.isatty()
    except Exception:
        return False


def _prompt(state: AppState) -> str:
    return EDIT_PROMPT if state.session.active else ADD_PROMPT


def _snapshot(state: AppState) -> tuple[object, str | None]:
    return state.tasks, state.session.editing_task_id


def run_console_loop(state: AppState) -> None:
    """
    Read-eval-print loop for the list screen.

    A plain line is the text input (add, or save the task being edited);
    /commands act on tasks by their list number, and a leading // adds
    text that itself starts with a slash. The list is redrawn
    whenever the tasks or the edit target change.
    """
    logger.info("Console connector started (%d tasks).", len(state.tasks))
    color = _use_color(state)

    print(render_tasks(state, color=color))
    print("\nType a task and press Enter to add it. Use /help for commands, /exit to quit.\n")

    while True:
        try:
            line = input(_prompt(state))
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        stripped = line.strip()
        if stripped.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        before = _snapshot(state)

        try:
            if stripped.startswith(LITERAL_SLASH):
                reply = None
                line = line.replace("/", "", 1)
            else:
                reply = command_registry.handle(state, stripped)
            if reply is None:
                result = actions.submit_input(state, line)
                if result.outcome is SubmitOutcome.STALE:
                    reply = "That task no longer exists; edit dropped."
        except ValidationError as e:
            reply = f"Error: {e}"
        except Exception:
            logger.exception("Console handler crashed.")
            reply = "Internal error while handling that input."

        if reply:
            print(reply)

        if _snapshot(state) != before:
            print()
            print(render_tasks(state, color=color))
            print()

    logger.info("Console connector finished.")
