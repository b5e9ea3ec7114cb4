# src/simple_todo/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (tasks loaded once from storage),
runs the console REPL, then drains pending saves on the way out.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        state.persistence.shutdown()
    except Exception:
        logger.exception("Failed to stop the persistence writer.")


def main() -> None:
    settings = get_settings()
    setup_logging(settings)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
