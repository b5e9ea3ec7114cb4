# src/simple_todo/logging_setup.py

"""
Logging for the to-do console.

stderr shares the terminal with the REPL prompt, so it only gets what the
user should see: the app's own messages at the configured level, and save or
load failures from the persistence writer. Everything, including each
background write, goes to <data_dir>/simple_todo.log.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "simple_todo.log"
APP_LOGGER = "simple_todo"
# Loggers used from the writer thread; one line per save is too chatty for the prompt.
WRITER_LOGGERS = ("simple_todo.storage.",)


def resolve_level(name: str | None, default: int = logging.INFO) -> int:
    """Map "debug"/"INFO"/"30" to a logging level; unknown names give `default`."""
    raw = str(name or "").strip().upper()
    if raw.isdecimal():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


class _ConsoleNoiseFilter(logging.Filter):
    """Pass simple_todo.* records; storage chatter only from WARNING; others only ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name != APP_LOGGER and not name.startswith(APP_LOGGER + "."):
            return record.levelno >= logging.ERROR
        if name.startswith(WRITER_LOGGERS):
            return record.levelno >= logging.WARNING
        return True


def setup_logging(settings, *, file_level: int = logging.DEBUG) -> Path:
    """
    Install the console and file handlers on the root logger.

    Reads `log_level` and `data_dir` from settings. Replaces any handlers
    already installed, so calling it twice does not duplicate output.
    Returns the log file path.
    """
    log_dir = Path(getattr(settings, "data_dir", ".local/simple_todo"))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(min(file_level, logging.DEBUG))
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            # a previous setup_logging call; release the log file
            handler.close()

    formatter = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s [%(threadName)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(resolve_level(getattr(settings, "log_level", "INFO")))
    console.setFormatter(formatter)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    to_file = logging.FileHandler(str(log_file), encoding="utf-8")
    to_file.setLevel(file_level)
    to_file.setFormatter(formatter)
    root.addHandler(to_file)

    logging.captureWarnings(True)
    return log_file
