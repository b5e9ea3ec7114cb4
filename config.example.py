# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "Title shown above the list (default: Simple To-Do List).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/simple_todo).",
    "TODO_STORAGE_PATH": "Key-value storage file (default: <data_dir>/storage.json).",
    # Persistence
    "TODO_STORAGE_KEY": "Key the task list is stored under (default: tasks).",
    "TODO_BACKGROUND_SAVES": "Write saves from a background thread (true/false, default: true).",
    # Console
    "TODO_COLOR": "Strike through completed tasks on a terminal (true/false, default: true).",
}
