# src/simple_todo/storage/kv_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import threading
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """
    File-backed key-value storage (the app's local device storage).

    The file holds one JSON object mapping string keys to string values.

    - writes go to a temp file and are moved into place with os.replace
    - a lock serializes access (the persistence writer runs in its own thread)
    - a corrupt file fails reads; writes log it and start from an empty map
    """

    def __init__(self, path: str | Path = "storage.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        logger.info("JsonFileStorage ready path=%s exists=%s", self._path, self._path.exists())

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _read_map(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        data = json.loads(self._path.read_text("utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"storage file {self._path} does not hold a JSON object")
        return data

    def _write_map(self, data: dict[str, str]) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            # Best-effort: keep the file private on disk.
            os.chmod(self._path, 0o600)

    # ---- public API ----

    def get_item(self, key: str) -> str | None:
        with self._lock:
            value = self._read_map().get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"value for key {key!r} is not a string")
        return value

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            try:
                data = self._read_map()
            except ValueError:
                logger.exception("Storage file %s is corrupt; rewriting it from scratch.", self._path)
                data = {}
            data[key] = value
            self._write_map(data)

    def remove_item(self, key: str) -> None:
        with self._lock:
            data = self._read_map()
            if key not in data:
                return
            del data[key]
            self._write_map(data)
