# tests/fakes.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field


@dataclass(slots=True)
class MemoryStorage:
    """In-memory KeyValueStorage; records every write for assertions."""

    items: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.writes.append((key, value))

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class FailingStorage:
    """Every call raises, like a full disk or a revoked permission."""

    def get_item(self, key: str) -> str | None:
        raise OSError("storage unavailable")

    def set_item(self, key: str, value: str) -> None:
        raise OSError("storage unavailable")

    def remove_item(self, key: str) -> None:
        raise OSError("storage unavailable")


class GatedStorage(MemoryStorage):
    """
    MemoryStorage whose writes block until `gate` is set.

    Lets a test queue several snapshots while the writer is stuck
    on the first one.
    """

    def __init__(self) -> None:
        super().__init__()
        self.gate = threading.Event()
        self.entered = threading.Event()

    def set_item(self, key: str, value: str) -> None:
        self.entered.set()
        self.gate.wait(timeout=5.0)
        super().set_item(key, value)
