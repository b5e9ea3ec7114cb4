# src/simple_todo/storage/gateway.py

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable

from ..core.errors import PersistenceError
from ..core.ports import KeyValueStorage
from ..tasks import task_store
from ..tasks.task_models import TaskCollection

logger = logging.getLogger(__name__)

DEFAULT_KEY = "tasks"

ErrorCallback = Callable[[PersistenceError], None]


class PersistenceGateway:
    """
    Load-once / save-on-every-mutation adapter to a key-value storage.

    The whole collection is serialized and written under a single key.

    Design goals:
    - save() never blocks the UI: snapshots go to a worker thread.
    - Last write wins: the worker drains the queue and writes only the
      newest snapshot it sees.
    - Failures are observable (log, last_error, on_error) but never raised
      to the caller of save(); in-memory state stays authoritative.

    With background=False every save is written synchronously (tests,
    one-shot scripts).
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = DEFAULT_KEY,
        background: bool = True,
        on_error: ErrorCallback | None = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._on_error = on_error

        self._queue: queue.Queue[str | None] | None = None
        self._worker: threading.Thread | None = None
        self._stop_requested = False

        self.last_error: PersistenceError | None = None
        self.completed_writes = 0
        self.failed_writes = 0

        if background:
            self._queue = queue.Queue()
            self._worker = threading.Thread(
                target=self._writer_loop, name="simple-todo-writer", daemon=True
            )
            self._worker.start()

        logger.info("PersistenceGateway ready key=%s background=%s", self._key, background)

    @property
    def key(self) -> str:
        return self._key

    @property
    def pending_writes(self) -> int:
        if self._queue is None:
            return 0
        return self._queue.qsize()

    # ---- reads ----

    def load(self) -> str | None:
        """Serialized collection, or None on first run."""
        try:
            return self._storage.get_item(self._key)
        except Exception as e:
            raise PersistenceError(f"failed to load tasks from key {self._key!r}: {e}") from e

    # ---- writes ----

    def save(self, collection: TaskCollection) -> None:
        payload = task_store.serialize(collection)
        if self._queue is None or self._stop_requested:
            self._write(payload)
            return
        self._queue.put(payload)

    def flush(self) -> None:
        """Block until every queued snapshot has been handled."""
        if self._queue is None:
            return
        self._queue.join()

    def shutdown(self) -> None:
        """Flush and stop the worker. Later saves are written synchronously."""
        if self._stop_requested:
            return
        self._stop_requested = True

        if self._queue is None:
            return

        logger.info("Stopping persistence writer...")
        self._queue.put(None)
        self._queue.join()

        if self._worker is not None:
            self._worker.join(timeout=2.0)

        logger.info("Persistence writer stopped (written=%d failed=%d).", self.completed_writes, self.failed_writes)

    # ---- internals ----

    def _write(self, payload: str) -> bool:
        try:
            self._storage.set_item(self._key, payload)
        except Exception as e:
            err = PersistenceError(f"failed to save tasks under key {self._key!r}: {e}")
            err.__cause__ = e
            self.last_error = err
            self.failed_writes += 1
            logger.exception("Error saving tasks (key=%s).", self._key)
            if self._on_error is not None:
                try:
                    self._on_error(err)
                except Exception:
                    logger.exception("Persistence on_error callback failed.")
            return False

        self.completed_writes += 1
        self.last_error = None
        logger.debug("Saved tasks (key=%s bytes=%d)", self._key, len(payload))
        return True

    def _writer_loop(self) -> None:
        assert self._queue is not None
        q = self._queue
        logger.debug("Persistence writer thread started.")

        while True:
            item = q.get()
            latest = item
            stop = item is None
            drained = 0

            # Coalesce: anything queued behind `item` supersedes it.
            while not stop:
                try:
                    nxt = q.get_nowait()
                except queue.Empty:
                    break
                drained += 1
                if nxt is None:
                    stop = True
                else:
                    latest = nxt

            try:
                if latest is not None:
                    if drained:
                        logger.debug("Coalesced %d queued snapshots into one write.", drained)
                    self._write(latest)
            finally:
                for _ in range(drained + 1):
                    q.task_done()

            if stop:
                logger.debug("Persistence writer received stop signal.")
                return
