"""Per-property lock table."""

import threading
from collections.abc import Hashable, Iterator
from contextlib import contextmanager


class KeyedLock:
    """Hand out one re-entrant lock per key while the key is in use.

    Operations on the same key are serialized; different keys never
    contend beyond the brief table update. An entry lives only while some
    thread holds or waits for its lock, so the table never outgrows the
    number of keys in flight.
    """

    def __init__(self) -> None:
        self._table_lock = threading.Lock()
        # key -> [lock, number of holders and waiters]
        self._locks: dict[Hashable, list] = {}

    def _acquire_entry(self, key: Hashable) -> threading.RLock:
        with self._table_lock:
            entry = self._locks.get(key)
            if entry is None:
                entry = [threading.RLock(), 0]
                self._locks[key] = entry
            entry[1] += 1
            return entry[0]

    def _release_entry(self, key: Hashable) -> None:
        with self._table_lock:
            entry = self._locks[key]
            entry[1] -= 1
            if entry[1] == 0:
                del self._locks[key]

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        """Hold the lock for ``key`` for the duration of the block."""
        lock = self._acquire_entry(key)
        try:
            with lock:
                yield
        finally:
            self._release_entry(key)

    def __len__(self) -> int:
        with self._table_lock:
            return len(self._locks)
