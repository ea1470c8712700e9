"""
Assignment Lock Manager

Per-key mutual exclusion for operations that read occupancy and then commit.
Keys name a resource or a ship; one operation may hold several keys, which
are always acquired in sorted order so concurrent operations cannot deadlock.
"""

import threading
from collections.abc import Generator, Iterable
from contextlib import contextmanager


def resource_key(resource_id: int) -> str:
    return f"resource:{resource_id}"


def ship_key(ship_id: int) -> str:
    return f"ship:{ship_id}"


class AssignmentLockManager:
    """Hands out one lock per key and holds groups of them together."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def _lock_for(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def hold(self, keys: Iterable[str | None]) -> Generator[list[str], None, None]:
        """
        Hold the locks for all given keys until the block exits.

        None entries are skipped so callers can pass optional keys directly.
        """
        ordered = sorted({key for key in keys if key is not None})
        acquired: list[threading.Lock] = []
        try:
            for key in ordered:
                lock = self._lock_for(key)
                lock.acquire()
                acquired.append(lock)
            yield ordered
        finally:
            for lock in reversed(acquired):
                lock.release()

    def is_held(self, key: str) -> bool:
        with self._guard:
            lock = self._locks.get(key)
        return lock is not None and lock.locked()
