"""
Per-Key Locking
===============

Serializes check-then-act sequences (existence check before delete,
stock read-modify-write, email uniqueness before create) that touch the
same entity id or email. Different keys never block each other.
"""
import threading
from contextlib import contextmanager
from typing import Dict, Hashable, Iterator, List


class _Entry:
    __slots__ = ("lock", "holders")

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.holders = 0


class KeyedLock:
    """Registry of reentrant locks, one per key, released when unused."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._entries: Dict[Hashable, _Entry] = {}

    def _checkout(self, key: Hashable) -> _Entry:
        with self._guard:
            entry = self._entries.get(key)
            if entry is None:
                entry = self._entries[key] = _Entry()
            entry.holders += 1
            return entry

    def _checkin(self, key: Hashable, entry: _Entry) -> None:
        with self._guard:
            entry.holders -= 1
            if entry.holders == 0:
                del self._entries[key]

    @contextmanager
    def hold(self, *keys: Hashable) -> Iterator[None]:
        """
        Hold the locks for all ``keys`` for the duration of the block.

        Keys are acquired in a stable order so two callers asking for the
        same pair cannot deadlock. Duplicate keys are acquired once.
        """
        ordered = sorted(set(keys), key=repr)
        acquired: List[tuple] = []
        try:
            for key in ordered:
                entry = self._checkout(key)
                entry.lock.acquire()
                acquired.append((key, entry))
            yield
        finally:
            for key, entry in reversed(acquired):
                entry.lock.release()
                self._checkin(key, entry)

    def active_keys(self) -> int:
        """Number of keys currently held or awaited."""
        with self._guard:
            return len(self._entries)
