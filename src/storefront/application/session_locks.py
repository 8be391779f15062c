"""Per-session locks for cart use cases.

A cart is loaded, mutated and written back as one step.  Two requests for
the same session must not interleave those steps, so each cart use case
holds the session's lock for its whole duration.

A session's lock lives only while some caller holds it or waits for it,
so the registry does not grow with every session ever seen.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class _SessionLock:

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


_registry_lock = threading.Lock()
_locks: dict[str, _SessionLock] = {}


@contextmanager
def session_lock(session_id: str) -> Iterator[None]:
    with _registry_lock:
        entry = _locks.get(session_id)
        if entry is None:
            entry = _locks[session_id] = _SessionLock()
        entry.users += 1
    try:
        with entry.lock:
            yield
    finally:
        with _registry_lock:
            entry.users -= 1
            if entry.users == 0:
                del _locks[session_id]


def active_sessions() -> int:
    """Number of sessions with a lock currently held or awaited."""
    with _registry_lock:
        return len(_locks)
