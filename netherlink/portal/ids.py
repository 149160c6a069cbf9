"""Process-wide portal identity.

IDs are never persisted: loading saved portals assigns fresh ones, so an ID is
only meaningful within one running process.
"""

from __future__ import annotations

import itertools
import threading

_lock = threading.Lock()
_counter = itertools.count(1)  # 0 is reserved


def next_portal_id() -> int:
    """Return a new unique, monotonically increasing portal ID."""
    with _lock:
        return next(_counter)


def format_portal_id(portal_id: int) -> str:
    return f"#{portal_id}"
