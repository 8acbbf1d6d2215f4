"""Debug mode switch for the shortest-path algorithms.

With debug mode on, Dijkstra validates its heap after every extraction and
every algorithm checks the distance vectors it produces. The checks cost
O(n) per extraction, so the mode is off unless ``SHORTPATHS_DEBUG`` is set
to a true value (``1``, ``true``, ``yes`` or ``on``) or it is switched on
in code.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})

_debug_enabled: bool = os.getenv("SHORTPATHS_DEBUG", "").strip().lower() in _TRUE_VALUES


def is_debug_enabled() -> bool:
    """Return True while the invariant checks are active."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Switch the invariant checks on or off for the whole process."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block with debug mode set to ``enabled``, then restore it.

    Example:
        >>> with debug_context():
        ...     result = johnson(G)  # heap and distance checks run here
    """
    previous = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)
