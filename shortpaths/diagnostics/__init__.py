"""Diagnostics and debugging utilities for shortpaths."""

from .core import (
    assert_nonnegative_costs,
    assert_valid_distances,
    find_negative_edge,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "find_negative_edge",
    "assert_nonnegative_costs",
    "assert_valid_distances",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
