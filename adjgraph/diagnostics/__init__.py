"""Diagnostics and debugging utilities for adjgraph."""

from .core import (
    adjacency_violations,
    assert_adjacency_consistent,
    is_adjacency_consistent,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "adjacency_violations",
    "is_adjacency_consistent",
    "assert_adjacency_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
