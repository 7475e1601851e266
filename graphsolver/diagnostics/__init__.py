"""Diagnostics and debugging utilities for graphsolver."""

from .checks import assert_non_negative_weights, assert_spanning_forest
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_non_negative_weights",
    "assert_spanning_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
