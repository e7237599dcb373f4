"""Diagnostics and debugging utilities for numlabs."""

from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from .trace import trace_iteration

__all__ = [
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "trace_iteration",
]
