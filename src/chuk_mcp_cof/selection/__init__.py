"""
Selection management - the selected tonic and mode.

This module provides:
- SelectionStore: Owned selection state with observer broadcast
"""

from chuk_mcp_cof.selection.store import Observer, SelectionStore

__all__ = [
    "Observer",
    "SelectionStore",
]
