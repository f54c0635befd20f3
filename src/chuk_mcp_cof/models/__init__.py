"""
Pydantic models for the selection system.

This module provides:
- StateChange: Snapshot of tonic, mode and derived scale
"""

from chuk_mcp_cof.models.state import StateChange

__all__ = [
    "StateChange",
]
