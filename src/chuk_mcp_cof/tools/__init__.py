"""
MCP tool implementations.

- selection - Table browsing and tonic/mode selection
"""

from chuk_mcp_cof.tools.selection import register_selection_tools

__all__ = [
    "register_selection_tools",
]
