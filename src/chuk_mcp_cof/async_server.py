#!/usr/bin/env python3
"""
Async Circle-of-Fifths MCP Server using chuk-mcp-server

This server exposes a selection store for a circle-of-fifths view. Clients
pick a tonic and a mode; the store derives the scale and broadcasts it to
its observers.

The server provides tools for:
- Listing the pitch classes and modes
- Getting the circle-of-fifths layout order
- Changing the selected tonic and mode
- Reading the current selection with labelled scale degrees
"""

from __future__ import annotations

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_cof.config import SelectionConfig
from chuk_mcp_cof.models import StateChange
from chuk_mcp_cof.selection import SelectionStore
from chuk_mcp_cof.tools import register_selection_tools

logger = logging.getLogger(__name__)


def log_state_change(state_change: StateChange) -> None:
    """Observer that logs every broadcast selection."""
    logger.info(
        "Selection: %s %s -> %s",
        state_change.tonic.label,
        state_change.mode.label,
        " ".join(p.label for p in state_change.scale),
    )


def build_server(
    config: SelectionConfig | None = None,
) -> tuple[ChukMCPServer, SelectionStore, dict]:
    """
    Create the MCP server and the selection store it drives.

    Observers are registered before the initial selection is announced
    with change_tonic.

    Args:
        config: Startup configuration (defaults if None)

    Returns:
        The server, the store and the registered tool functions
    """
    config = config or SelectionConfig()

    mcp = ChukMCPServer("chuk-mcp-cof")
    store = SelectionStore(tonic=config.tonic(), mode=config.mode())

    tools = register_selection_tools(mcp, store, prefer_flats=config.prefer_flats)
    store.add_observer(log_state_change)

    # Announce the initial selection
    store.change_tonic(config.tonic())

    logger.info("CHUK Circle-of-Fifths MCP Server initialized")
    logger.info(f"  Default selection: {config.tonic().label} {config.mode().label}")

    return mcp, store, tools
