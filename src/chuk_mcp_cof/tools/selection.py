"""
Selection tools - MCP tools for browsing the tables and changing the selection.

These play the part of the interactive front end: they read the fixed
pitch-class and mode tables, pick a tonic or mode, and report the state
the store broadcast.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_cof.constants import ErrorMessages, SuccessMessages
from chuk_mcp_cof.core import (
    MODES_BY_BRIGHTNESS,
    PITCH_CLASSES,
    Mode,
    PitchClass,
    circle_of_fifths,
    mode_steps,
)
from chuk_mcp_cof.selection import SelectionStore

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_selection_tools(
    mcp: ChukMCPServer,
    store: SelectionStore,
    prefer_flats: bool = False,
) -> dict[str, Any]:
    """
    Register selection tools with the MCP server.

    Args:
        mcp: The MCP server instance
        store: The selection store the tools drive
        prefer_flats: Spell accidentals as flats in tool output

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def cof_list_notes() -> str:
        """
        List the 12 pitch classes in chromatic order.

        Returns:
            JSON string with note names and indices

        Example:
            cof_list_notes()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "notes": [
                        {"name": p.spell(prefer_flats), "index": p.index} for p in PITCH_CLASSES
                    ],
                    "count": len(PITCH_CLASSES),
                }
            )
        except Exception as e:
            logger.exception("Failed to list notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["cof_list_notes"] = cof_list_notes

    @mcp.tool  # type: ignore[arg-type]
    async def cof_list_modes() -> str:
        """
        List the 7 diatonic modes, brightest first.

        Each mode includes its step pattern (W = whole step, H = half step).

        Returns:
            JSON string with mode names, indices and step patterns

        Example:
            cof_list_modes()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "modes": [
                        {
                            "name": m.label,
                            "index": m.index,
                            "steps": " ".join(str(step) for step in mode_steps(m)),
                        }
                        for m in MODES_BY_BRIGHTNESS
                    ],
                    "count": len(MODES_BY_BRIGHTNESS),
                }
            )
        except Exception as e:
            logger.exception("Failed to list modes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["cof_list_modes"] = cof_list_modes

    @mcp.tool  # type: ignore[arg-type]
    async def cof_circle_of_fifths() -> str:
        """
        Get the pitch classes in circle-of-fifths order, starting from C.

        Returns:
            JSON string with the 12 notes in layout order

        Example:
            cof_circle_of_fifths()
        """
        try:
            fifths = circle_of_fifths()
            return json.dumps(
                {
                    "status": "success",
                    "notes": [{"name": p.spell(prefer_flats), "index": p.index} for p in fifths],
                }
            )
        except Exception as e:
            logger.exception("Failed to build circle of fifths")
            return json.dumps({"status": "error", "message": str(e)})

    tools["cof_circle_of_fifths"] = cof_circle_of_fifths

    @mcp.tool  # type: ignore[arg-type]
    async def cof_get_selection() -> str:
        """
        Get the current tonic, mode and scale.

        Returns:
            JSON string with the selection and its labelled scale degrees

        Example:
            cof_get_selection()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "selection": store.snapshot().to_dict(prefer_flats),
                }
            )
        except Exception as e:
            logger.exception("Failed to get selection")
            return json.dumps({"status": "error", "message": str(e)})

    tools["cof_get_selection"] = cof_get_selection

    @mcp.tool  # type: ignore[arg-type]
    async def cof_change_tonic(tonic: str) -> str:
        """
        Select a new tonic, keeping the current mode.

        Args:
            tonic: Note name (e.g., 'C', 'F#', 'Bb')

        Returns:
            JSON string with the new selection

        Example:
            cof_change_tonic(tonic="A")
        """
        try:
            pitch = PitchClass.parse(tonic)
        except ValueError:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.UNKNOWN_TONIC.format(tonic=tonic)}
            )

        try:
            store.change_tonic(pitch)
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.TONIC_CHANGED.format(
                        tonic=pitch.spell(prefer_flats)
                    ),
                    "selection": store.snapshot().to_dict(prefer_flats),
                }
            )
        except Exception as e:
            logger.exception("Failed to change tonic")
            return json.dumps({"status": "error", "message": str(e)})

    tools["cof_change_tonic"] = cof_change_tonic

    @mcp.tool  # type: ignore[arg-type]
    async def cof_change_mode(mode: str) -> str:
        """
        Select a new mode, keeping the current tonic.

        Args:
            mode: Mode name (e.g., 'dorian', 'minor', 'Major / Ionian')

        Returns:
            JSON string with the new selection

        Example:
            cof_change_mode(mode="dorian")
        """
        try:
            new_mode = Mode.parse(mode)
        except ValueError:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.UNKNOWN_MODE.format(mode=mode)}
            )

        try:
            store.change_mode(new_mode)
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.MODE_CHANGED.format(mode=new_mode.label),
                    "selection": store.snapshot().to_dict(prefer_flats),
                }
            )
        except Exception as e:
            logger.exception("Failed to change mode")
            return json.dumps({"status": "error", "message": str(e)})

    tools["cof_change_mode"] = cof_change_mode

    return tools
