"""
State change model - the snapshot delivered to selection observers.

A StateChange is built fresh for every broadcast and never mutated.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_cof.core.mode import Mode
from chuk_mcp_cof.core.pitch import PitchClass
from chuk_mcp_cof.core.scale import degree_name


class StateChange(BaseModel):
    """
    The selected tonic and mode, with the scale derived from them.

    Example:
        StateChange(tonic=C, mode=IONIAN, scale=(C, D, E, F, G, A, B))
    """

    tonic: PitchClass = Field(..., description="Selected tonic")
    mode: Mode = Field(..., description="Selected mode")
    scale: tuple[PitchClass, ...] = Field(
        ...,
        min_length=7,
        max_length=7,
        description="Scale degrees 1-7, tonic first",
    )

    model_config = {"frozen": True}

    @field_validator("scale")
    @classmethod
    def validate_scale(cls, v: tuple[PitchClass, ...]) -> tuple[PitchClass, ...]:
        """Scale degrees must be distinct pitch classes."""
        if len(set(v)) != len(v):
            raise ValueError(f"Scale contains repeated pitch classes: {v}")
        return v

    def degree_labels(self) -> dict[PitchClass, str]:
        """Map each scale member to its roman numeral ('i' for the tonic)."""
        return {pitch: degree_name(i) for i, pitch in enumerate(self.scale)}

    def to_dict(self, prefer_flats: bool = False) -> dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            "tonic": {"name": self.tonic.spell(prefer_flats), "index": self.tonic.index},
            "mode": {"name": self.mode.label, "index": self.mode.index},
            "scale": [
                {
                    "name": pitch.spell(prefer_flats),
                    "index": pitch.index,
                    "degree": degree_name(i),
                }
                for i, pitch in enumerate(self.scale)
            ],
        }
