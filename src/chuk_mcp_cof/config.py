"""
Startup configuration.

Only the initial selection and display preferences are configurable.
The selection itself is never written back.

Example config.yaml:

    default_tonic: A
    default_mode: minor
    prefer_flats: false
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from chuk_mcp_cof.constants import ErrorMessages
from chuk_mcp_cof.core.mode import Mode
from chuk_mcp_cof.core.pitch import PitchClass


class SelectionConfig(BaseModel):
    """Defaults applied when the host creates its selection store."""

    default_tonic: str = Field("C", description="Initial tonic (e.g., 'C', 'F#', 'Bb')")
    default_mode: str = Field("ionian", description="Initial mode (e.g., 'ionian', 'minor')")
    prefer_flats: bool = Field(False, description="Spell accidentals as flats in output")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("default_tonic")
    @classmethod
    def validate_tonic(cls, v: str) -> str:
        """Validate the tonic name."""
        PitchClass.parse(v)
        return v

    @field_validator("default_mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        """Validate the mode name."""
        Mode.parse(v)
        return v

    def tonic(self) -> PitchClass:
        """Get parsed tonic."""
        return PitchClass.parse(self.default_tonic)

    def mode(self) -> Mode:
        """Get parsed mode."""
        return Mode.parse(self.default_mode)


def load_config(path: Path | None = None) -> SelectionConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Config file, or None for defaults

    Returns:
        Parsed configuration

    Raises:
        ValueError: If the file does not hold a mapping or a value is invalid
    """
    if path is None:
        return SelectionConfig()

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return SelectionConfig()
    if not isinstance(data, dict):
        raise ValueError(ErrorMessages.INVALID_CONFIG.format(path=path))

    return SelectionConfig(**data)
