"""
Highlight settings loader.

Loads highlight.yml and converts it into a HighlightPolicy:

    highlight:
      mode: percentage      # none | percentage | rank | absolute
      percentage: 20
      rank: 3
      threshold: 45.0

Only the field belonging to the selected mode is consulted. Values are not
range-checked here: a missing or non-positive parameter is a valid setting
that simply highlights nothing.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from elite_splits.core.models import (
    AbsoluteHighlight,
    HighlightPolicy,
    NoHighlight,
    PercentageHighlight,
    RankHighlight,
)
from elite_splits.utils.constants import HIGHLIGHT_MODES, HIGHLIGHT_SETTINGS_FILE
from elite_splits.utils.env import config_dir

logger = logging.getLogger(__name__)


class HighlightConfigError(ValueError):
    """Raised when highlight settings are malformed."""


class HighlightSettings(BaseModel):
    """
    User-facing highlight settings.

    Attributes:
        mode: Active highlight mode
        percentage: Share of candidates to flag, for mode "percentage"
        rank: Number of worst candidates to flag, for mode "rank"
        threshold: Seconds-per-elite cutoff, for mode "absolute"
    """
    mode: Literal["none", "percentage", "rank", "absolute"] = Field(
        default="none", description="Highlight mode"
    )
    percentage: Optional[float] = Field(default=None, description="Percent of candidates to flag")
    rank: Optional[int] = Field(default=None, description="Number of worst segments to flag")
    threshold: Optional[float] = Field(default=None, description="Seconds per elite cutoff")

    @field_validator("mode", mode="before")
    @classmethod
    def normalize_mode(cls, v: Any) -> Any:
        """Normalize mode to lowercase; a missing mode means none."""
        if v is None:
            return "none"
        return v.strip().lower() if isinstance(v, str) else v

    def to_policy(self) -> HighlightPolicy:
        """Tagged policy for the active mode."""
        if self.mode == "percentage":
            return PercentageHighlight(percentage=self.percentage)
        if self.mode == "rank":
            return RankHighlight(count=self.rank)
        if self.mode == "absolute":
            return AbsoluteHighlight(threshold=self.threshold)
        return NoHighlight()


def parse_highlight_settings(data: Optional[Dict[str, Any]]) -> HighlightSettings:
    """
    Validate a settings mapping.

    Accepts either the bare settings or a mapping nested under "highlight".

    Raises:
        HighlightConfigError: If the mapping is not an object or fails validation
    """
    if data is None:
        return HighlightSettings()
    if not isinstance(data, dict):
        raise HighlightConfigError(f"highlight settings must be a mapping, got {type(data).__name__}")

    section = data.get("highlight", data)
    if section is None:
        return HighlightSettings()
    if not isinstance(section, dict):
        raise HighlightConfigError("'highlight' section must be a mapping")

    try:
        return HighlightSettings(**section)
    except ValidationError as e:
        raise HighlightConfigError(
            f"Invalid highlight settings (mode must be one of {list(HIGHLIGHT_MODES)}): {e}"
        ) from e


def default_settings_path() -> Path:
    return config_dir() / HIGHLIGHT_SETTINGS_FILE


def load_highlight_settings(path: Optional[Union[str, Path]] = None) -> HighlightSettings:
    """
    Load highlight settings from YAML.

    Args:
        path: Settings file; defaults to $ELITE_SPLITS_CONFIG_DIR/highlight.yml
            or config/highlight.yml

    Raises:
        FileNotFoundError: If the settings file does not exist
        HighlightConfigError: If the YAML is unreadable or the settings invalid
    """
    settings_path = Path(path) if path is not None else default_settings_path()
    if not settings_path.exists():
        logger.error(f"{settings_path.name} not found at {settings_path.absolute()}")
        raise FileNotFoundError(f"highlight settings not found at {settings_path}")

    with settings_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise HighlightConfigError(f"Failed to parse {settings_path}: {e}") from e

    settings = parse_highlight_settings(data)
    logger.info(f"Loaded highlight settings from {settings_path}: mode={settings.mode}")
    return settings
