"""
Render configuration for texnative.

Holds the per-render switches (text normalization, markup preprocessing,
math font cache, base font size and colour) plus the fixed layout constants
used by the image and table renderers.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

# Images wider than this share of the viewport are scaled down.
IMAGE_MAX_WIDTH_PERCENT = 80
# Width used when an image declares none.
IMAGE_FALLBACK_WIDTH_PERCENT = 65
INCH_TO_PX = 96

TABLE_CHAR_WIDTH = 7
TABLE_CELL_PADDING = 20

DEFAULT_FONT_SIZE = 28.0
DEFAULT_COLOR = "black"


@dataclass(slots=True)
class RenderConfig:
    """Switches applied to a single render pass."""

    collapse_text_newlines: bool = True
    skip_isolated_newline: bool = True
    collapse_runs: bool = True
    force_single_line_html: bool = True
    strip_white_space_pre_wrap: bool = True
    font_cache: bool = False
    font_size: float = DEFAULT_FONT_SIZE
    color: str = DEFAULT_COLOR
    responsive_font_size: bool = True
    probe_image_size: bool = False

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if item.type == "bool" and not isinstance(value, bool):
                raise ConfigError(f"Invalid value for {item.name}", f"expected bool, got {value!r}")
        if isinstance(self.font_size, bool) or not isinstance(self.font_size, (int, float)) or self.font_size <= 0:
            raise ConfigError("Invalid value for font_size", f"expected positive number, got {self.font_size!r}")
        if not isinstance(self.color, str) or not self.color.strip():
            raise ConfigError("Invalid value for color", f"expected colour string, got {self.color!r}")

    @property
    def math_scale(self) -> float:
        """Multiplier applied to math SVG dimensions (half the text size)."""
        return self.font_size / 2

    @property
    def font_cache_mode(self) -> str:
        return "local" if self.font_cache else "none"

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "RenderConfig":
        """
        Build a configuration from a mapping.

        Args:
            data: Option mapping; unknown keys are ignored

        Returns:
            RenderConfig instance
        """
        known = {item.name for item in fields(cls)}
        options: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            if key not in known:
                logger.warning(f"Ignoring unknown render option: {key}")
                continue
            if value is None:
                continue
            options[key] = value
        return cls(**options)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
