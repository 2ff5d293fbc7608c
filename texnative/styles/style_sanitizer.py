"""
Style sanitizer for texnative.

Implements the tag-aware style filter: font size normalization and
responsive scaling, inline/block property allow-lists, and percentage
legality per tag and property.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..models.primitives import StyleMap
from ..utils.metrics import ResponsiveMetrics
from .font_size import normalize_font_size
from .tag_policy import DEFAULT_POLICY, StylePolicy, TagPolicy

logger = logging.getLogger(__name__)


class StyleSanitizer:
    """
    Sanitizes style maps for a given tag.

    Provides functionality for:
    - fontSize keyword/unit normalization with optional responsive scaling
    - removal of layout properties from inline and unknown tags
    - removal of percentage values the tag/property cannot honor
    """

    def __init__(self, policy: Optional[StylePolicy] = None,
                 metrics: Optional[ResponsiveMetrics] = None,
                 responsive_font_size: bool = True):
        """
        Initialize style sanitizer.

        Args:
            policy: Tag classification and allow-lists
            metrics: Responsive metrics used for font scaling
            responsive_font_size: Scale numeric font sizes to the device
        """
        self.policy = policy or DEFAULT_POLICY
        self.metrics = metrics or ResponsiveMetrics()
        self.responsive_font_size = responsive_font_size

    def scale_font_size(self, size: Optional[float]) -> Optional[float]:
        if size is None:
            return None
        return self.metrics.scale_font(size) if self.responsive_font_size else size

    def sanitize(self, tag: Optional[str], style_in: Optional[Mapping[str, Any]] = None) -> StyleMap:
        """
        Normalize fontSize and enforce the inline/block policy.

        Args:
            tag: Owning tag name
            style_in: Style map to sanitize (left untouched)

        Returns:
            New sanitized style map
        """
        style: StyleMap = dict(style_in or {})

        if 'fontSize' in style:
            normalized = normalize_font_size(style['fontSize'])
            if normalized is not None:
                style['fontSize'] = self.scale_font_size(normalized)
            else:
                logger.debug(f"Dropping unresolvable fontSize {style['fontSize']!r} on <{tag}>")
                del style['fontSize']

        if self.policy.classify(tag) is not TagPolicy.BLOCK_CONTAINER:
            for key in list(style):
                if not self.policy.is_text_safe(key):
                    logger.debug(f"Dropping layout property {key} on inline <{tag}>")
                    del style[key]

        return style

    def percent_allowed(self, tag: Optional[str], prop: str) -> bool:
        """Return True when ``prop`` on ``tag`` may use a percentage value."""
        if self.policy.classify(tag) is TagPolicy.BLOCK_CONTAINER:
            return prop in self.policy.percent_block_props
        return prop in self.policy.percent_inline_props

    def map_style(self, tag: Optional[str], style_in: Optional[Mapping[str, Any]] = None) -> StyleMap:
        """
        Sanitize a style map and strip illegal percentage values.

        Args:
            tag: Owning tag name
            style_in: Style map parsed from markup

        Returns:
            Resolved style for the tag
        """
        style = self.sanitize(tag, style_in)

        for key in list(style):
            value = style[key]
            if isinstance(value, str) and value.strip().endswith('%') and not self.percent_allowed(tag, key):
                logger.debug(f"Dropping percentage {key}={value} on <{tag}>")
                del style[key]

        return style

    def text_safe(self, style: Optional[Mapping[str, Any]]) -> StyleMap:
        """Return only the text-safe part of ``style``."""
        return {key: value for key, value in (style or {}).items() if self.policy.is_text_safe(key)}
