"""
Image sizing for texnative.

Resolves the rendered width/height of an ``img`` node from its inline
style, clamps oversized images to a share of the viewport while keeping
the aspect ratio, and falls back to a fixed share when no width is given.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from ..config import IMAGE_FALLBACK_WIDTH_PERCENT, IMAGE_MAX_WIDTH_PERCENT, INCH_TO_PX
from ..media.image_probe import ImageSizeProbe
from ..models.nodes import ElementNode
from ..parser.css_parser import StyleParser, parse_inline_style
from ..utils.metrics import ResponsiveMetrics

logger = logging.getLogger(__name__)

LENGTH_PATTERN = re.compile(r'^\s*(\d*\.?\d+)\s*(%|px|in)?\s*$', re.IGNORECASE)


@dataclass(slots=True)
class ImageSize:
    width: float
    height: Optional[float] = None


class ImageSizer:
    """Computes display sizes for image nodes."""

    def __init__(self, metrics: Optional[ResponsiveMetrics] = None,
                 style_parser: Optional[StyleParser] = None,
                 probe: Optional[ImageSizeProbe] = None):
        """
        Initialize image sizer.

        Args:
            metrics: Responsive metrics for viewport percentages
            style_parser: Parser for the image's inline style
            probe: Optional intrinsic size probe used when no height is known
        """
        self.metrics = metrics or ResponsiveMetrics()
        self.style_parser = style_parser or parse_inline_style
        self.probe = probe

    def to_pixels(self, value) -> Optional[float]:
        """
        Convert a CSS length to pixels.

        Args:
            value: Number or string with ``%``, ``px`` or ``in`` unit

        Returns:
            Pixels, or None when the value cannot be resolved
        """
        if isinstance(value, bool) or value is None:
            return None
        if isinstance(value, (int, float)):
            return float(value)

        match = LENGTH_PATTERN.match(str(value))
        if not match:
            return None

        number = float(match.group(1))
        unit = (match.group(2) or 'px').lower()
        if unit == '%':
            return (number / 100) * self.metrics.scale_width(100)
        if unit == 'in':
            return number * INCH_TO_PX
        return number

    def resolve(self, node: ElementNode) -> ImageSize:
        """
        Resolve the display size of an image node.

        Args:
            node: ``img`` element node

        Returns:
            ImageSize with width always set
        """
        style = self.style_parser(node.style or node.get_attribute('style'))
        width = self.to_pixels(style.get('width'))
        height = self.to_pixels(style.get('height'))

        max_width = self.metrics.scale_width(IMAGE_MAX_WIDTH_PERCENT)
        fallback_width = self.metrics.scale_width(IMAGE_FALLBACK_WIDTH_PERCENT)

        if width and width > max_width:
            ratio = max_width / width
            logger.debug(f"Clamping image width {width} to {max_width}")
            width = max_width
            if height:
                height *= ratio

        if not width:
            width = fallback_width

        if not height and self.probe is not None:
            intrinsic = self.probe.size(node.get_attribute('src'))
            if intrinsic:
                height = width * intrinsic[1] / intrinsic[0]

        return ImageSize(width=width, height=height or None)
