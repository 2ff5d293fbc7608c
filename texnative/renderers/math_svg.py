"""
Math SVG adapter.

Rescales and recolors the SVG fragment a typesetter emits for a math
container: the root ``<svg>`` width/height are multiplied by the contextual
font size, ``font-family`` declarations are removed so the host text style
wins, and ``currentColor`` is replaced by the contextual text colour.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from lxml import etree

logger = logging.getLogger(__name__)

CURRENT_COLOR = re.compile(r'currentColor', re.IGNORECASE)
STYLE_FONT_FAMILY = re.compile(r'font-family\s*:[^;]*;?\s*', re.IGNORECASE)
SVG_DIMENSION = re.compile(r'^\s*(\d*\.?\d+)\s*([ep]x)\s*$', re.IGNORECASE)

_WRAPPER_TAG = 'texnative-fragment'


@dataclass(slots=True)
class SvgDimension:
    """Numeric SVG length with its unit."""

    value: float = 0.0
    unit: str = ''

    @classmethod
    def parse(cls, raw: Optional[str]) -> "SvgDimension":
        match = SVG_DIMENSION.match(raw or '')
        if not match:
            return cls()
        return cls(value=float(match.group(1)), unit=match.group(2))


def format_number(value: float) -> str:
    """Format a length without float noise (``35.0`` -> ``35``)."""
    rounded = round(value, 4)
    if rounded == int(rounded):
        return str(int(rounded))
    return repr(rounded)


def _local_name(element) -> Optional[str]:
    if not isinstance(element.tag, str):
        return None
    return etree.QName(element).localname


class MathSvgAdapter:
    """Rewrites math SVG fragments for the host vector graphics primitive."""

    def __init__(self):
        self._parser = etree.XMLParser(recover=True, resolve_entities=False, no_network=True)

    def _find_svg_root(self, fragment: str):
        try:
            wrapper = etree.fromstring(f'<{_WRAPPER_TAG}>{fragment}</{_WRAPPER_TAG}>', self._parser)
        except etree.XMLSyntaxError as exc:
            logger.warning(f"Unparsable math SVG fragment: {exc}")
            return None
        if wrapper is None:
            return None
        for element in wrapper.iter():
            if _local_name(element) == 'svg':
                return element
        return None

    def read_dimensions(self, fragment: str) -> Tuple[float, float]:
        """Return the declared (width, height) of the root svg; 0 when missing."""
        svg = self._find_svg_root(fragment or '')
        if svg is None:
            return 0.0, 0.0
        return SvgDimension.parse(svg.get('width')).value, SvgDimension.parse(svg.get('height')).value

    def _rescale(self, svg, name: str, multiplier: float) -> None:
        raw = svg.get(name)
        if raw is None:
            return
        dimension = SvgDimension.parse(raw)
        if not dimension.unit:
            return
        scaled = dimension.value * multiplier
        if not math.isfinite(scaled):
            logger.debug(f"Leaving out-of-range svg {name}={raw!r} unchanged")
        elif dimension.value == 0:
            svg.set(name, '0')
        else:
            svg.set(name, f"{format_number(scaled)}{dimension.unit}")

    def adapt(self, fragment: str, font_size: float, color: str) -> str:
        """
        Rescale and recolor a math SVG fragment.

        Args:
            fragment: SVG markup emitted by the typesetter
            font_size: Contextual font-size multiplier
            color: Contextual text colour

        Returns:
            Rewritten SVG markup
        """
        if not fragment:
            return ''

        svg = self._find_svg_root(fragment)
        if svg is None:
            logger.warning("No <svg> root found in math fragment, recoloring only")
            return CURRENT_COLOR.sub(color, fragment)

        for element in svg.iter():
            if element is not svg and element.tail and CURRENT_COLOR.search(element.tail):
                element.tail = CURRENT_COLOR.sub(color, element.tail)
            if not isinstance(element.tag, str):
                continue
            element.attrib.pop('font-family', None)
            for key, value in element.attrib.items():
                if key == 'style':
                    value = STYLE_FONT_FAMILY.sub('', value)
                if CURRENT_COLOR.search(value):
                    value = CURRENT_COLOR.sub(color, value)
                element.set(key, value)
            if element.text and CURRENT_COLOR.search(element.text):
                element.text = CURRENT_COLOR.sub(color, element.text)

        self._rescale(svg, 'width', font_size)
        self._rescale(svg, 'height', font_size)

        return etree.tostring(svg, encoding='unicode', with_tail=False)
