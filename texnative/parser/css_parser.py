"""
Inline CSS declaration parser.

Turns a raw ``style="..."`` declaration string into a flat style map with
camelCase property names. Pixel lengths and bare numbers become numbers;
everything else (keywords, colours, percentages, other units) stays a
string for the sanitizer to judge.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

from ..models.primitives import StyleMap

logger = logging.getLogger(__name__)

StyleParser = Callable[[Optional[str]], StyleMap]

PROPERTY_ALIASES = {
    'textDecoration': 'textDecorationLine',
}

# Values kept verbatim even when they look numeric.
VERBATIM_PROPS = frozenset(['fontWeight', 'fontFamily', 'fontVariant', 'content'])

_PX_VALUE = re.compile(r'^(-?\d+(?:\.\d+)?|-?\.\d+)px$', re.IGNORECASE)
_NUMBER_VALUE = re.compile(r'^(-?\d+(?:\.\d+)?|-?\.\d+)$')
_IMPORTANT = re.compile(r'\s*!\s*important\s*$', re.IGNORECASE)


def camel_case(prop: str) -> str:
    """Convert a CSS property name (``font-size``) to camelCase (``fontSize``)."""
    parts = [part for part in prop.strip().lower().split('-') if part]
    if not parts:
        return ''
    return parts[0] + ''.join(part[:1].upper() + part[1:] for part in parts[1:])


def _convert_value(prop: str, value: str):
    if prop in VERBATIM_PROPS:
        return value.strip('"\'') if prop == 'fontFamily' else value

    for pattern in (_PX_VALUE, _NUMBER_VALUE):
        match = pattern.match(value)
        if match:
            number = float(match.group(1))
            return int(number) if number.is_integer() else number

    return value


def parse_css(declarations: Optional[str]) -> StyleMap:
    """
    Parse a CSS declaration string.

    Args:
        declarations: e.g. ``"color: red; font-size: 12px"``

    Returns:
        Style map such as ``{"color": "red", "fontSize": 12}``
    """
    style: StyleMap = {}

    if not declarations:
        return style

    for declaration in declarations.split(';'):
        declaration = declaration.strip()
        if not declaration:
            continue

        if ':' not in declaration:
            logger.debug(f"Skipping malformed declaration: {declaration!r}")
            continue

        prop, value = declaration.split(':', 1)
        prop = camel_case(prop)
        value = _IMPORTANT.sub('', value.strip())
        if not prop or not value:
            continue

        prop = PROPERTY_ALIASES.get(prop, prop)
        style[prop] = _convert_value(prop, value)

    return style


def parse_inline_style(declarations: Optional[str]) -> StyleMap:
    """Default style-string parser used by the renderer."""
    return parse_css(declarations)
