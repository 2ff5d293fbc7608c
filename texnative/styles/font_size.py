"""
Font size normalization.

Resolves CSS font-size keywords, pixel strings and bare numbers to a
single numeric point size.
"""

import math
import re
from typing import Any, Dict, Optional, Union

Number = Union[int, float]

# Keyword -> point size; None means "no value" and drops the property.
ABSOLUTE_FONT_SIZE: Dict[str, Optional[Number]] = {
    'medium': 14,
    'xx-small': 8.5,
    'x-small': 10,
    'small': 12,
    'large': 17,
    'x-large': 20,
    'xx-large': 24,
    'smaller': 13.3,
    'larger': 16,
    'length': None,
    'initial': None,
    'inherit': None,
    'unset': None,
}

PX_PATTERN = re.compile(r'^(-?\d+(?:\.\d+)?)px$')
NUMBER_PATTERN = re.compile(r'^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?$')


def _to_number(text: str) -> Number:
    value = float(text)
    return int(value) if value.is_integer() and '.' not in text and 'e' not in text else value


def _finite(number: Number) -> Optional[Number]:
    try:
        return number if math.isfinite(number) else None
    except OverflowError:
        # int too large for a float
        return None


def normalize_font_size(value: Any) -> Optional[Number]:
    """
    Resolve a font-size value to a number.

    Args:
        value: None, a number or a CSS string ("large", "16px", "16")

    Returns:
        Numeric size, or None when the value cannot be resolved
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        return _finite(value)

    if not isinstance(value, str):
        return None

    lower = value.strip().lower()
    if lower in ABSOLUTE_FONT_SIZE:
        return ABSOLUTE_FONT_SIZE[lower]

    px_match = PX_PATTERN.match(lower)
    if px_match:
        return _finite(_to_number(px_match.group(1)))

    if NUMBER_PATTERN.match(lower):
        return _finite(_to_number(lower))

    return None
