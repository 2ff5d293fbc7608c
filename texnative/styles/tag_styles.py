"""Tag-level default styles and superscript/subscript adjustment."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from ..models.primitives import StyleMap

TAG_DEFAULT_STYLES: Dict[str, StyleMap] = {
    'u': {'textDecorationLine': 'underline'},
    'ins': {'textDecorationLine': 'underline'},
    's': {'textDecorationLine': 'line-through'},
    'del': {'textDecorationLine': 'line-through'},
    'b': {'fontWeight': 'bold'},
    'strong': {'fontWeight': 'bold'},
    'i': {'fontStyle': 'italic'},
    'cite': {'fontStyle': 'italic'},
    'dfn': {'fontStyle': 'italic'},
    'em': {'fontStyle': 'italic'},
    'mark': {'backgroundColor': 'yellow'},
    'small': {'fontSize': 10},
}

MIN_SCRIPT_FONT_SIZE = 8
SUPERSCRIPT_SHIFT = -0.7
SUBSCRIPT_SHIFT = 0.4


def tag_default_style(tag: Optional[str]) -> StyleMap:
    return dict(TAG_DEFAULT_STYLES.get(str(tag or '').lower(), {}))


def apply_script_adjustment(tag: Optional[str], style: Optional[StyleMap], font_size: float,
                            scale: Callable[[float], float]) -> Optional[StyleMap]:
    """
    Shrink and shift text for <sup>/<sub>.

    Args:
        tag: Tag name
        style: Resolved style of the tag
        font_size: Contextual (math) font size
        scale: Font scaling function

    Returns:
        Adjusted style, or ``style`` unchanged for other tags
    """
    name = str(tag or '').lower()
    if name not in ('sup', 'sub'):
        return style

    tiny = scale(max(MIN_SCRIPT_FONT_SIZE, int(font_size + 0.5)))
    shift = tiny * (SUPERSCRIPT_SHIFT if name == 'sup' else SUBSCRIPT_SHIFT)
    adjusted = dict(style or {})
    adjusted['fontSize'] = tiny
    adjusted['transform'] = [{'translateY': shift}]
    return adjusted
