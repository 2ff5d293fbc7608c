"""
Style handling for texnative.

Font size normalization, tag policy, style sanitizing and tag defaults.
"""

from .font_size import ABSOLUTE_FONT_SIZE, normalize_font_size
from .tag_policy import DEFAULT_POLICY, StylePolicy, TagPolicy
from .style_sanitizer import StyleSanitizer
from .tag_styles import TAG_DEFAULT_STYLES, apply_script_adjustment, tag_default_style

__all__ = [
    "ABSOLUTE_FONT_SIZE",
    "normalize_font_size",
    "DEFAULT_POLICY",
    "StylePolicy",
    "TagPolicy",
    "StyleSanitizer",
    "TAG_DEFAULT_STYLES",
    "apply_script_adjustment",
    "tag_default_style",
]
