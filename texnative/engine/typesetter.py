"""
Math typesetter seam.

The TeX-to-SVG engine lives outside this package. An implementation takes
the preprocessed markup and returns markup in which every math expression
has been replaced by an ``<mjx-container>`` element holding its SVG.
Errors raised by the engine are not caught by the renderer.
"""

from __future__ import annotations

from typing import Protocol, Tuple

# Delimiters an engine is expected to recognise.
INLINE_MATH_DELIMITERS: Tuple[Tuple[str, str], ...] = (('$', '$'), ('\\(', '\\)'))
DISPLAY_MATH_DELIMITERS: Tuple[Tuple[str, str], ...] = (('$$', '$$'), ('\\[', '\\]'))


class MathTypesetter(Protocol):
    """Typesets math found in markup."""

    def typeset(self, markup: str, *, font_cache: str = "none") -> str:
        """
        Replace math in ``markup`` with typeset containers.

        Args:
            markup: Preprocessed markup
            font_cache: "local" to reuse glyph definitions, "none" otherwise

        Returns:
            Markup with ``<mjx-container>`` elements
        """
        ...


class PassthroughTypesetter:
    """Typesetter for markup whose math is already typeset."""

    def typeset(self, markup: str, *, font_cache: str = "none") -> str:
        return markup
