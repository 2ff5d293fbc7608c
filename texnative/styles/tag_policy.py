"""
Tag style policy.

Classifies tag names as inline text or block containers and holds the
property allow-lists the sanitizer enforces for each class.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional


class TagPolicy(Enum):
    """Style policy class of a tag."""

    INLINE_TEXT = "inline_text"
    BLOCK_CONTAINER = "block_container"
    UNKNOWN = "unknown"


# Properties legal on inline text runs.
TEXT_SAFE_PROPS = frozenset([
    'color',
    'fontFamily',
    'fontSize',
    'fontStyle',
    'fontWeight',
    'fontVariant',
    'textShadowOffset',
    'textShadowRadius',
    'textShadowColor',
    'letterSpacing',
    'lineHeight',
    'textAlign',
    'textAlignVertical',
    'includeFontPadding',
    'textDecoration',
    'textDecorationLine',
    'textDecorationStyle',
    'textDecorationColor',
    'textTransform',
    'writingDirection',
    'backgroundColor',
    'opacity',
    'marginLeft',
    'marginRight',
    'marginHorizontal',
    'paddingLeft',
    'paddingRight',
    'paddingHorizontal',
    'transform',
])

BLOCK_TAGS = frozenset([
    'div', 'p', 'section', 'article', 'header', 'footer', 'main', 'aside', 'nav',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'ul', 'ol', 'li',
    'table', 'thead', 'tbody', 'tr', 'td', 'th',
    'figure', 'figcaption', 'blockquote', 'pre',
])

INLINE_TEXT_TAGS = frozenset([
    'span', 'b', 'strong', 'i', 'em', 'u', 's', 'sub', 'sup',
    'code', 'small', 'big', 'a',
])

# Properties that may carry percentages on block containers.
PERCENT_SUPPORTED_BLOCK = frozenset([
    'width', 'height', 'top', 'bottom', 'left', 'right',
    'margin', 'marginBottom', 'marginTop', 'marginLeft', 'marginRight',
    'marginHorizontal', 'marginVertical',
    'padding', 'paddingBottom', 'paddingTop', 'paddingLeft', 'paddingRight',
    'paddingHorizontal', 'paddingVertical',
])

# Inline text never honors percentage sizing.
PERCENT_SUPPORTED_INLINE: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class StylePolicy:
    """Tag classification and property allow-lists used by the sanitizer."""

    block_tags: FrozenSet[str] = BLOCK_TAGS
    inline_text_tags: FrozenSet[str] = INLINE_TEXT_TAGS
    text_safe_props: FrozenSet[str] = TEXT_SAFE_PROPS
    percent_block_props: FrozenSet[str] = PERCENT_SUPPORTED_BLOCK
    percent_inline_props: FrozenSet[str] = PERCENT_SUPPORTED_INLINE

    def classify(self, tag: Optional[str]) -> TagPolicy:
        name = str(tag or '').lower()
        if name in self.block_tags:
            return TagPolicy.BLOCK_CONTAINER
        if name in self.inline_text_tags:
            return TagPolicy.INLINE_TEXT
        return TagPolicy.UNKNOWN

    def is_block(self, tag: Optional[str]) -> bool:
        return self.classify(tag) is TagPolicy.BLOCK_CONTAINER

    def is_text_safe(self, prop: str) -> bool:
        return prop in self.text_safe_props


DEFAULT_POLICY = StylePolicy()
