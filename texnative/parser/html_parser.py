"""
HTML Parser - builds the texnative node tree from markup.

Handles:
- Element nesting with void elements and lenient end-tag recovery
- Raw (undecoded) text values, entity references kept as written
- Comments
- Verbatim capture of typeset math containers (``<mjx-container>``)
"""

from __future__ import annotations

import logging
import re
from html.parser import HTMLParser
from typing import List, Optional

from ..exceptions import ParsingError
from ..models.nodes import (
    MATH_TAG,
    PARAGRAPH_TAG,
    CommentNode,
    ElementNode,
    MathNode,
    Node,
    TextNode,
    build_element,
)

logger = logging.getLogger(__name__)

VOID_TAGS = frozenset([
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input', 'link',
    'meta', 'param', 'source', 'track', 'wbr',
])

_RAW_TAG_NAME = re.compile(r'<\s*([^\s/>]+)')


class MarkupTreeBuilder(HTMLParser):
    """Parser HTML that builds a list of root nodes."""

    def __init__(self):
        super().__init__(convert_charrefs=False)
        self.roots: List[Node] = []
        self.stack: List[ElementNode] = []
        # Math capture state
        self.math_node: Optional[MathNode] = None
        self.math_buffer: List[str] = []
        self.math_tags: List[str] = []

    # ------------------------------------------------------------------
    # Tree helpers
    # ------------------------------------------------------------------
    def _append(self, node: Node) -> None:
        if self.stack:
            self.stack[-1].children.append(node)
        else:
            self.roots.append(node)

    def _append_text(self, text: str) -> None:
        siblings = self.stack[-1].children if self.stack else self.roots
        if siblings and isinstance(siblings[-1], TextNode):
            siblings[-1].value += text
        else:
            self._append(TextNode(text))

    def _open_element(self, tag: str, attrs: list, self_closing: bool) -> None:
        attributes = {name.lower(): (value if value is not None else '') for name, value in attrs}
        style = attributes.get('style') or None

        if tag == PARAGRAPH_TAG and self.stack and self.stack[-1].tag == PARAGRAPH_TAG:
            # <p> cannot nest; an opening <p> closes the previous one.
            self.stack.pop()

        node = build_element(tag, attributes=attributes, style=style)
        self._append(node)

        if tag == MATH_TAG and not self_closing:
            self.math_node = node
            self.math_buffer = []
            self.math_tags = []
            return

        if not self_closing and tag not in VOID_TAGS:
            self.stack.append(node)

    def _finish_math(self) -> None:
        self.math_node.svg = ''.join(self.math_buffer).strip()
        self.math_node = None
        self.math_buffer = []
        self.math_tags = []

    # ------------------------------------------------------------------
    # HTMLParser callbacks
    # ------------------------------------------------------------------
    def handle_starttag(self, tag: str, attrs: list) -> None:
        if self.math_node is not None:
            raw = self.get_starttag_text() or f'<{tag}>'
            self.math_buffer.append(raw)
            name_match = _RAW_TAG_NAME.match(raw)
            self.math_tags.append(name_match.group(1) if name_match else tag)
            return
        self._open_element(tag.lower(), attrs, self_closing=False)

    def handle_startendtag(self, tag: str, attrs: list) -> None:
        if self.math_node is not None:
            self.math_buffer.append(self.get_starttag_text() or f'<{tag}/>')
            return
        self._open_element(tag.lower(), attrs, self_closing=True)

    def handle_endtag(self, tag: str) -> None:
        tag = tag.lower()

        if self.math_node is not None:
            if not self.math_tags and tag == MATH_TAG:
                self._finish_math()
                return
            for index in range(len(self.math_tags) - 1, -1, -1):
                if self.math_tags[index].lower() == tag:
                    for raw_name in reversed(self.math_tags[index:]):
                        self.math_buffer.append(f'</{raw_name}>')
                    del self.math_tags[index:]
                    break
            return

        for index in range(len(self.stack) - 1, -1, -1):
            if self.stack[index].tag == tag:
                del self.stack[index:]
                return
        logger.debug(f"Ignoring unmatched end tag </{tag}>")

    def handle_data(self, data: str) -> None:
        if self.math_node is not None:
            self.math_buffer.append(data)
            return
        if data:
            self._append_text(data)

    def handle_entityref(self, name: str) -> None:
        self.handle_data(f'&{name};')

    def handle_charref(self, name: str) -> None:
        self.handle_data(f'&#{name};')

    def handle_comment(self, data: str) -> None:
        if self.math_node is not None:
            self.math_buffer.append(f'<!--{data}-->')
            return
        self._append(CommentNode(data))

    def close(self) -> None:
        super().close()
        if self.math_node is not None:
            logger.debug("Closing unterminated math container at end of input")
            for raw_name in reversed(self.math_tags):
                self.math_buffer.append(f'</{raw_name}>')
            self._finish_math()
        self.stack = []


def parse_markup(markup: Optional[str]) -> List[Node]:
    """
    Parse markup into root nodes.

    Args:
        markup: HTML string (may contain typeset math containers)

    Returns:
        List of root nodes in document order
    """
    if markup is None:
        return []
    if not isinstance(markup, str):
        raise ParsingError("Markup must be a string", type(markup).__name__)

    builder = MarkupTreeBuilder()
    builder.feed(markup)
    builder.close()
    return builder.roots
