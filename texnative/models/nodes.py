"""
Input node model for texnative.

Nodes form the parsed markup tree handed to the renderer. Each node class
carries only the fields its kind needs: text and comments carry a raw
string, elements carry children, attributes and an optional raw CSS
declaration string.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union

TEXT_KIND = "#text"
COMMENT_KIND = "#comment"

LINE_BREAK_TAG = "br"
IMAGE_TAG = "img"
TABLE_TAG = "table"
MATH_TAG = "mjx-container"
PARAGRAPH_TAG = "p"
PRE_TAG = "pre"


@dataclass(slots=True)
class TextNode:
    """Raw (possibly entity-encoded) text."""

    value: str = ""

    @property
    def kind(self) -> str:
        return TEXT_KIND


@dataclass(slots=True)
class CommentNode:
    """Markup comment; never rendered."""

    value: str = ""

    @property
    def kind(self) -> str:
        return COMMENT_KIND


@dataclass(slots=True)
class ElementNode:
    """Tagged element with children, attributes and inline CSS."""

    tag: str
    children: List["Node"] = field(default_factory=list)
    attributes: Dict[str, str] = field(default_factory=dict)
    style: Optional[str] = None

    @property
    def kind(self) -> str:
        return self.tag

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(name, default)

    def iter_text(self) -> Iterator[str]:
        """Yield raw values of all descendant text nodes in document order."""
        for child in self.children:
            if isinstance(child, TextNode):
                yield child.value
            elif isinstance(child, ElementNode):
                yield from child.iter_text()


@dataclass(slots=True)
class LineBreakNode(ElementNode):
    tag: str = LINE_BREAK_TAG


@dataclass(slots=True)
class ImageNode(ElementNode):
    tag: str = IMAGE_TAG

    @property
    def src(self) -> Optional[str]:
        return self.attributes.get("src")


@dataclass(slots=True)
class TableNode(ElementNode):
    tag: str = TABLE_TAG


@dataclass(slots=True)
class MathNode(ElementNode):
    """Typeset math container holding an opaque SVG fragment."""

    tag: str = MATH_TAG
    svg: str = ""


Node = Union[TextNode, CommentNode, ElementNode, LineBreakNode, ImageNode, TableNode, MathNode]

_SPECIAL_ELEMENTS = {
    LINE_BREAK_TAG: LineBreakNode,
    IMAGE_TAG: ImageNode,
    TABLE_TAG: TableNode,
    MATH_TAG: MathNode,
}


def build_element(tag: str, children: Optional[List[Node]] = None,
                  attributes: Optional[Dict[str, str]] = None,
                  style: Optional[str] = None) -> ElementNode:
    """
    Create the element class matching ``tag``.

    Args:
        tag: Element tag name (case-insensitive)
        children: Child nodes
        attributes: Attribute map
        style: Raw CSS declaration string

    Returns:
        ElementNode or one of its specialised subclasses
    """
    tag = (tag or "").lower()
    node_cls = _SPECIAL_ELEMENTS.get(tag, ElementNode)
    return node_cls(
        tag=tag,
        children=list(children or []),
        attributes=dict(attributes or {}),
        style=style,
    )
