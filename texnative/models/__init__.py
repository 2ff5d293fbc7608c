"""
Models for texnative.

Input node tree and output primitive tree.
"""

from .nodes import (
    Node,
    TextNode,
    CommentNode,
    ElementNode,
    LineBreakNode,
    ImageNode,
    TableNode,
    MathNode,
    build_element,
)
from .primitives import (
    StyleMap,
    Primitive,
    TextRun,
    FlowContainer,
    ImageWidget,
    TableWidget,
    VectorGraphic,
)

__all__ = [
    "Node",
    "TextNode",
    "CommentNode",
    "ElementNode",
    "LineBreakNode",
    "ImageNode",
    "TableNode",
    "MathNode",
    "build_element",
    "StyleMap",
    "Primitive",
    "TextRun",
    "FlowContainer",
    "ImageWidget",
    "TableWidget",
    "VectorGraphic",
]
