"""
Output primitives produced by the document tree walker.

The host surface distinguishes strictly between inline text and
layout boxes, so the output tree is made of three shapes only:
text runs, flow containers and leaf widgets (image, table, vector
graphic). Every primitive can be turned into plain data with `to_dict`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

StyleValue = Union[int, float, str, List[Dict[str, float]]]
StyleMap = Dict[str, StyleValue]


def _copy_style(style: StyleMap) -> StyleMap:
    copied: StyleMap = {}
    for key, value in style.items():
        copied[key] = [dict(op) for op in value] if isinstance(value, list) else value
    return copied


@dataclass(slots=True)
class TextRun:
    """Run of inline text with a text-safe style."""

    text: str
    style: StyleMap = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "text", "text": self.text, "style": _copy_style(self.style)}


@dataclass(slots=True)
class FlowContainer:
    """Layout box holding child primitives."""

    style: StyleMap = field(default_factory=dict)
    children: List["Primitive"] = field(default_factory=list)
    scroll_horizontal: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "scroll" if self.scroll_horizontal else "view",
            "style": _copy_style(self.style),
            "children": [child.to_dict() for child in self.children],
        }


@dataclass(slots=True)
class ImageWidget:
    """Self-sizing image; the host derives missing height from the source."""

    source: Optional[str]
    width: float
    height: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "image", "source": self.source, "width": self.width, "height": self.height}


@dataclass(slots=True)
class TableWidget:
    """Flattened table with estimated column widths."""

    head: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)
    widths: List[float] = field(default_factory=list)
    border_style: StyleMap = field(default_factory=lambda: {"borderWidth": 1, "borderColor": "#ccc"})
    head_style: StyleMap = field(default_factory=lambda: {
        "backgroundColor": "#eee", "borderColor": "#ccc", "borderRightWidth": 2})
    head_text_style: StyleMap = field(default_factory=lambda: {"fontWeight": "bold", "textAlign": "center"})
    row_style: StyleMap = field(default_factory=lambda: {"borderColor": "#ccc", "borderRightWidth": 2})
    row_text_style: StyleMap = field(default_factory=lambda: {"textAlign": "center", "flexWrap": "wrap"})

    @property
    def total_width(self) -> float:
        return sum(self.widths)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "table",
            "head": list(self.head),
            "rows": [list(row) for row in self.rows],
            "widths": list(self.widths),
            "total_width": self.total_width,
            "border_style": dict(self.border_style),
            "head_style": dict(self.head_style),
            "head_text_style": dict(self.head_text_style),
            "row_style": dict(self.row_style),
            "row_text_style": dict(self.row_text_style),
        }


@dataclass(slots=True)
class VectorGraphic:
    """SVG document rendered by the host's vector graphics primitive."""

    xml: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "svg", "xml": self.xml}


Primitive = Union[TextRun, FlowContainer, ImageWidget, TableWidget, VectorGraphic]
