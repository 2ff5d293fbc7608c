"""
texnative - render HTML with typeset math into native UI primitives.

Converts a parsed markup tree (HTML-like nodes with typeset-math SVG
fragments) into a sanitized tree of text runs, flow containers, images,
tables and vector graphics for surfaces that separate inline text from
layout boxes.

Main Components:
- TexNativeRenderer: preprocess, typeset, parse and render in one call
- DocumentTreeWalker: recursive node renderer
- StyleSanitizer: tag-aware style filter
- TableExtractor / MathSvgAdapter / ImageSizer: leaf widget adapters
- ResponsiveMetrics: device-relative sizing

Quick Start:
    from texnative import render_markup

    root = render_markup("<p>Hello <b>world</b></p>")
    data = root.to_dict()
"""

from .version import __version__, __version_info__

from .exceptions import (
    TexNativeError,
    ConfigError,
    ParsingError,
    TypesettingError,
    RenderingError,
)
from .config import RenderConfig
from .models.nodes import (
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
from .models.primitives import (
    Primitive,
    TextRun,
    FlowContainer,
    ImageWidget,
    TableWidget,
    VectorGraphic,
)
from .utils.metrics import ResponsiveMetrics, StaticMetricsProvider, ViewportMetrics
from .styles.font_size import normalize_font_size
from .styles.tag_policy import StylePolicy, TagPolicy
from .styles.style_sanitizer import StyleSanitizer
from .renderers.table_extractor import TableExtractor
from .renderers.math_svg import MathSvgAdapter
from .renderers.tree_walker import DocumentTreeWalker
from .api import TexNativeRenderer, render_markup

__all__ = [
    "__version__",
    "__version_info__",
    "TexNativeError",
    "ConfigError",
    "ParsingError",
    "TypesettingError",
    "RenderingError",
    "RenderConfig",
    "Node",
    "TextNode",
    "CommentNode",
    "ElementNode",
    "LineBreakNode",
    "ImageNode",
    "TableNode",
    "MathNode",
    "build_element",
    "Primitive",
    "TextRun",
    "FlowContainer",
    "ImageWidget",
    "TableWidget",
    "VectorGraphic",
    "ResponsiveMetrics",
    "StaticMetricsProvider",
    "ViewportMetrics",
    "normalize_font_size",
    "StylePolicy",
    "TagPolicy",
    "StyleSanitizer",
    "TableExtractor",
    "MathSvgAdapter",
    "DocumentTreeWalker",
    "TexNativeRenderer",
    "render_markup",
]
