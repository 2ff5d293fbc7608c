"""
Renderers for texnative.

The document tree walker and the adapters it delegates to.
"""

from .image_sizing import ImageSize, ImageSizer
from .math_svg import MathSvgAdapter
from .table_extractor import TableData, TableExtractor
from .text_normalizer import TextNormalizer
from .tree_walker import DocumentTreeWalker, WalkContext

__all__ = [
    "ImageSize",
    "ImageSizer",
    "MathSvgAdapter",
    "TableData",
    "TableExtractor",
    "TextNormalizer",
    "DocumentTreeWalker",
    "WalkContext",
]
