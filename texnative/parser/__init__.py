"""Markup preprocessing and parsing."""

from .css_parser import parse_css, parse_inline_style
from .html_parser import MarkupTreeBuilder, parse_markup
from .preprocess import preprocess_markup

__all__ = [
    "parse_css",
    "parse_inline_style",
    "MarkupTreeBuilder",
    "parse_markup",
    "preprocess_markup",
]
