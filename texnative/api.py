"""
High-level API for texnative.

Wires the pipeline together: preprocess markup, hand it to the math
typesetter, parse the result into nodes and walk the tree into output
primitives wrapped in a root flow container.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from .config import RenderConfig
from .engine.typesetter import MathTypesetter, PassthroughTypesetter
from .models.nodes import Node
from .models.primitives import FlowContainer, Primitive, StyleMap
from .parser.css_parser import StyleParser, parse_inline_style
from .parser.html_parser import parse_markup
from .parser.preprocess import preprocess_markup
from .renderers.tree_walker import DocumentTreeWalker
from .styles.tag_policy import StylePolicy
from .utils.metrics import MetricsProvider, ResponsiveMetrics

logger = logging.getLogger(__name__)

ROOT_FLOW_STYLE: StyleMap = {
    'flexDirection': 'row',
    'flexWrap': 'wrap',
    'alignItems': 'center',
    'flexShrink': 1,
}


class TexNativeRenderer:
    """Renders markup with typeset math into native UI primitives."""

    def __init__(self, config: Optional[RenderConfig] = None,
                 metrics: Optional[MetricsProvider] = None,
                 typesetter: Optional[MathTypesetter] = None,
                 policy: Optional[StylePolicy] = None,
                 style_parser: Optional[StyleParser] = None):
        """
        Initialize renderer.

        Args:
            config: Render configuration
            metrics: Viewport metrics provider
            typesetter: Math typesetter (markup assumed already typeset if omitted)
            policy: Tag style policy
            style_parser: Inline CSS parser
        """
        self.config = config or RenderConfig()
        self.typesetter = typesetter or PassthroughTypesetter()
        self.walker = DocumentTreeWalker(
            config=self.config,
            metrics=ResponsiveMetrics(metrics),
            policy=policy,
            style_parser=style_parser or parse_inline_style,
        )

    def parse(self, markup: Optional[str]) -> List[Node]:
        """Preprocess, typeset and parse markup into nodes."""
        cleaned = preprocess_markup(
            markup,
            force_single_line_html=self.config.force_single_line_html,
            strip_white_space_pre_wrap=self.config.strip_white_space_pre_wrap,
        )
        # Typesetter errors are the caller's to handle.
        typeset = self.typesetter.typeset(cleaned, font_cache=self.config.font_cache_mode)
        return parse_markup(typeset)

    def render_nodes(self, nodes: Iterable[Node]) -> List[Primitive]:
        return self.walker.render(nodes)

    def render(self, markup: Optional[str], style: Optional[StyleMap] = None) -> Optional[FlowContainer]:
        """
        Render markup into a root flow container.

        Args:
            markup: HTML markup, possibly containing math
            style: Extra style for the root container

        Returns:
            Root FlowContainer, or None for empty markup
        """
        if not markup:
            return None

        nodes = self.parse(markup)
        children = self.render_nodes(nodes)
        logger.debug(f"Rendered {len(nodes)} root nodes into {len(children)} primitives")
        return FlowContainer(style={**ROOT_FLOW_STYLE, **(style or {})}, children=children)


def render_markup(markup: Optional[str], metrics: Optional[MetricsProvider] = None,
                  typesetter: Optional[MathTypesetter] = None, **options: Any) -> Optional[FlowContainer]:
    """
    Render markup with options given as keyword arguments.

    Args:
        markup: HTML markup
        metrics: Viewport metrics provider
        typesetter: Math typesetter
        **options: RenderConfig fields

    Returns:
        Root FlowContainer, or None for empty markup
    """
    renderer = TexNativeRenderer(config=RenderConfig.from_dict(options), metrics=metrics, typesetter=typesetter)
    return renderer.render(markup)
