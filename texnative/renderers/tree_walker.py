"""
Document tree walker for texnative.

Central recursive renderer: dispatches on node kind, sanitizes styles per
tag, and composes the output primitive tree. The walk is depth-first and
pre-order; each call threads the nearest resolved style and the nearest
block-level ancestor tag down to the children.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from ..config import RenderConfig
from ..exceptions import RenderingError
from ..media.image_probe import ImageSizeProbe
from ..models.nodes import (
    COMMENT_KIND,
    IMAGE_TAG,
    LINE_BREAK_TAG,
    MATH_TAG,
    PARAGRAPH_TAG,
    PRE_TAG,
    TABLE_TAG,
    TEXT_KIND,
    ElementNode,
    ImageNode,
    Node,
    TextNode,
)
from ..models.primitives import (
    FlowContainer,
    ImageWidget,
    Primitive,
    StyleMap,
    TableWidget,
    TextRun,
    VectorGraphic,
)
from ..parser.css_parser import StyleParser, parse_inline_style
from ..styles.style_sanitizer import StyleSanitizer
from ..styles.tag_policy import DEFAULT_POLICY, StylePolicy
from ..styles.tag_styles import apply_script_adjustment, tag_default_style
from ..utils.metrics import ResponsiveMetrics
from .image_sizing import ImageSizer
from .math_svg import MathSvgAdapter
from .table_extractor import TableExtractor
from .text_normalizer import TextNormalizer

logger = logging.getLogger(__name__)

# Wrapping row layout so mixed inline runs flow left-to-right.
PARAGRAPH_FLOW_STYLE: StyleMap = {
    'flexDirection': 'row',
    'flexWrap': 'wrap',
    'alignItems': 'baseline',
}

# Forces a wrap without drawing a visible box.
LINE_BREAK_STYLE: StyleMap = {
    'width': '100%',
    'overflow': 'hidden',
    'height': 0,
}


@dataclass(frozen=True)
class WalkContext:
    """State inherited from ancestors during the walk."""

    parent_style: Optional[StyleMap] = None
    parent_tag: Optional[str] = None

    @property
    def in_pre(self) -> bool:
        return (self.parent_tag or '').lower() == PRE_TAG


class DocumentTreeWalker:
    """
    Renders node trees into output primitives.

    Provides functionality for:
    - text normalization and inherited text styling
    - paragraph flow containers
    - generic elements with tag defaults, sanitized CSS and sup/sub shifts
    - images, tables and math delegated to their adapters
    """

    def __init__(self, config: Optional[RenderConfig] = None,
                 metrics: Optional[ResponsiveMetrics] = None,
                 policy: Optional[StylePolicy] = None,
                 style_parser: Optional[StyleParser] = None,
                 sanitizer: Optional[StyleSanitizer] = None,
                 table_extractor: Optional[TableExtractor] = None,
                 math_adapter: Optional[MathSvgAdapter] = None,
                 image_sizer: Optional[ImageSizer] = None):
        """
        Initialize tree walker.

        Args:
            config: Render configuration
            metrics: Responsive metrics (static reference viewport if omitted)
            policy: Tag style policy
            style_parser: Inline CSS parser
            sanitizer: Style sanitizer (built from config, metrics and policy if omitted)
            table_extractor: Table extractor
            math_adapter: Math SVG adapter
            image_sizer: Image sizer
        """
        self.config = config or RenderConfig()
        self.metrics = metrics or ResponsiveMetrics()
        self.policy = policy or DEFAULT_POLICY
        self.style_parser = style_parser or parse_inline_style
        self.sanitizer = sanitizer or StyleSanitizer(
            policy=self.policy,
            metrics=self.metrics,
            responsive_font_size=self.config.responsive_font_size,
        )
        self.table_extractor = table_extractor or TableExtractor()
        self.math_adapter = math_adapter or MathSvgAdapter()
        self.image_sizer = image_sizer or ImageSizer(
            metrics=self.metrics,
            style_parser=self.style_parser,
            probe=ImageSizeProbe() if self.config.probe_image_size else None,
        )
        self.text_normalizer = TextNormalizer(
            collapse_text_newlines=self.config.collapse_text_newlines,
            skip_isolated_newline=self.config.skip_isolated_newline,
            collapse_runs=self.config.collapse_runs,
        )

        self._handlers: Dict[str, Callable[[Node, WalkContext], List[Primitive]]] = {
            TEXT_KIND: self._render_text,
            COMMENT_KIND: self._render_comment,
            LINE_BREAK_TAG: self._render_line_break,
            IMAGE_TAG: self._render_image,
            TABLE_TAG: self._render_table,
            MATH_TAG: self._render_math,
            PARAGRAPH_TAG: self._render_paragraph,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render(self, nodes: Iterable[Node], context: Optional[WalkContext] = None) -> List[Primitive]:
        """
        Render sibling nodes.

        Args:
            nodes: Nodes in document order
            context: Inherited state (root context if omitted)

        Returns:
            Flat list of primitives
        """
        context = context or WalkContext()
        output: List[Primitive] = []
        for node in nodes or []:
            output.extend(self.render_node(node, context))
        return output

    def render_node(self, node: Node, context: Optional[WalkContext] = None) -> List[Primitive]:
        """Render a single node (and its subtree)."""
        context = context or WalkContext()
        kind = getattr(node, 'kind', None)
        if not isinstance(kind, str):
            raise RenderingError('Cannot render object', type(node).__name__)
        handler = self._handlers.get(kind.lower(), self._render_element)
        return handler(node, context)

    # ------------------------------------------------------------------
    # Style helpers
    # ------------------------------------------------------------------
    def _css_style(self, node: ElementNode) -> StyleMap:
        return self.style_parser(node.style) if node.style else {}

    def resolve_element_style(self, node: ElementNode) -> StyleMap:
        """Tag defaults overlaid by inline CSS, sanitized, then sup/sub adjusted."""
        style = self.sanitizer.map_style(node.tag, {**tag_default_style(node.tag), **self._css_style(node)})
        return apply_script_adjustment(node.tag, style, self.config.math_scale, self.sanitizer.scale_font_size)

    def text_style(self, inherited: Optional[StyleMap]) -> StyleMap:
        style: StyleMap = {'fontSize': self.config.font_size, 'color': self.config.color}
        style.update(self.sanitizer.text_safe(inherited))
        return style

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def _render_text(self, node: TextNode, context: WalkContext) -> List[Primitive]:
        text = self.text_normalizer.normalize(node.value, in_pre=context.in_pre)
        if text is None:
            return []
        return [TextRun(text=text, style=self.text_style(context.parent_style))]

    def _render_comment(self, node: Node, context: WalkContext) -> List[Primitive]:
        return []

    def _render_line_break(self, node: ElementNode, context: WalkContext) -> List[Primitive]:
        return [TextRun(text='\n', style=dict(LINE_BREAK_STYLE))]

    def _render_image(self, node: ImageNode, context: WalkContext) -> List[Primitive]:
        size = self.image_sizer.resolve(node)
        return [ImageWidget(source=node.src, width=size.width, height=size.height)]

    def _render_table(self, node: ElementNode, context: WalkContext) -> List[Primitive]:
        data = self.table_extractor.extract(node)
        table = TableWidget(head=data.head, rows=data.rows, widths=data.widths)
        sized = FlowContainer(style={'width': data.total_width}, children=[table])
        return [FlowContainer(children=[sized], scroll_horizontal=True)]

    def _render_math(self, node: ElementNode, context: WalkContext) -> List[Primitive]:
        xml = self.math_adapter.adapt(getattr(node, 'svg', ''), self.config.math_scale, self.config.color)
        if not xml:
            logger.debug("Empty math container skipped")
            return []
        return [FlowContainer(children=[VectorGraphic(xml=xml)], scroll_horizontal=True)]

    def _render_paragraph(self, node: ElementNode, context: WalkContext) -> List[Primitive]:
        css = self._css_style(node)
        paragraph_style = self.sanitizer.map_style(PARAGRAPH_TAG, css) if css else {}
        container = FlowContainer(style={**PARAGRAPH_FLOW_STYLE, **paragraph_style})
        container.children = self.render(node.children, WalkContext(parent_tag=PARAGRAPH_TAG))
        return [container]

    def _render_element(self, node: ElementNode, context: WalkContext) -> List[Primitive]:
        if not isinstance(node, ElementNode) or not node.children:
            return []

        resolved = self.resolve_element_style(node)
        parent_tag = node.tag if self.policy.is_block(node.tag) else context.parent_tag
        return self.render(node.children, WalkContext(parent_style=resolved, parent_tag=parent_tag))
