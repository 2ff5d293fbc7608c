"""
Table extraction for texnative.

Flattens ``table`` nodes into a header row, body rows and per-column width
estimates. Column widths are estimated from character counts so the
table can be laid out at its full width inside a horizontal scroller.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import TABLE_CELL_PADDING, TABLE_CHAR_WIDTH
from ..models.nodes import ElementNode, Node, TextNode

logger = logging.getLogger(__name__)

ROW_TAG = 'tr'
CELL_TAGS = ('td', 'th')
HEAD_GROUP_TAG = 'thead'
BODY_GROUP_TAGS = ('tbody', 'tfoot')


@dataclass(slots=True)
class TableData:
    """Header, body and column widths of an extracted table."""

    head: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)
    widths: List[float] = field(default_factory=list)

    @property
    def total_width(self) -> float:
        return sum(self.widths)


def extract_cell_text(node: Node) -> str:
    """Concatenate descendant text of a cell, joined by single spaces."""
    if isinstance(node, TextNode):
        return html.unescape(node.value or '').strip()
    if not isinstance(node, ElementNode):
        return ''
    parts = (html.unescape(value or '').strip() for value in node.iter_text())
    return ' '.join(part for part in parts if part)


def estimate_column_widths(head: List[str], rows: List[List[str]],
                           char_width: float = TABLE_CHAR_WIDTH,
                           padding: float = TABLE_CELL_PADDING) -> List[float]:
    """
    Estimate column widths from cell text length.

    Args:
        head: Header row (may be empty)
        rows: Body rows (may be ragged)
        char_width: Width of one character
        padding: Horizontal padding per cell

    Returns:
        One width per column
    """
    all_rows = [row for row in ([head] if head else []) + list(rows) if row]
    if not all_rows:
        return []

    column_count = max(len(row) for row in all_rows)
    widths = [0] * column_count
    for row in all_rows:
        for column in range(column_count):
            cell = row[column] if column < len(row) else ''
            widths[column] = max(widths[column], len(cell) * char_width + padding)
    return widths


class TableExtractor:
    """Extracts header/body matrices from table nodes."""

    def __init__(self, char_width: float = TABLE_CHAR_WIDTH, padding: float = TABLE_CELL_PADDING):
        self.char_width = char_width
        self.padding = padding

    def _row_cells(self, row: ElementNode) -> List[str]:
        return [
            extract_cell_text(cell)
            for cell in row.children
            if isinstance(cell, ElementNode) and cell.tag in CELL_TAGS
        ]

    def extract(self, table: ElementNode) -> TableData:
        """
        Flatten a table node.

        Args:
            table: ``table`` element node

        Returns:
            TableData with header, body rows and widths
        """
        head_rows: List[ElementNode] = []
        body_rows: List[ElementNode] = []
        has_head_group = False

        for section in table.children:
            if not isinstance(section, ElementNode):
                continue
            if section.tag == HEAD_GROUP_TAG:
                has_head_group = True
                head_rows.extend(child for child in section.children
                                 if isinstance(child, ElementNode) and child.tag == ROW_TAG)
            elif section.tag in BODY_GROUP_TAGS:
                body_rows.extend(child for child in section.children
                                 if isinstance(child, ElementNode) and child.tag == ROW_TAG)
            elif section.tag == ROW_TAG:
                body_rows.append(section)

        if has_head_group:
            head = self._row_cells(head_rows[0]) if head_rows else []
            rows = [self._row_cells(row) for row in head_rows[1:] + body_rows]
        elif body_rows:
            head = self._row_cells(body_rows[0])
            rows = [self._row_cells(row) for row in body_rows[1:]]
        else:
            logger.debug("Table without rows rendered empty")
            head, rows = [], []

        widths = estimate_column_widths(head, rows, self.char_width, self.padding)
        return TableData(head=head, rows=rows, widths=widths)
