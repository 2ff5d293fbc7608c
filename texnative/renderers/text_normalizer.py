"""
Text normalization for rendered text nodes.

Decodes entities and applies the newline / whitespace collapsing rules
that stand in for the CSS ``white-space`` model.
"""

import html
import re
from typing import Optional


class TextNormalizer:
    """Normalizes raw text node values before they become text runs."""

    ISOLATED_NEWLINES = re.compile(r'^(?:\r?\n)+$')
    LINE_ENDING = re.compile(r'\r?\n')
    HORIZONTAL_WHITESPACE_RUN = re.compile(r'[ \t\f\v]+')

    def __init__(self, collapse_text_newlines: bool = True, skip_isolated_newline: bool = True,
                 collapse_runs: bool = True):
        """Initialize text normalizer.

        Args:
            collapse_text_newlines: Turn embedded newlines into spaces
            skip_isolated_newline: Drop text that is only newlines
            collapse_runs: Collapse horizontal whitespace runs to one space
        """
        self.collapse_text_newlines = collapse_text_newlines
        self.skip_isolated_newline = skip_isolated_newline
        self.collapse_runs = collapse_runs

    def normalize(self, raw: Optional[str], in_pre: bool = False) -> Optional[str]:
        """Return the text to render, or None when nothing should be emitted."""
        if not raw:
            return None

        decoded = html.unescape(raw)

        if in_pre:
            return decoded

        if self.skip_isolated_newline and self.ISOLATED_NEWLINES.match(decoded):
            return None

        if self.collapse_text_newlines:
            decoded = self.LINE_ENDING.sub(' ', decoded)
        if self.collapse_runs:
            decoded = self.HORIZONTAL_WHITESPACE_RUN.sub(' ', decoded)

        if decoded == '':
            return None

        return decoded
