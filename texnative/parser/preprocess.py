"""Markup preprocessing applied before typesetting and parsing."""

import re
from typing import Optional

PRE_WRAP_DECLARATION = re.compile(r'white\s*-\s*space\s*:\s*pre-wrap\s*;?', re.IGNORECASE)
LINE_ENDING = re.compile(r'\r?\n')
HORIZONTAL_WHITESPACE_RUN = re.compile(r'[ \t\f\v]+')


def preprocess_markup(markup: Optional[str], force_single_line_html: bool = True,
                      strip_white_space_pre_wrap: bool = True) -> str:
    """
    Prepare raw markup for the typesetter.

    Args:
        markup: Raw markup string
        force_single_line_html: Replace line endings and collapse whitespace runs
        strip_white_space_pre_wrap: Remove ``white-space: pre-wrap`` declarations

    Returns:
        Cleaned markup
    """
    if markup is None:
        return ''
    text = str(markup)

    if strip_white_space_pre_wrap:
        text = PRE_WRAP_DECLARATION.sub('', text)

    if force_single_line_html:
        text = LINE_ENDING.sub(' ', text)
        text = HORIZONTAL_WHITESPACE_RUN.sub(' ', text)

    return text
