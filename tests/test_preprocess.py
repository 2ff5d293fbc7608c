"""
Tests for markup preprocessing.
"""

from texnative.parser.preprocess import preprocess_markup


class TestPreprocessMarkup:
    """Test cases for preprocess_markup."""

    def test_none(self):
        assert preprocess_markup(None) == ""

    def test_forces_single_line(self):
        assert preprocess_markup("a\r\nb\n\t  c") == "a b c"

    def test_single_line_can_be_disabled(self):
        assert preprocess_markup("a\nb", force_single_line_html=False) == "a\nb"

    def test_strips_pre_wrap(self):
        markup = '<span style="WHITE - SPACE : pre-wrap; color: red">x</span>'

        assert preprocess_markup(markup) == '<span style=" color: red">x</span>'

    def test_pre_wrap_kept_when_disabled(self):
        markup = '<span style="white-space: pre-wrap">x</span>'

        assert preprocess_markup(markup, strip_white_space_pre_wrap=False) == markup

    def test_other_white_space_values_kept(self):
        markup = '<span style="white-space: nowrap">x</span>'

        assert preprocess_markup(markup) == markup
