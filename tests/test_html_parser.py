"""
Tests for the markup tree builder.
"""

import pytest

from texnative.exceptions import ParsingError
from texnative.models.nodes import (
    CommentNode,
    ElementNode,
    ImageNode,
    LineBreakNode,
    MathNode,
    TableNode,
    TextNode,
)
from texnative.parser.html_parser import parse_markup


class TestParseMarkup:
    """Test cases for parse_markup."""

    def test_empty_input(self):
        assert parse_markup(None) == []
        assert parse_markup("") == []

    def test_non_string_rejected(self):
        with pytest.raises(ParsingError):
            parse_markup(42)

    def test_nesting(self):
        roots = parse_markup("<div><b>bold</b> tail</div>")

        assert len(roots) == 1
        div = roots[0]
        assert isinstance(div, ElementNode)
        assert div.tag == "div"
        assert div.children[0].tag == "b"
        assert div.children[0].children == [TextNode("bold")]
        assert div.children[1] == TextNode(" tail")

    def test_tag_names_lowercased(self):
        roots = parse_markup("<DIV><SPAN>x</SPAN></DIV>")

        assert roots[0].tag == "div"
        assert roots[0].children[0].tag == "span"

    def test_specialised_node_classes(self):
        roots = parse_markup('<br><img src="a.png"><table></table>')

        assert isinstance(roots[0], LineBreakNode)
        assert isinstance(roots[1], ImageNode)
        assert roots[1].src == "a.png"
        assert isinstance(roots[2], TableNode)

    def test_void_elements_do_not_nest(self):
        roots = parse_markup("a<br>b")

        assert [node.kind for node in roots] == ["#text", "br", "#text"]

    def test_style_attribute_kept_raw(self):
        roots = parse_markup('<span style="color: red">x</span>')

        assert roots[0].style == "color: red"
        assert roots[0].get_attribute("style") == "color: red"

    def test_entities_kept_as_written(self):
        roots = parse_markup("<p>a &amp; b &#169;</p>")

        assert roots[0].children == [TextNode("a &amp; b &#169;")]

    def test_comments(self):
        roots = parse_markup("<!-- note -->x")

        assert roots[0] == CommentNode(" note ")
        assert roots[1] == TextNode("x")

    def test_paragraph_auto_closes(self):
        roots = parse_markup("<p>one<p>two")

        assert [node.tag for node in roots] == ["p", "p"]
        assert roots[1].children == [TextNode("two")]

    def test_unmatched_end_tag_ignored(self):
        roots = parse_markup("<div>x</span></div>y")

        assert roots[0].children == [TextNode("x")]
        assert roots[1] == TextNode("y")

    def test_unclosed_elements_closed_at_end(self):
        roots = parse_markup("<div><span>x")

        assert roots[0].children[0].children == [TextNode("x")]

    def test_iter_text(self):
        roots = parse_markup("<td>a<b>b</b><!-- c --></td>")

        assert list(roots[0].iter_text()) == ["a", "b"]


class TestMathCapture:
    """Test cases for verbatim capture of typeset math."""

    def test_svg_captured_verbatim(self):
        svg = '<svg viewBox="0 0 10 10" width="2ex"><path d="M0 0"/><g><use xlink:href="#a"></use></g></svg>'
        roots = parse_markup(f'x<mjx-container class="MathJax">{svg}</mjx-container>y')

        math = roots[1]
        assert isinstance(math, MathNode)
        assert math.svg == svg
        assert math.children == []
        assert math.get_attribute("class") == "MathJax"
        assert roots[2] == TextNode("y")

    def test_case_preserved_in_end_tags(self):
        svg = '<svg><clipPath id="c"><rect/></clipPath></svg>'
        roots = parse_markup(f"<mjx-container>{svg}</mjx-container>")

        assert roots[0].svg == svg

    def test_unterminated_math_is_closed(self):
        roots = parse_markup('<mjx-container><svg width="1ex"><g>')

        assert roots[0].svg == '<svg width="1ex"><g></g></svg>'

    def test_math_inside_paragraph(self):
        roots = parse_markup("<p>a <mjx-container><svg></svg></mjx-container> b</p>")

        paragraph = roots[0]
        assert [node.kind for node in paragraph.children] == ["#text", "mjx-container", "#text"]
        assert paragraph.children[1].svg == "<svg></svg>"
