"""
Tests for MathSvgAdapter.
"""

import logging

from lxml import etree

from texnative.renderers.math_svg import MathSvgAdapter, SvgDimension, format_number


class TestSvgDimension:
    def test_parse(self):
        assert SvgDimension.parse("2.5ex") == SvgDimension(2.5, "ex")
        assert SvgDimension.parse(" 10px ") == SvgDimension(10.0, "px")
        assert SvgDimension.parse(".5ex") == SvgDimension(0.5, "ex")

    def test_unmatched(self):
        assert SvgDimension.parse("100%") == SvgDimension()
        assert SvgDimension.parse("-1ex") == SvgDimension()
        assert SvgDimension.parse(None) == SvgDimension()

    def test_format_number(self):
        assert format_number(35.0) == "35"
        assert format_number(1.2 * 14) == "16.8"


class TestMathSvgAdapter:
    """Test cases for MathSvgAdapter.adapt."""

    def test_rescales_dimensions(self, math_fragment):
        result = MathSvgAdapter().adapt(math_fragment, 14, "black")
        svg = etree.fromstring(result)

        assert svg.get("width") == "35ex"
        assert svg.get("height") == "16.8ex"
        assert svg.get("viewBox") == "0 -750 1000 1000"

    def test_strips_font_family(self, math_fragment):
        result = MathSvgAdapter().adapt(math_fragment, 14, "black")

        assert "font-family" not in result
        assert "MJX" not in result
        assert "vertical-align: -0.5ex;" in result

    def test_replaces_current_color(self, math_fragment):
        result = MathSvgAdapter().adapt(math_fragment, 14, "#ff0000")
        group = etree.fromstring(result)[0]

        assert "currentColor" not in result
        assert group.get("stroke") == "#ff0000"
        assert group.get("fill") == "#ff0000"

    def test_zero_dimension(self):
        result = MathSvgAdapter().adapt('<svg width="0ex" height="2px"></svg>', 10, "red")
        svg = etree.fromstring(result)

        assert svg.get("width") == "0"
        assert svg.get("height") == "20px"

    def test_unmatched_dimension_left_unchanged(self):
        result = MathSvgAdapter().adapt('<svg width="100%" height="3em"></svg>', 10, "red")
        svg = etree.fromstring(result)

        assert svg.get("width") == "100%"
        assert svg.get("height") == "3em"

    def test_missing_dimensions(self):
        result = MathSvgAdapter().adapt("<svg><g/></svg>", 10, "red")
        svg = etree.fromstring(result)

        assert svg.get("width") is None
        assert svg.get("height") is None

    def test_fragment_without_svg_only_recolored(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = MathSvgAdapter().adapt('<span style="color: currentColor">x</span>', 10, "blue")

        assert result == '<span style="color: blue">x</span>'
        assert "No <svg> root" in caplog.text

    def test_oversized_dimension_left_unchanged(self):
        huge = "1" + "0" * 400 + "ex"

        result = MathSvgAdapter().adapt(f'<svg width="{huge}" height="1ex"></svg>', 14, "red")
        svg = etree.fromstring(result)

        assert svg.get("width") == huge
        assert svg.get("height") == "14ex"

    def test_replaces_current_color_in_tail_text(self):
        fragment = '<svg><text>a</text>currentColor<g/>fill currentColor</svg>'

        result = MathSvgAdapter().adapt(fragment, 1, "green")

        assert "currentColor" not in result
        assert result.count("green") == 2

    def test_empty_fragment(self):
        assert MathSvgAdapter().adapt("", 10, "red") == ""

    def test_read_dimensions(self, math_fragment):
        adapter = MathSvgAdapter()

        assert adapter.read_dimensions(math_fragment) == (2.5, 1.2)
        assert adapter.read_dimensions("<svg/>") == (0.0, 0.0)
        assert adapter.read_dimensions("") == (0.0, 0.0)

    def test_svg_nested_in_wrapper_markup(self):
        fragment = '<span class="x"><svg width="1ex"/></span>'

        result = MathSvgAdapter().adapt(fragment, 4, "red")

        assert etree.fromstring(result).get("width") == "4ex"
