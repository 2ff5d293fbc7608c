"""
Tests for the inline CSS declaration parser.
"""

from texnative.parser.css_parser import camel_case, parse_css


class TestCamelCase:
    def test_conversion(self):
        assert camel_case("font-size") == "fontSize"
        assert camel_case(" Background-Color ") == "backgroundColor"
        assert camel_case("color") == "color"
        assert camel_case("-") == ""


class TestParseCss:
    """Test cases for parse_css."""

    def test_basic_declarations(self):
        style = parse_css("color: red; font-size: 12px; width: 50%")

        assert style == {"color": "red", "fontSize": 12, "width": "50%"}

    def test_numbers(self):
        style = parse_css("opacity: 0.5; line-height: 18; margin-left: -4.5px")

        assert style == {"opacity": 0.5, "lineHeight": 18, "marginLeft": -4.5}

    def test_keywords_and_units_stay_strings(self):
        style = parse_css("font-size: large; width: 2in; height: 3em")

        assert style == {"fontSize": "large", "width": "2in", "height": "3em"}

    def test_text_decoration_alias(self):
        assert parse_css("text-decoration: underline") == {"textDecorationLine": "underline"}

    def test_font_weight_kept_verbatim(self):
        assert parse_css("font-weight: 700") == {"fontWeight": "700"}

    def test_font_family_quotes_stripped(self):
        assert parse_css("font-family: 'Times New Roman'") == {"fontFamily": "Times New Roman"}

    def test_important_removed(self):
        assert parse_css("color: blue !important") == {"color": "blue"}

    def test_malformed_declarations_skipped(self):
        style = parse_css("color red; ; width:; : 5px; height: 10px")

        assert style == {"height": 10}

    def test_empty(self):
        assert parse_css(None) == {}
        assert parse_css("") == {}

    def test_value_with_colon(self):
        style = parse_css("background-image: url(http://example.com/a.png)")

        assert style == {"backgroundImage": "url(http://example.com/a.png)"}
