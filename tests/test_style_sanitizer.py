"""
Tests for StyleSanitizer class.
"""

import pytest

from texnative.styles.style_sanitizer import StyleSanitizer
from texnative.styles.tag_policy import (
    DEFAULT_POLICY,
    INLINE_TEXT_TAGS,
    StylePolicy,
    TagPolicy,
)


class TestTagPolicy:
    """Test cases for tag classification."""

    def test_classify(self):
        assert DEFAULT_POLICY.classify("div") is TagPolicy.BLOCK_CONTAINER
        assert DEFAULT_POLICY.classify("SPAN") is TagPolicy.INLINE_TEXT
        assert DEFAULT_POLICY.classify("my-widget") is TagPolicy.UNKNOWN
        assert DEFAULT_POLICY.classify(None) is TagPolicy.UNKNOWN

    def test_custom_policy(self):
        policy = StylePolicy(block_tags=frozenset(["card"]))

        assert policy.classify("card") is TagPolicy.BLOCK_CONTAINER
        assert policy.classify("div") is TagPolicy.UNKNOWN


class TestSanitize:
    """Test cases for StyleSanitizer.sanitize."""

    @pytest.mark.parametrize("tag", sorted(INLINE_TEXT_TAGS) + ["mark", "custom-tag", "", None])
    def test_inline_and_unknown_tags_drop_layout(self, sanitizer, tag):
        """Layout properties are removed, text-safe ones kept."""
        assert sanitizer.sanitize(tag, {"width": 10, "color": "red"}) == {"color": "red"}

    def test_block_tag_keeps_everything(self, sanitizer):
        style = {"width": 10, "color": "red", "flexDirection": "row"}

        assert sanitizer.sanitize("div", style) == style

    def test_input_is_not_mutated(self, sanitizer):
        style = {"width": 10, "fontSize": "large"}

        sanitizer.sanitize("span", style)

        assert style == {"width": 10, "fontSize": "large"}

    def test_font_size_keyword_normalized(self, sanitizer):
        assert sanitizer.sanitize("span", {"fontSize": "large"}) == {"fontSize": 17}

    def test_unresolvable_font_size_dropped(self, sanitizer):
        assert sanitizer.sanitize("div", {"fontSize": "unset", "color": "red"}) == {"color": "red"}
        assert sanitizer.sanitize("div", {"fontSize": "huge"}) == {}

    def test_font_size_scaled_responsively(self, android_metrics):
        sanitizer = StyleSanitizer(metrics=android_metrics)

        assert sanitizer.sanitize("div", {"fontSize": "100px"}) == {"fontSize": 97}

    def test_font_size_scaling_can_be_disabled(self, android_metrics):
        sanitizer = StyleSanitizer(metrics=android_metrics, responsive_font_size=False)

        assert sanitizer.sanitize("div", {"fontSize": 100}) == {"fontSize": 100}

    def test_none_style(self, sanitizer):
        assert sanitizer.sanitize("span", None) == {}


class TestPercentAllowed:
    """Test cases for percentage legality."""

    def test_block_allow_list(self, sanitizer):
        assert sanitizer.percent_allowed("div", "width") is True
        assert sanitizer.percent_allowed("TD", "paddingLeft") is True
        assert sanitizer.percent_allowed("div", "fontSize") is False

    def test_inline_and_unknown_never_allowed(self, sanitizer):
        assert sanitizer.percent_allowed("span", "width") is False
        assert sanitizer.percent_allowed("span", "marginLeft") is False
        assert sanitizer.percent_allowed("unknown", "width") is False
        assert sanitizer.percent_allowed(None, "width") is False


class TestMapStyle:
    """Test cases for StyleSanitizer.map_style."""

    def test_inline_percentage_dropped(self, sanitizer):
        assert sanitizer.map_style("span", {"width": "50%"}) == {}

    def test_block_percentage_kept(self, sanitizer):
        assert sanitizer.map_style("div", {"width": "50%"}) == {"width": "50%"}

    def test_text_safe_percentage_dropped_on_inline(self, sanitizer):
        assert sanitizer.map_style("span", {"marginLeft": "10%", "color": "red"}) == {"color": "red"}

    def test_block_percentage_outside_allow_list_dropped(self, sanitizer):
        result = sanitizer.map_style("div", {"lineHeight": "150%", "height": " 20% "})

        assert result == {"height": " 20% "}

    def test_non_percentage_values_untouched(self, sanitizer):
        style = {"color": "red", "fontWeight": "bold", "opacity": 0.5}

        assert sanitizer.map_style("b", style) == style

    def test_text_safe_filter(self, sanitizer):
        style = {"color": "red", "width": 10, "transform": [{"translateY": -3}]}

        assert sanitizer.text_safe(style) == {"color": "red", "transform": [{"translateY": -3}]}
        assert sanitizer.text_safe(None) == {}
