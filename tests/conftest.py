"""
Pytest configuration for texnative
"""

import logging
import sys

import pytest

from texnative.config import RenderConfig
from texnative.renderers.tree_walker import DocumentTreeWalker
from texnative.styles.style_sanitizer import StyleSanitizer
from texnative.utils.metrics import ResponsiveMetrics, StaticMetricsProvider


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid handler leaks between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def web_provider():
    """Reference viewport without a live device (identity font scaling)."""
    return StaticMetricsProvider(width=375, height=812, platform="web")


@pytest.fixture
def android_provider():
    """Portrait Android phone with a 24pt status bar."""
    return StaticMetricsProvider(width=400, height=800, platform="android", status_bar_height=24)


@pytest.fixture
def ios_provider():
    """Portrait iPhone."""
    return StaticMetricsProvider(width=390, height=844, platform="ios")


@pytest.fixture
def web_metrics(web_provider):
    return ResponsiveMetrics(web_provider)


@pytest.fixture
def android_metrics(android_provider):
    return ResponsiveMetrics(android_provider)


@pytest.fixture
def sanitizer(web_metrics):
    """Sanitizer whose font scaling is the identity."""
    return StyleSanitizer(metrics=web_metrics)


@pytest.fixture
def make_walker(web_metrics):
    """Factory for tree walkers with custom configuration."""
    def factory(metrics=None, **options):
        return DocumentTreeWalker(config=RenderConfig(**options), metrics=metrics or web_metrics)
    return factory


@pytest.fixture
def walker(make_walker):
    return make_walker()


@pytest.fixture
def math_fragment():
    """SVG fragment shaped like typesetter output."""
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" '
        'width="2.5ex" height="1.2ex" font-family="serif" role="img" viewBox="0 -750 1000 1000" '
        'style="vertical-align: -0.5ex; font-family: MJX;">'
        '<g stroke="currentColor" fill="currentColor" stroke-width="0">'
        '<path d="M0 0L10 10"/><text font-family="MJXZERO">x</text>'
        '</g></svg>'
    )
