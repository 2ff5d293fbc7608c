"""
Utils module for texnative.

Logging helpers and responsive viewport metrics.
"""

from .logger import configure_logging, get_logger, set_log_level
from .rich_logger import create_logger, setup_logging
from .metrics import (
    MetricsProvider,
    ResponsiveMetrics,
    StaticMetricsProvider,
    ViewportMetrics,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "set_log_level",
    "create_logger",
    "setup_logging",
    "MetricsProvider",
    "ResponsiveMetrics",
    "StaticMetricsProvider",
    "ViewportMetrics",
]
