"""
Responsive metrics for texnative.

Maps nominal font sizes and viewport percentages to device-relative pixel
values. Viewport metrics come from an injectable provider and are read on
every call, so orientation changes show up on the next render.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

# Reference design the responsive helpers are calibrated against.
MOBILE_WIDTH = 375
MOBILE_HEIGHT = 812

# Portrait offset used on iOS devices (notch + home indicator).
IOS_PORTRAIT_OFFSET = 78

PLATFORM_IOS = "ios"
PLATFORM_ANDROID = "android"
PLATFORM_WEB = "web"


@dataclass(slots=True, frozen=True)
class ViewportMetrics:
    """Snapshot of the host viewport."""

    width: float
    height: float
    platform: str = PLATFORM_WEB
    status_bar_height: Optional[float] = None

    @property
    def is_landscape(self) -> bool:
        return self.width > self.height


class MetricsProvider(Protocol):
    """Anything able to report the current viewport."""

    def current(self) -> ViewportMetrics:
        ...


class StaticMetricsProvider:
    """Metrics provider backed by fixed values that can be changed at runtime."""

    def __init__(self, width: float = MOBILE_WIDTH, height: float = MOBILE_HEIGHT,
                 platform: str = PLATFORM_WEB, status_bar_height: Optional[float] = None) -> None:
        self._metrics = ViewportMetrics(
            width=width,
            height=height,
            platform=(platform or PLATFORM_WEB).lower(),
            status_bar_height=status_bar_height,
        )

    def current(self) -> ViewportMetrics:
        return self._metrics

    def set_viewport(self, width: float, height: float) -> None:
        """Replace the viewport size, keeping platform and status bar."""
        self._metrics = ViewportMetrics(
            width=width,
            height=height,
            platform=self._metrics.platform,
            status_bar_height=self._metrics.status_bar_height,
        )

    def rotate(self) -> None:
        """Swap width and height, as an orientation change would."""
        self.set_viewport(self._metrics.height, self._metrics.width)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ResponsiveMetrics:
    """
    Scales sizes against the current viewport.

    Handles font scaling for devices of differing aspect ratio and
    percentage-of-viewport width/height calculations.
    """

    def __init__(self, provider: Optional[MetricsProvider] = None):
        """
        Initialize responsive metrics.

        Args:
            provider: Viewport metrics provider (static reference viewport if omitted)
        """
        self.provider = provider or StaticMetricsProvider()

    def _portrait_offset(self, metrics: ViewportMetrics) -> float:
        if metrics.is_landscape:
            return 0
        if metrics.platform == PLATFORM_IOS:
            return IOS_PORTRAIT_OFFSET
        return metrics.status_bar_height or 0

    def scale_font(self, size: float) -> int:
        """
        Scale a nominal font size to the current device.

        Args:
            size: Nominal font size in points

        Returns:
            Rounded device font size
        """
        metrics = self.provider.current()
        axis_len = max(metrics.height, metrics.width)
        long_side = metrics.width if metrics.width > metrics.height else metrics.height

        # Only Android lays content out below the status bar.
        if metrics.platform == PLATFORM_ANDROID:
            long_side = long_side - self._portrait_offset(metrics)

        if not axis_len:
            logger.debug(f"Empty viewport, font size {size} left unscaled")
            return _round_half_up(size)

        return _round_half_up(size * long_side / axis_len)

    def scale_width(self, percent: float) -> float:
        """Return ``percent`` of the viewport width."""
        metrics = self.provider.current()
        if metrics.platform == PLATFORM_WEB:
            return MOBILE_WIDTH * (percent / 100)
        return metrics.width * (percent / 100)

    def scale_height(self, percent: float) -> float:
        """Return ``percent`` of the viewport height."""
        metrics = self.provider.current()
        if metrics.platform == PLATFORM_WEB:
            return MOBILE_HEIGHT * (percent / 100)
        return metrics.height * (percent / 100)
