"""Media helpers."""

from .image_probe import ImageSizeProbe

__all__ = ["ImageSizeProbe"]
