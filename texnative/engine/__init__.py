"""Math typesetting seam."""

from .typesetter import MathTypesetter, PassthroughTypesetter

__all__ = ["MathTypesetter", "PassthroughTypesetter"]
