"""Custom exceptions for texnative."""

from typing import Optional


class TexNativeError(Exception):
    """Base exception for texnative errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigError(TexNativeError):
    """Exception raised for invalid render configuration values."""

    pass


class ParsingError(TexNativeError):
    """Exception raised when markup cannot be read at all."""

    pass


class TypesettingError(TexNativeError):
    """Exception raised by math typesetter implementations.

    The renderer never catches it; it reaches the caller unchanged.
    """

    pass


class RenderingError(TexNativeError):
    """Exception raised when an output tree cannot be produced."""

    pass
