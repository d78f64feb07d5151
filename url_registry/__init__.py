"""File-backed URL shortener registry."""

from .shortcode import ShortCodeGenerator
from .registry import URLRegistry
from .exceptions import (
    URLRegistryError,
    InvalidURLError,
    ShortCodeExistsError,
    ShortCodeGenerationError,
)

__all__ = [
    "ShortCodeGenerator",
    "URLRegistry",
    "URLRegistryError",
    "InvalidURLError",
    "ShortCodeExistsError",
    "ShortCodeGenerationError",
]
