"""
Error classes raised by the URL registry.

Lookups of unknown short codes are not errors: they return None or False.
Only caller-facing failures of create and the fatal generation path raise.
"""

from typing import Optional


class URLRegistryError(Exception):
    """
    Base URL registry error class.

    Attributes:
        message: Error message (default: "URL registry error")
    """
    message: str = "URL registry error"

    def __init__(self, message: Optional[str] = None):
        """
        Initialize registry error.

        Args:
            message: Error message (overrides default)
        """
        self.message = message or self.message
        super().__init__(self.message)


class InvalidURLError(URLRegistryError, ValueError):
    """URL is not a syntactically valid absolute URL."""
    message = "Invalid URL"


class ShortCodeExistsError(URLRegistryError, ValueError):
    """A custom short code collides with an existing record."""
    message = "Short code already exists"


class ShortCodeGenerationError(URLRegistryError, RuntimeError):
    """No unused short code could be drawn within the attempt limit."""
    message = "Unable to generate unique short code"
