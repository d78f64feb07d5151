"""Validation utilities for the URL registry."""

from urllib.parse import urlparse
from typing import Tuple


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate that a string is a well-formed absolute URL.

    A URL is accepted when it parses into a scheme and an authority
    (network location) whose host and port are themselves well formed.
    Any scheme is allowed.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if url != url.strip():
        return False, "URL must not have leading or trailing whitespace"

    try:
        result = urlparse(url)

        if not result.scheme:
            return False, "URL must include a scheme (e.g. https://)"

        if not result.netloc:
            return False, "URL must have a valid domain"

        if any(c.isspace() for c in result.netloc):
            return False, "URL domain must not contain whitespace"

        if not result.hostname:
            return False, "URL must have a valid host"

        # Raises ValueError for out-of-range or non-numeric ports
        _ = result.port

        return True, ""

    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"
