"""URL building utilities for the URL registry."""


def build_short_url(short_code: str, base_url: str) -> str:
    """Build complete short URL.
    
    The code is appended verbatim; no check is made that it exists.
    
    Args:
        short_code: The short code
        base_url: Base URL (e.g., https://short.ly)
        
    Returns:
        Complete short URL
    """
    return f"{base_url}/{short_code}"
