"""Short code generation utilities."""

import secrets
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate random short codes for URLs."""
    
    # Base62 characters (a-z, A-Z, 0-9)
    BASE62_CHARS = string.ascii_lowercase + string.ascii_uppercase + string.digits
    
    def __init__(self, default_length: int = 6):
        """Initialize short code generator.
        
        Args:
            default_length: Default length for generated codes
        """
        self.default_length = default_length
    
    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.
        
        Characters are drawn uniformly from the base62 alphabet using the
        operating system's cryptographically strong source, so codes cannot
        be predicted from previously issued ones.
        
        Args:
            length: Length of the code (uses default if not specified)
            
        Returns:
            Random short code
        """
        length = length or self.default_length
        return ''.join(secrets.choice(self.BASE62_CHARS) for _ in range(length))
