"""Tests for short code generation."""

import re

from url_registry.shortcode import ShortCodeGenerator

BASE62_RE = re.compile(r"^[a-zA-Z0-9]+$")


class TestShortCodeGenerator:
    """Test short code generation."""
    
    def test_alphabet(self):
        """Alphabet is a-z, A-Z, 0-9 in that order."""
        chars = ShortCodeGenerator.BASE62_CHARS
        assert len(chars) == 62
        assert len(set(chars)) == 62
        assert chars.startswith("abc")
        assert chars[26:29] == "ABC"
        assert chars.endswith("789")
    
    def test_generate_random(self):
        """Test random code generation."""
        generator = ShortCodeGenerator(default_length=6)
        
        code = generator.generate_random()
        assert len(code) == 6
        assert BASE62_RE.fullmatch(code)
    
    def test_generate_random_custom_length(self):
        """Test random code with custom length."""
        generator = ShortCodeGenerator(default_length=6)
        
        code = generator.generate_random(length=10)
        assert len(code) == 10
        assert BASE62_RE.fullmatch(code)
    
    def test_generate_random_varies(self):
        """Codes are not repeated across draws."""
        generator = ShortCodeGenerator()
        codes = {generator.generate_random() for _ in range(200)}
        assert len(codes) > 190
    
    def test_draws_cover_alphabet(self):
        """Every base62 character can be drawn."""
        generator = ShortCodeGenerator()
        seen = set("".join(generator.generate_random(length=62) for _ in range(100)))
        assert seen == set(ShortCodeGenerator.BASE62_CHARS)
