"""Pytest configuration and fixtures."""

import pytest

from url_registry.registry import URLRegistry
from url_registry.shortcode import ShortCodeGenerator
from url_registry.common.logging_config import setup_logging


class ScriptedGenerator(ShortCodeGenerator):
    """Generator that returns a fixed sequence of codes."""
    
    def __init__(self, codes):
        super().__init__(default_length=6)
        self.codes = list(codes)
        self.calls = 0
    
    def generate_random(self, length=None):
        code = self.codes[min(self.calls, len(self.codes) - 1)]
        self.calls += 1
        return code


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def storage_file(tmp_path):
    """Path of a registry file that does not exist yet."""
    return str(tmp_path / "urls.json")


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=6)


@pytest.fixture
def registry(storage_file, short_code_generator, logger) -> URLRegistry:
    """Create registry backed by a temporary file."""
    return URLRegistry(
        base_url="https://short.ly",
        storage_file=storage_file,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]


@pytest.fixture
def scripted_generator():
    """Factory for generators that replay a fixed list of codes."""
    return ScriptedGenerator
