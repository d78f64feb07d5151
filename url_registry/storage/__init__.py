"""Storage layer for the URL registry."""

from .base import URLStorageBase
from .json_file import JSONFileStorage
from .models import (
    ShortenedURL,
    RegistrySnapshot,
    URLStats,
    TopURL,
    RegistryStats,
)

__all__ = [
    "URLStorageBase",
    "JSONFileStorage",
    "ShortenedURL",
    "RegistrySnapshot",
    "URLStats",
    "TopURL",
    "RegistryStats",
]
