"""Core registry mapping short codes to original URLs."""

import logging
from typing import Optional, List, Union

from .shortcode import ShortCodeGenerator
from .storage.base import URLStorageBase
from .storage.json_file import JSONFileStorage
from .storage.models import (
    ShortenedURL,
    RegistrySnapshot,
    URLStats,
    TopURL,
    RegistryStats,
    utcnow,
)
from .common.validators import is_valid_url
from .common.url_builder import build_short_url
from .exceptions import InvalidURLError, ShortCodeExistsError, ShortCodeGenerationError

DEFAULT_BASE_URL = "https://short.ly"
DEFAULT_STORAGE_FILE = "urls.json"
TOP_URLS_LIMIT = 5
SHORT_CODE_LENGTH = 6


class URLRegistry:
    """In-memory short code registry backed by whole-document storage.

    State is loaded once at construction and every mutation (create,
    delete, tracked lookup) rewrites the whole snapshot. Operations are
    synchronous and assume a single caller; a concurrent host must
    serialize access to the registry itself.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        storage_file: str = DEFAULT_STORAGE_FILE,
        storage: Optional[URLStorageBase] = None,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_generation_attempts: int = 100,
    ):
        """Initialize the registry and load persisted state.

        Args:
            base_url: Prefix for composed short links
            storage_file: JSON file path, used when no storage is given
            storage: Optional storage implementation
            short_code_generator: Optional short code generator
            logger: Optional logger
            max_generation_attempts: Maximum draws for an unused generated code
        """
        self.base_url = base_url
        self.logger = logger or logging.getLogger(__name__)
        self.storage = storage or JSONFileStorage(storage_file, logger=self.logger)
        self.generator = short_code_generator or ShortCodeGenerator(default_length=SHORT_CODE_LENGTH)
        self.max_generation_attempts = max_generation_attempts

        snapshot = self.storage.load()
        self._urls = snapshot.urls
        self._counter = snapshot.counter

    @classmethod
    def from_config(cls, config, logger: Optional[logging.Logger] = None) -> "URLRegistry":
        """Build a registry from a loaded :class:`~url_registry.config.Config`."""
        return cls(
            base_url=config.base_url,
            storage_file=config.storage_file,
            logger=logger,
            max_generation_attempts=config.max_generation_attempts,
        )

    @property
    def counter(self) -> int:
        """Last id number handed out."""
        return self._counter

    def create_short_url(
        self,
        original_url: str,
        custom_code: Optional[str] = None,
    ) -> ShortenedURL:
        """Shorten a URL.

        A URL that is already registered returns its existing record
        unchanged, whatever custom code is passed.

        Args:
            original_url: The original long URL
            custom_code: Optional custom short code, used verbatim

        Returns:
            The new or existing record

        Raises:
            InvalidURLError: If the URL is not a valid absolute URL
            ShortCodeExistsError: If the custom code is already taken
            ShortCodeGenerationError: If no unused code could be generated
        """
        is_valid, error = is_valid_url(original_url)
        if not is_valid:
            raise InvalidURLError(f"Invalid URL: {error}")

        existing = self._find_by_original_url(original_url)
        if existing is not None:
            self.logger.debug(f"URL already registered as {existing.short_code}: {original_url}")
            return existing

        if custom_code:
            if custom_code in self._urls:
                raise ShortCodeExistsError(f"Short code '{custom_code}' already exists")
            short_code = custom_code
        else:
            short_code = self._generate_unique_short_code()

        self._counter += 1
        record = ShortenedURL(
            id=f"url_{self._counter}",
            original_url=original_url,
            short_code=short_code,
            created_at=utcnow(),
        )
        self._urls[short_code] = record
        self._save()

        self.logger.info(f"Created short URL: {short_code} -> {original_url}")
        return record

    def get_original_url(self, short_code: str, track_click: bool = True) -> Optional[str]:
        """Resolve a short code.

        Args:
            short_code: The short code to lookup
            track_click: Whether to count this lookup as a click

        Returns:
            Original URL or None if not found
        """
        record = self._urls.get(short_code)
        if record is None:
            self.logger.info(f"Short code not found: {short_code}")
            return None

        if track_click:
            record.click_count += 1
            record.last_accessed = utcnow()
            self._save()

        self.logger.debug(f"Resolved URL: {short_code} -> {record.original_url}")
        return record.original_url

    def get_statistics(
        self, short_code: Optional[str] = None
    ) -> Union[URLStats, RegistryStats, None]:
        """Get statistics for one short code or for the whole registry.

        The most-clicked ranking holds at most five entries; records with
        equal click counts keep their insertion order.

        Args:
            short_code: Optional short code

        Returns:
            URLStats for a known code, None for an unknown code,
            RegistryStats when no code is given
        """
        if short_code is not None:
            record = self._urls.get(short_code)
            if record is None:
                return None
            return URLStats(
                original_url=record.original_url,
                short_code=record.short_code,
                click_count=record.click_count,
                created_at=record.created_at,
                last_accessed=record.last_accessed,
            )

        records = list(self._urls.values())
        ranked = sorted(records, key=lambda r: r.click_count, reverse=True)
        return RegistryStats(
            total_urls=len(records),
            total_clicks=sum(r.click_count for r in records),
            top_urls=[
                TopURL(
                    short_code=r.short_code,
                    original_url=r.original_url,
                    click_count=r.click_count,
                )
                for r in ranked[:TOP_URLS_LIMIT]
            ],
        )

    def list_urls(self) -> List[ShortenedURL]:
        """List all records in insertion order."""
        return list(self._urls.values())

    def delete_short_url(self, short_code: str) -> bool:
        """Delete a short URL.

        Args:
            short_code: The short code to delete

        Returns:
            True if deleted, False if not found
        """
        if short_code not in self._urls:
            return False

        del self._urls[short_code]
        self._save()

        self.logger.info(f"Deleted short URL: {short_code}")
        return True

    def get_full_short_url(self, short_code: str) -> str:
        return build_short_url(short_code, self.base_url)

    def _find_by_original_url(self, original_url: str) -> Optional[ShortenedURL]:
        for record in self._urls.values():
            if record.original_url == original_url:
                return record
        return None

    def _generate_unique_short_code(self) -> str:
        """Draw random codes until one is unused.

        Raises:
            ShortCodeGenerationError: If every attempt collided
        """
        for attempt in range(self.max_generation_attempts):
            code = self.generator.generate_random(SHORT_CODE_LENGTH)
            if code not in self._urls:
                if attempt:
                    self.logger.debug(f"Generated code after {attempt + 1} attempts: {code}")
                return code

        raise ShortCodeGenerationError(
            f"Unable to generate unique short code after {self.max_generation_attempts} attempts"
        )

    def _save(self) -> None:
        # Best effort: a failed write leaves the in-memory state ahead of disk
        self.storage.save(RegistrySnapshot(urls=self._urls, counter=self._counter))
