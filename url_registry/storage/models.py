"""Data models for the URL registry."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def utcnow() -> datetime:
    """Current UTC time truncated to millisecond precision.

    Stored timestamps carry milliseconds only, so truncating here keeps
    in-memory values identical to what a reload produces.
    """
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def format_timestamp(value: datetime) -> str:
    """Serialize a datetime as an ISO-8601 UTC string, e.g. 2024-01-01T12:00:00.000Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (
        value.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def parse_timestamp(value: Any) -> datetime:
    """Revive a stored ISO-8601 string into an aware UTC datetime.

    Raises:
        ValueError: If the value is not a parseable timestamp string or
            falls outside the representable UTC range
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value[:-1] + "+00:00" if value.endswith("Z") else value
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"Invalid timestamp: {value!r}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError(f"Timestamp out of range: {value!r}") from e


@dataclass
class ShortenedURL:
    """A shortened URL record and its access statistics."""

    id: str
    original_url: str
    short_code: str
    created_at: datetime
    click_count: int = 0
    last_accessed: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted dictionary shape.

        ``lastAccessed`` is omitted until the first tracked resolution.
        """
        data: Dict[str, Any] = {
            "id": self.id,
            "originalUrl": self.original_url,
            "shortCode": self.short_code,
            "createdAt": format_timestamp(self.created_at),
            "clickCount": self.click_count,
        }
        if self.last_accessed is not None:
            data["lastAccessed"] = format_timestamp(self.last_accessed)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShortenedURL":
        """Create from the persisted dictionary shape.

        Raises:
            KeyError: If a required field is missing
            ValueError: If a field has the wrong type or format
        """
        click_count = data.get("clickCount", 0)
        if not isinstance(click_count, int) or isinstance(click_count, bool):
            raise ValueError(f"Invalid clickCount: {click_count!r}")

        for key in ("id", "originalUrl", "shortCode"):
            if not isinstance(data[key], str):
                raise ValueError(f"Invalid {key}: {data[key]!r}")

        last_accessed = data.get("lastAccessed")
        return cls(
            id=data["id"],
            original_url=data["originalUrl"],
            short_code=data["shortCode"],
            created_at=parse_timestamp(data["createdAt"]),
            click_count=click_count,
            last_accessed=parse_timestamp(last_accessed) if last_accessed else None,
        )


@dataclass
class RegistrySnapshot:
    """Complete persisted state: records keyed by short code plus the id counter."""

    urls: Dict[str, ShortenedURL] = field(default_factory=dict)
    counter: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "urls": {code: record.to_dict() for code, record in self.urls.items()},
            "counter": self.counter,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "RegistrySnapshot":
        """Create from a parsed storage document.

        Raises:
            KeyError: If ``urls`` or a record field is missing
            ValueError: If the document structure is malformed
        """
        if not isinstance(data, dict):
            raise ValueError("Storage document must be an object")

        raw_urls = data["urls"]
        if not isinstance(raw_urls, dict):
            raise ValueError("'urls' must be an object")

        counter = data.get("counter", 0)
        if not isinstance(counter, int) or isinstance(counter, bool) or counter < 0:
            raise ValueError(f"Invalid counter: {counter!r}")

        urls: Dict[str, ShortenedURL] = {}
        for code, raw in raw_urls.items():
            if not isinstance(raw, dict):
                raise ValueError(f"Record for '{code}' must be an object")
            urls[code] = ShortenedURL.from_dict(raw)

        return cls(urls=urls, counter=counter)


@dataclass
class URLStats:
    """Statistics for a single short code."""

    original_url: str
    short_code: str
    click_count: int
    created_at: datetime
    last_accessed: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "originalUrl": self.original_url,
            "shortCode": self.short_code,
            "clickCount": self.click_count,
            "createdAt": format_timestamp(self.created_at),
        }
        if self.last_accessed is not None:
            data["lastAccessed"] = format_timestamp(self.last_accessed)
        return data


@dataclass
class TopURL:
    """Entry in the most-clicked ranking."""

    short_code: str
    original_url: str
    click_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shortCode": self.short_code,
            "originalUrl": self.original_url,
            "clickCount": self.click_count,
        }


@dataclass
class RegistryStats:
    """Aggregate statistics across the whole registry."""

    total_urls: int
    total_clicks: int
    top_urls: List[TopURL] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalUrls": self.total_urls,
            "totalClicks": self.total_clicks,
            "topUrls": [url.to_dict() for url in self.top_urls],
        }
