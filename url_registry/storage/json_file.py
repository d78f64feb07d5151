"""JSON file implementation of registry storage."""

import json
import logging
import os
import tempfile
from typing import Optional

from .base import URLStorageBase
from .models import RegistrySnapshot


class JSONFileStorage(URLStorageBase):
    """Keeps the registry in a single JSON document on the local filesystem.

    The document is read fully on load and rewritten fully on every save.
    """

    def __init__(self, path: str, logger: Optional[logging.Logger] = None):
        """Initialize file storage.

        Args:
            path: Path of the JSON document
            logger: Optional logger instance
        """
        super().__init__(path)
        self.logger = logger or logging.getLogger(__name__)

    def load(self) -> RegistrySnapshot:
        """Read and parse the storage file.

        A missing file is the normal first-run case. An unreadable or corrupt
        file is logged and treated the same way, so startup never fails.
        """
        if not os.path.exists(self.location):
            self.logger.debug(f"Storage file {self.location} not found, starting empty")
            return RegistrySnapshot()

        try:
            with open(self.location, "r", encoding="utf-8") as f:
                data = json.load(f)
            snapshot = RegistrySnapshot.from_dict(data)
        except (OSError, ValueError, KeyError) as e:
            self.logger.error(f"Failed to load storage file {self.location}: {e}")
            return RegistrySnapshot()

        self.logger.debug(
            f"Loaded {len(snapshot.urls)} URLs from {self.location} (counter={snapshot.counter})"
        )
        return snapshot

    def save(self, snapshot: RegistrySnapshot) -> bool:
        """Replace the storage file with the full snapshot.

        The document is written to a temporary file beside the target and
        then moved over it, so a failed write leaves the previous file intact.
        """
        tmp_path = None
        try:
            payload = json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False)
            directory = os.path.dirname(os.path.abspath(self.location))
            with tempfile.NamedTemporaryFile(
                mode="w", suffix=".tmp", dir=directory, delete=False, encoding="utf-8"
            ) as tmp_file:
                tmp_path = tmp_file.name
                tmp_file.write(payload)
            os.replace(tmp_path, self.location)
            tmp_path = None
        except (OSError, ValueError, TypeError) as e:
            self.logger.error(f"Failed to save storage file {self.location}: {e}")
            return False
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)

        self.logger.debug(f"Saved {len(snapshot.urls)} URLs to {self.location}")
        return True
