"""Single-entry cache with time-based expiry on top of key-value storage."""

import logging
from dataclasses import dataclass
from typing import Generic, Protocol

from pydantic import ValidationError

from profile_cache.domain.records import (
    DEFAULT_CACHE_KEY,
    DEFAULT_TTL_MS,
    CacheRecord,
    Clock,
    ProfileT,
    now_ms,
)
from profile_cache.domain.storage import StorageResult

_logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Synchronous string storage scoped to the local device or session."""

    def read(self, key: str) -> StorageResult[str]:
        """Return the stored text for a key; a missing key succeeds with None."""

    def write(self, key: str, value: str) -> StorageResult[None]:
        """Store text under a key, replacing any previous value."""

    def remove(self, key: str) -> StorageResult[None]:
        """Remove a key; removing a missing key succeeds."""


@dataclass
class SingleEntryExpiringCache(Generic[ProfileT]):
    """Holds at most one record under a fixed key and expires it after a TTL.

    Storage and parse failures never propagate: reads fail open to a miss and
    failed writes or removals are only logged.
    """

    storage: KeyValueStorage
    key: str = DEFAULT_CACHE_KEY
    ttl_ms: int = DEFAULT_TTL_MS
    clock: Clock = now_ms

    def read_cached(self) -> ProfileT | None:
        """Return the cached value if it is still fresh, evicting it otherwise."""
        result = self.storage.read(self.key)
        if not result.ok:
            _logger.error("Failed to read cache entry %s: %s", self.key, result.error)
            return None
        if not result.value:
            return None

        try:
            record = CacheRecord.model_validate_json(result.value)
        except ValidationError as exc:
            _logger.error("Failed to parse cache entry %s: %s", self.key, exc)
            return None

        if record.is_fresh(self.clock(), self.ttl_ms):
            return record.data

        _logger.info("Cache entry %s expired and will be fetched again", self.key)
        self.evict()
        return None

    def write(self, value: ProfileT) -> None:
        """Store a value stamped with the current time."""
        try:
            payload = CacheRecord(data=value, timestamp=self.clock()).model_dump_json()
        except (TypeError, ValueError) as exc:
            _logger.error("Failed to serialize cache entry %s: %s", self.key, exc)
            return

        result = self.storage.write(self.key, payload)
        if not result.ok:
            _logger.error("Failed to write cache entry %s: %s", self.key, result.error)

    def evict(self) -> None:
        """Remove the cached record."""
        result = self.storage.remove(self.key)
        if not result.ok:
            # The record stays on disk until the next successful write.
            _logger.error("Failed to clear cache entry %s: %s", self.key, result.error)
            return
        _logger.info("Cleared cache entry %s", self.key)
