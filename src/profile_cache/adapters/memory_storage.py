"""Process-local key-value storage."""

from dataclasses import dataclass, field

from profile_cache.domain.storage import StorageResult
from profile_cache.services.cache import KeyValueStorage


@dataclass
class InMemoryStorage(KeyValueStorage):
    """Dict-backed storage that lives as long as the process."""

    entries: dict[str, str] = field(default_factory=dict)

    def read(self, key: str) -> StorageResult[str]:
        return StorageResult.success(self.entries.get(key))

    def write(self, key: str, value: str) -> StorageResult[None]:
        self.entries[key] = value
        return StorageResult.success()

    def remove(self, key: str) -> StorageResult[None]:
        self.entries.pop(key, None)
        return StorageResult.success()
