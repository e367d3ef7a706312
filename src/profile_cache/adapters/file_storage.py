"""Device-local key-value storage with one file per key."""

from dataclasses import dataclass
from pathlib import Path

from profile_cache.domain.storage import StorageResult
from profile_cache.services.cache import KeyValueStorage


@dataclass
class FileStorage(KeyValueStorage):
    """Stores each key as a UTF-8 text file inside a directory."""

    directory: Path

    @classmethod
    def create(cls, directory: str | Path) -> "FileStorage":
        """Create file storage rooted at a directory, made on first write."""
        return cls(directory=Path(directory))

    def read(self, key: str) -> StorageResult[str]:
        """Return the file contents for a key, or None if it was never written."""
        try:
            text = self._path_for(key).read_text(encoding="utf-8")
        except FileNotFoundError:
            return StorageResult.success(None)
        except (OSError, ValueError) as exc:
            return StorageResult.failure(exc)
        return StorageResult.success(text)

    def write(self, key: str, value: str) -> StorageResult[None]:
        """Write through a temp file so readers never see a partial record."""
        try:
            path = self._path_for(key)
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path = path.with_name(f".{path.name}.tmp")
            tmp_path.write_text(value, encoding="utf-8")
            tmp_path.replace(path)
        except (OSError, ValueError) as exc:
            return StorageResult.failure(exc)
        return StorageResult.success()

    def remove(self, key: str) -> StorageResult[None]:
        """Delete the file for a key."""
        try:
            self._path_for(key).unlink(missing_ok=True)
        except (OSError, ValueError) as exc:
            return StorageResult.failure(exc)
        return StorageResult.success()

    def _path_for(self, key: str) -> Path:
        if not key or key in {".", ".."} or Path(key).name != key or "\\" in key:
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / key
