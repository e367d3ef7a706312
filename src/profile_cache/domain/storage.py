"""Result type returned by key-value storage backends."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class StorageResult(Generic[T]):
    """Outcome of a storage call: a value, or the error that prevented it."""

    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "StorageResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> "StorageResult[T]":
        return cls(error=error)
