"""Domain models for the cached user profile."""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Generic, TypeVar

from pydantic import BaseModel

ProfileT = TypeVar("ProfileT")

DEFAULT_CACHE_KEY = "user_info_cache"
DEFAULT_TTL_MS = 86_400_000

Clock = Callable[[], int]


def now_ms() -> int:
    """Return the current time in milliseconds since the Unix epoch."""
    return int(datetime.now(tz=UTC).timestamp() * 1000)


class CacheRecord(BaseModel, Generic[ProfileT]):
    """A profile value stamped with the instant it was written."""

    data: ProfileT
    timestamp: int

    def age_ms(self, now: int) -> int:
        """Return how old the record is at ``now``."""
        return now - self.timestamp

    def is_fresh(self, now: int, ttl_ms: int) -> bool:
        """Return True while the record is younger than the TTL."""
        return self.age_ms(now) < ttl_ms
