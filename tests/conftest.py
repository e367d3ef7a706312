"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest

from profile_cache.adapters.memory_storage import InMemoryStorage
from profile_cache.config import Settings
from profile_cache.domain.storage import StorageResult
from profile_cache.services.cache import KeyValueStorage, SingleEntryExpiringCache
from profile_cache.services.user_info import ProfileSource, UserInfoService


@dataclass
class FakeClock:
    """Manually advanced millisecond clock."""

    now: int = 0

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@dataclass
class FakeProfileSource(ProfileSource[dict[str, object]]):
    """Profile source returning queued profiles and recording prompts."""

    profiles: list[dict[str, object] | None] = field(
        default_factory=lambda: [{"nickName": "A", "avatarUrl": "https://img/a.png"}]
    )
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def fetch_profile(self, desc: str) -> dict[str, object]:
        self.prompts.append(desc)
        if self.error is not None:
            raise self.error
        if len(self.profiles) > 1:
            return self.profiles.pop(0)
        return self.profiles[0]


@dataclass
class FailingStorage(KeyValueStorage):
    """Storage where selected operations fail."""

    entries: dict[str, str] = field(default_factory=dict)
    fail_read: bool = False
    fail_write: bool = False
    fail_remove: bool = False

    def read(self, key: str) -> StorageResult[str]:
        if self.fail_read:
            return StorageResult.failure(OSError("read failed"))
        return StorageResult.success(self.entries.get(key))

    def write(self, key: str, value: str) -> StorageResult[None]:
        if self.fail_write:
            return StorageResult.failure(OSError("disk full"))
        self.entries[key] = value
        return StorageResult.success()

    def remove(self, key: str) -> StorageResult[None]:
        if self.fail_remove:
            return StorageResult.failure(OSError("remove failed"))
        self.entries.pop(key, None)
        return StorageResult.success()


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("profile_cache")
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        profile_api_url="https://host.test/user/profile",
        storage_backend="memory",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(now=1_700_000_000_000)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def profile_source() -> FakeProfileSource:
    return FakeProfileSource()


@pytest.fixture
def cache(
    storage: InMemoryStorage, clock: FakeClock
) -> SingleEntryExpiringCache[dict[str, object]]:
    return SingleEntryExpiringCache(storage=storage, clock=clock)


@pytest.fixture
def user_info_service(
    profile_source: FakeProfileSource,
    cache: SingleEntryExpiringCache[dict[str, object]],
) -> UserInfoService[dict[str, object]]:
    return UserInfoService(source=profile_source, cache=cache)
