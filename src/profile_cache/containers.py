"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from profile_cache.adapters.file_storage import FileStorage
from profile_cache.adapters.memory_storage import InMemoryStorage
from profile_cache.adapters.profile_client import HttpxProfileSource
from profile_cache.app_logging import configure_logging
from profile_cache.config import Settings
from profile_cache.services.cache import KeyValueStorage, SingleEntryExpiringCache
from profile_cache.services.user_info import ProfileSource, UserInfoService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    storage: KeyValueStorage
    profile_source: ProfileSource[dict[str, object]]
    user_info_service: UserInfoService[dict[str, object]]
    close_resources: Callable[[], Awaitable[None]]


def build_storage(settings: Settings) -> KeyValueStorage:
    """Create the storage backend selected in settings."""
    if settings.storage_backend == "memory":
        return InMemoryStorage()
    return FileStorage.create(settings.storage_dir)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    configure_logging()
    resolved_settings = settings or Settings()
    storage = build_storage(resolved_settings)
    profile_source = HttpxProfileSource.create(
        api_url=resolved_settings.profile_api_url,
        api_token=resolved_settings.profile_api_token,
        timeout_seconds=resolved_settings.profile_api_timeout_seconds,
    )
    cache: SingleEntryExpiringCache[dict[str, object]] = SingleEntryExpiringCache(
        storage=storage,
        key=resolved_settings.profile_cache_key,
        ttl_ms=resolved_settings.profile_cache_ttl_ms,
    )
    user_info_service = UserInfoService(
        source=profile_source,
        cache=cache,
        prompt=resolved_settings.profile_prompt,
    )

    async def close_resources() -> None:
        await profile_source.close()

    return AppContainer(
        settings=resolved_settings,
        storage=storage,
        profile_source=profile_source,
        user_info_service=user_info_service,
        close_resources=close_resources,
    )
