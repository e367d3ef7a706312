"""User profile lookups backed by the single-entry cache."""

import logging
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from profile_cache.domain.records import ProfileT
from profile_cache.services.cache import SingleEntryExpiringCache

DEFAULT_PROFILE_PROMPT = "Used to provide personalized service"

_ProfileT_co = TypeVar("_ProfileT_co", covariant=True)

_logger = logging.getLogger(__name__)


class ProfileSource(Protocol[_ProfileT_co]):
    """Host API that hands out the current user's profile."""

    async def fetch_profile(self, desc: str) -> _ProfileT_co:
        """Return the profile, explaining its use with ``desc``; raise on failure."""


@dataclass
class UserInfoService(Generic[ProfileT]):
    """Returns the user profile from cache, falling back to the host API."""

    source: ProfileSource[ProfileT]
    cache: SingleEntryExpiringCache[ProfileT]
    prompt: str = DEFAULT_PROFILE_PROMPT

    async def get_user_info(self, force_refresh: bool = False) -> ProfileT | None:
        """Return the user profile, or None when it cannot be obtained.

        A fresh cached profile is returned without calling the host unless
        ``force_refresh`` is set. A fetched profile replaces the cached one.
        Failures are reported and never raised.
        """
        if not force_refresh:
            cached = self.cache.read_cached()
            if cached is not None:
                _logger.info("Loaded user info from cache")
                return cached

        try:
            profile = await self.source.fetch_profile(self.prompt)
        except Exception as exc:
            _logger.error("Failed to fetch user info: %s", exc)
            self.report_error("get_user_info", exc)
            return None

        if profile is None:
            _logger.warning("Profile source returned no user info")
            return None

        self.cache.write(profile)
        _logger.info("Fetched and cached user info")
        return profile

    def clear_cached_user_info(self) -> None:
        """Drop the cached profile so the next lookup hits the host."""
        self.cache.evict()

    def report_error(self, action: str, error: BaseException) -> None:
        """Log a failed action with its message and stack trace."""
        _logger.warning(
            "Error report: action=%s message=%s",
            action,
            error,
            exc_info=(type(error), error, error.__traceback__),
        )
