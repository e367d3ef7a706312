"""Application configuration."""

import os
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from profile_cache.domain.records import DEFAULT_CACHE_KEY, DEFAULT_TTL_MS
from profile_cache.services.user_info import DEFAULT_PROFILE_PROMPT

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    profile_api_url: str
    profile_api_token: str | None = None
    profile_api_timeout_seconds: float = 10
    profile_prompt: str = DEFAULT_PROFILE_PROMPT
    profile_cache_key: str = DEFAULT_CACHE_KEY
    profile_cache_ttl_ms: int = Field(default=DEFAULT_TTL_MS, gt=0)
    storage_backend: Literal["file", "memory"] = "file"
    storage_dir: str = ".profile_cache"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
