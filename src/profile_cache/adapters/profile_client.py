"""Host profile API client."""

from dataclasses import dataclass

import httpx

from profile_cache.services.user_info import ProfileSource


class ProfileSourceError(RuntimeError):
    """Raised when the host answers with something other than a profile."""


@dataclass
class HttpxProfileSource(ProfileSource[dict[str, object]]):
    """HTTPX-backed client for the host's user profile endpoint."""

    api_url: str
    http_client: httpx.AsyncClient
    api_token: str | None = None
    timeout_seconds: float = 10

    @classmethod
    def create(
        cls, api_url: str, api_token: str | None = None, timeout_seconds: float = 10
    ) -> "HttpxProfileSource":
        """Create a profile client with a managed httpx session."""
        return cls(
            api_url=api_url,
            http_client=httpx.AsyncClient(),
            api_token=api_token,
            timeout_seconds=timeout_seconds,
        )

    async def fetch_profile(self, desc: str) -> dict[str, object]:
        """Request the user profile and return its ``userInfo`` object."""
        headers = {}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        response = await self.http_client.post(
            self.api_url,
            json={"desc": desc},
            headers=headers,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise ProfileSourceError("Profile response is not a JSON object")
        user_info = payload.get("userInfo")
        if not isinstance(user_info, dict):
            raise ProfileSourceError("Profile response has no userInfo object")
        return user_info

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
