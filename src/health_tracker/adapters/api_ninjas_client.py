"""API Ninjas nutrition endpoint client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class ApiNinjasClient(Protocol):
    """Interface for the API Ninjas exact-match nutrition lookup."""

    async def fetch_nutrition(self, query: str, api_key: str) -> object:
        """Return the raw JSON body for a free-text nutrition query."""


@dataclass
class HttpxApiNinjasClient(ApiNinjasClient):
    """HTTPX-backed API Ninjas client."""

    base_url: str
    user_agent: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15.0

    @classmethod
    def create(
        cls, base_url: str, user_agent: str, timeout_seconds: float = 15.0
    ) -> "HttpxApiNinjasClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url,
            user_agent=user_agent,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def fetch_nutrition(self, query: str, api_key: str) -> object:
        """Query the nutrition endpoint with the API key header."""
        response = await self.http_client.get(
            self.base_url,
            params={"query": query},
            headers={"X-Api-Key": api_key, "User-Agent": self.user_agent},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
