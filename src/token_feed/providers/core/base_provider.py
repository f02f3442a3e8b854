"""Base class for upstream token data providers."""
from typing import Any

import httpx


class BaseTokenProvider:
    """Base for providers wrapping one third-party HTTP API.

    Each provider owns a single ``httpx.AsyncClient``. Pass ``client`` to reuse
    an existing one (tests pass a client over ``httpx.MockTransport``); the
    provider's default headers are added to it, its base URL is kept.
    """

    BASE_URL: str = ""

    def __init__(
        self,
        base_url: str | None = None,
        headers: dict[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        all_headers = {"Accept": "application/json", **(headers or {})}
        if client is not None:
            client.headers.update(all_headers)
            self._client = client
        else:
            self._client = httpx.AsyncClient(
                base_url=base_url or self.BASE_URL,
                headers=all_headers,
                timeout=timeout,
            )

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        response = await self._client.get(path, params=params)
        response.raise_for_status()
        return response.json()

    async def _post_json(self, path: str, payload: dict[str, Any]) -> Any:
        response = await self._client.post(path, json=payload)
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "BaseTokenProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        """Async context manager exit - calls close()."""
        await self.close()
