"""Vybe Network provider for token price history."""
import os
from typing import Any

import httpx
from pydantic import BaseModel

from token_feed.providers.core import BaseTokenProvider


class VybeOhlcvParams(BaseModel):
    """Params for /price/{mint}/token-ohlcv."""

    resolution: str = "1d"


class VybeProvider(BaseTokenProvider):
    """OHLCV candles via the Vybe Network API. Requires an API key."""

    BASE_URL = "https://api.vybenetwork.xyz"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the Vybe provider.

        Args:
            api_key: Vybe API key. Defaults to VYBE_API env var.
            base_url: API root. Defaults to VYBE_ENDPOINT env var, then the public API.
            client: Optional preconfigured HTTP client.
        """
        self._api_key = api_key or os.getenv("VYBE_API", "")
        super().__init__(
            base_url=base_url or os.getenv("VYBE_ENDPOINT") or self.BASE_URL,
            headers={"X-API-KEY": self._api_key},
            client=client,
        )

    async def get_token_ohlcv(self, mint: str, resolution: str = "1d") -> Any:
        """Price candles for ``mint`` at the given resolution (e.g. "1h", "1d")."""
        params = VybeOhlcvParams(resolution=resolution).model_dump()
        return await self._get_json(f"/price/{mint}/token-ohlcv", params=params)
