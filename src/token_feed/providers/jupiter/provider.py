"""Jupiter lite API provider: prices, token metadata and swap transactions."""
import os
from typing import Any

import httpx

from token_feed.providers.core import BaseTokenProvider, join_mints
from token_feed.providers.jupiter.models import (JupiterPriceParams,
                                                 JupiterQuoteParams,
                                                 JupiterSwapPayload)


class JupiterProvider(BaseTokenProvider):
    """Token data and swap building via the Jupiter lite API.

    Responses are returned as decoded JSON without reshaping.
    """

    BASE_URL = "https://lite-api.jup.ag"

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        slippage_bps: int = 50,
    ) -> None:
        """Initialize the Jupiter provider.

        Args:
            base_url: API root. Defaults to JUP_ENDPOINT env var, then the public lite API.
            client: Optional preconfigured HTTP client.
            slippage_bps: Slippage tolerance used for swap quotes.
        """
        super().__init__(
            base_url=base_url or os.getenv("JUP_ENDPOINT") or self.BASE_URL,
            client=client,
        )
        self._slippage_bps = slippage_bps

    async def get_prices(self, mints: str | list[str]) -> Any:
        """Prices for one or more mints, quoted in SOL."""
        params = JupiterPriceParams(ids=join_mints(mints)).model_dump(by_alias=True)
        return await self._get_json("/price/v2", params=params)

    async def get_token(self, mint: str) -> Any:
        """Token metadata (name, symbol, decimals, ...) for a mint."""
        return await self._get_json(f"/tokens/v1/token/{mint}")

    async def get_quote(self, input_mint: str, output_mint: str, amount: int | str) -> dict[str, Any]:
        """Best route quote for swapping ``amount`` base units of input_mint."""
        params = JupiterQuoteParams(
            input_mint=input_mint,
            output_mint=output_mint,
            amount=str(amount),
            slippage_bps=self._slippage_bps,
        ).model_dump(by_alias=True)
        return await self._get_json("/swap/v1/quote", params=params)

    async def build_swap_transaction(
        self, quote: dict[str, Any], user_public_key: str
    ) -> str:
        """Serialized, unsigned swap transaction (base64) for ``quote``.

        Raises:
            KeyError: the response carries no ``swapTransaction``.
        """
        payload = JupiterSwapPayload(
            quote_response=quote,
            user_public_key=user_public_key,
        ).model_dump(by_alias=True)
        data = await self._post_json("/swap/v1/swap", payload)
        return data["swapTransaction"]
