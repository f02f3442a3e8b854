"""Token data service: pass-through calls to Jupiter and Vybe with unified error mapping."""
import asyncio
import logging
from typing import Any

import httpx

from token_feed.errors import FeedErrorMapper
from token_feed.providers import JupiterProvider, VybeProvider
from token_feed.schemas import SwapResponse

logger = logging.getLogger(__name__)

# Exceptions from providers we map to HTTP; all others propagate (e.g. bugs, BaseException).
_PROVIDER_EXCEPTIONS: tuple[type[Exception], ...] = (
    ValueError,
    KeyError,
    TimeoutError,
    OSError,
    asyncio.TimeoutError,
    httpx.HTTPError,
)


class TokenService:
    """Forwards token requests upstream; responses are not reshaped."""

    def __init__(
        self,
        jupiter: JupiterProvider,
        vybe: VybeProvider,
        jupiter_errors: FeedErrorMapper | None = None,
        vybe_errors: FeedErrorMapper | None = None,
    ) -> None:
        self._jupiter = jupiter
        self._vybe = vybe
        self._jupiter_errors = jupiter_errors or FeedErrorMapper("Token", "Jupiter")
        self._vybe_errors = vybe_errors or FeedErrorMapper("Token history", "Vybe")

    async def get_token_history(self, mint_address: str, resolution: str) -> Any:
        """OHLCV candles for a mint. Raises FeedError on upstream failure."""
        try:
            return await self._vybe.get_token_ohlcv(mint_address, resolution)
        except _PROVIDER_EXCEPTIONS as e:
            self._vybe_errors.raise_http(e, "Error fetching token history", symbol=mint_address)

    async def get_token_details(self, token_mints: str | list[str]) -> Any:
        """SOL-denominated prices for one or more mints."""
        try:
            return await self._jupiter.get_prices(token_mints)
        except _PROVIDER_EXCEPTIONS as e:
            self._jupiter_errors.raise_http(e, "Error fetching token prices")

    async def get_token_data(self, mint: str) -> Any:
        """Token metadata for a mint."""
        try:
            return await self._jupiter.get_token(mint)
        except _PROVIDER_EXCEPTIONS as e:
            self._jupiter_errors.raise_http(e, "Error fetching token data", symbol=mint)

    async def build_swap(
        self,
        input_mint: str,
        output_mint: str,
        amount: int | str,
        user_public_key: str,
    ) -> SwapResponse:
        """Quote and build an unsigned swap transaction.

        Failures never raise: they are logged and reported in the response body.
        """
        logger.info(
            "Building swap %s -> %s (amount=%s) for %s",
            input_mint, output_mint, amount, user_public_key,
        )
        try:
            quote = await self._jupiter.get_quote(input_mint, output_mint, amount)
            transaction = await self._jupiter.build_swap_transaction(quote, user_public_key)
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("Error building swap transaction: %s", exc)
            return SwapResponse(error=True, message="Error building transaction")
        return SwapResponse(error=False, message="Success", transaction=transaction)
