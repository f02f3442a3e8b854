"""Upstream token data providers.

- JupiterProvider: prices, token metadata, swap quotes and transactions (Jupiter lite API)
- VybeProvider: OHLCV price history (Vybe Network)

Both share BaseTokenProvider: one httpx.AsyncClient per provider, closed on shutdown.

Example:
    async with JupiterProvider() as jupiter:
        prices = await jupiter.get_prices(["JUPyiwrYJFskUPiHa7hkeR8VUtAeFoSYbKedZNsDvCN"])
"""
from token_feed.providers.core import BaseTokenProvider
from token_feed.providers.jupiter import JupiterProvider
from token_feed.providers.vybe import VybeProvider

__all__ = ["JupiterProvider", "BaseTokenProvider", "VybeProvider"]
