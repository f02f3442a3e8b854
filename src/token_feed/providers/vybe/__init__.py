"""Vybe Network provider."""
from token_feed.providers.vybe.provider import VybeOhlcvParams, VybeProvider

__all__ = ["VybeOhlcvParams", "VybeProvider"]
