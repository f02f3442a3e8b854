"""Jupiter lite API provider."""
from token_feed.providers.jupiter.provider import JupiterProvider

__all__ = ["JupiterProvider"]
