"""Core provider abstractions."""
from token_feed.providers.core.base_provider import BaseTokenProvider
from token_feed.providers.core.utils import SOL_MINT, join_mints

__all__ = ["SOL_MINT", "BaseTokenProvider", "join_mints"]
