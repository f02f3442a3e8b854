"""Service layer: store access for users and posts, provider orchestration for token data."""
from token_feed.services.posts import PostFeed
from token_feed.services.tokens import TokenService
from token_feed.services.users import UserDirectory

__all__ = ["PostFeed", "TokenService", "UserDirectory"]
