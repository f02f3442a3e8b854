"""Database package: models and session management."""
from token_feed.db.models import Post, User
from token_feed.db.sessions import FeedStore, create_store_engine

__all__ = ["FeedStore", "Post", "User", "create_store_engine"]
