"""API routers.

Includes routes for:
- /create-user, /get-user - User directory
- /create-post, /posts, /users/{user_name}/posts - Post feed
- /token-history, /token-details, /token-data, /swap - Token data (Jupiter, Vybe)
"""
from token_feed.routers.posts import router as posts_router
from token_feed.routers.tokens import router as tokens_router
from token_feed.routers.users import router as users_router

__all__ = [
    "posts_router",
    "tokens_router",
    "users_router",
]
