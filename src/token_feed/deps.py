"""FastAPI dependency injection: app.state holds the container; Depends() resolves services.

create_app() (main.py) attaches the container; these getters are used by Depends().
"""
from typing import Annotated

from fastapi import Depends, Request

from token_feed.container import Container
from token_feed.services import PostFeed, TokenService, UserDirectory


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_user_directory(request: Request) -> UserDirectory:
    """Resolve the UserDirectory singleton."""
    return get_container(request).user_directory()


def get_post_feed(request: Request) -> PostFeed:
    """Resolve the PostFeed singleton."""
    return get_container(request).post_feed()


def get_token_service(request: Request) -> TokenService:
    """Resolve the TokenService singleton."""
    return get_container(request).token_service()


# Type aliases for route injection
UserDirectoryDep = Annotated[UserDirectory, Depends(get_user_directory)]
PostFeedDep = Annotated[PostFeed, Depends(get_post_feed)]
TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
