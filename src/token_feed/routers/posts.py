"""Post feed routes."""
from fastapi import APIRouter, status

from token_feed.deps import PostFeedDep
from token_feed.errors import FeedErrorMapper
from token_feed.schemas import PostCreate, PostOut

router = APIRouter(tags=["posts"])
errors = FeedErrorMapper(resource_name="Post", api_name="Store")


@router.post("/create-post", response_model=PostOut, status_code=status.HTTP_201_CREATED)
def create_post(payload: PostCreate, feed: PostFeedDep) -> PostOut:
    """Create a post for an existing user.

    Returns 404 when the user does not exist and 500 on any unexpected failure.
    """
    try:
        return feed.create_post(
            user_name=payload.user_name,
            mint=payload.mint,
            bought_amt=payload.bought_amt,
            holding=payload.holding,
            sold_amt=payload.sold_amt,
        )
    except Exception as exc:  # pylint: disable=broad-except
        errors.raise_http(exc, "Error creating post")


@router.get("/posts", response_model=list[PostOut])
def list_posts(feed: PostFeedDep) -> list[PostOut]:
    """All posts, newest first."""
    try:
        return feed.list_all_posts()
    except Exception as exc:  # pylint: disable=broad-except
        errors.raise_http(exc, "Error fetching posts")


@router.get("/users/{user_name}/posts", response_model=list[PostOut])
def list_user_posts(user_name: str, feed: PostFeedDep) -> list[PostOut]:
    """Posts by one user, newest first. Unknown users get an empty list."""
    try:
        return feed.list_posts_by_user(user_name)
    except Exception as exc:  # pylint: disable=broad-except
        errors.raise_http(exc, "Error fetching user posts")
