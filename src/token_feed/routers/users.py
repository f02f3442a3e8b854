"""User directory routes."""
from fastapi import APIRouter

from token_feed.deps import UserDirectoryDep
from token_feed.errors import FeedErrorMapper
from token_feed.schemas import UserCreate, UserLookup, UserOut

router = APIRouter(tags=["users"])
errors = FeedErrorMapper(resource_name="User", api_name="Store")


@router.post("/create-user", response_model=UserOut)
def create_user(payload: UserCreate, directory: UserDirectoryDep) -> UserOut:
    """Create a user. A taken name yields 409."""
    try:
        return directory.create_user(payload.name, payload.avatar)
    except Exception as exc:  # pylint: disable=broad-except
        errors.raise_http(exc, "Error creating user")


@router.post("/get-user", response_model=bool)
def get_user(payload: UserLookup, directory: UserDirectoryDep) -> bool:
    """Return whether the name is taken; the record itself is never returned."""
    try:
        return directory.get_user_by_name(payload.name)
    except Exception as exc:  # pylint: disable=broad-except
        errors.raise_http(exc, "Error looking up user")
