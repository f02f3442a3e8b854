"""Pydantic schemas for the HTTP API. JSON fields are camelCase."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for request/response bodies: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# Users


class UserCreate(ApiModel):
    name: str
    avatar: str | None = None


class UserLookup(ApiModel):
    name: str


class UserOut(ApiModel):
    """Full user record, returned only to the creator."""

    id: int
    name: str
    avatar: str | None = None
    created_at: datetime


class UserSummary(ApiModel):
    """Reduced projection embedded in posts. Never carries created_at."""

    id: int
    name: str
    avatar: str | None = None


# Posts


class PostCreate(ApiModel):
    """Body of /create-post. Amounts and holding are coerced by the feed service."""

    user_name: str
    mint: str
    bought_amt: Any
    holding: Any = None
    sold_amt: Any = None


class PostOut(ApiModel):
    id: int
    user_name: str
    mint: str
    bought_amt: float
    holding: bool
    sold_amt: float
    created_at: datetime
    user: UserSummary


# Token data


class TokenHistoryRequest(ApiModel):
    mint_address: str
    resolution: str = "1d"


class TokenDetailsRequest(ApiModel):
    """``token_mints`` is a comma-separated list or a JSON list of mints."""

    token_mints: str | list[str]


class TokenDataRequest(ApiModel):
    mint: str


class SwapRequest(ApiModel):
    input_mint: str
    output_mint: str
    amount: int | str
    user_public_key: str


class SwapResponse(BaseModel):
    error: bool
    message: str
    transaction: str | None = None


__all__ = [
    "PostCreate",
    "PostOut",
    "SwapRequest",
    "SwapResponse",
    "TokenDataRequest",
    "TokenDetailsRequest",
    "TokenHistoryRequest",
    "UserCreate",
    "UserLookup",
    "UserOut",
    "UserSummary",
]
