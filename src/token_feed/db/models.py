"""Database models for the token feed service.

Users and their posts are persisted. Token prices and swap transactions are
fetched from upstream APIs on demand; they are not stored.
"""
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import Field, Relationship, SQLModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    """A feed author. ``name`` is the join key used by posts."""

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True)
    avatar: str | None = None
    created_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True)
    )

    posts: list["Post"] = Relationship(back_populates="user")


class Post(SQLModel, table=True):
    """A token position shared by a user."""

    id: int | None = Field(default=None, primary_key=True)
    user_name: str = Field(foreign_key="user.name", index=True)
    mint: str
    bought_amt: float
    holding: bool = False
    sold_amt: float = 0.0
    created_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), index=True
    )

    user: User | None = Relationship(back_populates="posts")
