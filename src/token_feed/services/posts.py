"""Post feed: create posts for existing users and list them newest first."""
import math
from typing import Any

from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from token_feed.db import FeedStore, Post, User
from token_feed.exceptions import InvalidAmount, UserNotFound
from token_feed.schemas import PostOut, UserSummary


def coerce_amount(value: Any) -> float:
    """Parse an amount sent as a number or numeric string. Raises InvalidAmount."""
    if isinstance(value, bool) or value is None:
        raise InvalidAmount()
    try:
        amount = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidAmount() from exc
    if math.isnan(amount) or math.isinf(amount) or amount < 0:
        raise InvalidAmount()
    return amount


def coerce_sold_amount(value: Any) -> float:
    """Like coerce_amount, but absent or falsy values mean nothing was sold."""
    if not value:
        return 0.0
    return coerce_amount(value)


def coerce_holding(value: Any) -> bool:
    """Only ``True`` and the string ``"true"`` count as holding."""
    return value is True or value == "true"


def to_post_out(post: Post, user: User) -> PostOut:
    return PostOut(
        id=post.id,
        user_name=post.user_name,
        mint=post.mint,
        bought_amt=post.bought_amt,
        holding=post.holding,
        sold_amt=post.sold_amt,
        created_at=post.created_at,
        user=UserSummary(id=user.id, name=user.name, avatar=user.avatar),
    )


class PostFeed:
    """Service over the post table. Every post is returned with its author's reduced projection."""

    def __init__(self, store: FeedStore) -> None:
        self._store = store

    def create_post(
        self,
        user_name: str,
        mint: str,
        bought_amt: Any,
        holding: Any = False,
        sold_amt: Any = None,
    ) -> PostOut:
        """Create a post for an existing user.

        The user lookup and the insert share one transaction; the user row is
        share-locked until commit where the database supports it.

        Raises:
            UserNotFound: no user is called ``user_name``. Nothing is written.
            InvalidAmount: an amount is not a non-negative number.
        """
        with self._store.session() as session:
            user = session.exec(
                select(User).where(User.name == user_name).with_for_update(read=True)
            ).first()
            if user is None:
                raise UserNotFound()

            post = Post(
                user_name=user.name,
                mint=mint,
                bought_amt=coerce_amount(bought_amt),
                holding=coerce_holding(holding),
                sold_amt=coerce_sold_amount(sold_amt),
            )
            session.add(post)
            session.flush()
            return to_post_out(post, user)

    def list_all_posts(self) -> list[PostOut]:
        """All posts, most recent first. No pagination."""
        with self._store.session() as session:
            return self._list(session)

    def list_posts_by_user(self, user_name: str) -> list[PostOut]:
        """Posts by ``user_name``, most recent first. Unknown users simply have none."""
        with self._store.session() as session:
            return self._list(session, user_name=user_name)

    @staticmethod
    def _list(session: Session, user_name: str | None = None) -> list[PostOut]:
        query = select(Post).options(selectinload(Post.user))
        if user_name is not None:
            query = query.where(Post.user_name == user_name)
        # id breaks ties between posts created within the same clock tick
        query = query.order_by(Post.created_at.desc(), Post.id.desc())
        return [to_post_out(post, post.user) for post in session.exec(query).all()]
