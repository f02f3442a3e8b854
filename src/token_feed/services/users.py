"""User directory: create users and check whether a name is taken."""
import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from token_feed.db import FeedStore, User
from token_feed.exceptions import ConstraintViolation
from token_feed.schemas import UserOut

logger = logging.getLogger(__name__)


class UserDirectory:
    """Thin service over the user table."""

    def __init__(self, store: FeedStore) -> None:
        self._store = store

    def create_user(self, name: str, avatar: str | None = None) -> UserOut:
        """Insert a user. Raises ConstraintViolation if ``name`` is taken.

        Uniqueness is left to the store's constraint; there is no pre-check.
        """
        try:
            with self._store.session() as session:
                user = User(name=name, avatar=avatar)
                session.add(user)
                session.flush()
                return UserOut(
                    id=user.id,
                    name=user.name,
                    avatar=user.avatar,
                    created_at=user.created_at,
                )
        except IntegrityError as exc:
            logger.info("Rejected duplicate user name %r", name)
            raise ConstraintViolation() from exc

    def get_user_by_name(self, name: str) -> bool:
        """Return whether a user called ``name`` exists. Nothing else is disclosed."""
        with self._store.session() as session:
            user_id = session.exec(select(User.id).where(User.name == name)).first()
            return user_id is not None
