"""
Adapter: User persistence.

Implements the UserRepository port on top of an async SQLAlchemy
session factory.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domain.auth.entities import User
from app.domain.auth.errors import DatabaseError
from app.domain.auth.ports import UserRepository
from app.infrastructure.auth.database import UserModel

logger = logging.getLogger(__name__)


def _to_entity(row: UserModel) -> User:
    return User(
        username=row.username,
        password=row.password,
        email=row.email,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


# Driver spellings of the email constraint: SQLite column, Postgres key name and detail.
_EMAIL_CONFLICT_MARKERS = ("users.email", "users_email_key", "(email)")


def _conflict_message(user: User, exc: IntegrityError) -> str:
    """Name the unique column the driver reported, username by default."""
    reason = str(exc.orig)
    if any(marker in reason for marker in _EMAIL_CONFLICT_MARKERS):
        return f"user with email {user.email} is already registered"
    return f"user with username {user.username} is already registered"


class SqlAlchemyUserRepository(UserRepository):
    """SQL implementation of the user repository.

    Each call opens its own session, so one instance can be shared
    by concurrent requests.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def find_one_by_username(self, username: str) -> Optional[User]:
        """Return the user registered under username, or None.

        Args:
            username: Exact username to look up.

        Returns:
            User entity or None.
        """
        async with self._session_factory() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.username == username)
            )
            row = result.scalar_one_or_none()
        return _to_entity(row) if row is not None else None

    async def insert(self, user: User) -> User:
        """Persist a new user.

        Args:
            user: User entity whose password is already hashed.

        Returns:
            The stored user, timestamps included.

        Raises:
            DatabaseError: If the username or email is already taken.
        """
        row = UserModel(username=user.username, email=user.email, password=user.password)
        async with self._session_factory() as session:
            session.add(row)
            try:
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                logger.warning("Rejected duplicate registration: %s", user.username)
                raise DatabaseError(_conflict_message(user, exc)) from exc
        return _to_entity(row)
