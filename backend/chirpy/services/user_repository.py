"""
Chirpy Backend — User Repository
=================================

What:  Thin persistence contract for User rows: create one, delete all.
Who:   Called by POST /api/users and POST /admin/reset.

Design:
    UserRepository is stateless. It receives the request's AsyncSession on
    every call, so tests can hand it any session (mocked or SQLite-backed).

    Each operation is a single statement committed immediately. There is
    no retry and no multi-statement transaction; on any SQLAlchemy error
    the session is rolled back and PersistenceError is raised for the
    global handler to turn into a 500.
"""

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.exceptions import PersistenceError
from chirpy.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Create and bulk-delete users."""

    async def create(self, db: AsyncSession, email: str) -> User:
        """
        Insert a new user and return the fully populated record.

        The id is a fresh uuid4 and created_at/updated_at share one UTC
        timestamp. Email is stored as given; duplicates are allowed unless
        the database schema forbids them.

        Raises:
            PersistenceError: insert or commit failed (→ 500)
        """
        now = datetime.now(timezone.utc)
        user = User(
            id=uuid.uuid4(),
            email=email,
            created_at=now,
            updated_at=now,
        )
        try:
            db.add(user)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Failed to insert user: %s", type(e).__name__)
            raise PersistenceError(
                message="Failed to create user",
                context={"original_error": type(e).__name__},
            ) from e

        logger.info("Created user %s", user.id)
        return user

    async def delete_all(self, db: AsyncSession) -> int:
        """
        Delete every user row unconditionally.

        Returns:
            Number of rows removed (as reported by the driver).

        Raises:
            PersistenceError: delete or commit failed (→ 500)
        """
        try:
            result = await db.execute(delete(User))
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Failed to delete users: %s", type(e).__name__)
            raise PersistenceError(
                message="Failed to reset users",
                context={"original_error": type(e).__name__},
            ) from e

        deleted = result.rowcount or 0
        logger.info("Deleted %d user(s)", deleted)
        return deleted


user_repository = UserRepository()
