"""
Chirpy Backend — User SQLAlchemy Model
=======================================

What:  ORM model representing the `users` table.
Who:   Used by UserRepository for insert and bulk delete.

Table Design:
    - id: UUID primary key generated in Python (uuid4), never reused or changed
    - email: free text; uniqueness is NOT enforced here (a schema-level
      constraint, if the deployed database has one, surfaces as PersistenceError)
    - created_at / updated_at: timezone-aware UTC; identical at creation

The generic `Uuid` and `DateTime(timezone=True)` types map to native UUID /
TIMESTAMPTZ on PostgreSQL and still work on SQLite for tests.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from chirpy.database import Base


class User(Base):
    """A registered Chirpy user."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
