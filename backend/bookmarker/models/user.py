"""
Bookmarker — User SQLAlchemy Model
==================================

What:  ORM model representing the `users` table.
Why:   Stores schema-flexible user documents: a lookup `id` plus arbitrary attributes.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by UserService for list/get/create and by Alembic for schema management.

Table Design Rationale:
    - pk: Integer surrogate primary key owned by the database; gives a stable
      insertion order for listing and for "first match" lookups
    - id: The lookup field exposed by the API. Indexed but NOT unique, so
      two documents may share an id; reads return the oldest one
    - attributes: Every request-body field except `id`, stored verbatim as JSON
      (JSONB on PostgreSQL)
    - created_at: UTC timestamp generated by the persistence layer
"""

from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import JSON, Index, Integer, Text, text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from bookmarker.database import Base


class User(Base):
    """
    A user document.

    Lifecycle:
        Created on POST, read on GET. Never updated or deleted.

    Query Patterns:
        - List all: SELECT ... ORDER BY pk
        - Get by id: SELECT ... WHERE id = :id ORDER BY pk LIMIT 1
          → Uses idx_users_id
    """

    __tablename__ = "users"

    pk: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Surrogate key; defines insertion order",
    )

    id: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Document id used for lookups (not unique)",
    )

    attributes: Mapped[Dict[str, Any]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=False,
        default=dict,
        comment="Schema-flexible document body",
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this document was created (UTC)",
    )

    __table_args__ = (
        Index("idx_users_id", "id"),
    )

    def to_document(self) -> Dict[str, Any]:
        """Flatten into the public document shape; `id` and `created_at` win over attributes."""
        document = dict(self.attributes or {})
        document["id"] = self.id
        document["created_at"] = self.created_at
        return document

    def __repr__(self) -> str:
        return f"<User(pk={self.pk}, id='{self.id}')>"
