"""User ORM — maps the pre-existing `users` table.

Invariants:
    - id is a UUID4 primary key assigned by the application, never by the database
    - created_at == updated_at at insert; no update path exists
    - name is stored exactly as received

Design Decisions:
    - Timestamps set explicitly by the service from one clock read instead of
      server defaults, so the response carries the exact persisted values
"""

import uuid
from datetime import datetime

from sqlalchemy import Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from users_api.db.base import Base


class User(Base):
    """A user row — created once, never mutated."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
