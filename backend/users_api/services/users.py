"""User Service — persists new users.

Invariants:
    - One clock read per creation; created_at and updated_at share it
    - Exactly one INSERT per call, committed before returning
    - Any SQLAlchemy failure is rolled back and surfaced as UserCreationError

Design Decisions:
    - Identifier generated in the application (UUID4), not by a DB sequence:
      duplicate names yield distinct, unordered ids
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from users_api.core.domain_types import new_user_id
from users_api.core.errors import UserCreationError
from users_api.models.user import User

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def create_user(db: AsyncSession, name: str) -> User:
    """Insert a user row and return it."""
    now = _utc_now()
    user = User(id=new_user_id(), created_at=now, updated_at=now, name=name)
    db.add(user)
    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"User insert failed: {e}",
            extra={"user_id": str(user.id), "error_code": "USER_CREATE_FAILED"},
        )
        raise UserCreationError() from e
    logger.info("User created", extra={"user_id": str(user.id)})
    return user
