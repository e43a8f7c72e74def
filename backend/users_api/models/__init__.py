"""ORM Models — SQLAlchemy declarative models for all domain entities.

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all
"""

from users_api.models.user import User  # noqa: F401
