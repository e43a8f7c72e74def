"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps a UUID4 — random, unordered, never derived from row order
"""

import uuid
from typing import NewType
from uuid import UUID


UserId = NewType("UserId", UUID)


def new_user_id() -> UserId:
    """Fresh globally unique identifier for a User."""
    return UserId(uuid.uuid4())
