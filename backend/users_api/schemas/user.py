"""User Schemas — request/response contracts for POST /v1/users.

Invariants:
    - UserCreate.name must be a JSON string with at least one non-whitespace character
    - name is validated but never transformed (echoed back byte-for-byte)
    - UserResponse carries exactly id, created_at, updated_at, name
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class UserCreate(BaseModel):
    name: StrictStr = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def reject_blank_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace")
        return v


class UserResponse(BaseModel):
    """Created user as returned to the caller."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime
    name: str
