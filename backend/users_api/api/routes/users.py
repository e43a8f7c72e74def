"""User Routes — POST /v1/users creates one user per call.

Invariants:
    - Body decoded as JSON whatever the Content-Type; failures → 400, nothing persisted
    - Success → 201 with {id, created_at, updated_at, name}
    - No idempotency: repeated calls create distinct rows

Design Decisions:
    - Raw body validated with UserCreate.model_validate_json instead of a body
      parameter: FastAPI only parses JSON when the Content-Type says so
    - Not CORS-wrapped; preflight for this path is answered by preflight_middleware
"""

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from users_api.api.responses import respond_with_json
from users_api.core.errors import InvalidPayloadError
from users_api.infrastructure.database import get_db
from users_api.schemas.user import UserCreate, UserResponse
from users_api.services import users as user_service

router = APIRouter(prefix="/v1/users", tags=["users"])


async def decode_user_create(request: Request) -> UserCreate:
    """Decode the request body into UserCreate or raise InvalidPayloadError."""
    try:
        return UserCreate.model_validate_json(await request.body())
    except ValidationError as e:
        raise InvalidPayloadError() from e


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": UserCreate.model_json_schema(),
                },
            },
        },
    },
)
async def create_user(
    body: UserCreate = Depends(decode_user_create),
    db: AsyncSession = Depends(get_db),
):
    """Create a user from {"name": ...}."""
    user = await user_service.create_user(db, body.name)
    return respond_with_json(
        status.HTTP_201_CREATED, UserResponse.model_validate(user),
    )
