"""Readiness Route — liveness endpoint for container orchestration.

Invariants:
    - GET /v1/readiness always returns 200 {"status": "ok"} if the process is up
    - Never touches the database
"""

from fastapi import APIRouter, status

from users_api.api.responses import respond_with_json

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/readiness")
async def readiness():
    """Liveness check. Returns 200 if the process is up."""
    return respond_with_json(status.HTTP_200_OK, {"status": "ok"})
