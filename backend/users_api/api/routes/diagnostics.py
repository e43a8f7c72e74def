"""Diagnostic Error Route — exercises the error envelope end to end.

Invariants:
    - GET /v1/err always returns 500 {"error": "Internal Server Error"}
"""

from fastapi import APIRouter, status

from users_api.api.responses import respond_with_error

router = APIRouter(prefix="/v1", tags=["diagnostics"])


@router.get("/err")
async def error_route():
    return respond_with_error(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error",
    )
