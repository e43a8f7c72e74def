"""Root Route — CORS-wrapped no-op handler.

Invariants:
    - Any method on / returns 200 with an empty body and CORS headers
    - OPTIONS on other paths is answered by cors.preflight_middleware, not here
"""

from fastapi import APIRouter, Response, status

from users_api.api.cors import CORSRoute

router = APIRouter(route_class=CORSRoute, tags=["root"])

ROOT_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "OPTIONS"]


@router.api_route("/", methods=ROOT_METHODS, include_in_schema=False)
async def root():
    return Response(status_code=status.HTTP_200_OK)
