"""CORS Wrapper — permissive cross-origin headers and preflight short-circuit.

Invariants:
    - Every response from a wrapped handler carries the three Access-Control-* headers
    - OPTIONS never reaches the wrapped handler; it is answered 200 with an empty body
    - Routes on a router built with route_class=CORSRoute are wrapped for every method
    - preflight_middleware answers OPTIONS on any path the same way; other
      methods pass through untouched, so 404 and 405 still come from routing

Design Decisions:
    - Per-route wrapper instead of Starlette's CORSMiddleware: the latter is
      app-wide and echoes request headers rather than sending fixed values
    - Header values resolved per request from app.state.cors_headers (set by
      create_app from settings), falling back to DEFAULT_CORS_HEADERS
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from fastapi import Request, Response, status
from fastapi.routing import APIRoute

from users_api.config import Settings

Handler = Callable[[Request], Awaitable[Response]]

DEFAULT_CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS, PUT, DELETE",
    "Access-Control-Allow-Headers": "*",
}


def cors_headers(settings: Settings) -> dict[str, str]:
    """CORS header values configured for this deployment."""
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Methods": settings.cors_allow_methods,
        "Access-Control-Allow-Headers": settings.cors_allow_headers,
    }


def _resolve_headers(request: Request) -> Mapping[str, str]:
    return getattr(request.app.state, "cors_headers", DEFAULT_CORS_HEADERS)


def with_cors(handler: Handler, headers: Mapping[str, str] | None = None) -> Handler:
    """Wrap handler so it sets CORS headers and answers preflight itself."""

    async def cors_handler(request: Request) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=status.HTTP_200_OK)
        else:
            response = await handler(request)
        response.headers.update(headers if headers is not None else _resolve_headers(request))
        return response

    return cors_handler


class CORSRoute(APIRoute):
    """APIRoute whose handler is wrapped by with_cors."""

    def get_route_handler(self) -> Callable[[Request], Awaitable[Any]]:
        return with_cors(super().get_route_handler())


async def preflight_middleware(request: Request, call_next: Handler) -> Response:
    """App-wide OPTIONS short-circuit; everything else reaches the router."""
    if request.method != "OPTIONS":
        return await call_next(request)
    return await with_cors(call_next)(request)
