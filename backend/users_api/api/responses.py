"""Response Envelope — JSON success and error bodies with an explicit status code.

Invariants:
    - Content-Type is always application/json
    - Error bodies are exactly {"error": message}
    - Serialization failures never propagate: logged, status sent with an empty body
"""

import logging
from typing import Any

from fastapi import Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def respond_with_json(status_code: int, payload: Any) -> Response:
    """Serialize payload (dicts, pydantic models, UUIDs, datetimes) into a JSON response."""
    try:
        return JSONResponse(
            status_code=status_code, content=jsonable_encoder(payload),
        )
    except (TypeError, ValueError) as e:
        logger.error(
            f"Failed to serialize response payload: {e}",
            extra={"status_code": status_code},
        )
        return Response(status_code=status_code, media_type=JSONResponse.media_type)


def respond_with_error(status_code: int, message: str) -> Response:
    return respond_with_json(status_code, {"error": message})
