"""Response Envelope — verifies JSON helpers.

Tests:
    - Status code, content type and body set from arguments
    - UUIDs, datetimes and pydantic models encode to JSON
    - Error helper wraps message as {"error": message}
    - Unserializable payloads keep the status and send an empty body
"""

import json
from datetime import datetime, timezone
from uuid import uuid4

from fastapi.responses import JSONResponse

from users_api.api.responses import respond_with_error, respond_with_json
from users_api.schemas.user import UserResponse


def test_respond_with_json_sets_status_and_content_type():
    response = respond_with_json(200, {"status": "ok"})
    assert isinstance(response, JSONResponse)
    assert response.status_code == 200
    assert response.media_type == "application/json"
    assert response.headers["content-type"] == "application/json"
    assert json.loads(response.body) == {"status": "ok"}


def test_respond_with_json_encodes_model_uuid_and_datetime():
    user_id = uuid4()
    now = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    model = UserResponse(id=user_id, created_at=now, updated_at=now, name="Ada")
    body = json.loads(respond_with_json(201, model).body)
    assert body["id"] == str(user_id)
    assert body["name"] == "Ada"
    assert body["created_at"] == body["updated_at"]
    assert body["created_at"].startswith("2024-05-01T12:30:00")


def test_respond_with_error_wraps_message():
    response = respond_with_error(400, "Invalid request payload")
    assert response.status_code == 400
    assert json.loads(response.body) == {"error": "Invalid request payload"}


def test_unserializable_payload_sends_status_with_empty_body():
    response = respond_with_json(200, {"value": float("nan")})
    assert response.status_code == 200
    assert response.body == b""
    assert response.media_type == "application/json"
