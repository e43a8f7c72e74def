"""Readiness & Diagnostic Routes — fixed responses regardless of state.

Tests:
    - GET /v1/readiness → 200 {"status": "ok"}, also after failures and with no DB
    - GET /v1/err → 500 {"error": "Internal Server Error"}
    - Unknown paths → 404 in the error envelope for every non-OPTIONS method
"""

import pytest
from httpx import ASGITransport, AsyncClient

from users_api.main import create_app


async def test_readiness_returns_ok(client):
    res = await client.get("/v1/readiness")
    assert res.status_code == 200
    assert res.headers["content-type"] == "application/json"
    assert res.json() == {"status": "ok"}


async def test_readiness_unaffected_by_prior_errors(client):
    await client.get("/v1/err")
    await client.post("/v1/users", content=b"{", headers={"content-type": "application/json"})
    res = await client.get("/v1/readiness")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


async def test_readiness_does_not_need_database(settings):
    app = create_app(settings)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/v1/readiness")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


async def test_err_always_returns_500(client):
    for _ in range(2):
        res = await client.get("/v1/err")
        assert res.status_code == 500
        assert res.headers["content-type"] == "application/json"
        assert res.json() == {"error": "Internal Server Error"}


@pytest.mark.parametrize("method, path", [
    ("GET", "/v2/nothing"),
    ("DELETE", "/anything"),
    ("POST", "/v1/users/extra"),
])
async def test_unknown_path_returns_404_envelope(client, method, path):
    res = await client.request(method, path)
    assert res.status_code == 404
    assert res.json() == {"error": "Not Found"}


async def test_uninitialized_database_returns_500(settings):
    """get_db without app.state.db falls through to the catch-all handler."""
    app = create_app(settings)
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.post("/v1/users", json={"name": "Ada"})
    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}
