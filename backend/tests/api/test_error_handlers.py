"""Error Handlers: kind → status dispatch and validation message summaries.

Invariants:
    - Unhandled exceptions become a 500 with no internal detail
    - Validation summaries name every missing field
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from biztime.api.error_handlers import register_error_handlers, summarize_validation_errors
from biztime.core.errors import BadRequestError, DatabaseError, ResourceNotFoundError


@pytest.fixture
async def failing_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret connection string")

    @app.get("/bad")
    async def bad():
        raise BadRequestError("missing name", "name")

    @app.get("/gone")
    async def gone():
        raise ResourceNotFoundError("Company", "x")

    @app.get("/db")
    async def db():
        raise DatabaseError("Integrity constraint violated", "commit")

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_unhandled_exception_is_500_without_detail(failing_client):
    res = await failing_client.get("/boom")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in res.text


@pytest.mark.parametrize("path,status", [
    ("/bad", 400), ("/gone", 404), ("/db", 500),
])
async def test_error_kind_selects_status(failing_client, path, status):
    res = await failing_client.get(path)
    assert res.status_code == status


def test_summary_for_missing_body():
    errors = [{"type": "missing", "loc": ("body",), "msg": "Field required"}]
    assert summarize_validation_errors(errors) == "missing request body"


def test_summary_mixes_missing_and_invalid_fields():
    errors = [
        {"type": "missing", "loc": ("body", "comp_code"), "msg": "Field required"},
        {
            "type": "greater_than", "loc": ("body", "amt"),
            "msg": "Input should be greater than 0",
        },
    ]
    assert summarize_validation_errors(errors) == (
        "missing comp_code; amt: Input should be greater than 0"
    )
