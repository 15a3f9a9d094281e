"""Tests for the application error handlers."""

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient

from api.errors import (
    guidepost_error_handler,
    status_for,
    unhandled_error_handler,
)
from modules.guides.exceptions import GuideAccessDeniedError, GuideNotFoundError
from providers.exceptions import ExchangeFailedError
from shared.exceptions import (
    ConfigurationError,
    DatabaseError,
    GuidepostError,
    InvalidInputError,
    NotAuthenticatedError,
)


class TestStatusMapping:
    @pytest.mark.parametrize(
        "error,status",
        [
            (NotAuthenticatedError(), 401),
            (GuideAccessDeniedError("g"), 403),
            (GuideNotFoundError("g"), 404),
            (InvalidInputError(), 400),
            (ExchangeFailedError("discord"), 400),
            (ConfigurationError("missing"), 500),
            (DatabaseError("down"), 500),
            (GuidepostError("other"), 500),
        ],
    )
    def test_status_for(self, error, status):
        assert status_for(error) == status


def build_app(error: Exception) -> FastAPI:
    """A tiny app whose only route raises ``error``."""
    router = APIRouter()

    @router.get("/boom")
    async def boom():
        raise error

    app = FastAPI()
    app.add_exception_handler(GuidepostError, guidepost_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
    app.include_router(router)
    return app


class TestHandlers:
    def test_client_error_body(self):
        response = TestClient(build_app(GuideNotFoundError("g-1"))).get("/boom")
        assert response.status_code == 404
        assert response.json() == {
            "error": "GUIDE_NOT_FOUND",
            "message": "Guide not found: g-1",
            "details": {"guide_id": "g-1"},
        }

    def test_server_error_hides_message(self):
        response = TestClient(build_app(DatabaseError("secret table detail", operation="x"))).get("/boom")
        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "DATABASE_ERROR"
        assert "secret" not in body["message"]
        assert body["details"] == {}

    def test_server_error_detail_in_debug(self, monkeypatch):
        from shared.config import get_settings

        monkeypatch.setenv("GUIDEPOST_DEBUG", "true")
        get_settings.cache_clear()

        response = TestClient(build_app(DatabaseError("table missing"))).get("/boom")

        assert response.json()["message"] == "table missing"

    def test_unhandled_exception(self):
        client = TestClient(build_app(RuntimeError("kaboom")), raise_server_exceptions=False)
        response = client.get("/boom")
        assert response.status_code == 500
        assert response.json()["error"] == "INTERNAL_ERROR"
