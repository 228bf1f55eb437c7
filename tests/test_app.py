"""
Tests for application-level behaviour: factory, health, error handlers.
"""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.database import Database
from app.exceptions import ApiError, BookNotFoundError, NotFoundError
from app.main import create_app, format_validation_errors


class TestRootAndHealth:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["books"] == "/api/v1/books"

    def test_health_ok(self, client):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "ok"

    def test_health_degraded_when_database_unreachable(self, monkeypatch):
        database = Database("sqlite://")

        def failing_ping():
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        monkeypatch.setattr(database, "ping", failing_ping)

        with TestClient(create_app(database=database)) as client:
            response = client.get("/health")

        assert response.json()["status"] == "degraded"
        assert response.json()["database"] == "unavailable"


class TestLifespan:

    def test_injected_database_is_attached(self):
        database = Database("sqlite://")
        app = create_app(database=database)

        with TestClient(app):
            assert app.state.database is database

    def test_database_built_from_settings(self):
        app = create_app()

        with TestClient(app):
            assert isinstance(app.state.database, Database)
            assert app.state.database.url == "sqlite://"


class TestErrorHandlers:

    def test_api_error_serialized(self):
        app = create_app(database=Database("sqlite://"))

        @app.get("/teapot")
        def teapot():
            raise ApiError("I'm a teapot", status_code=418)

        with TestClient(app) as client:
            response = client.get("/teapot")

        assert response.status_code == 418
        assert response.json() == {"detail": "I'm a teapot"}

    def test_database_error_hidden(self):
        app = create_app(database=Database("sqlite://"))

        @app.get("/broken")
        def broken():
            raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

        with TestClient(app) as client:
            response = client.get("/broken")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "disk" not in response.json()["detail"]

    def test_unhandled_error_returns_500(self):
        app = create_app(database=Database("sqlite://"))

        @app.get("/boom")
        def boom():
            raise RuntimeError("boom")

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/boom")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"detail": "An internal error occurred."}

    def test_validation_error_body(self, client, admin_headers):
        response = client.post("/api/v1/books", json={"title": "Only"}, headers=admin_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert "body.author: Field required" in data["detail"]
        assert len(data["errors"]) == 4


class TestExceptions:

    def test_defaults(self):
        assert BookNotFoundError().status_code == 404
        assert BookNotFoundError().message == "Book not found"
        assert NotFoundError().message == "Not found"
        assert str(ApiError()) == "An internal error occurred."

    def test_overrides(self):
        error = ApiError("Conflict", status_code=409)

        assert error.status_code == 409
        assert str(error) == "Conflict"


def test_format_validation_errors():
    errors = [
        {"loc": ("query", "limit"), "msg": "Input should be a valid integer"},
        {"loc": (), "msg": "At least one field must be provided"},
    ]

    assert format_validation_errors(errors) == (
        "query.limit: Input should be a valid integer, "
        "At least one field must be provided"
    )
