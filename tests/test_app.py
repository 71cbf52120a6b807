import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from app.core.config import Settings
from app.core.exceptions import ConflictException, translate_integrity_error


def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_unknown_route_has_message_body(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert "message" in response.json()


def test_store_failure_is_generic_500(app):
    @app.get("/api/boom")
    def boom():
        raise RuntimeError("connection reset by peer")

    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/api/boom")

    assert response.status_code == 500
    assert response.json() == {"message": "An internal server error occurred."}


def test_database_url_is_built_from_components(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(
        _env_file=None,
        POSTGRES_USER="sis",
        POSTGRES_PASSWORD="pw",
        POSTGRES_HOST="db",
        POSTGRES_PORT="5433",
        POSTGRES_DB="records",
    )
    assert settings.DATABASE_URL == "postgresql://sis:pw@db:5433/records"


def test_explicit_database_url_wins():
    settings = Settings(_env_file=None, DATABASE_URL="sqlite://")
    assert settings.DATABASE_URL == "sqlite://"
    assert settings.is_sqlite


def test_unique_violation_from_store_maps_to_conflict(session_factory, add_rows, builders):
    add_rows(builders.student("S1"))
    db = session_factory()
    try:
        db.add(builders.student("S1"))
        with pytest.raises(IntegrityError) as excinfo:
            db.commit()
        db.rollback()
    finally:
        db.close()

    error = translate_integrity_error(excinfo.value, "duplicate", "missing")
    assert isinstance(error, ConflictException)
    assert error.status_code == 409


def test_foreign_keys_are_enforced_on_sqlite(session_factory, builders):
    db = session_factory()
    try:
        db.add(builders.enrollment(1, "GHOST", "NOPE"))
        with pytest.raises(IntegrityError) as excinfo:
            db.commit()
        db.rollback()
    finally:
        db.close()

    error = translate_integrity_error(excinfo.value, "duplicate", "missing")
    assert error.status_code == 400
    assert error.message == "missing"
