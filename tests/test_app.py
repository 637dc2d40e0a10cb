"""
Tests for the application shell: health check, docs and fallbacks
"""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from movies_api.config import Settings
from movies_api.main import create_app


def test_health_check(client):
    response = client.get("/health-check")
    assert response.status_code == 200
    assert response.json() == {"status": "Server is running"}


def test_unknown_path(client):
    response = client.get("/unknown")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_unknown_method(client):
    response = client.patch("/movies/123", json={})
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_docs_accessible(client):
    response = client.get("/api-docs")
    assert response.status_code == 200


def test_openapi_spec(client):
    response = client.get("/openapi.json")
    assert response.status_code == 200

    spec = response.json()
    assert spec["info"]["title"] == "Movies API"
    assert "/movies/genre/{genreName}" in spec["paths"]
    assert "/genres/{id}" in spec["paths"]


def test_malformed_json_body(client):
    response = client.post("/movies", content="{not json", headers={"content-type": "application/json"})
    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}


def test_unhandled_exception(app, movie_store, monkeypatch):
    monkeypatch.setattr(movie_store, "find", Mock(side_effect=RuntimeError("boom")))
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/movies")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}


def test_memory_backend_from_settings():
    app = create_app(Settings(store_backend="memory"))

    with TestClient(app) as client:
        created = client.post("/genres", json={"name": "Action"}).json()
        assert client.get("/genres").json() == [created]


def test_stores_must_be_passed_together(movie_store):
    with pytest.raises(ValueError):
        create_app(Settings(store_backend="memory"), movie_store=movie_store)
