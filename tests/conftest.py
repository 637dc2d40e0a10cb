"""
Pytest fixtures for the movies API tests
"""

import pytest
from fastapi.testclient import TestClient

from movies_api.config import Settings
from movies_api.main import create_app
from movies_api.memory_store import InMemoryEntityStore


@pytest.fixture
def movie_store():
    return InMemoryEntityStore()


@pytest.fixture
def genre_store():
    return InMemoryEntityStore()


@pytest.fixture
def app(movie_store, genre_store):
    return create_app(Settings(store_backend="memory"), movie_store=movie_store, genre_store=genre_store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def movie():
    return {"title": "movie1", "description": "funny", "releaseDate": "10-10-2023", "genre": ["comedy"]}
