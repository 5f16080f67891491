"""Pytest fixtures: an isolated in-memory database seeded before each test."""

import mongomock
import pytest
from fastapi.testclient import TestClient

from database import BlogStore
from main import create_app
from tests.helpers import INITIAL_BLOGS


@pytest.fixture
def db():
    return mongomock.MongoClient()["bloglist_test"]


@pytest.fixture
def store(db):
    store = BlogStore(db)
    store.clear()
    for blog in INITIAL_BLOGS:
        store.create(blog)
    return store


@pytest.fixture
def client(db, store):
    with TestClient(create_app(db)) as client:
        yield client
