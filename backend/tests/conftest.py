#!/usr/bin/env python
"""
pytest configuration file

This file contains shared fixtures for all tests. The app runs against an
in-memory SQLite database; every test gets a fresh one.
"""

import pytest
from factories import SPACE_ID, USER_ID, add_member, add_space, add_user, make_settings
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from portal.main import create_app
from portal.settings import Settings


@pytest.fixture
def settings() -> Settings:
    """Test settings fixture"""
    return make_settings()


@pytest.fixture
def client(settings: Settings):
    """TestClient with the app lifespan running."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(client: TestClient):
    """Session bound to the same database as the running app."""
    session = client.app.state.context.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def auth_headers() -> dict:
    return {"X-User-Id": USER_ID}


@pytest.fixture
def member_space(db: Session) -> str:
    """A space with Alice as an editor."""
    add_user(db)
    add_space(db)
    add_member(db)
    return SPACE_ID
