"""
Pytest fixtures for API integration tests.

Provides a FastAPI test client bound to the in-memory test database.
"""
from types import SimpleNamespace
import pytest
from fastapi.testclient import TestClient

from chefs.main import app
from chefs.api.deps import get_current_user
from chefs.core.database import get_db


@pytest.fixture(scope="function")
def client(db_session):
    """
    FastAPI test client with database dependency override.

    Uses in-memory database for isolated tests.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    # Clean up override
    app.dependency_overrides.clear()


@pytest.fixture
def login(db_session):
    """
    Authenticate requests as a user, as the upstream auth middleware would.

    Use as: login("reader") before issuing requests.
    """
    def _login(user_id):
        request = SimpleNamespace(state=SimpleNamespace(user={"user_id": user_id, "username": user_id}))
        app.dependency_overrides[get_current_user] = lambda: get_current_user(request, db_session)

    return _login
