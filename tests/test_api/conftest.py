# tests/test_api/conftest.py
import pytest
from fastapi.testclient import TestClient

from biblioteca.sa.database import get_db
from biblioteca.services.auth_service import AuthService
from api.main import app

@pytest.fixture
def client(database):
    """TestClient whose requests each get a session on the test database"""
    def override_get_db():
        session = database.get_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

@pytest.fixture
def auth_headers(db_session, borrower):
    token = AuthService(db_session).issue_token(borrower)
    return {"Authorization": f"Bearer {token.token}"}

@pytest.fixture
def other_auth_headers(db_session, other_borrower):
    token = AuthService(db_session).issue_token(other_borrower)
    return {"Authorization": f"Bearer {token.token}"}
