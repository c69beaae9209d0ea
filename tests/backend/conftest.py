from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from backend.app.database import get_db
from backend.app.main import create_app

API = "/api/auth"


@pytest.fixture
def test_app_client(test_db) -> Iterator[tuple[TestClient, sessionmaker]]:
    TestingSessionLocal, _ = test_db

    app = create_app()

    def override_get_db() -> Iterator[Session]:
        db = TestingSessionLocal()
        try:
            yield db
            db.commit()  # Auto-commit on success like production
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client, TestingSessionLocal


@pytest.fixture
def register_user(test_app_client) -> Callable[..., dict]:
    """Register an account through the API and return the response body."""
    client, _ = test_app_client

    def _register(**overrides) -> dict:
        body = {
            "email": "jane@example.com",
            "password": "s3cret-pass",
            "fullName": "Jane Doe",
            "userType": "freelancer",
        }
        body.update(overrides)
        resp = client.post(f"{API}/register", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _register


@pytest.fixture
def logged_in_client(test_app_client, register_user) -> Iterator[tuple[TestClient, dict, sessionmaker]]:
    """Client holding a session cookie for a freshly registered freelancer."""
    client, session_factory = test_app_client
    user = register_user()
    resp = client.post(
        f"{API}/login",
        json={"email": "jane@example.com", "password": "s3cret-pass", "userType": "freelancer"},
    )
    assert resp.status_code == 200, resp.text
    yield client, user, session_factory
