"""
Pytest fixtures for TalentLink Accounts tests.

Uses an in-memory SQLite database per test and a low bcrypt work factor.
"""

import os

# Settings are cached on first use, so the environment must be in place
# before any application module is imported.
os.environ.setdefault("JWT_SECRET_KEY", "test-only-signing-key-3f9a1c7e5b2d8046aa")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENV", "test")

from datetime import timedelta  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from backend.app.auth.jwt import TokenService  # noqa: E402
from core import models  # noqa: F401,E402
from core.db import Base  # noqa: E402
from core.repositories import UserRepository  # noqa: E402


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(
        bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
    )

    yield TestingSessionLocal, engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def test_session(test_db):
    """Get a test session from the test database."""
    TestingSessionLocal, _ = test_db
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture
def user_repo(test_session) -> UserRepository:
    return UserRepository(test_session)


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(
        secret_key="unit-test-signing-key-0b7e4c19d2a65f83",
        expires_delta=timedelta(days=3),
    )


@pytest.fixture
def sample_registration():
    """Registration body as the browser client sends it."""
    return {
        "email": "a@x.com",
        "password": "p1",
        "fullName": "A",
        "userType": "freelancer",
    }


@pytest.fixture
def sample_account(user_repo, test_session):
    """A persisted freelancer account with password 's3cret-pass'."""
    user = user_repo.create_user(
        email="jane@example.com",
        password="s3cret-pass",
        full_name="Jane Doe",
        user_type="freelancer",
        skills=["python", "fastapi"],
        bio="Backend developer",
    )
    test_session.commit()
    return user
