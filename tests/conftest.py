"""
Pytest configuration and fixtures.

The app is pointed at an in-memory SQLite database before it is imported;
tables are created and dropped around every test.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient

from app.core.security import create_access_token, get_password_hash
from app.db.base import Base
from app.db.models import User
from app.db.session import SessionLocal, engine
from app.main import app


@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def user(db):
    """A persisted quiz creator."""
    creator = User(name="Quiz Master", email="master@example.com", password_hash=get_password_hash("password123"))
    db.add(creator)
    db.commit()
    db.refresh(creator)
    return creator


@pytest.fixture
def auth_headers(user):
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def quiz_payload():
    return {
        "title": "Capitals and sums",
        "description": "Warm-up quiz",
        "questions": [
            {"text": "What is the capital of France?", "options": ["Paris", "London", "Berlin"], "correctAnswer": "Paris"},
            {"text": "What is 2 + 2?", "options": ["3", "4", "5"], "correctAnswer": "4"},
        ],
    }
