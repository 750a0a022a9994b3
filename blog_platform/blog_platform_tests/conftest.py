"""
Pytest configuration for blog service tests.

Points the service at an in-memory SQLite database before the application is
imported, and provides shared fixtures.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ.setdefault("LOG_LEVEL", "INFO")

import pytest
from fastapi.testclient import TestClient

from blog_platform.blog_platform.blog_service.main import app
from blog_platform.blog_platform.blog_service.db import Base, engine, SessionLocal
from blog_platform.blog_platform.blog_service.models import User
from blog_platform.blog_platform.blog_service.auth import hash_password, create_access_token


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def reset_database():
    # Drop all tables and recreate them before each test
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()


def ensure_user(username="alice", password="secret1"):
    db = SessionLocal()
    try:
        u = db.query(User).filter(User.username == username).first()
        if not u:
            u = User(username=username, password=hash_password(password))
            db.add(u)
            db.commit()
            db.refresh(u)
        return u.id
    finally:
        db.close()


def auth_header_for(user_id: int, bearer: bool = False):
    token = create_access_token(user_id)
    return {"Authorization": f"Bearer {token}" if bearer else token}


@pytest.fixture
def make_user():
    return ensure_user


@pytest.fixture
def auth_header():
    return auth_header_for


@pytest.fixture
def alice_headers():
    return auth_header_for(ensure_user("alice"))


@pytest.fixture
def bob_headers():
    return auth_header_for(ensure_user("bob", "hunter22"))
