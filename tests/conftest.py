"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from datetime import datetime

import bcrypt

ADMIN_PASSWORD = "correct-horse"
TEST_JWT_SECRET = "test-signing-secret-for-testing-only"

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["JWT_SECRET"] = TEST_JWT_SECRET
os.environ["ADMIN_PASSWORD_HASH"] = bcrypt.hashpw(
    ADMIN_PASSWORD.encode("utf-8"), bcrypt.gensalt(rounds=4)
).decode("utf-8")
os.environ["DEBUG"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from newstime.db.models import Author, Base, Category, Post

# Use in-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database override."""
    # Import here to ensure env vars are set
    from newstime.dependencies import get_db
    from newstime.main import app

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_token(client: TestClient) -> str:
    """Log in with the configured admin password."""
    response = client.post("/api/auth/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def admin_headers(admin_token: str) -> dict:
    """Authorization headers carrying a valid admin token."""
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def test_category(db: Session) -> Category:
    """Create a test category."""
    category = Category(
        name="Politics",
        slug="politics",
        description="Political news",
        icon="Landmark",
        color="#1D4ED8",
        post_count=0,
    )
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@pytest.fixture
def test_author(db: Session) -> Author:
    """Create a test author."""
    author = Author(
        name="Priya Sharma",
        avatar="https://example.com/priya.jpg",
        bio="Senior political correspondent.",
    )
    db.add(author)
    db.commit()
    db.refresh(author)
    return author


@pytest.fixture
def test_post(db: Session, test_category: Category, test_author: Author) -> Post:
    """Create a published test post."""
    post = Post(
        title="Election Results Announced",
        slug="election-results-announced",
        excerpt="The final count is in.",
        content="Full coverage of the election results.",
        category_id=test_category.id,
        author_id=test_author.id,
        tags=["election"],
        keywords=["vote"],
        is_featured=True,
        is_published=True,
        views=10,
        publish_date=datetime(2024, 5, 1, 9, 0, 0),
    )
    db.add(post)
    test_category.post_count = 1
    db.commit()
    db.refresh(post)
    return post
