"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Registered users and their bearer headers
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from jobboard.core.database import Database
from main import create_app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def database():
    """
    Fresh in-memory database for each test.
    """
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db = Database(engine=engine)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(database):
    return create_app(database=database, configure_logging=False)


@pytest.fixture
def client(app):
    """
    FastAPI test client bound to the test database.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client):
    """Call POST /register; email defaults to <username>@example.com."""
    def _register(username="alice", email=None, password="secret123"):
        return client.post(
            "/register",
            json={
                "username": username,
                "email": email or f"{username}@example.com",
                "password": password
            }
        )
    return _register


@pytest.fixture
def bearer_for(client):
    """Log a user in and return the Authorization header for them."""
    def _bearer_for(username="alice", password="secret123"):
        response = client.post("/login", json={"username": username, "password": password})
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _bearer_for


@pytest.fixture
def auth_headers(register_user, bearer_for):
    """Register 'alice' and return her Authorization header."""
    assert register_user("alice").status_code == 201
    return bearer_for("alice")


@pytest.fixture
def other_headers(register_user, bearer_for):
    """Register 'bobby' and return his Authorization header."""
    assert register_user("bobby").status_code == 201
    return bearer_for("bobby")


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "title": "Senior Python Developer",
        "company": "Acme Corp",
        "location": "San Francisco, CA (Remote)",
        "description": "Build and run our hiring platform APIs.",
        "requirements": "5+ years of Python, FastAPI, PostgreSQL",
        "salary": "$150k - $180k"
    }


@pytest.fixture
def job_id(client, auth_headers, sample_job_data):
    """Id of a job posted by alice."""
    response = client.post("/jobs", json=sample_job_data, headers=auth_headers)
    assert response.status_code == 201
    return response.json()["jobId"]
