import os

# Settings are read at import time, so these must be set before workconnect loads
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["STORE_BACKEND"] = "memory"
os.environ["SEED_SAMPLE_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient

from workconnect.core.sessions import SessionManager
from workconnect.main import create_app
from workconnect.store import MemoryStore

from payloads import PASSWORD, employer_profile_payload, job_payload, worker_profile_payload


@pytest.fixture(scope="function")
def store():
    """A fresh, empty in-memory store per test."""
    return MemoryStore()


@pytest.fixture(scope="function")
def sessions():
    return SessionManager()


@pytest.fixture(scope="function")
def app(store, sessions):
    """Provides an app wired to the test store and session registry."""
    return create_app(store=store, sessions=sessions)


@pytest.fixture(scope="function")
def make_client(app):
    """Builds independent clients; each one keeps its own cookie jar."""

    def _make_client() -> TestClient:
        return TestClient(app)

    return _make_client


@pytest.fixture(scope="function")
def test_client(make_client):
    """An anonymous client."""
    return make_client()


@pytest.fixture(scope="function")
def signup(make_client):
    """Register a user on a new client and return ``(client, user_json)``."""

    def _signup(username: str, user_type: str, **overrides):
        client = make_client()
        body = {
            "username": username,
            "password": PASSWORD,
            "email": f"{username}@example.com",
            "name": f"{username.title()} Tester",
            "userType": user_type,
            **overrides,
        }
        response = client.post("/api/auth/register", json=body)
        assert response.status_code == 201, response.text
        return client, response.json()

    return _signup


@pytest.fixture(scope="function")
def worker(signup):
    return signup("alice", "worker")


@pytest.fixture(scope="function")
def other_worker(signup):
    return signup("bob", "worker")


@pytest.fixture(scope="function")
def employer(signup):
    return signup("acme", "employer")


@pytest.fixture(scope="function")
def other_employer(signup):
    return signup("globex", "employer")


@pytest.fixture(scope="function")
def worker_with_profile(worker):
    client, user = worker
    response = client.post("/api/profiles/worker", json=worker_profile_payload())
    assert response.status_code == 201, response.text
    return client, user


@pytest.fixture(scope="function")
def employer_with_profile(employer):
    client, user = employer
    response = client.post("/api/profiles/employer", json=employer_profile_payload())
    assert response.status_code == 201, response.text
    return client, user


@pytest.fixture(scope="function")
def posted_job(employer):
    """A job posted by ``employer``."""
    client, _ = employer
    response = client.post("/api/jobs", json=job_payload())
    assert response.status_code == 201, response.text
    return response.json()
