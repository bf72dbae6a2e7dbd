"""Shared fixtures for the task tracker tests."""

import pytest
from fastapi.testclient import TestClient

from tasktracker.core.config import Settings
from tasktracker.main import create_app
from tasktracker.services.id_policy import IdPolicy
from tasktracker.services.task_store import TaskStore


def make_settings(**overrides) -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, **overrides)


@pytest.fixture
def store() -> TaskStore:
    return TaskStore(IdPolicy.REUSED_INTEGER)


@pytest.fixture
def uuid_store() -> TaskStore:
    return TaskStore(IdPolicy.UNIQUE_RANDOM)


@pytest.fixture
def client() -> TestClient:
    """Client for an app using the reused-integer id policy."""
    app = create_app(make_settings(ID_POLICY=IdPolicy.REUSED_INTEGER))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def uuid_client() -> TestClient:
    """Client for an app using the unique-random id policy."""
    app = create_app(make_settings(ID_POLICY=IdPolicy.UNIQUE_RANDOM))
    with TestClient(app) as test_client:
        yield test_client
