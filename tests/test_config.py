"""Tests for application settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from tasktracker.core.logging_setup import configure_logging
from tasktracker.main import create_app
from tasktracker.services.id_policy import IdPolicy

from .conftest import make_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("ID_POLICY", "HOST", "PORT", "API_V1_PREFIX"):
            monkeypatch.delenv(name, raising=False)
        settings = make_settings()

        assert settings.ID_POLICY is IdPolicy.REUSED_INTEGER
        assert settings.HOST == "127.0.0.1"
        assert settings.PORT == 3000
        assert settings.API_V1_PREFIX == "/api/v1"
        assert settings.base_url == "http://127.0.0.1:3000"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ID_POLICY", "unique_random")
        monkeypatch.setenv("port", "8080")
        settings = make_settings()

        assert settings.ID_POLICY is IdPolicy.UNIQUE_RANDOM
        assert settings.PORT == 8080

    def test_invalid_id_policy_fails_fast(self):
        with pytest.raises(ValidationError):
            make_settings(ID_POLICY="sequential")


def test_app_store_uses_configured_policy():
    app = create_app(make_settings(ID_POLICY="unique_random"))
    assert app.state.task_store.id_policy is IdPolicy.UNIQUE_RANDOM


def test_custom_api_prefix():
    from fastapi.testclient import TestClient

    app = create_app(make_settings(API_V1_PREFIX="/v2"))
    with TestClient(app) as client:
        assert client.get("/v2/tasks").status_code == 200
        assert client.get("/api/v1/tasks").status_code == 404


@pytest.mark.parametrize(
    "level,expected",
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("trace", logging.INFO), (logging.ERROR, logging.ERROR)],
)
def test_configure_logging_levels(level, expected):
    configure_logging(level)
    assert logging.getLogger("tasktracker").level == expected
