"""Shared fixtures for the Jira client tests."""

from typing import Callable, List

import httpx
import pytest

from jira_lookup.core.config import Settings
from jira_lookup.services.jira import JiraClient

JIRA_HOST = "https://jira.example.com"
API_BASE = JIRA_HOST + "/rest/api/latest"

_ENV_KEYS = (
    "JIRA_HOST",
    "API_BASE_PATH",
    "JIRA_USERNAME",
    "JIRA_PASSWORD",
    "REQUEST_TIMEOUT_MS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of Settings."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    def _make(**overrides) -> Settings:
        values = {"JIRA_HOST": JIRA_HOST}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request):
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_client(settings):
    """Build a JiraClient whose requests are answered by *handler*."""

    def _make(handler, client_settings: Settings = None, **kwargs):
        transport = RecordingTransport(handler)
        client = JiraClient(client_settings or settings, transport=transport, **kwargs)
        return client, transport

    return _make
