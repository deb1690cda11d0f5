"""
Pytest configuration and fixtures for ptl-client tests.
"""

import json
import logging
from unittest.mock import Mock, patch

import pytest
import requests

from ptl_client.models import Credentials, RepoContext, Settings

TEST_ENDPOINT = "http://api.pushto.test/"

CLEARED_ENV = [
    "ENDPOINT",
    "PTL_CONFIG_DIR",
    "PTL_ACCESS_KEY",
    "PTL_SECRET_KEY",
    "GITHUB_EVENT_NAME",
    "GITHUB_REF_TYPE",
    "GITHUB_REF_NAME",
    "GITHUB_WORKSPACE",
]


def make_response(status_code=200, json_body=None, text=None):
    """Build a real requests.Response with a canned body."""
    response = requests.Response()
    response.status_code = status_code
    if json_body is not None:
        text = json.dumps(json_body)
    response._content = (text or "").encode("utf-8")
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    return response


class FakeApi:
    """Routes (method, path) to canned responses and records every call."""

    def __init__(self, endpoint=TEST_ENDPOINT):
        self.endpoint = endpoint
        self.routes = {}
        self.calls = []

    def add(self, method, path, status_code=200, json_body=None, text=None, exc=None):
        self.routes[(method, path)] = exc or make_response(status_code, json_body, text)

    def __call__(self, method, url, **kwargs):
        assert url.startswith(self.endpoint), url
        path = url[len(self.endpoint):]
        self.calls.append((method, path, kwargs))
        try:
            outcome = self.routes[(method, path)]
        except KeyError:
            raise AssertionError(f"Unexpected request: {method} {path}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def methods(self):
        return [method for method, _, _ in self.calls]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CI variables of the machine running the tests out of the way."""
    for name in CLEARED_ENV:
        monkeypatch.delenv(name, raising=False)
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest.fixture
def mock_session(fake_api):
    """Mock session whose requests go to the fake API."""
    session = Mock()
    session.headers = {}
    session.request.side_effect = fake_api
    return session


@pytest.fixture
def patched_requests(fake_api):
    """Send every requests.Session request to the fake API."""
    with patch.object(requests.Session, "request", side_effect=fake_api) as mock_request:
        yield mock_request


@pytest.fixture
def credentials():
    return Credentials(access_key="ak-test", secret_key="sk-test")


@pytest.fixture
def app_dir(tmp_path, monkeypatch):
    """Checked out project with a manifest and one service build path.

    The working directory is the checkout, as it is in CI.
    """
    project = tmp_path / "project"
    (project / "app" / ".git").mkdir(parents=True)
    (project / "app" / "index.js").write_text("console.log('hi');\n")
    (project / "app" / ".git" / "config").write_text("[core]\n")
    (project / "ptl.yml").write_text(
        "name: demo\n"
        "services:\n"
        "  web:\n"
        "    build: ./app\n"
        "  redis:\n"
        "    image: redis:7\n"
    )
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def make_settings(credentials, app_dir):
    """Factory for Settings pointing at the test project."""

    def _make(**overrides):
        values = {
            "credentials": credentials,
            "endpoint": TEST_ENDPOINT,
            "event_name": "push",
            "repo_context": RepoContext(type="branch", name="main"),
            "manifest_candidates": [app_dir / "ptl.yml"],
        }
        values.update(overrides)
        return Settings(**values)

    return _make
