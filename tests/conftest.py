"""
Pytest fixtures for the PayLane client tests.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from paylane_client import ClientConfig, RestClient


def make_response(status_code=200, body=None):
    """Build a real :class:`requests.Response` carrying ``body``."""
    response = requests.Response()
    response.status_code = status_code
    if body is None:
        body = {}
    if isinstance(body, (bytes, str)):
        response._content = body.encode("utf-8") if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    return response


def sent_request(session):
    """Return ``(method, url, kwargs)`` of the last request made on ``session``."""
    args, kwargs = session.request.call_args
    return args[0], args[1], kwargs


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep real PAYLANE_* variables out of the tests."""
    for key in (
        "PAYLANE_API_URL",
        "PAYLANE_USERNAME",
        "PAYLANE_PASSWORD",
        "PAYLANE_SSL_VERIFY",
        "PAYLANE_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def session():
    """Mock session answering every request with ``{"success": true}``."""
    mock_session = MagicMock(spec=requests.Session)
    mock_session.request.return_value = make_response(200, {"success": True})
    return mock_session


@pytest.fixture
def config():
    return ClientConfig(
        username="merchant",
        password="secret",
        api_url="https://sandbox.paylane.test/rest/",
    )


@pytest.fixture
def client(config, session):
    return RestClient(config, session=session)
