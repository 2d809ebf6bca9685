"""
Shared fixtures and helpers for the request_builder tests.
"""

import io
import logging
from unittest.mock import Mock

import pytest
import requests

from request_builder import HttpClient, reset_default_user_agent


def make_response(
    status_code=200,
    reason="OK",
    body=b"",
    headers=None,
    url="https://example.com/",
    raw=None,
):
    """Build a real requests.Response backed by an in-memory body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.raw = raw if raw is not None else io.BytesIO(body)
    response.headers.update(headers or {})
    response.url = url
    return response


@pytest.fixture(autouse=True)
def default_user_agent():
    """Restore the process-wide User-Agent after every test."""
    reset_default_user_agent()
    yield
    reset_default_user_agent()


@pytest.fixture
def transport():
    """Transport double returning a 200 response with an empty body."""
    mock_transport = Mock()
    mock_transport.send.side_effect = lambda method, url, **kwargs: make_response(url=url)
    return mock_transport


@pytest.fixture
def client(transport):
    return HttpClient(transport=transport)


@pytest.fixture
def package_logger():
    """Hand out the package logger and drop any handlers a test installed."""
    logger = logging.getLogger("request_builder")
    saved_handlers = logger.handlers[:]
    saved_level = logger.level
    yield logger
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)
