"""Tests for health check endpoint."""

import pytest
import json
from unittest.mock import Mock
from http.server import BaseHTTPRequestHandler
from io import BytesIO

from api.health import handler
from tests.utils.helpers import MockSocket


def _handler(raw_request: bytes) -> handler:
    h = handler(MockSocket(raw_request), ("127.0.0.1", 8000), None)
    h.wfile = BytesIO()
    h.send_response = Mock()
    h.send_header = Mock()
    h.end_headers = Mock()
    return h


@pytest.mark.unit
def test_health_handler_class():
    """Test that handler is a BaseHTTPRequestHandler subclass."""
    assert issubclass(handler, BaseHTTPRequestHandler)


@pytest.mark.unit
def test_health_get_request():
    """Test GET request to health endpoint."""
    h = _handler(b"GET /api/health HTTP/1.1\r\n\r\n")

    h.do_GET()

    assert h.send_response.call_args[0][0] == 200
    h.wfile.seek(0)
    response_data = json.loads(h.wfile.read().decode('utf-8'))

    assert response_data["status"] == "ok"
    assert response_data["service"] == "tasktrack-backend"


@pytest.mark.unit
def test_health_post_request():
    """Test POST request to health endpoint."""
    h = _handler(b"POST /api/health HTTP/1.1\r\n\r\n")

    h.do_POST()

    assert h.send_response.called
    h.wfile.seek(0)
    response_data = json.loads(h.wfile.read().decode('utf-8'))

    assert response_data["status"] == "ok"
