"""Test helper functions."""

import json
from io import BytesIO
from typing import Any, Dict, Optional


# 2023-11-14 22:13:20 UTC in nanoseconds
T0 = 1_700_000_000_000_000_000
MINUTE_NS = 60_000_000_000

ALICE = "2vxsx-fae-alice-principal"
BOB = "rrkah-fqaaa-bob-principal"


class MockSocket:
    """Socket stand-in feeding a raw HTTP request and capturing the reply."""

    def __init__(self, raw_request: bytes):
        self.raw_request = raw_request
        self.sent = b""

    def makefile(self, *args, **kwargs):
        return BytesIO(self.raw_request)

    def sendall(self, data):
        self.sent += bytes(data)

    def close(self):
        pass


def build_post_request(
    path: str = "/api/tasks",
    body: Any = None,
    headers: Optional[Dict[str, str]] = None
) -> bytes:
    """Build a raw HTTP POST request with a JSON body."""
    raw_body = json.dumps(body).encode("utf-8") if body is not None else b""
    lines = [f"POST {path} HTTP/1.1", f"Content-Length: {len(raw_body)}", "Content-Type: application/json"]
    for name, value in (headers or {}).items():
        lines.append(f"{name}: {value}")
    return ("\r\n".join(lines) + "\r\n\r\n").encode("utf-8") + raw_body


def parse_response(raw: bytes) -> tuple[int, Dict[str, Any]]:
    """Split a captured HTTP response into (status code, JSON body)."""
    head, _, body = raw.partition(b"\r\n\r\n")
    status_line = head.split(b"\r\n", 1)[0].decode("utf-8")
    status = int(status_line.split(" ")[1])
    return status, json.loads(body.decode("utf-8")) if body else {}
