"""Pytest configuration and fixtures for header-doctor tests."""

import pytest

from header_doctor.model.headers import HttpHeaders


class ResponseHeadBuilder:
    """Builds a raw HTTP response head, one 'Name: value' line at a time."""

    def __init__(self, status_line: str = "HTTP/1.1 200 OK") -> None:
        self._lines = [status_line]

    def add(self, name: str, value: str) -> "ResponseHeadBuilder":
        self._lines.append(f"{name}: {value}")
        return self

    def raw(self) -> str:
        return "\r\n".join(self._lines) + "\r\n\r\n"

    def build(self) -> HttpHeaders:
        return HttpHeaders.from_raw(self.raw())


@pytest.fixture
def head():
    """Factory for a fresh response head builder."""
    return ResponseHeadBuilder


@pytest.fixture
def headers_with():
    """Headers holding a single 'Name: value' line (or none for name=None)."""
    def _build(name: str | None = None, value: str = "") -> HttpHeaders:
        builder = ResponseHeadBuilder()
        if name is not None:
            builder.add(name, value)
        return builder.build()
    return _build


@pytest.fixture
def context():
    """Fresh per-pass context."""
    return {}


@pytest.fixture
def sample_response_head():
    """Raw response head with a mix of good and bad headers."""
    return (
        "HTTP/1.1 200 OK\r\n"
        "Content-Type: text/html\r\n"
        "Cache-Control: private, no-store, no-cache, must-revalidate\r\n"
        "Pragma: no-cache\r\n"
        "Set-Cookie: session=abc; Secure; HttpOnly\r\n"
        "Set-Cookie: tracking=xyz\r\n"
        "Strict-Transport-Security: max-age=31536000; includeSubDomains\r\n"
        "X-Content-Type-Options: nosniff\r\n"
        "Server: nginx\r\n"
        "\r\n"
        "<html></html>"
    )
