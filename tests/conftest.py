"""Shared pytest fixtures for fastapi-http-context tests."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from typing import Any

import pytest
from starlette.requests import Request


@dataclass
class FakeHttpContext:
    """In-memory HttpContext for exercising the helpers without a framework."""

    remote: str | None = None
    local: str | None = None
    request_headers: dict[str, str] = field(default_factory=dict)
    response_headers: dict[str, str] = field(default_factory=dict)
    status_code: int = 200

    def get_remote_address(self) -> Any:
        return ipaddress.ip_address(self.remote) if self.remote else None

    def get_local_address(self) -> Any:
        return ipaddress.ip_address(self.local) if self.local else None

    def get_request_header(self, name: str) -> str | None:
        return self.request_headers.get(name)

    def get_response_header(self, name: str) -> str | None:
        return self.response_headers.get(name)

    def set_response_header(self, name: str, value: str) -> None:
        self.response_headers[name] = value

    def set_status_code(self, status_code: int) -> None:
        self.status_code = status_code


@pytest.fixture
def make_context() -> Any:
    """Factory for creating FakeHttpContext objects."""

    def _make(**kwargs: Any) -> FakeHttpContext:
        return FakeHttpContext(**kwargs)

    return _make


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects with connection info."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: list[tuple[str, str]] | dict[str, str] | None = None,
        client: tuple[str, int] | None = None,
        server: tuple[str, int | None] | None = None,
    ) -> Request:
        items = headers.items() if isinstance(headers, dict) else (headers or [])
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": [(k.lower().encode(), v.encode()) for k, v in items],
            "root_path": "",
            "client": client,
            "server": server,
        }
        return Request(scope)

    return _make
