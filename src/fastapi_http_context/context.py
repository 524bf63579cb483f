"""HttpContext protocol and RequestContext, its Starlette-backed implementation."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from starlette.requests import Request
from starlette.responses import Response

from fastapi_http_context._types import IPAddress


@runtime_checkable
class HttpContext(Protocol):
    """Read/write capabilities the helpers need from a per-request context."""

    def get_remote_address(self) -> IPAddress | None: ...
    def get_local_address(self) -> IPAddress | None: ...
    def get_request_header(self, name: str) -> str | None: ...
    def get_response_header(self, name: str) -> str | None: ...
    def set_response_header(self, name: str, value: str) -> None: ...
    def set_status_code(self, status_code: int) -> None: ...


def _parse_address(host: str | None) -> IPAddress | None:
    """Parse an ASGI host value, treating hostnames and socket paths as absent."""
    if not host:
        return None
    try:
        return ipaddress.ip_address(host)
    except ValueError:
        return None


@dataclass
class RequestContext:
    """Adapter exposing a Starlette request and its response as an HttpContext.

    ``response`` is the object that outgoing headers and status are written
    to. Inside a FastAPI route this should be the injected ``Response``
    parameter so that changes are merged into the final response. When it is
    omitted, one is created on the first write.
    """

    request: Request
    response: Response | None = None

    def get_remote_address(self) -> IPAddress | None:
        client = self.request.client
        if client is None:
            return None
        return _parse_address(client.host)

    def get_local_address(self) -> IPAddress | None:
        server = self.request.scope.get("server")
        if not server:
            return None
        return _parse_address(server[0])

    def get_request_header(self, name: str) -> str | None:
        values = self.request.headers.getlist(name)
        if not values:
            return None
        return ",".join(values)

    def get_response_header(self, name: str) -> str | None:
        if self.response is None:
            return None
        return self.response.headers.get(name)

    def set_response_header(self, name: str, value: str) -> None:
        self._ensure_response().headers[name] = value

    def set_status_code(self, status_code: int) -> None:
        self._ensure_response().status_code = status_code

    def _ensure_response(self) -> Response:
        if self.response is None:
            self.response = Response()
        return self.response
