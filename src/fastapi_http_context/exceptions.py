"""HttpContextException hierarchy for controlled request aborts."""

from __future__ import annotations


class HttpContextException(Exception):
    """Base for all fastapi-http-context exceptions."""


class HttpAbort(HttpContextException):
    """Controlled abort with HTTP status code and detail."""

    def __init__(self, detail: str, *, status_code: int = 400) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class Unauthorized(HttpAbort):
    """Request must authenticate (401) using the given challenge scheme."""

    def __init__(
        self, detail: str = "Not authenticated", *, scheme: str = "Basic"
    ) -> None:
        super().__init__(detail, status_code=401)
        self.scheme = scheme


class LocalRequestRequired(HttpAbort):
    """Request did not originate from the local machine (403)."""

    def __init__(
        self, detail: str = "Request must originate from the local machine"
    ) -> None:
        super().__init__(detail, status_code=403)
