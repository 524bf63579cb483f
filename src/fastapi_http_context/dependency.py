"""FastAPI integration — dependencies and exception handlers built on the helpers."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from fastapi_http_context.context import RequestContext
from fastapi_http_context.exceptions import (
    HttpAbort,
    LocalRequestRequired,
    Unauthorized,
)
from fastapi_http_context.helpers import (
    get_request_ip,
    is_local_request,
    set_unauthorized,
)

logger = logging.getLogger(__name__)


async def request_context(request: Request, response: Response) -> RequestContext:
    """Dependency yielding a RequestContext bound to the route's sub-response."""
    return RequestContext(request=request, response=response)


async def client_ip(request: Request) -> str | None:
    """Dependency resolving the originating client IP of the request."""
    return get_request_ip(RequestContext(request=request))


def require_local_request(
    *, detail: str = "Request must originate from the local machine"
) -> Callable[..., Awaitable[None]]:
    """Return a dependency rejecting requests not made from the server itself."""

    async def dependency(request: Request) -> None:
        if is_local_request(RequestContext(request=request)):
            return

        exc = LocalRequestRequired(detail)
        client_host = request.client.host if request.client else "unknown"
        logger.warning(
            "Local request check failed: %s attempted to access %s",
            client_host,
            request.url.path,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc

    return dependency


async def unauthorized_exception_handler(
    request: Request, exc: Unauthorized
) -> Response:
    """Render an Unauthorized abort as a 401 carrying a WWW-Authenticate challenge."""
    response = JSONResponse({"detail": exc.detail})
    set_unauthorized(
        RequestContext(request=request, response=response), scheme=exc.scheme
    )
    logger.debug("Challenging %s with %s", request.url.path, exc.scheme)
    return response


async def http_abort_exception_handler(request: Request, exc: HttpAbort) -> Response:
    """Render any other HttpAbort as a JSON error with its status code."""
    return JSONResponse({"detail": exc.detail}, status_code=exc.status_code)


def install_exception_handlers(app: Any) -> None:
    """Register the HttpAbort handlers on a FastAPI app.

    Handlers are looked up by exception MRO, so Unauthorized is rendered with
    its challenge while other aborts fall through to the generic handler.
    """
    from fastapi import FastAPI

    if not isinstance(app, FastAPI):
        return

    app.add_exception_handler(Unauthorized, unauthorized_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(HttpAbort, http_abort_exception_handler)  # type: ignore[arg-type]
