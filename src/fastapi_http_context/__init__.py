"""FastAPI HTTP Context - request context helpers for FastAPI and Starlette."""

from fastapi_http_context.context import HttpContext, RequestContext
from fastapi_http_context.dependency import (
    client_ip,
    http_abort_exception_handler,
    install_exception_handlers,
    request_context,
    require_local_request,
    unauthorized_exception_handler,
)
from fastapi_http_context.exceptions import (
    HttpAbort,
    HttpContextException,
    LocalRequestRequired,
    Unauthorized,
)
from fastapi_http_context.helpers import (
    AUTHORIZATION,
    CF_CONNECTING_IP,
    WWW_AUTHENTICATE,
    X_FORWARDED_FOR,
    get_request_ip,
    is_local_request,
    set_unauthorized,
)

__all__ = [
    "AUTHORIZATION",
    "CF_CONNECTING_IP",
    "HttpAbort",
    "HttpContext",
    "HttpContextException",
    "LocalRequestRequired",
    "RequestContext",
    "Unauthorized",
    "WWW_AUTHENTICATE",
    "X_FORWARDED_FOR",
    "client_ip",
    "get_request_ip",
    "http_abort_exception_handler",
    "install_exception_handlers",
    "is_local_request",
    "request_context",
    "require_local_request",
    "set_unauthorized",
    "unauthorized_exception_handler",
]
