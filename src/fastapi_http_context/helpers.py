"""Request context helpers — local request detection, client IP, 401 challenge."""

from __future__ import annotations

from ipaddress import IPv6Address

from fastapi_http_context._types import IPAddress
from fastapi_http_context.context import HttpContext

CF_CONNECTING_IP = "CF-Connecting-IP"
X_FORWARDED_FOR = "X-Forwarded-For"
WWW_AUTHENTICATE = "WWW-Authenticate"
AUTHORIZATION = "Authorization"

HTTP_401_UNAUTHORIZED = 401


def _is_loopback(address: IPAddress) -> bool:
    if isinstance(address, IPv6Address) and address.ipv4_mapped is not None:
        return address.ipv4_mapped.is_loopback
    return address.is_loopback


def is_local_request(context: HttpContext) -> bool:
    """Return True when the request originated from the server's own machine.

    A request is local when neither connection address is known, when the
    remote address equals the local address, or when the remote address is a
    loopback address. A missing remote address with a known local address is
    not local.
    """
    remote = context.get_remote_address()
    local = context.get_local_address()

    if remote is None:
        return local is None

    return remote == local or _is_loopback(remote)


def get_request_ip(context: HttpContext | None) -> str | None:
    """Return the client IP from Cloudflare or proxy headers, else the peer.

    ``CF-Connecting-IP`` is returned verbatim. For ``X-Forwarded-For`` the
    first entry is returned, stripped of whitespace. Neither value is
    validated as an IP address and both are client-controlled unless a
    trusted proxy overwrites them.
    """
    if context is None:
        return None

    cf_ip = context.get_request_header(CF_CONNECTING_IP)
    if cf_ip is not None:
        return cf_ip

    forwarded = context.get_request_header(X_FORWARDED_FOR)
    if forwarded is not None:
        return forwarded.split(",", 1)[0].strip()

    remote = context.get_remote_address()
    if remote is None:
        return None
    return str(remote)


def set_unauthorized(context: HttpContext, *, scheme: str = "Basic") -> None:
    """Mark the response as 401 with a challenge, keeping any existing one."""
    if context.get_response_header(WWW_AUTHENTICATE) is None:
        context.set_response_header(WWW_AUTHENTICATE, scheme)

    context.set_response_header(AUTHORIZATION, "")
    context.set_status_code(HTTP_401_UNAUTHORIZED)
