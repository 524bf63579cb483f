"""
Basic usage example of fastapi-http-context.

Demonstrates:
- Resolving the client IP behind Cloudflare or a reverse proxy
- Restricting an endpoint to requests made from the server itself
- Answering with a 401 Basic challenge
"""

import secrets

from fastapi import Depends, FastAPI

from fastapi_http_context import (
    RequestContext,
    Unauthorized,
    client_ip,
    install_exception_handlers,
    request_context,
    require_local_request,
    set_unauthorized,
)

app = FastAPI(title="Basic HTTP Context Example")
install_exception_handlers(app)

# Mock credentials (replace with real storage)
API_TOKEN = "s3cret"


@app.get("/whoami")
async def whoami(ip: str | None = Depends(client_ip)):
    """Echo the originating client address."""
    return {"ip": ip}


@app.get("/internal/health", dependencies=[Depends(require_local_request())])
async def internal_health():
    """Only reachable from the server's own machine."""
    return {"status": "ok"}


@app.get("/login")
async def login(ctx: RequestContext = Depends(request_context)):
    """Challenge the client unless it sent the expected token."""
    token = ctx.get_request_header("X-Token") or ""
    if not secrets.compare_digest(token, API_TOKEN):
        set_unauthorized(ctx)
        return {"detail": "Not authenticated"}
    return {"detail": "Welcome"}


@app.get("/reports")
async def reports(ctx: RequestContext = Depends(request_context)):
    """Same check, expressed by raising Unauthorized."""
    if ctx.get_request_header("X-Token") != API_TOKEN:
        raise Unauthorized(scheme='Basic realm="reports"')
    return {"reports": []}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl http://localhost:8000/whoami
    # curl -H "X-Forwarded-For: 1.2.3.4, 10.0.0.1" http://localhost:8000/whoami
    # curl http://localhost:8000/internal/health
    # curl -i http://localhost:8000/login
    # curl -i -H "X-Token: s3cret" http://localhost:8000/login
