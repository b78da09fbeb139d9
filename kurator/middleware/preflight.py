"""
Kurator Backend — OPTIONS Catch-All
=====================================

What:  Answers every OPTIONS request with an empty 200, whatever the path.
How:   Plain OPTIONS requests are answered right away, before routing.
       Browser preflights (carrying Access-Control-Request-Method) are
       passed on to CORSMiddleware, and only the CORS headers of its reply
       are kept on an empty 200.

Why middleware and not a catch-all OPTIONS route:
    Starlette reports 405 instead of 404 for an unknown path as soon as any
    route matches that path with another method; an OPTIONS "/{path:path}"
    route would turn every unknown GET into a 405.

Why rewrite the CORS reply instead of replacing CORSMiddleware:
    CORSMiddleware already decides which origins, methods and headers are
    allowed. Its preflight reply has an "OK" body, and a plain-text 400 for
    a disallowed origin. Keeping its headers on an empty 200 leaves the
    allow/deny decision to the browser: without Access-Control-Allow-Origin
    the browser blocks the real request.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

PREFLIGHT_HEADER = "access-control-request-method"


def _is_cors_header(name: str) -> bool:
    return name.startswith("access-control-") or name == "vary"


class PreflightMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method != "OPTIONS":
            return await call_next(request)

        if PREFLIGHT_HEADER not in request.headers:
            return Response(status_code=200)

        cors_reply = await call_next(request)
        headers = {
            name: value
            for name, value in cors_reply.headers.items()
            if _is_cors_header(name)
        }
        return Response(status_code=200, headers=headers)
