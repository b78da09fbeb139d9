"""
Kurator Backend — Request Logging Middleware
==============================================

What:  One access log line per HTTP request, and the 500 envelope for
       unexpected exceptions.
How:   Measures the time spent below this middleware and logs method, path,
       status and duration on the "kurator.access" logger, with the request
       ID for correlation. Log level follows the status class:
       5xx → ERROR, 4xx → WARNING, everything else → INFO.

Why unexpected exceptions are answered here:
    FastAPI runs a handler registered for Exception in Starlette's
    ServerErrorMiddleware, which sits outside every added middleware. A 500
    built there has no X-Request-ID, no CORS headers (a cross-origin client
    cannot read it) and never reaches this access log. Catching the
    exception here keeps the 500 inside the stack.

Request bodies are never logged (they hold user content).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from kurator.middleware.request_id import request_id_var
from kurator.responses import internal_error_response

logger = logging.getLogger("kurator.access")
error_logger = logging.getLogger("kurator.errors")


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Duration covers everything below this middleware: body parsing, the
    MongoDB round trip and response serialization.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")

        try:
            response = await call_next(request)
        except Exception as exc:
            # Full traceback server-side only; the client gets a generic 500
            error_logger.error("[%s] Unhandled error: %s", rid, exc, exc_info=exc)
            response = internal_error_response()

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
