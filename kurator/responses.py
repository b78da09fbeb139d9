"""
Kurator Backend — Error Envelope
==================================

What:  Builds the JSON error envelope shared by every error path.
Who:   The exception handlers in main.py and RequestLoggingMiddleware,
       which answers unexpected exceptions itself (see middleware/logging.py).
Why a separate module: main.py imports the middleware, so the middleware
       cannot import from main.py.

Envelope:
    {"ok": false, "code": 404, "status": "Not Found", "message": "Not Found"}
"""

from http import HTTPStatus
from typing import Mapping, Optional

from fastapi.responses import JSONResponse

from kurator.schemas.word import ErrorResponse


def error_response(
    code: int,
    message: str,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    """Build the JSON error envelope for an HTTP status code."""
    body = ErrorResponse(code=code, status=HTTPStatus(code).phrase, message=message)
    return JSONResponse(status_code=code, content=body.model_dump(), headers=headers)


def internal_error_response() -> JSONResponse:
    """Generic 500; the cause is logged by the caller, never returned."""
    return error_response(500, HTTPStatus.INTERNAL_SERVER_ERROR.phrase)
