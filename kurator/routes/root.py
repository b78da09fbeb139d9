"""
Kurator Backend — Root Route
==============================

GET / answers with a fixed plain-text line. It touches nothing else, so it
doubles as the service's only liveness endpoint.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Root"])


@router.get("/", response_class=PlainTextResponse, summary="API root")
async def api_root() -> str:
    return "API root."
