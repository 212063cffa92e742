"""
Chirpy Backend — Health Check Route
====================================

What:  Liveness check. Answers as long as the process is serving requests;
       it does not touch the database.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="/api", tags=["Health"])


@router.get(
    "/healthz",
    response_class=PlainTextResponse,
    summary="Liveness check",
)
async def readiness() -> PlainTextResponse:
    """Always `OK\\n` with text/plain; charset=utf-8."""
    return PlainTextResponse("OK\n", status_code=200)
