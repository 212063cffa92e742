"""
Chirpy Backend — Admin Route Handlers
======================================

What:  Hit-count metrics and the development-only reset.

Reset semantics:
    1. Platform gate first. Anything but PLATFORM=dev → 403, nothing changed.
    2. Hit counter is set to zero.
    3. All users are deleted.

    Steps 2 and 3 are not transactional. If the delete fails the response
    is a 500 and the counter stays at zero; callers must treat a 500 here
    as leaving an unspecified mix of the two effects.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.context import ApiContext, get_api_context
from chirpy.database import get_db_session
from chirpy.schemas.common import ErrorResponse, MessageResponse
from chirpy.services.user_repository import user_repository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Admin"])

METRICS_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <title>Chirpy Metrics</title>
  </head>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {count} times!</p>
  </body>
</html>"""


@router.get(
    "/admin/metrics",
    response_class=HTMLResponse,
    summary="Static-file hit count (HTML)",
)
async def admin_metrics(ctx: ApiContext = Depends(get_api_context)) -> HTMLResponse:
    return HTMLResponse(METRICS_TEMPLATE.format(count=ctx.hit_counter.value()))


@router.get(
    "/api/metrics",
    response_class=PlainTextResponse,
    summary="Static-file hit count (plain text)",
)
async def api_metrics(ctx: ApiContext = Depends(get_api_context)) -> PlainTextResponse:
    return PlainTextResponse(f"Hits: {ctx.hit_counter.value()}\n")


@router.post(
    "/admin/reset",
    response_model=MessageResponse,
    responses={
        403: {"description": "PLATFORM is not dev", "model": ErrorResponse},
        500: {"description": "Users could not be deleted", "model": ErrorResponse},
    },
    summary="Reset hit counter and delete all users (dev only)",
)
async def reset(
    ctx: ApiContext = Depends(get_api_context),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    ctx.require_dev_platform()

    ctx.hit_counter.reset()
    deleted = await user_repository.delete_all(db)

    logger.warning("Admin reset: hit counter cleared, %d user(s) deleted", deleted)
    return MessageResponse(message="Counter reset and users deleted")
