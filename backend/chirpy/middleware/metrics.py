"""
Chirpy Backend — Hit Counter Middleware
========================================

What:  Counts every request that reaches the static-file app.
How:   Wraps the StaticFiles ASGI app mounted at /app:

           app.mount("/app", HitCounterMiddleware(StaticFiles(...), hit_counter=...))

       The count is taken before the file is served, so misses (404) are
       counted too. Requests outside /app never pass through here.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from chirpy.services.hit_counter import HitCounter

logger = logging.getLogger(__name__)


class HitCounterMiddleware(BaseHTTPMiddleware):
    """Increment the shared HitCounter for each request to the wrapped app."""

    def __init__(self, app: ASGIApp, hit_counter: HitCounter):
        super().__init__(app)
        self.hit_counter = hit_counter

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        hits = self.hit_counter.increment()
        logger.debug("Static hit #%d: %s", hits, request.url.path)
        return await call_next(request)
