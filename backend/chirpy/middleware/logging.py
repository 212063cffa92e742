"""
Chirpy Backend — Access Log Middleware
=======================================

What:  Assigns the request ID and writes one `chirpy.access` line per request.
How:   The ID is resolved from X-Request-ID, published through
       `request_id_var` for RequestIDLogFilter, and echoed on the response.

Level by request:
    /api/healthz            → not logged (liveness checks)
    5xx                     → ERROR
    4xx                     → WARNING
    /app, /assets hits      → DEBUG (already tallied by the hit counter)
    everything else         → INFO

Request bodies are never logged (they can contain email addresses).
"""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from chirpy.middleware.request_id import REQUEST_ID_HEADER, request_id_var, resolve_request_id

logger = logging.getLogger("chirpy.access")

UNLOGGED_PATHS = frozenset({"/api/healthz"})
STATIC_MOUNTS = ("/app", "/assets")


def is_static_path(path: str) -> bool:
    return any(path == mount or path.startswith(mount + "/") for mount in STATIC_MOUNTS)


def access_log_level(path: str, status: int) -> Optional[int]:
    """Logging level for a finished request, or None to skip it."""
    if path in UNLOGGED_PATHS:
        return None
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    if is_static_path(path):
        return logging.DEBUG
    return logging.INFO


class AccessLogMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request_id_var.set(rid)
        request.state.request_id = rid

        started = time.perf_counter()
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid

        level = access_log_level(request.url.path, response.status_code)
        if level is not None and logger.isEnabledFor(level):
            client = request.client.host if request.client else "unknown"
            logger.log(
                level,
                "%s %s %d %.1fms from %s",
                request.method,
                request.url.path,
                response.status_code,
                (time.perf_counter() - started) * 1000,
                client,
            )
        return response
