"""
Chirpy Backend — Request ID Context
====================================

What:  The per-request ID shared by every log line of one request.
How:   AccessLogMiddleware stores the ID in `request_id_var`;
       RequestIDLogFilter, installed on the root handler by setup_logging(),
       copies it onto each LogRecord as `%(request_id)s`. Loggers never
       have to read the ContextVar themselves.

Outside a request (startup, shutdown) the ID is "-".
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Optional

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


def resolve_request_id(supplied: Optional[str]) -> str:
    """
    Keep a client-supplied ID if it is safe to echo into logs and headers,
    otherwise generate a short one.
    """
    if supplied and len(supplied) <= MAX_REQUEST_ID_LENGTH and supplied.isprintable():
        return supplied
    return uuid.uuid4().hex[:8]


class RequestIDLogFilter(logging.Filter):
    """Stamp `record.request_id` from the current request context."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = request_id_var.get()
        return True
