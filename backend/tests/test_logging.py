"""
Chirpy Backend — Logging Tests
===============================

What we test:
    ✅ Request ID resolution (client-supplied vs generated)
    ✅ RequestIDLogFilter stamps records from the request context
    ✅ Access log levels: health checks skipped, static hits at DEBUG
    ✅ Error-handler lines carry the same request ID as the access line
"""

import logging

import pytest

from chirpy.main import LOG_FORMAT
from chirpy.middleware.logging import access_log_level, is_static_path
from chirpy.middleware.request_id import (
    RequestIDLogFilter,
    request_id_var,
    resolve_request_id,
)


def make_record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("chirpy.test", logging.INFO, __file__, 1, msg, None, None)


def access_records(caplog):
    return [r for r in caplog.records if r.name == "chirpy.access"]


class TestResolveRequestId:

    def test_keeps_client_id(self):
        assert resolve_request_id("abc123") == "abc123"

    @pytest.mark.parametrize("supplied", [None, "", "bad\nid", "x" * 65])
    def test_generates_when_missing_or_unsafe(self, supplied):
        rid = resolve_request_id(supplied)
        assert rid != supplied
        assert len(rid) == 8


class TestRequestIDLogFilter:

    def setup_method(self):
        self.log_filter = RequestIDLogFilter()

    def test_outside_request(self):
        record = make_record()
        assert self.log_filter.filter(record) is True
        assert record.request_id == "-"

    def test_uses_current_request_id(self):
        token = request_id_var.set("req-7")
        try:
            record = make_record()
            self.log_filter.filter(record)
        finally:
            request_id_var.reset(token)

        assert record.request_id == "req-7"
        assert "[req-7] chirpy.test: hello" in logging.Formatter(LOG_FORMAT).format(record)

    def test_explicit_request_id_wins(self):
        record = make_record()
        record.request_id = "given"
        self.log_filter.filter(record)
        assert record.request_id == "given"


class TestAccessLogLevel:

    @pytest.mark.parametrize(
        "path, status, expected",
        [
            ("/api/healthz", 200, None),
            ("/api/healthz", 503, None),
            ("/api/users", 201, logging.INFO),
            ("/api/users", 400, logging.WARNING),
            ("/api/users", 500, logging.ERROR),
            ("/app", 200, logging.DEBUG),
            ("/app/", 200, logging.DEBUG),
            ("/assets/logo.png", 200, logging.DEBUG),
            ("/app/nope.html", 404, logging.WARNING),
            ("/application", 404, logging.WARNING),
            ("/admin/metrics", 200, logging.INFO),
        ],
    )
    def test_levels(self, path, status, expected):
        assert access_log_level(path, status) == expected

    def test_static_prefix_is_whole_segment(self):
        assert is_static_path("/app/index.html")
        assert not is_static_path("/apple")


class TestAccessLogMiddleware:

    @pytest.mark.asyncio
    async def test_static_hits_logged_at_debug(self, test_client, caplog):
        caplog.set_level(logging.DEBUG, logger="chirpy.access")

        await test_client.get("/app/")

        (record,) = access_records(caplog)
        assert record.levelno == logging.DEBUG
        assert record.getMessage().startswith("GET /app/ 200 ")

    @pytest.mark.asyncio
    async def test_api_requests_logged_at_info(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="chirpy.access")

        await test_client.get("/app/")
        await test_client.post("/api/validate_chirp", json={"body": "hi"})

        (record,) = access_records(caplog)
        assert record.levelno == logging.INFO
        assert record.getMessage().startswith("POST /api/validate_chirp 200 ")

    @pytest.mark.asyncio
    async def test_health_checks_not_logged(self, test_client, caplog):
        caplog.set_level(logging.DEBUG, logger="chirpy.access")

        response = await test_client.get("/api/healthz")

        assert response.headers["X-Request-ID"]
        assert access_records(caplog) == []

    @pytest.mark.asyncio
    async def test_error_lines_share_request_id(self, test_client, caplog):
        caplog.set_level(logging.DEBUG)
        caplog.handler.addFilter(RequestIDLogFilter())

        response = await test_client.post(
            "/api/validate_chirp",
            json={"body": "a" * 141},
            headers={"X-Request-ID": "trace-42"},
        )

        assert response.headers["X-Request-ID"] == "trace-42"
        rejected = [r for r in caplog.records if r.getMessage().startswith("Rejected:")]
        assert [r.request_id for r in rejected] == ["trace-42"]
        assert [r.request_id for r in access_records(caplog)] == ["trace-42"]
