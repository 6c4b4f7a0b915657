"""ASGI middleware that opens a logging turn for each HTTP request."""

from __future__ import annotations

import time
import uuid

from starlette.datastructures import Headers, MutableHeaders

from book_concierge.core.logging import get_logger, turn_context

logger = get_logger(__name__)

CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")
# Google's front end adds this to webhook calls: "<trace-id>/<span-id>;o=1"
CLOUD_TRACE_HEADER = "X-Cloud-Trace-Context"


def resolve_correlation_id(headers: Headers) -> str:
    """Reuse a caller-supplied id, then Google's trace id, else mint one."""
    for name in CORRELATION_HEADERS:
        if headers.get(name):
            return headers[name]
    trace = headers.get(CLOUD_TRACE_HEADER, "").split("/", 1)[0]
    return trace or uuid.uuid4().hex


class CorrelationIdMiddleware:  # pylint: disable=too-few-public-methods
    """Tag the request's logs with a correlation id and echo it back."""

    def __init__(self, app) -> None:  # type: ignore[no-untyped-def]
        self.app = app

    async def __call__(self, scope, receive, send):  # type: ignore[no-untyped-def]
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        correlation_id = resolve_correlation_id(Headers(scope=scope))
        client = scope.get("client")
        status_code = 500
        started = time.perf_counter()

        async def send_with_correlation(message):  # type: ignore[no-untyped-def]
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                headers = MutableHeaders(scope=message)
                for name in CORRELATION_HEADERS:
                    headers.setdefault(name, correlation_id)
            await send(message)

        with turn_context(correlation_id=correlation_id, client_ip=client[0] if client else None):
            try:
                await self.app(scope, receive, send_with_correlation)
            finally:
                logger.info(
                    "request completed",
                    extra={
                        "method": scope["method"],
                        "path": scope["path"],
                        "status_code": status_code,
                        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
                    },
                )


__all__ = ["CORRELATION_HEADERS", "CorrelationIdMiddleware", "resolve_correlation_id"]
