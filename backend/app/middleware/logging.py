"""
MemoBoard Backend — Access Log Middleware
===========================================

What:  One access-log line per API request.
How:   Times the request, then logs method, path (with query string, so
       page/size/keyword show up for list and search calls), status,
       duration and the request ID.
When:  Runs inside RequestIDMiddleware, so the request ID is already set.

Level follows the status code: 5xx → ERROR, 4xx → WARNING, else INFO.
A degraded list response is still a 200; the service logs its failure.
Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("memoboard.access")


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log for /api routes; probes and docs pass through unlogged."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not request.url.path.startswith("/api"):
            return await call_next(request)

        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Unhandled errors are answered by ServerErrorMiddleware as a 500
            logger.error(
                "%s %s 500 %.1fms [%s]",
                request.method, target, (time.perf_counter() - started) * 1000, request_id_var.get(""),
            )
            raise

        logger.log(
            _level_for(response.status_code),
            "%s %s %d %.1fms [%s]",
            request.method,
            target,
            response.status_code,
            (time.perf_counter() - started) * 1000,
            request_id_var.get(""),
        )
        return response
