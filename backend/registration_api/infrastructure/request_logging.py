"""Request Logging — one access log line per HTTP request.

Invariants:
    - Logged after the response is produced: method, path, status, latency
    - Request bodies are never logged (they may carry passwords)
    - Unhandled exceptions are re-raised after logging a 500 line
"""

import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def add_request_logging(app: FastAPI) -> None:
    """Register the access-log middleware on the app."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = round((time.perf_counter() - started) * 1000, 3)
            logger.info(
                f"{request.method} {request.url.path} {status_code}",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": status_code,
                    "duration_ms": duration_ms,
                    "client": request.client.host if request.client else None,
                },
            )
