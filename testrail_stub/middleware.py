"""Request logging and last-resort error handling for the stub."""

import time
import uuid
from typing import Callable

import structlog
from fastapi import HTTPException, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger()

CORRELATION_HEADER = "X-Correlation-ID"


def describe_endpoint(request: Request) -> str:
    """Return the TestRail method path for API calls, the URL path otherwise."""
    if request.url.path == "/index.php":
        return request.url.query.partition("&")[0] or request.url.path
    return request.url.path


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per request and echo a correlation ID.

    A caller-supplied ``X-Correlation-ID`` is kept so client and stub logs
    can be joined; otherwise a fresh UUID is generated.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        log = logger.bind(
            correlation_id=correlation_id,
            method=request.method,
            endpoint=describe_endpoint(request),
        )

        started = time.perf_counter()
        log.debug(
            "Request received",
            client_host=request.client.host if request.client else None,
            user_agent=request.headers.get("User-Agent", ""),
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            log.error(
                "Request failed",
                duration_ms=_elapsed_ms(started),
                error_type=type(exc).__name__,
            )
            raise

        log.debug(
            "Request completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
        )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Answer unexpected exceptions the way TestRail does: 500 with an ``error`` field."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except HTTPException:
            raise
        except Exception as exc:
            logger.exception(
                "Unexpected server error",
                endpoint=describe_endpoint(request),
                method=request.method,
                error_type=type(exc).__name__,
            )
            return JSONResponse(status_code=500, content={"error": "Internal server error"})
