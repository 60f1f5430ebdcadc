"""Failure injection endpoints for exercising client error handling."""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Path, Query, Request

from testrail_stub.state import FailureMode, ServerState

logger = structlog.get_logger()
router = APIRouter(prefix="/fail", tags=["failure-injection"])


def get_server_state(request: Request) -> ServerState:
    """Dependency to get server state from app state."""
    return request.app.state.server_state


@router.post("/reset")
async def reset_failures(state: ServerState = Depends(get_server_state)):
    """
    Disarm failure injection.

    The server returns to normal operation immediately.
    """
    await state.failure_manager.reset()

    logger.info("Failure injection reset", endpoint="/fail/reset")

    return {
        "message": "Failure injection has been reset",
        "status": "normal_operation",
    }


@router.get("/status")
async def get_failure_status(state: ServerState = Depends(get_server_state)):
    """Get the current failure injection status."""
    status = await state.failure_manager.get_status()

    logger.debug("Failure status requested", status=status)

    return {
        "failure_status": status,
        "currently_failing": status["currently_failing"],
    }


@router.post("/{mode}/{count}")
async def set_failure(
    mode: FailureMode,
    count: int = Path(..., description="Number of API calls that should fail", ge=0, le=1000),
    retry_after: Optional[int] = Query(
        None, description="Retry-After header value for rate-limit failures", ge=0
    ),
    state: ServerState = Depends(get_server_state),
):
    """
    Make the next ``count`` API calls fail with the given mode.

    Modes: ``rate-limit`` (429, optional Retry-After), ``maintenance`` (503),
    ``enterprise`` (403 requiring an Enterprise license), ``forbidden``
    (plain 403) and ``server-error`` (500).
    """
    await state.failure_manager.arm(mode, count, retry_after=retry_after)

    logger.info(
        "Failure injection configured",
        mode=mode.value,
        count=count,
        retry_after=retry_after,
        endpoint="/fail",
    )

    return {
        "message": f"Server will answer the next {count} API calls with {mode.value}",
        "mode": mode.value,
        "count": count,
        "retry_after": retry_after,
    }
