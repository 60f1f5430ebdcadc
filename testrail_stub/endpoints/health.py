"""Liveness endpoint for the stub."""

from typing import Any

from fastapi import APIRouter, Depends, Request

from testrail_stub.state import ServerState

router = APIRouter(tags=["health"])


def get_server_state(request: Request) -> ServerState:
    return request.app.state.server_state


@router.get("/health")
async def health_check(
    state: ServerState = Depends(get_server_state),
) -> dict[str, Any]:
    """Report uptime and record counts; no authentication, never failure-injected."""
    return {
        "status": "ok",
        "uptime_seconds": round(state.get_uptime_seconds(), 2),
        "records": state.store.counts(),
    }
