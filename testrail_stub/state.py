"""Failure injection state and the server state container."""

import asyncio
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import structlog

from testrail_stub.store import TestRailStore

logger = structlog.get_logger()


class FailureMode(str, Enum):
    """Failures the stub can answer with, mirroring real TestRail responses."""

    RATE_LIMIT = "rate-limit"
    MAINTENANCE = "maintenance"
    ENTERPRISE = "enterprise"
    FORBIDDEN = "forbidden"
    SERVER_ERROR = "server-error"


@dataclass(frozen=True)
class InjectedFailure:
    """A canned failure response."""

    status_code: int
    body: dict[str, Any]
    headers: Optional[dict[str, str]] = None


def build_failure(mode: FailureMode, retry_after: Optional[int] = None) -> InjectedFailure:
    """Return the status, body and headers TestRail sends for a failure mode."""
    if mode is FailureMode.RATE_LIMIT:
        headers = {"Retry-After": str(retry_after)} if retry_after is not None else None
        return InjectedFailure(429, {"error": "API Rate Limit Exceeded"}, headers)
    if mode is FailureMode.MAINTENANCE:
        return InjectedFailure(
            503, {"error": "TestRail is currently undergoing maintenance"}
        )
    if mode is FailureMode.ENTERPRISE:
        return InjectedFailure(403, {"error": "Enterprise license required"})
    if mode is FailureMode.FORBIDDEN:
        return InjectedFailure(403, {"error": "No permission"})
    return InjectedFailure(500, {"error": "Induced server failure"})


@dataclass
class FailureConfig:
    """Configuration for failure injection."""

    mode: Optional[FailureMode] = None
    remaining: int = 0
    retry_after: Optional[int] = None


class FailureStateManager:
    """
    Async-safe manager for failure injection.

    Once armed with a mode and a count, the next ``count`` API calls are
    answered with that mode's failure instead of being dispatched.
    """

    def __init__(self):
        self._config = FailureConfig()
        self._lock = asyncio.Lock()

    async def next_failure(self) -> Optional[InjectedFailure]:
        """Consume one armed failure, or return None if none is armed."""
        async with self._lock:
            if self._config.mode is None or self._config.remaining <= 0:
                return None

            self._config.remaining -= 1
            failure = build_failure(self._config.mode, self._config.retry_after)
            logger.debug(
                "Injecting failure",
                mode=self._config.mode.value,
                status_code=failure.status_code,
                remaining=self._config.remaining,
            )
            if self._config.remaining == 0:
                self._config = FailureConfig()
            return failure

    async def arm(
        self, mode: FailureMode, count: int, retry_after: Optional[int] = None
    ) -> None:
        """Fail the next ``count`` API calls with ``mode``."""
        async with self._lock:
            self._config = FailureConfig(
                mode=mode if count > 0 else None,
                remaining=max(0, count),
                retry_after=retry_after,
            )
            logger.info(
                "Failure mode activated",
                mode=mode.value,
                count=self._config.remaining,
                retry_after=retry_after,
            )

    async def reset(self) -> None:
        """Disarm failure injection."""
        async with self._lock:
            self._config = FailureConfig()
            logger.info("Failure injection reset")

    async def get_status(self) -> dict[str, Any]:
        """Get current failure state for debugging/monitoring."""
        async with self._lock:
            return {
                "mode": self._config.mode.value if self._config.mode else None,
                "remaining": self._config.remaining,
                "retry_after": self._config.retry_after,
                "currently_failing": self._config.mode is not None
                and self._config.remaining > 0,
            }


class ServerState:
    """Global server state container."""

    def __init__(self, email: str = "admin@example.com", seed_data: bool = True):
        self.failure_manager = FailureStateManager()
        self.store = TestRailStore(current_user_email=email)
        if seed_data:
            self.store.seed()
        self._startup_time = time.time()

    def get_uptime_seconds(self) -> float:
        """Get server uptime in seconds."""
        return time.time() - self._startup_time
