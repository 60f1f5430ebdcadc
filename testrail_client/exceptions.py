"""
Exception hierarchy for the TestRail client library.

Every failed call made through the client surfaces as exactly one of the
exceptions below. The raw httpx exception is never raised to callers; it is
chained as ``__cause__`` for debugging.

**Exception Hierarchy:**

```
TestRailError (base exception)
├── APIError (any failure status not covered below)
├── RateLimitError (429 - carries retry_after)
├── EnterpriseRequiredError (403 with an "Enterprise" error body)
├── MaintenanceError (503)
└── NetworkError (no response received at all)
```

**Exception Handling Strategy:**

The library never retries. Callers decide how to recover:

```python
try:
    runs = await client.runs.list(project_id)
except RateLimitError as e:
    await asyncio.sleep(e.retry_after)
    runs = await client.runs.list(project_id)
except EnterpriseRequiredError:
    log.error("This endpoint needs a TestRail Enterprise license")
    raise
except MaintenanceError:
    log.warning("TestRail is under maintenance - try again later")
    raise
except APIError as e:
    log.error(f"TestRail rejected the call ({e.status_code}): {e.message}")
    raise
```

Each class also carries a ``kind`` string so callers that prefer matching on a
tag over ``isinstance`` checks can do so:

```python
match error.kind:
    case "rate_limit": ...
    case "maintenance": ...
```
"""

from typing import Any, ClassVar, Optional


class TestRailError(Exception):
    """
    Base exception for all library errors.

    Catch this to handle every failure the client can raise in one place.

    Attributes:
        message: Human-readable error description
        response: HTTP response object (if one was received)
        request: HTTP request object (if available)
    """

    __test__ = False

    kind: ClassVar[str] = "error"

    def __init__(
        self,
        message: str = "",
        response: Optional[Any] = None,
        request: Optional[Any] = None,
    ):
        self.message = message
        self.response = response
        self.request = request
        super().__init__(message)

    @property
    def status_code(self) -> Optional[int]:
        """HTTP status of the failed response, None when nothing was received."""
        if self.response is None:
            return None
        return self.response.status_code


class APIError(TestRailError):
    """
    TestRail answered with a failure status that has no dedicated class.

    Covers ordinary permission denials (403), invalid or unknown entities
    (400), missing endpoints (404), server faults (500) and so on.

    Attributes:
        message: The ``error`` field of the response body when present,
            otherwise the transport-level message
        body: The response body, decoded from JSON when possible, otherwise
            the raw text; None for an empty body
    """

    kind: ClassVar[str] = "api_error"

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Optional[Any] = None,
        response: Optional[Any] = None,
        request: Optional[Any] = None,
    ):
        super().__init__(message, response=response, request=request)
        self._status_code = status_code
        self.body = body

    @property
    def status_code(self) -> int:
        return self._status_code


class RateLimitError(TestRailError):
    """
    TestRail Cloud throttled the request (HTTP 429).

    ``retry_after`` holds the number of seconds announced by the
    ``Retry-After`` header, or 60 when the header is missing or unreadable.
    The client does not wait or retry on its own.
    """

    kind: ClassVar[str] = "rate_limit"

    def __init__(
        self,
        retry_after: int = 60,
        response: Optional[Any] = None,
        request: Optional[Any] = None,
    ):
        super().__init__(
            "API rate limit exceeded", response=response, request=request
        )
        self.retry_after = retry_after


class EnterpriseRequiredError(TestRailError):
    """
    The endpoint requires a TestRail Enterprise license or subscription.

    Raised for a 403 whose error message mentions "Enterprise", so that a
    licensing restriction is not mistaken for a missing permission.
    """

    kind: ClassVar[str] = "enterprise_required"

    def __init__(self, response: Optional[Any] = None, request: Optional[Any] = None):
        super().__init__(
            "Enterprise license/subscription required",
            response=response,
            request=request,
        )


class MaintenanceError(TestRailError):
    """
    TestRail is temporarily unavailable (HTTP 503).

    TestRail Cloud answers 503 during scheduled maintenance windows.
    """

    kind: ClassVar[str] = "maintenance"

    def __init__(self, response: Optional[Any] = None, request: Optional[Any] = None):
        super().__init__(
            "TestRail is currently under maintenance",
            response=response,
            request=request,
        )


class NetworkError(TestRailError):
    """
    No response was received from TestRail.

    Connection refused, DNS failures, timeouts and hosts that cannot be
    turned into a URL all end up here. There is no status code or body.
    """

    kind: ClassVar[str] = "network"
