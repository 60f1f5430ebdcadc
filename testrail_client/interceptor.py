"""
Failure classification for TestRail responses.

``classify_failure`` is the one place where a failed exchange is turned into
a domain exception. The transport calls it for every error, so all resource
methods get the same typed errors without inspecting status codes
themselves.

Rules are evaluated in order and the first match wins:

1. no response at all                       -> NetworkError
2. 429                                      -> RateLimitError
3. 503                                      -> MaintenanceError
4. 403 with "Enterprise" in the body error  -> EnterpriseRequiredError
5. anything else                            -> APIError

Rate limiting and maintenance must be recognised before the generic fallback,
and the Enterprise check must come before a plain 403 is reported as APIError.
"""

from typing import Any, Optional

import httpx

from .exceptions import (
    APIError,
    EnterpriseRequiredError,
    MaintenanceError,
    NetworkError,
    RateLimitError,
    TestRailError,
)

DEFAULT_RETRY_AFTER_SECONDS = 60
ENTERPRISE_MARKER = "Enterprise"


def parse_retry_after(value: Optional[str]) -> int:
    """
    Read a ``Retry-After`` header as whole seconds.

    Missing and unparsable values (including the HTTP-date form) both fall
    back to DEFAULT_RETRY_AFTER_SECONDS.
    """
    if value is None:
        return DEFAULT_RETRY_AFTER_SECONDS
    try:
        return int(value.strip())
    except ValueError:
        return DEFAULT_RETRY_AFTER_SECONDS


def decode_body(response: httpx.Response) -> Any:
    """Return the response body as JSON if possible, else as text, else None."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _body_error_message(body: Any) -> Optional[str]:
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, str) and error:
            return error
    return None


def _request_of(exc: Exception) -> Optional[httpx.Request]:
    # httpx raises RuntimeError when .request is read on an unbound exception
    try:
        return getattr(exc, "request", None)
    except RuntimeError:
        return None


def classify_failure(exc: Exception) -> TestRailError:
    """
    Map an httpx failure to the library's exception hierarchy.

    Args:
        exc: ``httpx.HTTPStatusError`` for failure statuses, or any other
            httpx error when no response was received

    Returns:
        The single TestRailError subclass instance describing the failure
    """
    request = _request_of(exc)
    response = exc.response if isinstance(exc, httpx.HTTPStatusError) else None

    if response is None:
        message = str(exc) or "Network error or no response from TestRail"
        return NetworkError(message, request=request)

    status_code = response.status_code

    if status_code == 429:
        return RateLimitError(
            retry_after=parse_retry_after(response.headers.get("Retry-After")),
            response=response,
            request=request,
        )

    if status_code == 503:
        return MaintenanceError(response=response, request=request)

    body = decode_body(response)
    body_error = _body_error_message(body)

    if status_code == 403 and body_error and ENTERPRISE_MARKER in body_error:
        return EnterpriseRequiredError(response=response, request=request)

    message = body_error or str(exc) or "Unknown TestRail API error"
    return APIError(
        message,
        status_code=status_code,
        body=body,
        response=response,
        request=request,
    )
