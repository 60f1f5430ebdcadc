"""
Tests for the client library exception hierarchy.

Validates the inheritance structure, the ``kind`` tags and the payload each
error carries.
"""

import httpx
import pytest

from testrail_client.exceptions import (
    APIError,
    EnterpriseRequiredError,
    MaintenanceError,
    NetworkError,
    RateLimitError,
    TestRailError,
)


class TestExceptionHierarchy:
    """Test the exception inheritance structure."""

    def test_base_exception(self):
        """Test base TestRailError exception."""
        exc = TestRailError("test message")
        assert str(exc) == "test message"
        assert exc.message == "test message"
        assert exc.response is None
        assert exc.request is None
        assert exc.status_code is None
        assert exc.kind == "error"

        request = httpx.Request("GET", "https://example.testrail.io/index.php?/api/v2/get_case/1")
        response = httpx.Response(418, request=request)
        exc = TestRailError("test", response=response, request=request)
        assert exc.response is response
        assert exc.request is request
        assert exc.status_code == 418

    @pytest.mark.parametrize(
        "error",
        [
            APIError("bad request", status_code=400),
            RateLimitError(),
            EnterpriseRequiredError(),
            MaintenanceError(),
            NetworkError("connection refused"),
        ],
    )
    def test_all_errors_share_the_base(self, error):
        assert isinstance(error, TestRailError)
        assert isinstance(error, Exception)

    def test_kinds_are_distinct(self):
        kinds = {
            TestRailError.kind,
            APIError.kind,
            RateLimitError.kind,
            EnterpriseRequiredError.kind,
            MaintenanceError.kind,
            NetworkError.kind,
        }
        assert kinds == {
            "error",
            "api_error",
            "rate_limit",
            "enterprise_required",
            "maintenance",
            "network",
        }


class TestErrorPayloads:
    def test_api_error(self):
        exc = APIError("No permission", status_code=403, body={"error": "No permission"})

        assert exc.message == "No permission"
        assert exc.status_code == 403
        assert exc.body == {"error": "No permission"}
        assert exc.kind == "api_error"

    def test_rate_limit_defaults_to_sixty_seconds(self):
        exc = RateLimitError()

        assert exc.retry_after == 60
        assert exc.message == "API rate limit exceeded"

    def test_rate_limit_custom_retry_after(self):
        assert RateLimitError(retry_after=120).retry_after == 120

    def test_fixed_messages(self):
        assert EnterpriseRequiredError().message == "Enterprise license/subscription required"
        assert MaintenanceError().message == "TestRail is currently under maintenance"

    def test_network_error_has_no_status(self):
        exc = NetworkError("timed out")

        assert exc.message == "timed out"
        assert exc.status_code is None
        assert exc.kind == "network"

    def test_catch_by_base_class(self):
        with pytest.raises(TestRailError) as exc_info:
            raise MaintenanceError()
        assert exc_info.value.kind == "maintenance"
