"""
Asynchronous Python client for the TestRail REST API

A typed client covering projects, cases, runs, results, plans and the rest
of TestRail API v2, with a single exception hierarchy for every failure.
"""

from .client import TestRailClient, create_testrail_client
from .config import ClientConfig, LoggingConfig, TestRailSettings, TimeoutConfig
from .exceptions import (
    APIError,
    EnterpriseRequiredError,
    MaintenanceError,
    NetworkError,
    RateLimitError,
    TestRailError,
)
from .interceptor import classify_failure

__all__ = [
    "TestRailClient",
    "create_testrail_client",
    "ClientConfig",
    "TimeoutConfig",
    "LoggingConfig",
    "TestRailSettings",
    "TestRailError",
    "APIError",
    "RateLimitError",
    "EnterpriseRequiredError",
    "MaintenanceError",
    "NetworkError",
    "classify_failure",
]

__version__ = "1.0.0"
