"""
TestRail API client.

This module contains the TestRailClient facade, which owns one transport and
exposes a resource client per area of the TestRail API.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any, Optional

import httpx

from .config import ClientConfig, TestRailSettings
from .resources import (
    AttachmentsResource,
    BddResource,
    CaseFieldsResource,
    CasesResource,
    CaseTypesResource,
    ConfigurationsResource,
    DatasetsResource,
    GroupsResource,
    MilestonesResource,
    PlansResource,
    PrioritiesResource,
    ProjectsResource,
    ReportsResource,
    ResultFieldsResource,
    ResultsResource,
    RolesResource,
    RunsResource,
    SectionsResource,
    SharedStepsResource,
    StatusesResource,
    SuitesResource,
    TemplatesResource,
    TestsResource,
    UsersResource,
    VariablesResource,
)
from .transport import Transport


class TestRailClient:
    """
    Typed asynchronous client for the TestRail REST API (v2).

    Features:
    - One shared httpx.AsyncClient with connection pooling and basic auth
    - A resource client per API area (``client.cases``, ``client.runs`` ...)
    - Responses validated into pydantic records, list envelopes unwrapped
    - Every failure raised as a TestRailError subclass

    The client never retries. Callers handling rate limits read
    ``RateLimitError.retry_after`` and call again.

    Example:
        async with TestRailClient(config) as client:
            projects = await client.projects.list()
    """

    __test__ = False

    def __init__(
        self,
        config: ClientConfig,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = Transport(config, http_transport=http_transport)
        self.logger = self._transport.logger

        self.projects = ProjectsResource(self._transport)
        self.cases = CasesResource(self._transport)
        self.suites = SuitesResource(self._transport)
        self.sections = SectionsResource(self._transport)
        self.runs = RunsResource(self._transport)
        self.tests = TestsResource(self._transport)
        self.results = ResultsResource(self._transport)
        self.result_fields = ResultFieldsResource(self._transport)
        self.plans = PlansResource(self._transport)
        self.milestones = MilestonesResource(self._transport)
        self.attachments = AttachmentsResource(self._transport)
        self.bdd = BddResource(self._transport)
        self.configurations = ConfigurationsResource(self._transport)
        self.datasets = DatasetsResource(self._transport)
        self.variables = VariablesResource(self._transport)
        self.users = UsersResource(self._transport)
        self.groups = GroupsResource(self._transport)
        self.roles = RolesResource(self._transport)
        self.shared_steps = SharedStepsResource(self._transport)
        self.reports = ReportsResource(self._transport)
        self.case_fields = CaseFieldsResource(self._transport)
        self.case_types = CaseTypesResource(self._transport)
        self.priorities = PrioritiesResource(self._transport)
        self.statuses = StatusesResource(self._transport)
        self.templates = TemplatesResource(self._transport)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[TestRailSettings] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "TestRailClient":
        """Build a client from ``TESTRAIL_*`` environment variables (or a .env file)."""
        settings = settings or TestRailSettings()
        return cls(settings.to_client_config(), http_transport=http_transport)

    @property
    def closed(self) -> bool:
        return self._transport.closed

    async def __aenter__(self) -> "TestRailClient":
        """Async context manager entry."""
        await self._transport._ensure_initialized()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client. Safe to call more than once."""
        await self._transport.close()


@asynccontextmanager
async def create_testrail_client(
    config: ClientConfig,
    http_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AsyncGenerator[TestRailClient, None]:
    """
    Async context manager for creating and managing a TestRail client.

    Args:
        config: Client configuration
        http_transport: Optional httpx transport (tests pass a MockTransport)

    Yields:
        Initialized TestRailClient instance
    """
    client = TestRailClient(config, http_transport=http_transport)
    try:
        await client._transport._ensure_initialized()
        yield client
    finally:
        await client.close()
