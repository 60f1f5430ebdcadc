#!/usr/bin/env python3
"""
Demonstration of the TestRail client library.

This script drives the client against the local TestRail stub. Start the
stub first with:

    testrail-stub serve --email admin@example.com --api-key secret

Then run this demo:

    python examples/client_demo.py
"""

import asyncio
import logging
import sys
from typing import Optional

import httpx

from testrail_client import (
    APIError,
    ClientConfig,
    EnterpriseRequiredError,
    LoggingConfig,
    MaintenanceError,
    RateLimitError,
    TestRailClient,
    TestRailError,
)
from testrail_client.models import AddRun, CaseResultEntry

STUB_URL = "http://localhost:8000"

# Setup logging to see client behavior
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
)


def demo_config(level: str = "INFO") -> ClientConfig:
    return ClientConfig(
        host=STUB_URL,
        email="admin@example.com",
        password="secret",
        logging=LoggingConfig(level=level),
    )


async def demo_basic_usage():
    """Read the seeded project and record a run."""
    print("\n=== Basic Usage ===")

    async with TestRailClient(demo_config()) as client:
        projects = await client.projects.list()
        print(f"✅ Projects: {[project.name for project in projects]}")

        project = projects[0]
        cases = await client.cases.list(project.id)
        print(f"✅ {len(cases)} cases in '{project.name}'")

        run = await client.runs.add(project.id, AddRun(name="Demo run"))
        results = await client.results.add_for_cases(
            run.id,
            [
                CaseResultEntry(case_id=case.id, status_id=1 if i % 2 == 0 else 5)
                for i, case in enumerate(cases)
            ],
        )
        print(f"✅ Recorded {len(results)} results in run {run.id}")

        run = await client.runs.close(run.id)
        print(f"✅ Closed run: {run.passed_count} passed, {run.failed_count} failed")


async def demo_rate_limit_backoff():
    """Honor Retry-After on the caller side; the client never retries."""
    print("\n=== Rate Limit Backoff ===")

    await inject_failure("rate-limit", 2, retry_after=1)

    async with TestRailClient(demo_config(level="DEBUG")) as client:
        for attempt in range(1, 5):
            try:
                projects = await client.projects.list()
            except RateLimitError as e:
                print(f"⏳ Attempt {attempt}: rate limited, waiting {e.retry_after}s")
                await asyncio.sleep(e.retry_after)
                continue
            print(f"✅ Attempt {attempt}: got {len(projects)} project(s)")
            break


async def demo_exception_handling():
    """Show how each injected failure surfaces to the caller."""
    print("\n=== Exception Handling Demo ===")

    async with TestRailClient(demo_config()) as client:
        for mode in ("maintenance", "enterprise", "forbidden", "server-error"):
            await inject_failure(mode, 1)
            print(f"\n{mode}:")
            try:
                await client.projects.list()
                print("❌ Expected a failure")
            except MaintenanceError:
                print("🔧 TestRail is under maintenance")
            except EnterpriseRequiredError:
                print("🔒 Feature needs an Enterprise license")
            except APIError as e:
                print(f"💥 API error {e.status_code}: {e.message}")
            except TestRailError as e:
                print(f"❌ Unexpected {e.kind} error: {e}")

    await reset_server()


async def inject_failure(mode: str, count: int, retry_after: Optional[int] = None):
    """Helper to arm the stub's failure injection."""
    params = {"retry_after": retry_after} if retry_after is not None else None
    async with httpx.AsyncClient(base_url=STUB_URL) as client:
        await client.post("/fail/reset")
        await client.post(f"/fail/{mode}/{count}", params=params)


async def reset_server():
    """Helper to reset server state."""
    async with httpx.AsyncClient(base_url=STUB_URL) as client:
        await client.post("/fail/reset")


async def check_server_health():
    """Check if the stub is running."""
    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(f"{STUB_URL}/health", timeout=2.0)
            return response.status_code == 200
    except httpx.HTTPError:
        return False


async def main():
    """Run all demonstrations."""
    print("🚀 TestRail Client Demo")
    print("=======================")

    if not await check_server_health():
        print("❌ TestRail stub is not running!")
        print("\nPlease start the stub first:")
        print("    testrail-stub serve")
        print("\nThen run this demo again.")
        return

    print("✅ TestRail stub is running")

    await reset_server()

    await demo_basic_usage()
    await demo_rate_limit_backoff()
    await demo_exception_handling()

    print("\n🎉 Demo completed!")


if __name__ == "__main__":
    asyncio.run(main())
