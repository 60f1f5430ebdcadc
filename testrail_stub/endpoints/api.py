"""
TestRail API v2 emulation.

TestRail routes on the query string: ``/index.php?/api/v2/get_case/1&x=y``.
The path is always ``/index.php``; the first ``&``-separated part of the
query names the method and its IDs, the rest are ordinary parameters.
"""

import base64
import binascii
import json
import re
from collections.abc import Callable
from typing import Any, Optional
from urllib.parse import parse_qsl, unquote

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from testrail_stub.config import StubConfig
from testrail_stub.state import ServerState
from testrail_stub.store import StubError, TestRailStore, paginate

logger = structlog.get_logger()
router = APIRouter(tags=["testrail-api"])

API_PREFIX = "/api/v2/"

Handler = Callable[..., Any]
_routes: list[tuple[str, re.Pattern[str], Handler]] = []


def route(method: str, pattern: str) -> Callable[[Handler], Handler]:
    """Register a handler for an API method; ``(\\d+)`` groups become int args."""

    def register(handler: Handler) -> Handler:
        _routes.append((method, re.compile(f"^{pattern}$"), handler))
        return handler

    return register


def split_api_query(query: str) -> tuple[Optional[str], dict[str, str]]:
    """Split a raw query string into the API method path and its parameters."""
    method_part, _, rest = query.partition("&")
    method_path = unquote(method_part)
    if not method_path.startswith(API_PREFIX):
        return None, {}
    return method_path[len(API_PREFIX) :].strip("/"), dict(parse_qsl(rest))


def check_basic_auth(request: Request, config: StubConfig) -> bool:
    header = request.headers.get("Authorization", "")
    scheme, _, encoded = header.partition(" ")
    if scheme.lower() != "basic" or not encoded:
        return False
    try:
        decoded = base64.b64decode(encoded).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return False
    email, _, password = decoded.partition(":")
    return email == config.email and password == config.api_key.get_secret_value()


def get_server_state(request: Request) -> ServerState:
    """Dependency to get server state from app state."""
    return request.app.state.server_state


def get_stub_config(request: Request) -> StubConfig:
    """Dependency to get the stub configuration from app state."""
    return request.app.state.config


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def read_json_body(request: Request) -> dict[str, Any]:
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        raise StubError("The request body is not valid JSON.") from None
    if not isinstance(body, dict):
        raise StubError("The request body must be a JSON object.")
    return body


@router.api_route("/index.php", methods=["GET", "POST"])
async def testrail_api(
    request: Request,
    state: ServerState = Depends(get_server_state),
    config: StubConfig = Depends(get_stub_config),
):
    """
    Dispatch one TestRail API call.

    Processing order:
    1. Parse the method path out of the query string
    2. Check basic-auth credentials
    3. Answer with an armed injected failure, if any
    4. Route to the handler and wrap store errors as ``{"error": ...}``
    """
    method_path, params = split_api_query(request.url.query)
    if method_path is None:
        return error_response(404, "Not found")

    if not check_basic_auth(request, config):
        logger.debug("Rejected credentials", endpoint=method_path)
        return error_response(
            401,
            "Authentication failed: invalid or missing user/password or session cookie.",
        )

    failure = await state.failure_manager.next_failure()
    if failure is not None:
        return JSONResponse(
            status_code=failure.status_code,
            content=failure.body,
            headers=failure.headers,
        )

    name = method_path.split("/", 1)[0]
    for method, pattern, handler in _routes:
        match = pattern.match(method_path)
        if match is None:
            continue
        if method != request.method:
            return error_response(
                400, f"Method '{name}' requires {method} requests."
            )
        try:
            body = await read_json_body(request) if method == "POST" else {}
            args = [int(group) for group in match.groups()]
            result = handler(state.store, params, body, *args)
        except StubError as exc:
            logger.debug("API error", endpoint=method_path, error=exc.message)
            return error_response(exc.status_code, exc.message)

        logger.debug("API call handled", endpoint=method_path, method=request.method)
        if result is None:
            return Response(status_code=200)
        return JSONResponse(status_code=200, content=result)

    return error_response(400, f"Unknown method '{name}'")


# Projects


@route("GET", "get_projects")
def get_projects(store: TestRailStore, params, body):
    return paginate("projects", store.list_projects(params), params, "get_projects")


@route("GET", r"get_project/(\d+)")
def get_project(store: TestRailStore, params, body, project_id):
    return store.get_project(project_id)


@route("POST", "add_project")
def add_project(store: TestRailStore, params, body):
    return store.add_project(body)


@route("POST", r"update_project/(\d+)")
def update_project(store: TestRailStore, params, body, project_id):
    return store.update_project(project_id, body)


@route("POST", r"delete_project/(\d+)")
def delete_project(store: TestRailStore, params, body, project_id):
    store.delete_project(project_id)
    return None


# Suites and sections


@route("GET", r"get_suites/(\d+)")
def get_suites(store: TestRailStore, params, body, project_id):
    # get_suites still answers with a bare array, as TestRail does
    return store.list_suites(project_id)


@route("GET", r"get_suite/(\d+)")
def get_suite(store: TestRailStore, params, body, suite_id):
    return store.get_suite(suite_id)


@route("POST", r"add_suite/(\d+)")
def add_suite(store: TestRailStore, params, body, project_id):
    return store.add_suite(project_id, body)


@route("GET", r"get_sections/(\d+)")
def get_sections(store: TestRailStore, params, body, project_id):
    return paginate(
        "sections",
        store.list_sections(project_id, params),
        params,
        f"get_sections/{project_id}",
    )


@route("GET", r"get_section/(\d+)")
def get_section(store: TestRailStore, params, body, section_id):
    return store.get_section(section_id)


@route("POST", r"add_section/(\d+)")
def add_section(store: TestRailStore, params, body, project_id):
    return store.add_section(project_id, body)


# Cases


@route("GET", r"get_cases/(\d+)")
def get_cases(store: TestRailStore, params, body, project_id):
    return paginate(
        "cases", store.list_cases(project_id, params), params, f"get_cases/{project_id}"
    )


@route("GET", r"get_case/(\d+)")
def get_case(store: TestRailStore, params, body, case_id):
    return store.get_case(case_id)


@route("POST", r"add_case/(\d+)")
def add_case(store: TestRailStore, params, body, section_id):
    return store.add_case(section_id, body)


@route("POST", r"update_case/(\d+)")
def update_case(store: TestRailStore, params, body, case_id):
    return store.update_case(case_id, body)


@route("POST", r"delete_case/(\d+)")
def delete_case(store: TestRailStore, params, body, case_id):
    if not body.get("soft"):
        store.delete_case(case_id)
    return None


# Runs and tests


@route("GET", r"get_runs/(\d+)")
def get_runs(store: TestRailStore, params, body, project_id):
    return paginate(
        "runs", store.list_runs(project_id, params), params, f"get_runs/{project_id}"
    )


@route("GET", r"get_run/(\d+)")
def get_run(store: TestRailStore, params, body, run_id):
    return store.get_run(run_id)


@route("POST", r"add_run/(\d+)")
def add_run(store: TestRailStore, params, body, project_id):
    return store.add_run(project_id, body)


@route("POST", r"update_run/(\d+)")
def update_run(store: TestRailStore, params, body, run_id):
    return store.update_run(run_id, body)


@route("POST", r"close_run/(\d+)")
def close_run(store: TestRailStore, params, body, run_id):
    return store.close_run(run_id)


@route("POST", r"delete_run/(\d+)")
def delete_run(store: TestRailStore, params, body, run_id):
    store.delete_run(run_id)
    return None


@route("GET", r"get_tests/(\d+)")
def get_tests(store: TestRailStore, params, body, run_id):
    return paginate("tests", store.list_tests(run_id, params), params, f"get_tests/{run_id}")


@route("GET", r"get_test/(\d+)")
def get_test(store: TestRailStore, params, body, test_id):
    return store.get_test(test_id)


# Results


@route("GET", r"get_results/(\d+)")
def get_results(store: TestRailStore, params, body, test_id):
    return paginate(
        "results", store.list_results(test_id, params), params, f"get_results/{test_id}"
    )


@route("GET", r"get_results_for_case/(\d+)/(\d+)")
def get_results_for_case(store: TestRailStore, params, body, run_id, case_id):
    return paginate(
        "results",
        store.list_results_for_case(run_id, case_id, params),
        params,
        f"get_results_for_case/{run_id}/{case_id}",
    )


@route("GET", r"get_results_for_run/(\d+)")
def get_results_for_run(store: TestRailStore, params, body, run_id):
    return paginate(
        "results",
        store.list_results_for_run(run_id, params),
        params,
        f"get_results_for_run/{run_id}",
    )


@route("POST", r"add_result/(\d+)")
def add_result(store: TestRailStore, params, body, test_id):
    return store.add_result(test_id, body)


@route("POST", r"add_result_for_case/(\d+)/(\d+)")
def add_result_for_case(store: TestRailStore, params, body, run_id, case_id):
    return store.add_result_for_case(run_id, case_id, body)


@route("POST", r"add_results/(\d+)")
def add_results(store: TestRailStore, params, body, run_id):
    return store.add_results(run_id, body)


@route("POST", r"add_results_for_cases/(\d+)")
def add_results_for_cases(store: TestRailStore, params, body, run_id):
    return store.add_results_for_cases(run_id, body)


# Metadata


@route("GET", "get_statuses")
def get_statuses(store: TestRailStore, params, body):
    return store.list_statuses()


@route("GET", "get_current_user")
def get_current_user(store: TestRailStore, params, body):
    return store.current_user()
