"""
In-memory TestRail data store.

Holds projects, suites, sections, cases, runs, tests and results as plain
dicts shaped like TestRail's JSON. Records are copied on the way out so
callers cannot mutate the store by accident.
"""

import itertools
import time
from collections.abc import Iterable, Mapping
from typing import Any, Optional

import structlog

logger = structlog.get_logger()

MAX_PAGE_SIZE = 250

UNTESTED_STATUS_ID = 3

SYSTEM_STATUSES = [
    {"id": 1, "name": "passed", "label": "Passed", "color_dark": 6667071,
     "color_medium": 9820525, "color_bright": 12709313, "is_system": True,
     "is_untested": False, "is_final": True},
    {"id": 2, "name": "blocked", "label": "Blocked", "color_dark": 9474192,
     "color_medium": 13684944, "color_bright": 14737632, "is_system": True,
     "is_untested": False, "is_final": True},
    {"id": 3, "name": "untested", "label": "Untested", "color_dark": 11579568,
     "color_medium": 15395562, "color_bright": 15790320, "is_system": True,
     "is_untested": True, "is_final": False},
    {"id": 4, "name": "retest", "label": "Retest", "color_dark": 13026868,
     "color_medium": 15593088, "color_bright": 16448182, "is_system": True,
     "is_untested": False, "is_final": False},
    {"id": 5, "name": "failed", "label": "Failed", "color_dark": 14250867,
     "color_medium": 15829135, "color_bright": 16631751, "is_system": True,
     "is_untested": False, "is_final": True},
]

_STATUS_COUNT_FIELDS = {
    1: "passed_count",
    2: "blocked_count",
    3: "untested_count",
    4: "retest_count",
    5: "failed_count",
}


class StubError(Exception):
    """A request error reported to the caller as ``{"error": message}``."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _now() -> int:
    return int(time.time())


def _int_param(params: Mapping[str, str], name: str, default: int) -> int:
    raw = params.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise StubError(f"Field :{name} is not a valid integer.") from None


def _id_list_param(params: Mapping[str, str], name: str) -> Optional[set[int]]:
    raw = params.get(name)
    if not raw:
        return None
    try:
        return {int(part) for part in raw.split(",") if part.strip()}
    except ValueError:
        raise StubError(f"Field :{name} is not a valid list of IDs.") from None


def paginate(
    key: str, items: list[dict[str, Any]], params: Mapping[str, str], endpoint: str
) -> dict[str, Any]:
    """Wrap a list in TestRail's paginated envelope (6.7+ format)."""
    offset = max(0, _int_param(params, "offset", 0))
    limit = min(MAX_PAGE_SIZE, max(1, _int_param(params, "limit", MAX_PAGE_SIZE)))
    page = items[offset : offset + limit]

    next_link = None
    if offset + limit < len(items):
        next_link = f"/api/v2/{endpoint}&limit={limit}&offset={offset + limit}"
    prev_link = None
    if offset > 0:
        prev_link = f"/api/v2/{endpoint}&limit={limit}&offset={max(0, offset - limit)}"

    return {
        "offset": offset,
        "limit": limit,
        "size": len(page),
        "_links": {"next": next_link, "prev": prev_link},
        key: page,
    }


class TestRailStore:
    """In-memory emulation of the core TestRail entities."""

    __test__ = False

    def __init__(self, current_user_email: str = "admin@example.com"):
        self.current_user_email = current_user_email
        self.projects: dict[int, dict[str, Any]] = {}
        self.suites: dict[int, dict[str, Any]] = {}
        self.sections: dict[int, dict[str, Any]] = {}
        self.cases: dict[int, dict[str, Any]] = {}
        self.runs: dict[int, dict[str, Any]] = {}
        self.tests: dict[int, dict[str, Any]] = {}
        self.results: dict[int, dict[str, Any]] = {}
        self._counters: dict[str, itertools.count] = {}

    def _next_id(self, kind: str) -> int:
        counter = self._counters.setdefault(kind, itertools.count(1))
        return next(counter)

    @staticmethod
    def _require(
        table: Mapping[int, dict[str, Any]], record_id: int, field: str, label: str
    ) -> dict[str, Any]:
        record = table.get(record_id)
        if record is None:
            raise StubError(f"Field :{field} is not a valid or accessible {label}.")
        return record

    @staticmethod
    def _required_field(body: Mapping[str, Any], name: str) -> Any:
        value = body.get(name)
        if value is None or value == "":
            raise StubError(f"Field :{name} is a required field.")
        return value

    def seed(self) -> None:
        """Create a small demo dataset."""
        project = self.add_project({"name": "Demo Project", "suite_mode": 1})
        suite = self.add_suite(project["id"], {"name": "Master"})
        section = self.add_section(
            project["id"], {"name": "Login", "suite_id": suite["id"]}
        )
        for title in (
            "Log in with valid credentials",
            "Log in with an invalid password",
            "Reset a forgotten password",
        ):
            self.add_case(section["id"], {"title": title})
        logger.info("Demo data seeded", project_id=project["id"])

    def counts(self) -> dict[str, int]:
        return {
            "projects": len(self.projects),
            "suites": len(self.suites),
            "sections": len(self.sections),
            "cases": len(self.cases),
            "runs": len(self.runs),
            "tests": len(self.tests),
            "results": len(self.results),
        }

    # Projects

    def add_project(self, body: Mapping[str, Any]) -> dict[str, Any]:
        project_id = self._next_id("project")
        project = {
            "id": project_id,
            "name": self._required_field(body, "name"),
            "announcement": body.get("announcement"),
            "show_announcement": bool(body.get("show_announcement", False)),
            "is_completed": False,
            "completed_on": None,
            "suite_mode": int(body.get("suite_mode", 1)),
            "url": f"/index.php?/projects/overview/{project_id}",
            "created_on": _now(),
            "created_by": 1,
        }
        self.projects[project_id] = project
        return dict(project)

    def get_project(self, project_id: int) -> dict[str, Any]:
        return dict(self._require(self.projects, project_id, "project_id", "project"))

    def list_projects(self, params: Mapping[str, str]) -> list[dict[str, Any]]:
        projects = [dict(p) for p in self.projects.values()]
        is_completed = params.get("is_completed")
        if is_completed is not None and is_completed != "":
            wanted = is_completed == "1"
            projects = [p for p in projects if p["is_completed"] == wanted]
        return projects

    def update_project(self, project_id: int, body: Mapping[str, Any]) -> dict[str, Any]:
        project = self._require(self.projects, project_id, "project_id", "project")
        for field in ("name", "announcement", "show_announcement"):
            if field in body:
                project[field] = body[field]
        if "is_completed" in body:
            project["is_completed"] = bool(body["is_completed"])
            project["completed_on"] = _now() if project["is_completed"] else None
        return dict(project)

    def delete_project(self, project_id: int) -> None:
        self._require(self.projects, project_id, "project_id", "project")
        del self.projects[project_id]
        for suite_id in [s["id"] for s in self.suites.values() if s["project_id"] == project_id]:
            self._delete_suite_contents(suite_id)
            del self.suites[suite_id]
        for run_id in [r["id"] for r in self.runs.values() if r["project_id"] == project_id]:
            self._delete_run_contents(run_id)
            del self.runs[run_id]

    # Suites and sections

    def add_suite(self, project_id: int, body: Mapping[str, Any]) -> dict[str, Any]:
        self._require(self.projects, project_id, "project_id", "project")
        suite_id = self._next_id("suite")
        suite = {
            "id": suite_id,
            "name": self._required_field(body, "name"),
            "description": body.get("description"),
            "project_id": project_id,
            "is_master": not any(
                s["project_id"] == project_id for s in self.suites.values()
            ),
            "is_baseline": False,
            "is_completed": False,
            "completed_on": None,
            "url": f"/index.php?/suites/view/{suite_id}",
        }
        self.suites[suite_id] = suite
        return dict(suite)

    def get_suite(self, suite_id: int) -> dict[str, Any]:
        return dict(self._require(self.suites, suite_id, "suite_id", "test suite"))

    def list_suites(self, project_id: int) -> list[dict[str, Any]]:
        self._require(self.projects, project_id, "project_id", "project")
        return [dict(s) for s in self.suites.values() if s["project_id"] == project_id]

    def _default_suite_id(self, project_id: int, body: Mapping[str, Any]) -> int:
        suite_id = body.get("suite_id")
        if suite_id is not None:
            suite = self._require(self.suites, int(suite_id), "suite_id", "test suite")
            if suite["project_id"] != project_id:
                raise StubError("Field :suite_id is not a valid or accessible test suite.")
            return suite["id"]
        for suite in self.suites.values():
            if suite["project_id"] == project_id:
                return suite["id"]
        raise StubError("Field :suite_id is a required field.")

    def _delete_suite_contents(self, suite_id: int) -> None:
        for section_id in [s["id"] for s in self.sections.values() if s["suite_id"] == suite_id]:
            del self.sections[section_id]
        for case_id in [c["id"] for c in self.cases.values() if c["suite_id"] == suite_id]:
            del self.cases[case_id]

    def add_section(self, project_id: int, body: Mapping[str, Any]) -> dict[str, Any]:
        self._require(self.projects, project_id, "project_id", "project")
        suite_id = self._default_suite_id(project_id, body)
        parent_id = body.get("parent_id")
        depth = 0
        if parent_id is not None:
            parent = self._require(self.sections, int(parent_id), "parent_id", "section")
            depth = parent["depth"] + 1
        section_id = self._next_id("section")
        section = {
            "id": section_id,
            "name": self._required_field(body, "name"),
            "description": body.get("description"),
            "suite_id": suite_id,
            "parent_id": parent_id,
            "depth": depth,
            "display_order": sum(
                1 for s in self.sections.values() if s["suite_id"] == suite_id
            ) + 1,
        }
        self.sections[section_id] = section
        return dict(section)

    def get_section(self, section_id: int) -> dict[str, Any]:
        return dict(self._require(self.sections, section_id, "section_id", "section"))

    def list_sections(
        self, project_id: int, params: Mapping[str, str]
    ) -> list[dict[str, Any]]:
        self._require(self.projects, project_id, "project_id", "project")
        suite_ids = {
            s["id"] for s in self.suites.values() if s["project_id"] == project_id
        }
        wanted_suite = params.get("suite_id")
        if wanted_suite:
            suite_ids &= {_int_param(params, "suite_id", 0)}
        return [dict(s) for s in self.sections.values() if s["suite_id"] in suite_ids]

    # Cases

    def add_case(self, section_id: int, body: Mapping[str, Any]) -> dict[str, Any]:
        section = self._require(self.sections, section_id, "section_id", "section")
        case_id = self._next_id("case")
        now = _now()
        case = {
            "id": case_id,
            "title": self._required_field(body, "title"),
            "section_id": section_id,
            "suite_id": section["suite_id"],
            "template_id": body.get("template_id", 1),
            "type_id": body.get("type_id", 7),
            "priority_id": body.get("priority_id", 2),
            "milestone_id": body.get("milestone_id"),
            "refs": body.get("refs"),
            "estimate": body.get("estimate"),
            "created_by": 1,
            "created_on": now,
            "updated_by": 1,
            "updated_on": now,
        }
        for key, value in body.items():
            if key.startswith("custom_"):
                case[key] = value
        self.cases[case_id] = case
        return dict(case)

    def get_case(self, case_id: int) -> dict[str, Any]:
        return dict(self._require(self.cases, case_id, "case_id", "test case"))

    def update_case(self, case_id: int, body: Mapping[str, Any]) -> dict[str, Any]:
        case = self._require(self.cases, case_id, "case_id", "test case")
        if "section_id" in body:
            section = self._require(
                self.sections, int(body["section_id"]), "section_id", "section"
            )
            case["suite_id"] = section["suite_id"]
        for key, value in body.items():
            if key not in ("id", "suite_id", "created_by", "created_on"):
                case[key] = value
        case["updated_on"] = _now()
        return dict(case)

    def delete_case(self, case_id: int) -> None:
        self._require(self.cases, case_id, "case_id", "test case")
        del self.cases[case_id]

    def list_cases(
        self, project_id: int, params: Mapping[str, str]
    ) -> list[dict[str, Any]]:
        self._require(self.projects, project_id, "project_id", "project")
        suite_ids = {
            s["id"] for s in self.suites.values() if s["project_id"] == project_id
        }
        cases = [c for c in self.cases.values() if c["suite_id"] in suite_ids]
        if params.get("suite_id"):
            suite_id = _int_param(params, "suite_id", 0)
            cases = [c for c in cases if c["suite_id"] == suite_id]
        if params.get("section_id"):
            section_id = _int_param(params, "section_id", 0)
            cases = [c for c in cases if c["section_id"] == section_id]
        return [dict(c) for c in cases]

    # Runs and tests

    def _run_view(self, run: dict[str, Any]) -> dict[str, Any]:
        view = dict(run)
        for field in _STATUS_COUNT_FIELDS.values():
            view[field] = 0
        for test in self.tests.values():
            if test["run_id"] == run["id"]:
                field = _STATUS_COUNT_FIELDS.get(test["status_id"])
                if field:
                    view[field] += 1
        return view

    def add_run(self, project_id: int, body: Mapping[str, Any]) -> dict[str, Any]:
        self._require(self.projects, project_id, "project_id", "project")
        suite_id = self._default_suite_id(project_id, body)
        include_all = bool(body.get("include_all", True))
        suite_cases = [c for c in self.cases.values() if c["suite_id"] == suite_id]
        if include_all:
            selected = suite_cases
        else:
            wanted = set(body.get("case_ids") or [])
            selected = [c for c in suite_cases if c["id"] in wanted]

        run_id = self._next_id("run")
        run = {
            "id": run_id,
            "name": self._required_field(body, "name"),
            "description": body.get("description"),
            "suite_id": suite_id,
            "milestone_id": body.get("milestone_id"),
            "assignedto_id": body.get("assignedto_id"),
            "include_all": include_all,
            "is_completed": False,
            "completed_on": None,
            "config": None,
            "config_ids": [],
            "project_id": project_id,
            "plan_id": None,
            "refs": body.get("refs"),
            "created_on": _now(),
            "created_by": 1,
            "url": f"/index.php?/runs/view/{run_id}",
        }
        self.runs[run_id] = run
        for case in selected:
            test_id = self._next_id("test")
            self.tests[test_id] = {
                "id": test_id,
                "case_id": case["id"],
                "run_id": run_id,
                "status_id": UNTESTED_STATUS_ID,
                "assignedto_id": run["assignedto_id"],
                "title": case["title"],
                "template_id": case["template_id"],
                "type_id": case["type_id"],
                "priority_id": case["priority_id"],
                "estimate": case["estimate"],
                "refs": case["refs"],
                "milestone_id": case["milestone_id"],
            }
        return self._run_view(run)

    def get_run(self, run_id: int) -> dict[str, Any]:
        return self._run_view(self._require(self.runs, run_id, "run_id", "test run"))

    def list_runs(self, project_id: int, params: Mapping[str, str]) -> list[dict[str, Any]]:
        self._require(self.projects, project_id, "project_id", "project")
        runs = [r for r in self.runs.values() if r["project_id"] == project_id]
        is_completed = params.get("is_completed")
        if is_completed:
            wanted = is_completed == "1"
            runs = [r for r in runs if r["is_completed"] == wanted]
        suite_ids = _id_list_param(params, "suite_id")
        if suite_ids is not None:
            runs = [r for r in runs if r["suite_id"] in suite_ids]
        return [self._run_view(r) for r in runs]

    def update_run(self, run_id: int, body: Mapping[str, Any]) -> dict[str, Any]:
        run = self._writable_run(run_id)
        for field in ("name", "description", "milestone_id", "refs"):
            if field in body:
                run[field] = body[field]
        return self._run_view(run)

    def close_run(self, run_id: int) -> dict[str, Any]:
        run = self._writable_run(run_id)
        run["is_completed"] = True
        run["completed_on"] = _now()
        return self._run_view(run)

    def delete_run(self, run_id: int) -> None:
        self._require(self.runs, run_id, "run_id", "test run")
        self._delete_run_contents(run_id)
        del self.runs[run_id]

    def _writable_run(self, run_id: int) -> dict[str, Any]:
        run = self._require(self.runs, run_id, "run_id", "test run")
        if run["is_completed"]:
            raise StubError("Field :run_id refers to a closed test run.")
        return run

    def _delete_run_contents(self, run_id: int) -> None:
        test_ids = [t["id"] for t in self.tests.values() if t["run_id"] == run_id]
        for test_id in test_ids:
            del self.tests[test_id]
        for result_id in [
            r["id"] for r in self.results.values() if r["test_id"] in test_ids
        ]:
            del self.results[result_id]

    def get_test(self, test_id: int) -> dict[str, Any]:
        return dict(self._require(self.tests, test_id, "test_id", "test"))

    def list_tests(self, run_id: int, params: Mapping[str, str]) -> list[dict[str, Any]]:
        self._require(self.runs, run_id, "run_id", "test run")
        tests = [t for t in self.tests.values() if t["run_id"] == run_id]
        status_ids = _id_list_param(params, "status_id")
        if status_ids is not None:
            tests = [t for t in tests if t["status_id"] in status_ids]
        return [dict(t) for t in tests]

    # Results

    def _test_for_case(self, run_id: int, case_id: int) -> dict[str, Any]:
        for test in self.tests.values():
            if test["run_id"] == run_id and test["case_id"] == case_id:
                return test
        raise StubError(
            f"Field :case_id references case {case_id} which is not part of run {run_id}."
        )

    def _record_result(self, test: dict[str, Any], body: Mapping[str, Any]) -> dict[str, Any]:
        result_id = self._next_id("result")
        result = {
            "id": result_id,
            "test_id": test["id"],
            "status_id": body.get("status_id"),
            "comment": body.get("comment"),
            "version": body.get("version"),
            "elapsed": body.get("elapsed"),
            "defects": body.get("defects"),
            "assignedto_id": body.get("assignedto_id"),
            "created_by": 1,
            "created_on": _now(),
            "attachment_ids": [],
        }
        for key, value in body.items():
            if key.startswith("custom_"):
                result[key] = value
        self.results[result_id] = result
        if result["status_id"] is not None:
            test["status_id"] = result["status_id"]
        if result["assignedto_id"] is not None:
            test["assignedto_id"] = result["assignedto_id"]
        return dict(result)

    def add_result(self, test_id: int, body: Mapping[str, Any]) -> dict[str, Any]:
        test = self._require(self.tests, test_id, "test_id", "test")
        self._writable_run(test["run_id"])
        return self._record_result(test, body)

    def add_result_for_case(
        self, run_id: int, case_id: int, body: Mapping[str, Any]
    ) -> dict[str, Any]:
        self._writable_run(run_id)
        return self._record_result(self._test_for_case(run_id, case_id), body)

    def _bulk_entries(self, body: Mapping[str, Any]) -> list[Mapping[str, Any]]:
        entries = body.get("results")
        if not isinstance(entries, list):
            raise StubError("Field :results is a required field.")
        return entries

    def add_results(self, run_id: int, body: Mapping[str, Any]) -> list[dict[str, Any]]:
        """Add results keyed by test ID; nothing is stored unless every entry is valid."""
        self._writable_run(run_id)
        pairs = []
        for entry in self._bulk_entries(body):
            test = self._require(self.tests, int(entry.get("test_id") or 0), "test_id", "test")
            if test["run_id"] != run_id:
                raise StubError("Field :test_id is not a valid or accessible test.")
            pairs.append((test, entry))
        return [self._record_result(test, entry) for test, entry in pairs]

    def add_results_for_cases(
        self, run_id: int, body: Mapping[str, Any]
    ) -> list[dict[str, Any]]:
        """Add results keyed by case ID; nothing is stored unless every entry is valid."""
        self._writable_run(run_id)
        pairs = [
            (self._test_for_case(run_id, int(entry.get("case_id") or 0)), entry)
            for entry in self._bulk_entries(body)
        ]
        return [self._record_result(test, entry) for test, entry in pairs]

    def _filter_results(
        self, results: Iterable[dict[str, Any]], params: Mapping[str, str]
    ) -> list[dict[str, Any]]:
        status_ids = _id_list_param(params, "status_id")
        selected = [
            dict(r)
            for r in results
            if status_ids is None or r["status_id"] in status_ids
        ]
        # newest first, as TestRail does
        return sorted(selected, key=lambda r: r["id"], reverse=True)

    def list_results(self, test_id: int, params: Mapping[str, str]) -> list[dict[str, Any]]:
        self._require(self.tests, test_id, "test_id", "test")
        return self._filter_results(
            (r for r in self.results.values() if r["test_id"] == test_id), params
        )

    def list_results_for_case(
        self, run_id: int, case_id: int, params: Mapping[str, str]
    ) -> list[dict[str, Any]]:
        self._require(self.runs, run_id, "run_id", "test run")
        test = self._test_for_case(run_id, case_id)
        return self.list_results(test["id"], params)

    def list_results_for_run(
        self, run_id: int, params: Mapping[str, str]
    ) -> list[dict[str, Any]]:
        self._require(self.runs, run_id, "run_id", "test run")
        test_ids = {t["id"] for t in self.tests.values() if t["run_id"] == run_id}
        return self._filter_results(
            (r for r in self.results.values() if r["test_id"] in test_ids), params
        )

    # Metadata

    def list_statuses(self) -> list[dict[str, Any]]:
        return [dict(s) for s in SYSTEM_STATUSES]

    def current_user(self) -> dict[str, Any]:
        return {
            "id": 1,
            "name": "Stub Administrator",
            "email": self.current_user_email,
            "is_active": True,
            "is_admin": True,
            "role_id": 1,
            "role": "Lead",
        }
