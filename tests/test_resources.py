"""
Tests for the per-area resource clients.

Each operation must address the right TestRail endpoint with the right
HTTP method, encode its body and parameters the way TestRail expects, and
unwrap list responses whether or not they come in a pagination envelope.
"""

import json

import pytest
from pydantic import ValidationError

from testrail_client.exceptions import APIError, RateLimitError
from testrail_client.models import (
    AddCase,
    AddResultsForCases,
    Attachment,
    Case,
    CaseFilters,
    CaseResultEntry,
    Project,
    ProjectFilters,
    Result,
    Run,
    TestResultEntry,
    UpdateCase,
)

from .conftest import split_request

ENDPOINTS = [
    # projects
    (lambda c, f: c.projects.list(), "GET", "get_projects"),
    (lambda c, f: c.projects.get(1), "GET", "get_project/1"),
    (lambda c, f: c.projects.add({"name": "P"}), "POST", "add_project"),
    (lambda c, f: c.projects.update(1, {"name": "P"}), "POST", "update_project/1"),
    (lambda c, f: c.projects.delete(1), "POST", "delete_project/1"),
    # cases
    (lambda c, f: c.cases.list(1), "GET", "get_cases/1"),
    (lambda c, f: c.cases.get(5), "GET", "get_case/5"),
    (lambda c, f: c.cases.add(3, {"title": "T"}), "POST", "add_case/3"),
    (lambda c, f: c.cases.update(5, {"title": "T"}), "POST", "update_case/5"),
    (lambda c, f: c.cases.update_bulk(2, [5], {}), "POST", "update_cases/2"),
    (lambda c, f: c.cases.copy_to_section(3, [5]), "POST", "copy_cases_to_section/3"),
    (lambda c, f: c.cases.move_to_section(3, 2, [5]), "POST", "move_cases_to_section/3"),
    (lambda c, f: c.cases.delete(5), "POST", "delete_case/5"),
    (lambda c, f: c.cases.delete_bulk(2, 1, [5]), "POST", "delete_cases/2"),
    (lambda c, f: c.cases.get_history(5), "GET", "get_history_for_case/5"),
    # suites and sections
    (lambda c, f: c.suites.list(1), "GET", "get_suites/1"),
    (lambda c, f: c.suites.get(2), "GET", "get_suite/2"),
    (lambda c, f: c.suites.add(1, {"name": "S"}), "POST", "add_suite/1"),
    (lambda c, f: c.suites.update(2, {"name": "S"}), "POST", "update_suite/2"),
    (lambda c, f: c.suites.delete(2), "POST", "delete_suite/2"),
    (lambda c, f: c.sections.list(1), "GET", "get_sections/1"),
    (lambda c, f: c.sections.get(3), "GET", "get_section/3"),
    (lambda c, f: c.sections.add(1, {"name": "S"}), "POST", "add_section/1"),
    (lambda c, f: c.sections.update(3, {"name": "S"}), "POST", "update_section/3"),
    (lambda c, f: c.sections.move(3, {"parent_id": 4}), "POST", "move_section/3"),
    (lambda c, f: c.sections.delete(3), "POST", "delete_section/3"),
    # runs and tests
    (lambda c, f: c.runs.list(1), "GET", "get_runs/1"),
    (lambda c, f: c.runs.get(4), "GET", "get_run/4"),
    (lambda c, f: c.runs.add(1, {"name": "R"}), "POST", "add_run/1"),
    (lambda c, f: c.runs.update(4, {"name": "R"}), "POST", "update_run/4"),
    (lambda c, f: c.runs.close(4), "POST", "close_run/4"),
    (lambda c, f: c.runs.delete(4), "POST", "delete_run/4"),
    (lambda c, f: c.tests.list(4), "GET", "get_tests/4"),
    (lambda c, f: c.tests.get(9), "GET", "get_test/9"),
    # results
    (lambda c, f: c.results.list(9), "GET", "get_results/9"),
    (lambda c, f: c.results.list_for_case(4, 5), "GET", "get_results_for_case/4/5"),
    (lambda c, f: c.results.list_for_run(4), "GET", "get_results_for_run/4"),
    (lambda c, f: c.results.get(11), "GET", "get_result/11"),
    (lambda c, f: c.results.add(9, {"status_id": 1}), "POST", "add_result/9"),
    (
        lambda c, f: c.results.add_for_case(4, 5, {"status_id": 1}),
        "POST",
        "add_result_for_case/4/5",
    ),
    (lambda c, f: c.results.add_for_cases(4, []), "POST", "add_results_for_cases/4"),
    (lambda c, f: c.results.add_for_tests(4, []), "POST", "add_results/4"),
    (lambda c, f: c.result_fields.list(), "GET", "get_result_fields"),
    # plans
    (lambda c, f: c.plans.list(1), "GET", "get_plans/1"),
    (lambda c, f: c.plans.get(6), "GET", "get_plan/6"),
    (lambda c, f: c.plans.add(1, {"name": "P"}), "POST", "add_plan/1"),
    (lambda c, f: c.plans.update(6, {"name": "P"}), "POST", "update_plan/6"),
    (lambda c, f: c.plans.close(6), "POST", "close_plan/6"),
    (lambda c, f: c.plans.delete(6), "POST", "delete_plan/6"),
    (lambda c, f: c.plans.add_entry(6, {"suite_id": 2}), "POST", "add_plan_entry/6"),
    (
        lambda c, f: c.plans.update_entry(6, "abc", {"name": "E"}),
        "POST",
        "update_plan_entry/6/abc",
    ),
    (lambda c, f: c.plans.delete_entry(6, "abc"), "POST", "delete_plan_entry/6/abc"),
    (
        lambda c, f: c.plans.add_run_to_entry(6, "abc", {"config_ids": [1]}),
        "POST",
        "add_run_to_plan_entry/6/abc",
    ),
    (
        lambda c, f: c.plans.update_run_in_entry(4, {"description": "D"}),
        "POST",
        "update_run_in_plan_entry/4",
    ),
    (
        lambda c, f: c.plans.delete_run_from_entry(4),
        "POST",
        "delete_run_from_plan_entry/4",
    ),
    # milestones
    (lambda c, f: c.milestones.list(1), "GET", "get_milestones/1"),
    (lambda c, f: c.milestones.get(7), "GET", "get_milestone/7"),
    (lambda c, f: c.milestones.add(1, {"name": "M"}), "POST", "add_milestone/1"),
    (lambda c, f: c.milestones.update(7, {"name": "M"}), "POST", "update_milestone/7"),
    (lambda c, f: c.milestones.delete(7), "POST", "delete_milestone/7"),
    # attachments
    (lambda c, f: c.attachments.add_to_case(5, f), "POST", "add_attachment_to_case/5"),
    (lambda c, f: c.attachments.add_to_plan(6, f), "POST", "add_attachment_to_plan/6"),
    (
        lambda c, f: c.attachments.add_to_plan_entry(6, "abc", f),
        "POST",
        "add_attachment_to_plan_entry/6/abc",
    ),
    (lambda c, f: c.attachments.add_to_run(4, f), "POST", "add_attachment_to_run/4"),
    (
        lambda c, f: c.attachments.add_to_result(11, f),
        "POST",
        "add_attachment_to_result/11",
    ),
    (lambda c, f: c.attachments.get(8), "GET", "get_attachment/8"),
    (lambda c, f: c.attachments.delete(8), "POST", "delete_attachment/8"),
    (lambda c, f: c.attachments.list_for_case(5), "GET", "get_attachments_for_case/5"),
    (lambda c, f: c.attachments.list_for_plan(6), "GET", "get_attachments_for_plan/6"),
    (
        lambda c, f: c.attachments.list_for_plan_entry(6, "abc"),
        "GET",
        "get_attachments_for_plan_entry/6/abc",
    ),
    (lambda c, f: c.attachments.list_for_run(4), "GET", "get_attachments_for_run/4"),
    (lambda c, f: c.attachments.list_for_test(9), "GET", "get_attachments_for_test/9"),
    # bdd
    (lambda c, f: c.bdd.get(5), "GET", "get_bdd/5"),
    (lambda c, f: c.bdd.add(3, "Feature: X"), "POST", "add_bdd/3"),
    # configurations
    (lambda c, f: c.configurations.list(1), "GET", "get_configs/1"),
    (
        lambda c, f: c.configurations.add_group(1, {"name": "Browsers"}),
        "POST",
        "add_config_group/1",
    ),
    (lambda c, f: c.configurations.add(2, {"name": "Chrome"}), "POST", "add_config/2"),
    (
        lambda c, f: c.configurations.update_group(2, {"name": "B"}),
        "POST",
        "update_config_group/2",
    ),
    (lambda c, f: c.configurations.update(3, {"name": "C"}), "POST", "update_config/3"),
    (lambda c, f: c.configurations.delete_group(2), "POST", "delete_config_group/2"),
    (lambda c, f: c.configurations.delete(3), "POST", "delete_config/3"),
    # datasets and variables
    (lambda c, f: c.datasets.list(1), "GET", "get_datasets/1"),
    (lambda c, f: c.datasets.get(2), "GET", "get_dataset/2"),
    (lambda c, f: c.datasets.add(1, {"name": "D"}), "POST", "add_dataset/1"),
    (lambda c, f: c.datasets.update(2, {"name": "D"}), "POST", "update_dataset/2"),
    (lambda c, f: c.datasets.delete(2), "POST", "delete_dataset/2"),
    (lambda c, f: c.datasets.list_items(), "GET", "get_dataset_items"),
    (lambda c, f: c.datasets.add_item({"dataset_id": 2}), "POST", "add_dataset_item"),
    (
        lambda c, f: c.datasets.update_item(3, {"name": "I"}),
        "POST",
        "update_dataset_item/3",
    ),
    (lambda c, f: c.datasets.delete_item(3), "POST", "delete_dataset_item/3"),
    (lambda c, f: c.variables.list(1), "GET", "get_variables/1"),
    (lambda c, f: c.variables.add(1, {"name": "v"}), "POST", "add_variable/1"),
    (lambda c, f: c.variables.update(4, {"name": "v"}), "POST", "update_variable/4"),
    (lambda c, f: c.variables.delete(4), "POST", "delete_variable/4"),
    # users, groups and roles
    (lambda c, f: c.users.list(), "GET", "get_users"),
    (lambda c, f: c.users.list(project_id=1), "GET", "get_users/1"),
    (lambda c, f: c.users.get(3), "GET", "get_user/3"),
    (lambda c, f: c.users.get_by_email("a@b.c"), "GET", "get_user_by_email"),
    (lambda c, f: c.users.add({"name": "U"}), "POST", "add_user"),
    (lambda c, f: c.users.update(3, {"name": "U"}), "POST", "update_user/3"),
    (lambda c, f: c.users.get_current(), "GET", "get_current_user"),
    (lambda c, f: c.groups.list(), "GET", "get_groups"),
    (lambda c, f: c.groups.get(2), "GET", "get_group/2"),
    (lambda c, f: c.groups.add({"name": "G"}), "POST", "add_group"),
    (lambda c, f: c.groups.update(2, {"name": "G"}), "POST", "update_group/2"),
    (lambda c, f: c.groups.delete(2), "POST", "delete_group/2"),
    (lambda c, f: c.roles.list(), "GET", "get_roles"),
    # shared steps
    (lambda c, f: c.shared_steps.list(1), "GET", "get_shared_steps/1"),
    (lambda c, f: c.shared_steps.get(4), "GET", "get_shared_step/4"),
    (lambda c, f: c.shared_steps.add(1, {"title": "S"}), "POST", "add_shared_step/1"),
    (
        lambda c, f: c.shared_steps.update(4, {"title": "S"}),
        "POST",
        "update_shared_step/4",
    ),
    (lambda c, f: c.shared_steps.delete(4), "POST", "delete_shared_step/4"),
    (
        lambda c, f: c.shared_steps.get_cases(4),
        "GET",
        "get_shared_step/4/get_cases",
    ),
    # reports
    (lambda c, f: c.reports.list(1), "GET", "get_reports/1"),
    (lambda c, f: c.reports.run(12), "POST", "reports/12/run"),
    # fields, types, priorities, statuses and templates
    (lambda c, f: c.case_fields.list(), "GET", "get_case_fields"),
    (lambda c, f: c.case_fields.add({"type": "String"}), "POST", "add_case_field"),
    (lambda c, f: c.case_types.list(), "GET", "get_case_types"),
    (lambda c, f: c.priorities.list(), "GET", "get_priorities"),
    (lambda c, f: c.statuses.list(), "GET", "get_statuses"),
    (lambda c, f: c.statuses.list_case_statuses(), "GET", "get_case_statuses"),
    (lambda c, f: c.templates.list(1), "GET", "get_templates/1"),
    (lambda c, f: c.templates.get(2), "GET", "templates/2"),
    (lambda c, f: c.templates.add(1, {"name": "T"}), "POST", "projects/1/templates"),
    (lambda c, f: c.templates.update(2, {"name": "T"}), "POST", "templates/2"),
    (lambda c, f: c.templates.delete(2), "POST", "templates/2"),
]


@pytest.fixture
def upload_file(tmp_path):
    path = tmp_path / "report.txt"
    path.write_bytes(b"all green\n")
    return path


class TestEndpointMapping:
    """Every operation addresses its TestRail endpoint with the right method."""

    @pytest.mark.parametrize(
        "call, method, endpoint",
        ENDPOINTS,
        ids=[f"{method} {endpoint}" for _, method, endpoint in ENDPOINTS],
    )
    async def test_endpoint(self, client, fake_api, upload_file, call, method, endpoint):
        await call(client, upload_file)

        assert len(fake_api.requests) == 1
        request = fake_api.last
        assert request.method == method
        assert split_request(request)[0] == f"/api/v2/{endpoint}"


class TestListResponses:
    """List operations accept both the paginated envelope and a bare array."""

    async def test_envelope_is_unwrapped(self, client, fake_api):
        fake_api.respond(
            json={
                "offset": 0,
                "limit": 250,
                "size": 2,
                "_links": {"next": None, "prev": None},
                "projects": [{"id": 1, "name": "Web"}, {"id": 2, "name": "Mobile"}],
            }
        )

        projects = await client.projects.list()

        assert [project.name for project in projects] == ["Web", "Mobile"]
        assert all(isinstance(project, Project) for project in projects)

    async def test_bare_list(self, client, fake_api):
        fake_api.respond(json=[{"id": 2, "name": "Master"}])

        suites = await client.suites.list(1)

        assert len(suites) == 1
        assert suites[0].id == 2

    async def test_missing_key_is_empty(self, client, fake_api):
        fake_api.respond(json={"offset": 0, "limit": 250, "size": 0})

        assert await client.runs.list(1) == []

    async def test_empty_body_is_empty(self, client, fake_api):
        fake_api.respond(status_code=200)

        assert await client.milestones.list(1) == []

    async def test_unexpected_shape_is_api_error(self, client, fake_api):
        fake_api.respond(json="not a list")

        with pytest.raises(APIError):
            await client.cases.list(1)

    async def test_error_object_is_api_error(self, client, fake_api):
        fake_api.respond(json={"error": "Something went wrong"})

        with pytest.raises(APIError) as exc_info:
            await client.runs.list(1)

        assert exc_info.value.status_code == 200
        assert exc_info.value.body == {"error": "Something went wrong"}

    async def test_null_key_is_empty(self, client, fake_api):
        fake_api.respond(json={"cases": None})

        assert await client.cases.list(1) == []

    async def test_pagination_and_filters_sent(self, client, fake_api):
        await client.projects.list(
            offset=250, limit=50, filters=ProjectFilters(is_completed=0)
        )

        _, params = split_request(fake_api.last)
        assert params == {"offset": "250", "limit": "50", "is_completed": "0"}

    async def test_case_filters(self, client, fake_api):
        await client.cases.list(1, CaseFilters(suite_id=2, priority_id=[3, 4]))

        _, params = split_request(fake_api.last)
        assert params == {"suite_id": "2", "priority_id": "3,4"}

    def test_unknown_filter_rejected(self):
        with pytest.raises(ValueError):
            CaseFilters(not_a_filter=1)

    async def test_sections_omit_missing_suite(self, client, fake_api):
        await client.sections.list(1)
        _, params = split_request(fake_api.last)
        assert "suite_id" not in params

        await client.sections.list(1, suite_id=4)
        _, params = split_request(fake_api.last)
        assert params["suite_id"] == "4"

    async def test_records_keep_unknown_fields(self, client, fake_api):
        fake_api.respond(
            json={"cases": [{"id": 5, "title": "Login", "custom_browser": "firefox"}]}
        )

        (case,) = await client.cases.list(1)

        assert isinstance(case, Case)
        assert case.custom_browser == "firefox"
        assert case.model_dump(exclude_unset=True) == {
            "id": 5,
            "title": "Login",
            "custom_browser": "firefox",
        }

    async def test_shared_step_case_ids(self, client, fake_api):
        fake_api.respond(json={"case_ids": [5, 6]})

        assert await client.shared_steps.get_cases(4) == [5, 6]


class TestRequestBodies:
    async def test_payload_sends_only_set_fields(self, client, fake_api):
        fake_api.respond(json={"id": 5, "title": "Renamed"})

        case = await client.cases.update(5, UpdateCase(title="Renamed"))

        assert json.loads(fake_api.last.content) == {"title": "Renamed"}
        assert case.title == "Renamed"

    async def test_payload_custom_fields(self, client, fake_api):
        await client.cases.add(3, AddCase(title="Checkout", custom_browser="chrome"))

        assert json.loads(fake_api.last.content) == {
            "title": "Checkout",
            "custom_browser": "chrome",
        }

    async def test_mapping_payload_passes_through(self, client, fake_api):
        await client.projects.add({"name": "Web", "suite_mode": 1})

        assert json.loads(fake_api.last.content) == {"name": "Web", "suite_mode": 1}

    async def test_case_delete_soft_flag(self, client, fake_api):
        await client.cases.delete(5)
        assert json.loads(fake_api.last.content) == {"soft": 0}

        await client.cases.delete(5, soft=True)
        assert json.loads(fake_api.last.content) == {"soft": 1}

    async def test_bulk_case_update(self, client, fake_api):
        fake_api.respond(json={"updated_cases": [{"id": 5}, {"id": 6}]})

        cases = await client.cases.update_bulk(2, [5, 6], UpdateCase(priority_id=4))

        assert json.loads(fake_api.last.content) == {"case_ids": [5, 6], "priority_id": 4}
        assert [case.id for case in cases] == [5, 6]

    async def test_bulk_case_delete(self, client, fake_api):
        await client.cases.delete_bulk(2, 1, [5, 6], soft=True)

        assert json.loads(fake_api.last.content) == {
            "project_id": 1,
            "case_ids": [5, 6],
            "soft": 1,
        }

    async def test_move_cases(self, client, fake_api):
        await client.cases.move_to_section(3, 2, [5])

        assert json.loads(fake_api.last.content) == {"suite_id": 2, "case_ids": [5]}

    async def test_suite_delete_without_soft_has_no_body(self, client, fake_api):
        await client.suites.delete(2)

        assert fake_api.last.content == b""
        assert fake_api.last.headers["Content-Type"] == "application/json"

        await client.suites.delete(2, soft=True)
        assert json.loads(fake_api.last.content) == {"soft": 1}

    async def test_shared_step_delete_keep_in_cases(self, client, fake_api):
        await client.shared_steps.delete(4, keep_in_cases=False)

        assert json.loads(fake_api.last.content) == {"keep_in_cases": 0}

    async def test_bulk_results_from_entries(self, client, fake_api):
        fake_api.respond(json=[{"id": 1, "case_id": 5, "status_id": 1}])

        results = await client.results.add_for_cases(
            4, [CaseResultEntry(case_id=5, status_id=1)]
        )

        assert json.loads(fake_api.last.content) == {
            "results": [{"case_id": 5, "status_id": 1}]
        }
        assert isinstance(results[0], Result)
        assert results[0].case_id == 5

    async def test_bulk_results_from_model(self, client, fake_api):
        fake_api.respond(json=[])

        await client.results.add_for_cases(
            4,
            AddResultsForCases(
                results=[CaseResultEntry(case_id=5, status_id=5, comment="Broken")]
            ),
        )

        assert json.loads(fake_api.last.content) == {
            "results": [{"case_id": 5, "status_id": 5, "comment": "Broken"}]
        }

    async def test_bulk_results_for_tests(self, client, fake_api):
        fake_api.respond(json=[])

        await client.results.add_for_tests(4, [TestResultEntry(test_id=9, status_id=1)])

        assert json.loads(fake_api.last.content) == {
            "results": [{"test_id": 9, "status_id": 1}]
        }


class TestQueryParameters:
    async def test_get_test_with_data(self, client, fake_api):
        await client.tests.get(9, with_data="all")
        assert split_request(fake_api.last)[1] == {"with_data": "all"}

        await client.tests.get(9)
        assert split_request(fake_api.last)[1] == {}

    async def test_user_by_email_is_escaped(self, client, fake_api):
        await client.users.get_by_email("qa+bot@example.com")

        assert b"email=qa%2Bbot%40example.com" in fake_api.last.url.query
        assert split_request(fake_api.last)[1] == {"email": "qa+bot@example.com"}

    async def test_results_filters(self, client, fake_api):
        await client.results.list_for_run(4, limit=10)

        assert split_request(fake_api.last)[1] == {"offset": "0", "limit": "10"}


class TestAttachments:
    async def test_upload_is_multipart(self, client, fake_api, upload_file):
        fake_api.respond(json={"attachment_id": 443})

        added = await client.attachments.add_to_run(4, upload_file)

        request = fake_api.last
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        assert b'name="attachment"; filename="report.txt"' in request.content
        assert b"Content-Type: application/octet-stream" in request.content
        assert b"all green\n" in request.content
        assert added.attachment_id == 443

    async def test_upload_accepts_string_path(self, client, fake_api, upload_file):
        await client.attachments.add_to_case(5, str(upload_file))

        assert b"all green\n" in fake_api.last.content

    async def test_upload_streams_file_handle(self, client, fake_api, upload_file, monkeypatch):
        opened = []

        def tracking_open(*args, **kwargs):
            handle = open(*args, **kwargs)
            opened.append(handle)
            return handle

        monkeypatch.setattr(
            "testrail_client.resources.attachments.open", tracking_open, raising=False
        )

        await client.attachments.add_to_plan(6, upload_file)

        (handle,) = opened
        assert str(handle.name) == str(upload_file)
        assert handle.mode == "rb"
        assert handle.closed
        assert b"all green\n" in fake_api.last.content

    async def test_missing_file_sends_nothing(self, client, fake_api, tmp_path):
        with pytest.raises(FileNotFoundError):
            await client.attachments.add_to_case(5, tmp_path / "missing.log")

        assert fake_api.requests == []

    async def test_download_returns_bytes(self, client, fake_api):
        fake_api.respond(content=b"\x00\x01binary")

        assert await client.attachments.get("b1e0a2c4") == b"\x00\x01binary"
        assert split_request(fake_api.last)[0] == "/api/v2/get_attachment/b1e0a2c4"

    async def test_list_for_case(self, client, fake_api):
        fake_api.respond(json={"attachments": [{"id": 443, "name": "report.txt"}]})

        (attachment,) = await client.attachments.list_for_case(5)

        assert isinstance(attachment, Attachment)
        assert attachment.name == "report.txt"


class TestBdd:
    async def test_get_returns_feature_text(self, client, fake_api):
        fake_api.respond(text="Feature: Login\n  Scenario: valid user")

        assert await client.bdd.get(5) == "Feature: Login\n  Scenario: valid user"

    async def test_add_posts_plain_text(self, client, fake_api):
        fake_api.respond(json={"id": 12, "title": "Login"})

        case = await client.bdd.add(3, "Feature: Login")

        request = fake_api.last
        assert request.headers["Content-Type"] == "text/plain"
        assert request.content == b"Feature: Login"
        assert case.id == 12


class TestErrorsPropagate:
    async def test_rate_limit_from_resource(self, client, fake_api):
        fake_api.respond(status_code=429, headers={"Retry-After": "15"}, json={})

        with pytest.raises(RateLimitError) as exc_info:
            await client.runs.get(4)

        assert exc_info.value.retry_after == 15
        assert len(fake_api.requests) == 1

    async def test_api_error_from_resource(self, client, fake_api):
        fake_api.respond(
            status_code=400,
            json={"error": "Field :case_id is not a valid test case."},
        )

        with pytest.raises(APIError) as exc_info:
            await client.cases.get(999)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Field :case_id is not a valid test case."


class TestRecordValues:
    """Records carry the server's values as sent, or fail as an APIError."""

    async def test_round_trip_keeps_values(self, client, fake_api):
        run = {
            "id": 7,
            "name": "Nightly",
            "is_completed": False,
            "completed_on": None,
            "config_ids": [1, 2],
            "passed_count": 0,
            "custom_ratio": 0.75,
            "custom_flag": 1,
            "custom_labels": ["smoke", 3, None],
        }
        fake_api.respond(json={"offset": 0, "limit": 250, "size": 1, "runs": [run]})

        (parsed,) = await client.runs.list(1)

        assert isinstance(parsed, Run)
        assert parsed.model_dump(exclude_unset=True) == run
        assert parsed.is_completed is False
        assert parsed.custom_flag == 1

    @pytest.mark.parametrize(
        "record",
        [
            {"id": "7"},
            {"id": 7, "is_completed": 0},
            {"id": 7, "completed_on": 1.0},
        ],
        ids=["string id", "int flag", "float timestamp"],
    )
    async def test_values_are_not_coerced(self, client, fake_api, record):
        fake_api.respond(json={"runs": [record]})

        with pytest.raises(APIError) as exc_info:
            await client.runs.list(1)

        assert exc_info.value.status_code == 200
        assert exc_info.value.body == record

    async def test_mismatched_record_is_api_error(self, client, fake_api):
        fake_api.respond(json={"id": 1, "title": 12345})

        with pytest.raises(APIError) as exc_info:
            await client.cases.get(1)

        error = exc_info.value
        assert error.status_code == 200
        assert error.body == {"id": 1, "title": 12345}
        assert "Case" in error.message
        assert isinstance(error.__cause__, ValidationError)

    async def test_project_completion_flag(self, client, fake_api):
        fake_api.respond(json={"id": 1, "name": "Web", "is_completed": False})

        project = await client.projects.get(1)

        assert project.is_completed is False
        assert project.model_dump(exclude_unset=True) == {
            "id": 1,
            "name": "Web",
            "is_completed": False,
        }
