"""Per-area resource clients; each wraps one group of TestRail endpoints."""

from .attachments import AttachmentsResource
from .base import Resource, unwrap
from .bdd import BddResource
from .cases import CasesResource
from .configurations import ConfigurationsResource
from .datasets import DatasetsResource, VariablesResource
from .fields import (
    CaseFieldsResource,
    CaseTypesResource,
    PrioritiesResource,
    StatusesResource,
    TemplatesResource,
)
from .milestones import MilestonesResource
from .plans import PlansResource
from .projects import ProjectsResource
from .reports import ReportsResource
from .results import ResultFieldsResource, ResultsResource
from .runs import RunsResource, TestsResource
from .shared_steps import SharedStepsResource
from .suites import SectionsResource, SuitesResource
from .users import GroupsResource, RolesResource, UsersResource

__all__ = [
    "AttachmentsResource",
    "BddResource",
    "CaseFieldsResource",
    "CaseTypesResource",
    "CasesResource",
    "ConfigurationsResource",
    "DatasetsResource",
    "GroupsResource",
    "MilestonesResource",
    "PlansResource",
    "PrioritiesResource",
    "ProjectsResource",
    "ReportsResource",
    "Resource",
    "ResultFieldsResource",
    "ResultsResource",
    "RolesResource",
    "RunsResource",
    "SectionsResource",
    "SharedStepsResource",
    "StatusesResource",
    "SuitesResource",
    "TemplatesResource",
    "TestsResource",
    "UsersResource",
    "VariablesResource",
    "unwrap",
]
