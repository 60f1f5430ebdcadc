"""Pydantic models for TestRail records, payloads and filters."""

from .attachments import AddedAttachment, Attachment
from .base import Filters, Payload, Record
from .cases import (
    AddCase,
    BddCase,
    Case,
    CaseFilters,
    CaseHistory,
    CaseStep,
    UpdateCase,
)
from .configurations import Config, ConfigGroup, ConfigName
from .datasets import (
    AddDataset,
    AddDatasetItem,
    Dataset,
    DatasetItem,
    DatasetItemFilters,
    DatasetVariable,
    UpdateDataset,
    UpdateDatasetItem,
    Variable,
    VariableName,
)
from .fields import (
    AddCaseField,
    AddTemplate,
    CaseField,
    CaseStatus,
    CaseType,
    FieldConfig,
    FieldContext,
    Priority,
    Role,
    Status,
    Template,
    UpdateTemplate,
)
from .milestones import AddMilestone, Milestone, MilestoneFilters, UpdateMilestone
from .plans import (
    AddPlan,
    AddPlanEntry,
    AddRunToPlanEntry,
    Plan,
    PlanEntry,
    PlanEntryRun,
    PlanEntryRunSpec,
    PlanFilters,
    UpdatePlan,
    UpdatePlanEntry,
    UpdateRunInPlanEntry,
)
from .projects import AddProject, Project, ProjectFilters, UpdateProject
from .reports import Report, ReportRun
from .results import (
    AddResult,
    AddResults,
    AddResultsForCases,
    CaseResultEntry,
    Result,
    ResultField,
    ResultFilters,
    ResultForRunFilters,
    TestResultEntry,
)
from .runs import AddRun, Run, RunFilters, Test, TestFilters, UpdateRun
from .shared_steps import (
    AddSharedStep,
    SharedStep,
    SharedStepFilters,
    UpdateSharedStep,
)
from .suites import (
    AddSection,
    AddSuite,
    MoveSection,
    Section,
    SectionFilters,
    Suite,
    UpdateSection,
    UpdateSuite,
)
from .users import (
    AddGroup,
    AddUser,
    Group,
    GroupFilters,
    UpdateGroup,
    UpdateUser,
    User,
)

__all__ = [
    "AddCase",
    "AddCaseField",
    "AddDataset",
    "AddDatasetItem",
    "AddGroup",
    "AddMilestone",
    "AddPlan",
    "AddPlanEntry",
    "AddProject",
    "AddResult",
    "AddResults",
    "AddResultsForCases",
    "AddRun",
    "AddRunToPlanEntry",
    "AddSection",
    "AddSharedStep",
    "AddSuite",
    "AddTemplate",
    "AddUser",
    "AddedAttachment",
    "Attachment",
    "BddCase",
    "Case",
    "CaseField",
    "CaseFilters",
    "CaseHistory",
    "CaseResultEntry",
    "CaseStatus",
    "CaseStep",
    "CaseType",
    "Config",
    "ConfigGroup",
    "ConfigName",
    "Dataset",
    "DatasetItem",
    "DatasetItemFilters",
    "DatasetVariable",
    "FieldConfig",
    "FieldContext",
    "Filters",
    "Group",
    "GroupFilters",
    "Milestone",
    "MilestoneFilters",
    "MoveSection",
    "Payload",
    "Plan",
    "PlanEntry",
    "PlanEntryRun",
    "PlanEntryRunSpec",
    "PlanFilters",
    "Priority",
    "Project",
    "ProjectFilters",
    "Record",
    "Report",
    "ReportRun",
    "Result",
    "ResultField",
    "ResultFilters",
    "ResultForRunFilters",
    "Role",
    "Run",
    "RunFilters",
    "Section",
    "SectionFilters",
    "SharedStep",
    "SharedStepFilters",
    "Status",
    "Suite",
    "Template",
    "Test",
    "TestFilters",
    "TestResultEntry",
    "UpdateCase",
    "UpdateDataset",
    "UpdateDatasetItem",
    "UpdateGroup",
    "UpdateMilestone",
    "UpdatePlan",
    "UpdatePlanEntry",
    "UpdateProject",
    "UpdateRunInPlanEntry",
    "UpdateSection",
    "UpdateSuite",
    "UpdateTemplate",
    "UpdateUser",
    "User",
    "Variable",
    "VariableName",
]
