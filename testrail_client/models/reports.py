from typing import Optional

from .base import Record


class Report(Record):
    """A report template available for API access."""

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    notify_user: Optional[bool] = None
    notify_link: Optional[bool] = None
    notify_link_recipients: Optional[str] = None
    notify_attachment: Optional[bool] = None
    notify_attachment_recipients: Optional[str] = None
    notify_attachment_html_format: Optional[bool] = None
    notify_attachment_pdf_format: Optional[bool] = None
    cases_groupby: Optional[str] = None
    cases_columns: Optional[list[str]] = None
    cases_filters: Optional[list[str]] = None
    cases_limit: Optional[int] = None
    defects_groupby: Optional[str] = None
    defects_columns: Optional[list[str]] = None
    defects_filters: Optional[list[str]] = None
    defects_limit: Optional[int] = None
    results_groupby: Optional[str] = None
    results_columns: Optional[list[str]] = None
    results_filters: Optional[list[str]] = None
    results_limit: Optional[int] = None
    created_by: Optional[int] = None
    created_on: Optional[int] = None
    system_name: Optional[str] = None
    is_system: Optional[bool] = None


class ReportRun(Record):
    id: Optional[int] = None
    report_id: Optional[int] = None
    report_template_id: Optional[int] = None
    name: Optional[str] = None
    status_id: Optional[int] = None
    status_text: Optional[str] = None
    description: Optional[str] = None
    created_by: Optional[int] = None
    created_on: Optional[int] = None
    error: Optional[str] = None
    url: Optional[str] = None
