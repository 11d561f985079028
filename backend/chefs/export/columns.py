"""
Column selection for the submissions read model.
"""
from typing import List, Optional

DEFAULT_COLUMNS = [
    "confirmationId",
    "formName",
    "version",
    "createdAt",
    "fullName",
    "username",
    "email",
]

STATUS_COLUMNS = ["status", "assignee", "assigneeEmail"]

# Nested content document; always last
SUBMISSION_COLUMN = "submission"


def submissions_columns(form, params=None) -> List[str]:
    """
    Columns to project when exporting submissions.

    An explicit, non-empty params.columns replaces the default selection
    verbatim. Otherwise the defaults are used, with status columns added when
    the form tracks status updates, followed by the submission content.

    Args:
        form: Form (anything with enable_status_updates)
        params: ExportParams or None

    Returns:
        Ordered column names
    """
    explicit: Optional[List[str]] = getattr(params, "columns", None) if params else None
    if explicit:
        return list(explicit)

    columns = list(DEFAULT_COLUMNS)
    if getattr(form, "enable_status_updates", False):
        columns.extend(STATUS_COLUMNS)
    columns.append(SUBMISSION_COLUMN)
    return columns
