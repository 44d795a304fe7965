"""
Issues core - field building and input validation for tracker requests.

Functional Core - pure business logic.
"""

from __future__ import annotations

from typing import Any

from src.components.adf import ADFValidationError, validate_adf
from src.domain.adf import ADFDocument

from .models import CreateIssueInput, IssueValidationError, UpdateIssueInput

DEFAULT_ISSUE_TYPE = "Task"


def validate_description(
    description: Any,
) -> tuple[ADFDocument | None, list[IssueValidationError]]:
    """
    Validate an issue description document.

    Returns the typed document, or an ``invalid_adf`` error carrying the
    validator's path and details.
    """
    try:
        return validate_adf(description), []
    except ADFValidationError as e:
        return None, [
            IssueValidationError(
                code="invalid_adf",
                message=f"Invalid ADF format for description: {e}",
                path=e.path,
                details=e.details,
            )
        ]


def validate_create_input(
    inp: CreateIssueInput,
    allowed_issue_types: list[str] | None = None,
    default_issue_type: str = DEFAULT_ISSUE_TYPE,
) -> list[IssueValidationError]:
    """Validate the plain fields of a create request."""
    errors: list[IssueValidationError] = []

    if not inp.project_key or not inp.project_key.strip():
        errors.append(
            IssueValidationError(
                code="project_key_required",
                message="Project key is required",
                path="project_key",
            )
        )

    if not inp.summary or not inp.summary.strip():
        errors.append(
            IssueValidationError(
                code="summary_required",
                message="Summary is required",
                path="summary",
            )
        )

    issue_type = inp.issue_type or default_issue_type
    if allowed_issue_types and issue_type not in allowed_issue_types:
        errors.append(
            IssueValidationError(
                code="invalid_issue_type",
                message=f"Issue type '{issue_type}' is not allowed",
                path="issue_type",
                details=f"Allowed issue types: {', '.join(allowed_issue_types)}",
            )
        )

    return errors


def build_create_fields(inp: CreateIssueInput) -> dict[str, Any]:
    """Additional tracker fields for a create request."""
    fields: dict[str, Any] = {}
    if inp.priority:
        fields["priority"] = {"name": inp.priority}
    if inp.assignee:
        fields["assignee"] = {"name": inp.assignee}
    if inp.labels:
        fields["labels"] = inp.labels
    return fields


def build_update_fields(
    inp: UpdateIssueInput,
    description: ADFDocument | None = None,
) -> dict[str, Any]:
    """
    Tracker fields for an update request.

    Custom fields are merged last and may override the named ones.
    """
    fields: dict[str, Any] = {}
    if inp.summary:
        fields["summary"] = inp.summary
    if description is not None:
        fields["description"] = description
    if inp.priority:
        fields["priority"] = {"name": inp.priority}
    # Empty list clears labels
    if inp.labels is not None:
        fields["labels"] = inp.labels
    if inp.custom_fields:
        fields.update(inp.custom_fields)
    return fields
