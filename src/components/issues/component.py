"""
Issues component - create and update tracker issues.

Shell Layer - validates input, builds fields, calls the tracker port.

Invariants:
- A description reaches the tracker only after it passed ADF validation
- Invalid requests never reach the tracker
"""

from __future__ import annotations

import logging

from ._impl import (
    DEFAULT_ISSUE_TYPE,
    build_create_fields,
    build_update_fields,
    validate_create_input,
    validate_description,
)
from .models import (
    CreateIssueInput,
    CreateIssueOutput,
    IssueValidationError,
    UpdateIssueInput,
    UpdateIssueOutput,
)
from .ports import IssuesRulesPort, IssueTrackerPort

logger = logging.getLogger(__name__)


# --- Component Entry Points ---


def run_create(
    inp: CreateIssueInput,
    *,
    tracker: IssueTrackerPort,
    rules: IssuesRulesPort | None = None,
) -> CreateIssueOutput:
    """
    Create an issue.

    Args:
        inp: Create request; ``description`` is an untrusted ADF value.
        tracker: Issue tracker port.
        rules: Optional rules port for issue type configuration.

    Returns:
        CreateIssueOutput with the new issue reference or errors.
    """
    logger.info(f"Creating new issue in project: {inp.project_key}")

    default_type = rules.get_default_issue_type() if rules else DEFAULT_ISSUE_TYPE
    allowed_types = rules.get_allowed_issue_types() if rules else None

    errors = validate_create_input(inp, allowed_types, default_type)
    if errors:
        return CreateIssueOutput(issue=None, errors=errors, success=False)

    description = None
    if inp.description is not None:
        description, adf_errors = validate_description(inp.description)
        if adf_errors:
            logger.warning(f"ADF validation failed: {adf_errors[0].message}")
            return CreateIssueOutput(issue=None, errors=adf_errors, success=False)
        logger.debug("ADF description validated successfully")

    issue = tracker.create_issue(
        inp.project_key,
        inp.summary,
        description,
        inp.issue_type or default_type,
        build_create_fields(inp),
    )
    logger.info(f"Created issue {issue.key}")
    return CreateIssueOutput(issue=issue)


def run_update(
    inp: UpdateIssueInput,
    *,
    tracker: IssueTrackerPort,
) -> UpdateIssueOutput:
    """
    Update an issue.

    Only provided values are sent. With nothing to send, the tracker is
    not called.
    """
    logger.info(f"Updating issue: {inp.issue_id_or_key}")

    description = None
    if inp.description is not None:
        description, adf_errors = validate_description(inp.description)
        if adf_errors:
            logger.warning(f"ADF validation failed: {adf_errors[0].message}")
            return UpdateIssueOutput(
                issue_id_or_key=inp.issue_id_or_key,
                success=False,
                message=adf_errors[0].message,
                errors=adf_errors,
            )
        logger.debug("ADF description validated successfully")

    fields = build_update_fields(inp, description)
    if not fields:
        return UpdateIssueOutput(
            issue_id_or_key=inp.issue_id_or_key,
            success=False,
            message="No fields provided to update",
        )

    if not tracker.update_issue(inp.issue_id_or_key, fields):
        return UpdateIssueOutput(
            issue_id_or_key=inp.issue_id_or_key,
            success=False,
            message=f"Issue {inp.issue_id_or_key} not found",
            errors=[
                IssueValidationError(
                    code="issue_not_found",
                    message=f"Issue {inp.issue_id_or_key} not found",
                    path="issue_id_or_key",
                )
            ],
        )

    return UpdateIssueOutput(
        issue_id_or_key=inp.issue_id_or_key,
        success=True,
        message=f"Issue {inp.issue_id_or_key} updated successfully",
    )


def run(
    inp: CreateIssueInput | UpdateIssueInput,
    *,
    tracker: IssueTrackerPort,
    rules: IssuesRulesPort | None = None,
) -> CreateIssueOutput | UpdateIssueOutput:
    """
    Main entry point for the issues component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, CreateIssueInput):
        return run_create(inp, tracker=tracker, rules=rules)
    elif isinstance(inp, UpdateIssueInput):
        return run_update(inp, tracker=tracker)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
