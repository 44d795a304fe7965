"""
Issues API Routes.

Create and update issues whose descriptions are ADF documents. The
description is validated before anything is sent to the tracker.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from src.adapters.issue_tracker_stub import InMemoryIssueTracker
from src.adapters.rules_adapter import RulesAdapter
from src.api.deps import get_issue_tracker, get_rules_adapter
from src.components.issues import (
    CreateIssueInput,
    IssueValidationError,
    UpdateIssueInput,
    run_create,
    run_update,
)

router = APIRouter()


# --- Request/Response Models ---


class CreateIssueRequest(BaseModel):
    """Request to create an issue."""

    project_key: str = Field(..., description="Project key (e.g., PROJ)")
    summary: str = Field(..., description="Issue summary")
    issue_type: str | None = Field(default=None, description="Issue type (e.g., Bug, Task, Story)")
    description: dict[str, Any] | None = Field(
        default=None,
        description="Issue description in Atlassian Document Format (ADF). "
        "Root: {type: 'doc', version: 1, content: [...]}",
    )
    priority: str | None = Field(default=None, description="Priority (e.g., High, Medium, Low)")
    assignee: str | None = Field(default=None, description="Assignee username")
    labels: list[str] | None = Field(default=None, description="Labels for the issue")


class CreateIssueResponse(BaseModel):
    """Created issue identifiers."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    key: str
    self_url: str = Field(..., alias="self")
    success: bool = True


class UpdateIssueRequest(BaseModel):
    """Request to update an issue. Omitted fields are left unchanged."""

    summary: str | None = None
    description: dict[str, Any] | None = Field(
        default=None, description="New description in Atlassian Document Format (ADF)"
    )
    priority: str | None = None
    labels: list[str] | None = None
    custom_fields: dict[str, Any] | None = Field(default=None, description="Custom fields to update")


class UpdateIssueResponse(BaseModel):
    """Update result."""

    issue_id_or_key: str
    success: bool
    message: str


# --- Helpers ---


def _bad_request(errors: list[IssueValidationError]) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "message": errors[0].message,
            "errors": [e.to_dict() for e in errors],
        },
    )


# --- Routes ---


@router.post("", response_model=CreateIssueResponse, status_code=status.HTTP_201_CREATED)
def create_issue(
    request: CreateIssueRequest,
    tracker: InMemoryIssueTracker = Depends(get_issue_tracker),
    rules: RulesAdapter = Depends(get_rules_adapter),
) -> CreateIssueResponse:
    """Create a new issue."""
    result = run_create(
        CreateIssueInput(
            project_key=request.project_key,
            summary=request.summary,
            issue_type=request.issue_type,
            description=request.description,
            priority=request.priority,
            assignee=request.assignee,
            labels=request.labels,
        ),
        tracker=tracker,
        rules=rules,
    )

    if not result.success or result.issue is None:
        raise _bad_request(result.errors)

    return CreateIssueResponse(
        id=result.issue.id,
        key=result.issue.key,
        self_url=result.issue.self_url,
    )


@router.put("/{issue_id_or_key}", response_model=UpdateIssueResponse)
def update_issue(
    issue_id_or_key: str,
    request: UpdateIssueRequest,
    tracker: InMemoryIssueTracker = Depends(get_issue_tracker),
) -> UpdateIssueResponse:
    """
    Update an existing issue.

    Nothing to update is not an error: the response says so with
    ``success: false``.
    """
    result = run_update(
        UpdateIssueInput(
            issue_id_or_key=issue_id_or_key,
            summary=request.summary,
            description=request.description,
            priority=request.priority,
            labels=request.labels,
            custom_fields=request.custom_fields,
        ),
        tracker=tracker,
    )

    if any(e.code == "issue_not_found" for e in result.errors):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    if result.errors:
        raise _bad_request(result.errors)

    return UpdateIssueResponse(
        issue_id_or_key=result.issue_id_or_key,
        success=result.success,
        message=result.message,
    )
