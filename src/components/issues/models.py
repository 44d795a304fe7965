"""
Issues component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# --- Validation Errors ---


@dataclass(frozen=True)
class IssueValidationError:
    """Issue validation error."""

    code: str
    message: str
    path: str | None = None
    details: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "code": self.code,
            "message": self.message,
            "path": self.path,
            "details": self.details,
        }


# --- Tracker References ---


@dataclass(frozen=True)
class IssueRef:
    """Identifiers of an issue held by the tracker."""

    id: str
    key: str
    self_url: str


# --- Input Models ---


@dataclass(frozen=True)
class CreateIssueInput:
    """Input for creating an issue."""

    project_key: str
    summary: str
    issue_type: str | None = None
    description: Any = None
    priority: str | None = None
    assignee: str | None = None
    labels: list[str] | None = None


@dataclass(frozen=True)
class UpdateIssueInput:
    """Input for updating an issue. Only provided values are sent."""

    issue_id_or_key: str
    summary: str | None = None
    description: Any = None
    priority: str | None = None
    labels: list[str] | None = None
    custom_fields: dict[str, Any] | None = None


# --- Output Models ---


@dataclass(frozen=True)
class CreateIssueOutput:
    """Output from create operation."""

    issue: IssueRef | None
    errors: list[IssueValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class UpdateIssueOutput:
    """Output from update operation."""

    issue_id_or_key: str
    success: bool
    message: str
    errors: list[IssueValidationError] = field(default_factory=list)
