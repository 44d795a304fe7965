"""
Issues component - Port interfaces.
"""

from __future__ import annotations

from typing import Any, Protocol

from src.domain.adf import ADFDocument

from .models import IssueRef


class IssueTrackerPort(Protocol):
    """Issue tracker interface. Descriptions arrive already validated."""

    def create_issue(
        self,
        project_key: str,
        summary: str,
        description: ADFDocument | None,
        issue_type: str,
        fields: dict[str, Any],
    ) -> IssueRef:
        """Create issue and return its identifiers."""
        ...

    def update_issue(self, issue_id_or_key: str, fields: dict[str, Any]) -> bool:
        """Update issue fields. Returns False if the issue is unknown."""
        ...


class IssuesRulesPort(Protocol):
    """Port for issue type configuration."""

    def get_default_issue_type(self) -> str:
        """Get issue type used when none is given."""
        ...

    def get_allowed_issue_types(self) -> list[str]:
        """Get accepted issue types; empty means any."""
        ...
