"""
In-memory issue tracker adapter (dev/test).

Stub implementation of IssueTrackerPort that keeps issues in a dict and
hands out sequential ``<PROJECT>-<n>`` keys. Used until a real tracker
integration is wired in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from src.components.issues import IssueRef
from src.domain.adf import ADFDocument

logger = logging.getLogger(__name__)


@dataclass
class StoredIssue:
    """An issue as held by the stub tracker."""

    ref: IssueRef
    project_key: str
    issue_type: str
    fields: dict[str, Any]


@dataclass
class InMemoryIssueTracker:
    """
    Stub issue tracker.

    This adapter satisfies the IssueTrackerPort protocol.
    """

    base_url: str = "http://localhost/rest/api/3"
    issues: dict[str, StoredIssue] = field(default_factory=dict)
    _next_id: int = 10000
    _counters: dict[str, int] = field(default_factory=dict)

    def create_issue(
        self,
        project_key: str,
        summary: str,
        description: ADFDocument | None,
        issue_type: str,
        fields: dict[str, Any],
    ) -> IssueRef:
        """Store a new issue and return its identifiers."""
        number = self._counters.get(project_key, 0) + 1
        self._counters[project_key] = number
        self._next_id += 1

        issue_id = str(self._next_id)
        ref = IssueRef(
            id=issue_id,
            key=f"{project_key}-{number}",
            self_url=f"{self.base_url}/issue/{issue_id}",
        )

        stored_fields: dict[str, Any] = {
            "project": {"key": project_key},
            "summary": summary,
            "issuetype": {"name": issue_type},
            **fields,
        }
        if description is not None:
            stored_fields["description"] = description

        self.issues[ref.key] = StoredIssue(
            ref=ref,
            project_key=project_key,
            issue_type=issue_type,
            fields=stored_fields,
        )
        logger.debug(f"InMemoryIssueTracker.create_issue: key={ref.key}")
        return ref

    def update_issue(self, issue_id_or_key: str, fields: dict[str, Any]) -> bool:
        """Merge fields into a stored issue. False if unknown."""
        stored = self.get(issue_id_or_key)
        if stored is None:
            logger.debug(f"InMemoryIssueTracker.update_issue: unknown {issue_id_or_key}")
            return False

        stored.fields.update(fields)
        return True

    def get(self, issue_id_or_key: str) -> StoredIssue | None:
        """Look up by key, falling back to numeric id."""
        if issue_id_or_key in self.issues:
            return self.issues[issue_id_or_key]
        return next(
            (s for s in self.issues.values() if s.ref.id == issue_id_or_key),
            None,
        )
