"""
Rules adapter.

Exposes a loaded ``Rules`` object through the component rules ports
(ADFRulesPort, IssuesRulesPort).
"""

from __future__ import annotations

from dataclasses import dataclass

from src.rules.models import Rules


@dataclass(frozen=True)
class RulesAdapter:
    """Read-only view of the rules file for components."""

    rules: Rules

    def get_max_json_bytes(self) -> int:
        return self.rules.adf.max_json_bytes

    def get_max_depth(self) -> int:
        return self.rules.adf.max_depth

    def get_default_issue_type(self) -> str:
        return self.rules.issues.default_issue_type

    def get_allowed_issue_types(self) -> list[str]:
        return list(self.rules.issues.allowed_issue_types)
