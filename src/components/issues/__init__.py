"""
Issues component - create and update tracker issues with ADF descriptions.
"""

from ._impl import (
    DEFAULT_ISSUE_TYPE,
    build_create_fields,
    build_update_fields,
    validate_create_input,
    validate_description,
)
from .component import (
    run,
    run_create,
    run_update,
)
from .models import (
    CreateIssueInput,
    CreateIssueOutput,
    IssueRef,
    IssueValidationError,
    UpdateIssueInput,
    UpdateIssueOutput,
)
from .ports import IssuesRulesPort, IssueTrackerPort

__all__ = [
    # Entry points
    "run",
    "run_create",
    "run_update",
    # Input models
    "CreateIssueInput",
    "UpdateIssueInput",
    # Output models
    "CreateIssueOutput",
    "UpdateIssueOutput",
    "IssueRef",
    "IssueValidationError",
    # Ports
    "IssueTrackerPort",
    "IssuesRulesPort",
    # Core
    "DEFAULT_ISSUE_TYPE",
    "build_create_fields",
    "build_update_fields",
    "validate_create_input",
    "validate_description",
]
