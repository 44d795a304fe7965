"""
ADF component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.domain.adf import ADFDocument

# --- Validation Issue ---


@dataclass(frozen=True)
class ADFIssue:
    """A single validation failure, addressed by path."""

    message: str
    path: str
    details: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"message": self.message, "path": self.path, "details": self.details}


# --- Input Models ---


@dataclass(frozen=True)
class ValidateADFInput:
    """Input for validating an untrusted document value."""

    document: Any


@dataclass(frozen=True)
class CheckLimitsInput:
    """Input for checking size/depth limits without grammar validation."""

    document: Any


# --- Output Models ---


@dataclass(frozen=True)
class ValidateADFOutput:
    """Output for validation result."""

    is_valid: bool
    document: ADFDocument | None = None
    error: ADFIssue | None = None
    success: bool = True


@dataclass(frozen=True)
class LimitsOutput:
    """Output for limit checks."""

    within_limits: bool
    depth: int
    error: ADFIssue | None = None
