"""
ADF API Routes.

Validation endpoints for issue description documents.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from src.adapters.rules_adapter import RulesAdapter
from src.api.deps import get_rules_adapter
from src.components.adf import (
    CheckLimitsInput,
    ValidateADFInput,
    run_check_limits,
    run_validate,
)

router = APIRouter()


# --- Request/Response Models ---


class ADFRequest(BaseModel):
    """Request carrying an untrusted ADF document."""

    document: Any = Field(
        ..., description="ADF document, e.g. {type: 'doc', version: 1, content: []}"
    )


class ADFErrorResponse(BaseModel):
    """First violation found in the document."""

    message: str
    path: str
    details: str | None = None


class ValidateResponse(BaseModel):
    """Validation result."""

    valid: bool
    error: ADFErrorResponse | None = None


class LimitsResponse(BaseModel):
    """Size/depth limit check result."""

    within_limits: bool
    depth: int
    error: ADFErrorResponse | None = None


# --- Routes ---


@router.post("/validate", response_model=ValidateResponse)
def validate_document(
    request: ADFRequest,
    rules: RulesAdapter = Depends(get_rules_adapter),
) -> ValidateResponse:
    """
    Validate a document without sending it anywhere.

    An invalid document is a successful call with ``valid: false``.
    """
    result = run_validate(ValidateADFInput(document=request.document), rules=rules)
    error = ADFErrorResponse(**result.error.to_dict()) if result.error else None
    return ValidateResponse(valid=result.is_valid, error=error)


@router.post("/limits", response_model=LimitsResponse)
def check_document_limits(
    request: ADFRequest,
    rules: RulesAdapter = Depends(get_rules_adapter),
) -> LimitsResponse:
    """Check the configured size and depth caps only."""
    result = run_check_limits(CheckLimitsInput(document=request.document), rules=rules)
    error = ADFErrorResponse(**result.error.to_dict()) if result.error else None
    return LimitsResponse(within_limits=result.within_limits, depth=result.depth, error=error)
