"""
ADF component - validation of issue description documents.

Shell Layer - applies upstream input caps, calls the validator core and
converts its exception into an output model.

Invariants:
- Only the first violation is reported
- A valid document is returned unchanged (same object)
- Size/depth caps run before the recursive validator sees the input
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ._impl import ADFValidationError, validate_adf
from .models import (
    ADFIssue,
    CheckLimitsInput,
    LimitsOutput,
    ValidateADFInput,
    ValidateADFOutput,
)
from .ports import ADFRulesPort

logger = logging.getLogger(__name__)

# Keys whose list values hold child nodes/marks.
_CHILD_KEYS = ("content", "marks")


def _to_issue(error: ADFValidationError) -> ADFIssue:
    """Convert core error to component issue."""
    return ADFIssue(message=error.message, path=error.path, details=error.details)


# --- Limits ---


def _walk(document: Any) -> list[tuple[str, int]]:
    """
    Preorder (path, depth) pairs for every node below the root.

    Iterative so that hostile nesting cannot exhaust the interpreter stack.
    """
    visited: list[tuple[str, int]] = []
    stack: list[tuple[Any, str, int]] = [(document, "", 0)]

    while stack:
        node, path, depth = stack.pop()
        if depth:
            visited.append((path, depth))
        if not isinstance(node, dict):
            continue

        children: list[tuple[Any, str, int]] = []
        for key in _CHILD_KEYS:
            value = node.get(key)
            if not isinstance(value, list):
                continue
            prefix = f"{path}.{key}" if path else key
            for index, child in enumerate(value):
                children.append((child, f"{prefix}[{index}]", depth + 1))
        stack.extend(reversed(children))

    return visited


def measure_depth(document: Any) -> int:
    """Nesting depth of the tree; the root alone is depth 0."""
    return max((depth for _, depth in _walk(document)), default=0)


def check_limits(
    document: Any,
    max_json_bytes: int,
    max_depth: int,
) -> ADFIssue | None:
    """
    Check the size and depth caps.

    Returns an issue for the first exceeded cap, None if within limits.
    Size is the compact UTF-8 JSON encoding, as sent on the wire.
    """
    for path, depth in _walk(document):
        if depth > max_depth:
            return ADFIssue(
                message=f"Document nesting exceeds maximum depth of {max_depth}",
                path=path,
                details="Flatten nested lists or split the description",
            )

    try:
        encoded = json.dumps(document, ensure_ascii=False, separators=(",", ":"))
    except RecursionError:
        # Nesting outside content/marks is not walked above
        return ADFIssue(
            message="Document nesting is too deep to serialize",
            path="root",
            details="Flatten nested objects or split the description",
        )
    except (TypeError, ValueError) as e:
        return ADFIssue(
            message="Document is not JSON serializable",
            path="root",
            details=str(e),
        )

    # Lone surrogates (escaped in the source JSON) have no strict UTF-8 form
    json_bytes = len(encoded.encode("utf-8", errors="surrogatepass"))
    if json_bytes > max_json_bytes:
        return ADFIssue(
            message=f"Document {json_bytes}B exceeds limit {max_json_bytes}B",
            path="root",
            details="Shorten the description",
        )

    return None


# --- Component Entry Points ---


def run_check_limits(
    inp: CheckLimitsInput,
    *,
    rules: ADFRulesPort,
) -> LimitsOutput:
    """Check a document against the configured caps only."""
    issue = check_limits(inp.document, rules.get_max_json_bytes(), rules.get_max_depth())
    return LimitsOutput(
        within_limits=issue is None,
        depth=measure_depth(inp.document),
        error=issue,
    )


def run_validate(
    inp: ValidateADFInput,
    *,
    rules: ADFRulesPort | None = None,
) -> ValidateADFOutput:
    """
    Validate a document.

    Args:
        inp: Input containing the untrusted document value.
        rules: Optional rules port; when given, size/depth caps apply first.

    Returns:
        ValidateADFOutput with the typed document or the first violation.
    """
    if rules is not None:
        issue = check_limits(inp.document, rules.get_max_json_bytes(), rules.get_max_depth())
        if issue is not None:
            logger.warning(f"ADF limits exceeded at {issue.path}: {issue.message}")
            return ValidateADFOutput(is_valid=False, error=issue)

    try:
        document = validate_adf(inp.document)
    except ADFValidationError as e:
        logger.warning(f"ADF validation failed: {e}")
        return ValidateADFOutput(is_valid=False, error=_to_issue(e))

    logger.debug("ADF document validated successfully")
    return ValidateADFOutput(is_valid=True, document=document)


def run(
    inp: ValidateADFInput | CheckLimitsInput,
    *,
    rules: ADFRulesPort | None = None,
) -> ValidateADFOutput | LimitsOutput:
    """
    Main entry point for the ADF component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ValidateADFInput):
        return run_validate(inp, rules=rules)
    elif isinstance(inp, CheckLimitsInput):
        if rules is None:
            raise ValueError("CheckLimitsInput requires a rules port")
        return run_check_limits(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
