"""
ADF component - strict validation of issue description documents.
"""

from ._impl import ADFValidationError, validate_adf
from .component import (
    check_limits,
    measure_depth,
    run,
    run_check_limits,
    run_validate,
)
from .models import (
    ADFIssue,
    CheckLimitsInput,
    LimitsOutput,
    ValidateADFInput,
    ValidateADFOutput,
)
from .ports import ADFRulesPort

__all__ = [
    # Entry points
    "run",
    "run_check_limits",
    "run_validate",
    # Core
    "ADFValidationError",
    "validate_adf",
    "check_limits",
    "measure_depth",
    # Input models
    "CheckLimitsInput",
    "ValidateADFInput",
    # Output models
    "ADFIssue",
    "LimitsOutput",
    "ValidateADFOutput",
    # Ports
    "ADFRulesPort",
]
