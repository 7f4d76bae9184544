# Path: xbrl_grader/models/error.py
"""
Error Classification

Outcome taxonomy for snippet grading.

This module defines:
- Error categories (MALFORMED_INPUT, RULE_MISMATCH, UNKNOWN_VALIDATOR, INTERNAL_FAULT)
- MatchTimeoutError, raised when a pattern exceeds its time budget

Only INTERNAL_FAULT is unexpected. The other categories are ordinary
return values at every layer and are never raised.
"""

from enum import Enum


# ==============================================================================
# ERROR CATEGORIES
# ==============================================================================

class ErrorCategory(Enum):
    """
    Error category classification for grading outcomes.

    Categories:
        MALFORMED_INPUT: Text is not well-formed XML (takes priority over all checks)
        RULE_MISMATCH: Well-formed, but a structural or semantic assertion failed
        UNKNOWN_VALIDATOR: Requested validator name is not registered
        INTERNAL_FAULT: Unexpected failure while evaluating a rule
    """
    MALFORMED_INPUT = "MALFORMED_INPUT"
    RULE_MISMATCH = "RULE_MISMATCH"
    UNKNOWN_VALIDATOR = "UNKNOWN_VALIDATOR"
    INTERNAL_FAULT = "INTERNAL_FAULT"

    def __str__(self) -> str:
        return self.value


# ==============================================================================
# EXCEPTIONS
# ==============================================================================

class MatchTimeoutError(TimeoutError):
    """
    Pattern matching exceeded its time budget.

    Raised by the structural matcher and converted into a failing
    verdict at the registry boundary.
    """

    def __init__(self, pattern: str, timeout: float):
        super().__init__(f"Pattern exceeded {timeout}s budget: {pattern[:80]}")
        self.pattern = pattern
        self.timeout = timeout


__all__ = [
    'ErrorCategory',
    'MatchTimeoutError',
]
