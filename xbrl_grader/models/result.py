# Path: xbrl_grader/models/result.py
"""
Grading Results

Uniform outcome types returned by rules and by the registry.

This module defines:
- ValidationResult for a verdict (rule ran, passed or failed)
- UnknownValidator for a name that is not registered
- InternalFault for an unexpected failure inside a rule

The three types are distinct so that callers can tell "no such validator"
and "the validator crashed" apart from "the validator ran and failed".
"""

from dataclasses import dataclass, field
from typing import Optional

from ..constants import (
    RESPONSE_IS_CORRECT,
    RESPONSE_ERROR,
    STATUS_VERDICT,
    STATUS_UNKNOWN_VALIDATOR,
    STATUS_INTERNAL_FAULT,
    MSG_INVALID_VALIDATOR,
    MSG_INTERNAL_FAULT,
)
from ..models.error import ErrorCategory


# ==============================================================================
# VALIDATION RESULT
# ==============================================================================

@dataclass(frozen=True)
class ValidationResult:
    """
    Verdict produced by a rule.

    Attributes:
        is_correct: Whether the snippet satisfied the rule
        error: Diagnostic on failure; None or a confirmation message on success
        category: MALFORMED_INPUT or RULE_MISMATCH on failure, None on success
    """
    is_correct: bool
    error: Optional[str] = None
    category: Optional[ErrorCategory] = field(default=None, compare=False)

    status_code = STATUS_VERDICT

    @classmethod
    def passed(cls, message: Optional[str] = None) -> 'ValidationResult':
        """Create a passing result, optionally carrying a confirmation message."""
        return cls(is_correct=True, error=message)

    @classmethod
    def failed(
        cls,
        message: str,
        category: ErrorCategory = ErrorCategory.RULE_MISMATCH
    ) -> 'ValidationResult':
        """Create a failing result with a diagnostic."""
        return cls(is_correct=False, error=message, category=category)

    @classmethod
    def malformed(cls, message: str) -> 'ValidationResult':
        """Create a failing result for input that could not be parsed."""
        return cls(is_correct=False, error=message, category=ErrorCategory.MALFORMED_INPUT)

    @property
    def is_malformed(self) -> bool:
        """Check if the failure was caused by malformed input."""
        return self.category == ErrorCategory.MALFORMED_INPUT

    def to_dict(self) -> dict[str, object]:
        """
        Convert to the response body shape.

        Returns:
            {'isCorrect': bool, 'error': str | None}
        """
        return {
            RESPONSE_IS_CORRECT: self.is_correct,
            RESPONSE_ERROR: self.error,
        }


# ==============================================================================
# REJECTIONS
# ==============================================================================

@dataclass(frozen=True)
class UnknownValidator:
    """
    Requested validator name is not registered.

    Attributes:
        name: The name that was requested
    """
    name: object

    category = ErrorCategory.UNKNOWN_VALIDATOR
    status_code = STATUS_UNKNOWN_VALIDATOR

    def to_dict(self) -> dict[str, object]:
        """Convert to the response body shape."""
        return {
            RESPONSE_IS_CORRECT: False,
            RESPONSE_ERROR: MSG_INVALID_VALIDATOR,
        }


@dataclass(frozen=True)
class InternalFault:
    """
    A rule raised unexpectedly while evaluating a snippet.

    Attributes:
        name: Validator that failed
        detail: Exception summary for logs (never sent to callers)
    """
    name: str
    detail: str = ''

    category = ErrorCategory.INTERNAL_FAULT
    status_code = STATUS_INTERNAL_FAULT

    def to_dict(self) -> dict[str, object]:
        """Convert to the response body shape."""
        return {
            RESPONSE_IS_CORRECT: False,
            RESPONSE_ERROR: MSG_INTERNAL_FAULT,
        }


__all__ = [
    'ValidationResult',
    'UnknownValidator',
    'InternalFault',
]
