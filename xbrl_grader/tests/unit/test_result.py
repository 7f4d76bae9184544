# Path: xbrl_grader/tests/unit/test_result.py
"""
Unit Tests for Result and Error Models

Tests:
- ValidationResult constructors and response shape
- UnknownValidator and InternalFault rejections
- ErrorCategory values
"""

import pytest

from xbrl_grader.constants import (
    RESPONSE_IS_CORRECT,
    RESPONSE_ERROR,
    MSG_INVALID_VALIDATOR,
    MSG_INTERNAL_FAULT,
)
from xbrl_grader.models.error import ErrorCategory, MatchTimeoutError
from xbrl_grader.models.result import ValidationResult, UnknownValidator, InternalFault


class TestValidationResult:
    """Test verdicts."""

    def test_passed(self):
        result = ValidationResult.passed()

        assert result.is_correct is True
        assert result.error is None
        assert result.category is None
        assert result.status_code == 200

    def test_passed_with_confirmation(self):
        result = ValidationResult.passed("✅ Well done!")

        assert result.is_correct is True
        assert result.error == "✅ Well done!"

    def test_failed_defaults_to_rule_mismatch(self):
        result = ValidationResult.failed("❌ wrong")

        assert result.is_correct is False
        assert result.category == ErrorCategory.RULE_MISMATCH
        assert result.is_malformed is False

    def test_malformed(self):
        result = ValidationResult.malformed("❌ bad xml")

        assert result.category == ErrorCategory.MALFORMED_INPUT
        assert result.is_malformed is True

    def test_to_dict_shape(self):
        """Only isCorrect and error are exposed."""
        body = ValidationResult.failed("❌ wrong").to_dict()

        assert body == {RESPONSE_IS_CORRECT: False, RESPONSE_ERROR: "❌ wrong"}

    def test_equality_ignores_category(self):
        """Results compare on the response fields."""
        assert ValidationResult.failed("x") == ValidationResult.malformed("x")

    def test_is_frozen(self):
        result = ValidationResult.passed()
        with pytest.raises(AttributeError):
            result.is_correct = False


class TestRejections:
    """Test non-verdict outcomes."""

    def test_unknown_validator(self):
        outcome = UnknownValidator('nope')

        assert outcome.status_code == 400
        assert outcome.category == ErrorCategory.UNKNOWN_VALIDATOR
        assert outcome.to_dict() == {RESPONSE_IS_CORRECT: False, RESPONSE_ERROR: MSG_INVALID_VALIDATOR}

    def test_internal_fault_hides_detail(self):
        """Exception detail is for logs only."""
        outcome = InternalFault('validateX', 'KeyError: secret')

        assert outcome.status_code == 500
        assert outcome.category == ErrorCategory.INTERNAL_FAULT
        assert outcome.to_dict()[RESPONSE_ERROR] == MSG_INTERNAL_FAULT
        assert 'secret' not in str(outcome.to_dict())


class TestErrorModel:
    """Test error taxonomy."""

    def test_category_str(self):
        assert str(ErrorCategory.MALFORMED_INPUT) == 'MALFORMED_INPUT'

    def test_all_categories(self):
        assert {c.name for c in ErrorCategory} == {
            'MALFORMED_INPUT', 'RULE_MISMATCH', 'UNKNOWN_VALIDATOR', 'INTERNAL_FAULT'
        }

    def test_match_timeout_error(self):
        error = MatchTimeoutError('a+' * 100, 0.5)

        assert isinstance(error, TimeoutError)
        assert error.timeout == 0.5
        assert '0.5' in str(error)
