# Path: xbrl_grader/tests/unit/test_registry.py
"""
Unit Tests for the Validator Registry

Tests:
- The full catalog accepts every correct answer
- Malformed input on every registered rule
- Outcome mapping (unknown name, timeout, unexpected error)
- Registration rules (duplicates, frozen registry)
- Determinism of repeated dispatches
"""

import logging

import pytest

from xbrl_grader.foundation.constants import MSG_INVALID_XML
from xbrl_grader.models.error import ErrorCategory, MatchTimeoutError
from xbrl_grader.models.result import ValidationResult, UnknownValidator, InternalFault
from xbrl_grader.validation.catalog import build_catalog
from xbrl_grader.validation.constants import MSG_EVALUATION_TIMEOUT
from xbrl_grader.validation.registry import ValidatorRegistry, default_registry
from fixtures.sample_snippets import MALFORMED_SNIPPETS, VALID_ANSWERS, FACT_SNIPPET


CATALOG_NAMES = sorted(build_catalog())


def timing_out_rule(text, config=None):
    raise MatchTimeoutError(r'(a+)+$', 0.5)


def crashing_rule(text, config=None):
    raise KeyError('secret detail')


class TestCatalog:
    """Test the default catalog."""

    def test_every_validator_has_a_correct_answer(self, registry):
        assert sorted(VALID_ANSWERS) == registry.names()

    @pytest.mark.parametrize('name', CATALOG_NAMES)
    def test_correct_answer_passes(self, registry, name):
        outcome = registry.dispatch(name, VALID_ANSWERS[name])

        assert isinstance(outcome, ValidationResult)
        assert outcome.is_correct is True, outcome.error

    @pytest.mark.parametrize('name', CATALOG_NAMES)
    @pytest.mark.parametrize('snippet', MALFORMED_SNIPPETS)
    def test_malformed_input_on_every_rule(self, registry, name, snippet):
        outcome = registry.dispatch(name, snippet)

        assert isinstance(outcome, ValidationResult)
        assert outcome.is_correct is False
        assert outcome.error == MSG_INVALID_XML

    @pytest.mark.parametrize('name', CATALOG_NAMES)
    def test_missing_code_is_malformed(self, registry, name):
        outcome = registry.dispatch(name, None)
        assert outcome.is_malformed is True

    def test_registry_is_frozen(self, registry):
        assert registry.frozen is True
        with pytest.raises(RuntimeError):
            registry.register('validateSomethingElse', crashing_rule)

    def test_default_registry_is_shared(self):
        assert default_registry() is default_registry()


class TestDispatch:
    """Test outcome mapping."""

    def test_unknown_name(self, registry):
        outcome = registry.dispatch('nonexistent_rule', '<a/>')

        assert isinstance(outcome, UnknownValidator)
        assert outcome.status_code == 400
        assert outcome.name == 'nonexistent_rule'

    @pytest.mark.parametrize('name', [None, 42, ['validateUnitRefAnswer']])
    def test_non_string_name(self, registry, name):
        assert isinstance(registry.dispatch(name, FACT_SNIPPET), UnknownValidator)

    def test_names_are_case_sensitive(self, registry):
        assert 'validateUnitRefAnswer' in registry
        assert 'validateunitrefanswer' not in registry

    def test_timeout_fails_closed(self, empty_registry, capture_logs):
        empty_registry.register('validateSlow', timing_out_rule)

        outcome = empty_registry.dispatch('validateSlow', '<a/>')

        assert isinstance(outcome, ValidationResult)
        assert outcome.is_correct is False
        assert outcome.error == MSG_EVALUATION_TIMEOUT
        assert outcome.category == ErrorCategory.MALFORMED_INPUT
        assert 'WARNING input.validator_registry' in capture_logs.getvalue()

    def test_unexpected_error_is_internal_fault(self, empty_registry, capture_logs):
        empty_registry.register('validateBroken', crashing_rule)

        outcome = empty_registry.dispatch('validateBroken', '<a/>')

        assert isinstance(outcome, InternalFault)
        assert outcome.status_code == 500
        assert 'secret detail' not in str(outcome.to_dict())
        assert 'KeyError' in outcome.detail
        assert 'Traceback' in capture_logs.getvalue()

    def test_config_is_passed_to_rules(self, mock_config):
        seen = []
        registry = ValidatorRegistry(mock_config)
        registry.register('validateSeen', lambda text, config=None: seen.append(config) or ValidationResult.passed())

        registry.dispatch('validateSeen', '<a/>')

        assert seen == [mock_config]


class TestRegistration:
    """Test register and freeze."""

    def test_register_and_get(self, empty_registry):
        empty_registry.register('validateBroken', crashing_rule)

        assert empty_registry.get('validateBroken') is crashing_rule
        assert len(empty_registry) == 1

    def test_duplicate_name_rejected(self, empty_registry):
        empty_registry.register('validateBroken', crashing_rule)

        with pytest.raises(ValueError):
            empty_registry.register('validateBroken', timing_out_rule)

        assert empty_registry.get('validateBroken') is crashing_rule

    def test_freeze(self, empty_registry):
        empty_registry.freeze()

        with pytest.raises(RuntimeError):
            empty_registry.register('validateBroken', crashing_rule)

    def test_names_sorted(self, empty_registry):
        empty_registry.register('validateB', crashing_rule)
        empty_registry.register('validateA', crashing_rule)

        assert empty_registry.names() == ['validateA', 'validateB']


class TestDeterminism:
    """Repeated dispatches give identical outcomes."""

    @pytest.mark.parametrize('name', CATALOG_NAMES)
    def test_repeat_dispatch(self, registry, name):
        wrong = VALID_ANSWERS[name].replace('"', "'").replace('C1', 'c1')

        first = registry.dispatch(name, wrong)
        second = registry.dispatch(name, wrong)

        assert first == second
        assert first.category == second.category

    def test_logging_does_not_change_outcome(self, registry):
        logging.getLogger('input').setLevel(logging.CRITICAL)
        try:
            quiet = registry.dispatch('validateUnitRefAnswer', FACT_SNIPPET)
        finally:
            logging.getLogger('input').setLevel(logging.NOTSET)

        assert quiet == registry.dispatch('validateUnitRefAnswer', FACT_SNIPPET)
