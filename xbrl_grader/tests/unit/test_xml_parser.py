# Path: xbrl_grader/tests/unit/test_xml_parser.py
"""
Unit Tests for the Well-Formedness Checker

Tests fragment parsing including:
- Undeclared prefixes and multiple top-level elements
- Malformed input and the fixed diagnostic
- Input size bound
- Entity and DOCTYPE hardening
"""

import pytest

from xbrl_grader.foundation.constants import MSG_INVALID_XML, FRAGMENT_ROOT_TAG
from xbrl_grader.foundation.xml_parser import WellFormednessChecker, check_well_formed
from xbrl_grader.models.error import ErrorCategory
from fixtures.sample_snippets import MALFORMED_SNIPPETS, BUSHCHAT, REFERENCE_LINK


class TestWellFormedFragments:
    """Test snippets that should parse."""

    def test_single_element(self, mock_config):
        """A lone self-closing element is well-formed."""
        result = WellFormednessChecker(mock_config).check('<a/>')

        assert result.well_formed is True
        assert result.error is None
        assert result.category is None

    def test_undeclared_prefixes_are_accepted(self, mock_config):
        """Known prefixes need no xmlns declarations."""
        result = WellFormednessChecker(mock_config).check(
            '<ex:Revenue contextRef="C1" unitRef="u1">100</ex:Revenue>'
        )

        assert result.well_formed is True

    def test_unknown_prefix_is_accepted(self, mock_config):
        """Prefixes outside the known table get a placeholder namespace."""
        result = WellFormednessChecker(mock_config).check('<acme:Widget acme:size="3"/>')

        assert result.well_formed is True
        assert result.root[0].tag == '{urn:x-xbrl-grader:acme}Widget'

    def test_known_prefix_gets_real_namespace(self, mock_config):
        """xbrli elements resolve to the XBRL instance namespace."""
        result = WellFormednessChecker(mock_config).check('<xbrli:measure>iso4217:USD</xbrli:measure>')

        assert result.root[0].tag == '{http://www.xbrl.org/2003/instance}measure'

    def test_multiple_top_level_elements(self, mock_config):
        """Fragments may hold several sibling elements."""
        result = WellFormednessChecker(mock_config).check(BUSHCHAT)

        assert result.well_formed is True
        assert len(result.root) == 3

    def test_xml_declaration_is_stripped(self, mock_config):
        """A leading XML declaration does not break wrapping."""
        result = WellFormednessChecker(mock_config).check(
            '<?xml version="1.0" encoding="UTF-8"?>\n<a/>'
        )

        assert result.well_formed is True

    def test_inline_declaration_wins(self, mock_config):
        """A prefix declared inside the snippet keeps its own namespace."""
        result = WellFormednessChecker(mock_config).check(
            '<ex:Revenue xmlns:ex="http://acme.example/2024">1</ex:Revenue>'
        )

        assert result.root[0].tag == '{http://acme.example/2024}Revenue'

    def test_comments_around_elements(self, mock_config):
        """Comments between top-level elements are allowed."""
        result = WellFormednessChecker(mock_config).check('<!-- answer -->\n<a/>\n<!-- end -->')

        assert result.well_formed is True

    def test_linkbase_fragment(self, mock_config):
        """Multi-line start tags with xlink attributes parse."""
        assert WellFormednessChecker(mock_config).check(REFERENCE_LINK).well_formed is True

    def test_root_is_synthetic(self, mock_config):
        """The returned root is the wrapper element."""
        result = WellFormednessChecker(mock_config).check('<a/>')

        assert result.root.tag == FRAGMENT_ROOT_TAG


class TestMalformedInput:
    """Test snippets that should be rejected."""

    @pytest.mark.parametrize('snippet', MALFORMED_SNIPPETS)
    def test_malformed_gives_fixed_message(self, mock_config, snippet):
        """Every malformed snippet yields the same diagnostic."""
        result = WellFormednessChecker(mock_config).check(snippet)

        assert result.well_formed is False
        assert result.root is None
        assert result.error == MSG_INVALID_XML
        assert result.category == ErrorCategory.MALFORMED_INPUT

    @pytest.mark.parametrize('value', [None, 42, b'<a/>', ['<a/>']])
    def test_non_string_is_malformed(self, mock_config, value):
        """Anything that is not a str is malformed, never an exception."""
        result = WellFormednessChecker(mock_config).check(value)

        assert result.well_formed is False
        assert result.error == MSG_INVALID_XML

    def test_external_entity_is_rejected(self, mock_config):
        """DOCTYPE with an external entity fails closed."""
        snippet = '<!DOCTYPE a [<!ENTITY xxe SYSTEM "file:///etc/passwd">]><a>&xxe;</a>'

        result = WellFormednessChecker(mock_config).check(snippet)

        assert result.well_formed is False

    def test_undefined_entity_is_rejected(self, mock_config):
        """References to undefined entities are not well-formed."""
        assert WellFormednessChecker(mock_config).check('<a>&nbsp;</a>').well_formed is False

    def test_to_result_is_failing_verdict(self, mock_config):
        """to_result converts a malformed outcome to a failing ValidationResult."""
        result = WellFormednessChecker(mock_config).check('<a>').to_result()

        assert result.is_correct is False
        assert result.error == MSG_INVALID_XML
        assert result.is_malformed is True


class TestInputSizeBound:
    """Test the max_input_chars limit."""

    def test_oversize_input_is_malformed(self, small_input_config):
        """Input above the limit fails with its own message."""
        snippet = '<a>' + 'x' * 100 + '</a>'

        result = WellFormednessChecker(small_input_config).check(snippet)

        assert result.well_formed is False
        assert result.category == ErrorCategory.MALFORMED_INPUT
        assert '64' in result.error
        assert result.error != MSG_INVALID_XML

    def test_input_at_limit_is_parsed(self, small_input_config):
        """Input exactly at the limit is still checked normally."""
        snippet = '<a>' + 'x' * (64 - len('<a></a>')) + '</a>'
        assert len(snippet) == 64

        assert WellFormednessChecker(small_input_config).check(snippet).well_formed is True


class TestDeterminism:
    """Test repeatability."""

    def test_same_input_same_outcome(self, mock_config):
        """Identical input always gives an identical outcome."""
        checker = WellFormednessChecker(mock_config)

        first = checker.check('<a><b></a>')
        second = checker.check('<a><b></a>')

        assert first == second

    def test_module_function(self, mock_config):
        """check_well_formed is equivalent to a fresh checker."""
        assert check_well_formed('<a/>', mock_config).well_formed is True
        assert check_well_formed('<a>', mock_config).well_formed is False
