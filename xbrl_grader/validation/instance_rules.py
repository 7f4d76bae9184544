# Path: xbrl_grader/validation/instance_rules.py
"""
Instance Rules

Atomic rules over XBRL instance snippets: fact attributes, periods,
units, numeric values, precision and context references.

Fixed rules are module-level functions. Rules parameterized by a
concept or a tolerance are built by *_rule factories.

Example:
    result = validate_context_ref('<ex:Revenue contextRef="C1">100</ex:Revenue>')
    revenue_rule = non_negative_value_rule('ex:Revenue')
"""

from datetime import datetime
from typing import Optional, Sequence

from ..config_loader import DEFAULT_CALCULATION_TOLERANCE
from ..core.logger import get_process_logger
from ..foundation.matcher import Element, StructuralMatcher
from ..models.result import ValidationResult
from .base import (
    Rule,
    xbrl_rule,
    parse_xbrl_date,
    parse_amount,
    format_amount,
    local_name,
)
from .constants import (
    ATTR_UNIT_REF,
    ATTR_CONTEXT_REF,
    ATTR_DECIMALS,
    ATTR_ID,
    TAG_CONTEXT,
    TAG_START_DATE,
    TAG_END_DATE,
    TAG_INSTANT,
    TAG_MEASURE,
    EXPECTED_UNIT_REF,
    EXPECTED_CONTEXT_REF,
    ALLOWED_CURRENCIES,
    ISO4217_PREFIX,
    INFINITE_PRECISION,
    CONCEPT_ASSETS,
    INCOME_ADDENDS,
    INCOME_TOTAL,
    BARE_NUMBER_PATTERN,
    NUMBER_TOKEN_PATTERN,
    INTEGER_PATTERN,
    DECIMALS_VALUE_PATTERN,
    CURRENCY_MEASURE_PATTERN,
    XS_DATE_PATTERN,
    MSG_NO_UNIT_REF,
    MSG_WRONG_UNIT_REF,
    MSG_NO_CONTEXT_REF,
    MSG_WRONG_CONTEXT_REF,
    MSG_MISSING_PERIOD_DATES,
    MSG_INVALID_START_DATE,
    MSG_INVALID_END_DATE,
    MSG_START_NOT_BEFORE_END,
    MSG_NO_INSTANT,
    MSG_INVALID_INSTANT,
    MSG_NO_MEASURE,
    MSG_INVALID_CURRENCY,
    MSG_CURRENCY_NOT_UPPER_ISO,
    MSG_CURRENCY_NOT_ISO,
    MSG_VALUE_NOT_FOUND,
    MSG_VALUE_NOT_NUMBER,
    MSG_VALUE_NEGATIVE,
    MSG_DECIMALS_FACT_NOT_FOUND,
    MSG_DECIMALS_NOT_INTEGER,
    MSG_DECIMALS_MISMATCH,
    MSG_INVALID_DECIMALS_VALUE,
    MSG_DANGLING_CONTEXT_REF,
    MSG_FACT_MISSING,
    MSG_CALCULATION_MISMATCH,
)


logger = get_process_logger('instance_rules')


# ==============================================================================
# FACT ATTRIBUTES
# ==============================================================================

@xbrl_rule
def validate_unit_ref(snippet: StructuralMatcher) -> ValidationResult:
    """unitRef must be present and equal 'u1' (case-insensitive)."""
    value = snippet.attribute(ATTR_UNIT_REF, ignore_case=True)
    if value is None:
        return ValidationResult.failed(MSG_NO_UNIT_REF)

    value = value.strip()
    if value.lower() != EXPECTED_UNIT_REF.lower():
        return ValidationResult.failed(
            MSG_WRONG_UNIT_REF.format(value=value, expected=EXPECTED_UNIT_REF)
        )
    return ValidationResult.passed()


@xbrl_rule
def validate_context_ref(snippet: StructuralMatcher) -> ValidationResult:
    """contextRef must be present and equal 'C1' exactly."""
    value = snippet.attribute(ATTR_CONTEXT_REF, ignore_case=True)
    if value is None:
        return ValidationResult.failed(MSG_NO_CONTEXT_REF)

    value = value.strip()
    if value != EXPECTED_CONTEXT_REF:
        return ValidationResult.failed(
            MSG_WRONG_CONTEXT_REF.format(value=value, expected=EXPECTED_CONTEXT_REF)
        )
    return ValidationResult.passed()


@xbrl_rule
def validate_context_ref_integrity(snippet: StructuralMatcher) -> ValidationResult:
    """Every contextRef must name a context declared in the snippet."""
    declared = {
        context.get(ATTR_ID)
        for context in snippet.elements(TAG_CONTEXT)
        if context.get(ATTR_ID) is not None
    }

    for reference in snippet.attributes(ATTR_CONTEXT_REF):
        if reference not in declared:
            return ValidationResult.failed(MSG_DANGLING_CONTEXT_REF.format(ref=reference))
    return ValidationResult.passed()


# ==============================================================================
# PERIODS
# ==============================================================================

@xbrl_rule
def validate_date_range(snippet: StructuralMatcher) -> ValidationResult:
    """
    Duration period check.

    startDate and endDate must both be present and valid dates, and
    startDate must be strictly earlier than endDate.
    """
    start_text = snippet.element_text(TAG_START_DATE)
    end_text = snippet.element_text(TAG_END_DATE)
    if start_text is None or end_text is None:
        return ValidationResult.failed(MSG_MISSING_PERIOD_DATES)

    start = _read_date(snippet, start_text)
    if start is None:
        return ValidationResult.failed(MSG_INVALID_START_DATE)

    end = _read_date(snippet, end_text)
    if end is None:
        return ValidationResult.failed(MSG_INVALID_END_DATE)

    if start >= end:
        return ValidationResult.failed(
            MSG_START_NOT_BEFORE_END.format(start=start_text.strip(), end=end_text.strip())
        )
    return ValidationResult.passed()


@xbrl_rule
def validate_instant_date(snippet: StructuralMatcher) -> ValidationResult:
    """instant must be present and a valid date."""
    instant_text = snippet.element_text(TAG_INSTANT)
    if instant_text is None:
        return ValidationResult.failed(MSG_NO_INSTANT)

    if _read_date(snippet, instant_text) is None:
        return ValidationResult.failed(MSG_INVALID_INSTANT)
    return ValidationResult.passed()


# ==============================================================================
# UNITS
# ==============================================================================

@xbrl_rule
def validate_currency_code(snippet: StructuralMatcher) -> ValidationResult:
    """
    Currency check on the first measure.

    The iso4217: prefix is optional and case is ignored; the remaining
    code must be one of ALLOWED_CURRENCIES.
    """
    measure = snippet.element_text(TAG_MEASURE)
    if measure is None:
        return ValidationResult.failed(MSG_NO_MEASURE)

    code = measure.strip()
    if code.lower().startswith(ISO4217_PREFIX):
        code = code[len(ISO4217_PREFIX):]
    code = code.upper()

    if code not in ALLOWED_CURRENCIES:
        return ValidationResult.failed(
            MSG_INVALID_CURRENCY.format(code=code, allowed=', '.join(ALLOWED_CURRENCIES))
        )
    return ValidationResult.passed()


def currency_format_rule(strict_case: bool = True) -> Rule:
    """
    Build a rule requiring the first measure to read iso4217:XXX.

    Args:
        strict_case: Require the exact 'iso4217:' prefix and an upper-case
                     code; when False letter case is ignored

    Returns:
        Rule
    """
    @xbrl_rule
    def validate_currency_format(snippet: StructuralMatcher) -> ValidationResult:
        measure = snippet.element_text(TAG_MEASURE)
        if measure is None:
            return ValidationResult.failed(
                MSG_NO_MEASURE if strict_case else MSG_CURRENCY_NOT_ISO
            )

        if not snippet.matches(CURRENCY_MEASURE_PATTERN, measure.strip(), ignore_case=not strict_case):
            return ValidationResult.failed(
                MSG_CURRENCY_NOT_UPPER_ISO if strict_case else MSG_CURRENCY_NOT_ISO
            )
        return ValidationResult.passed()

    return validate_currency_format


# ==============================================================================
# NUMERIC VALUES
# ==============================================================================

def non_negative_value_rule(concept: Optional[str] = None, label: Optional[str] = None) -> Rule:
    """
    Build a rule requiring a numeric value greater than or equal to zero.

    Args:
        concept: Fact element to read; None takes the first element in
                 the snippet whose whole content is a bare number
        label: Name used in messages (defaults to the concept's local name)

    Returns:
        Rule
    """
    name = label or (local_name(concept) if concept else 'Revenue')

    @xbrl_rule
    def validate_non_negative_value(snippet: StructuralMatcher) -> ValidationResult:
        if concept is None:
            tokens = snippet.occurrences(BARE_NUMBER_PATTERN)
            token = tokens[0] if tokens else None
        else:
            facts = [fact for fact in snippet.elements(concept) if fact.text]
            token = facts[0].text if facts else None

        if token is None:
            return ValidationResult.failed(MSG_VALUE_NOT_FOUND.format(name=name))

        value = None
        if snippet.matches(NUMBER_TOKEN_PATTERN, token):
            value = parse_amount(token)
        if value is None:
            return ValidationResult.failed(MSG_VALUE_NOT_NUMBER.format(name=name))

        if value < 0:
            return ValidationResult.failed(MSG_VALUE_NEGATIVE.format(name=name))
        return ValidationResult.passed()

    return validate_non_negative_value


# ==============================================================================
# PRECISION
# ==============================================================================

def decimals_precision_rule(concept: str = CONCEPT_ASSETS) -> Rule:
    """
    Build a rule checking a fact's decimals against its written value.

    The fact must carry decimals, and decimals must be INF or an integer.
    When the value has a fractional part, its digit count must equal
    decimals (INF accepts any).

    Args:
        concept: Fact element to check

    Returns:
        Rule
    """
    @xbrl_rule
    def validate_decimals_precision(snippet: StructuralMatcher) -> ValidationResult:
        fact = _first_numeric_fact(snippet, concept, ATTR_DECIMALS)
        if fact is None:
            return ValidationResult.failed(MSG_DECIMALS_FACT_NOT_FOUND.format(concept=concept))

        decimals = fact.get(ATTR_DECIMALS).strip()
        if decimals == INFINITE_PRECISION:
            return ValidationResult.passed()
        if not snippet.matches(INTEGER_PATTERN, decimals):
            return ValidationResult.failed(MSG_DECIMALS_NOT_INTEGER)

        if fact.text.count('.') == 1:
            fraction = fact.text.split('.')[1]
            if len(fraction) != int(decimals):
                return ValidationResult.failed(
                    MSG_DECIMALS_MISMATCH.format(expected=len(fraction), actual=decimals)
                )
        return ValidationResult.passed()

    return validate_decimals_precision


@xbrl_rule
def validate_decimals_format(snippet: StructuralMatcher) -> ValidationResult:
    """Every decimals attribute must be INF or an integer."""
    for value in snippet.attributes(ATTR_DECIMALS):
        if not snippet.matches(DECIMALS_VALUE_PATTERN, value):
            return ValidationResult.failed(MSG_INVALID_DECIMALS_VALUE.format(value=value))
    return ValidationResult.passed()


# ==============================================================================
# CALCULATION
# ==============================================================================

def calculation_identity_rule(
    total: str = INCOME_TOTAL,
    addends: Sequence[str] = INCOME_ADDENDS,
    tolerance: Optional[float] = None
) -> Rule:
    """
    Build a rule checking total == sum(addends) across numeric facts.

    Each fact must carry contextRef, unitRef and decimals and hold a
    number (thousands separators allowed).

    Args:
        total: Concept holding the sum
        addends: Concepts summed, in message order
        tolerance: Allowed absolute difference (None reads
                   calculation_tolerance from configuration)

    Returns:
        Rule
    """
    required = (ATTR_CONTEXT_REF, ATTR_UNIT_REF, ATTR_DECIMALS)

    @xbrl_rule
    def validate_calculation(snippet: StructuralMatcher) -> ValidationResult:
        values: dict[str, float] = {}
        for concept in (*addends, total):
            fact = _first_numeric_fact(snippet, concept, *required, ignore_case=True)
            value = parse_amount(fact.text) if fact else None
            if value is None:
                return ValidationResult.failed(MSG_FACT_MISSING.format(concept=concept))
            values[concept] = value

        limit = tolerance
        if limit is None:
            limit = snippet.config.get('calculation_tolerance', DEFAULT_CALCULATION_TOLERANCE)

        computed = sum(values[concept] for concept in addends)
        if abs(computed - values[total]) > limit:
            expression = ' + '.join(
                f"{local_name(concept)} ({format_amount(values[concept])})"
                for concept in addends
            )
            logger.debug(f"Calculation mismatch: {computed} != {values[total]} (tolerance {limit})")
            return ValidationResult.failed(
                MSG_CALCULATION_MISMATCH.format(
                    expression=expression,
                    total_name=local_name(total),
                    total=format_amount(values[total]),
                )
            )
        return ValidationResult.passed()

    return validate_calculation


# ==============================================================================
# HELPERS
# ==============================================================================

def _read_date(snippet: StructuralMatcher, text: str) -> Optional[datetime]:
    """Parse a period value written in xs:date or xs:dateTime lexical form."""
    if not snippet.matches(XS_DATE_PATTERN, text.strip()):
        return None
    return parse_xbrl_date(text)


def _first_numeric_fact(
    snippet: StructuralMatcher,
    concept: str,
    *required: str,
    ignore_case: bool = False
) -> Optional[Element]:
    """First occurrence of concept carrying every required attribute and a number-like value."""
    for fact in snippet.elements(concept, ignore_case=ignore_case):
        if all(fact.get(name) is not None for name in required) and fact.text:
            if snippet.matches(NUMBER_TOKEN_PATTERN, fact.text):
                return fact
    return None


validate_revenue_value = non_negative_value_rule()
validate_currency_format = currency_format_rule(strict_case=True)
validate_decimals_precision = decimals_precision_rule(CONCEPT_ASSETS)
validate_calculation = calculation_identity_rule()


__all__ = [
    'validate_unit_ref',
    'validate_context_ref',
    'validate_context_ref_integrity',
    'validate_date_range',
    'validate_instant_date',
    'validate_currency_code',
    'currency_format_rule',
    'non_negative_value_rule',
    'decimals_precision_rule',
    'validate_decimals_format',
    'calculation_identity_rule',
    'validate_revenue_value',
    'validate_currency_format',
    'validate_decimals_precision',
    'validate_calculation',
]
