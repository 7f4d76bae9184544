# Path: xbrl_grader/validation/composites.py
"""
Composite Rules

Exercises that combine several atomic rules. A composite runs its rules
in order and returns the first failure unchanged, so learners fix one
problem at a time. Composites hold no checks of their own.
"""

from typing import Optional, Sequence

from ..config_loader import ConfigLoader
from ..models.result import ValidationResult
from .base import Rule
from .constants import (
    CONCEPT_REVENUE,
    TAG_PRESENTATION_ARC,
    TAG_CALCULATION_ARC,
    SALARIES_PRESENTATION_ARC,
    RENT_PRESENTATION_ARC,
    RENT_MIN_ORDER_EXCLUSIVE,
    PRESENTATION_ARC_COUNT,
    CALCULATION_ARC_MIN_COUNT,
    COST_OF_GOODS_CALCULATION_ARC,
    MSG_OK_PRESENTATION_PART_2,
    MSG_OK_CALCULATION_PART_2,
)
from .instance_rules import (
    validate_date_range,
    validate_currency_code,
    validate_instant_date,
    validate_decimals_format,
    validate_context_ref_integrity,
    validate_calculation,
    validate_currency_format,
    validate_decimals_precision,
    non_negative_value_rule,
    currency_format_rule,
)
from .dimension_rules import validate_dimension_usage
from .linkbase_rules import linkbase_element_rule, arc_order_rule, arc_count_rule


def run_in_sequence(
    text: object,
    rules: Sequence[Rule],
    success_message: Optional[str] = None,
    config: Optional[ConfigLoader] = None
) -> ValidationResult:
    """
    Run rules in order, stopping at the first failure.

    Args:
        text: Snippet text
        rules: Rules to run
        success_message: Confirmation carried by the passing result
        config: Optional configuration passed to every rule

    Returns:
        First failing ValidationResult, or a passing one
    """
    for rule in rules:
        result = rule(text, config)
        if not result.is_correct:
            return result
    return ValidationResult.passed(success_message)


ALL_FIXES_RULES: tuple[Rule, ...] = (
    validate_date_range,
    validate_currency_code,
    non_negative_value_rule(CONCEPT_REVENUE),
)

BUSHCHAT_RULES: tuple[Rule, ...] = (
    validate_instant_date,
    validate_currency_format,
    validate_decimals_precision,
    validate_context_ref_integrity,
)

DIMENSION_AND_CALCULATION_RULES: tuple[Rule, ...] = (
    validate_dimension_usage,
    validate_calculation,
    validate_decimals_format,
    currency_format_rule(strict_case=False),
)

PRESENTATION_PART_2_RULES: tuple[Rule, ...] = (
    linkbase_element_rule(SALARIES_PRESENTATION_ARC),
    arc_order_rule(RENT_PRESENTATION_ARC, RENT_MIN_ORDER_EXCLUSIVE),
    arc_count_rule(TAG_PRESENTATION_ARC, PRESENTATION_ARC_COUNT),
)

CALCULATION_PART_2_RULES: tuple[Rule, ...] = (
    arc_count_rule(TAG_CALCULATION_ARC, CALCULATION_ARC_MIN_COUNT, at_least=True),
    linkbase_element_rule(COST_OF_GOODS_CALCULATION_ARC),
)


def validate_all_fixes(text: object, config: Optional[ConfigLoader] = None) -> ValidationResult:
    """Period, currency and a non-negative Revenue, in that order."""
    return run_in_sequence(text, ALL_FIXES_RULES, config=config)


def validate_bushchat_snippet(text: object, config: Optional[ConfigLoader] = None) -> ValidationResult:
    """Instant, strict currency, Assets precision and context integrity."""
    return run_in_sequence(text, BUSHCHAT_RULES, config=config)


def validate_dimension_and_calculation(
    text: object,
    config: Optional[ConfigLoader] = None
) -> ValidationResult:
    """Dimension usage, calculation identity, decimals format and currency."""
    return run_in_sequence(text, DIMENSION_AND_CALCULATION_RULES, config=config)


def validate_presentation_part_2(text: object, config: Optional[ConfigLoader] = None) -> ValidationResult:
    return run_in_sequence(text, PRESENTATION_PART_2_RULES, MSG_OK_PRESENTATION_PART_2, config)


def validate_calculation_part_2(text: object, config: Optional[ConfigLoader] = None) -> ValidationResult:
    return run_in_sequence(text, CALCULATION_PART_2_RULES, MSG_OK_CALCULATION_PART_2, config)


__all__ = [
    'run_in_sequence',
    'validate_all_fixes',
    'validate_bushchat_snippet',
    'validate_dimension_and_calculation',
    'validate_presentation_part_2',
    'validate_calculation_part_2',
]
