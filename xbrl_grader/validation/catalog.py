# Path: xbrl_grader/validation/catalog.py
"""
Rule Catalog

Maps every registry name to its rule. Adding an exercise means adding
its vocabulary to validation.constants and one entry here.
"""

from .base import Rule
from .constants import (
    RULE_UNIT_REF,
    RULE_CONTEXT_REF,
    RULE_DATE_RANGE,
    RULE_CURRENCY_CODE,
    RULE_REVENUE_VALUE,
    RULE_ALL_FIXES,
    RULE_BUSHCHAT_SNIPPET,
    RULE_INSTANT_DATE,
    RULE_CURRENCY_FORMAT,
    RULE_DECIMALS_PRECISION,
    RULE_DECIMALS_FORMAT,
    RULE_CONTEXT_REF_INTEGRITY,
    RULE_DIMENSION_USAGE,
    RULE_CALCULATION,
    RULE_DIMENSION_AND_CALCULATION,
    RULE_BEGINNER_1,
    RULE_BEGINNER_2,
    RULE_INTERMEDIATE_1,
    RULE_INTERMEDIATE_2,
    RULE_ADVANCED_1,
    RULE_LABEL_PART_1,
    RULE_LABEL_PART_2,
    RULE_PRESENTATION_PART_1,
    RULE_PRESENTATION_PART_2,
    RULE_CALCULATION_PART_1,
    RULE_CALCULATION_PART_2,
    RULE_DEFINITION_DOMAIN_MEMBER,
    RULE_REFERENCE_PART_1,
    BEGINNER_1,
    BEGINNER_2,
    INTERMEDIATE_1,
    INTERMEDIATE_2,
    TERSE_LABEL,
    REVENUE_LABEL_ARC,
    SALARIES_PRESENTATION_ARC,
    REVENUE_CALCULATION_ARC,
    EUROPE_DOMAIN_MEMBER_ARC,
    MSG_OK_BEGINNER_1,
    MSG_OK_BEGINNER_2,
    MSG_OK_INTERMEDIATE_1,
    MSG_OK_INTERMEDIATE_2,
    MSG_OK_LABEL_PART_1,
    MSG_OK_LABEL_PART_2,
    MSG_OK_PRESENTATION_PART_1,
    MSG_OK_CALCULATION_PART_1,
    MSG_OK_DEFINITION_DOMAIN_MEMBER,
)
from .instance_rules import (
    validate_unit_ref,
    validate_context_ref,
    validate_date_range,
    validate_currency_code,
    validate_revenue_value,
    validate_instant_date,
    validate_currency_format,
    validate_decimals_precision,
    validate_decimals_format,
    validate_context_ref_integrity,
    validate_calculation,
)
from .dimension_rules import (
    validate_dimension_usage,
    validate_dimension_placement,
    explicit_member_rule,
    typed_member_rule,
)
from .linkbase_rules import linkbase_element_rule, validate_reference_link
from .composites import (
    validate_all_fixes,
    validate_bushchat_snippet,
    validate_dimension_and_calculation,
    validate_presentation_part_2,
    validate_calculation_part_2,
)


def build_catalog() -> dict[str, Rule]:
    """
    Build the name -> rule mapping served by the default registry.

    Returns:
        dict of registry name to rule, in course order
    """
    return {
        # Instance basics
        RULE_UNIT_REF: validate_unit_ref,
        RULE_CONTEXT_REF: validate_context_ref,
        RULE_DATE_RANGE: validate_date_range,
        RULE_CURRENCY_CODE: validate_currency_code,
        RULE_REVENUE_VALUE: validate_revenue_value,
        RULE_ALL_FIXES: validate_all_fixes,
        RULE_BUSHCHAT_SNIPPET: validate_bushchat_snippet,
        RULE_INSTANT_DATE: validate_instant_date,
        RULE_CURRENCY_FORMAT: validate_currency_format,
        RULE_DECIMALS_PRECISION: validate_decimals_precision,
        RULE_DECIMALS_FORMAT: validate_decimals_format,
        RULE_CONTEXT_REF_INTEGRITY: validate_context_ref_integrity,

        # Dimensions and calculation
        RULE_DIMENSION_USAGE: validate_dimension_usage,
        RULE_CALCULATION: validate_calculation,
        RULE_DIMENSION_AND_CALCULATION: validate_dimension_and_calculation,
        RULE_BEGINNER_1: explicit_member_rule(BEGINNER_1, MSG_OK_BEGINNER_1),
        RULE_BEGINNER_2: explicit_member_rule(BEGINNER_2, MSG_OK_BEGINNER_2),
        RULE_INTERMEDIATE_1: explicit_member_rule(INTERMEDIATE_1, MSG_OK_INTERMEDIATE_1),
        RULE_INTERMEDIATE_2: typed_member_rule(INTERMEDIATE_2, MSG_OK_INTERMEDIATE_2),
        RULE_ADVANCED_1: validate_dimension_placement,

        # Linkbases
        RULE_LABEL_PART_1: linkbase_element_rule(TERSE_LABEL, MSG_OK_LABEL_PART_1),
        RULE_LABEL_PART_2: linkbase_element_rule(REVENUE_LABEL_ARC, MSG_OK_LABEL_PART_2),
        RULE_PRESENTATION_PART_1: linkbase_element_rule(
            SALARIES_PRESENTATION_ARC, MSG_OK_PRESENTATION_PART_1
        ),
        RULE_PRESENTATION_PART_2: validate_presentation_part_2,
        RULE_CALCULATION_PART_1: linkbase_element_rule(
            REVENUE_CALCULATION_ARC, MSG_OK_CALCULATION_PART_1
        ),
        RULE_CALCULATION_PART_2: validate_calculation_part_2,
        RULE_DEFINITION_DOMAIN_MEMBER: linkbase_element_rule(
            EUROPE_DOMAIN_MEMBER_ARC, MSG_OK_DEFINITION_DOMAIN_MEMBER
        ),
        RULE_REFERENCE_PART_1: validate_reference_link,
    }


__all__ = ['build_catalog']
