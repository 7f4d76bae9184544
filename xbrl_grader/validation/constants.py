# Path: xbrl_grader/validation/constants.py
"""
Validation Module Constants

Central repository for exercise vocabulary, linkbase URIs, expected
values and learner-facing messages.

NO exercise values (concept names, URIs, allowed members) should be
written inline in rule modules - rules read them from the tables here,
so new exercises only need new table entries.
"""

from dataclasses import dataclass, field
from typing import Final, Optional


# ==============================================================================
# REGISTRY NAMES
# ==============================================================================

# Names used by course content to address validators
RULE_UNIT_REF: Final = 'validateUnitRefAnswer'
RULE_CONTEXT_REF: Final = 'validateContextRefAnswer'
RULE_DATE_RANGE: Final = 'validateDateRangeAnswer'
RULE_CURRENCY_CODE: Final = 'validateCurrencyCodeAnswer'
RULE_REVENUE_VALUE: Final = 'validateRevenueValueAnswer'
RULE_ALL_FIXES: Final = 'validateAllFixesAnswer'
RULE_BUSHCHAT_SNIPPET: Final = 'validateBushchatHandsOnSnippet'
RULE_INSTANT_DATE: Final = 'validateInstantDate'
RULE_CURRENCY_FORMAT: Final = 'validateCurrencyFormat'
RULE_DECIMALS_PRECISION: Final = 'validateDecimalsPrecision'
RULE_DECIMALS_FORMAT: Final = 'validateDecimalsFormat'
RULE_CONTEXT_REF_INTEGRITY: Final = 'validateContextRefIntegrity'
RULE_DIMENSION_USAGE: Final = 'validateDimensionUsage'
RULE_CALCULATION: Final = 'validateCalculation'
RULE_DIMENSION_AND_CALCULATION: Final = 'validateDimensionAndCalculation'
RULE_BEGINNER_1: Final = 'validateBeginner1'
RULE_BEGINNER_2: Final = 'validateBeginner2'
RULE_INTERMEDIATE_1: Final = 'validateIntermediate1'
RULE_INTERMEDIATE_2: Final = 'validateIntermediate2'
RULE_ADVANCED_1: Final = 'validateAdvanced1'
RULE_LABEL_PART_1: Final = 'validateLabelPart1'
RULE_LABEL_PART_2: Final = 'validateLabelPart2'
RULE_PRESENTATION_PART_1: Final = 'validatePresentationPart1'
RULE_PRESENTATION_PART_2: Final = 'validatePresentationPart2'
RULE_CALCULATION_PART_1: Final = 'validateCalculationPart1'
RULE_CALCULATION_PART_2: Final = 'validateCalculationPart2'
RULE_DEFINITION_DOMAIN_MEMBER: Final = 'validateDefinitionDomainMember'
RULE_REFERENCE_PART_1: Final = 'validateReferencePart1'

# ==============================================================================
# ELEMENT AND ATTRIBUTE NAMES
# ==============================================================================

ATTR_UNIT_REF: Final = 'unitRef'
ATTR_CONTEXT_REF: Final = 'contextRef'
ATTR_DECIMALS: Final = 'decimals'
ATTR_ID: Final = 'id'
ATTR_DIMENSION: Final = 'dimension'
ATTR_ORDER: Final = 'order'
ATTR_WEIGHT: Final = 'weight'

XLINK_TYPE: Final = 'xlink:type'
XLINK_ROLE: Final = 'xlink:role'
XLINK_ARCROLE: Final = 'xlink:arcrole'
XLINK_FROM: Final = 'xlink:from'
XLINK_TO: Final = 'xlink:to'
XLINK_LABEL: Final = 'xlink:label'

TAG_CONTEXT: Final = 'xbrli:context'
TAG_ENTITY: Final = 'xbrli:entity'
TAG_SEGMENT: Final = 'xbrli:segment'
TAG_SCENARIO: Final = 'xbrli:scenario'
TAG_START_DATE: Final = 'xbrli:startDate'
TAG_END_DATE: Final = 'xbrli:endDate'
TAG_INSTANT: Final = 'xbrli:instant'
TAG_MEASURE: Final = 'xbrli:measure'
TAG_EXPLICIT_MEMBER: Final = 'xbrldi:explicitMember'
TAG_TYPED_MEMBER: Final = 'xbrldi:typedMember'
TAG_LABEL: Final = 'link:label'
TAG_LABEL_ARC: Final = 'link:labelArc'
TAG_PRESENTATION_ARC: Final = 'link:presentationArc'
TAG_CALCULATION_ARC: Final = 'link:calculationArc'
TAG_DEFINITION_ARC: Final = 'link:definitionArc'
TAG_REFERENCE: Final = 'link:reference'
TAG_REFERENCE_ARC: Final = 'link:referenceArc'

# ==============================================================================
# EXPECTED INSTANCE VALUES
# ==============================================================================

EXPECTED_UNIT_REF: Final = 'u1'
EXPECTED_CONTEXT_REF: Final = 'C1'

ALLOWED_CURRENCIES: Final[tuple[str, ...]] = ('USD', 'EUR', 'INR', 'JPY')
ISO4217_PREFIX: Final = 'iso4217:'

INFINITE_PRECISION: Final = 'INF'

# Concepts used by instance exercises
CONCEPT_REVENUE: Final = 'ex:Revenue'
CONCEPT_OTHER_INCOME: Final = 'ex:OtherIncome'
CONCEPT_TOTAL_INCOME: Final = 'ex:TotalIncome'
CONCEPT_ASSETS: Final = 'ex:Assets'

# Calculation identity: parent = sum(addends)
INCOME_ADDENDS: Final[tuple[str, ...]] = (CONCEPT_REVENUE, CONCEPT_OTHER_INCOME)
INCOME_TOTAL: Final = CONCEPT_TOTAL_INCOME

# ==============================================================================
# VALUE PATTERNS
# ==============================================================================

# Any element whose whole content is a number-like token
BARE_NUMBER_PATTERN: Final = r'>\s*([+-]?[\d.,]+)\s*</'
NUMBER_TOKEN_PATTERN: Final = r'[+-]?[\d.,]+'
INTEGER_PATTERN: Final = r'[+-]?\d+'
DECIMALS_VALUE_PATTERN: Final = r'INF|[+-]?\d+'
CURRENCY_MEASURE_PATTERN: Final = r'iso4217:[A-Z]{3}'
# xs:date or xs:dateTime lexical form
XS_DATE_PATTERN: Final = r'-?\d{4,}-\d{2}-\d{2}(T\d{2}:\d{2}:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:\d{2})?'
THOUSANDS_SEPARATOR: Final = ','

# ==============================================================================
# LINKBASE URIS
# ==============================================================================

ROLE_TERSE_LABEL: Final = 'http://www.xbrl.org/2003/role/terseLabel'
ROLE_REFERENCE: Final = 'http://www.xbrl.org/2003/role/reference'

ARCROLE_CONCEPT_LABEL: Final = 'http://www.xbrl.org/2003/arcrole/concept-label'
ARCROLE_PARENT_CHILD: Final = 'http://www.xbrl.org/2003/arcrole/parent-child'
ARCROLE_SUMMATION_ITEM: Final = 'http://www.xbrl.org/2003/arcrole/summation-item'
ARCROLE_DOMAIN_MEMBER: Final = 'http://xbrl.org/2005/arcrole/domain-member'
ARCROLE_CONCEPT_REFERENCE: Final = 'http://www.xbrl.org/2003/arcrole/concept-reference'

TYPE_ARC: Final = 'arc'
TYPE_RESOURCE: Final = 'resource'


# ==============================================================================
# DIMENSION VOCABULARY
# ==============================================================================

@dataclass(frozen=True)
class DimensionExercise:
    """
    Expected explicit dimension usage in a context.

    Attributes:
        context_id: Context that must hold the member (None = any context)
        axis: Dimension QName
        members: Allowed member QNames
        path: Elements between context and explicitMember (empty = anywhere in context)
    """
    context_id: Optional[str]
    axis: str
    members: tuple[str, ...]
    path: tuple[str, ...] = ()


@dataclass(frozen=True)
class TypedDimensionExercise:
    """
    Expected typed dimension usage.

    Attributes:
        axis: Dimension QName
        value_element: Element nested in typedMember carrying the value
        path: Elements between context and typedMember
    """
    axis: str
    value_element: str
    path: tuple[str, ...] = (TAG_ENTITY, TAG_SEGMENT)


@dataclass(frozen=True)
class DimensionPlacement:
    """
    Expected segment/scenario placement of two axes.

    Attributes:
        segment_axis: Axis that must appear only in segments
        scenario_axis: Axis that must appear only in scenarios
        allowed_members: Axis to allowed member QNames
    """
    segment_axis: str
    scenario_axis: str
    allowed_members: dict[str, frozenset[str]] = field(default_factory=dict)


DIMENSION_USAGE: Final = DimensionExercise(
    context_id='C1',
    axis='ex:RegionAxis',
    members=('ex:AsiaMember',),
    path=(TAG_SEGMENT,),
)

BEGINNER_1: Final = DimensionExercise(
    context_id='Context_A',
    axis='ex:ProductAxis',
    members=('ex:CarsMember', 'ex:BikesMember'),
)

BEGINNER_2: Final = DimensionExercise(
    context_id='Context_B',
    axis='ex:LocationAxis',
    members=('ex:NorthMember', 'ex:SouthMember'),
)

INTERMEDIATE_1: Final = DimensionExercise(
    context_id=None,
    axis='ex:RegionAxis',
    members=('ex:AsiaMember', 'ex:EuropeMember'),
    path=(TAG_ENTITY, TAG_SEGMENT),
)

INTERMEDIATE_2: Final = TypedDimensionExercise(
    axis='ex:ProductAxis',
    value_element='ex:product',
)

ADVANCED_1: Final = DimensionPlacement(
    segment_axis='ex:RegionAxis',
    scenario_axis='ex:ProductAxis',
    allowed_members={
        'ex:RegionAxis': frozenset({'ex:AsiaMember', 'ex:EuropeMember'}),
        'ex:ProductAxis': frozenset({'ex:ElectronicsMember', 'ex:FurnitureMember'}),
    },
)


# ==============================================================================
# LINKBASE VOCABULARY
# ==============================================================================

@dataclass(frozen=True)
class LinkbaseElementSpec:
    """
    Expected linkbase element.

    Attributes:
        tag: Element name
        attributes: Attribute name to exact expected value
        required: Attributes that must be present with any value
        text: Expected element text (None = not checked)
        description: Human name used in diagnostics
    """
    tag: str
    attributes: dict[str, str]
    required: tuple[str, ...] = ()
    text: Optional[str] = None
    description: str = ''


TERSE_LABEL: Final = LinkbaseElementSpec(
    tag=TAG_LABEL,
    attributes={
        XLINK_TYPE: TYPE_RESOURCE,
        XLINK_ROLE: ROLE_TERSE_LABEL,
    },
    required=(XLINK_LABEL,),
    text='Revenue',
    description='terse label for Revenue',
)

REVENUE_LABEL_ARC: Final = LinkbaseElementSpec(
    tag=TAG_LABEL_ARC,
    attributes={
        XLINK_FROM: 'loc_revenue',
        XLINK_TO: 'lab_revenue_terse',
        XLINK_ARCROLE: ARCROLE_CONCEPT_LABEL,
        XLINK_TYPE: TYPE_ARC,
    },
    description='concept-label arc for Revenue',
)

SALARIES_PRESENTATION_ARC: Final = LinkbaseElementSpec(
    tag=TAG_PRESENTATION_ARC,
    attributes={
        XLINK_FROM: 'loc_TotalOperatingExpenses',
        XLINK_TO: 'loc_SalariesAndWages',
        XLINK_ARCROLE: ARCROLE_PARENT_CHILD,
        XLINK_TYPE: TYPE_ARC,
        ATTR_ORDER: '10',
    },
    description='presentation arc for SalariesAndWages',
)

RENT_PRESENTATION_ARC: Final = LinkbaseElementSpec(
    tag=TAG_PRESENTATION_ARC,
    attributes={
        XLINK_FROM: 'loc_TotalOperatingExpenses',
        XLINK_TO: 'loc_RentExpense',
        XLINK_ARCROLE: ARCROLE_PARENT_CHILD,
        XLINK_TYPE: TYPE_ARC,
    },
    required=(ATTR_ORDER,),
    description='presentation arc for RentExpense',
)

# Rent must be ordered after salaries
RENT_MIN_ORDER_EXCLUSIVE: Final = 10
PRESENTATION_ARC_COUNT: Final = 2

REVENUE_CALCULATION_ARC: Final = LinkbaseElementSpec(
    tag=TAG_CALCULATION_ARC,
    attributes={
        XLINK_FROM: 'loc_NetIncome',
        XLINK_TO: 'loc_Revenue',
        XLINK_ARCROLE: ARCROLE_SUMMATION_ITEM,
        XLINK_TYPE: TYPE_ARC,
        ATTR_WEIGHT: '1',
    },
    description='summation-item arc for Revenue',
)

COST_OF_GOODS_CALCULATION_ARC: Final = LinkbaseElementSpec(
    tag=TAG_CALCULATION_ARC,
    attributes={
        XLINK_FROM: 'loc_NetIncome',
        XLINK_TO: 'loc_CostOfGoodsSold',
        XLINK_ARCROLE: ARCROLE_SUMMATION_ITEM,
        XLINK_TYPE: TYPE_ARC,
        ATTR_WEIGHT: '-1',
    },
    description='summation-item arc for CostOfGoodsSold',
)

CALCULATION_ARC_MIN_COUNT: Final = 2

EUROPE_DOMAIN_MEMBER_ARC: Final = LinkbaseElementSpec(
    tag=TAG_DEFINITION_ARC,
    attributes={
        XLINK_FROM: 'loc_GeoRegionAxis',
        XLINK_TO: 'loc_EuropeMember',
        XLINK_ARCROLE: ARCROLE_DOMAIN_MEMBER,
        XLINK_TYPE: TYPE_ARC,
    },
    description='domain-member arc for EuropeMember',
)

IFRS_REFERENCE: Final = LinkbaseElementSpec(
    tag=TAG_REFERENCE,
    attributes={
        XLINK_ROLE: ROLE_REFERENCE,
        XLINK_TYPE: TYPE_RESOURCE,
    },
    required=(XLINK_LABEL,),
    description='reference resource',
)

# Child elements the reference resource must carry
IFRS_REFERENCE_PARTS: Final[dict[str, str]] = {
    'ref:Standard': 'IFRS 15',
    'ref:Paragraph': '10',
}

# referenceArc 'to' is filled in from the matched resource's label
REVENUE_REFERENCE_ARC: Final = LinkbaseElementSpec(
    tag=TAG_REFERENCE_ARC,
    attributes={
        XLINK_FROM: 'loc_Revenue',
        XLINK_ARCROLE: ARCROLE_CONCEPT_REFERENCE,
        XLINK_TYPE: TYPE_ARC,
    },
    description='concept-reference arc for Revenue',
)


# ==============================================================================
# MESSAGES - INSTANCE RULES
# ==============================================================================

MSG_NO_UNIT_REF: Final = "❌ No unitRef attribute found in your answer."
MSG_WRONG_UNIT_REF: Final = '❌ unitRef="{value}" should be exactly "{expected}".'
MSG_NO_CONTEXT_REF: Final = "❌ No contextRef attribute found in your answer."
MSG_WRONG_CONTEXT_REF: Final = (
    '❌ contextRef="{value}" must exactly match "{expected}" (case-sensitive).'
)

MSG_MISSING_PERIOD_DATES: Final = "❌ Missing <xbrli:startDate> or <xbrli:endDate> element."
MSG_INVALID_START_DATE: Final = "❌ <xbrli:startDate> is not a valid date."
MSG_INVALID_END_DATE: Final = "❌ <xbrli:endDate> is not a valid date."
MSG_START_NOT_BEFORE_END: Final = (
    "❌ startDate ({start}) must be before endDate ({end})."
)

MSG_NO_INSTANT: Final = "❌ Missing <xbrli:instant> element."
MSG_INVALID_INSTANT: Final = "❌ <xbrli:instant> is not a valid date."

MSG_NO_MEASURE: Final = "❌ No <xbrli:measure> element found."
MSG_INVALID_CURRENCY: Final = (
    '❌ Currency code "{code}" is invalid. Use one of: {allowed}.'
)
MSG_CURRENCY_NOT_UPPER_ISO: Final = (
    "❌ Currency code must be upper-case ISO 4217 (e.g. USD, EUR)."
)
MSG_CURRENCY_NOT_ISO: Final = (
    "❌ Missing or invalid <xbrli:measure> with ISO4217 currency code."
)

MSG_VALUE_NOT_FOUND: Final = "❌ Could not find numeric value of {name}."
MSG_VALUE_NOT_NUMBER: Final = "❌ {name} value is not a valid number."
MSG_VALUE_NEGATIVE: Final = "❌ {name} value must be greater than or equal to zero."

MSG_DECIMALS_FACT_NOT_FOUND: Final = "❌ <{concept}> element (with decimals) not found."
MSG_DECIMALS_NOT_INTEGER: Final = (
    "❌ decimals should be an integer (e.g. 2 for 1000000.50) or INF."
)
MSG_DECIMALS_MISMATCH: Final = (
    "❌ The decimals attribute should match the number of digits after the "
    "decimal point in the amount (expected {expected}, found {actual})."
)
MSG_INVALID_DECIMALS_VALUE: Final = (
    '❌ Invalid decimals value "{value}". Must be integer or "INF".'
)

MSG_DANGLING_CONTEXT_REF: Final = (
    '❌ contextRef "{ref}" does not refer to any defined context.'
)

MSG_FACT_MISSING: Final = "❌ Missing or invalid <{concept}> fact."
MSG_CALCULATION_MISMATCH: Final = "❌ Calculation error: {expression} != {total_name} ({total})."


# ==============================================================================
# MESSAGES - DIMENSION RULES
# ==============================================================================

MSG_CONTEXT_NOT_FOUND: Final = "❌ Missing context with id='{context_id}'."
MSG_CONTEXT_NEEDS_SEGMENT: Final = (
    "❌ Context '{context_id}' must include a <xbrli:segment> element."
)
MSG_EXPLICIT_MEMBER_MISSING: Final = (
    "❌ Missing <xbrldi:explicitMember> inside the segment with dimension attribute."
)
MSG_WRONG_DIMENSION: Final = (
    '❌ The dimension attribute should be "{expected}", found "{actual}".'
)
MSG_WRONG_MEMBER: Final = (
    '❌ The explicitMember value should be "{expected}", found "{actual}".'
)
MSG_EXPLICIT_MEMBER_INCORRECT: Final = (
    "❌ The <xbrldi:explicitMember> is missing or incorrect. {requirement}"
)
MSG_REQUIREMENT_IN_CONTEXT: Final = (
    "It must be in {context_id}, have a dimension of '{axis}', and a member of {members}."
)
MSG_REQUIREMENT_ANY_CONTEXT: Final = (
    "It must have a dimension of '{axis}' and a member value of {members}."
)
MSG_TYPED_MEMBER_MISSING: Final = (
    "❌ Missing or incorrect <xbrldi:typedMember>. It must be inside "
    "<xbrli:segment> and have dimension=\"{axis}\"."
)
MSG_TYPED_VALUE_EMPTY: Final = (
    "❌ <{element}> should not be empty. Please provide a product value."
)
MSG_AXIS_MUST_BE_IN: Final = (
    "❌ The <{axis}> dimension must be defined in <{required}> and must not be "
    "in <{forbidden}>."
)
MSG_INVALID_DIMENSION: Final = '❌ Invalid dimension "{dimension}".'
MSG_INVALID_MEMBER: Final = '❌ Invalid member "{member}" for dimension "{dimension}".'
MSG_DIMENSION_REUSED: Final = (
    '❌ Dimension "{dimension}" is used more than once in the same context.'
)


# ==============================================================================
# MESSAGES - LINKBASE RULES
# ==============================================================================

MSG_LINKBASE_ELEMENT_ABSENT: Final = "❌ No <{tag}> element found for the {description}."
MSG_LINKBASE_ATTRIBUTE_WRONG: Final = (
    '❌ Missing or incorrect <{tag}> element for the {description}: '
    '{attribute} should be "{expected}", found {actual}.'
)
MSG_LINKBASE_ATTRIBUTE_MISSING: Final = (
    "❌ Missing or incorrect <{tag}> element for the {description}: "
    "{attribute} attribute is required."
)
MSG_LINKBASE_TEXT_WRONG: Final = (
    '❌ Missing or incorrect <{tag}> element for the {description}: '
    'text should be "{expected}", found "{actual}".'
)
MSG_ARC_ORDER_TOO_LOW: Final = (
    "❌ The arc for '{concept}' is missing or incorrect. "
    "It must have an 'order' greater than {minimum}."
)
MSG_ARC_COUNT_EXACT: Final = (
    "❌ Incorrect number of <{tag}> elements found ({count}). "
    "You should have exactly {expected}."
)
MSG_ARC_COUNT_MINIMUM: Final = (
    "❌ Found {count} <{tag}> element(s); at least {expected} are required."
)
MSG_REFERENCE_PART_WRONG: Final = (
    '❌ Missing or incorrect <link:reference> element: <{part}> should be '
    '"{expected}", found {actual}.'
)
MSG_REFERENCE_ARC_WRONG: Final = (
    "❌ Missing or incorrect <link:referenceArc>. The 'xlink:from' attribute "
    "should be '{source}', and the 'xlink:to' attribute should match the label "
    "you defined for your reference resource ({label})."
)


# ==============================================================================
# MESSAGES - CONFIRMATIONS
# ==============================================================================

MSG_OK_BEGINNER_1: Final = "✅ Correct! The dimension and member are properly used."
MSG_OK_BEGINNER_2: Final = (
    "✅ Correct! The dimension and member are spelled correctly and match the taxonomy."
)
MSG_OK_INTERMEDIATE_1: Final = (
    "✅ Correct! You have fixed both the dimension and the member name."
)
MSG_OK_INTERMEDIATE_2: Final = "✅ Well done! Your typed dimension is correctly defined."
MSG_OK_ADVANCED_1: Final = (
    "✅ Great job! Your dimensions are uniquely and correctly placed."
)
MSG_OK_LABEL_PART_1: Final = "✅ Great job! You've correctly defined the terse label."
MSG_OK_LABEL_PART_2: Final = (
    "✅ Well done! The <link:labelArc> connects your concept and label correctly."
)
MSG_OK_PRESENTATION_PART_1: Final = (
    "✅ Well done! The <link:presentationArc> correctly links the parent and child concepts."
)
MSG_OK_PRESENTATION_PART_2: Final = (
    "✅ Fantastic! You have successfully added 'RentExpense' and correctly "
    "ordered it under 'TotalOperatingExpenses'."
)
MSG_OK_CALCULATION_PART_1: Final = (
    "✅ Great job! Your <link:calculationArc> correctly links NetIncome to "
    "Revenue with weight 1."
)
MSG_OK_CALCULATION_PART_2: Final = (
    "✅ Well done! You've correctly added the subtraction arc for CostOfGoodsSold."
)
MSG_OK_DEFINITION_DOMAIN_MEMBER: Final = (
    "✅ Great job! You correctly defined the domain-member relationship."
)
MSG_OK_REFERENCE_PART_1: Final = (
    "✅ Excellent! The concept is now correctly linked to its reference."
)


# ==============================================================================
# MESSAGES - EVALUATION LIMITS
# ==============================================================================

MSG_EVALUATION_TIMEOUT: Final = (
    "❌ Your answer could not be evaluated in time. Please simplify it and try again."
)
