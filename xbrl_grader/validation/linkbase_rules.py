# Path: xbrl_grader/validation/linkbase_rules.py
"""
Linkbase Rules

Atomic rules over label, presentation, calculation, definition and
reference linkbase fragments.

Attribute checks are order-independent: an element satisfies a
LinkbaseElementSpec when every expected attribute is present with the
exact value, every required attribute is present, and (when given) its
text matches. When no element satisfies the spec, the failure names the
first problem of the closest candidate, so learners see which attribute
to fix.
"""

from typing import Callable, Optional

from ..core.logger import get_process_logger
from ..foundation.matcher import Element, StructuralMatcher
from ..models.result import ValidationResult
from .base import Rule, xbrl_rule
from .constants import (
    ATTR_ORDER,
    XLINK_LABEL,
    XLINK_FROM,
    XLINK_TO,
    TAG_REFERENCE,
    TAG_REFERENCE_ARC,
    IFRS_REFERENCE,
    IFRS_REFERENCE_PARTS,
    REVENUE_REFERENCE_ARC,
    LinkbaseElementSpec,
    MSG_LINKBASE_ELEMENT_ABSENT,
    MSG_LINKBASE_ATTRIBUTE_WRONG,
    MSG_LINKBASE_ATTRIBUTE_MISSING,
    MSG_LINKBASE_TEXT_WRONG,
    MSG_ARC_ORDER_TOO_LOW,
    MSG_ARC_COUNT_EXACT,
    MSG_ARC_COUNT_MINIMUM,
    MSG_REFERENCE_PART_WRONG,
    MSG_REFERENCE_ARC_WRONG,
    MSG_OK_REFERENCE_PART_1,
)


logger = get_process_logger('linkbase_rules')


# ==============================================================================
# SINGLE ELEMENTS
# ==============================================================================

def linkbase_element_rule(spec: LinkbaseElementSpec, success_message: Optional[str] = None) -> Rule:
    """
    Build a rule requiring one element that satisfies spec.

    Args:
        spec: Expected element
        success_message: Confirmation carried by a passing result

    Returns:
        Rule
    """
    @xbrl_rule
    def validate_linkbase_element(snippet: StructuralMatcher) -> ValidationResult:
        candidates = snippet.elements(spec.tag, ignore_case=True)
        failure = _diagnose(spec, candidates, lambda candidate: _problems(candidate, spec))
        if failure is not None:
            return failure
        return ValidationResult.passed(success_message)

    return validate_linkbase_element


def arc_order_rule(
    spec: LinkbaseElementSpec,
    minimum_exclusive: float,
    success_message: Optional[str] = None
) -> Rule:
    """
    Build a rule requiring a matching arc whose order exceeds a threshold.

    Args:
        spec: Expected arc (order is read separately)
        minimum_exclusive: order must be strictly greater than this
        success_message: Confirmation carried by a passing result

    Returns:
        Rule
    """
    concept = spec.attributes.get(XLINK_TO, spec.tag).removeprefix('loc_')

    @xbrl_rule
    def validate_arc_order(snippet: StructuralMatcher) -> ValidationResult:
        for arc in snippet.elements(spec.tag, ignore_case=True):
            if _problems(arc, spec):
                continue
            order = _parse_order(arc.get(ATTR_ORDER))
            if order is not None and order > minimum_exclusive:
                return ValidationResult.passed(success_message)

        return ValidationResult.failed(
            MSG_ARC_ORDER_TOO_LOW.format(concept=concept, minimum=minimum_exclusive)
        )

    return validate_arc_order


def arc_count_rule(
    tag: str,
    expected: int,
    at_least: bool = False,
    success_message: Optional[str] = None
) -> Rule:
    """
    Build a rule on the number of <tag> elements.

    Args:
        tag: Element name
        expected: Required count
        at_least: Treat expected as a minimum instead of an exact count
        success_message: Confirmation carried by a passing result

    Returns:
        Rule
    """
    @xbrl_rule
    def validate_arc_count(snippet: StructuralMatcher) -> ValidationResult:
        count = snippet.count(tag, ignore_case=True)
        if at_least and count < expected:
            return ValidationResult.failed(
                MSG_ARC_COUNT_MINIMUM.format(tag=tag, count=count, expected=expected)
            )
        if not at_least and count != expected:
            return ValidationResult.failed(
                MSG_ARC_COUNT_EXACT.format(tag=tag, count=count, expected=expected)
            )
        return ValidationResult.passed(success_message)

    return validate_arc_count


# ==============================================================================
# REFERENCES
# ==============================================================================

@xbrl_rule
def validate_reference_link(snippet: StructuralMatcher) -> ValidationResult:
    """
    Two-pass reference check.

    First a reference resource with the expected role, type, label and
    parts must exist. Then a referenceArc must link loc_Revenue to the
    label that resource declared.
    """
    references = snippet.elements(TAG_REFERENCE, ignore_case=True)

    def problems(reference: Element) -> list[str]:
        return _problems(reference, IFRS_REFERENCE) + _part_problems(snippet, reference)

    failure = _diagnose(IFRS_REFERENCE, references, problems)
    if failure is not None:
        return failure

    labels = [ref.get(XLINK_LABEL) for ref in references if not problems(ref)]
    arcs = snippet.elements(TAG_REFERENCE_ARC, ignore_case=True)

    for label in labels:
        expected = {**REVENUE_REFERENCE_ARC.attributes, XLINK_TO: label}
        if any(arc.has(expected) for arc in arcs):
            return ValidationResult.passed(MSG_OK_REFERENCE_PART_1)

    logger.debug(f"No referenceArc reaches reference labels {labels}")
    return ValidationResult.failed(
        MSG_REFERENCE_ARC_WRONG.format(
            source=REVENUE_REFERENCE_ARC.attributes[XLINK_FROM],
            label=labels[0],
        )
    )


# ==============================================================================
# HELPERS
# ==============================================================================

def _problems(candidate: Element, spec: LinkbaseElementSpec) -> list[str]:
    """Every way candidate misses spec, in attribute order then text."""
    problems = []

    for name, expected in spec.attributes.items():
        actual = candidate.get(name)
        if actual != expected:
            problems.append(MSG_LINKBASE_ATTRIBUTE_WRONG.format(
                tag=spec.tag,
                description=spec.description,
                attribute=name,
                expected=expected,
                actual=f'"{actual}"' if actual is not None else 'nothing',
            ))

    for name in spec.required:
        if candidate.get(name) is None:
            problems.append(MSG_LINKBASE_ATTRIBUTE_MISSING.format(
                tag=spec.tag, description=spec.description, attribute=name
            ))

    if spec.text is not None and candidate.text != spec.text:
        problems.append(MSG_LINKBASE_TEXT_WRONG.format(
            tag=spec.tag, description=spec.description, expected=spec.text, actual=candidate.text
        ))

    return problems


def _part_problems(snippet: StructuralMatcher, reference: Element) -> list[str]:
    """Reference parts (ref:Standard, ref:Paragraph) that are missing or wrong."""
    problems = []
    for part, expected in IFRS_REFERENCE_PARTS.items():
        found = snippet.elements(part, ignore_case=True, within=reference.content or '')
        actual = found[0].text if found else None
        if actual != expected:
            problems.append(MSG_REFERENCE_PART_WRONG.format(
                part=part,
                expected=expected,
                actual=f'"{actual}"' if actual is not None else 'nothing',
            ))
    return problems


def _diagnose(
    spec: LinkbaseElementSpec,
    candidates: list[Element],
    problems: Callable[[Element], list[str]]
) -> Optional[ValidationResult]:
    """
    Pick the verdict for a set of candidates.

    Returns:
        None if some candidate has no problems, otherwise a failing result
        naming the first problem of the candidate with the fewest problems
    """
    if not candidates:
        return ValidationResult.failed(
            MSG_LINKBASE_ELEMENT_ABSENT.format(tag=spec.tag, description=spec.description)
        )

    closest: Optional[list[str]] = None
    for candidate in candidates:
        found = problems(candidate)
        if not found:
            return None
        if closest is None or len(found) < len(closest):
            closest = found

    return ValidationResult.failed(closest[0])


def _parse_order(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value.strip())
    except ValueError:
        return None


__all__ = [
    'linkbase_element_rule',
    'arc_order_rule',
    'arc_count_rule',
    'validate_reference_link',
]
