# Path: xbrl_grader/validation/dimension_rules.py
"""
Dimension Rules

Atomic rules over dimensional contexts.

This module validates:
- Explicit members (axis and member inside a named or any context)
- Typed members (axis with a non-empty value element)
- Segment/scenario placement of axes
- Closed member vocabularies and axis reuse within a context

Exercise vocabulary comes from the DimensionExercise, TypedDimensionExercise
and DimensionPlacement tables in validation.constants.
"""

from typing import Iterable, Optional

from ..foundation.matcher import Element, StructuralMatcher
from ..models.result import ValidationResult
from .base import Rule, xbrl_rule
from .constants import (
    ATTR_ID,
    ATTR_DIMENSION,
    TAG_CONTEXT,
    TAG_SEGMENT,
    TAG_SCENARIO,
    TAG_EXPLICIT_MEMBER,
    TAG_TYPED_MEMBER,
    DIMENSION_USAGE,
    ADVANCED_1,
    DimensionExercise,
    TypedDimensionExercise,
    DimensionPlacement,
    MSG_CONTEXT_NOT_FOUND,
    MSG_CONTEXT_NEEDS_SEGMENT,
    MSG_EXPLICIT_MEMBER_MISSING,
    MSG_WRONG_DIMENSION,
    MSG_WRONG_MEMBER,
    MSG_EXPLICIT_MEMBER_INCORRECT,
    MSG_REQUIREMENT_IN_CONTEXT,
    MSG_REQUIREMENT_ANY_CONTEXT,
    MSG_TYPED_MEMBER_MISSING,
    MSG_TYPED_VALUE_EMPTY,
    MSG_AXIS_MUST_BE_IN,
    MSG_INVALID_DIMENSION,
    MSG_INVALID_MEMBER,
    MSG_DIMENSION_REUSED,
    MSG_OK_ADVANCED_1,
)


# ==============================================================================
# EXPLICIT MEMBERS
# ==============================================================================

@xbrl_rule
def validate_dimension_usage(snippet: StructuralMatcher) -> ValidationResult:
    """
    Context C1 must hold a segment with the expected explicit member.

    Failures echo the dimension or member actually found.
    """
    exercise = DIMENSION_USAGE

    context = _context_by_id(snippet, exercise.context_id)
    if context is None:
        return ValidationResult.failed(
            MSG_CONTEXT_NOT_FOUND.format(context_id=exercise.context_id)
        )

    segment = _descend(snippet, context.content, exercise.path)
    if segment is None:
        return ValidationResult.failed(
            MSG_CONTEXT_NEEDS_SEGMENT.format(context_id=exercise.context_id)
        )

    members = [
        member for member in snippet.elements(TAG_EXPLICIT_MEMBER, ignore_case=True, within=segment)
        if member.get(ATTR_DIMENSION) is not None and member.text
    ]
    if not members:
        return ValidationResult.failed(MSG_EXPLICIT_MEMBER_MISSING)

    dimension = members[0].get(ATTR_DIMENSION)
    member = members[0].text

    if dimension != exercise.axis:
        return ValidationResult.failed(
            MSG_WRONG_DIMENSION.format(expected=exercise.axis, actual=dimension)
        )
    if member not in exercise.members:
        return ValidationResult.failed(
            MSG_WRONG_MEMBER.format(expected=exercise.members[0], actual=member)
        )
    return ValidationResult.passed()


def explicit_member_rule(exercise: DimensionExercise, success_message: Optional[str] = None) -> Rule:
    """
    Build a rule requiring an explicit member of an axis in a context.

    With exercise.context_id set, only that context is searched (and its
    absence is reported). Otherwise any context qualifies. exercise.path
    names the elements the member must be nested in.

    Args:
        exercise: Expected context, axis, members and nesting
        success_message: Confirmation carried by a passing result

    Returns:
        Rule
    """
    requirement = _describe_requirement(exercise)

    @xbrl_rule
    def validate_explicit_member(snippet: StructuralMatcher) -> ValidationResult:
        if exercise.context_id is not None:
            context = _context_by_id(snippet, exercise.context_id)
            if context is None:
                return ValidationResult.failed(
                    MSG_CONTEXT_NOT_FOUND.format(context_id=exercise.context_id)
                )
            contexts = [context]
        else:
            contexts = snippet.elements(TAG_CONTEXT, ignore_case=True)

        for context in contexts:
            scope = _descend(snippet, context.content, exercise.path)
            if scope is None:
                continue
            for member in snippet.elements(TAG_EXPLICIT_MEMBER, ignore_case=True, within=scope):
                if member.get(ATTR_DIMENSION) == exercise.axis and member.text in exercise.members:
                    return ValidationResult.passed(success_message)

        return ValidationResult.failed(
            MSG_EXPLICIT_MEMBER_INCORRECT.format(requirement=requirement)
        )

    return validate_explicit_member


# ==============================================================================
# TYPED MEMBERS
# ==============================================================================

def typed_member_rule(exercise: TypedDimensionExercise, success_message: Optional[str] = None) -> Rule:
    """
    Build a rule requiring a typed member with a non-empty value.

    Args:
        exercise: Expected axis, value element and nesting
        success_message: Confirmation carried by a passing result

    Returns:
        Rule
    """
    @xbrl_rule
    def validate_typed_member(snippet: StructuralMatcher) -> ValidationResult:
        found_empty = False

        for context in snippet.elements(TAG_CONTEXT, ignore_case=True):
            scope = _descend(snippet, context.content, exercise.path)
            if scope is None:
                continue

            for typed in snippet.elements(TAG_TYPED_MEMBER, ignore_case=True, within=scope):
                if typed.get(ATTR_DIMENSION) != exercise.axis or typed.content is None:
                    continue
                values = snippet.elements(
                    exercise.value_element, ignore_case=True, within=typed.content
                )
                if any(value.text for value in values):
                    return ValidationResult.passed(success_message)
                if values:
                    found_empty = True

        if found_empty:
            return ValidationResult.failed(
                MSG_TYPED_VALUE_EMPTY.format(element=exercise.value_element)
            )
        return ValidationResult.failed(MSG_TYPED_MEMBER_MISSING.format(axis=exercise.axis))

    return validate_typed_member


# ==============================================================================
# PLACEMENT
# ==============================================================================

def dimension_placement_rule(
    placement: DimensionPlacement,
    success_message: Optional[str] = None
) -> Rule:
    """
    Build a rule checking where axes are placed and which members they use.

    Checks, in order:
    1. segment_axis appears in a segment and in no scenario
    2. scenario_axis appears in a scenario and in no segment
    3. every explicit member uses a known axis and an allowed member
    4. no axis appears twice within one context

    Args:
        placement: Expected placement and member vocabulary
        success_message: Confirmation carried by a passing result

    Returns:
        Rule
    """
    @xbrl_rule
    def validate_placement(snippet: StructuralMatcher) -> ValidationResult:
        segment_axes = _axes_in(snippet, snippet.elements(TAG_SEGMENT, ignore_case=True))
        scenario_axes = _axes_in(snippet, snippet.elements(TAG_SCENARIO, ignore_case=True))

        if placement.segment_axis not in segment_axes or placement.segment_axis in scenario_axes:
            return ValidationResult.failed(MSG_AXIS_MUST_BE_IN.format(
                axis=placement.segment_axis, required=TAG_SEGMENT, forbidden=TAG_SCENARIO
            ))
        if placement.scenario_axis not in scenario_axes or placement.scenario_axis in segment_axes:
            return ValidationResult.failed(MSG_AXIS_MUST_BE_IN.format(
                axis=placement.scenario_axis, required=TAG_SCENARIO, forbidden=TAG_SEGMENT
            ))

        contexts = snippet.elements(TAG_CONTEXT, ignore_case=True)
        scopes = [context.content or '' for context in contexts] if contexts else [snippet.text]

        for scope in scopes:
            seen: set[str] = set()
            for member in snippet.elements(TAG_EXPLICIT_MEMBER, ignore_case=True, within=scope):
                dimension = member.get(ATTR_DIMENSION, '')
                allowed = placement.allowed_members.get(dimension)
                if allowed is None:
                    return ValidationResult.failed(MSG_INVALID_DIMENSION.format(dimension=dimension))
                if member.text not in allowed:
                    return ValidationResult.failed(
                        MSG_INVALID_MEMBER.format(member=member.text, dimension=dimension)
                    )
                if dimension in seen:
                    return ValidationResult.failed(MSG_DIMENSION_REUSED.format(dimension=dimension))
                seen.add(dimension)

        return ValidationResult.passed(success_message)

    return validate_placement


validate_dimension_placement = dimension_placement_rule(ADVANCED_1, MSG_OK_ADVANCED_1)


# ==============================================================================
# HELPERS
# ==============================================================================

def _context_by_id(snippet: StructuralMatcher, context_id: str) -> Optional[Element]:
    """First context element with the given id that has content."""
    for context in snippet.elements(TAG_CONTEXT, ignore_case=True):
        if context.get(ATTR_ID) == context_id and context.content is not None:
            return context
    return None


def _descend(
    snippet: StructuralMatcher,
    scope: Optional[str],
    path: Iterable[str]
) -> Optional[str]:
    """Content of the first element at path inside scope (scope itself for an empty path)."""
    for tag in path:
        if scope is None:
            return None
        found = snippet.elements(tag, ignore_case=True, within=scope)
        scope = found[0].content if found else None
    return scope


def _axes_in(snippet: StructuralMatcher, containers: list[Element]) -> set[str]:
    """Dimensions of every explicit member inside the containers."""
    axes: set[str] = set()
    for container in containers:
        if container.content is None:
            continue
        for member in snippet.elements(TAG_EXPLICIT_MEMBER, ignore_case=True, within=container.content):
            dimension = member.get(ATTR_DIMENSION)
            if dimension is not None:
                axes.add(dimension)
    return axes


def _describe_requirement(exercise: DimensionExercise) -> str:
    members = ' or '.join(f"'{member}'" for member in exercise.members)
    if exercise.context_id is not None:
        return MSG_REQUIREMENT_IN_CONTEXT.format(
            context_id=exercise.context_id, axis=exercise.axis, members=members
        )
    return MSG_REQUIREMENT_ANY_CONTEXT.format(axis=exercise.axis, members=members)


__all__ = [
    'validate_dimension_usage',
    'explicit_member_rule',
    'typed_member_rule',
    'dimension_placement_rule',
    'validate_dimension_placement',
]
