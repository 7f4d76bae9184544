# Path: xbrl_grader/validation/base.py
"""
Rule Plumbing

Shared wrapper and value helpers for grading rules.

Every rule is a callable taking the snippet text (and an optional
ConfigLoader) and returning a ValidationResult. The xbrl_rule decorator
gives rule bodies a uniform prologue: the snippet is checked for
well-formedness first, and only well-formed snippets reach the body,
which receives a StructuralMatcher instead of the raw text.

Example:
    @xbrl_rule
    def validate_unit_ref(snippet: StructuralMatcher) -> ValidationResult:
        value = snippet.attribute('unitRef')
        ...

    result = validate_unit_ref('<ex:Revenue unitRef="u1">100</ex:Revenue>')
"""

import functools
from datetime import datetime, timezone
from typing import Callable, Optional

from ..config_loader import ConfigLoader
from ..foundation.matcher import StructuralMatcher
from ..foundation.xml_parser import check_well_formed
from ..models.result import ValidationResult
from .constants import THOUSANDS_SEPARATOR


# Callable stored in the registry: rule(text, config=None) -> ValidationResult
Rule = Callable[..., ValidationResult]

RuleBody = Callable[[StructuralMatcher], ValidationResult]


def xbrl_rule(body: RuleBody) -> Rule:
    """
    Wrap a rule body with the well-formedness prologue.

    Args:
        body: Function receiving a StructuralMatcher

    Returns:
        Rule taking (text, config=None)
    """
    @functools.wraps(body)
    def rule(text: object, config: Optional[ConfigLoader] = None) -> ValidationResult:
        parsed = check_well_formed(text, config)
        if not parsed.well_formed:
            return parsed.to_result()
        return body(StructuralMatcher(text, config))

    return rule


def parse_xbrl_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an xs:date or xs:dateTime period value.

    Offsets are normalized to naive UTC so that dated and timestamped
    values compare with each other.

    Args:
        value: Raw element text

    Returns:
        datetime, or None if the value is not a valid date
    """
    if value is None:
        return None

    text = value.strip()
    if not text:
        return None
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_amount(value: Optional[str]) -> Optional[float]:
    """
    Parse a numeric fact value, ignoring thousands separators.

    Returns:
        float, or None if the value is not a number
    """
    if value is None:
        return None
    try:
        return float(value.strip().replace(THOUSANDS_SEPARATOR, ''))
    except ValueError:
        return None


def format_amount(value: float) -> str:
    """Render an amount for messages (integral values without a trailing .0)."""
    if value.is_integer():
        return str(int(value))
    return str(value)


def local_name(qname: str) -> str:
    """'ex:Revenue' -> 'Revenue'"""
    return qname.rsplit(':', 1)[-1]


__all__ = [
    'Rule',
    'xbrl_rule',
    'parse_xbrl_date',
    'parse_amount',
    'format_amount',
    'local_name',
]
