"""
Validation

Grading rules, composites and the validator registry.

Example:
    from xbrl_grader.validation import default_registry

    outcome = default_registry().dispatch('validateContextRefAnswer', snippet)
"""

from .base import Rule, xbrl_rule
from .composites import run_in_sequence
from .catalog import build_catalog
from .registry import (
    Outcome,
    ValidatorRegistry,
    build_default_registry,
    default_registry,
)

__all__ = [
    'Rule',
    'xbrl_rule',
    'run_in_sequence',
    'build_catalog',
    'Outcome',
    'ValidatorRegistry',
    'build_default_registry',
    'default_registry',
]
