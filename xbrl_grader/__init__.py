"""
xbrl_grader - XBRL Snippet Grading Engine

Grades learner-submitted XBRL/XML snippets for course exercises.

Modules:
- foundation: well-formedness checker and structural matcher
- validation: grading rules, composites and the validator registry
- models: result and error types
- service: request boundary (status code and response body)
- cli: command line entry point
"""

from .config_loader import ConfigLoader
from .models import ErrorCategory, ValidationResult, UnknownValidator, InternalFault
from .service import GradeResponse, grade_request
from .validation import ValidatorRegistry, build_default_registry, default_registry

__version__ = '0.1.0'

__all__ = [
    'ConfigLoader',
    'ErrorCategory',
    'ValidationResult',
    'UnknownValidator',
    'InternalFault',
    'GradeResponse',
    'grade_request',
    'ValidatorRegistry',
    'build_default_registry',
    'default_registry',
]
