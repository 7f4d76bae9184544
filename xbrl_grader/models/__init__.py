"""
Data Models

Result and error types shared by every layer of the grading engine.
"""

from .error import ErrorCategory, MatchTimeoutError
from .result import ValidationResult, UnknownValidator, InternalFault

__all__ = [
    'ErrorCategory',
    'MatchTimeoutError',
    'ValidationResult',
    'UnknownValidator',
    'InternalFault',
]
