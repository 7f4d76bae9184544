"""
xbrl_grader Core Package

Core utilities for the grading engine.

Submodules:
    - logger: IPO-aware logging system
"""

from .logger import setup_ipo_logging

__all__ = [
    'setup_ipo_logging',
]
