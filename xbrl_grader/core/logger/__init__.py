"""
xbrl_grader Logger Package

IPO-aware logging for the grading engine.

Provides separate log streams for:
- INPUT layer (dispatch, request intake)
- PROCESS layer (parsing, matching, rules)
- OUTPUT layer (responses, CLI)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
