# Path: xbrl_grader/constants.py
"""
System-Wide Constants for xbrl_grader

Central repository for values shared by the request boundary, the CLI
and the registry. Rule vocabulary lives in validation/constants.py.

Constants are organized by category:
- Request/Response Keys
- Status Codes
- Boundary Messages
- CLI Markers and Exit Codes
"""

from typing import Final


# ==============================================================================
# REQUEST / RESPONSE KEYS
# ==============================================================================

REQUEST_VALIDATOR_NAME: Final[str] = 'validatorName'
REQUEST_USER_CODE: Final[str] = 'userCode'

RESPONSE_IS_CORRECT: Final[str] = 'isCorrect'
RESPONSE_ERROR: Final[str] = 'error'


# ==============================================================================
# STATUS CODES
# ==============================================================================

# Outcome classes at the boundary, expressed as HTTP-class codes
STATUS_VERDICT: Final[int] = 200
STATUS_UNKNOWN_VALIDATOR: Final[int] = 400
STATUS_INTERNAL_FAULT: Final[int] = 500


# ==============================================================================
# BOUNDARY MESSAGES
# ==============================================================================

MSG_INVALID_VALIDATOR: Final[str] = "Invalid validator specified."
MSG_INTERNAL_FAULT: Final[str] = (
    "An unexpected server error occurred during validation."
)


# ==============================================================================
# CLI MARKERS AND EXIT CODES
# ==============================================================================

STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_ERROR: Final[str] = '[ERROR]'

EXIT_PASSED: Final[int] = 0
EXIT_FAILED: Final[int] = 1
EXIT_UNKNOWN_VALIDATOR: Final[int] = 2
EXIT_INTERNAL_FAULT: Final[int] = 3


__all__ = [
    'REQUEST_VALIDATOR_NAME',
    'REQUEST_USER_CODE',
    'RESPONSE_IS_CORRECT',
    'RESPONSE_ERROR',
    'STATUS_VERDICT',
    'STATUS_UNKNOWN_VALIDATOR',
    'STATUS_INTERNAL_FAULT',
    'MSG_INVALID_VALIDATOR',
    'MSG_INTERNAL_FAULT',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_ERROR',
    'EXIT_PASSED',
    'EXIT_FAILED',
    'EXIT_UNKNOWN_VALIDATOR',
    'EXIT_INTERNAL_FAULT',
]
