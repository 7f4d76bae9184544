# Path: xbrl_grader/service.py
"""
Grading Service

Request boundary for course clients. Maps a request payload of
{'validatorName': ..., 'userCode': ...} to a status code and a response
body of {'isCorrect': ..., 'error': ...}.

    200  rule ran (passed or failed)
    400  validator name unknown
    500  rule raised unexpectedly

The transport (HTTP framework, queue) is left to the embedding
application.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from .constants import REQUEST_VALIDATOR_NAME, REQUEST_USER_CODE
from .core.logger import get_input_logger, get_output_logger
from .validation.registry import ValidatorRegistry, default_registry


input_logger = get_input_logger('grade_service')
output_logger = get_output_logger('grade_service')


@dataclass(frozen=True)
class GradeResponse:
    """
    Response to a grading request.

    Attributes:
        status_code: 200, 400 or 500
        body: {'isCorrect': bool, 'error': str | None}
    """
    status_code: int
    body: dict[str, object]


def grade_request(payload: object, registry: Optional[ValidatorRegistry] = None) -> GradeResponse:
    """
    Grade one request payload.

    A payload that is not a mapping, or has no validatorName, yields the
    unknown-validator response. A missing userCode is graded as
    malformed input.

    Args:
        payload: Decoded request body
        registry: Registry to dispatch to (default registry if not provided)

    Returns:
        GradeResponse
    """
    registry = registry if registry is not None else default_registry()

    if isinstance(payload, Mapping):
        name = payload.get(REQUEST_VALIDATOR_NAME)
        code = payload.get(REQUEST_USER_CODE)
    else:
        name = code = None

    input_logger.debug(
        f"Grade request: validator={name!r}, "
        f"code_length={len(code) if isinstance(code, str) else None}"
    )

    outcome = registry.dispatch(name, code)
    response = GradeResponse(status_code=outcome.status_code, body=outcome.to_dict())

    output_logger.info(
        f"Graded {name!r}: status={response.status_code}, "
        f"category={outcome.category}"
    )
    return response


__all__ = [
    'GradeResponse',
    'grade_request',
]
