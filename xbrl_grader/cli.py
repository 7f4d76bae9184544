#!/usr/bin/env python3
# Path: xbrl_grader/cli.py
"""
xbrl_grader - Command Line Entry Point

Grades a learner snippet against a named validator.

Usage:
    python -m xbrl_grader --list                          # List validators
    python -m xbrl_grader validateUnitRefAnswer answer.xml
    cat answer.xml | python -m xbrl_grader validateDateRangeAnswer
    python -m xbrl_grader validateCalculation answer.xml --json

Exit codes:
    0  passed
    1  failed (including malformed input)
    2  unknown validator
    3  internal fault
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from .config_loader import ConfigLoader
from .constants import (
    STATUS_OK,
    STATUS_FAIL,
    STATUS_ERROR,
    EXIT_PASSED,
    EXIT_FAILED,
    EXIT_UNKNOWN_VALIDATOR,
    EXIT_INTERNAL_FAULT,
    MSG_INVALID_VALIDATOR,
)
from .core.logger import setup_ipo_logging, get_output_logger
from .models.result import ValidationResult, UnknownValidator
from .validation.registry import Outcome, build_default_registry


def initialize_logging(config: ConfigLoader) -> None:
    """
    Set up IPO logging from configuration.

    Debug mode forces DEBUG level regardless of log_level.

    Args:
        config: ConfigLoader instance
    """
    log_level = 'DEBUG' if config.get('debug', False) else config.get('log_level', 'INFO')

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=log_level,
        console_output=config.get('log_console', True),
    )


def read_snippet(path: Optional[str]) -> str:
    """
    Read snippet text from a file, or from stdin when path is None or '-'.

    Args:
        path: File path

    Returns:
        Snippet text
    """
    if path is None or path == '-':
        return sys.stdin.read()
    return Path(path).read_text(encoding='utf-8')


def exit_code_for(outcome: Outcome) -> int:
    """Map a dispatch outcome to the process exit code."""
    if isinstance(outcome, ValidationResult):
        return EXIT_PASSED if outcome.is_correct else EXIT_FAILED
    if isinstance(outcome, UnknownValidator):
        return EXIT_UNKNOWN_VALIDATOR
    return EXIT_INTERNAL_FAULT


def print_outcome(outcome: Outcome) -> None:
    """
    Print a human-readable verdict.

    Args:
        outcome: Dispatch outcome
    """
    body = outcome.to_dict()
    if isinstance(outcome, ValidationResult):
        marker = STATUS_OK if outcome.is_correct else STATUS_FAIL
        message = body['error'] or ('Correct.' if outcome.is_correct else '')
        print(f"{marker} {message}".rstrip())
    else:
        print(f"{STATUS_ERROR} {body['error']}")


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Argument list (sys.argv[1:] if not provided)

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog='xbrl_grader',
        description='Grade an XBRL/XML snippet with a named validator',
    )
    parser.add_argument('validator', nargs='?', help='Validator name (see --list)')
    parser.add_argument('file', nargs='?', help="Snippet file (stdin if omitted or '-')")
    parser.add_argument('--list', action='store_true', help='List available validators')
    parser.add_argument('--json', action='store_true', help='Print the response body as JSON')

    args = parser.parse_args(argv)

    config = ConfigLoader()
    initialize_logging(config)
    logger = get_output_logger('cli')

    registry = build_default_registry(config)

    if args.list:
        for name in registry.names():
            print(name)
        return EXIT_PASSED

    if not args.validator:
        parser.print_usage(sys.stderr)
        print(f"{STATUS_ERROR} {MSG_INVALID_VALIDATOR}", file=sys.stderr)
        return EXIT_UNKNOWN_VALIDATOR

    try:
        snippet = read_snippet(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"{STATUS_ERROR} Cannot read snippet: {e}", file=sys.stderr)
        logger.error(f"Cannot read snippet from {args.file}: {e}")
        return EXIT_INTERNAL_FAULT

    outcome = registry.dispatch(args.validator, snippet)
    logger.info(f"{args.validator}: {type(outcome).__name__} (status {outcome.status_code})")

    if args.json:
        print(json.dumps(outcome.to_dict(), ensure_ascii=False))
    else:
        print_outcome(outcome)

    return exit_code_for(outcome)


if __name__ == '__main__':
    sys.exit(main())
