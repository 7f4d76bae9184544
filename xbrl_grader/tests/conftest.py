# Path: xbrl_grader/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for xbrl_grader

Provides common test fixtures used across all test modules.
"""

import logging
import os
import sys
from io import StringIO
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Repository root (for the xbrl_grader package) and tests root (for fixtures)
TESTS_ROOT = Path(__file__).parent
REPO_ROOT = TESTS_ROOT.parent.parent
sys.path.insert(0, str(REPO_ROOT))
sys.path.insert(0, str(TESTS_ROOT))


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'XBRL_GRADER_ENVIRONMENT': 'test',
        'XBRL_GRADER_DEBUG': 'true',
        'XBRL_GRADER_LOG_LEVEL': 'DEBUG',
        'XBRL_GRADER_LOG_CONSOLE': 'false',

        # Bounds
        'XBRL_GRADER_MAX_INPUT_CHARS': '20000',
        'XBRL_GRADER_MATCH_TIMEOUT': '2.0',
        'XBRL_GRADER_CALCULATION_TOLERANCE': '0.001',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def reset_singletons():
    """Reset the ConfigLoader singleton before and after a test."""
    from xbrl_grader.config_loader import ConfigLoader

    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

def make_mock_config(**overrides):
    """Create a mock ConfigLoader returning defaults plus overrides."""
    values = {
        'environment': 'test',
        'debug': True,
        'log_dir': None,
        'log_level': 'DEBUG',
        'log_console': False,
        'max_input_chars': 50000,
        'match_timeout': 0.5,
        'calculation_tolerance': 1e-4,
    }
    values.update(overrides)

    config = MagicMock()
    config.get.side_effect = lambda key, default=None: values.get(key, default)
    return config


@pytest.fixture
def mock_config():
    """Create a mock ConfigLoader with default grading bounds."""
    return make_mock_config()


@pytest.fixture
def small_input_config():
    """Mock ConfigLoader with a tiny input size limit."""
    return make_mock_config(max_input_chars=64)


# ==============================================================================
# REGISTRY FIXTURES
# ==============================================================================

@pytest.fixture
def registry(mock_config):
    """Frozen registry holding the full catalog."""
    from xbrl_grader.validation.registry import build_default_registry

    return build_default_registry(mock_config)


@pytest.fixture
def empty_registry(mock_config):
    """Unfrozen registry with no rules."""
    from xbrl_grader.validation.registry import ValidatorRegistry

    return ValidatorRegistry(mock_config)


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def capture_logs():
    """Capture log output for testing."""
    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter('%(levelname)s %(name)s %(message)s'))

    root_logger = logging.getLogger()
    previous_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(handler)

    yield log_capture

    root_logger.removeHandler(handler)
    root_logger.setLevel(previous_level)


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for log and snippet files."""
    return tmp_path
