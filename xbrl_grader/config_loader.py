# Path: xbrl_grader/config_loader.py
"""
Configuration Loader for xbrl_grader

Loads configuration from .env file for the exercise grading engine.
Singleton pattern ensures consistent configuration across all components.

NO hardcoded limits in module code.
All tunables come from environment variables, with the defaults below.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'

# Input bounds
DEFAULT_MAX_INPUT_CHARS: int = 50000

# Regex budget per matching operation (seconds)
DEFAULT_MATCH_TIMEOUT: float = 0.5

# Calculation Defaults
DEFAULT_CALCULATION_TOLERANCE: float = 1e-4


class ConfigLoader:
    """
    Singleton configuration loader for xbrl_grader.

    Loads configuration from environment variables with type conversion
    and sensible defaults. Nothing is required: an empty environment
    yields a working engine.

    Example:
        config = ConfigLoader()
        limit = config.get('max_input_chars')  # Returns int
        tolerance = config.get('calculation_tolerance')  # Returns float
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env file
        on first instantiation.
        """
        if ConfigLoader._initialized:
            return

        # xbrl_grader/config_loader.py -> .env is in same directory
        current_file = Path(__file__).resolve()
        project_root = current_file.parent
        env_path = project_root / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('XBRL_GRADER_ENVIRONMENT', 'development'),
            'debug': self._get_bool('XBRL_GRADER_DEBUG', False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('XBRL_GRADER_LOG_DIR'),
            'log_level': self._get_env('XBRL_GRADER_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('XBRL_GRADER_LOG_CONSOLE', True),

            # ================================================================
            # EVALUATION BOUNDS
            # ================================================================
            'max_input_chars': self._get_int(
                'XBRL_GRADER_MAX_INPUT_CHARS', DEFAULT_MAX_INPUT_CHARS
            ),
            'match_timeout': self._get_float(
                'XBRL_GRADER_MATCH_TIMEOUT', DEFAULT_MATCH_TIMEOUT
            ),

            # ================================================================
            # RULE CONFIGURATION
            # ================================================================
            'calculation_tolerance': self._get_float(
                'XBRL_GRADER_CALCULATION_TOLERANCE', DEFAULT_CALCULATION_TOLERANCE
            ),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(key)

        if value is None:
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

        # Handle variable interpolation
        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_float(self, key: str, default: float) -> float:
        """Get float environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"environment={self._config.get('environment')}, "
            f"max_input_chars={self._config.get('max_input_chars')})"
        )


__all__ = ['ConfigLoader']
