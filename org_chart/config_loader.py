# Path: org_chart/config_loader.py
"""
Configuration Loader for org_chart

Loads configuration from an optional .env file and the environment.
Singleton pattern ensures consistent configuration across all components.

Nothing is required: every key has a default, so the builder can run
with no configuration at all.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from org_chart.process.hierarchy.constants import NamePolicy, DEFAULT_NAME_POLICY


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_MAX_LOGGED_REJECTIONS: int = 50

# Output Defaults
DEFAULT_JSON_INDENT: int = 2
DEFAULT_OUTPUT_FORMAT: str = 'json'

ENV_PREFIX: str = 'ORG_CHART_'


class ConfigLoader:
    """
    Singleton configuration loader for org_chart.

    Loads configuration from environment variables with type conversion
    and defaults.

    Example:
        config = ConfigLoader()
        log_dir = config.get('log_dir')       # Path or None
        policy = config.get('name_policy')    # NamePolicy
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

        Only runs once due to singleton pattern. Loads .env from the
        current working directory if present.
        """
        if ConfigLoader._initialized:
            return

        env_path = Path.cwd() / '.env'
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
            'environment': self._get_env('ORG_CHART_ENVIRONMENT', 'development'),
            'debug': self._get_bool('ORG_CHART_DEBUG', False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('ORG_CHART_LOG_DIR'),
            'log_level': self._get_env('ORG_CHART_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('ORG_CHART_LOG_CONSOLE', True),
            'max_logged_rejections': self._get_int(
                'ORG_CHART_MAX_LOGGED_REJECTIONS', DEFAULT_MAX_LOGGED_REJECTIONS
            ),

            # ================================================================
            # BUILD CONFIGURATION
            # ================================================================
            'name_policy': self._get_name_policy(
                'ORG_CHART_NAME_POLICY', DEFAULT_NAME_POLICY
            ),
            'memoize_builds': self._get_bool('ORG_CHART_MEMOIZE_BUILDS', False),

            # ================================================================
            # OUTPUT CONFIGURATION
            # ================================================================
            'output_dir': self._get_path('ORG_CHART_OUTPUT_DIR'),
            'output_format': self._get_env(
                'ORG_CHART_OUTPUT_FORMAT', DEFAULT_OUTPUT_FORMAT
            ),
            'json_indent': self._get_int('ORG_CHART_JSON_INDENT', DEFAULT_JSON_INDENT),
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

        if value is None or value == '':
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

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

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def _get_name_policy(self, key: str, default: NamePolicy) -> NamePolicy:
        """Get NamePolicy environment variable; unknown values use default."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return NamePolicy(value.strip().lower())
        except ValueError:
            return default

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"environment={self._config.get('environment')}, "
            f"name_policy={self._config.get('name_policy').value})"
        )


__all__ = ['ConfigLoader']
