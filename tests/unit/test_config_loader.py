# Path: tests/unit/test_config_loader.py
"""
Unit Tests for ConfigLoader

Tests the configuration loading functionality including:
- Environment variable parsing
- Type conversion methods
- Singleton pattern
- Default value handling
"""

import os
from pathlib import Path
from unittest.mock import patch

from org_chart.process.hierarchy.constants import NamePolicy


class TestConfigLoaderBasics:
    """Test basic ConfigLoader functionality."""

    def test_singleton_pattern(self, mock_env_vars, reset_singletons):
        """ConfigLoader should return same instance."""
        from org_chart.config_loader import ConfigLoader

        assert ConfigLoader() is ConfigLoader()

    def test_get_returns_value(self, mock_env_vars, reset_singletons):
        from org_chart.config_loader import ConfigLoader

        assert ConfigLoader().get('environment') == 'test'

    def test_get_returns_default_for_missing(self, mock_env_vars, reset_singletons):
        from org_chart.config_loader import ConfigLoader

        assert ConfigLoader().get('nonexistent_key', 'fallback') == 'fallback'


class TestConfigLoaderTypeConversion:
    """Test type conversion methods."""

    def test_bool_conversion(self, mock_env_vars, reset_singletons):
        from org_chart.config_loader import ConfigLoader

        config = ConfigLoader()
        assert config.get('debug') is True
        assert config.get('log_console') is False

    def test_int_conversion(self, mock_env_vars, reset_singletons):
        from org_chart.config_loader import ConfigLoader

        assert ConfigLoader().get('json_indent') == 4

    def test_invalid_int_uses_default(self, mock_env_vars, reset_singletons):
        from org_chart.config_loader import ConfigLoader, DEFAULT_MAX_LOGGED_REJECTIONS

        assert ConfigLoader().get('max_logged_rejections') == DEFAULT_MAX_LOGGED_REJECTIONS

    def test_name_policy_conversion(self, mock_env_vars, reset_singletons):
        from org_chart.config_loader import ConfigLoader

        assert ConfigLoader().get('name_policy') is NamePolicy.PROMOTE_ON_EXTEND

    def test_unknown_name_policy_uses_default(self, reset_singletons):
        from org_chart.config_loader import ConfigLoader

        with patch.dict(os.environ, {'ORG_CHART_NAME_POLICY': 'whatever'}):
            assert ConfigLoader().get('name_policy') is NamePolicy.FIRST_WRITE_WINS

    def test_path_conversion(self, reset_singletons):
        from org_chart.config_loader import ConfigLoader

        with patch.dict(os.environ, {'ORG_CHART_LOG_DIR': '/tmp/org_chart_logs'}):
            assert ConfigLoader().get('log_dir') == Path('/tmp/org_chart_logs')


class TestConfigLoaderDefaults:
    """Test defaults when nothing is configured."""

    def test_optional_paths_default_to_none(self, reset_singletons):
        from org_chart.config_loader import ConfigLoader

        cleared = {
            key: value for key, value in os.environ.items()
            if not key.startswith('ORG_CHART_')
        }
        with patch.dict(os.environ, cleared, clear=True):
            config = ConfigLoader()
            assert config.get('log_dir') is None
            assert config.get('output_dir') is None
            assert config.get('log_level') == 'INFO'
            assert config.get('memoize_builds') is False

    def test_repr(self, mock_env_vars, reset_singletons):
        from org_chart.config_loader import ConfigLoader

        assert 'promote_on_extend' in repr(ConfigLoader())
