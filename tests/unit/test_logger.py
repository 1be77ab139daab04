# Path: tests/unit/test_logger.py
"""
Unit Tests for IPO logging setup.
"""

import logging

import pytest

from org_chart.core.logger import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)
from org_chart.core.logger.ipo_logging import IPOFilter


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield

    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLayerLoggers:
    """Test layer-prefixed logger names."""

    def test_names(self):
        assert get_input_logger('table_reader').name == 'input.table_reader'
        assert get_process_logger('hierarchy').name == 'process.hierarchy'
        assert get_output_logger('json').name == 'output.json'


class TestIPOFilter:
    """Test the layer filter."""

    def test_filters_by_prefix(self):
        record = logging.LogRecord('process.x', logging.INFO, __file__, 1, 'm', None, None)

        assert IPOFilter('process').filter(record)
        assert not IPOFilter('input').filter(record)


class TestSetup:
    """Test handler installation."""

    def test_console_only(self, restore_root_logger):
        setup_ipo_logging(log_dir=None, log_level='WARNING', console_output=False)

        root = logging.getLogger()
        assert root.handlers == []
        assert root.level == logging.WARNING

    def test_layer_files_created(self, temp_dir, restore_root_logger):
        log_dir = temp_dir / 'logs'
        setup_ipo_logging(log_dir=log_dir, log_level='DEBUG', console_output=False)

        get_process_logger('test').info('process message')
        get_input_logger('test').info('input message')
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert 'process message' in (log_dir / 'process_activity.log').read_text()
        assert 'process message' not in (log_dir / 'input_activity.log').read_text()
        full = (log_dir / 'full_activity.log').read_text()
        assert 'process message' in full
        assert 'input message' in full
