# Path: tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for org_chart

Provides common test fixtures used across all test modules.
"""

import json
import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from org_chart.process.hierarchy import LevelColumnMapping, NamePolicy  # noqa: E402


ROOT = "Cambridge Investment Research, Inc. (00001)-QV6"
ADVISORY = "Advisory Services (00010)-AS1"
OPERATIONS = "Operations (00020)-OP1"
JANE = "Jane Doe (00011)-J01"
JOHN = "John Roe (00021)-J02"


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'ORG_CHART_ENVIRONMENT': 'test',
        'ORG_CHART_DEBUG': 'true',
        'ORG_CHART_LOG_LEVEL': 'DEBUG',
        'ORG_CHART_LOG_CONSOLE': 'false',
        'ORG_CHART_NAME_POLICY': 'promote_on_extend',
        'ORG_CHART_JSON_INDENT': '4',
        'ORG_CHART_MAX_LOGGED_REJECTIONS': 'not-a-number',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reset_singletons():
    """Reset the ConfigLoader singleton before and after a test."""
    from org_chart.config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


# ==============================================================================
# SAMPLE DATA FIXTURES
# ==============================================================================

@pytest.fixture
def identity_mapping():
    """Mapping whose column names equal the configuration keys."""
    return LevelColumnMapping.identity()


@pytest.fixture
def sample_table():
    """
    Columnar table with a shared root and two branches.

        ROOT
        +-- ADVISORY
        |   `-- JANE      (row 0, leaf)
        `-- OPERATIONS
            `-- JOHN      (row 1, leaf)
    """
    return {
        'level0': [ROOT, ROOT],
        'level1': [ADVISORY, OPERATIONS],
        'level2': [JANE, JOHN],
        'beblFullName': ['Jane Doe', 'John Roe'],
        'businessUnitId': ['00011', '00021'],
    }


@pytest.fixture
def sample_rows():
    """The sample table as row records."""
    return [
        {
            'level0': ROOT, 'level1': ADVISORY, 'level2': JANE,
            'beblFullName': 'Jane Doe', 'businessUnitId': '00011',
        },
        {
            'level0': ROOT, 'level1': OPERATIONS, 'level2': JOHN,
            'beblFullName': 'John Roe', 'businessUnitId': '00021',
        },
    ]


@pytest.fixture
def create_table_json(temp_dir, sample_table):
    """Write the sample table as columnar JSON."""
    path = temp_dir / 'units.json'
    with open(path, 'w') as f:
        json.dump(sample_table, f, indent=2)
    return path


@pytest.fixture
def create_table_csv(temp_dir, sample_rows):
    """Write the sample table as CSV with an empty level3 column."""
    path = temp_dir / 'units.csv'
    header = ['level0', 'level1', 'level2', 'level3', 'beblFullName', 'businessUnitId']
    lines = [','.join(header)]
    for row in sample_rows:
        cells = [row.get(column, '') for column in header]
        lines.append(','.join(f'"{cell}"' if cell else '' for cell in cells))
    path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
    return path


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

@pytest.fixture
def mock_config():
    """Create a mock ConfigLoader for testing."""
    config = MagicMock()
    config.get.side_effect = lambda key, default=None: {
        'environment': 'test',
        'debug': True,
        'log_dir': None,
        'log_level': 'INFO',
        'log_console': False,
        'name_policy': NamePolicy.FIRST_WRITE_WINS,
        'memoize_builds': False,
        'max_logged_rejections': 50,
        'output_dir': None,
        'output_format': 'json',
        'json_indent': 2,
    }.get(key, default)
    return config
