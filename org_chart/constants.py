# Path: org_chart/constants.py
"""
System-Wide Constants for org_chart

Constants used by the command line host and the output layer:
- Output formats
- Status indicators
- Exit codes
"""

from enum import IntEnum
from typing import Final


# ==============================================================================
# OUTPUT FORMATS
# ==============================================================================

FORMAT_JSON: Final[str] = 'json'
FORMAT_TEXT: Final[str] = 'text'

OUTPUT_FORMATS: Final[tuple] = (FORMAT_JSON, FORMAT_TEXT)


# ==============================================================================
# STATUS INDICATORS (ASCII only)
# ==============================================================================

STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_WARN: Final[str] = '[WARN]'
STATUS_INFO: Final[str] = '[INFO]'


# ==============================================================================
# EXIT CODES
# ==============================================================================

class ExitCode(IntEnum):
    """Process exit codes for the command line host."""
    SUCCESS = 0
    ERROR = 1
    INTERRUPTED = 130


__all__ = [
    'FORMAT_JSON',
    'FORMAT_TEXT',
    'OUTPUT_FORMATS',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_WARN',
    'STATUS_INFO',
    'ExitCode',
]
