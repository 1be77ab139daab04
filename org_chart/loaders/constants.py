# Path: org_chart/loaders/constants.py
"""
Constants for org_chart loaders.

File types and cell normalisation rules shared by the table readers.
"""

from typing import Final


JSON_EXTENSION: Final[str] = '.json'
CSV_EXTENSION: Final[str] = '.csv'

SUPPORTED_EXTENSIONS: Final[tuple] = (JSON_EXTENSION, CSV_EXTENSION)

CSV_ENCODING: Final[str] = 'utf-8-sig'
"""Tolerates the byte-order mark spreadsheet exports often add."""

EMPTY_CELL_VALUES: Final[frozenset] = frozenset({''})
"""CSV cell values read back as None."""


__all__ = [
    'JSON_EXTENSION',
    'CSV_EXTENSION',
    'SUPPORTED_EXTENSIONS',
    'CSV_ENCODING',
    'EMPTY_CELL_VALUES',
]
