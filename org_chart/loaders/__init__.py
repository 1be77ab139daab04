# Path: org_chart/loaders/__init__.py
"""
org_chart Loaders Package

Readers that turn table files into the columnar form used by the
hierarchy builder. Loaders do not parse level strings.

Example:
    from org_chart.loaders import TableReader

    table = TableReader().read(Path('org_units.json'))
"""

from .table_reader import (
    TableFormatError,
    TableReader,
    rows_to_columnar,
    validate_columnar,
    row_count,
)

__all__ = [
    'TableFormatError',
    'TableReader',
    'rows_to_columnar',
    'validate_columnar',
    'row_count',
]
