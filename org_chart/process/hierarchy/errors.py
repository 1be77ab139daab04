# Path: org_chart/process/hierarchy/errors.py
"""
Exception types for the org chart hierarchy builder.

Only boundary operations raise these. The tree builder itself catches
LevelParseError and records it as a diagnostic instead of propagating.
"""

from typing import Any


class OrgChartError(Exception):
    """Base class for all org_chart errors."""


class LevelParseError(OrgChartError, ValueError):
    """
    An encoded level string does not match 'Name (UnitCode)-LeafCode'.

    Attributes:
        raw: The offending cell value, unchanged
        reason: Short description of why it was rejected
    """

    def __init__(self, raw: Any, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid level string {raw!r}: {reason}")


class ColumnMappingError(OrgChartError, ValueError):
    """A column mapping has unknown keys or non-string column names."""


__all__ = ['OrgChartError', 'LevelParseError', 'ColumnMappingError']
