# Path: org_chart/process/hierarchy/diagnostics.py
"""
Build Diagnostics - what a tree build skipped and why.

Collected for operator visibility. Nothing in here ever aborts a build.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class LevelRejection:
    """
    A level cell that failed the level string grammar.

    Attributes:
        row_index: Zero-based row in the input table
        level_index: Level number (0 = root column)
        raw: The offending cell value
        reason: Why the parser rejected it
    """
    row_index: int
    level_index: int
    raw: Any
    reason: str

    def to_dict(self) -> dict[str, Any]:
        return {
            'row': self.row_index,
            'level': self.level_index,
            'raw': self.raw,
            'reason': self.reason,
        }


@dataclass
class BuildDiagnostics:
    """
    Aggregate counters for one build.

    Attributes:
        rows_total: Rows in the input table
        rows_skipped: Rows whose level chain was empty
        nodes_created: Nodes created during the build
        nodes_reused: Chain positions that resolved to an existing node
        missing_full_names: Leaf nodes whose full name cell was empty
        rejected_levels: Every level cell that failed to parse
        configuration_error: Why the build returned nothing, if it did
    """
    rows_total: int = 0
    rows_skipped: int = 0
    nodes_created: int = 0
    nodes_reused: int = 0
    missing_full_names: int = 0
    rejected_levels: list[LevelRejection] = field(default_factory=list)
    configuration_error: str = ''

    @property
    def rejected_level_count(self) -> int:
        return len(self.rejected_levels)

    @property
    def has_issues(self) -> bool:
        """True if anything was skipped or the configuration was incomplete."""
        return bool(
            self.rows_skipped
            or self.rejected_levels
            or self.missing_full_names
            or self.configuration_error
        )

    def summary(self) -> str:
        """One-line summary for logs."""
        return (
            f"{self.rows_total} rows, {self.nodes_created} nodes created, "
            f"{self.nodes_reused} reused, {self.rows_skipped} rows skipped, "
            f"{self.rejected_level_count} levels rejected"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'rows_total': self.rows_total,
            'rows_skipped': self.rows_skipped,
            'nodes_created': self.nodes_created,
            'nodes_reused': self.nodes_reused,
            'missing_full_names': self.missing_full_names,
            'rejected_levels': [r.to_dict() for r in self.rejected_levels],
            'configuration_error': self.configuration_error,
        }


__all__ = ['LevelRejection', 'BuildDiagnostics']
