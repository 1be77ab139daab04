# Path: org_chart/process/hierarchy/__init__.py
"""
Hierarchy Builder Package for org_chart

Builds a deduplicated business unit tree from rows that each carry their
full ancestor chain as encoded level strings.

Components:
- parse_level_string: Parses 'Name (UnitCode)-LeafCode' cells
- LevelColumnMapping: Which columns hold levels, full name and unit id
- OrgChartBuilder: Row pass that creates each path's node exactly once
- annotate_subordinate_counts: Direct/total subordinate counts
- OrgChartNode: Flat, parent-linked node record

Example:
    from org_chart.process.hierarchy import OrgChartBuilder, LevelColumnMapping

    builder = OrgChartBuilder()
    nodes = builder.build(table, LevelColumnMapping.identity())
"""

from org_chart.process.hierarchy.constants import (
    NamePolicy,
    DEFAULT_NAME_POLICY,
    LEVEL_COUNT,
    LEVEL_KEYS,
    PATH_SEPARATOR,
)
from org_chart.process.hierarchy.errors import (
    OrgChartError,
    LevelParseError,
    ColumnMappingError,
)
from org_chart.process.hierarchy.level_parser import (
    ParsedLevel,
    parse_level_string,
    try_parse_level_string,
)
from org_chart.process.hierarchy.column_mapping import LevelColumnMapping
from org_chart.process.hierarchy.node import OrgChartNode, SearchResult
from org_chart.process.hierarchy.diagnostics import BuildDiagnostics, LevelRejection
from org_chart.process.hierarchy.subordinates import (
    build_children_map,
    annotate_subordinate_counts,
)
from org_chart.process.hierarchy.tree_builder import (
    OrgChartBuilder,
    ColumnarTable,
    build_org_chart,
)

__all__ = [
    # Constants
    'NamePolicy',
    'DEFAULT_NAME_POLICY',
    'LEVEL_COUNT',
    'LEVEL_KEYS',
    'PATH_SEPARATOR',
    # Errors
    'OrgChartError',
    'LevelParseError',
    'ColumnMappingError',
    # Parsing
    'ParsedLevel',
    'parse_level_string',
    'try_parse_level_string',
    # Configuration
    'LevelColumnMapping',
    # Nodes
    'OrgChartNode',
    'SearchResult',
    # Building
    'OrgChartBuilder',
    'ColumnarTable',
    'build_org_chart',
    'BuildDiagnostics',
    'LevelRejection',
    'build_children_map',
    'annotate_subordinate_counts',
]
