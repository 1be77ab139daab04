# Path: org_chart/process/__init__.py
"""
Process Layer for org_chart

The PROCESS layer turns loaded tables into org chart structures:
- hierarchy/ - Level parsing, tree building, subordinate counts
- search/ - Partial text search over built nodes

All components follow the IPO pattern:
- Read from INPUT layer (loaders)
- Process data (parse, deduplicate, count)
- Hand results to OUTPUT layer (formatters) or the renderer
"""

from org_chart.process.hierarchy import OrgChartBuilder, OrgChartNode, LevelColumnMapping
from org_chart.process.search import search_nodes

__all__ = [
    'OrgChartBuilder',
    'OrgChartNode',
    'LevelColumnMapping',
    'search_nodes',
]
