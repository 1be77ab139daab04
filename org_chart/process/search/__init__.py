# Path: org_chart/process/search/__init__.py
"""
Search Package for org_chart

Locates nodes in a built org chart by partial text match.
"""

from org_chart.process.search.node_search import (
    normalize_term,
    node_matches,
    search_nodes,
    to_search_results,
)

__all__ = [
    'normalize_term',
    'node_matches',
    'search_nodes',
    'to_search_results',
]
