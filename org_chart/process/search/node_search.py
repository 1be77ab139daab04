# Path: org_chart/process/search/node_search.py
"""
Node Search - partial, case-insensitive text match over a built node list.

Re-executed per query; no index is kept. The result is a stable filter of
the input list, never a relevance sort.
"""

from typing import Iterable, Optional

from org_chart.core.logger import get_process_logger
from org_chart.process.hierarchy.node import OrgChartNode, SearchResult


logger = get_process_logger('search.node_search')


def normalize_term(term: Optional[str]) -> str:
    """Lower-cased, stripped search term; empty string means 'no query'."""
    if not term:
        return ''
    return term.strip().lower()


def node_matches(node: OrgChartNode, needle: str) -> bool:
    """
    Check whether a node's name, business unit or BEBL code contains needle.

    Args:
        node: Node to test
        needle: Already normalized (lower-case, stripped) term

    Returns:
        True if any searchable field contains the term
    """
    if needle in node.name.lower():
        return True
    if needle in node.business_unit.lower():
        return True
    return bool(node.bebl_code) and needle in node.bebl_code.lower()


def search_nodes(
    nodes: Iterable[OrgChartNode],
    term: Optional[str]
) -> list[OrgChartNode]:
    """
    Find nodes whose name, business unit or BEBL code contains the term.

    Args:
        nodes: Node list from the tree builder
        term: Free-text query

    Returns:
        Matching nodes in input order; empty for a blank term

    Example:
        >>> [n.name for n in search_nodes(nodes, 'jo')]
        ['John Roe']
    """
    needle = normalize_term(term)
    if not needle:
        return []

    matches = [node for node in nodes if node_matches(node, needle)]
    logger.debug(f"Search {needle!r}: {len(matches)} matches")
    return matches


def to_search_results(nodes: Iterable[OrgChartNode]) -> list[SearchResult]:
    """Project nodes to compact search results."""
    return [SearchResult.from_node(node) for node in nodes]


__all__ = [
    'normalize_term',
    'node_matches',
    'search_nodes',
    'to_search_results',
]
