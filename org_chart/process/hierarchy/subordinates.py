# Path: org_chart/process/hierarchy/subordinates.py
"""
Subtree Statistics - direct and total subordinate counts.

Counts are derived once, after the full node list exists. The traversal
is an explicit post-order stack so depth is not limited by the
interpreter's recursion limit.
"""

from collections import defaultdict
from typing import Iterable

from org_chart.process.hierarchy.node import OrgChartNode


def build_children_map(nodes: Iterable[OrgChartNode]) -> dict[str, list[str]]:
    """
    Map each parent id to the ids of its direct children, in node order.

    Args:
        nodes: Node list in any order

    Returns:
        Dictionary of parent id -> ordered child ids (roots are not keys)
    """
    children: dict[str, list[str]] = defaultdict(list)
    for node in nodes:
        if node.parent_id is not None:
            children[node.parent_id].append(node.id)
    return dict(children)


def annotate_subordinate_counts(nodes: list[OrgChartNode]) -> None:
    """
    Set direct_subordinates and total_subordinates on every node in place.

    total(n) = sum over children c of (1 + total(c))

    Args:
        nodes: Complete node list

    Raises:
        ValueError: If the parent links contain a cycle
    """
    children = build_children_map(nodes)
    totals: dict[str, int] = {}

    for start in nodes:
        if start.id in totals:
            continue

        on_path: set[str] = set()
        stack: list[tuple[str, bool]] = [(start.id, False)]

        while stack:
            node_id, expanded = stack.pop()

            if expanded:
                on_path.discard(node_id)
                totals[node_id] = sum(
                    1 + totals[child_id]
                    for child_id in children.get(node_id, ())
                )
                continue

            if node_id in totals:
                continue
            if node_id in on_path:
                raise ValueError(f"Cycle detected at node {node_id!r}")

            on_path.add(node_id)
            stack.append((node_id, True))
            for child_id in children.get(node_id, ()):
                if child_id not in totals:
                    stack.append((child_id, False))

    for node in nodes:
        node.direct_subordinates = len(children.get(node.id, ()))
        node.total_subordinates = totals[node.id]


__all__ = ['build_children_map', 'annotate_subordinate_counts']
