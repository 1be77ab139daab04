# Path: org_chart/output/formatters/text_formatter.py
"""
Text Formatter

Renders a node list as an ASCII tree, like the 'tree' command:

    Cambridge Investment Research, Inc. [QV6] (3 direct, 5 total)
    +-- Advisory Services [AS1] (1 direct, 2 total)
    |   `-- Jane Doe [J01]
    `-- Operations [OP1] (1 direct, 1 total)
        `-- John Roe [J02]

Nodes whose parent is not in the list (for example search results) are
drawn as roots.
"""

from org_chart.constants import FORMAT_TEXT
from org_chart.process.hierarchy.node import OrgChartNode
from org_chart.process.hierarchy.subordinates import build_children_map
from .base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Renders nodes as an ASCII tree.

    Uses ASCII drawing characters by default:
    +-- for branch
    |   for continuation
    `-- for last child
    """

    BRANCH = '+-- '
    LAST_BRANCH = '`-- '
    PIPE = '|   '
    SPACE = '    '

    def __init__(self, use_unicode: bool = False, show_counts: bool = True):
        """
        Initialize formatter.

        Args:
            use_unicode: Use Unicode box-drawing chars instead of ASCII
            show_counts: Append subordinate counts to nodes that have any
        """
        self.show_counts = show_counts
        if use_unicode:
            self.BRANCH = '├── '
            self.LAST_BRANCH = '└── '
            self.PIPE = '│   '

    @property
    def format_name(self) -> str:
        return FORMAT_TEXT

    @property
    def file_extension(self) -> str:
        return '.txt'

    def format_nodes(self, nodes: list[OrgChartNode]) -> str:
        """Render all trees in the node list."""
        by_id = {node.id: node for node in nodes}
        children = build_children_map(nodes)
        roots = [
            node for node in nodes
            if node.parent_id is None or node.parent_id not in by_id
        ]

        lines = []
        for root in roots:
            lines.append(self._node_text(root))
            lines.extend(self._format_children(root.id, '', by_id, children))
        return '\n'.join(lines)

    def _format_children(
        self,
        node_id: str,
        prefix: str,
        by_id: dict[str, OrgChartNode],
        children: dict[str, list[str]]
    ) -> list[str]:
        """Recursively format the children of a node."""
        lines = []
        child_ids = children.get(node_id, [])
        for i, child_id in enumerate(child_ids):
            is_last = i == len(child_ids) - 1
            connector = self.LAST_BRANCH if is_last else self.BRANCH
            lines.append(f'{prefix}{connector}{self._node_text(by_id[child_id])}')

            child_prefix = prefix + (self.SPACE if is_last else self.PIPE)
            lines.extend(
                self._format_children(child_id, child_prefix, by_id, children)
            )
        return lines

    def _node_text(self, node: OrgChartNode) -> str:
        text = str(node)
        if self.show_counts and node.direct_subordinates:
            text = (
                f'{text} ({node.direct_subordinates} direct, '
                f'{node.total_subordinates} total)'
            )
        return text


__all__ = ['TextFormatter']
