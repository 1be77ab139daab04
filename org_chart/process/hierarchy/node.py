# Path: org_chart/process/hierarchy/node.py
"""
Org Chart Node - one deduplicated unit in the business unit hierarchy.

Nodes are flat records linked by parent_id. The renderer consumes them
through to_dict(), which uses the chart library's key names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class OrgChartNode:
    """
    A single node in the org chart.

    Attributes:
        id: Pipe-joined raw level strings from level 0 to this node
        parent_id: Id of the node one level up, None for a root
        name: Display name (row full name for a row's leaf, else unit name)
        business_unit: Parsed unit name from this node's own level string
        bebl_code: Parsed code after the trailing dash
        business_unit_code: Parsed code inside the parentheses
        level: Level index (0 = root column) this node was created from
        direct_subordinates: Number of children
        total_subordinates: Number of transitive descendants

    Example:
        node = OrgChartNode(
            id="Acme (001)-A1",
            parent_id=None,
            name="Acme",
            business_unit="Acme",
            bebl_code="A1",
            business_unit_code="001",
        )
    """
    id: str
    parent_id: Optional[str]
    name: str
    business_unit: str
    bebl_code: Optional[str] = None
    business_unit_code: Optional[str] = None
    level: int = 0

    # Filled in by annotate_subordinate_counts()
    direct_subordinates: int = 0
    total_subordinates: int = 0

    @property
    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self.parent_id is None

    @property
    def has_subordinates(self) -> bool:
        """True if any node reports to this one."""
        return self.direct_subordinates > 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the chart library's key names."""
        return {
            'id': self.id,
            'parentId': self.parent_id,
            'name': self.name,
            'businessUnit': self.business_unit,
            'beblCode': self.bebl_code,
            'businessUnitCode': self.business_unit_code,
            '_directSubordinates': self.direct_subordinates,
            '_totalSubordinates': self.total_subordinates,
        }

    def __str__(self) -> str:
        code = f" [{self.bebl_code}]" if self.bebl_code else ""
        return f"{self.name}{code}"


@dataclass(frozen=True)
class SearchResult:
    """Compact projection of a matching node for a results list."""
    node_id: str
    name: str
    business_unit: str
    bebl_code: Optional[str] = None

    @classmethod
    def from_node(cls, node: OrgChartNode) -> SearchResult:
        return cls(
            node_id=node.id,
            name=node.name,
            business_unit=node.business_unit,
            bebl_code=node.bebl_code,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'nodeId': self.node_id,
            'name': self.name,
            'businessUnit': self.business_unit,
            'beblCode': self.bebl_code,
        }


__all__ = ['OrgChartNode', 'SearchResult']
