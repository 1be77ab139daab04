# Path: org_chart/output/formatters/json_formatter.py
"""
JSON Formatter

Renders a node list as the JSON array the chart renderer consumes,
using the renderer's key names (id, parentId, _totalSubordinates, ...).
"""

import json
from typing import Any

from org_chart.constants import FORMAT_JSON
from org_chart.process.hierarchy.node import OrgChartNode
from .base_formatter import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Renders nodes as a JSON array."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    @property
    def format_name(self) -> str:
        return FORMAT_JSON

    @property
    def file_extension(self) -> str:
        return '.json'

    def format_nodes(self, nodes: list[OrgChartNode]) -> str:
        """Serialize nodes to a JSON string."""
        data = self._serialize_nodes(nodes)
        return json.dumps(data, indent=self.indent or None, ensure_ascii=False)

    def _serialize_nodes(self, nodes: list[OrgChartNode]) -> list[dict[str, Any]]:
        return [node.to_dict() for node in nodes]


__all__ = ['JsonFormatter']
