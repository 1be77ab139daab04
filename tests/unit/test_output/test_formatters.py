# Path: tests/unit/test_output/test_formatters.py
"""
Tests for node list formatters.
"""

import json

import pytest

from org_chart.output.formatters import (
    FormatterRegistry,
    JsonFormatter,
    TextFormatter,
)
from org_chart.process.hierarchy import LevelColumnMapping, OrgChartBuilder
from org_chart.process.search import search_nodes


@pytest.fixture
def nodes(sample_table):
    return OrgChartBuilder().build(sample_table, LevelColumnMapping.identity())


class TestJsonFormatter:
    """Test JSON rendering."""

    def test_round_trips_renderer_keys(self, nodes):
        data = json.loads(JsonFormatter().format_nodes(nodes))

        assert len(data) == 5
        assert data[0]['parentId'] is None
        assert data[0]['_totalSubordinates'] == 4
        assert data[2]['name'] == 'Jane Doe'

    def test_indent(self, nodes):
        assert '\n    ' in JsonFormatter(indent=4).format_nodes(nodes)
        assert '\n' not in JsonFormatter(indent=0).format_nodes(nodes)

    def test_write_to_directory(self, nodes, temp_dir):
        path = JsonFormatter().write_nodes(nodes, temp_dir / 'out')

        assert path.name == 'org_chart.json'
        assert len(json.loads(path.read_text())) == 5

    def test_write_to_file(self, nodes, temp_dir):
        path = JsonFormatter().write_nodes(nodes, temp_dir / 'tree.json')
        assert path == temp_dir / 'tree.json'


class TestTextFormatter:
    """Test ASCII tree rendering."""

    def test_tree_layout(self, nodes):
        text = TextFormatter().format_nodes(nodes)

        assert text.splitlines() == [
            'Cambridge Investment Research, Inc. [QV6] (2 direct, 4 total)',
            '+-- Advisory Services [AS1] (1 direct, 1 total)',
            '|   `-- Jane Doe [J01]',
            '`-- Operations [OP1] (1 direct, 1 total)',
            '    `-- John Roe [J02]',
        ]

    def test_without_counts(self, nodes):
        text = TextFormatter(show_counts=False).format_nodes(nodes)
        assert 'direct' not in text

    def test_orphans_drawn_as_roots(self, nodes):
        """Search results whose parents were filtered out still render."""
        text = TextFormatter(show_counts=False).format_nodes(search_nodes(nodes, 'j0'))

        assert text.splitlines() == ['Jane Doe [J01]', 'John Roe [J02]']

    def test_ascii_only(self, nodes):
        text = TextFormatter().format_nodes(nodes)
        assert all(ord(char) < 128 for char in text)

    def test_unicode_branches(self, nodes):
        text = TextFormatter(use_unicode=True).format_nodes(nodes)
        assert '└── ' in text


class TestFormatterRegistry:
    """Test formatter lookup."""

    def test_registered_formats(self):
        assert set(FormatterRegistry.get_available()) >= {'json', 'text'}

    def test_get_with_kwargs(self):
        formatter = FormatterRegistry.get('json', indent=4)
        assert isinstance(formatter, JsonFormatter)
        assert formatter.indent == 4

    def test_unknown_format(self):
        assert FormatterRegistry.get('pdf') is None
