# Path: tests/unit/test_loaders.py
"""
Unit Tests for org_chart Loaders

Tests table reading and pivoting:
- Columnar and row-record JSON
- CSV with empty cells
- Shape validation
"""

import json

import pytest

from org_chart.loaders import (
    TableFormatError,
    TableReader,
    rows_to_columnar,
    validate_columnar,
    row_count,
)
from org_chart.process.hierarchy import LevelColumnMapping, OrgChartBuilder


class TestRowsToColumnar:
    """Test pivoting row records."""

    def test_pivot(self, sample_rows, sample_table):
        assert rows_to_columnar(sample_rows) == sample_table

    def test_missing_keys_become_none(self):
        table = rows_to_columnar([{'a': 1}, {'b': 2}])

        assert table == {'a': [1, None], 'b': [None, 2]}

    def test_non_dict_row_rejected(self):
        with pytest.raises(TableFormatError):
            rows_to_columnar([{'a': 1}, ['a']])

    def test_empty(self):
        assert rows_to_columnar([]) == {}


class TestValidateColumnar:
    """Test shape validation."""

    def test_valid(self, sample_table):
        assert validate_columnar(sample_table) == sample_table

    def test_ragged_rejected(self):
        with pytest.raises(TableFormatError):
            validate_columnar({'a': [1, 2], 'b': [1]})

    def test_non_list_column_rejected(self):
        with pytest.raises(TableFormatError):
            validate_columnar({'a': 'abc'})

    def test_non_dict_rejected(self):
        with pytest.raises(TableFormatError):
            validate_columnar([1, 2])

    def test_row_count(self, sample_table):
        assert row_count(sample_table) == 2
        assert row_count({}) == 0


class TestTableReader:
    """Test file reading."""

    def test_read_columnar_json(self, create_table_json, sample_table):
        reader = TableReader()
        table = reader.read(create_table_json)

        assert table == sample_table
        assert reader.last_row_count == 2
        assert reader.last_path == create_table_json

    def test_read_row_json(self, temp_dir, sample_rows, sample_table):
        path = temp_dir / 'rows.json'
        path.write_text(json.dumps(sample_rows))

        assert TableReader().read(path) == sample_table

    def test_read_csv_empty_cells_are_none(self, create_table_csv):
        table = TableReader().read(create_table_csv)

        assert table['level3'] == [None, None]
        assert table['beblFullName'] == ['Jane Doe', 'John Roe']

    def test_csv_builds_same_tree_as_json(self, create_table_csv, create_table_json):
        mapping = LevelColumnMapping.identity()
        from_csv = OrgChartBuilder().build(TableReader().read(create_table_csv), mapping)
        from_json = OrgChartBuilder().build(TableReader().read(create_table_json), mapping)

        assert [n.to_dict() for n in from_csv] == [n.to_dict() for n in from_json]

    def test_unsupported_extension(self, temp_dir):
        path = temp_dir / 'units.xlsx'
        path.write_text('')

        with pytest.raises(TableFormatError):
            TableReader().read(path)

    def test_invalid_json(self, temp_dir):
        path = temp_dir / 'units.json'
        path.write_text('{broken')

        with pytest.raises(TableFormatError):
            TableReader().read(path)

    def test_missing_file(self, temp_dir):
        with pytest.raises(TableFormatError):
            TableReader().read(temp_dir / 'missing.csv')

    @pytest.mark.parametrize('name', ['units.csv', 'units.json'])
    def test_invalid_utf8(self, temp_dir, name):
        path = temp_dir / name
        path.write_bytes(b'level0,beblFullName,businessUnitId\n\xff\xfe,x,1\n')

        with pytest.raises(TableFormatError, match='Encoding error'):
            TableReader().read(path)

    def test_oversized_csv_field(self, temp_dir):
        path = temp_dir / 'units.csv'
        path.write_text('level0,beblFullName\n"' + 'A' * 200_000 + '",x\n')

        with pytest.raises(TableFormatError, match='CSV error'):
            TableReader().read(path)

    def test_empty_csv(self, temp_dir):
        path = temp_dir / 'empty.csv'
        path.write_text('')

        assert TableReader().read(path) == {}
