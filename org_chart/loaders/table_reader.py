# Path: org_chart/loaders/table_reader.py
"""
Table Reader for org_chart

Reads an input table into the columnar form the tree builder expects:
a dictionary of column name -> list of cell values, every list the same
length.

Accepted sources:
- JSON object of arrays (already columnar)
- JSON array of row objects (pivoted to columns)
- CSV with a header row (empty cells become None)

The reader does not interpret cell contents. Level strings are parsed
later by the hierarchy builder.
"""

import csv
import json
from pathlib import Path
from typing import Any, Iterable, Optional

from org_chart.core.logger import get_input_logger
from org_chart.process.hierarchy.errors import OrgChartError
from org_chart.loaders.constants import (
    JSON_EXTENSION,
    CSV_EXTENSION,
    SUPPORTED_EXTENSIONS,
    CSV_ENCODING,
    EMPTY_CELL_VALUES,
)


logger = get_input_logger('table_reader')


class TableFormatError(OrgChartError):
    """Input table cannot be read or is not rectangular."""


def rows_to_columnar(rows: Iterable[dict[str, Any]]) -> dict[str, list[Any]]:
    """
    Pivot row records into columns.

    Columns are ordered by first appearance. A row that lacks a column
    gets None for it.

    Args:
        rows: Iterable of row dictionaries

    Returns:
        Columnar table

    Raises:
        TableFormatError: If a row is not a dictionary
    """
    rows = list(rows)
    columns: dict[str, list[Any]] = {}

    for row_index, row in enumerate(rows):
        if not isinstance(row, dict):
            raise TableFormatError(
                f"Row {row_index} is {type(row).__name__}, expected an object"
            )
        for key in row:
            if key not in columns:
                columns[key] = [None] * row_index
        for key, values in columns.items():
            values.append(row.get(key))

    return columns


def validate_columnar(table: Any) -> dict[str, list[Any]]:
    """
    Check that a table is a mapping of equally long sequences.

    Args:
        table: Candidate columnar table

    Returns:
        The table with every column as a list

    Raises:
        TableFormatError: If the shape is wrong
    """
    if not isinstance(table, dict):
        raise TableFormatError(
            f"Columnar table must be an object, got {type(table).__name__}"
        )

    lengths = set()
    result: dict[str, list[Any]] = {}
    for column, values in table.items():
        if not isinstance(values, (list, tuple)):
            raise TableFormatError(
                f"Column '{column}' must be an array, got {type(values).__name__}"
            )
        result[column] = list(values)
        lengths.add(len(values))

    if len(lengths) > 1:
        raise TableFormatError(
            f"Columns have different lengths: {sorted(lengths)}"
        )

    return result


def row_count(table: dict[str, list[Any]]) -> int:
    """Number of rows in a validated columnar table."""
    for values in table.values():
        return len(values)
    return 0


class TableReader:
    """
    Reads JSON and CSV files into columnar tables.

    Example:
        reader = TableReader()
        table = reader.read(Path('org_units.csv'))
        print(reader.last_row_count)
    """

    def __init__(self):
        self._last_path: Optional[Path] = None
        self._last_row_count = 0

    def read(self, path: Path) -> dict[str, list[Any]]:
        """
        Read a table file.

        Args:
            path: Path to a .json or .csv file

        Returns:
            Columnar table

        Raises:
            TableFormatError: On unsupported type, unreadable file or bad shape
        """
        suffix = path.suffix.lower()
        if suffix not in SUPPORTED_EXTENSIONS:
            raise TableFormatError(
                f"Unsupported table format '{suffix}', "
                f"expected one of {', '.join(SUPPORTED_EXTENSIONS)}"
            )

        try:
            if suffix == JSON_EXTENSION:
                table = self._read_json(path)
            else:
                table = self._read_csv(path)
        except OSError as e:
            raise TableFormatError(f"Error reading {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise TableFormatError(f"Encoding error in {path}: {e}") from e
        except csv.Error as e:
            raise TableFormatError(f"CSV error in {path}: {e}") from e

        self._last_path = path
        self._last_row_count = row_count(table)
        logger.info(
            f"Loaded {self._last_row_count} rows, {len(table)} columns from {path}"
        )
        return table

    def _read_json(self, path: Path) -> dict[str, list[Any]]:
        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise TableFormatError(f"JSON decode error in {path}: {e}") from e

        if isinstance(data, list):
            return validate_columnar(rows_to_columnar(data))
        return validate_columnar(data)

    def _read_csv(self, path: Path) -> dict[str, list[Any]]:
        with open(path, 'r', encoding=CSV_ENCODING, newline='') as f:
            reader = csv.DictReader(f)
            if reader.fieldnames is None:
                return {}
            columns: dict[str, list[Any]] = {name: [] for name in reader.fieldnames}
            for record in reader:
                for name in reader.fieldnames:
                    value = record.get(name)
                    columns[name].append(
                        None if value is None or value in EMPTY_CELL_VALUES else value
                    )
        return columns

    @property
    def last_path(self) -> Optional[Path]:
        """Most recently read file."""
        return self._last_path

    @property
    def last_row_count(self) -> int:
        """Rows in the most recently read table."""
        return self._last_row_count


__all__ = [
    'TableFormatError',
    'TableReader',
    'rows_to_columnar',
    'validate_columnar',
    'row_count',
]
