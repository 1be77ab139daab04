# Path: org_chart/process/hierarchy/column_mapping.py
"""
Column Mapping - which table columns hold which hierarchy fields.

The mapping names the columns for levels 0-10 (level 0 mandatory, the rest
optional), the row's full name, and the business unit id. It is validated
once at the boundary (from_dict / from_file) and then passed around as an
immutable value.

A mapping may be incomplete. Missing mandatory fields are not an error
here; the tree builder treats them as "insufficient configuration" and
returns an empty tree.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from org_chart.core.logger import get_input_logger
from org_chart.process.hierarchy.constants import (
    LEVEL_COUNT,
    LEVEL_KEYS,
    FULL_NAME_KEY,
    UNIT_ID_KEY,
    REQUIRED_MAPPING_FIELDS,
    MAPPING_KEY_ALIASES,
    IGNORED_MAPPING_KEYS,
)
from org_chart.process.hierarchy.errors import ColumnMappingError


logger = get_input_logger('column_mapping')


@dataclass(frozen=True)
class LevelColumnMapping:
    """
    Column names for each hierarchy field.

    Attributes:
        levels: Column name per level index 0-10, None where unmapped
        full_name: Column holding the row's own full name
        unit_id: Column holding the business unit id (presence check only)
        search_enabled: Whether the host should offer search

    Example:
        mapping = LevelColumnMapping.from_dict({
            'level0': 'L0', 'level1': 'L1',
            'beblFullName': 'FULL_NAME', 'businessUnitId': 'BU_ID',
        })
    """
    levels: tuple = field(default=(None,) * LEVEL_COUNT)
    full_name: Optional[str] = None
    unit_id: Optional[str] = None
    search_enabled: bool = True

    def __post_init__(self):
        if len(self.levels) != LEVEL_COUNT:
            raise ColumnMappingError(
                f"Expected {LEVEL_COUNT} level entries, got {len(self.levels)}"
            )

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'LevelColumnMapping':
        """
        Build a mapping from a configuration dictionary.

        Accepts the panel's camelCase keys ('level0', 'beblFullName',
        'businessUnitId', 'searchEnabled') or their snake_case forms.
        Empty strings are treated as unmapped.

        Args:
            data: Configuration dictionary

        Returns:
            Validated LevelColumnMapping

        Raises:
            ColumnMappingError: On unknown keys or non-string column names
        """
        if not isinstance(data, dict):
            raise ColumnMappingError(
                f"Column mapping must be an object, got {type(data).__name__}"
            )

        levels: list[Optional[str]] = [None] * LEVEL_COUNT
        values: dict[str, Any] = {}

        for key, value in data.items():
            if key in IGNORED_MAPPING_KEYS:
                continue
            attr = MAPPING_KEY_ALIASES.get(key)
            if attr is None:
                raise ColumnMappingError(f"Unknown column mapping key: {key}")

            if attr == 'search_enabled':
                values[attr] = _coerce_bool(key, value)
                continue

            column = _coerce_column(key, value)
            if attr in LEVEL_KEYS:
                levels[LEVEL_KEYS.index(attr)] = column
            else:
                values[attr] = column

        return cls(levels=tuple(levels), **values)

    @classmethod
    def from_file(cls, path: Path) -> 'LevelColumnMapping':
        """
        Load a mapping from a JSON file.

        Args:
            path: Path to a JSON object file

        Returns:
            Validated LevelColumnMapping

        Raises:
            ColumnMappingError: If the file is unreadable or invalid
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ColumnMappingError(f"JSON decode error in {path}: {e}") from e
        except OSError as e:
            raise ColumnMappingError(f"Error reading {path}: {e}") from e

        mapping = cls.from_dict(data)
        logger.info(
            f"Loaded column mapping from {path} "
            f"({len(mapping.mapped_levels())} level columns)"
        )
        return mapping

    @classmethod
    def identity(cls) -> 'LevelColumnMapping':
        """Mapping whose column names equal the configuration keys."""
        return cls(
            levels=LEVEL_KEYS,
            full_name=FULL_NAME_KEY,
            unit_id=UNIT_ID_KEY,
        )

    # =========================================================================
    # QUERIES
    # =========================================================================

    @property
    def level0(self) -> Optional[str]:
        """Column for the root level."""
        return self.levels[0]

    def mapped_levels(self) -> list[tuple[int, str]]:
        """Return (level index, column name) for every mapped level, in order."""
        return [
            (index, column)
            for index, column in enumerate(self.levels)
            if column
        ]

    def missing_required(self) -> list[str]:
        """Names of mandatory fields that are not mapped."""
        return [name for name in REQUIRED_MAPPING_FIELDS if not getattr(self, name)]

    @property
    def is_complete(self) -> bool:
        """True when every mandatory field is mapped."""
        return not self.missing_required()

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the panel's camelCase keys."""
        result: dict[str, Any] = {
            key: column
            for key, column in zip(LEVEL_KEYS, self.levels)
            if column
        }
        if self.full_name:
            result[FULL_NAME_KEY] = self.full_name
        if self.unit_id:
            result[UNIT_ID_KEY] = self.unit_id
        result['searchEnabled'] = self.search_enabled
        return result


def _coerce_column(key: str, value: Any) -> Optional[str]:
    """Validate a column name; empty strings and None mean 'unmapped'."""
    if value is None or value == '':
        return None
    if not isinstance(value, str):
        raise ColumnMappingError(
            f"Column for '{key}' must be a string, got {type(value).__name__}"
        )
    return value


def _coerce_bool(key: str, value: Any) -> bool:
    """Accept booleans or the panel's string toggles."""
    if value is None:
        return True
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes', 'on')
    raise ColumnMappingError(
        f"Value for '{key}' must be a boolean, got {type(value).__name__}"
    )


__all__ = ['LevelColumnMapping']
