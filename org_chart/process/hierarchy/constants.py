# Path: org_chart/process/hierarchy/constants.py
"""
Constants for the Org Chart Hierarchy Builder

Defines the level grammar, level column keys, naming policies and
structure limits used throughout the tree building process.
"""

import re
from enum import Enum
from typing import Final


# ==============================================================================
# NAMING POLICY
# ==============================================================================
class NamePolicy(str, Enum):
    """
    How a node's display name is treated when a later row extends it.

    FIRST_WRITE_WINS: The name assigned at creation is kept. A node created
        as a row's leaf keeps the row's full name even after another row
        adds children beneath it.
    PROMOTE_ON_EXTEND: A node created as a leaf is renamed to its parsed
        business unit name the first time another row passes through it
        to a deeper level.
    """
    FIRST_WRITE_WINS = "first_write_wins"
    PROMOTE_ON_EXTEND = "promote_on_extend"


DEFAULT_NAME_POLICY: Final[NamePolicy] = NamePolicy.FIRST_WRITE_WINS


# ==============================================================================
# LEVEL STRING GRAMMAR
# ==============================================================================
LEVEL_STRING_PATTERN: Final[re.Pattern] = re.compile(
    r'^(.+?)\s*\(([^)]+)\)-([^-]+)$'
)
"""Grammar for 'Name (UnitCode)-LeafCode', e.g. 'Acme Inc. (00001)-QV6'."""


# ==============================================================================
# LEVEL LIMITS AND KEYS
# ==============================================================================
LEVEL_COUNT: Final[int] = 11
"""Number of level columns (level0 is the root, level10 the deepest)."""

MAX_LEVEL_INDEX: Final[int] = LEVEL_COUNT - 1

LEVEL_KEYS: Final[tuple] = tuple(f'level{i}' for i in range(LEVEL_COUNT))
"""Mapping keys for the level columns: ('level0', ..., 'level10')."""

PATH_SEPARATOR: Final[str] = '|'
"""Joins raw level strings into a node id."""


# ==============================================================================
# COLUMN MAPPING KEYS
# ==============================================================================
FULL_NAME_KEY: Final[str] = 'beblFullName'
UNIT_ID_KEY: Final[str] = 'businessUnitId'
SEARCH_ENABLED_KEY: Final[str] = 'searchEnabled'

REQUIRED_MAPPING_FIELDS: Final[tuple] = ('level0', 'full_name', 'unit_id')
"""Mapping attributes without which a build yields an empty tree."""

MAPPING_KEY_ALIASES: Final[dict[str, str]] = {
    FULL_NAME_KEY: 'full_name',
    'full_name': 'full_name',
    'bebl_full_name': 'full_name',
    UNIT_ID_KEY: 'unit_id',
    'unit_id': 'unit_id',
    'business_unit_id': 'unit_id',
    SEARCH_ENABLED_KEY: 'search_enabled',
    'search_enabled': 'search_enabled',
    **{key: key for key in LEVEL_KEYS},
}
"""Accepted mapping keys (panel camelCase or snake_case) to attribute names."""

IGNORED_MAPPING_KEYS: Final[frozenset] = frozenset({
    'source',
    'businessUnitName',
    'business_unit_name',
})
"""Panel configuration keys that carry no meaning for tree building."""


__all__ = [
    'NamePolicy',
    'DEFAULT_NAME_POLICY',
    'LEVEL_STRING_PATTERN',
    'LEVEL_COUNT',
    'MAX_LEVEL_INDEX',
    'LEVEL_KEYS',
    'PATH_SEPARATOR',
    'FULL_NAME_KEY',
    'UNIT_ID_KEY',
    'SEARCH_ENABLED_KEY',
    'REQUIRED_MAPPING_FIELDS',
    'MAPPING_KEY_ALIASES',
    'IGNORED_MAPPING_KEYS',
]
