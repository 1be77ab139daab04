# Path: org_chart/process/hierarchy/level_parser.py
"""
Level String Parser.

Parses one encoded ancestor-level cell into its structured fields.

Format: {NAME} ({BUSINESS_UNIT_CODE})-{BEBL_CODE}
Example: Cambridge Investment Research, Inc. (00001)-QV6

Components:
- NAME: Free text, matched non-greedily
- BUSINESS_UNIT_CODE: Content of the last parentheses before the suffix
- BEBL_CODE: Everything after the final dash (may not contain a dash)

Strings that do not match are rejected with LevelParseError. Nothing is
ever guessed or coerced.
"""

from dataclasses import dataclass
from typing import Any, Optional

from org_chart.process.hierarchy.constants import LEVEL_STRING_PATTERN
from org_chart.process.hierarchy.errors import LevelParseError


@dataclass(frozen=True)
class ParsedLevel:
    """
    Structured fields of one encoded level string.

    Attributes:
        name: Business unit name (trimmed)
        business_unit_code: Code inside the parentheses (trimmed)
        bebl_code: Code after the trailing dash (trimmed)
        raw: The original, unparsed string
    """
    name: str
    business_unit_code: str
    bebl_code: str
    raw: str


def parse_level_string(raw: Any) -> ParsedLevel:
    """
    Parse an encoded level string.

    Args:
        raw: Cell value, possibly None

    Returns:
        ParsedLevel with trimmed fields

    Raises:
        LevelParseError: If the value is absent, empty, not a string,
            or does not match the grammar

    Example:
        >>> parse_level_string('Acme (00001)-QV6').bebl_code
        'QV6'
    """
    if raw is None:
        raise LevelParseError(raw, "value is missing")
    if not isinstance(raw, str):
        raise LevelParseError(raw, f"expected text, got {type(raw).__name__}")
    if raw == '':
        raise LevelParseError(raw, "value is empty")

    match = LEVEL_STRING_PATTERN.match(raw)
    if match is None:
        raise LevelParseError(
            raw, "expected 'Name (UnitCode)-LeafCode'"
        )

    return ParsedLevel(
        name=match.group(1).strip(),
        business_unit_code=match.group(2).strip(),
        bebl_code=match.group(3).strip(),
        raw=raw,
    )


def try_parse_level_string(raw: Any) -> Optional[ParsedLevel]:
    """Parse an encoded level string, returning None when it is rejected."""
    try:
        return parse_level_string(raw)
    except LevelParseError:
        return None


__all__ = ['ParsedLevel', 'parse_level_string', 'try_parse_level_string']
