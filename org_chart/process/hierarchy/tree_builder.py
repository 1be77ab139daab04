# Path: org_chart/process/hierarchy/tree_builder.py
"""
Org Chart Builder - turns denormalized level rows into a deduplicated tree.

Each input row carries its full ancestor chain as one encoded string per
level column (level0 = root ... level10 = deepest). Rows that share a prefix
of level strings share the nodes for that prefix: a node's id is the
pipe-joined raw strings from level 0 down to its own level, so identity
depends on the path and never on the row.

Example:
    builder = OrgChartBuilder()
    nodes = builder.build(table, LevelColumnMapping.identity())

    for node in nodes:
        print(node.id, node.parent_id, node.total_subordinates)

    print(builder.last_diagnostics.summary())
"""

from typing import Any, Mapping, Optional, Sequence

from org_chart.core.logger import get_process_logger
from org_chart.process.hierarchy.column_mapping import LevelColumnMapping
from org_chart.process.hierarchy.constants import (
    DEFAULT_NAME_POLICY,
    PATH_SEPARATOR,
    NamePolicy,
)
from org_chart.process.hierarchy.diagnostics import BuildDiagnostics, LevelRejection
from org_chart.process.hierarchy.errors import LevelParseError
from org_chart.process.hierarchy.level_parser import parse_level_string
from org_chart.process.hierarchy.node import OrgChartNode
from org_chart.process.hierarchy.subordinates import annotate_subordinate_counts


logger = get_process_logger('hierarchy.tree_builder')

DEFAULT_MAX_LOGGED_REJECTIONS = 50

ColumnarTable = Mapping[str, Sequence[Any]]


class OrgChartBuilder:
    """
    Builds a flat, parent-linked node list from a columnar table.

    Configuration problems and malformed cells never raise: the builder
    returns whatever valid tree it can and records the rest in
    last_diagnostics.

    Example:
        builder = OrgChartBuilder(name_policy=NamePolicy.PROMOTE_ON_EXTEND)
        nodes = builder.build(table, mapping)
        if builder.last_error:
            print(builder.last_error)
    """

    def __init__(
        self,
        name_policy: NamePolicy = DEFAULT_NAME_POLICY,
        memoize: bool = False,
        max_logged_rejections: int = DEFAULT_MAX_LOGGED_REJECTIONS
    ):
        """
        Initialize the builder.

        Args:
            name_policy: How a leaf's name is treated when a later row
                extends it (see NamePolicy)
            memoize: Return the previous result when called again with the
                same table object and an equal mapping. Each call gets its
                own list; the node objects in it are shared.
            max_logged_rejections: Rejected level strings logged individually
                per build; the rest are only counted
        """
        self.name_policy = NamePolicy(name_policy)
        self.memoize = memoize
        self.max_logged_rejections = max_logged_rejections

        self._build_count = 0
        self._last_error: Optional[str] = None
        self._last_diagnostics = BuildDiagnostics()

        self._memo_table: Optional[ColumnarTable] = None
        self._memo_mapping: Optional[LevelColumnMapping] = None
        self._memo_nodes: Optional[list[OrgChartNode]] = None

    # =========================================================================
    # PUBLIC BUILD METHOD
    # =========================================================================

    def build(
        self,
        table: ColumnarTable,
        mapping: LevelColumnMapping
    ) -> list[OrgChartNode]:
        """
        Build org chart nodes from a columnar table.

        Args:
            table: Column name -> cell values, all columns the same length
            mapping: Which columns hold levels, full name and unit id

        Returns:
            Nodes in first-encountered order with subordinate counts set.
            Empty when mandatory columns are unmapped or absent.
        """
        if (
            self.memoize
            and self._memo_nodes is not None
            and table is self._memo_table
            and mapping == self._memo_mapping
        ):
            logger.debug("Input unchanged since last build, reusing result")
            return list(self._memo_nodes)

        self._last_error = None
        diagnostics = BuildDiagnostics()
        self._last_diagnostics = diagnostics

        config_error = self._check_configuration(table, mapping)
        if config_error:
            self._last_error = config_error
            diagnostics.configuration_error = config_error
            logger.warning(config_error)
            return []

        nodes = self._build_nodes(table, mapping, diagnostics)
        annotate_subordinate_counts(nodes)

        self._build_count += 1
        self._log_summary(diagnostics)

        if self.memoize:
            self._memo_table = table
            self._memo_mapping = mapping
            self._memo_nodes = list(nodes)

        return nodes

    # =========================================================================
    # INTERNAL BUILD STEPS
    # =========================================================================

    def _check_configuration(
        self,
        table: ColumnarTable,
        mapping: Optional[LevelColumnMapping]
    ) -> Optional[str]:
        """Return why the input cannot produce a tree, or None if it can."""
        if mapping is None:
            return "No column mapping configured"

        missing = mapping.missing_required()
        if missing:
            return f"Column mapping incomplete, missing: {', '.join(missing)}"

        absent = [
            column
            for column in (mapping.level0, mapping.full_name, mapping.unit_id)
            if table.get(column) is None
        ]
        if absent:
            return f"Missing required columns in data: {', '.join(absent)}"

        return None

    def _build_nodes(
        self,
        table: ColumnarTable,
        mapping: LevelColumnMapping,
        diagnostics: BuildDiagnostics
    ) -> list[OrgChartNode]:
        """Single pass over all rows, creating each path's node once."""
        nodes: list[OrgChartNode] = []
        by_id: dict[str, OrgChartNode] = {}
        created_as_leaf: set[str] = set()

        level_columns = [
            (level, table[column])
            for level, column in mapping.mapped_levels()
            if table.get(column) is not None
        ]
        full_names = table[mapping.full_name]
        row_count = len(table[mapping.level0])
        diagnostics.rows_total = row_count

        for row_index in range(row_count):
            chain = self._collect_chain(level_columns, row_index)
            if not chain:
                diagnostics.rows_skipped += 1
                logger.debug(f"Row {row_index}: no level values, skipped")
                continue

            raw_path: list[str] = []
            parent_id: Optional[str] = None
            pending_promotion: Optional[str] = None
            last_position = len(chain) - 1

            for position, (level, raw) in enumerate(chain):
                raw_path.append(str(raw))

                try:
                    parsed = parse_level_string(raw)
                except LevelParseError as e:
                    self._record_rejection(
                        diagnostics, row_index, level, raw, e.reason
                    )
                    continue

                # Deeper level resolved under a former leaf
                if pending_promotion is not None:
                    promoted = by_id[pending_promotion]
                    promoted.name = promoted.business_unit
                    created_as_leaf.discard(pending_promotion)
                    pending_promotion = None

                node_id = PATH_SEPARATOR.join(raw_path)
                is_leaf = position == last_position
                existing = by_id.get(node_id)

                if existing is not None:
                    diagnostics.nodes_reused += 1
                    if (
                        not is_leaf
                        and node_id in created_as_leaf
                        and self.name_policy is NamePolicy.PROMOTE_ON_EXTEND
                    ):
                        pending_promotion = node_id
                    parent_id = node_id
                    continue

                if is_leaf:
                    name = _cell(full_names, row_index)
                    if name is None or name == '':
                        diagnostics.missing_full_names += 1
                        name = parsed.name
                    else:
                        name = str(name)
                    created_as_leaf.add(node_id)
                else:
                    name = parsed.name

                node = OrgChartNode(
                    id=node_id,
                    parent_id=parent_id,
                    name=name,
                    business_unit=parsed.name,
                    bebl_code=parsed.bebl_code,
                    business_unit_code=parsed.business_unit_code,
                    level=level,
                )
                nodes.append(node)
                by_id[node_id] = node
                diagnostics.nodes_created += 1
                parent_id = node_id

        return nodes

    @staticmethod
    def _collect_chain(
        level_columns: list[tuple[int, Sequence[Any]]],
        row_index: int
    ) -> list[tuple[int, Any]]:
        """Level values for one row, stopping at the first falsy cell."""
        chain = []
        for level, column in level_columns:
            value = _cell(column, row_index)
            if not value:
                break
            chain.append((level, value))
        return chain

    def _record_rejection(
        self,
        diagnostics: BuildDiagnostics,
        row_index: int,
        level: int,
        raw: Any,
        reason: str
    ) -> None:
        diagnostics.rejected_levels.append(
            LevelRejection(row_index, level, raw, reason)
        )
        count = diagnostics.rejected_level_count
        if count <= self.max_logged_rejections:
            logger.warning(
                f"Skipping invalid level string at row {row_index}, "
                f"level {level}: {raw!r} ({reason})"
            )
        elif count == self.max_logged_rejections + 1:
            logger.warning(
                "Further invalid level strings in this build are counted "
                "but not logged"
            )

    def _log_summary(self, diagnostics: BuildDiagnostics) -> None:
        if diagnostics.has_issues:
            logger.warning(f"Built org chart with issues: {diagnostics.summary()}")
        else:
            logger.info(f"Built org chart: {diagnostics.summary()}")

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def last_error(self) -> Optional[str]:
        """Why the last build returned an empty tree, if it did."""
        return self._last_error

    @property
    def last_diagnostics(self) -> BuildDiagnostics:
        """Diagnostics for the most recent build."""
        return self._last_diagnostics

    @property
    def build_count(self) -> int:
        """Number of builds that got past configuration checks."""
        return self._build_count

    def reset_stats(self) -> None:
        """Reset build statistics and drop any memoized result."""
        self._build_count = 0
        self._last_error = None
        self._last_diagnostics = BuildDiagnostics()
        self._memo_table = None
        self._memo_mapping = None
        self._memo_nodes = None


def _cell(column: Sequence[Any], row_index: int) -> Any:
    """Cell value, or None when a short column has no entry for the row."""
    if row_index < len(column):
        return column[row_index]
    return None


def build_org_chart(
    table: ColumnarTable,
    mapping: LevelColumnMapping,
    name_policy: NamePolicy = DEFAULT_NAME_POLICY
) -> list[OrgChartNode]:
    """
    Build org chart nodes with a throwaway builder.

    Args:
        table: Column name -> cell values
        mapping: Column mapping
        name_policy: Leaf naming policy

    Returns:
        Node list with subordinate counts
    """
    return OrgChartBuilder(name_policy=name_policy).build(table, mapping)


__all__ = ['OrgChartBuilder', 'ColumnarTable', 'build_org_chart']
