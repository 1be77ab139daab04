#!/usr/bin/env python3
# Path: org_chart/main.py
"""
org_chart - Main Entry Point

Builds an org chart from a table file and prints it, or searches it.

Data Flow:
    INPUT:   Table file (.json or .csv) + optional column mapping (.json)
    PROCESS: Level parsing, tree building, subordinate counts, search
    OUTPUT:  JSON node list or ASCII tree (stdout or file)

Usage:
    org-chart --input units.csv
    org-chart --input units.json --mapping mapping.json --format text
    org-chart --input units.csv --search "jane"
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from org_chart.config_loader import ConfigLoader
from org_chart.constants import (
    FORMAT_JSON,
    OUTPUT_FORMATS,
    STATUS_OK,
    STATUS_FAIL,
    STATUS_WARN,
    STATUS_INFO,
    ExitCode,
)
from org_chart.core.logger import setup_ipo_logging, get_input_logger
from org_chart.loaders import TableReader, TableFormatError
from org_chart.output.formatters import FormatterRegistry
from org_chart.process.hierarchy import (
    ColumnMappingError,
    LevelColumnMapping,
    NamePolicy,
    OrgChartBuilder,
)
from org_chart.process.search import search_nodes


def status(message: str) -> None:
    """Print a status line to stderr so stdout stays machine-readable."""
    print(message, file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    """Create the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='org-chart',
        description='org_chart - Business Unit Org Chart Builder',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  org-chart --input units.csv                     JSON node list to stdout
  org-chart --input units.json --format text      ASCII tree
  org-chart --input units.csv --search "jane"     Matching nodes only
  org-chart --input units.csv --mapping map.json  Custom column names
        """
    )

    parser.add_argument(
        '--input', '-i',
        type=Path,
        required=True,
        help='Table file (.json columnar/rows or .csv with header)'
    )

    parser.add_argument(
        '--mapping', '-m',
        type=Path,
        help='Column mapping JSON (default: columns named level0..level10, '
             'beblFullName, businessUnitId)'
    )

    parser.add_argument(
        '--search', '-s',
        type=str,
        help='Only output nodes whose name, business unit or code contains TERM'
    )

    parser.add_argument(
        '--format', '-f',
        choices=OUTPUT_FORMATS,
        help='Output format (default from configuration)'
    )

    parser.add_argument(
        '--output', '-o',
        type=Path,
        help='Write output to this file or directory instead of stdout'
    )

    parser.add_argument(
        '--name-policy',
        choices=[policy.value for policy in NamePolicy],
        help='Naming of leaf nodes that later rows extend'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        help='Override configured log level'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress status lines'
    )

    return parser


def initialize_system(log_level: Optional[str] = None) -> ConfigLoader:
    """
    Load configuration and set up logging.

    Debug mode raises the configured level to DEBUG unless the caller
    passes an explicit level.

    Args:
        log_level: Log level overriding the configured one

    Returns:
        ConfigLoader instance
    """
    config = ConfigLoader()

    if not log_level:
        log_level = 'DEBUG' if config.get('debug') else config.get('log_level', 'INFO')

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=log_level,
        console_output=config.get('log_console', True)
    )

    return config


def run(args: argparse.Namespace, config: ConfigLoader) -> int:
    """
    Load, build, optionally search, and write output.

    Args:
        args: Parsed command line arguments
        config: Configuration loader

    Returns:
        Exit code
    """
    logger = get_input_logger('main')

    table = TableReader().read(args.input)
    if args.mapping:
        mapping = LevelColumnMapping.from_file(args.mapping)
    else:
        mapping = LevelColumnMapping.identity()

    builder = OrgChartBuilder(
        name_policy=args.name_policy or config.get('name_policy'),
        memoize=config.get('memoize_builds', False),
        max_logged_rejections=config.get('max_logged_rejections', 50),
    )
    nodes = builder.build(table, mapping)
    diagnostics = builder.last_diagnostics

    if builder.last_error:
        status(f"{STATUS_FAIL} {builder.last_error}")
        return ExitCode.ERROR

    if not args.quiet:
        status(f"{STATUS_OK} {diagnostics.summary()}")
        if diagnostics.rejected_levels:
            status(
                f"{STATUS_WARN} {diagnostics.rejected_level_count} level strings "
                f"did not match 'Name (UnitCode)-LeafCode' and were skipped"
            )

    if args.search is not None:
        if not mapping.search_enabled:
            logger.warning("Search requested but disabled by column mapping")
            status(f"{STATUS_WARN} Search is disabled by the column mapping")
            return ExitCode.ERROR
        nodes = search_nodes(nodes, args.search)
        if not args.quiet:
            status(f"{STATUS_INFO} {len(nodes)} nodes match '{args.search}'")

    output_format = args.format or config.get('output_format', FORMAT_JSON)
    if output_format == FORMAT_JSON:
        formatter = FormatterRegistry.get(FORMAT_JSON, indent=config.get('json_indent', 2))
    else:
        formatter = FormatterRegistry.get(output_format)
    if formatter is None:
        status(f"{STATUS_FAIL} Unknown output format: {output_format}")
        return ExitCode.ERROR

    output_path = args.output or config.get('output_dir')
    if output_path:
        written = formatter.write_nodes(nodes, output_path)
        if not args.quiet:
            status(f"{STATUS_OK} Wrote {written}")
    else:
        print(formatter.format_nodes(nodes))

    return ExitCode.SUCCESS


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for org_chart.

    Args:
        argv: Arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = build_parser().parse_args(argv)

    try:
        config = initialize_system(args.log_level)
        return int(run(args, config))

    except (TableFormatError, ColumnMappingError) as e:
        status(f"{STATUS_FAIL} Error: {e}")
        return int(ExitCode.ERROR)

    except KeyboardInterrupt:
        status("[Interrupted]")
        return int(ExitCode.INTERRUPTED)


if __name__ == '__main__':
    sys.exit(main())
