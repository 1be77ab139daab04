# Path: org_chart/core/logger/__init__.py
"""
org_chart Logger Package

IPO-aware logging for the org chart builder.

Provides separate log streams for:
- INPUT layer (loaders, column mappings)
- PROCESS layer (parsing, tree building, search)
- OUTPUT layer (formatters)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
