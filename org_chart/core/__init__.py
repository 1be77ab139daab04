# Path: org_chart/core/__init__.py
"""
org_chart Core Package

Core utilities for the org chart builder.

Submodules:
    - logger: IPO-aware logging system
"""

from .logger import (
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
