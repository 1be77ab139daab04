# Path: org_chart/output/formatters/__init__.py
"""
Node List Formatters

Each formatter renders a built node list into a specific output format.
"""

from .base_formatter import BaseFormatter, FormatterRegistry
from .json_formatter import JsonFormatter
from .text_formatter import TextFormatter

FormatterRegistry.register(JsonFormatter)
FormatterRegistry.register(TextFormatter)

__all__ = [
    'BaseFormatter',
    'FormatterRegistry',
    'JsonFormatter',
    'TextFormatter',
]
