# Path: org_chart/output/__init__.py
"""
Output Layer for org_chart

Renders built node lists for files and the console.
"""

from .formatters import BaseFormatter, FormatterRegistry, JsonFormatter, TextFormatter

__all__ = [
    'BaseFormatter',
    'FormatterRegistry',
    'JsonFormatter',
    'TextFormatter',
]
