# Path: org_chart/__init__.py
"""
org_chart - Business Unit Org Chart Builder

Converts denormalized rows, each carrying its ancestor chain as encoded
per-level text columns, into a deduplicated parent-linked tree with
subordinate counts, and searches the result by partial text match.

Packages:
    - core: IPO-aware logging
    - loaders: Columnar table readers (JSON, CSV)
    - process: Level parsing, tree building, search
    - output: JSON and ASCII tree formatters
"""

__version__ = '1.0.0'
