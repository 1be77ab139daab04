# Path: org_chart/output/formatters/base_formatter.py
"""
Base Formatter and Formatter Registry

Abstract base class for node list formatters and a registry
to look them up by format name.

To add a new format:
1. Subclass BaseFormatter
2. Implement format_nodes()
3. Register via FormatterRegistry.register()
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Type

from org_chart.process.hierarchy.node import OrgChartNode


class BaseFormatter(ABC):
    """
    Abstract base for org chart formatters.

    Each subclass renders a built node list into a specific format.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Short name for this format (e.g., 'json', 'text')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """File extension including dot (e.g., '.json', '.txt')."""

    @abstractmethod
    def format_nodes(self, nodes: list[OrgChartNode]) -> str:
        """
        Render nodes to string.

        Args:
            nodes: Node list from the tree builder or a search

        Returns:
            Formatted string representation
        """

    def write_nodes(self, nodes: list[OrgChartNode], output_path: Path) -> Path:
        """
        Write nodes to a file.

        Args:
            nodes: Node list to render
            output_path: File to write, or a directory to write
                'org_chart' + extension into

        Returns:
            Path to the written file
        """
        if output_path.suffix:
            filepath = output_path
            filepath.parent.mkdir(parents=True, exist_ok=True)
        else:
            output_path.mkdir(parents=True, exist_ok=True)
            filepath = output_path / f"org_chart{self.file_extension}"

        filepath.write_text(self.format_nodes(nodes), encoding='utf-8')
        return filepath


class FormatterRegistry:
    """
    Registry of available formatters.

    Lookup by format name. The command line host uses this to find the
    formatter for --format.
    """

    _formatters: Dict[str, Type[BaseFormatter]] = {}

    @classmethod
    def register(cls, formatter_class: Type[BaseFormatter]) -> None:
        """Register a formatter class."""
        instance = formatter_class()
        cls._formatters[instance.format_name] = formatter_class

    @classmethod
    def get(cls, format_name: str, **kwargs) -> Optional[BaseFormatter]:
        """Get a formatter instance by name, passing kwargs to its constructor."""
        formatter_class = cls._formatters.get(format_name)
        if formatter_class:
            return formatter_class(**kwargs)
        return None

    @classmethod
    def get_available(cls) -> list[str]:
        """Return list of registered format names."""
        return list(cls._formatters.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations (for testing)."""
        cls._formatters.clear()


__all__ = ['BaseFormatter', 'FormatterRegistry']
