"""Abstract interface (port) for markdown rendering."""

from abc import ABC, abstractmethod


class MarkdownRenderer(ABC):
    """Port for markdown → HTML conversion — implemented in the infrastructure layer."""

    @abstractmethod
    def render(self, markup: str) -> str:
        """Convert a markdown document into an HTML fragment."""
        ...
