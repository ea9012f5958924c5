"""Display management for CLI interface."""

from tunetree.ui.cli.display.tree import LibraryTreeDisplay

__all__ = ["LibraryTreeDisplay"]
