"""Command line interface package."""

from tunetree.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
