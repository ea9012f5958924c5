"""Command line argument handling package."""

from tunetree.ui.cli.args.options import BuildArgs
from tunetree.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "BuildArgs"]
