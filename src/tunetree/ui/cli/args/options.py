"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final


@final
@dataclass(slots=True)
class BuildArgs:
    """Validated arguments for building and printing a library."""

    library_path: Path
    quiet: bool


__all__ = ["BuildArgs"]
