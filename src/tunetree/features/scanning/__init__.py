"""Public API for the scanning feature."""

from .usecases.find_music_files import find_music_files

__all__ = ["find_music_files"]
