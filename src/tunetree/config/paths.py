"""Locations of the configuration and log files.

Both live beside the project checkout by default (``config/config.toml`` and
``logs/tunetree.log``), so a clone carries its own settings. The
``TUNETREE_CONFIG_FILE`` environment variable points the configuration
somewhere else.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "TUNETREE_CONFIG_FILE"
CONFIG_FILE_NAME: Final[str] = "config.toml"
LOG_FILE_NAME: Final[str] = "tunetree.log"

_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the closest ancestor of ``start`` that holds a project marker.

    Outside a checkout (for example an installed wheel) the current working
    directory is used instead.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Path of the TOML configuration file.

    Args:
        env: Environment to consult for ``TUNETREE_CONFIG_FILE``.
            Defaults to ``os.environ``.
    """
    environ = os.environ if env is None else env
    override = environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        chosen = Path(override)
    else:
        chosen = _detect_repo_root() / "config" / CONFIG_FILE_NAME
    return chosen.expanduser().resolve()


def default_log_dir() -> Path:
    return _detect_repo_root().joinpath("logs").resolve()


def default_log_file() -> Path:
    return default_log_dir() / LOG_FILE_NAME


__all__ = [
    "CONFIG_ENV_VAR",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
]
