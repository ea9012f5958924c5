"""Configuration management for tunetree."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from tunetree.config.paths import default_config_path
from tunetree.platform.logging import logger


def _path_field() -> Any:
    """Optional path setting; strings read from TOML are coerced in ``__post_init__``."""
    return field(default=None, metadata={"path": True})


@dataclass
class Config:
    """Settings read from the TOML configuration file."""

    # Library root scanned when no path is given on the command line
    library_path: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar[Config | None] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        for path_field in (f for f in fields(self) if f.metadata.get("path")):
            raw = getattr(self, path_field.name)
            if isinstance(raw, str):
                # Blank means "not configured"
                coerced = Path(raw).expanduser() if raw.strip() else None
                setattr(self, path_field.name, coerced)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Read the configuration, caching it for later calls.

        Args:
            config_file: Explicit TOML file to read. Defaults to
                ``default_config_path()``.

        Returns:
            Config: Loaded configuration object, or defaults when the file
            does not exist.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        target = config_file or default_config_path()

        if not target.exists():
            logger.debug("No configuration file at %s; using defaults", target)
            instance = cls()
        else:
            try:
                with open(target, "rb") as f:
                    raw = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.debug("Failed to load configuration from %s: %s", target, e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(key for key in raw if key not in known)
            if unknown:
                logger.warning(
                    "Ignoring unknown configuration keys in %s: %s",
                    target,
                    ", ".join(unknown),
                )
            instance = cls(**{key: value for key, value in raw.items() if key in known})
            logger.debug("Configuration loaded from %s", target)

        cls._instance = instance
        cls._loaded_from = target
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config"]
