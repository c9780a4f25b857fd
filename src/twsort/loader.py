"""Locate and read the user's style configuration file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from twsort.errors import ConfigError, ConfigNotFound

__all__ = ["CONFIG_FILENAME", "MAX_PARENT_LEVELS", "find_config", "read_config"]

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "tailwind.config.json"
MAX_PARENT_LEVELS = 16


def find_config(start: str | Path | None = None) -> Path:
    """Search *start* and up to MAX_PARENT_LEVELS parents for the config file.

    *start* defaults to the current working directory. Raises
    :class:`ConfigNotFound` when no directory on the way up contains one.
    """
    directory = Path(start).resolve() if start is not None else Path.cwd()
    if directory.is_file():
        directory = directory.parent

    searched: list[Path] = []
    for candidate_dir in [directory, *directory.parents][: MAX_PARENT_LEVELS + 1]:
        candidate = candidate_dir / CONFIG_FILENAME
        searched.append(candidate)
        if candidate.is_file():
            logger.debug("Found config at %s", candidate)
            return candidate

    raise ConfigNotFound(f"Could not find {CONFIG_FILENAME}", searched=searched)


def read_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load a JSON style configuration.

    Without *path* the file is discovered with :func:`find_config`.
    """
    if path is None:
        config_path = find_config()
    else:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigNotFound(f"Config file not found: {config_path}", searched=[config_path])

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}", path=config_path) from exc

    if not isinstance(data, dict):
        raise ConfigError(
            f"Config in {config_path} must be a JSON object, got {type(data).__name__}",
            path=config_path,
        )
    return data
