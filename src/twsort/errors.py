"""Error hierarchy for twsort."""

from __future__ import annotations

from pathlib import Path


class TwsortError(Exception):
    """Base error for all twsort errors."""


class ConfigNotFound(TwsortError):
    """Raised when no style configuration can be located."""

    def __init__(self, message: str, *, searched: list[Path] | None = None) -> None:
        super().__init__(message)
        self.searched = searched or []


class ConfigError(TwsortError):
    """Raised when a configuration file exists but cannot be used."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class PluginUnresolvable(TwsortError):
    """Raised when a plugin id cannot be loaded or processed."""

    def __init__(self, plugin_id: str, reason: str = "") -> None:
        self.plugin_id = plugin_id
        self.reason = reason
        message = f"Plugin {plugin_id!r} cannot be resolved"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
