"""Default style configuration and configuration resolution.

Theme values may be callables taking a ``theme(path, default=None)`` lookup,
which lets one scale derive from another::

    {"theme": {"textColor": lambda theme: theme("colors")}}

They are evaluated after all configs are merged, so a user override of
``colors`` also changes ``textColor``.
"""

from __future__ import annotations

import copy
from typing import Any, Mapping, Sequence

from twsort.errors import ConfigError

__all__ = ["DEFAULT_CONFIG", "resolve_config", "negative"]


def negative(scale: Mapping[str, str]) -> dict[str, str]:
    """Return ``-key: -value`` entries for every non-zero entry of *scale*."""
    return {
        f"-{key}": f"-{value}"
        for key, value in scale.items()
        if value not in ("0", "auto") and not str(value).startswith("-")
    }


DEFAULT_CONFIG: dict[str, Any] = {
    "prefix": "",
    "separator": ":",
    "theme": {
        "screens": {"sm": "640px", "md": "768px", "lg": "1024px", "xl": "1280px"},
        "colors": {
            "transparent": "transparent",
            "black": "#000",
            "white": "#fff",
            "gray": {"100": "#f7fafc", "500": "#a0aec0", "900": "#1a202c"},
            "red": {"100": "#fff5f5", "500": "#f56565", "900": "#742a2a"},
            "blue": {"100": "#ebf8ff", "500": "#4299e1", "900": "#2a4365"},
        },
        "spacing": {
            "px": "1px",
            "0": "0",
            "1": "0.25rem",
            "2": "0.5rem",
            "4": "1rem",
            "8": "2rem",
        },
        "zIndex": {
            "auto": "auto",
            "0": "0",
            "10": "10",
            "20": "20",
            "30": "30",
            "40": "40",
            "50": "50",
        },
        "borderRadius": {
            "none": "0",
            "sm": "0.125rem",
            "default": "0.25rem",
            "lg": "0.5rem",
            "full": "9999px",
        },
        "fontSize": {
            "xs": "0.75rem",
            "sm": "0.875rem",
            "base": "1rem",
            "lg": "1.125rem",
            "xl": "1.25rem",
        },
        "fontWeight": {"normal": "400", "medium": "500", "bold": "700"},
        "opacity": {"0": "0", "25": "0.25", "50": "0.5", "75": "0.75", "100": "1"},
        "width": lambda theme: {
            "auto": "auto",
            **theme("spacing", {}),
            "1/2": "50%",
            "full": "100%",
            "screen": "100vw",
        },
        "height": lambda theme: {
            "auto": "auto",
            **theme("spacing", {}),
            "full": "100%",
            "screen": "100vh",
        },
        "margin": lambda theme: {
            "auto": "auto",
            **theme("spacing", {}),
            **negative(theme("spacing", {})),
        },
        "padding": lambda theme: theme("spacing", {}),
        "textColor": lambda theme: theme("colors", {}),
        "backgroundColor": lambda theme: theme("colors", {}),
        "keyframes": {
            "spin": {"to": {"transform": "rotate(360deg)"}},
            "ping": {"75%, 100%": {"transform": "scale(2)", "opacity": "0"}},
            "pulse": {"50%": {"opacity": ".5"}},
        },
        "animation": {
            "none": "none",
            "spin": "spin 1s linear infinite",
            "ping": "ping 1s cubic-bezier(0, 0, 0.2, 1) infinite",
            "pulse": "pulse 2s cubic-bezier(0.4, 0, 0.6, 1) infinite",
        },
    },
    "variants": {
        "display": ["responsive"],
        "flexDirection": ["responsive"],
        "justifyContent": ["responsive"],
        "alignItems": ["responsive"],
        "margin": ["responsive"],
        "padding": ["responsive"],
        "width": ["responsive"],
        "height": ["responsive"],
        "zIndex": ["responsive"],
        "textAlign": ["responsive"],
        "textColor": ["responsive", "hover", "focus"],
        "backgroundColor": ["responsive", "hover", "focus"],
        "borderRadius": ["responsive"],
        "fontSize": ["responsive"],
        "fontWeight": ["responsive", "hover", "focus"],
        "opacity": ["responsive", "hover", "focus"],
        "animation": ["responsive"],
    },
    "corePlugins": {},
}


# Theme keys the core plugins read as scales.
SCALE_KEYS = tuple(DEFAULT_CONFIG["theme"])


def _section(value: Any, name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"{name} must be a mapping, got {type(value).__name__}")
    return value


class _ThemeResolver:
    """Evaluates merged theme keys, following ``theme(...)`` references."""

    def __init__(self, base: Mapping[str, Any], extends: Sequence[Mapping[str, Any]]) -> None:
        self._base = base
        self._extends = extends
        self._resolved: dict[str, Any] = {}
        self._resolving: set[str] = set()

    def keys(self) -> list[str]:
        keys = list(self._base)
        for extend in self._extends:
            keys.extend(k for k in extend if k not in keys)
        return keys

    def lookup(self, path: str, default: Any = None) -> Any:
        key, _, rest = path.partition(".")
        value = self.resolve(key)
        for part in rest.split(".") if rest else ():
            if not isinstance(value, Mapping) or part not in value:
                return default
            value = value[part]
        return default if value is None else value

    def resolve(self, key: str) -> Any:
        if key in self._resolved:
            return self._resolved[key]
        if key in self._resolving:
            raise ConfigError(f"Circular theme reference involving {key!r}")
        self._resolving.add(key)
        try:
            value = self._evaluate(self._base.get(key))
            for extend in self._extends:
                if key not in extend:
                    continue
                extra = self._evaluate(extend[key])
                if isinstance(value, Mapping) and isinstance(extra, Mapping):
                    value = {**value, **extra}
                else:
                    value = extra
        finally:
            self._resolving.discard(key)
        if key in SCALE_KEYS:
            _section(value, f"theme.{key}")
        self._resolved[key] = value
        return value

    def _evaluate(self, value: Any) -> Any:
        if callable(value):
            value = value(self.lookup)
        return copy.deepcopy(value)


def resolve_config(configs: Sequence[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge *configs* into one resolved configuration.

    Earlier configs take precedence: for every top-level key and every theme
    key the first config defining it wins. ``theme.extend`` sections of all
    configs are then merged on top, later configs first so that earlier ones
    win on conflicts. Inputs are never mutated.
    """
    resolved: dict[str, Any] = {}
    base_theme: dict[str, Any] = {}
    extends: list[Mapping[str, Any]] = []

    for config in configs:
        if not isinstance(config, Mapping):
            raise ConfigError(f"Configuration must be a mapping, got {type(config).__name__}")
        for key, value in config.items():
            if key != "theme" and key not in resolved:
                resolved[key] = copy.deepcopy(value)
        theme = _section(config.get("theme"), "theme")
        for key, value in theme.items():
            if key != "extend":
                base_theme.setdefault(key, value)
        extends.append(_section(theme.get("extend"), "theme.extend"))

    resolver = _ThemeResolver(base_theme, list(reversed(extends)))
    resolved["theme"] = {key: resolver.resolve(key) for key in resolver.keys()}
    return resolved

