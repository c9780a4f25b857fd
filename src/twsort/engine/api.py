"""Plugin API and the built-in style engine.

Plugins describe styles as nested mappings (CSS-in-JS style)::

    {
        ".text-left": {"text-align": "left"},
        "@media (min-width: 640px)": {".container": {"max-width": "640px"}},
    }

Keys starting with ``@`` become at-rules, mapping values become rules and
scalar values become declarations.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Sequence

from twsort.engine.base import Plugin, PluginStyles
from twsort.engine.config import DEFAULT_CONFIG, resolve_config
from twsort.model.node import StyleNode

__all__ = [
    "BuiltinEngine",
    "PluginAPI",
    "escape_class_name",
    "parse_style_object",
    "process_plugins",
]

StyleObject = Mapping[str, Any]

_UNSAFE_CHAR_RE = re.compile(r"([^A-Za-z0-9_-])")


def escape_class_name(class_name: str) -> str:
    """Backslash-escape characters that are not valid in a bare class selector."""
    return _UNSAFE_CHAR_RE.sub(r"\\\1", class_name)


def parse_style_object(obj: StyleObject | Sequence[StyleObject]) -> tuple[StyleNode, ...]:
    """Convert a style mapping (or a list of them) into style nodes."""
    if isinstance(obj, (str, bytes)):
        raise TypeError(f"Expected a style mapping, got {obj!r}")
    if not isinstance(obj, Mapping):
        return tuple(node for item in obj for node in parse_style_object(item))

    nodes: list[StyleNode] = []
    for key, value in obj.items():
        if key.startswith("@"):
            name, _, params = key[1:].partition(" ")
            children = parse_style_object(value) if isinstance(value, Mapping) else ()
            nodes.append(StyleNode.at_rule(name, params.strip(), children))
        elif isinstance(value, Mapping):
            nodes.append(StyleNode.rule(key, parse_style_object(value)))
        elif isinstance(value, (list, tuple)):
            # fallback values: one declaration per entry
            nodes.extend(StyleNode.declaration(key, str(v)) for v in value)
        else:
            nodes.append(StyleNode.declaration(key, str(value)))
    return tuple(nodes)


class PluginAPI:
    """The object handed to each plugin while it runs."""

    def __init__(self, config: Mapping[str, Any]) -> None:
        self.config = config
        self.components: list[StyleNode] = []
        self.utilities: list[StyleNode] = []

    def theme(self, path: str, default: Any = None) -> Any:
        """Look up a dotted *path* in the resolved theme."""
        value: Any = self.config.get("theme", {})
        for part in path.split("."):
            if not isinstance(value, Mapping) or part not in value:
                return default
            value = value[part]
        return value

    def variants(self, key: str, default: Sequence[str] = ()) -> tuple[str, ...]:
        return tuple(self.config.get("variants", {}).get(key, default))

    def e(self, class_name: str) -> str:
        return escape_class_name(class_name)

    def prefix(self, selector: str) -> str:
        """Apply the configured class prefix to a ``.class`` selector."""
        prefix = self.config.get("prefix") or ""
        if prefix and selector.startswith("."):
            return f".{prefix}{selector[1:]}"
        return selector

    def add_components(self, components: StyleObject | Sequence[StyleObject]) -> None:
        self.components.extend(parse_style_object(self._prefixed(components)))

    def add_utilities(
        self,
        utilities: StyleObject | Sequence[StyleObject],
        variants: Sequence[str] = (),
    ) -> None:
        nodes = parse_style_object(self._prefixed(utilities))
        if variants:
            nodes = (StyleNode.at_rule("variants", ", ".join(variants), nodes),)
        self.utilities.extend(nodes)

    def _prefixed(self, obj: Any) -> Any:
        if not self.config.get("prefix"):
            return obj
        if not isinstance(obj, Mapping):
            return [self._prefixed(item) for item in obj]
        result: dict[str, Any] = {}
        for key, value in obj.items():
            if key.startswith("@") and isinstance(value, Mapping):
                result[key] = value if key.startswith("@keyframes") else self._prefixed(value)
            elif isinstance(value, Mapping):
                result[self.prefix(key)] = value
            else:
                result[key] = value
        return result


def process_plugins(plugins: Sequence[Plugin], config: Mapping[str, Any]) -> PluginStyles:
    """Run *plugins* against *config* and collect the styles they register."""
    api = PluginAPI(config)
    for plugin in plugins:
        plugin(api)
    return PluginStyles(components=tuple(api.components), utilities=tuple(api.utilities))


class BuiltinEngine:
    """The bundled reference engine: plugin API plus default configuration."""

    default_config: Mapping[str, Any] = DEFAULT_CONFIG

    def resolve_config(self, configs: Sequence[Mapping[str, Any]]) -> dict[str, Any]:
        return resolve_config(configs)

    def process_plugins(
        self, plugins: Sequence[Plugin], config: Mapping[str, Any]
    ) -> PluginStyles:
        return process_plugins(plugins, config)
