"""Style engine protocol and the plugin result type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Protocol, Sequence

from twsort.model.node import StyleNode

# A plugin receives the engine's plugin API and registers styles on it.
Plugin = Callable[[Any], None]


@dataclass(frozen=True)
class PluginStyles:
    """Style trees produced by processing one or more plugins."""

    components: tuple[StyleNode, ...] = ()
    utilities: tuple[StyleNode, ...] = ()


class StyleEngine(Protocol):
    """Generates style-node trees from plugins and a resolved configuration."""

    default_config: Mapping[str, Any]

    def resolve_config(self, configs: Sequence[Mapping[str, Any]]) -> dict[str, Any]: ...

    def process_plugins(
        self, plugins: Sequence[Plugin], config: Mapping[str, Any]
    ) -> PluginStyles: ...
