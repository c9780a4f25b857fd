"""Plugin catalog: maps plugin ids to plugin definitions."""

from __future__ import annotations

from typing import Mapping, Sequence

from twsort.engine.base import Plugin
from twsort.errors import PluginUnresolvable

__all__ = ["PluginCatalog", "builtin_catalog"]


class PluginCatalog:
    """Registry of plugins available to the selector order builder.

    The default plugin order is the catalog's declared order when one was
    given, otherwise the sorted list of registered ids.
    """

    def __init__(
        self,
        plugins: Mapping[str, Plugin] | None = None,
        declared_order: Sequence[str] | None = None,
    ) -> None:
        self._plugins: dict[str, Plugin] = dict(plugins or {})
        self._declared_order = list(declared_order) if declared_order is not None else None

    def register(self, plugin_id: str, plugin: Plugin) -> None:
        """Register a plugin. Overwrites any existing plugin with the same id."""
        self._plugins[plugin_id] = plugin

    def ids(self) -> list[str]:
        """Return all registered ids in registration order."""
        return list(self._plugins)

    def default_order(self) -> list[str]:
        if self._declared_order is not None:
            return list(dict.fromkeys(self._declared_order))
        return sorted(self._plugins)

    def load(self, plugin_id: str) -> Plugin:
        """Return the plugin registered as *plugin_id*.

        Raises :class:`PluginUnresolvable` if there is none.
        """
        try:
            return self._plugins[plugin_id]
        except KeyError:
            raise PluginUnresolvable(plugin_id, "not in catalog") from None

    def __contains__(self, plugin_id: object) -> bool:
        return plugin_id in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)


def builtin_catalog() -> PluginCatalog:
    """Return a catalog of the core plugins in framework order."""
    from twsort.engine.plugins import CORE_PLUGIN_ORDER, CORE_PLUGINS

    return PluginCatalog(CORE_PLUGINS, declared_order=CORE_PLUGIN_ORDER)
