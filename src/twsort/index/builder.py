"""Selector order builder: derive the SelectorIndex from a plugin order."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from twsort.config import GroupPolicy
from twsort.engine.base import StyleEngine
from twsort.engine.catalog import PluginCatalog
from twsort.errors import PluginUnresolvable
from twsort.extract import extract_selectors
from twsort.model.index import SelectorIndex

__all__ = ["build_selector_index", "plugin_enabled"]

logger = logging.getLogger(__name__)


def plugin_enabled(config: Mapping[str, Any], plugin_id: str) -> bool:
    """Check the resolved config's ``corePlugins`` setting for *plugin_id*.

    ``corePlugins`` may be a list of enabled ids or a mapping of
    ``id -> bool``; ids missing from a mapping are enabled.
    """
    core_plugins = config.get("corePlugins")
    if core_plugins is None:
        return True
    if isinstance(core_plugins, Mapping):
        return bool(core_plugins.get(plugin_id, True))
    return plugin_id in core_plugins


def build_selector_index(
    plugin_order: Sequence[str],
    config: Mapping[str, Any],
    *,
    catalog: PluginCatalog,
    engine: StyleEngine,
    group_policy: GroupPolicy = GroupPolicy.COMPONENTS_FIRST,
    sort_within_group: bool = False,
) -> SelectorIndex:
    """Build the canonical selector order for *plugin_order*.

    Each plugin is processed on its own; its component and utility selectors
    are extracted separately and accumulated in plugin order. Plugins that
    cannot be resolved contribute nothing. The accumulated lists are combined
    according to *group_policy*.
    """
    components: list[str] = []
    utilities: list[str] = []
    interleaved: list[str] = []

    for plugin_id in plugin_order:
        if not plugin_enabled(config, plugin_id):
            logger.debug("Skipping disabled plugin %s", plugin_id)
            continue
        try:
            plugin = catalog.load(plugin_id)
            styles = engine.process_plugins([plugin], config)
        except PluginUnresolvable as exc:
            logger.debug("Skipping plugin %s: %s", plugin_id, exc)
            continue

        component_selectors = extract_selectors(styles.components, sort=sort_within_group)
        utility_selectors = extract_selectors(styles.utilities, sort=sort_within_group)
        components.extend(component_selectors)
        utilities.extend(utility_selectors)
        interleaved.extend(sorted(component_selectors))
        interleaved.extend(sorted(utility_selectors))

    assembled = {
        GroupPolicy.COMPONENTS_FIRST: components + utilities,
        GroupPolicy.COMPONENTS_LAST: utilities + components,
        GroupPolicy.AS_IS: interleaved,
    }[group_policy]

    index = SelectorIndex(assembled)
    logger.debug(
        "Built selector index: %d selectors from %d plugins (%s)",
        len(index),
        len(plugin_order),
        group_policy.value,
    )
    return index
