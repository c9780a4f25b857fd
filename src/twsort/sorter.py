"""Class list sorting: the comparator and the ClassSorter facade."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Sequence, Union

from twsort.config import DEFAULT_MEDIA_QUERIES, SorterOptions, UnknownPosition
from twsort.engine.api import BuiltinEngine
from twsort.engine.base import StyleEngine
from twsort.engine.catalog import PluginCatalog, builtin_catalog
from twsort.index.builder import build_selector_index
from twsort.loader import read_config
from twsort.model.index import SelectorIndex

__all__ = [
    "ClassParts",
    "ClassSorter",
    "classes_from_string",
    "sort_class_list",
    "split_class",
]

logger = logging.getLogger(__name__)

PluginOrder = Union[Sequence[str], Callable[[list[str]], Iterable[str]]]


@dataclass(frozen=True)
class ClassParts:
    """A class token split into its base class and optional prefix."""

    base: str
    prefix: str | None = None


def split_class(token: str, separator: str = ":") -> ClassParts:
    """Split *token* into prefix and base.

    With several separators (``md:hover:bg-red``) the prefix is the first
    segment and the base is the last one; the segments in between are
    ignored for ranking.
    """
    if separator not in token:
        return ClassParts(base=token)
    parts = token.split(separator)
    return ClassParts(base=parts[-1], prefix=parts[0])


def classes_from_string(classes: str) -> list[str]:
    """Split a whitespace-delimited class string, dropping empty tokens."""
    return classes.split()


def sort_class_list(
    classes: str | Iterable[str],
    index: SelectorIndex,
    media_queries: Sequence[str] = DEFAULT_MEDIA_QUERIES,
    unknown_position: UnknownPosition = UnknownPosition.START,
    separator: str = ":",
) -> list[str]:
    """Return *classes* in canonical order.

    Keys, in priority: unknown classes at *unknown_position*, classes without
    a breakpoint prefix before those with one, breakpoint rank, then rank in
    *index*. The sort is stable, so ties keep their input order.
    """
    tokens = classes_from_string(classes) if isinstance(classes, str) else list(classes)
    breakpoints = {name: rank for rank, name in enumerate(media_queries)}
    unknown_first = unknown_position is UnknownPosition.START

    def key(token: str) -> tuple[int, int, int, int]:
        parts = split_class(token, separator)
        base_rank = index.position(parts.base)
        mq_rank = breakpoints.get(parts.prefix, -1) if parts.prefix is not None else -1
        if base_rank == -1:
            unknown_key = 0 if unknown_first else 1
        else:
            unknown_key = 1 if unknown_first else 0
        return (unknown_key, 1 if mq_rank != -1 else 0, mq_rank, base_rank)

    return sorted(tokens, key=key)


class ClassSorter:
    """Sorts class lists by the order the style engine registers them.

    Owns the resolved configuration, the plugin order and the selector
    index. The index is rebuilt whenever the plugin order or the
    configuration changes.
    """

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        *,
        options: SorterOptions | None = None,
        catalog: PluginCatalog | None = None,
        engine: StyleEngine | None = None,
        plugin_order: PluginOrder | None = None,
    ) -> None:
        if config is None:
            config = read_config()
        self._options = options or SorterOptions()
        self._catalog = catalog or builtin_catalog()
        self._engine = engine or BuiltinEngine()
        self._config = self._resolve(config)
        self._plugin_order = self._catalog.default_order()
        if plugin_order is not None:
            self._plugin_order = self._apply_order(plugin_order)
        self._index = self._build_index()

    @staticmethod
    def read_config(path: str | Path | None = None) -> dict[str, Any]:
        return read_config(path)

    @staticmethod
    def classes_from_string(classes: str) -> list[str]:
        return classes_from_string(classes)

    @property
    def options(self) -> SorterOptions:
        return self._options

    @property
    def config(self) -> Mapping[str, Any]:
        return self._config

    @property
    def index(self) -> SelectorIndex:
        return self._index

    @property
    def plugin_order(self) -> list[str]:
        return list(self._plugin_order)

    @property
    def separator(self) -> str:
        return self._options.separator or self._config.get("separator") or ":"

    def set_plugin_order(self, order: PluginOrder) -> None:
        """Replace the plugin order and rebuild the index.

        *order* is either a sequence of plugin ids or a function receiving
        the catalog's default order and returning the new one.
        """
        self._plugin_order = self._apply_order(order)
        self._index = self._build_index()

    def reconfigure(self, config: Mapping[str, Any]) -> None:
        """Resolve a new user configuration and rebuild the index."""
        self._config = self._resolve(config)
        self._index = self._build_index()

    def sort_class_list(self, classes: str | Iterable[str]) -> list[str]:
        return sort_class_list(
            classes,
            self._index,
            media_queries=self._options.media_queries,
            unknown_position=self._options.unknown_position,
            separator=self.separator,
        )

    def _resolve(self, config: Mapping[str, Any]) -> dict[str, Any]:
        return self._engine.resolve_config([config, self._engine.default_config])

    def _apply_order(self, order: PluginOrder) -> list[str]:
        if callable(order):
            order = order(self._catalog.default_order())
        return list(dict.fromkeys(order))

    def _build_index(self) -> SelectorIndex:
        logger.debug("Building selector index for %d plugins", len(self._plugin_order))
        return build_selector_index(
            self._plugin_order,
            self._config,
            catalog=self._catalog,
            engine=self._engine,
            group_policy=self._options.group_policy,
            sort_within_group=self._options.sort_within_group,
        )
