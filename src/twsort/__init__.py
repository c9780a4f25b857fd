"""twsort: canonical ordering for utility CSS class lists."""

from __future__ import annotations

__version__ = "0.1.0"

from twsort.config import (  # noqa: E402
    DEFAULT_MEDIA_QUERIES,
    GroupPolicy,
    SorterOptions,
    UnknownPosition,
)
from twsort.errors import (  # noqa: E402
    ConfigError,
    ConfigNotFound,
    PluginUnresolvable,
    TwsortError,
)
from twsort.sorter import ClassSorter, sort_class_list, split_class  # noqa: E402

__all__ = [
    "__version__",
    "ClassSorter",
    "ConfigError",
    "ConfigNotFound",
    "DEFAULT_MEDIA_QUERIES",
    "GroupPolicy",
    "PluginUnresolvable",
    "SorterOptions",
    "TwsortError",
    "UnknownPosition",
    "sort_class_list",
    "split_class",
]
