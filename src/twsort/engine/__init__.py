"""Built-in style engine: configuration, plugin API and core plugins."""

from twsort.engine.api import (
    BuiltinEngine,
    PluginAPI,
    escape_class_name,
    parse_style_object,
    process_plugins,
)
from twsort.engine.base import Plugin, PluginStyles, StyleEngine
from twsort.engine.catalog import PluginCatalog, builtin_catalog
from twsort.engine.config import DEFAULT_CONFIG, resolve_config

__all__ = [
    "BuiltinEngine",
    "DEFAULT_CONFIG",
    "Plugin",
    "PluginAPI",
    "PluginCatalog",
    "PluginStyles",
    "StyleEngine",
    "builtin_catalog",
    "escape_class_name",
    "parse_style_object",
    "process_plugins",
    "resolve_config",
]
