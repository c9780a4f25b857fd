from twsort.index.builder import build_selector_index, plugin_enabled

__all__ = ["build_selector_index", "plugin_enabled"]
