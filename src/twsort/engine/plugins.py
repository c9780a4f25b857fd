"""Core plugins of the built-in engine.

Each plugin reads its scale from the resolved theme and registers the
matching component or utility classes.
"""

from __future__ import annotations

from typing import Any, Mapping

from twsort.engine.api import PluginAPI
from twsort.engine.base import Plugin

__all__ = ["CORE_PLUGINS", "CORE_PLUGIN_ORDER"]


def _class_name(base: str, key: str) -> str:
    if key == "default":
        return base
    if key.startswith("-"):
        return f"-{base}-{key[1:]}"
    return f"{base}-{key}"


def _flatten_colors(colors: Mapping[str, Any], parent: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in colors.items():
        name = key if not parent else (parent if key == "default" else f"{parent}-{key}")
        if isinstance(value, Mapping):
            flat.update(_flatten_colors(value, name))
        else:
            flat[name] = str(value)
    return flat


def _scale(api: PluginAPI, base: str, scale: Mapping[str, Any], *properties: str) -> dict:
    return {
        f".{api.e(_class_name(base, key))}": {prop: value for prop in properties}
        for key, value in scale.items()
    }


def _static(api: PluginAPI, plugin_id: str, classes: dict[str, dict[str, str]]) -> None:
    api.add_utilities(
        {f".{api.e(name)}": decls for name, decls in classes.items()},
        api.variants(plugin_id),
    )


def container(api: PluginAPI) -> None:
    screens = api.theme("screens", {})
    api.add_components(
        [{".container": {"width": "100%"}}]
        + [
            {f"@media (min-width: {width})": {".container": {"max-width": width}}}
            for width in screens.values()
        ]
    )


def display(api: PluginAPI) -> None:
    _static(api, "display", {
        "block": {"display": "block"},
        "inline-block": {"display": "inline-block"},
        "inline": {"display": "inline"},
        "flex": {"display": "flex"},
        "inline-flex": {"display": "inline-flex"},
        "grid": {"display": "grid"},
        "hidden": {"display": "none"},
    })


def flex_direction(api: PluginAPI) -> None:
    _static(api, "flexDirection", {
        "flex-row": {"flex-direction": "row"},
        "flex-row-reverse": {"flex-direction": "row-reverse"},
        "flex-col": {"flex-direction": "column"},
        "flex-col-reverse": {"flex-direction": "column-reverse"},
    })


def justify_content(api: PluginAPI) -> None:
    _static(api, "justifyContent", {
        "justify-start": {"justify-content": "flex-start"},
        "justify-end": {"justify-content": "flex-end"},
        "justify-center": {"justify-content": "center"},
        "justify-between": {"justify-content": "space-between"},
        "justify-around": {"justify-content": "space-around"},
    })


def align_items(api: PluginAPI) -> None:
    _static(api, "alignItems", {
        "items-start": {"align-items": "flex-start"},
        "items-end": {"align-items": "flex-end"},
        "items-center": {"align-items": "center"},
        "items-baseline": {"align-items": "baseline"},
        "items-stretch": {"align-items": "stretch"},
    })


def _spacing_plugin(plugin_id: str, base: str, prop: str) -> Plugin:
    # all-sides first, then axes, then single sides; each pass over the scale
    passes = [
        [(base, [prop])],
        [(f"{base}y", [f"{prop}-top", f"{prop}-bottom"]), (f"{base}x", [f"{prop}-left", f"{prop}-right"])],
        [
            (f"{base}t", [f"{prop}-top"]),
            (f"{base}r", [f"{prop}-right"]),
            (f"{base}b", [f"{prop}-bottom"]),
            (f"{base}l", [f"{prop}-left"]),
        ],
    ]

    def plugin(api: PluginAPI) -> None:
        scale = api.theme(plugin_id, {})
        utilities: dict[str, dict[str, str]] = {}
        for generators in passes:
            for key, value in scale.items():
                for class_base, properties in generators:
                    utilities.update(_scale(api, class_base, {key: value}, *properties))
        api.add_utilities(utilities, api.variants(plugin_id))

    plugin.__name__ = plugin_id
    return plugin


def _theme_plugin(plugin_id: str, base: str, *properties: str) -> Plugin:
    def plugin(api: PluginAPI) -> None:
        scale = api.theme(plugin_id, {})
        api.add_utilities(_scale(api, base, scale, *properties), api.variants(plugin_id))

    plugin.__name__ = plugin_id
    return plugin


def _color_plugin(plugin_id: str, base: str, prop: str) -> Plugin:
    def plugin(api: PluginAPI) -> None:
        colors = _flatten_colors(api.theme(plugin_id, {}))
        api.add_utilities(_scale(api, base, colors, prop), api.variants(plugin_id))

    plugin.__name__ = plugin_id
    return plugin


def text_align(api: PluginAPI) -> None:
    _static(api, "textAlign", {
        f"text-{align}": {"text-align": align}
        for align in ("left", "center", "right", "justify")
    })


def animation(api: PluginAPI) -> None:
    keyframes = {
        f"@keyframes {name}": frames
        for name, frames in api.theme("keyframes", {}).items()
    }
    utilities = _scale(api, "animate", api.theme("animation", {}), "animation")
    api.add_utilities({**keyframes, **utilities}, api.variants("animation"))


CORE_PLUGINS: dict[str, Plugin] = {
    "container": container,
    "display": display,
    "flexDirection": flex_direction,
    "justifyContent": justify_content,
    "alignItems": align_items,
    "margin": _spacing_plugin("margin", "m", "margin"),
    "padding": _spacing_plugin("padding", "p", "padding"),
    "width": _theme_plugin("width", "w", "width"),
    "height": _theme_plugin("height", "h", "height"),
    "zIndex": _theme_plugin("zIndex", "z", "z-index"),
    "textAlign": text_align,
    "textColor": _color_plugin("textColor", "text", "color"),
    "backgroundColor": _color_plugin("backgroundColor", "bg", "background-color"),
    "borderRadius": _theme_plugin("borderRadius", "rounded", "border-radius"),
    "fontSize": _theme_plugin("fontSize", "text", "font-size"),
    "fontWeight": _theme_plugin("fontWeight", "font", "font-weight"),
    "opacity": _theme_plugin("opacity", "opacity", "opacity"),
    "animation": animation,
}

CORE_PLUGIN_ORDER: tuple[str, ...] = tuple(CORE_PLUGINS)
