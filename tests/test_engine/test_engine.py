"""Tests for the built-in style engine: config resolution and plugin API."""

import copy

import pytest

from twsort.engine import (
    DEFAULT_CONFIG,
    BuiltinEngine,
    PluginAPI,
    PluginStyles,
    escape_class_name,
    parse_style_object,
    process_plugins,
    resolve_config,
)
from twsort.errors import ConfigError
from twsort.extract import extract_selectors
from twsort.model import NodeKind


# ---------------------------------------------------------------------------
# resolve_config
# ---------------------------------------------------------------------------


class TestResolveConfig:
    def test_defaults_only(self):
        config = resolve_config([{}, DEFAULT_CONFIG])
        assert config["separator"] == ":"
        assert config["prefix"] == ""
        assert config["theme"]["screens"]["md"] == "768px"

    def test_user_top_level_wins(self):
        config = resolve_config([{"separator": "_"}, DEFAULT_CONFIG])
        assert config["separator"] == "_"

    def test_user_theme_key_replaces_default(self):
        config = resolve_config([{"theme": {"zIndex": {"top": "999"}}}, DEFAULT_CONFIG])
        assert config["theme"]["zIndex"] == {"top": "999"}

    def test_callables_follow_overrides(self):
        config = resolve_config([{"theme": {"colors": {"pink": "#f0f"}}}, DEFAULT_CONFIG])
        assert config["theme"]["textColor"] == {"pink": "#f0f"}
        assert config["theme"]["backgroundColor"] == {"pink": "#f0f"}

    def test_extend_merges(self):
        config = resolve_config(
            [{"theme": {"extend": {"zIndex": {"60": "60"}}}}, DEFAULT_CONFIG]
        )
        assert config["theme"]["zIndex"]["60"] == "60"
        assert config["theme"]["zIndex"]["50"] == "50"

    def test_extend_only_key(self):
        config = resolve_config([{"theme": {"extend": {"inset": {"0": "0"}}}}, DEFAULT_CONFIG])
        assert config["theme"]["inset"] == {"0": "0"}

    def test_earlier_extend_wins(self):
        config = resolve_config([
            {"theme": {"extend": {"zIndex": {"60": "user"}}}},
            {"theme": {"zIndex": {}, "extend": {"zIndex": {"60": "default"}}}},
        ])
        assert config["theme"]["zIndex"] == {"60": "user"}

    def test_dotted_theme_reference(self):
        config = resolve_config(
            [{"theme": {"extend": {"accent": lambda theme: theme("colors.gray.500")}}}, DEFAULT_CONFIG]
        )
        assert config["theme"]["accent"] == "#a0aec0"

    def test_missing_reference_uses_default(self):
        config = resolve_config([{"theme": {"x": lambda theme: theme("nope.deep", "fallback")}}])
        assert config["theme"]["x"] == "fallback"

    def test_derived_scales(self):
        theme = resolve_config([{}, DEFAULT_CONFIG])["theme"]
        assert theme["width"]["1/2"] == "50%"
        assert theme["width"]["4"] == "1rem"
        assert theme["margin"]["-4"] == "-1rem"
        assert "-0" not in theme["margin"]
        assert "-auto" not in theme["margin"]

    def test_inputs_not_mutated(self):
        before = copy.deepcopy({k: v for k, v in DEFAULT_CONFIG.items() if k != "theme"})
        zindex_before = dict(DEFAULT_CONFIG["theme"]["zIndex"])
        user = {"theme": {"extend": {"zIndex": {"60": "60"}}}}
        resolved = resolve_config([user, DEFAULT_CONFIG])
        resolved["theme"]["zIndex"]["70"] = "70"
        assert DEFAULT_CONFIG["theme"]["zIndex"] == zindex_before
        assert {k: v for k, v in DEFAULT_CONFIG.items() if k != "theme"} == before
        assert user == {"theme": {"extend": {"zIndex": {"60": "60"}}}}

    def test_circular_reference_raises(self):
        with pytest.raises(ConfigError, match="Circular"):
            resolve_config([{"theme": {"a": lambda t: t("b"), "b": lambda t: t("a")}}])

    def test_non_mapping_raises(self):
        with pytest.raises(ConfigError):
            resolve_config([["not", "a", "mapping"]])

    @pytest.mark.parametrize("user", [
        {"theme": ["x"]},
        {"theme": "dark"},
        {"theme": {"extend": ["x"]}},
    ])
    def test_misshaped_theme_section_raises(self, user):
        with pytest.raises(ConfigError, match="must be a mapping"):
            resolve_config([user, DEFAULT_CONFIG])

    def test_scalar_scale_raises(self):
        with pytest.raises(ConfigError, match="theme.colors"):
            resolve_config([{"theme": {"colors": "red"}}, DEFAULT_CONFIG])

    def test_scalar_scale_from_extend_raises(self):
        with pytest.raises(ConfigError, match="theme.spacing"):
            resolve_config([{"theme": {"extend": {"spacing": "4px"}}}, DEFAULT_CONFIG])

    def test_empty_theme_sections_accepted(self):
        config = resolve_config([{"theme": {"extend": None}}, {"theme": None}, DEFAULT_CONFIG])
        assert config["theme"]["zIndex"]["10"] == "10"


# ---------------------------------------------------------------------------
# parse_style_object / escape_class_name
# ---------------------------------------------------------------------------


class TestParseStyleObject:
    def test_rule_with_declarations(self):
        nodes = parse_style_object({".a": {"color": "red", "margin": 0}})
        assert len(nodes) == 1
        rule = nodes[0]
        assert rule.kind is NodeKind.RULE
        assert rule.selector_text == ".a"
        assert [(d.name, d.value) for d in rule.children] == [("color", "red"), ("margin", "0")]

    def test_at_rule(self):
        nodes = parse_style_object({"@media (min-width: 640px)": {".b": {"x": "y"}}})
        at_rule = nodes[0]
        assert at_rule.kind is NodeKind.AT_RULE
        assert at_rule.name == "media"
        assert at_rule.params == "(min-width: 640px)"
        assert at_rule.children[0].selector_text == ".b"

    def test_keyframes_at_rule(self):
        nodes = parse_style_object({"@keyframes spin": {"to": {"transform": "rotate(360deg)"}}})
        assert nodes[0].name == "keyframes"
        assert nodes[0].params == "spin"

    def test_fallback_values(self):
        nodes = parse_style_object({".a": {"display": ["-webkit-box", "flex"]}})
        assert [d.value for d in nodes[0].children] == ["-webkit-box", "flex"]

    def test_list_of_objects(self):
        nodes = parse_style_object([{".a": {}}, {".b": {}}])
        assert [n.selector_text for n in nodes] == [".a", ".b"]

    def test_string_rejected(self):
        with pytest.raises(TypeError):
            parse_style_object(".a")


class TestEscapeClassName:
    def test_plain(self):
        assert escape_class_name("text-left") == "text-left"

    def test_slash(self):
        assert escape_class_name("w-1/2") == "w-1\\/2"

    def test_colon_and_dot(self):
        assert escape_class_name("md:p-0.5") == "md\\:p-0\\.5"


# ---------------------------------------------------------------------------
# PluginAPI / process_plugins
# ---------------------------------------------------------------------------


class TestPluginAPI:
    def _api(self, **overrides):
        return PluginAPI(resolve_config([overrides, DEFAULT_CONFIG]))

    def test_theme_lookup(self):
        api = self._api()
        assert api.theme("screens.sm") == "640px"
        assert api.theme("screens.xxl", "none") == "none"
        assert api.theme("nothing") is None

    def test_variants(self):
        api = self._api()
        assert api.variants("textColor") == ("responsive", "hover", "focus")
        assert api.variants("unknownPlugin") == ()

    def test_add_utilities_wraps_variants(self):
        api = self._api()
        api.add_utilities({".flex": {"display": "flex"}}, ("responsive", "hover"))
        wrapper = api.utilities[0]
        assert wrapper.kind is NodeKind.AT_RULE
        assert wrapper.name == "variants"
        assert wrapper.params == "responsive, hover"
        assert wrapper.children[0].selector_text == ".flex"

    def test_add_utilities_without_variants(self):
        api = self._api()
        api.add_utilities({".flex": {"display": "flex"}})
        assert api.utilities[0].kind is NodeKind.RULE

    def test_add_components(self):
        api = self._api()
        api.add_components({".btn": {"padding": "1rem"}})
        assert api.components[0].selector_text == ".btn"
        assert api.utilities == []

    def test_prefix_applied(self):
        api = self._api(prefix="tw-")
        api.add_utilities({
            ".flex": {"display": "flex"},
            "@keyframes spin": {"to": {"transform": "rotate(360deg)"}},
        })
        api.add_components([{"@media (min-width: 1px)": {".btn": {}}}])
        assert extract_selectors(api.utilities) == ["tw-flex"]
        assert api.utilities[1].children[0].selector_text == "to"
        assert extract_selectors(api.components) == ["tw-btn"]

    def test_prefix_helper(self):
        api = self._api(prefix="tw-")
        assert api.prefix(".flex") == ".tw-flex"
        assert api.prefix("body") == "body"


class TestProcessPlugins:
    def test_collects_groups(self):
        def plugin(api):
            api.add_components({".btn": {}})
            api.add_utilities({".flex": {}})

        styles = process_plugins([plugin], resolve_config([DEFAULT_CONFIG]))
        assert isinstance(styles, PluginStyles)
        assert extract_selectors(styles.components) == ["btn"]
        assert extract_selectors(styles.utilities) == ["flex"]

    def test_builtin_engine_delegates(self):
        engine = BuiltinEngine()
        config = engine.resolve_config([{"separator": "_"}, engine.default_config])
        assert config["separator"] == "_"
        styles = engine.process_plugins([lambda api: api.add_utilities({".a": {}})], config)
        assert extract_selectors(styles.utilities) == ["a"]
