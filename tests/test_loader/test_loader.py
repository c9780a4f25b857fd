"""Tests for configuration discovery and loading."""

import json

import pytest

from twsort.errors import ConfigError, ConfigNotFound
from twsort.loader import CONFIG_FILENAME, MAX_PARENT_LEVELS, find_config, read_config


# ---------------------------------------------------------------------------
# find_config
# ---------------------------------------------------------------------------


class TestFindConfig:
    def test_in_start_directory(self, tmp_path):
        config = tmp_path / CONFIG_FILENAME
        config.write_text("{}")
        assert find_config(tmp_path) == config.resolve()

    def test_in_parent_directory(self, tmp_path):
        config = tmp_path / CONFIG_FILENAME
        config.write_text("{}")
        nested = tmp_path / "src" / "components"
        nested.mkdir(parents=True)
        assert find_config(nested) == config.resolve()

    def test_nearest_wins(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("{}")
        nested = tmp_path / "app"
        nested.mkdir()
        (nested / CONFIG_FILENAME).write_text("{}")
        assert find_config(nested) == (nested / CONFIG_FILENAME).resolve()

    def test_start_may_be_a_file(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("{}")
        page = tmp_path / "index.html"
        page.write_text("<div></div>")
        assert find_config(page) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        (tmp_path / CONFIG_FILENAME).write_text("{}")
        monkeypatch.chdir(tmp_path)
        assert find_config().name == CONFIG_FILENAME

    def test_search_depth_is_limited(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("{}")
        deep = tmp_path.joinpath(*["d"] * (MAX_PARENT_LEVELS + 1))
        deep.mkdir(parents=True)
        with pytest.raises(ConfigNotFound) as exc_info:
            find_config(deep)
        assert len(exc_info.value.searched) == MAX_PARENT_LEVELS + 1

    def test_found_at_search_limit(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("{}")
        deep = tmp_path.joinpath(*["d"] * MAX_PARENT_LEVELS)
        deep.mkdir(parents=True)
        assert find_config(deep) == (tmp_path / CONFIG_FILENAME).resolve()


# ---------------------------------------------------------------------------
# read_config
# ---------------------------------------------------------------------------


class TestReadConfig:
    def test_explicit_path(self, tmp_path):
        path = tmp_path / "my.json"
        path.write_text(json.dumps({"theme": {"extend": {}}}))
        assert read_config(path) == {"theme": {"extend": {}}}

    def test_string_path(self, tmp_path):
        path = tmp_path / "my.json"
        path.write_text("{}")
        assert read_config(str(path)) == {}

    def test_discovered(self, tmp_path, monkeypatch):
        (tmp_path / CONFIG_FILENAME).write_text(json.dumps({"prefix": "tw-"}))
        monkeypatch.chdir(tmp_path)
        assert read_config() == {"prefix": "tw-"}

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(ConfigNotFound, match="not found"):
            read_config(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError) as exc_info:
            read_config(path)
        assert exc_info.value.path == path

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="JSON object"):
            read_config(path)
