"""Tests for config file loading."""

import json
import logging

import pytest

from tree_export.config import DEFAULT_CONFIG_PATH, NO_CONFIG, load_config, options_from_mapping
from tree_export.options import DEFAULT_OPTIONS, Options


@pytest.fixture
def write_config(tmp_path):
    def _write_config(content):
        path = tmp_path / "config.json"
        if isinstance(content, str):
            path.write_text(content)
        else:
            path.write_text(json.dumps(content))
        return path

    return _write_config


def test_nonexistent_file_returns_defaults(tmp_path):
    options = load_config(tmp_path / "nonexistent.json")
    assert options == DEFAULT_OPTIONS
    assert options == Options(exclude_dirs=(), exclude_files=(), include_files=False, max_depth=None)


def test_no_config_returns_defaults_without_reading(tmp_path, monkeypatch):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "config.json").write_text(json.dumps({"includeFiles": True}))
    monkeypatch.chdir(tmp_path)
    assert load_config(NO_CONFIG) == DEFAULT_OPTIONS


def test_default_path_is_relative_to_working_directory(tmp_path, monkeypatch):
    config_file = tmp_path / DEFAULT_CONFIG_PATH
    config_file.parent.mkdir(parents=True)
    config_file.write_text(json.dumps({"maxDepth": 4}))
    monkeypatch.chdir(tmp_path)
    assert load_config().max_depth == 4


def test_reads_valid_config(write_config):
    path = write_config({"excludeDirs": [".git"], "excludeFiles": ["*.log"], "includeFiles": True, "maxDepth": 3})
    assert load_config(path) == Options(
        exclude_dirs=(".git",), exclude_files=("*.log",), include_files=True, max_depth=3
    )


def test_accepts_string_path(write_config):
    path = write_config({"includeFiles": True})
    assert load_config(str(path)).include_files is True


def test_preserves_max_depth_zero(write_config):
    options = load_config(write_config({"maxDepth": 0}))
    assert options.max_depth == 0
    assert options.max_depth is not None


@pytest.mark.parametrize("value,expected", [(1.0, 1), (0.0, 0)])
def test_integral_float_max_depth_is_a_depth(write_config, value, expected):
    options = load_config(write_config({"maxDepth": value}))
    assert options.max_depth == expected
    assert type(options.max_depth) is int


def test_preserves_explicit_include_files_false(write_config):
    assert load_config(write_config({"includeFiles": False})).include_files is False


def test_null_values_fall_back_to_defaults(write_config):
    path = write_config({"excludeDirs": None, "excludeFiles": None, "includeFiles": None, "maxDepth": None})
    assert load_config(path) == DEFAULT_OPTIONS


def test_missing_fields_filled_with_defaults(write_config):
    options = load_config(write_config({"includeFiles": True}))
    assert options.include_files is True
    assert options.exclude_dirs == ()
    assert options.exclude_files == ()
    assert options.max_depth is None


def test_malformed_json_returns_defaults(write_config):
    assert load_config(write_config("not valid json {{{")) == DEFAULT_OPTIONS


def test_empty_file_returns_defaults(write_config):
    assert load_config(write_config("")) == DEFAULT_OPTIONS


@pytest.mark.parametrize("content", [[1, 2, 3], "a string", 42, None])
def test_non_object_top_level_returns_defaults(write_config, content):
    assert load_config(write_config(json.dumps(content))) == DEFAULT_OPTIONS


def test_directory_as_config_path_returns_defaults(tmp_path):
    assert load_config(tmp_path) == DEFAULT_OPTIONS


def test_unknown_keys_are_ignored(write_config):
    assert load_config(write_config({"colour": "always", "maxDepth": 1})).max_depth == 1


@pytest.mark.parametrize(
    "config,field",
    [
        ({"maxDepth": "3"}, "max_depth"),
        ({"maxDepth": -1}, "max_depth"),
        ({"maxDepth": 1.5}, "max_depth"),
        ({"maxDepth": True}, "max_depth"),
        ({"includeFiles": "yes"}, "include_files"),
        ({"excludeDirs": "node_modules"}, "exclude_dirs"),
        ({"excludeFiles": ["*.log", 3]}, "exclude_files"),
    ],
)
def test_mistyped_key_falls_back_to_its_default(config, field):
    options = options_from_mapping(config)
    assert getattr(options, field) == getattr(DEFAULT_OPTIONS, field)


def test_mistyped_key_keeps_other_keys():
    options = options_from_mapping({"maxDepth": "deep", "includeFiles": True})
    assert options.max_depth is None
    assert options.include_files is True


def test_fallback_is_logged_at_debug_level(tmp_path, caplog):
    with caplog.at_level(logging.DEBUG, logger="tree_export.config"):
        load_config(tmp_path / "missing.json")
    assert any("missing.json" in record.getMessage() for record in caplog.records)
    assert all(record.levelno == logging.DEBUG for record in caplog.records)
