"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from docxref.deep_merge import deep_merge
from docxref.load_config import DEFAULT_CONFIG, compute_config_hash, load_config
from docxref.package_graph import PackageGraph


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    assert deep_merge(base, update) == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    assert deep_merge({"arr": [1, 2]}, {"arr": [3]}) == {"arr": [3]}


def test_deep_merge_ignore_additive() -> None:
    """Verify that the ignore list is merged additively."""
    merged = deep_merge({"ignore": ["B", "A"]}, {"ignore": ["C", "B"]})
    assert merged["ignore"] == ["A", "B", "C"]


def test_compute_config_hash_stability() -> None:
    """Verify that config hash is stable regardless of key order."""
    config1 = {"b": 2, "a": 1, "nested": {"y": 2, "x": 1}}
    config2 = {"a": 1, "b": 2, "nested": {"x": 1, "y": 2}}
    assert compute_config_hash(config1) == compute_config_hash(config2)
    assert compute_config_hash(config1) != compute_config_hash({"a": 1})


def test_load_config_defaults() -> None:
    """Verify that defaults are returned as an independent copy."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    config["references"]["ignore"].append("X")
    assert DEFAULT_CONFIG["references"]["ignore"] == []


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.safe_dump(
            {
                "output": {"api_root": "/reference"},
                "references": {"ignore": ["dynamic"]},
                "visibility": {"include_private": True},
            }
        ),
        encoding="utf-8",
    )
    config = load_config(str(config_file))

    assert config["output"]["api_root"] == "/reference"
    assert config["output"]["code_language"] == "dart"
    assert config["references"]["ignore"] == ["dynamic"]
    assert config["references"]["report_unresolved"] is True

    graph = PackageGraph(config)
    assert graph.api_root == "/reference"
    assert graph.include_private


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "absent.yml")) == DEFAULT_CONFIG
