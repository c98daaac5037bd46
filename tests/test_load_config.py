"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from doxygen_to_docusaurus.deep_merge import deep_merge
from doxygen_to_docusaurus.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    base = {"arr": [1, 2]}
    update = {"arr": [3, 4]}
    merged = deep_merge(base, update)
    assert merged == {"arr": [3, 4]}


def test_deep_merge_skip_kinds_additive() -> None:
    """Verify that the skip_kinds list is merged additively."""
    base = {"skip_kinds": ["page", "dir"]}
    update = {"skip_kinds": ["dir", "example"]}
    merged = deep_merge(base, update)
    assert merged["skip_kinds"] == ["dir", "example", "page"]


def test_deep_merge_does_not_share_lists() -> None:
    """Verify the merged result never aliases the base lists."""
    base = {"skip_kinds": ["page"]}
    merged = deep_merge(base, {})
    merged["skip_kinds"].append("dir")
    assert base == {"skip_kinds": ["page"]}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config["render_location"] is True
    assert config["api_folder"] == "api"


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "base_url": "/docs/",
        "render_program_listing": True,
        "skip_kinds": ["page"],
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["base_url"] == "/docs/"
    assert loaded["render_program_listing"] is True
    assert loaded["skip_kinds"] == ["page"]
    assert loaded["output_folder"] == "docs/api"  # Default
    assert DEFAULT_CONFIG["skip_kinds"] == []


def test_load_config_empty_file(tmp_path: Path) -> None:
    """Verify that an empty file leaves the defaults untouched."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("")
    assert load_config(str(config_file)) == DEFAULT_CONFIG


def test_load_config_errors(tmp_path: Path) -> None:
    """Verify a missing or non-mapping config file stops the run."""
    with pytest.raises(SystemExit, match="not found"):
        load_config(str(tmp_path / "missing.yml"))

    config_file = tmp_path / "config.yml"
    config_file.write_text("- just\n- a list\n")
    with pytest.raises(SystemExit, match="mapping"):
        load_config(str(config_file))
