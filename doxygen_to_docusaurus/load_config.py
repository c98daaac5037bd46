"""Logic for loading and merging configuration files."""

from pathlib import Path
from typing import Any

import yaml

from doxygen_to_docusaurus.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "base_url": "/",
    "api_folder": "api",
    "output_folder": "docs/api",
    "main_page_title": "",
    "static_folder": "static",
    "images_folder": "img/doxygen",
    "verbose": False,
    "debug": False,
    "suggest_todo_descriptions": False,
    "render_program_listing": False,
    "render_location": True,
    "skip_kinds": [],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = deep_merge(DEFAULT_CONFIG, {})
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Configuration file not found: {path}"
            raise SystemExit(msg)
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        if not isinstance(user_config, dict):
            msg = f"Configuration file must hold a mapping: {path}"
            raise SystemExit(msg)
        config = deep_merge(config, user_config)
    return config
