"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from rustdoc_comments.deep_merge import deep_merge
from rustdoc_comments.load_index import FORMAT_TOOLCHAIN, FORMAT_VERSION

DEFAULT_CONFIG: dict[str, Any] = {
    "build": {
        "manifest_path": "Cargo.toml",
        "toolchain": FORMAT_TOOLCHAIN,
        "all_features": True,
    },
    "index": {
        "format_version": FORMAT_VERSION,
    },
    "output": {
        "with_names": False,
        "public_only": True,
    },
    "queries": [],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
