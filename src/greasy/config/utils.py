"""Shared utilities for config loading."""

from pathlib import Path
from typing import Optional

import yaml

from greasy.errors import ConfigError


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base. Dicts merge, lists/scalars replace."""
    merged = base.copy()
    for key, val in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(val, dict):
            merged[key] = deep_merge(merged[key], val)
        else:
            merged[key] = val
    return merged


def load_yaml(path: Optional[Path]) -> Optional[dict]:
    """Load a config file. None if missing, empty or not a mapping.

    Unparseable YAML raises ConfigError naming the file, so a typo in a
    project config is reported instead of silently falling back to defaults.
    """
    if path is None or not path.is_file():
        return None
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e
    return data if isinstance(data, dict) else None
