"""Config loading with layered overrides.

Priority chain: bundled defaults < ~/.config/greasy/config.yaml < nearest .greasy/config.yaml
Deep merge: dicts merge recursively, lists/scalars replace.
"""

import importlib.resources
from pathlib import Path
from typing import Optional

import yaml

from greasy.config.utils import deep_merge, load_yaml
from greasy.utils.paths import find_upward

_loaded_sources: list[str] = []

GLOBAL_CONFIG = Path.home() / ".config" / "greasy" / "config.yaml"
PROJECT_CONFIG = ".greasy/config.yaml"


def _load_defaults() -> dict:
    """Load bundled default config."""
    try:
        files = importlib.resources.files("greasy")
        config_path = files / "defaults" / "config.yaml"
        content = config_path.read_text()
        return yaml.safe_load(content)
    except (FileNotFoundError, TypeError):
        dev_path = Path(__file__).parent.parent / "defaults" / "config.yaml"
        if dev_path.exists():
            with open(dev_path) as f:
                return yaml.safe_load(f)
        raise FileNotFoundError("Could not find defaults/config.yaml")


def find_project_config(start_dir: Optional[Path]) -> Optional[Path]:
    """Nearest .greasy/config.yaml at or above start_dir."""
    if start_dir is None:
        return None
    return find_upward(start_dir, PROJECT_CONFIG)


def load_config(start_dir: Optional[Path] = None) -> dict:
    """Load config with layered overrides: defaults < global < project."""
    global _loaded_sources
    _loaded_sources = []

    result = _load_defaults()
    _loaded_sources.append("defaults")

    global_overrides = load_yaml(GLOBAL_CONFIG)
    if global_overrides:
        result = deep_merge(result, global_overrides)
        _loaded_sources.append(str(GLOBAL_CONFIG))

    project_path = find_project_config(start_dir)
    project_overrides = load_yaml(project_path)
    if project_overrides:
        result = deep_merge(result, project_overrides)
        _loaded_sources.append(str(project_path))

    return result


def get_config_loaded_sources() -> list[str]:
    """Return list of config sources that were loaded (for logging)."""
    return _loaded_sources
