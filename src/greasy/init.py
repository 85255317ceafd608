"""greasy init - write a starter .greasy/config.yaml for this project."""

from pathlib import Path

import yaml

from greasy.dispatch.markers import DEFAULT_MARKERS
from greasy.ui.output import GRAY, NC, error, log, success, warn

GREASY_DIR = Path(".greasy")
CONFIG_FILE = GREASY_DIR / "config.yaml"

HEADER = """\
# greasy project config. Overrides ~/.config/greasy/config.yaml and the
# bundled defaults. Lists replace: this `markers` list is the whole priority
# list for this project (first match wins).
"""


def default_project_config() -> dict:
    return {
        "markers": [
            {"file": m.filename, "command": " ".join(m.command)} for m in DEFAULT_MARKERS
        ],
    }


def run_init(directory: Path = Path("."), force: bool = False) -> bool:
    """Write .greasy/config.yaml under directory. Returns False if it already exists."""
    config_path = directory / CONFIG_FILE
    if config_path.exists():
        if not force:
            error(f"{config_path} already exists (use --force to overwrite)")
            return False
        warn(f"Overwriting {config_path}")

    config_path.parent.mkdir(parents=True, exist_ok=True)
    body = yaml.safe_dump(default_project_config(), sort_keys=False, default_flow_style=False)
    config_path.write_text(HEADER + "\n" + body)
    success(f"Wrote {config_path}")
    log(f"{GRAY}Edit the markers list to change what this project runs.{NC}")
    return True
