"""Marker priority list: which file means which tool.

Order is priority. When one directory holds several markers the earliest entry
wins, so the choice is the same on every run.
"""

import shlex
from typing import Any

from greasy.errors import ConfigError
from greasy.models.core import Marker

DEFAULT_MARKERS: tuple[Marker, ...] = (
    Marker("package.json", ("npm", "run")),
    Marker("Cargo.toml", ("cargo",)),
    Marker("cargo.toml", ("cargo",)),
    Marker("run.sh", ("bash", "./run.sh")),
    Marker("test.sh", ("bash", "./test.sh")),
    Marker("BUILD", ("blaze",)),
)


def parse_command(raw: Any) -> tuple[str, ...]:
    """Accept 'npm run' or ['npm', 'run']."""
    if isinstance(raw, str):
        try:
            parts = shlex.split(raw)
        except ValueError as e:
            raise ConfigError(f"Bad marker command {raw!r}: {e}") from e
    elif isinstance(raw, list) and all(isinstance(p, str) for p in raw):
        parts = list(raw)
    else:
        raise ConfigError(f"Marker command must be a string or list of strings, got {raw!r}")
    if not parts:
        raise ConfigError("Marker command is empty")
    return tuple(parts)


def parse_marker(entry: Any) -> Marker:
    if not isinstance(entry, dict):
        raise ConfigError(f"Marker entry must be a mapping with file/command, got {entry!r}")
    filename = entry.get("file")
    if not isinstance(filename, str) or not filename or "/" in filename:
        raise ConfigError(f"Marker file must be a plain filename, got {filename!r}")
    return Marker(filename, parse_command(entry.get("command")))


def markers_from_config(config: dict) -> list[Marker]:
    """Build the priority list from config, falling back to the built-in list.

    Duplicate filenames keep their first (highest priority) entry.
    """
    entries = config.get("markers")
    if entries is None:
        return list(DEFAULT_MARKERS)
    if not isinstance(entries, list):
        raise ConfigError("`markers` must be a list")

    markers: list[Marker] = []
    seen: set[str] = set()
    for entry in entries:
        marker = parse_marker(entry)
        if marker.filename in seen:
            continue
        seen.add(marker.filename)
        markers.append(marker)
    if not markers:
        raise ConfigError("`markers` is empty; nothing can be detected")
    return markers
