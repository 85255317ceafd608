"""Project dispatcher: find the nearest marker file, run its tool there."""

import time
from typing import Optional, Sequence

from greasy.config import get_config_loaded_sources, load_config
from greasy.dispatch.detector import find_project, match_marker, validate_start_dir
from greasy.dispatch.markers import DEFAULT_MARKERS, markers_from_config
from greasy.dispatch.runner import build_argv, build_env, exit_code_for, run_command
from greasy.errors import ConfigError
from greasy.models.core import Project
from greasy.models.state import RunConfig
from greasy.ui.output import GRAY, NC, YELLOW, flush, log
from greasy.utils.debug import debug_log
from greasy.utils.formatting import fmt_command, fmt_duration
from greasy.utils.paths import DEFAULT_MAX_DEPTH


def extra_path_from_config(settings: dict) -> list[str]:
    """`path` as a list of directory strings; a single string is one entry."""
    extra_path = settings.get("path") or []
    if isinstance(extra_path, str):
        return [extra_path]
    if not isinstance(extra_path, list) or not all(isinstance(p, str) for p in extra_path):
        raise ConfigError(f"`path` must be a string or list of strings, got {extra_path!r}")
    return extra_path


def load_settings(config: RunConfig) -> dict:
    """Layered config for the start directory."""
    settings = load_config(validate_start_dir(config.start_dir))
    if config.verbose:
        overrides = [s for s in get_config_loaded_sources() if s != "defaults"]
        if overrides:
            log(f"Config overrides: {', '.join(overrides)}")
    return settings


def detect(config: RunConfig, settings: Optional[dict] = None) -> Project:
    """Find the project above config.start_dir."""
    start = validate_start_dir(config.start_dir)
    if settings is None:
        settings = load_settings(config)
    markers = markers_from_config(settings)
    max_depth = settings.get("max_depth", DEFAULT_MAX_DEPTH)
    if not isinstance(max_depth, int) or isinstance(max_depth, bool) or max_depth < 0:
        raise ConfigError(f"`max_depth` must be a non-negative integer, got {max_depth!r}")
    debug_log(
        config,
        "detect",
        {
            "start_dir": str(start),
            "markers": [m.filename for m in markers],
            "max_depth": max_depth,
        },
    )
    project = find_project(str(start), markers, max_depth)
    debug_log(
        config,
        "detected",
        {"marker": project.marker.filename, "root": str(project.root), "depth": project.depth},
    )
    return project


def dispatch(config: RunConfig, args: Sequence[str], settings: Optional[dict] = None) -> int:
    """Find the project above config.start_dir and run its tool with args.

    Returns the delegated command's exit code (0 in dry-run mode).
    """
    if settings is None:
        settings = load_settings(config)
    project = detect(config, settings)
    argv = build_argv(project, args)

    log(f"{project.marker.display} @ {project.root}")
    if config.dry_run:
        log(f"{YELLOW}DRY RUN{NC} would run: {fmt_command(argv)}")
        return 0

    env = build_env(extra_path_from_config(settings))
    debug_log(config, "run", {"argv": argv, "cwd": str(project.root)})
    flush()
    started = time.time()
    code = run_command(argv, project.root, env)
    debug_log(config, "exit", {"code": code})
    if config.verbose:
        log(f"{GRAY}exit {code} after {fmt_duration(time.time() - started)}{NC}")
    return code


__all__ = [
    "DEFAULT_MARKERS",
    "build_argv",
    "build_env",
    "detect",
    "dispatch",
    "exit_code_for",
    "extra_path_from_config",
    "find_project",
    "load_settings",
    "markers_from_config",
    "match_marker",
    "run_command",
    "validate_start_dir",
]
