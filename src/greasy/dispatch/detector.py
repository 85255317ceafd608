"""Upward search for the nearest project marker."""

import os
from pathlib import Path
from typing import Optional, Sequence

from greasy.errors import InvalidStartDirectory, NoProjectFound
from greasy.models.core import Marker, Project
from greasy.utils.paths import DEFAULT_MAX_DEPTH, absolute, iter_ancestors


def validate_start_dir(start_dir: Optional[str]) -> Path:
    """Absolute start directory, or InvalidStartDirectory before any ascent."""
    path = absolute(start_dir)
    if not path.exists():
        raise InvalidStartDirectory(str(path), "does not exist")
    if not path.is_dir():
        raise InvalidStartDirectory(str(path), "not a directory")
    if not os.access(path, os.R_OK | os.X_OK):
        raise InvalidStartDirectory(str(path), "permission denied")
    return path


def match_marker(directory: Path, markers: Sequence[Marker]) -> Optional[Marker]:
    """First marker (in priority order) present as a regular file in directory."""
    for marker in markers:
        if (directory / marker.filename).is_file():
            return marker
    return None


def find_project(
    start_dir: Optional[str],
    markers: Sequence[Marker],
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Project:
    """Walk from start_dir toward the root and return the first marked directory.

    Raises InvalidStartDirectory if start_dir is unusable and NoProjectFound if
    neither it nor any ancestor (within max_depth) holds a marker.
    """
    start = validate_start_dir(start_dir)
    for depth, directory in enumerate(iter_ancestors(start, max_depth)):
        marker = match_marker(directory, markers)
        if marker:
            return Project(marker=marker, root=directory, depth=depth)
    raise NoProjectFound(str(start))
