"""Path helpers for upward directory walks.

Walks are lexical: each step takes the string parent of an absolute path, the
way a shell's `cd ..` does, so the path gets strictly shorter and symlinks can
never send the walk in a circle.
"""

import os
from pathlib import Path
from typing import Iterator, Optional

DEFAULT_MAX_DEPTH = 256


def logical_cwd() -> str:
    """Current directory as the shell sees it ($PWD), falling back to getcwd()."""
    cwd = os.getcwd()
    pwd = os.environ.get("PWD")
    if pwd and os.path.isabs(pwd):
        try:
            if os.path.samefile(pwd, cwd):
                return pwd
        except OSError:
            pass
    return cwd


def absolute(path: Optional[str]) -> Path:
    """Make path absolute without resolving symlinks."""
    if not path:
        return Path(logical_cwd())
    expanded = os.path.expanduser(path)
    if not os.path.isabs(expanded):
        expanded = os.path.join(logical_cwd(), expanded)
    return Path(os.path.normpath(expanded))


def iter_ancestors(start: Path, max_depth: int = DEFAULT_MAX_DEPTH) -> Iterator[Path]:
    """Yield start, its parent, and so on up to the root or max_depth ascents."""
    current = start
    for _ in range(max_depth + 1):
        yield current
        parent = current.parent
        if parent == current:
            return
        current = parent


def find_upward(start: Path, relative: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Optional[Path]:
    """Find the nearest start/relative, start/../relative, ... that is a file."""
    for directory in iter_ancestors(start, max_depth):
        candidate = directory / relative
        if candidate.is_file():
            return candidate
    return None
