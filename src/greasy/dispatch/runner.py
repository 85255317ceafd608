"""Run the delegated command for a detected project."""

import os
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from greasy.errors import ToolNotExecutable, ToolNotFound
from greasy.models.core import Project


def build_argv(project: Project, args: Sequence[str]) -> list[str]:
    """Marker command followed by the user's args, verbatim and in order."""
    return [*project.marker.command, *args]


def build_env(extra_path: Sequence[str], base: Optional[dict] = None) -> dict[str, str]:
    """Copy of the environment with existing extra_path dirs appended to PATH."""
    env = dict(os.environ if base is None else base)
    parts = [p for p in env.get("PATH", "").split(os.pathsep) if p]
    for entry in extra_path:
        directory = os.path.expanduser(entry)
        if os.path.isdir(directory) and directory not in parts:
            parts.append(directory)
    env["PATH"] = os.pathsep.join(parts)
    return env


def exit_code_for(returncode: int) -> int:
    """Map subprocess returncode to a process exit code (signals -> 128+N)."""
    if returncode < 0:
        return 128 + -returncode
    return returncode


def run_command(argv: list[str], cwd: Path, env: Optional[dict[str, str]] = None) -> int:
    """Run argv in cwd, inheriting stdio. Returns the exit code to propagate."""
    try:
        result = subprocess.run(argv, cwd=cwd, env=env)
    except FileNotFoundError as e:
        raise ToolNotFound(argv) from e
    except PermissionError as e:
        raise ToolNotExecutable(argv) from e
    return exit_code_for(result.returncode)
