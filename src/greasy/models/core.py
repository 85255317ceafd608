"""Core models for marker detection."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Marker:
    """A file whose presence identifies a project's tool."""

    filename: str
    command: tuple[str, ...]  # argv prefix, user args are appended

    @property
    def display(self) -> str:
        return " ".join(self.command)


@dataclass(frozen=True)
class Project:
    """Result of an upward search: the matched marker and where it lives."""

    marker: Marker
    root: Path
    depth: int = 0  # levels above the start directory
