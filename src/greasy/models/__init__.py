"""Data models for greasy."""

from greasy.models.core import Marker, Project
from greasy.models.state import RunConfig

__all__ = [
    # Core
    "Marker",
    "Project",
    # State
    "RunConfig",
]
