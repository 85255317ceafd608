"""UI components for terminal output."""

from greasy.ui.output import (
    BLUE,
    GRAY,
    GREEN,
    MAGENTA,
    NC,
    RED,
    YELLOW,
    error,
    log,
    success,
    warn,
)

__all__ = [
    # Colors
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "GRAY",
    "MAGENTA",
    "NC",
    # Functions
    "log",
    "success",
    "warn",
    "error",
]
