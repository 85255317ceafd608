"""Terminal output helpers with colors."""

import sys

# Colors
RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[0;34m"
GRAY = "\033[90m"
MAGENTA = "\033[0;35m"
NC = "\033[0m"


def log(msg: str) -> None:
    print(f"\r\033[K{BLUE}[greasy]{NC} {msg}")


def success(msg: str) -> None:
    print(f"\r\033[K{GREEN}[greasy]{NC} {msg}")


def warn(msg: str) -> None:
    print(f"\r\033[K{YELLOW}[greasy]{NC} {msg}")


def error(msg: str) -> None:
    print(f"\r\033[K{RED}[greasy]{NC} {msg}")


def flush() -> None:
    """Flush stdout so our lines land before a child process writes."""
    sys.stdout.flush()
