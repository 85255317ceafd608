"""Formatting utilities for durations and commands."""

import shlex


def fmt_duration(seconds: float) -> str:
    """Format duration as human readable string."""
    if seconds < 60:
        return f"{seconds:.0f}s"
    elif seconds < 3600:
        mins, secs = divmod(int(seconds), 60)
        return f"{mins}m {secs}s"
    else:
        hours, remainder = divmod(int(seconds), 3600)
        mins, secs = divmod(remainder, 60)
        return f"{hours}h {mins}m {secs}s"


def fmt_command(argv: list[str]) -> str:
    """Quote argv for display so it can be pasted back into a shell."""
    return shlex.join(argv)
