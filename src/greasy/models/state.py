"""CLI state models."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RunConfig:
    """CLI arguments bundled together."""

    command: str
    args: list[str] = field(default_factory=list)
    start_dir: Optional[str] = None
    dry_run: bool = False
    verbose: bool = False
    debug: bool = False
    force: bool = False
