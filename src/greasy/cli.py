"""CLI entry point and argument parsing."""

import argparse
import sys
from importlib.metadata import version as get_version
from pathlib import Path
from typing import Optional

try:
    __version__ = get_version("greasy")
except Exception:
    __version__ = "dev"

from greasy.dispatch import detect, dispatch, load_settings, markers_from_config
from greasy.errors import EXIT_INTERRUPTED, EXIT_USAGE, GreasyError
from greasy.init import run_init
from greasy.models.state import RunConfig
from greasy.ui.output import GRAY, GREEN, NC, YELLOW, error, log
from greasy.utils.debug import DEBUG_LOG

# Commands that forward everything after them to the detected tool
FORWARDING_COMMANDS = ("run", "test", "build")
COMMANDS = FORWARDING_COMMANDS + ("which", "markers", "init")

# Global options that consume the following token
_VALUE_OPTIONS = ("-C", "--directory")


def split_argv(argv: list[str]) -> tuple[list[str], Optional[str], list[str]]:
    """Split argv into (global options, command, rest).

    Everything after the command is left untouched so it can be forwarded
    verbatim, including tokens that look like options.
    """
    i = 0
    while i < len(argv):
        token = argv[i]
        if token in COMMANDS:
            return argv[:i], token, argv[i + 1 :]
        if token in _VALUE_OPTIONS:
            i += 2
            continue
        i += 1
    return argv, None, []


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="greasy",
        allow_abbrev=False,
        description="Run the nearest project's build/test tool from anywhere inside it.",
        epilog="""
Commands:
  greasy run ARGS...          Run the detected tool with ARGS
  greasy test ARGS...         Same as `greasy run test ARGS...`
  greasy build ARGS...        Same as `greasy run build ARGS...`
  greasy which                Show the detected tool and directory
  greasy markers              Show marker files in priority order
  greasy init [--force]       Write .greasy/config.yaml here

Examples:
  %(prog)s test                     npm run test / cargo test / blaze test ...
  %(prog)s run dev --port 3000      Arguments are forwarded verbatim
  %(prog)s -C ~/src/app build       Start the search somewhere else
  %(prog)s --dry-run test           Show what would run

How it works:
  1. Starting at the current directory, checks for marker files
  2. First directory with a marker wins; climbs to the parent otherwise
  3. If a directory has several markers, the earliest in the list wins
  4. Runs the marker's command in that directory with your arguments
  5. Exits with the command's exit code

Exit codes:
  0        command succeeded
  N        command's own exit code
  1        no project found up to the filesystem root
  2        invalid start directory, bad config or usage
  126      tool found but not executable
  127      tool not found on PATH

Config (dicts merge, lists replace):
  bundled defaults < ~/.config/greasy/config.yaml < nearest .greasy/config.yaml
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "command",
        metavar="COMMAND",
        choices=COMMANDS,
        help=f"One of: {', '.join(COMMANDS)}",
    )
    parser.add_argument(
        "-C",
        "--directory",
        metavar="DIR",
        default=None,
        help="Start the search in DIR instead of the current directory",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the command and directory without running anything",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show config sources, exit code and duration",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help=f"Enable debug mode - logs detection and run details to {DEBUG_LOG}",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_args(argv: Optional[list[str]] = None) -> RunConfig:
    if argv is None:
        argv = sys.argv[1:]
    global_args, command, rest = split_argv(argv)
    parser = build_parser()
    args = parser.parse_args(global_args + ([command] if command else []))

    force = False
    if args.command in ("test", "build"):
        forwarded = [args.command, *rest]
    elif args.command == "run":
        forwarded = rest
    elif args.command == "init":
        unknown = [a for a in rest if a not in ("-f", "--force")]
        if unknown:
            parser.error(f"init: unrecognized arguments: {' '.join(unknown)}")
        force = bool(rest)
        forwarded = []
    else:
        if rest:
            parser.error(f"{args.command} takes no arguments")
        forwarded = []

    return RunConfig(
        command=args.command,
        args=forwarded,
        start_dir=args.directory,
        dry_run=args.dry_run,
        verbose=args.verbose,
        debug=args.debug,
        force=force,
    )


def show_markers(config: RunConfig) -> None:
    """Print the effective marker priority list."""
    markers = markers_from_config(load_settings(config))
    print(f"{GREEN}Markers (highest priority first):{NC}")
    width = max(len(m.filename) for m in markers)
    for i, marker in enumerate(markers, 1):
        print(f"  {i}. {marker.filename:<{width}}  {GRAY}->{NC} {marker.display}")


def show_which(config: RunConfig) -> None:
    """Print the detected tool and directory without running anything."""
    project = detect(config)
    levels = f"  {GRAY}({project.depth} up){NC}" if project.depth else ""
    log(f"{YELLOW}{project.marker.display}{NC} @ {project.root}{levels}")
    print(f"  {GREEN}Marker:{NC} {project.root / project.marker.filename}")


def main() -> None:
    config = parse_args()
    if config.debug:
        log(f"Debug logging to {DEBUG_LOG}")

    try:
        if config.command == "init":
            target = Path(config.start_dir).expanduser() if config.start_dir else Path(".")
            sys.exit(0 if run_init(target, force=config.force) else 1)
        if config.command == "markers":
            show_markers(config)
            sys.exit(0)
        if config.command == "which":
            show_which(config)
            sys.exit(0)
        sys.exit(dispatch(config, config.args))
    except GreasyError as e:
        error(str(e))
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        print()
        sys.exit(EXIT_INTERRUPTED)
    except OSError as e:
        error(f"Failed to run: {e}")
        sys.exit(EXIT_USAGE)


if __name__ == "__main__":
    main()
