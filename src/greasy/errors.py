"""Errors raised by the dispatcher. The CLI maps each to its exit code."""

EXIT_NO_PROJECT = 1
EXIT_USAGE = 2
EXIT_NOT_EXECUTABLE = 126
EXIT_TOOL_NOT_FOUND = 127
EXIT_INTERRUPTED = 130


class GreasyError(Exception):
    exit_code = 1


class NoProjectFound(GreasyError):
    """No marker file between the start directory and the filesystem root."""

    exit_code = EXIT_NO_PROJECT

    def __init__(self, start_dir: str):
        self.start_dir = start_dir
        super().__init__(f"<Unknown project> (searched upward from {start_dir})")


class InvalidStartDirectory(GreasyError):
    exit_code = EXIT_USAGE

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid start directory {path}: {reason}")


class ToolNotFound(GreasyError):
    exit_code = EXIT_TOOL_NOT_FOUND

    def __init__(self, command: list[str]):
        self.command = command
        super().__init__(f"Command not found: {command[0]}")


class ConfigError(GreasyError):
    exit_code = EXIT_USAGE


class ToolNotExecutable(GreasyError):
    exit_code = EXIT_NOT_EXECUTABLE

    def __init__(self, command: list[str]):
        self.command = command
        super().__init__(f"Permission denied: {command[0]}")
