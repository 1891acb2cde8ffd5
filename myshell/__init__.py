"""myshell package: a minimal interactive command shell."""

from .config import Settings
from .exceptions import CommandNotFound, NoSuchPath, ReadError, ShellError, UsageError
from .path_utils import PathResolver, resolve_path
from .shell import CommandResult, ExitCode, Shell, ShellState
from .shell_parser import ParsedCommand, parse_line

__all__ = [
    "Shell",
    "ShellState",
    "CommandResult",
    "ExitCode",
    "ParsedCommand",
    "parse_line",
    "PathResolver",
    "resolve_path",
    "Settings",
    "ShellError",
    "UsageError",
    "NoSuchPath",
    "CommandNotFound",
    "ReadError",
]
