"""Shell package: dispatcher, builtins and host process runner."""

from .common import CommandResult, ExitCode, ShellState
from .core import Shell

__all__ = ["Shell", "ShellState", "CommandResult", "ExitCode"]
