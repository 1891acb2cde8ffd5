"""Shared shell types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..shell_parser import ParsedCommand
    from .core import Shell


class ExitCode(IntEnum):
    SUCCESS = 0
    FAILURE = 1
    NOT_FOUND = 2


@dataclass(slots=True)
class CommandResult:
    stdout: str = ""
    exit_code: ExitCode = ExitCode.SUCCESS


@dataclass
class ShellState:
    """Session state owned by one shell instance."""

    current_directory: str
    search_paths: tuple[str, ...] = ()
    env: dict[str, str] = field(default_factory=dict)


CommandHandler = Callable[["ParsedCommand"], CommandResult | str | None]
ShellCommand = Callable[["Shell", "ParsedCommand"], CommandResult | str | None]


__all__ = ["CommandResult", "CommandHandler", "ExitCode", "ShellCommand", "ShellState"]
