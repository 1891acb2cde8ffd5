"""Navigation-oriented builtins."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import CommandResult
from ..registry import COMMAND_REGISTRY
from ...exceptions import UsageError

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ...shell_parser import ParsedCommand
    from ..core import Shell


@COMMAND_REGISTRY.command("pwd", description="Print working directory")
def pwd(shell: "Shell", _: "ParsedCommand") -> CommandResult:
    return CommandResult(stdout=f"{shell.state.current_directory}\n")


@COMMAND_REGISTRY.command("cd", description="Change directory")
def cd(shell: "Shell", command: "ParsedCommand") -> CommandResult:
    if not command.args:
        raise UsageError("cd <path>")
    state = shell.state
    # NoSuchPath propagates to the dispatcher and leaves the state untouched.
    state.current_directory = shell.resolver.resolve(command.args[0], state.current_directory)
    return CommandResult()
