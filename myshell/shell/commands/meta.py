"""Process and introspection builtins: exit, echo, type."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import CommandResult
from ..registry import COMMAND_REGISTRY
from ...exceptions import UsageError

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ...shell_parser import ParsedCommand
    from ..core import Shell

# Names ``type`` reports as builtins.
TYPE_BUILTINS = frozenset({"type", "echo", "exit"})

_EXIT_STATUSES = {"0": 0, "1": 1}


@COMMAND_REGISTRY.command("exit", description="Exit the shell with status 0 or 1")
def exit_(shell: "Shell", command: "ParsedCommand") -> CommandResult:
    status = _EXIT_STATUSES.get(command.args[0]) if command.args else None
    if status is None:
        raise UsageError("exit <0|1>")
    raise SystemExit(status)


@COMMAND_REGISTRY.command("echo", description="Print arguments")
def echo(shell: "Shell", command: "ParsedCommand") -> CommandResult:
    text = " ".join(command.args).strip()
    return CommandResult(stdout=f"{text}\n")


@COMMAND_REGISTRY.command("type", description="Describe how a name would be run")
def type_(shell: "Shell", command: "ParsedCommand") -> CommandResult:
    if not command.args:
        raise UsageError("type <command>")
    name = command.args[0]
    if name in TYPE_BUILTINS:
        return CommandResult(stdout=f"{name} is a shell builtin\n")
    for directory in shell.state.search_paths:
        candidate = f"{directory}/{name}"
        if shell.resolver.exists(candidate):
            return CommandResult(stdout=f"{name} is {candidate}\n")
    return CommandResult(stdout=f"{name} not found\n")
