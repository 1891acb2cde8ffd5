"""Registry for builtin commands."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Iterable

from .common import ShellCommand


@dataclass(slots=True)
class CommandSpec:
    name: str
    handler: ShellCommand
    description: str = ""


class CommandRegistry:
    """Ordered table of builtin handlers, filled in at import time."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(
        self,
        name: str,
        handler: ShellCommand,
        *,
        description: str = "",
    ) -> None:
        if name in self._commands:
            raise ValueError(f"Command {name!r} is already registered")
        self._commands[name] = CommandSpec(name, handler, description)

    def command(
        self,
        name: str,
        *,
        description: str = "",
    ) -> Callable[[ShellCommand], ShellCommand]:
        """Decorator variant for registering builtins."""

        def decorator(func: ShellCommand) -> ShellCommand:
            self.register(name, func, description=description)
            return func

        return decorator

    def iter_commands(self) -> Iterable[CommandSpec]:
        return tuple(self._commands.values())


COMMAND_REGISTRY = CommandRegistry()


__all__ = ["COMMAND_REGISTRY", "CommandRegistry", "CommandSpec"]
