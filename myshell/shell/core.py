"""Core Shell implementation."""

from __future__ import annotations

import logging

from ..config import Settings
from ..exceptions import CommandNotFound, ShellError
from ..path_utils import PathResolver
from ..shell_parser import ParsedCommand, parse_line
from .common import CommandHandler, CommandResult, ExitCode, ShellCommand, ShellState
from .host import run_host_process
from .registry import COMMAND_REGISTRY

logger = logging.getLogger(__name__)


class Shell:
    """Dispatches parsed command lines to builtins or host programs."""

    def __init__(
        self,
        state: ShellState,
        *,
        resolver: PathResolver | None = None,
    ) -> None:
        self.state = state
        self.resolver = resolver or PathResolver()
        self.commands: dict[str, CommandHandler] = {}
        self.command_docs: dict[str, str] = {}
        self._register_builtin_commands()

    @classmethod
    def from_settings(cls, settings: Settings) -> "Shell":
        state = ShellState(
            current_directory=settings.initial_directory,
            search_paths=settings.search_paths,
        )
        return cls(state)

    # ------------------------------------------------------------------
    # Command registration
    # ------------------------------------------------------------------
    def register_command(
        self,
        name: str,
        handler: CommandHandler,
        *,
        description: str = "",
    ) -> None:
        self.commands[name] = handler
        if description:
            self.command_docs[name] = description

    def available_commands(self) -> list[str]:
        return sorted(self.commands)

    def _bind_registered_handler(self, func: ShellCommand) -> CommandHandler:
        def bound(command: ParsedCommand) -> CommandResult | str | None:
            return func(self, command)

        return bound

    def _register_builtin_commands(self) -> None:
        # Import command modules for their side effects (registration)
        from . import commands  # noqa: F401

        for spec in COMMAND_REGISTRY.iter_commands():
            self.register_command(
                spec.name,
                self._bind_registered_handler(spec.handler),
                description=spec.description,
            )

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------
    def execute_line(self, line: str) -> CommandResult:
        return self.dispatch(parse_line(line))

    def dispatch(self, command: ParsedCommand) -> CommandResult:
        handler = self.commands.get(command.name)
        if handler is None:
            return self._run_external(command)
        logger.debug("builtin %s %r", command.name, command.args)
        try:
            result = handler(command)
        except ShellError as exc:
            return CommandResult(stdout=f"{exc}\n", exit_code=ExitCode.FAILURE)
        except Exception as exc:  # unexpected failure path
            logger.exception("builtin %s raised", command.name)
            return CommandResult(
                stdout=f"{command.name} failed: {exc}\n", exit_code=ExitCode.FAILURE
            )
        if isinstance(result, CommandResult):
            return result
        if result is None:
            return CommandResult()
        return CommandResult(stdout=str(result))

    def _run_external(self, command: ParsedCommand) -> CommandResult:
        logger.debug("external %s %r", command.name, command.args)
        try:
            code = run_host_process(
                command.name,
                command.args,
                self.state.env,
                search_paths=self.state.search_paths,
                cwd=self.state.current_directory,
            )
        except CommandNotFound:
            return CommandResult(exit_code=ExitCode.NOT_FOUND)
        return CommandResult(exit_code=code)


__all__ = ["Shell"]
