"""Command-line interface and interactive loop for myshell."""

from __future__ import annotations

import argparse
import logging
import sys

from .config import Settings
from .exceptions import CommandNotFound, ReadError
from .shell import CommandResult, ExitCode, Shell
from .shell_parser import ParsedCommand, parse_line

logger = logging.getLogger(__name__)


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    # Unknown names come back as the string "Level <name>".
    return level if isinstance(level, int) else logging.WARNING


def _configure_logging(level: str) -> None:
    # stdout belongs to the shell session; diagnostics go to stderr.
    logging.basicConfig(
        stream=sys.stderr,
        level=_log_level(level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _read_line(prompt: str) -> str:
    try:
        return input(prompt)
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(f"read error: {exc}") from exc


def _report(command: ParsedCommand, result: CommandResult) -> None:
    if result.stdout:
        sys.stdout.write(result.stdout)
    if result.exit_code == ExitCode.NOT_FOUND:
        sys.stdout.write(f"{CommandNotFound(command.name)}\n")
    sys.stdout.flush()


def run_repl(shell: Shell, prompt: str = "$ ") -> int:
    """Prompt, read, dispatch and report until input runs out.

    Only ``exit 0`` / ``exit 1`` end the process early (via ``SystemExit``).
    End of input is treated as a clean shutdown.
    """
    while True:
        try:
            line = _read_line(prompt)
        except ReadError as exc:
            logger.debug("line read failed", exc_info=True)
            sys.stdout.write(f"{exc}\n")
            continue
        except (EOFError, KeyboardInterrupt):
            return 0
        if not line.strip():
            continue
        command = parse_line(line)
        _report(command, shell.dispatch(command))


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--cwd",
        default=None,
        help="Initial tracked directory (default: $MYSHELL_CWD or /app).",
    )
    parser.add_argument(
        "--prompt",
        default=None,
        help="Prompt string (default: $MYSHELL_PROMPT or '$ ').",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for stderr diagnostics (default: $MYSHELL_LOG_LEVEL or WARNING).",
    )


def _build_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    if args.cwd is not None:
        settings.initial_directory = args.cwd
    if args.prompt is not None:
        settings.prompt = args.prompt
    if args.log_level is not None:
        settings.log_level = args.log_level.upper()
    return settings


def _run_exec(args: argparse.Namespace, settings: Settings) -> int:
    shell = Shell.from_settings(settings)
    command = parse_line(args.command)
    result = shell.dispatch(command)
    _report(command, result)
    return int(result.exit_code)


def _run_shell(args: argparse.Namespace, settings: Settings) -> int:
    shell = Shell.from_settings(settings)
    return run_repl(shell, settings.prompt)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="myshell")
    _add_common_flags(parser)
    parser.set_defaults(func=_run_shell)
    subparsers = parser.add_subparsers(dest="command_name")

    exec_parser = subparsers.add_parser("exec", help="Run a single command line")
    exec_parser.add_argument("command", help="Command line to execute")
    exec_parser.set_defaults(func=_run_exec)

    shell_parser = subparsers.add_parser("shell", help="Start an interactive shell")
    shell_parser.set_defaults(func=_run_shell)

    args = parser.parse_args(argv)
    settings = _build_settings(args)
    _configure_logging(settings.log_level)
    logger.debug("search paths: %s", ":".join(settings.search_paths))
    exit_code = args.func(args, settings)
    raise SystemExit(exit_code)


__all__ = ["main", "run_repl"]
