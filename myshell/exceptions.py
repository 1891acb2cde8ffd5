"""Exceptions raised by the shell."""

from __future__ import annotations


class ShellError(Exception):
    """Base class for recoverable shell errors."""


class UsageError(ShellError):
    """A builtin was called with missing or malformed arguments."""

    def __init__(self, usage: str) -> None:
        super().__init__(f"Command format error, usage: {usage}")
        self.usage = usage


class NoSuchPath(ShellError):
    """The target of ``cd`` does not exist once resolved."""

    def __init__(self, path: str) -> None:
        super().__init__(f"cd: {path}: No such file or directory")
        self.path = path


class CommandNotFound(ShellError):
    """An external program could not be spawned or did not run cleanly."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: command not found")
        self.name = name


class ReadError(ShellError):
    """Reading a line from the input stream failed."""


__all__ = ["ShellError", "UsageError", "NoSuchPath", "CommandNotFound", "ReadError"]
