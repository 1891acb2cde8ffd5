"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_DIRECTORY = "/app"
DEFAULT_PROMPT = "$ "
DEFAULT_LOG_LEVEL = "WARNING"


def split_search_path(value: str | None) -> tuple[str, ...]:
    """Split a colon-separated ``PATH`` value, keeping the original order."""
    if not value:
        return ()
    return tuple(value.split(":"))


@dataclass
class Settings:
    """Shell settings; command-line flags are applied on top by the CLI."""

    search_paths: tuple[str, ...] = field(default_factory=tuple)
    initial_directory: str = DEFAULT_DIRECTORY
    prompt: str = DEFAULT_PROMPT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            search_paths=split_search_path(env.get("PATH")),
            initial_directory=env.get("MYSHELL_CWD", DEFAULT_DIRECTORY),
            prompt=env.get("MYSHELL_PROMPT", DEFAULT_PROMPT),
            log_level=env.get("MYSHELL_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )


__all__ = ["Settings", "split_search_path"]
