"""Helpers for resolving ``cd`` targets against the tracked directory."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Callable
from pathlib import Path

from .exceptions import NoSuchPath

logger = logging.getLogger(__name__)

_PARENT_REF = ".."
_LAST_SEGMENT_RE = re.compile(r"/[^/]+$")


def _default_home() -> str:
    return str(Path.home())


class PathResolver:
    """Normalizes ``..``, a leading ``.`` and a leading ``~`` in cd targets.

    The resolver never touches the process working directory. It works on
    plain strings and only asks the filesystem whether the final path exists.
    """

    def __init__(
        self,
        *,
        exists: Callable[[str], bool] = os.path.exists,
        home: Callable[[], str] = _default_home,
    ) -> None:
        self._exists = exists
        self._home = home

    def exists(self, path: str) -> bool:
        return self._exists(path)

    def resolve(self, target: str, current_directory: str) -> str:
        parents = target.count(_PARENT_REF)
        if parents:
            path = self._strip_segments(current_directory, parents)
        elif target.startswith("."):
            path = current_directory + target[1:]
        else:
            path = target
        if path.startswith("~"):
            path = self._home() + path[1:]
        logger.debug("cd candidate for %r from %r: %r", target, current_directory, path)
        if not self.exists(path):
            raise NoSuchPath(path)
        return path

    @staticmethod
    def _strip_segments(path: str, count: int) -> str:
        # ``..`` is counted as a raw substring; whatever follows it is dropped.
        for _ in range(count):
            path = _LAST_SEGMENT_RE.sub("", path)
        return path


def resolve_path(target: str, current_directory: str) -> str:
    return PathResolver().resolve(target, current_directory)


__all__ = ["PathResolver", "resolve_path"]
