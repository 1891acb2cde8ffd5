"""Run external programs on the host."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from collections.abc import Iterable, Mapping, Sequence

from ..exceptions import CommandNotFound
from .common import ExitCode

logger = logging.getLogger(__name__)


def locate_program(
    name: str, search_paths: Iterable[str], cwd: str | None = None
) -> str | None:
    if not name:
        return None
    if os.sep in name and cwd:
        # Relative program paths resolve against the directory the child runs in.
        name = os.path.join(cwd, name)
    return shutil.which(name, path=os.pathsep.join(search_paths))


def run_host_process(
    name: str,
    args: Sequence[str],
    env: Mapping[str, str] | None = None,
    *,
    search_paths: Iterable[str] = (),
    cwd: str | None = None,
) -> ExitCode:
    """Spawn ``name`` with ``args`` and wait for it to finish.

    The child inherits the shell's standard streams. Every failure mode
    (missing binary, permission error, non-zero exit status) raises
    :class:`CommandNotFound`.
    """

    workdir = cwd if cwd and os.path.isdir(cwd) else None
    program = locate_program(name, search_paths, workdir)
    if program is None:
        logger.debug("no executable named %r on search path", name)
        raise CommandNotFound(name)
    child_env = dict(os.environ)
    child_env.update(env or {})
    argv = [program, *args]
    logger.debug("spawning %r in %r", argv, workdir or os.getcwd())
    # The child writes straight to fd 1; drain our buffer first.
    sys.stdout.flush()
    try:
        completed = subprocess.run(argv, env=child_env, cwd=workdir, check=False)
    except OSError as exc:
        logger.debug("spawn of %r failed: %s", name, exc)
        raise CommandNotFound(name) from exc
    if completed.returncode != 0:
        logger.debug("%r exited with status %d", name, completed.returncode)
        raise CommandNotFound(name)
    return ExitCode.SUCCESS


__all__ = ["locate_program", "run_host_process"]
