"""Launching external executables on the host."""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

from ..exceptions import CommandNotFound
from ..path_utils import find_executable, search_path
from .streams import BoundStreams

if TYPE_CHECKING:
    from .core import Shell

logger = logging.getLogger(__name__)


def resolve_executable(shell: "Shell", name: str) -> str | None:
    return find_executable(name, search_path(shell.env))


def run_host_process(shell: "Shell", name: str, args: list[str], streams: BoundStreams) -> int:
    """Run ``name`` with ``args`` to completion and return its exit status."""

    executable = resolve_executable(shell, name)
    if executable is None:
        raise CommandNotFound(name)
    logger.debug("launching %s as %s with %r", executable, name, args)
    # Anything the shell buffered must land before the child writes.
    for stream in (shell.stdout, shell.stderr, streams.stdout, streams.stderr):
        stream.flush()
    try:
        completed = subprocess.run(
            [name, *args],
            executable=executable,
            stdin=shell.stdin,
            stdout=streams.child_stdout,
            stderr=streams.child_stderr,
            env=dict(shell.env),
            check=False,
        )
    except OSError as exc:
        logger.debug("launch of %s failed: %s", executable, exc)
        raise CommandNotFound(name) from exc
    logger.debug("%s exited with %d", name, completed.returncode)
    return completed.returncode


__all__ = ["resolve_executable", "run_host_process"]
