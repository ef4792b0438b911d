"""Binding of a command's output streams, optionally to a redirection file."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import IO

from ..exceptions import RedirectionError
from ..shell_parser import Redirection, Stream

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BoundStreams:
    """Destinations for one command.

    ``stdout``/``stderr`` are what builtins write to. ``child_stdout`` and
    ``child_stderr`` are handed to ``subprocess``: ``None`` means the child
    inherits the shell process's own descriptor.
    """

    stdout: IO[str]
    stderr: IO[str]
    child_stdout: IO[str] | None = None
    child_stderr: IO[str] | None = None


@contextlib.contextmanager
def bind_streams(
    redirect: Redirection | None, stdout: IO[str], stderr: IO[str]
) -> Iterator[BoundStreams]:
    if redirect is None:
        yield BoundStreams(stdout=stdout, stderr=stderr)
        return
    try:
        handle = open(redirect.path, redirect.open_mode, encoding="utf-8")
    except OSError as exc:
        raise RedirectionError(f"{redirect.path}: {exc.strerror or exc}") from exc
    logger.debug("redirecting %s to %s (%s)", redirect.stream.value, redirect.path, redirect.mode.value)
    with handle:
        if redirect.stream is Stream.STDERR:
            yield BoundStreams(stdout=stdout, stderr=handle, child_stderr=handle)
        else:
            yield BoundStreams(stdout=handle, stderr=stderr, child_stdout=handle)


__all__ = ["BoundStreams", "bind_streams"]
