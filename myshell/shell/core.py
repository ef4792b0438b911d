"""Core Shell implementation."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from typing import IO

from ..exceptions import CommandNotFound, RedirectionError, ShellError
from ..shell_parser import ParsedCommand, parse_command
from .common import CommandResult
from .host import run_host_process
from .registry import CommandSpec, builtin_table
from .streams import BoundStreams, bind_streams

logger = logging.getLogger(__name__)

EXIT_NOT_FOUND = 127
EXIT_USAGE = 2


class Shell:
    """Runs one parsed command line at a time against the host process."""

    def __init__(
        self,
        *,
        env: Mapping[str, str] | None = None,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
        stderr: IO[str] | None = None,
        builtins: Mapping[str, CommandSpec] | None = None,
    ) -> None:
        self.env: dict[str, str] = dict(os.environ if env is None else env)
        self.stdin = stdin
        self.stdout: IO[str] = stdout or sys.stdout
        self.stderr: IO[str] = stderr or sys.stderr
        self.builtins: Mapping[str, CommandSpec] = builtin_table() if builtins is None else builtins
        self.last_exit_code = 0

    def is_builtin(self, name: str) -> bool:
        return name in self.builtins

    def available_commands(self) -> list[str]:
        return sorted(self.builtins)

    def report(self, message: str) -> None:
        """Write a shell diagnostic to the shell's own stdout."""
        self.stdout.write(f"{message}\n")
        self.stdout.flush()

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------
    def exec(self, line: str) -> int:
        try:
            command = parse_command(line)
        except RedirectionError as exc:
            self.report(str(exc))
            self.last_exit_code = EXIT_USAGE
            return self.last_exit_code
        return self.dispatch(command)

    def dispatch(self, command: ParsedCommand) -> int:
        if not command.name:
            return self.last_exit_code
        logger.debug("dispatching %s", command)
        try:
            with bind_streams(command.redirect, self.stdout, self.stderr) as streams:
                spec = self.builtins.get(command.name)
                if spec is not None:
                    exit_code = self._run_builtin(spec, command.args, streams)
                else:
                    exit_code = run_host_process(self, command.name, command.args, streams)
        except CommandNotFound as exc:
            self.report(str(exc))
            exit_code = EXIT_NOT_FOUND
        except ShellError as exc:
            self.report(str(exc))
            exit_code = 1
        except Exception as exc:  # unexpected failure path
            logger.debug("%s raised %r", command.name, exc)
            self.report(f"{command.name} failed: {exc}")
            exit_code = 1
        self.last_exit_code = exit_code
        return exit_code

    def _run_builtin(self, spec: CommandSpec, args: list[str], streams: BoundStreams) -> int:
        result = spec.handler(self, args)
        if result is None:
            result = CommandResult()
        elif not isinstance(result, CommandResult):
            result = CommandResult(stdout=str(result))
        if result.stdout:
            streams.stdout.write(result.stdout)
            streams.stdout.flush()
        if result.stderr:
            streams.stderr.write(result.stderr)
            streams.stderr.flush()
        return result.exit_code


__all__ = ["Shell", "EXIT_NOT_FOUND", "EXIT_USAGE"]
