"""Meta commands for shell introspection and control."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ..common import CommandResult
from ..registry import COMMAND_REGISTRY
from ...path_utils import find_on_path, search_path

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell

EXIT_CODE_RE = re.compile(r"[+-]?[0-9]+")


def describe(shell: "Shell", name: str) -> str:
    if shell.is_builtin(name):
        return f"{name} is a shell builtin"
    path = find_on_path(name, search_path(shell.env))
    if path is not None:
        return f"{name} is {path}"
    return f"{name} not found"


@COMMAND_REGISTRY.command("type", description="Describe how a name would be run")
def type_(shell: "Shell", args: list[str]) -> CommandResult:
    lines = [describe(shell, name) for name in args]
    return CommandResult(stdout="".join(f"{line}\n" for line in lines))


@COMMAND_REGISTRY.command("exit", description="Exit the shell")
def exit_(shell: "Shell", args: list[str]) -> CommandResult:
    if not args:
        raise SystemExit(0)
    if EXIT_CODE_RE.fullmatch(args[0]) is None:
        raise SystemExit(1)
    raise SystemExit(int(args[0]))
