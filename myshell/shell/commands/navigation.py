"""Navigation-oriented commands."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from ..common import CommandResult
from ..registry import COMMAND_REGISTRY
from ...exceptions import DirectoryNotFound, MissingArgument
from ...path_utils import resolve_cd_target

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell

logger = logging.getLogger(__name__)


@COMMAND_REGISTRY.command("pwd", description="Print working directory")
def pwd(shell: "Shell", _: list[str]) -> CommandResult:
    return CommandResult(stdout=f"{os.getcwd()}\n")


@COMMAND_REGISTRY.command("cd", description="Change directory")
def cd(shell: "Shell", args: list[str]) -> CommandResult:
    if not args:
        raise MissingArgument("cd: missing argument")
    target = resolve_cd_target(args[0], shell.env)
    try:
        os.chdir(target)
    except OSError as exc:
        logger.debug("cd to %s failed: %s", target, exc)
        raise DirectoryNotFound(target) from exc
    return CommandResult()
