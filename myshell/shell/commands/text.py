"""Text output commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import CommandResult
from ..registry import COMMAND_REGISTRY

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell


@COMMAND_REGISTRY.command("echo", description="Write arguments to standard output")
def echo(shell: "Shell", args: list[str]) -> CommandResult:
    return CommandResult(stdout=" ".join(args) + "\n")
