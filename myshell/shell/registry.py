"""Registry for builtin commands."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .common import ShellCommand


@dataclass(frozen=True, slots=True)
class CommandSpec:
    name: str
    handler: ShellCommand
    description: str = ""


class CommandRegistry:
    """Collects builtin commands as their modules are imported."""

    def __init__(self) -> None:
        self._commands: list[CommandSpec] = []

    def register(
        self,
        name: str,
        handler: ShellCommand,
        *,
        description: str = "",
    ) -> ShellCommand:
        self._commands.append(CommandSpec(name, handler, description))
        return handler

    def command(
        self,
        name: str,
        *,
        description: str = "",
    ) -> Callable[[ShellCommand], ShellCommand]:
        """Decorator variant for registering builtins."""

        def decorator(func: ShellCommand) -> ShellCommand:
            return self.register(name, func, description=description)

        return decorator

    def freeze(self) -> Mapping[str, CommandSpec]:
        return MappingProxyType({spec.name: spec for spec in self._commands})


COMMAND_REGISTRY = CommandRegistry()


def builtin_table() -> Mapping[str, CommandSpec]:
    """Return the read-only name -> builtin mapping."""
    # Import command modules for their side effects (registration)
    from . import commands  # noqa: F401

    return COMMAND_REGISTRY.freeze()


__all__ = ["COMMAND_REGISTRY", "CommandRegistry", "CommandSpec", "builtin_table"]
