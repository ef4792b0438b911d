"""Shell package: dispatcher, builtins and process launch."""

from .common import CommandResult
from .core import Shell

__all__ = ["Shell", "CommandResult"]
