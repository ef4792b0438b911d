"""Exception types used across myshell."""

from __future__ import annotations


class ShellError(Exception):
    """Base class for non-fatal shell errors."""


class RedirectionError(ShellError):
    """Raised when a redirection is malformed or its target cannot be opened."""


class CommandNotFound(ShellError):
    """Raised when a command is neither a builtin nor a launchable executable."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: command not found")
        self.name = name


class MissingArgument(ShellError):
    """Raised when a builtin is called without a required argument."""


class DirectoryNotFound(ShellError):
    """Raised when cd cannot change into the requested directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"cd: {path}: No such file or directory")
        self.path = path


__all__ = [
    "ShellError",
    "RedirectionError",
    "CommandNotFound",
    "MissingArgument",
    "DirectoryNotFound",
]
