"""myshell package: a small POSIX-flavoured interactive shell."""

from .exceptions import CommandNotFound, DirectoryNotFound, RedirectionError, ShellError
from .shell import CommandResult, Shell
from .shell_parser import (
    ParsedCommand,
    Redirection,
    RedirectMode,
    Stream,
    extract_redirection,
    parse_command,
    tokenize,
)

__all__ = [
    "Shell",
    "CommandResult",
    "ParsedCommand",
    "Redirection",
    "RedirectMode",
    "Stream",
    "tokenize",
    "extract_redirection",
    "parse_command",
    "ShellError",
    "RedirectionError",
    "CommandNotFound",
    "DirectoryNotFound",
]
