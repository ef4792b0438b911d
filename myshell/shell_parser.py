"""Tokenizer and redirection parsing for a single command line."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from .exceptions import RedirectionError

logger = logging.getLogger(__name__)


class ScanState(Enum):
    BARE = "bare"
    IN_SINGLE = "in_single"
    IN_DOUBLE = "in_double"
    ESCAPED = "escaped"


# Characters a backslash may escape inside double quotes.
DOUBLE_QUOTE_ESCAPES = frozenset('\\$"\n')


class Stream(Enum):
    STDOUT = "stdout"
    STDERR = "stderr"


class RedirectMode(Enum):
    TRUNCATE = "truncate"
    APPEND = "append"


@dataclass(frozen=True)
class Redirection:
    stream: Stream
    mode: RedirectMode
    path: str

    @property
    def open_mode(self) -> str:
        return "a" if self.mode is RedirectMode.APPEND else "w"


@dataclass
class ParsedCommand:
    name: str
    args: list[str] = field(default_factory=list)
    redirect: Redirection | None = None


def _operator(token: str) -> tuple[str, Stream, RedirectMode]:
    stream = Stream.STDERR if token.startswith("2") else Stream.STDOUT
    mode = RedirectMode.APPEND if ">>" in token else RedirectMode.TRUNCATE
    return token, stream, mode


# Checked in order; the first operator present in the tokens wins.
REDIRECTION_OPERATORS: tuple[tuple[str, Stream, RedirectMode], ...] = tuple(
    _operator(token) for token in (">", "1>", "2>", ">>", "1>>", "2>>")
)


def tokenize(line: str) -> list[str]:
    """Split ``line`` into arguments, resolving quotes and backslash escapes.

    Unterminated quotes run to the end of the line and a trailing backslash is
    kept literally; neither is treated as an error.
    """

    text = line.strip()
    tokens: list[str] = []
    current: list[str] = []
    state = ScanState.BARE
    idx = 0
    while idx < len(text):
        char = text[idx]
        idx += 1
        if state is ScanState.ESCAPED:
            current.append(char)
            state = ScanState.BARE
        elif state is ScanState.IN_SINGLE:
            if char == "'":
                state = ScanState.BARE
            else:
                current.append(char)
        elif state is ScanState.IN_DOUBLE:
            if char == '"':
                state = ScanState.BARE
            elif char == "\\" and idx < len(text) and text[idx] in DOUBLE_QUOTE_ESCAPES:
                current.append(text[idx])
                idx += 1
            else:
                current.append(char)
        elif char == "\\":
            state = ScanState.ESCAPED
        elif char == "'":
            state = ScanState.IN_SINGLE
        elif char == '"':
            state = ScanState.IN_DOUBLE
        elif char == " ":
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if state is ScanState.ESCAPED:
        current.append("\\")
    if current:
        tokens.append("".join(current))
    return tokens


def extract_redirection(tokens: list[str]) -> tuple[list[str], Redirection | None]:
    """Remove the highest-priority redirection operator and its target from ``tokens``."""

    for token, stream, mode in REDIRECTION_OPERATORS:
        if token not in tokens:
            continue
        idx = tokens.index(token)
        if idx + 1 >= len(tokens):
            raise RedirectionError(f"syntax error: missing redirection target after '{token}'")
        redirect = Redirection(stream=stream, mode=mode, path=tokens[idx + 1].strip())
        return tokens[:idx] + tokens[idx + 2 :], redirect
    return list(tokens), None


def parse_command(line: str) -> ParsedCommand:
    tokens, redirect = extract_redirection(tokenize(line))
    if not tokens:
        return ParsedCommand(name="", redirect=redirect)
    name, *args = tokens
    command = ParsedCommand(name=name, args=args, redirect=redirect)
    logger.debug("parsed %r -> %s", line, command)
    return command


__all__ = [
    "ParsedCommand",
    "Redirection",
    "RedirectMode",
    "REDIRECTION_OPERATORS",
    "ScanState",
    "Stream",
    "extract_redirection",
    "parse_command",
    "tokenize",
]
