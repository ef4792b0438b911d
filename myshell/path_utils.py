"""Helpers for locating executables and resolving cd targets."""

from __future__ import annotations

import os
import posixpath
from collections.abc import Iterable, Mapping
from pathlib import Path


def search_path(env: Mapping[str, str]) -> list[str]:
    raw = env.get("PATH", "")
    return [entry for entry in raw.split(os.pathsep) if entry]


def is_executable(path: str | Path) -> bool:
    candidate = Path(path)
    return candidate.is_file() and os.access(candidate, os.X_OK)


def find_executable(name: str, directories: Iterable[str]) -> str | None:
    """Return ``<dir>/<name>`` for the first directory holding an executable ``name``."""

    if not name:
        return None
    if "/" in name:
        return name if is_executable(name) else None
    return find_on_path(name, directories)


def find_on_path(name: str, directories: Iterable[str]) -> str | None:
    """Search only directly inside each directory; names with a slash never match."""

    if not name or "/" in name:
        return None
    for directory in directories:
        candidate = os.path.join(directory, name)
        if is_executable(candidate):
            return candidate
    return None


def home_directory(env: Mapping[str, str]) -> str:
    home = env.get("HOME")
    if home:
        return home
    return str(Path.home())


def resolve_cd_target(path: str, env: Mapping[str, str]) -> str:
    """Expand a leading ``~`` and normalize ``path`` lexically."""

    if path.startswith("~"):
        rest = path[1:].lstrip("/")
        home = home_directory(env)
        path = posixpath.join(home, rest) if rest else home
    return posixpath.normpath(path)


__all__ = [
    "find_executable",
    "find_on_path",
    "home_directory",
    "is_executable",
    "resolve_cd_target",
    "search_path",
]
