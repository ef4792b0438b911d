"""Command-line interface for myshell."""

from __future__ import annotations

import argparse
import logging
import sys

from .shell import Shell

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "$ "


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic logging level (written to stderr).",
    )
    parser.add_argument("--prompt", default=DEFAULT_PROMPT, help="Interactive prompt string.")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _run_exec(args: argparse.Namespace) -> int:
    shell = Shell()
    return shell.exec(args.command)


def _run_shell(args: argparse.Namespace) -> int:
    shell = Shell()
    while True:
        sys.stdout.write(args.prompt)
        sys.stdout.flush()
        try:
            line = sys.stdin.readline()
        except KeyboardInterrupt:
            sys.stdout.write("\n")
            continue
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error reading input: {exc}", file=sys.stderr)
            return 1
        if not line:
            print("Error reading input: EOF", file=sys.stderr)
            return 1
        shell.exec(line.rstrip("\n"))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="myshell")
    _add_common_flags(parser)
    parser.set_defaults(func=_run_shell)
    subparsers = parser.add_subparsers(dest="command_name")

    exec_parser = subparsers.add_parser("exec", help="Run a single command line")
    exec_parser.add_argument("command", help="Command line to execute")
    exec_parser.set_defaults(func=_run_exec)

    shell_parser = subparsers.add_parser("shell", help="Start an interactive shell (default)")
    shell_parser.set_defaults(func=_run_shell)

    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    logger.debug("starting %s", args.command_name or "shell")
    exit_code = args.func(args)
    raise SystemExit(exit_code)


__all__ = ["main"]
