"""Command-line interface for minish."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from .exceptions import MinishError
from .shell import Shell

PROMPT = "minish> "
_EXIT_WORDS = {"exit", "quit"}


def _dispatch(shell: Shell, line: str) -> int:
    try:
        shell.execute(line)
    except MinishError as exc:
        sys.stderr.write(f"minish: {exc}\n")
        return exc.exit_code
    except KeyboardInterrupt:
        sys.stderr.write("\n")
        return 130
    return 0


def _run_exec(args: argparse.Namespace) -> int:
    shell = Shell()
    line = args.line.strip()
    if not line:
        return 0
    shell.governor.guard()
    try:
        return _dispatch(shell, line)
    finally:
        shell.governor.restore()


def _run_shell(args: argparse.Namespace) -> int:
    shell = Shell()
    interactive = sys.stdin.isatty()
    shell.governor.guard()
    try:
        while True:
            try:
                raw = input(PROMPT if interactive else "")
            except EOFError:
                if interactive:
                    sys.stdout.write("\n")
                return 0
            if raw == "":
                continue
            line = os.path.expandvars(raw).strip()
            if line in _EXIT_WORDS:
                return 0
            status = _dispatch(shell, line) if line else 0
            # Piped input runs a single line.
            if not interactive:
                return status
    finally:
        shell.governor.restore()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="minish")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostics written to stderr (default: WARNING).",
    )
    parser.set_defaults(func=_run_shell)
    subparsers = parser.add_subparsers(dest="command_name")

    exec_parser = subparsers.add_parser("exec", help="Run a single command line")
    exec_parser.add_argument("line", help="Already-expanded command line to execute")
    exec_parser.set_defaults(func=_run_exec)

    shell_parser = subparsers.add_parser("shell", help="Start the read loop (default)")
    shell_parser.set_defaults(func=_run_shell)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    exit_code = args.func(args)
    raise SystemExit(exit_code)


__all__ = ["main"]
