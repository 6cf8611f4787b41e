"""Core Shell implementation."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from typing import TextIO

from ..hooks import ProcessHook
from ..parser import CommandNode, ConditionalNode, Node, PipelineNode, RedirectNode, parse_line
from ..signals import SignalGovernor
from .common import CommandHandler, ShellCommand
from .conditional import run_conditional
from .pipeline import run_pipeline
from .process import ProcessSpec, run_spec
from .redirect import run_redirect
from .registry import BUILTINS

logger = logging.getLogger(__name__)


class Shell:
    """Parses one expanded line and runs it as OS processes."""

    def __init__(
        self,
        *,
        stdout: TextIO | None = None,
        env: Mapping[str, str] | None = None,
        governor: SignalGovernor | None = None,
        process_hook: ProcessHook | None = None,
    ) -> None:
        self._stdout = stdout
        self._env = env
        self.governor = governor or SignalGovernor()
        self.process_hook = process_hook
        self.commands: dict[str, CommandHandler] = {}
        self._register_builtin_commands()

    # ------------------------------------------------------------------
    # Command registration
    # ------------------------------------------------------------------
    def register_command(self, name: str, handler: CommandHandler, *, replace: bool = False) -> None:
        """Intercept ``name`` before external lookup.

        Claiming a name that is already a built-in requires ``replace=True``.
        """

        if name in self.commands and not replace:
            raise ValueError(f"built-in {name!r} is already registered")
        self.commands[name] = handler

    def _bind_registered_handler(self, func: ShellCommand) -> CommandHandler:
        def bound(args: list[str], text: str) -> None:
            func(self, args, text)

        return bound

    def _register_builtin_commands(self) -> None:
        # Import command modules for their side effects (registration)
        from . import commands  # noqa: F401

        for name, handler in BUILTINS.items():
            self.register_command(name, self._bind_registered_handler(handler))

    # ------------------------------------------------------------------
    # Streams and environment
    # ------------------------------------------------------------------
    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def env(self) -> Mapping[str, str]:
        return self._env if self._env is not None else os.environ

    @property
    def child_env(self) -> Mapping[str, str] | None:
        # None lets children inherit the live process environment.
        return self._env

    def write_line(self, text: str) -> None:
        self.stdout.write(f"{text}\n")
        self.stdout.flush()

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------
    def execute(self, line: str) -> None:
        """Run one top-level line, raising MinishError on failure.

        SIGINT is exposed for exactly the duration of the dispatch.
        """

        node = parse_line(line)
        logger.debug("dispatch %s: %r", type(node).__name__, line)
        with self.governor.exposed():
            self.run(node)

    def run(self, node: Node) -> None:
        """Evaluate a parse tree without touching signal disposition."""

        if isinstance(node, ConditionalNode):
            run_conditional(self, node)
        elif isinstance(node, RedirectNode):
            run_redirect(self, node)
        elif isinstance(node, PipelineNode):
            run_pipeline(self, node)
        else:
            self._run_command(node)

    def _run_command(self, node: CommandNode) -> None:
        if not node.tokens:
            return
        name, *args = node.tokens
        handler = self.commands.get(name)
        if handler is not None:
            handler(args, node.text)
            return
        run_spec(ProcessSpec.from_tokens(node.tokens), env=self.child_env, hook=self.process_hook)


__all__ = ["Shell"]
