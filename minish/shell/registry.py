"""Table of built-ins consulted before external program lookup."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from .common import ShellCommand


class BuiltinTable:
    """Maps a command name to the handler that intercepts it.

    Each name may be claimed once; a second claim is a programming error.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, ShellCommand] = {}

    def builtin(self, name: str) -> Callable[[ShellCommand], ShellCommand]:
        def decorator(func: ShellCommand) -> ShellCommand:
            if name in self._handlers:
                raise ValueError(f"built-in {name!r} is already defined")
            self._handlers[name] = func
            return func

        return decorator

    def items(self) -> Iterator[tuple[str, ShellCommand]]:
        return iter(tuple(self._handlers.items()))


BUILTINS = BuiltinTable()


__all__ = ["BUILTINS", "BuiltinTable"]
