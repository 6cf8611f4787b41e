"""Shared shell types."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core import Shell


# Handlers receive the argument tokens and the full command text.
CommandHandler = Callable[[list[str], str], None]
ShellCommand = Callable[["Shell", list[str], str], None]


__all__ = ["CommandHandler", "ShellCommand"]
