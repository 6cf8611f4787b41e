"""Text output built-ins."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..registry import BUILTINS

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell

_ECHO_PREFIX = "echo "


@BUILTINS.builtin("echo")
def echo(shell: "Shell", _: list[str], text: str) -> None:
    # Spacing after "echo " is kept verbatim; any other separator is dropped.
    if text.startswith(_ECHO_PREFIX):
        message = text[len(_ECHO_PREFIX):]
    else:
        message = text[len("echo"):].lstrip()
    shell.write_line(message)
