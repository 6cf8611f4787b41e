"""Working-directory built-ins."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from ..registry import BUILTINS
from ...exceptions import DirectoryError

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell


@BUILTINS.builtin("pwd")
def pwd(shell: "Shell", _: list[str], __: str) -> None:
    shell.write_line(os.getcwd())


@BUILTINS.builtin("cd")
def cd(shell: "Shell", args: list[str], _: str) -> None:
    if args:
        target = args[0]
    else:
        target = shell.env.get("HOME", "")
        if not target:
            raise DirectoryError("cd: HOME not set")
    try:
        os.chdir(target)
    except OSError as exc:
        raise DirectoryError(f"cd: {target}: {exc.strerror or exc}") from exc
