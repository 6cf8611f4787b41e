"""File-backed stream redirection for a single command."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO, TYPE_CHECKING

from ..exceptions import FileError
from ..parser import RedirectMode, RedirectNode, tokenize
from .process import ProcessSpec, run_spec

if TYPE_CHECKING:
    from .core import Shell

logger = logging.getLogger(__name__)

_OPEN_MODES = {
    RedirectMode.APPEND: "ab",
    RedirectMode.TRUNCATE: "wb",
    RedirectMode.READ: "rb",
}


@contextmanager
def open_target(path: str, mode: RedirectMode) -> Iterator[IO[bytes]]:
    if not path:
        raise FileError(f"missing file name after {mode.operator}")
    try:
        handle = open(path, _OPEN_MODES[mode])
    except OSError as exc:
        raise FileError(f"{path}: {exc.strerror or exc}") from exc
    with handle:
        yield handle


def run_redirect(shell: "Shell", node: RedirectNode) -> None:
    tokens = tokenize(node.command)
    with open_target(node.target, node.mode) as handle:
        if not tokens:
            return
        spec = ProcessSpec.from_tokens(tokens)
        if node.mode is RedirectMode.READ:
            spec.stdin = handle
        else:
            spec.stdout = handle
        logger.debug("redirect %s %s %s", spec.argv, node.mode.operator, node.target)
        run_spec(spec, env=shell.child_env, hook=shell.process_hook)


__all__ = ["open_target", "run_redirect"]
