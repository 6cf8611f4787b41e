"""Process control built-ins."""

from __future__ import annotations

import logging
import os
import signal
from typing import TYPE_CHECKING

from ..process import ProcessSpec, run_spec
from ..registry import BUILTINS
from ...exceptions import ArgumentError, ProcessError

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell

logger = logging.getLogger(__name__)


@BUILTINS.builtin("kill")
def kill(shell: "Shell", args: list[str], _: str) -> None:
    if not args:
        raise ArgumentError("kill: no pid")
    try:
        pid = int(args[0])
    except ValueError as exc:
        raise ArgumentError(f"kill: invalid pid {args[0]!r}") from exc
    # 0 and negative ids address process groups, including our own.
    if pid <= 0:
        raise ArgumentError(f"kill: invalid pid {args[0]!r}")
    try:
        os.kill(pid, signal.SIGTERM)
    except ProcessLookupError as exc:
        raise ProcessError(f"kill: ({pid}) no such process") from exc
    except OSError as exc:
        raise ProcessError(f"kill: ({pid}) {exc.strerror or exc}") from exc
    logger.debug("sent SIGTERM to %s", pid)


@BUILTINS.builtin("ps")
def ps(shell: "Shell", args: list[str], _: str) -> None:
    spec = ProcessSpec(program="ps", args=args or ["aux"])
    run_spec(spec, env=shell.child_env, hook=shell.process_hook)
