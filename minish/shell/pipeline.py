"""Concurrent execution of ``|``-connected stages."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from ..exceptions import ArgumentError, LaunchError, NonZeroExit, PipelineError
from ..parser import PipelineNode
from .process import ProcessGroup, ProcessSpec

if TYPE_CHECKING:
    from .core import Shell

logger = logging.getLogger(__name__)


def _close(*fds: int | None) -> None:
    for fd in fds:
        if fd is not None:
            os.close(fd)


def run_pipeline(shell: "Shell", node: PipelineNode) -> None:
    """Start every stage, then reap them in order.

    Stage ``i`` writes into an anonymous pipe read by stage ``i + 1``; the
    first stage inherits stdin and the last inherits stdout/stderr. All
    stages run before any is waited on so a full pipe buffer cannot
    deadlock the chain.
    """

    if any(not stage for stage in node.stages):
        raise ArgumentError("empty command in pipeline")
    specs = [ProcessSpec.from_tokens(stage) for stage in node.stages]
    last = len(specs) - 1

    with ProcessGroup(env=shell.child_env, hook=shell.process_hook) as group:
        procs = []
        read_end: int | None = None
        try:
            for index, spec in enumerate(specs):
                write_end: int | None = None
                next_read: int | None = None
                if index < last:
                    try:
                        next_read, write_end = os.pipe()
                    except OSError as exc:
                        raise PipelineError(index, exc) from exc
                spec.stdin = read_end
                spec.stdout = write_end
                try:
                    procs.append(group.start(spec))
                except LaunchError as exc:
                    raise PipelineError(index, exc) from exc
                finally:
                    # The children hold their own copies; the parent's would keep EOF away.
                    _close(read_end, write_end)
                    read_end = next_read
        finally:
            _close(read_end)
        logger.debug("pipeline started %d stage(s)", len(procs))

        failure: PipelineError | None = None
        for index, proc in enumerate(procs):
            try:
                group.wait(proc)
            except NonZeroExit as exc:
                if failure is None:
                    failure = PipelineError(index, exc)
        if failure is not None:
            raise failure from failure.cause


__all__ = ["run_pipeline"]
