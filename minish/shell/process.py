"""Process descriptors and scoped process lifetimes."""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import IO, Any, Union

from ..exceptions import ArgumentError, LaunchError, NonZeroExit
from ..hooks import ProcessEvent, ProcessHook

logger = logging.getLogger(__name__)

# None inherits the interpreter's stream; an int is a raw pipe descriptor.
StreamBinding = Union[int, IO[Any], None]


@dataclass
class ProcessSpec:
    program: str
    args: list[str] = field(default_factory=list)
    stdin: StreamBinding = None
    stdout: StreamBinding = None
    stderr: StreamBinding = None

    @classmethod
    def from_tokens(cls, tokens: list[str]) -> "ProcessSpec":
        if not tokens:
            raise ArgumentError("missing command")
        program, *args = tokens
        return cls(program=program, args=args)

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]


class ProcessGroup:
    """Scoped list of started processes.

    Leaving the ``with`` block reaps every member that has not been waited
    on yet. When the block exits with an exception, members still running
    are terminated first.
    """

    def __init__(
        self,
        *,
        env: Mapping[str, str] | None = None,
        hook: ProcessHook | None = None,
    ) -> None:
        self.env = env
        self.hook = hook
        self.processes: list[subprocess.Popen[bytes]] = []
        self._reaped: set[int] = set()

    def __enter__(self) -> "ProcessGroup":
        return self

    def __exit__(self, exc_type, exc_value, tb) -> None:
        stopping = exc_type is not None
        interrupted: KeyboardInterrupt | None = None
        for proc in self.processes:
            if proc.pid in self._reaped:
                continue
            if stopping and proc.poll() is None:
                logger.debug("terminating pid %s", proc.pid)
                proc.terminate()
            try:
                self._reap(proc)
            except KeyboardInterrupt as exc:
                # Keep reaping the rest; the interrupt is raised once all are gone.
                interrupted = exc
                stopping = True
        if interrupted is not None and exc_type is None:
            raise interrupted

    def start(self, spec: ProcessSpec) -> subprocess.Popen[bytes]:
        # Buffered interpreter output must land before the child writes.
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            proc = subprocess.Popen(
                spec.argv,
                stdin=spec.stdin,
                stdout=spec.stdout,
                stderr=spec.stderr,
                env=dict(self.env) if self.env is not None else None,
            )
        except OSError as exc:
            raise LaunchError(f"{spec.program}: {exc.strerror or exc}") from exc
        self.processes.append(proc)
        logger.debug("spawned pid %s: %s", proc.pid, spec.argv)
        self._emit(ProcessEvent(pid=proc.pid, argv=tuple(spec.argv), kind="spawn"))
        return proc

    def wait(self, proc: subprocess.Popen[bytes]) -> None:
        """Reap ``proc`` and raise NonZeroExit if it failed."""

        returncode = self._reap(proc)
        if returncode != 0:
            raise NonZeroExit(_program(proc), returncode)

    def _reap(self, proc: subprocess.Popen[bytes]) -> int:
        if proc.pid in self._reaped:
            return proc.returncode
        interrupted: KeyboardInterrupt | None = None
        while True:
            try:
                returncode = proc.wait()
            except KeyboardInterrupt as exc:
                # The interrupt reached the interpreter too; finish reaping first.
                interrupted = exc
                continue
            break
        self._mark_reaped(proc, returncode)
        if interrupted is not None:
            raise interrupted
        return returncode

    def _mark_reaped(self, proc: subprocess.Popen[bytes], returncode: int) -> None:
        self._reaped.add(proc.pid)
        logger.debug("reaped pid %s (status %s)", proc.pid, returncode)
        self._emit(
            ProcessEvent(pid=proc.pid, argv=tuple(_argv(proc)), kind="reap", returncode=returncode)
        )

    def _emit(self, event: ProcessEvent) -> None:
        if self.hook is not None:
            self.hook(event)


def _argv(proc: subprocess.Popen[bytes]) -> list[str]:
    args = proc.args
    if isinstance(args, (list, tuple)):
        return [str(arg) for arg in args]
    return [str(args)]


def _program(proc: subprocess.Popen[bytes]) -> str:
    return _argv(proc)[0]


def run_spec(
    spec: ProcessSpec,
    *,
    env: Mapping[str, str] | None = None,
    hook: ProcessHook | None = None,
) -> None:
    """Run one process in the foreground and wait for it."""

    with ProcessGroup(env=env, hook=hook) as group:
        proc = group.start(spec)
        group.wait(proc)


__all__ = ["ProcessGroup", "ProcessSpec", "StreamBinding", "run_spec"]
