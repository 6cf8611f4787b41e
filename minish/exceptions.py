"""Error kinds raised while executing a command line."""

from __future__ import annotations

import signal


class MinishError(Exception):
    """Base class for every failure surfaced to the read loop."""

    exit_code = 1


class ArgumentError(MinishError):
    exit_code = 2


class DirectoryError(MinishError):
    pass


class FileError(MinishError):
    pass


class LaunchError(MinishError):
    exit_code = 127


class ProcessError(MinishError):
    pass


class NonZeroExit(MinishError):
    """A launched program finished unsuccessfully."""

    def __init__(self, program: str, returncode: int) -> None:
        self.program = program
        self.returncode = returncode
        if returncode < 0:
            try:
                name = signal.Signals(-returncode).name
            except ValueError:
                name = f"signal {-returncode}"
            message = f"{program}: terminated by {name}"
        else:
            message = f"{program}: exit status {returncode}"
        super().__init__(message)

    @property
    def signaled(self) -> bool:
        return self.returncode < 0

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode


class PipelineError(MinishError):
    """Wraps the first failing stage of a pipeline."""

    def __init__(self, stage: int, cause: BaseException) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"pipeline stage {stage}: {cause}")

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        return getattr(self.cause, "exit_code", 1)


__all__ = [
    "MinishError",
    "ArgumentError",
    "DirectoryError",
    "FileError",
    "LaunchError",
    "ProcessError",
    "NonZeroExit",
    "PipelineError",
]
