"""minish package: command-line execution engine for a minimal shell."""

from .exceptions import (
    ArgumentError,
    DirectoryError,
    FileError,
    LaunchError,
    MinishError,
    NonZeroExit,
    PipelineError,
    ProcessError,
)
from .hooks import ProcessEvent, ProcessHook
from .parser import parse_line
from .shell import ProcessGroup, ProcessSpec, Shell
from .signals import SignalGovernor, SignalState

__all__ = [
    "Shell",
    "ProcessSpec",
    "ProcessGroup",
    "SignalGovernor",
    "SignalState",
    "ProcessEvent",
    "ProcessHook",
    "parse_line",
    "MinishError",
    "ArgumentError",
    "DirectoryError",
    "FileError",
    "LaunchError",
    "ProcessError",
    "NonZeroExit",
    "PipelineError",
]
