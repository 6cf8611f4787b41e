"""Command execution package."""

from .core import Shell
from .process import ProcessGroup, ProcessSpec

__all__ = ["Shell", "ProcessGroup", "ProcessSpec"]
