"""Hook dataclasses and type hints for process lifecycle observers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class ProcessEvent:
    pid: int
    argv: tuple[str, ...]
    kind: Literal["spawn", "reap"]
    returncode: int | None = None


ProcessHook = Callable[[ProcessEvent], None]


__all__ = ["ProcessEvent", "ProcessHook"]
