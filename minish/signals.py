"""Interrupt-signal disposition around each dispatched line."""

from __future__ import annotations

import logging
import signal
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

SignalInstaller = Callable[[int, Any], Any]


class SignalState(Enum):
    GUARDED = "guarded"
    EXPOSED = "exposed"


class SignalGovernor:
    """Two-state switch for the interpreter's SIGINT disposition.

    GUARDED ignores the interrupt so an idle interpreter survives it.
    EXPOSED restores the default disposition for the duration of one
    dispatched line: children start with ``SIG_DFL`` and the interpreter
    itself sees ``KeyboardInterrupt``.
    """

    def __init__(
        self,
        *,
        signum: int = signal.SIGINT,
        install: SignalInstaller = signal.signal,
        exposed_handler: Any = signal.default_int_handler,
    ) -> None:
        self.signum = signum
        self._install = install
        self._exposed_handler = exposed_handler
        self._previous: Any = None
        self._saved = False
        self.state: SignalState | None = None
        self.transitions: list[SignalState] = []

    def guard(self) -> None:
        previous = self._install(self.signum, signal.SIG_IGN)
        if not self._saved:
            self._previous = previous
            self._saved = True
        self._enter(SignalState.GUARDED)

    def expose(self) -> None:
        self._install(self.signum, self._exposed_handler)
        self._enter(SignalState.EXPOSED)

    @contextmanager
    def exposed(self) -> Iterator[None]:
        self.expose()
        try:
            yield
        finally:
            self.guard()

    def restore(self) -> None:
        """Reinstate whatever handler was active before the first guard."""

        if not self._saved:
            return
        self._install(self.signum, self._previous)
        self._saved = False
        self.state = None
        logger.debug("signal %s handler restored", self.signum)

    def _enter(self, state: SignalState) -> None:
        self.state = state
        self.transitions.append(state)
        logger.debug("signal %s -> %s", self.signum, state.value)


__all__ = ["SignalGovernor", "SignalInstaller", "SignalState"]
