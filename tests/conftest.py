import signal

import pytest

from minish import ProcessEvent, Shell, SignalGovernor


class RecordingInstaller:
    """Stands in for signal.signal so tests never touch real dispositions."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, object]] = []

    def __call__(self, signum: int, handler: object) -> object:
        self.calls.append((signum, handler))
        return signal.SIG_DFL


@pytest.fixture
def installer() -> RecordingInstaller:
    return RecordingInstaller()


@pytest.fixture
def events() -> list[ProcessEvent]:
    return []


@pytest.fixture
def shell(installer, events, tmp_path, monkeypatch) -> Shell:
    monkeypatch.chdir(tmp_path)
    return Shell(governor=SignalGovernor(install=installer), process_hook=events.append)
