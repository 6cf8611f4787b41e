import os
import shutil
import signal
import subprocess

import pytest

from minish import (
    ArgumentError,
    DirectoryError,
    LaunchError,
    NonZeroExit,
    ProcessError,
    Shell,
    SignalGovernor,
)
from minish.shell.registry import BuiltinTable

# Above PID_MAX_LIMIT on Linux, so it can never name a live process.
_UNUSED_PID = 2**22 + 1


def test_pwd_prints_working_directory(shell, tmp_path, capfd):
    shell.execute("pwd")
    assert capfd.readouterr().out == f"{os.getcwd()}\n"
    assert os.path.samefile(os.getcwd(), tmp_path)


def test_cd_changes_directory_for_later_commands(shell, tmp_path, capfd):
    (tmp_path / "sub").mkdir()
    shell.execute("cd sub")
    assert os.path.samefile(os.getcwd(), tmp_path / "sub")
    shell.execute("ls ..")
    assert "sub" in capfd.readouterr().out


def test_cd_without_argument_uses_home(tmp_path, monkeypatch, installer):
    monkeypatch.chdir(tmp_path)
    home = tmp_path / "home"
    home.mkdir()
    shell = Shell(env={"HOME": str(home)}, governor=SignalGovernor(install=installer))
    shell.execute("cd")
    assert os.path.samefile(os.getcwd(), home)


def test_cd_without_home_fails(tmp_path, monkeypatch, installer):
    monkeypatch.chdir(tmp_path)
    shell = Shell(env={}, governor=SignalGovernor(install=installer))
    with pytest.raises(DirectoryError):
        shell.execute("cd")


def test_cd_into_missing_directory_fails(shell):
    with pytest.raises(DirectoryError) as exc:
        shell.execute("cd does-not-exist")
    assert "does-not-exist" in str(exc.value)


def test_echo_prints_text_after_prefix_verbatim(shell, capfd):
    shell.execute("echo  spaced   out")
    assert capfd.readouterr().out == " spaced   out\n"


def test_bare_echo_prints_empty_line(shell, capfd):
    shell.execute("echo")
    assert capfd.readouterr().out == "\n"


def test_echo_accepts_other_whitespace_after_name(shell, capfd):
    shell.execute("echo\thello  there")
    assert capfd.readouterr().out == "hello  there\n"


def test_kill_terminates_running_process(shell):
    proc = subprocess.Popen(["sleep", "30"])
    try:
        shell.execute(f"kill {proc.pid}")
        assert proc.wait(timeout=10) == -signal.SIGTERM
    finally:
        if proc.poll() is None:
            proc.kill()
            proc.wait()


def test_kill_unknown_pid_is_process_error(shell):
    with pytest.raises(ProcessError):
        shell.execute(f"kill {_UNUSED_PID}")


@pytest.mark.parametrize("line", ["kill", "kill abc", "kill 0", "kill -1"])
def test_kill_rejects_bad_arguments(shell, line):
    with pytest.raises(ArgumentError):
        shell.execute(line)


@pytest.mark.skipif(shutil.which("ps") is None, reason="ps not installed")
def test_ps_lists_processes(shell, capfd, events):
    shell.execute("ps")
    assert "PID" in capfd.readouterr().out
    assert events[0].argv == ("ps", "aux")


def test_external_program_inherits_streams(shell, capfd):
    shell.execute("printf hello")
    assert capfd.readouterr().out == "hello"


def test_unknown_program_is_launch_error(shell):
    with pytest.raises(LaunchError) as exc:
        shell.execute("definitely-not-a-program-xyz")
    assert exc.value.exit_code == 127


def test_unsuccessful_exit_is_reported(shell):
    with pytest.raises(NonZeroExit) as exc:
        shell.execute("false")
    assert exc.value.returncode == 1
    assert exc.value.exit_code == 1
    assert str(exc.value) == "false: exit status 1"


def test_registered_builtin_intercepts_external_lookup(shell, capfd):
    seen: list[tuple[list[str], str]] = []

    def true_builtin(args: list[str], text: str) -> None:
        seen.append((args, text))

    shell.register_command("true", true_builtin)
    shell.execute("true a b")
    assert seen == [(["a", "b"], "true a b")]


def test_builtin_names_cannot_be_claimed_twice(shell, capfd):
    def loud_pwd(args: list[str], text: str) -> None:
        shell.write_line("replaced")

    with pytest.raises(ValueError):
        shell.register_command("pwd", loud_pwd)
    shell.register_command("pwd", loud_pwd, replace=True)
    shell.execute("pwd")
    assert capfd.readouterr().out == "replaced\n"


def test_builtin_table_rejects_duplicate_definitions():
    table = BuiltinTable()

    @table.builtin("greet")
    def greet(shell, args, text):
        pass

    with pytest.raises(ValueError):
        table.builtin("greet")(greet)
    assert [name for name, _ in table.items()] == ["greet"]
