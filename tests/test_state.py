"""Tests for exit status bookkeeping."""

import os

from smallsh.state import SIGNALED, ExitStatus, ShellState


class TestExitStatus:
    """How subprocess return codes map onto status reports."""

    def test_initial_status(self):
        assert ExitStatus().describe() == "exit value 0"

    def test_normal_exit(self):
        status = ExitStatus.from_returncode(3)
        assert not status.signaled
        assert status.describe() == "exit value 3"

    def test_signal_termination(self):
        status = ExitStatus.from_returncode(-15)
        assert status.kind == SIGNALED
        assert status.value == 15
        assert status.describe() == "terminated by signal 15"

    def test_equality(self):
        assert ExitStatus.from_returncode(1) == ExitStatus(value=1)
        assert ExitStatus.from_returncode(-1) != ExitStatus(value=1)


class TestShellState:
    """The per-interpreter context."""

    def test_defaults(self):
        st = ShellState(pid=99)
        assert st.pid == 99
        assert st.running
        assert st.status == ExitStatus()
        assert len(st.jobs.background_jobs) == 0
        assert not st.mode.foreground_only

    def test_uses_own_pid(self):
        assert ShellState().pid == os.getpid()
