import signal

import pytest

from smallsh.state import ShellState

SHELL_PID = 1234


@pytest.fixture
def state():
    """A fresh shell state with a fixed pid; signal dispositions restored afterwards."""
    saved = {sig: signal.getsignal(sig) for sig in (signal.SIGINT, signal.SIGTSTP)}
    st = ShellState(pid=SHELL_PID)
    yield st
    st.jobs.kill_all(timeout=2)
    for sig, handler in saved.items():
        if handler is not None:
            signal.signal(sig, handler)
