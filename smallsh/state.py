import os

from smallsh.job_control import JobTracker
from smallsh.signals import ModeController

EXITED = "exited"
SIGNALED = "signaled"


class ExitStatus:
    """Outcome of the last foreground command."""

    def __init__(self, kind=EXITED, value=0):
        self.kind = kind
        self.value = value

    @classmethod
    def from_returncode(cls, returncode):
        """subprocess reports death by signal N as returncode -N"""
        if returncode < 0:
            return cls(SIGNALED, -returncode)
        return cls(EXITED, returncode)

    @property
    def signaled(self):
        return self.kind == SIGNALED

    def describe(self):
        if self.signaled:
            return f"terminated by signal {self.value}"
        return f"exit value {self.value}"

    def __eq__(self, other):
        if not isinstance(other, ExitStatus):
            return NotImplemented
        return (self.kind, self.value) == (other.kind, other.value)

    def __repr__(self):
        return f"ExitStatus({self.kind!r}, {self.value})"


class ShellState:
    """Everything the interpreter carries from one prompt to the next."""

    def __init__(self, pid=None, mode=None, jobs=None):
        self.pid = os.getpid() if pid is None else pid
        self.mode = mode if mode is not None else ModeController()
        self.jobs = jobs if jobs is not None else JobTracker()
        self.status = ExitStatus()
        self.running = True
