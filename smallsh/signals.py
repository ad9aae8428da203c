import logging
import os
import signal
from contextlib import contextmanager

logger = logging.getLogger(__name__)

ENTER_MESSAGE = "Entering foreground-only mode\n"
EXIT_MESSAGE = "Exiting foreground-only mode\n"


class ModeController:
    """
    Owns the foreground-only flag and the interpreter's signal dispositions.

    Ctrl+Z (SIGTSTP) flips the flag instead of stopping the shell; Ctrl+C
    (SIGINT) is ignored by the shell itself and only reaches foreground
    children.
    """

    def __init__(self, foreground_only=False):
        self.foreground_only = foreground_only

    def handle_sigtstp(self, signum, frame):
        """Toggle foreground-only mode and tell the user"""
        self.foreground_only = not self.foreground_only
        message = ENTER_MESSAGE if self.foreground_only else EXIT_MESSAGE
        # os.write: the handler may interrupt a print() on sys.stdout
        try:
            os.write(1, ("\n" + message).encode())
        except OSError:
            pass

    def install(self):
        """Bind the shell's own dispositions; done once at startup"""
        signal.signal(signal.SIGINT, signal.SIG_IGN)
        signal.signal(signal.SIGTSTP, self.handle_sigtstp)
        logger.debug("signal handlers installed")

    def restore(self):
        signal.signal(signal.SIGTSTP, self.handle_sigtstp)

    @contextmanager
    def spawning(self):
        """Hold SIGTSTP off while a child is created, then hand it back to the toggle"""
        signal.signal(signal.SIGTSTP, signal.SIG_IGN)
        try:
            yield
        finally:
            self.restore()


def child_setup(foreground):
    """
    Build the preexec_fn for a new child.

    Runs in the child after fork and before exec. Ignored dispositions
    survive exec, so background children stay deaf to Ctrl+C.
    """
    def _setup():
        signal.signal(signal.SIGTSTP, signal.SIG_IGN)
        if foreground:
            signal.signal(signal.SIGINT, signal.SIG_DFL)
        else:
            signal.signal(signal.SIGINT, signal.SIG_IGN)
    return _setup
