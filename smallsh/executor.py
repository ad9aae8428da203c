import errno
import logging
import os
import subprocess

from smallsh.config import FAILURE_STATUS, NULL_DEVICE, OUTPUT_FILE_MODE
from smallsh.signals import child_setup
from smallsh.state import ExitStatus

logger = logging.getLogger(__name__)

# exec failures that mean "this program can't be run", as opposed to fork failures
EXEC_ERRNOS = {
    errno.ENOENT, errno.EACCES, errno.ENOTDIR, errno.ENOEXEC,
    errno.EISDIR, errno.ELOOP, errno.ENAMETOOLONG,
}


class RedirectionError(OSError):
    """A redirection target could not be opened."""

    def __init__(self, path, direction, reason):
        super().__init__(reason.errno, reason.strerror, path)
        self.path = path
        self.direction = direction

    def message(self):
        return f"Cannot open {self.path} for {self.direction}."


def open_input(path):
    try:
        return os.open(path, os.O_RDONLY)
    except OSError as e:
        raise RedirectionError(path, "input", e) from e


def open_output(path):
    try:
        return os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_FILE_MODE)
    except OSError as e:
        raise RedirectionError(path, "output", e) from e


def open_redirections(cmd):
    """
    Open the command's redirection targets before any child exists.
    Background jobs without a target read from and write to the null device.
    Returns: (stdin_fd, stdout_fd), either may be None to inherit
    """
    stdin_fd = stdout_fd = None
    in_path = cmd.input_file
    out_path = cmd.output_file
    if cmd.background:
        in_path = in_path or NULL_DEVICE
        out_path = out_path or NULL_DEVICE

    if in_path is not None:
        stdin_fd = open_input(in_path)
    if out_path is not None:
        try:
            stdout_fd = open_output(out_path)
        except RedirectionError:
            if stdin_fd is not None:
                os.close(stdin_fd)
            raise
    return stdin_fd, stdout_fd


def close_fds(*fds):
    for fd in fds:
        if fd is None:
            continue
        try:
            os.close(fd)
        except OSError:
            pass


def run_external(cmd, stdin=None, stdout=None):
    """
    Start the program with subprocess.
    Returns: Popen object
    """
    return subprocess.Popen(
        cmd.arguments,
        stdin=stdin,
        stdout=stdout,
        preexec_fn=child_setup(not cmd.background),
    )


def launch(cmd, state):
    """
    Run a non-built-in command and fold its outcome into `state`.
    Returns: the Popen object, or None if nothing was started
    """
    try:
        stdin_fd, stdout_fd = open_redirections(cmd)
    except RedirectionError as e:
        logger.info("redirection failed: %s", e)
        print(e.message(), flush=True)
        state.status = ExitStatus(value=FAILURE_STATUS)
        return None

    try:
        with state.mode.spawning():
            proc = run_external(cmd, stdin=stdin_fd, stdout=stdout_fd)
    except OSError as e:
        if e.errno in EXEC_ERRNOS:
            logger.debug("exec %r failed: %s", cmd.program, e)
            print("Command not found.", flush=True)
        else:
            logger.error("could not create process for %r: %s", cmd.program, e)
            print(f"Cannot create process: {e.strerror}", flush=True)
        record_failure(cmd, state)
        return None
    except subprocess.SubprocessError as e:
        logger.error("could not create process for %r: %s", cmd.program, e)
        print(f"Cannot create process: {e}", flush=True)
        record_failure(cmd, state)
        return None
    finally:
        # the child has its own copies now
        close_fds(stdin_fd, stdout_fd)

    logger.debug("started %r as pid %d%s", cmd.program, proc.pid,
                 " in background" if cmd.background else "")

    if cmd.background:
        state.jobs.add(proc)
        return proc

    state.status = wait_foreground(proc)
    return proc


def wait_foreground(proc):
    """Block until the foreground child ends; Ctrl+Z toggles still run while waiting"""
    returncode = proc.wait()
    status = ExitStatus.from_returncode(returncode)
    if status.signaled:
        print(f"Child terminated with signal {status.value}", flush=True)
    return status


def record_failure(cmd, state):
    """Only foreground commands own the status; background failures are just reported"""
    if not cmd.background:
        state.status = ExitStatus(value=FAILURE_STATUS)
