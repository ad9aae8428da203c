import logging
import os

logger = logging.getLogger(__name__)


def builtin_exit(cmd, state):
    """Kill outstanding background jobs and stop the loop"""
    state.jobs.kill_all()
    state.running = False


def builtin_cd(cmd, state):
    """Change directory; no argument means $HOME"""
    if len(cmd.arguments) > 1:
        path = cmd.arguments[1]
    else:
        path = os.getenv("HOME", "")
    try:
        os.chdir(path)
    except OSError as e:
        logger.debug("cd %r failed: %s", path, e)
        print("Error finding this directory.", flush=True)


def builtin_status(cmd, state):
    """Report how the last foreground command ended"""
    print(state.status.describe(), flush=True)


BUILTINS = {
    "exit": builtin_exit,
    "cd": builtin_cd,
    "status": builtin_status,
}


def is_builtin(cmd):
    return cmd.program in BUILTINS


def execute_builtin(cmd, state):
    """
    Execute built-in command if it matches.
    Returns: True if the command was a built-in
    """
    handler = BUILTINS.get(cmd.program)
    if handler is None:
        return False
    handler(cmd, state)
    return True
