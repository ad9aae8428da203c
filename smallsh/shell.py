import logging
import sys

from smallsh.builtin import execute_builtin, is_builtin
from smallsh.config import LOG_LEVEL
from smallsh.executor import launch
from smallsh.expander import expand_pid, is_skippable
from smallsh.history import init_readline, read_line
from smallsh.parser import ParseError, parse_command
from smallsh.state import ShellState

logger = logging.getLogger(__name__)


def configure_logging(level=LOG_LEVEL):
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level, logging.WARNING),
        format="smallsh[%(process)d] %(levelname)s %(name)s: %(message)s",
    )


def process_line(line, state):
    """
    Handle one input line: expand, parse, then run a built-in or launch.
    Returns: False once the shell should stop
    """
    if is_skippable(line):
        return state.running

    line = expand_pid(line, state.pid)
    try:
        cmd = parse_command(line, foreground_only=state.mode.foreground_only)
    except ParseError as e:
        logger.info("parse error in %r: %s", line, e)
        print(f"smallsh: {e}", file=sys.stderr, flush=True)
        return state.running
    if cmd is None:
        return state.running

    if is_builtin(cmd):
        execute_builtin(cmd, state)
    else:
        launch(cmd, state)
    return state.running


def main_loop(state=None):
    """Main shell loop"""
    if state is None:
        state = ShellState()

    # Setup
    state.mode.install()
    init_readline()

    while state.running:
        state.jobs.report()

        line = read_line()
        if line is None:
            # end of input behaves like exit
            print()
            state.jobs.kill_all()
            break

        process_line(line, state)

    return 0


def main():
    configure_logging()
    return main_loop()
