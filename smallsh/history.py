import sys

import readline

from smallsh.config import PROMPT


def init_readline():
    """Line editing and in-session history, only when attached to a terminal"""
    try:
        if not sys.stdin.isatty():
            return

        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")

        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")

        readline.parse_and_bind("set editing-mode emacs")

    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


def read_line(prompt=PROMPT):
    """
    Show the prompt and read one line.
    Returns: the line without its newline, or None at end of input
    """
    try:
        return input(prompt)
    except EOFError:
        return None
