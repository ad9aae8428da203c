import logging

from smallsh.config import BACKGROUND_MARKER, INPUT_REDIRECT, OUTPUT_REDIRECT

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """A command line that cannot be turned into a command."""


class Command:
    """One parsed invocation; built per line and dropped after dispatch."""

    def __init__(self, program, arguments=None, input_file=None,
                 output_file=None, background=False):
        self.program = program
        self.arguments = arguments if arguments is not None else [program]
        self.input_file = input_file
        self.output_file = output_file
        self.background = background

    def __repr__(self):
        return (f"Command(program={self.program!r}, arguments={self.arguments!r}, "
                f"input_file={self.input_file!r}, output_file={self.output_file!r}, "
                f"background={self.background!r})")


def tokenize(line):
    return line.split()


def parse_command(line, foreground_only=False):
    """
    Build a Command from an already expanded line.

    `<` and `>` take the next token as their file. A trailing `&` asks for
    background execution, which is granted only when foreground-only mode
    is off; an `&` anywhere else is dropped.
    Returns None for a line with no tokens.
    """
    tokens = tokenize(line)
    if not tokens:
        return None

    cmd = Command(tokens[0])
    i = 1
    while i < len(tokens):
        tok = tokens[i]
        if tok in (INPUT_REDIRECT, OUTPUT_REDIRECT):
            if i + 1 >= len(tokens):
                raise ParseError(f"missing file name after {tok}")
            if tok == INPUT_REDIRECT:
                cmd.input_file = tokens[i + 1]
            else:
                cmd.output_file = tokens[i + 1]
            i += 2
        elif tok == BACKGROUND_MARKER:
            if i == len(tokens) - 1 and not foreground_only:
                cmd.background = True
            elif i == len(tokens) - 1:
                logger.debug("foreground-only mode: ignoring &")
            i += 1
        else:
            cmd.arguments.append(tok)
            i += 1

    return cmd
