from smallsh.config import COMMENT_MARKER, PID_MARKER


def is_skippable(line):
    """Blank lines and comments produce no command."""
    return not line.strip() or line.startswith(COMMENT_MARKER)


def expand_pid(line, pid, marker=PID_MARKER):
    """
    Replace every occurrence of `marker` with the decimal `pid`.

    Scans left to right over non-overlapping occurrences, so "$$$" becomes
    "<pid>$" and "$$$$" becomes "<pid><pid>".
    """
    replacement = str(pid)
    out = []
    i = 0
    step = len(marker)
    while i < len(line):
        if line.startswith(marker, i):
            out.append(replacement)
            i += step
        else:
            out.append(line[i])
            i += 1
    return "".join(out)
