import os

# Prompt & tokens
PROMPT = ": "
PID_MARKER = "$$"
COMMENT_MARKER = "#"
BACKGROUND_MARKER = "&"
INPUT_REDIRECT = "<"
OUTPUT_REDIRECT = ">"

# Redirection
OUTPUT_FILE_MODE = 0o644
NULL_DEVICE = os.devnull

# Status code recorded when a command cannot be started
FAILURE_STATUS = 1

# Environment overrides
LOG_LEVEL = os.getenv("SMALLSH_LOG_LEVEL", "WARNING").upper()
DEFAULT_KILL_TIMEOUT = 1.0

try:
    KILL_TIMEOUT = float(os.getenv("SMALLSH_KILL_TIMEOUT", DEFAULT_KILL_TIMEOUT))
except ValueError:
    KILL_TIMEOUT = DEFAULT_KILL_TIMEOUT
