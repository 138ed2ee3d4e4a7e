import os

PROMPT = ": "

# Upper bound on live children (foreground + background)
DEFAULT_MAX_PROCESSES = 100


def _max_processes():
    raw = os.getenv("SMALLSH_MAX_PROCESSES")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_MAX_PROCESSES
    return value if value > 0 else DEFAULT_MAX_PROCESSES


MAX_PROCESSES = _max_processes()

HISTORY_FILE = os.path.expanduser(os.getenv("SMALLSH_HISTORY", "~/.smallsh_history"))
MAX_HISTORY = 1000

NULL_DEVICE = os.devnull
CREATE_MODE = 0o777
