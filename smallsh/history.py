import os
import readline
import sys

from config import HISTORY_FILE, MAX_HISTORY


def init_readline():
    """Line editing only makes sense on a real terminal."""
    if not sys.stdin.isatty():
        return
    try:
        readline.parse_and_bind("set editing-mode emacs")
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")
    except Exception as e:
        print(f"smallsh: warning: could not configure readline: {e}", file=sys.stderr)


def load_history(path=HISTORY_FILE):
    try:
        if os.path.exists(path):
            readline.read_history_file(path)
        readline.set_history_length(MAX_HISTORY)
    except OSError as e:
        print(f"smallsh: warning: could not load history: {e}", file=sys.stderr)


def save_history(path=HISTORY_FILE):
    try:
        readline.set_history_length(MAX_HISTORY)
        readline.write_history_file(path)
    except OSError as e:
        print(f"smallsh: warning: could not save history: {e}", file=sys.stderr)


def show_history():
    """Print the whole history, numbered from 1."""
    hlen = readline.get_current_history_length()
    for i in range(1, hlen + 1):
        print(f"{i}\t{readline.get_history_item(i)}")
