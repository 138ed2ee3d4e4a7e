import os

from smallsh.errors import DirectoryChangeError
from smallsh.history import show_history
from smallsh.job_control import cleanup_jobs, show_jobs
from smallsh.status import Exited


def builtin_cd(args, state):
    """Change directory to args[0], or to $HOME when no argument is given."""
    if args:
        path = args[0]
    else:
        path = os.environ.get("HOME")
        if not path:
            state.status.set(Exited(1))
            raise DirectoryChangeError("HOME", "not set")
    try:
        os.chdir(path)
    except OSError as e:
        state.status.set(Exited(1))
        raise DirectoryChangeError(path, e.strerror or str(e))
    state.status.set(Exited(0))


def builtin_status(args, state):
    print(state.status.render(), flush=True)


def builtin_exit(args, state):
    """Signal leftover background jobs; the caller stops the loop."""
    cleanup_jobs(state)


def builtin_jobs(args, state):
    show_jobs(state)


def builtin_history(args, state):
    show_history()


BUILTINS = {
    "cd": builtin_cd,
    "status": builtin_status,
    "exit": builtin_exit,
    "jobs": builtin_jobs,
    "history": builtin_history,
}


def is_builtin(name):
    return name in BUILTINS


def execute_builtin(name, args, state):
    """
    Run a built-in command.
    Returns False when the shell should stop.
    """
    BUILTINS[name](args, state)
    return name != "exit"
