import signal
import sys
from dataclasses import dataclass, field

from config import MAX_PROCESSES, PROMPT
from smallsh.builtin import execute_builtin, is_builtin
from smallsh.errors import ShellError
from smallsh.executor import launch
from smallsh.history import init_readline, load_history, save_history
from smallsh.job_control import JobTable, ProcessLimit, cleanup_jobs, reap_jobs
from smallsh.parser import build_request, tokenize
from smallsh.status import Exited, StatusRegister


@dataclass
class ShellState:
    status: StatusRegister = field(default_factory=StatusRegister)
    jobs: JobTable = field(default_factory=JobTable)
    limit: ProcessLimit = field(default_factory=lambda: ProcessLimit(MAX_PROCESSES))


def dispatch(tokens, state):
    """
    Handle one tokenized line.
    Returns False when the shell should exit.
    """
    if not tokens or tokens[0].startswith("#"):
        return True

    try:
        request = build_request(tokens)
        name = request.argv[0]
        if is_builtin(name):
            return execute_builtin(name, request.argv[1:], state)

        outcome = launch(request, state)
        if outcome is not None:
            state.status.set(outcome)
    except ShellError as e:
        print(e, file=sys.stderr, flush=True)
        state.status.set(Exited(e.exit_code))
    return True


def run_line(line, state):
    try:
        tokens = tokenize(line)
    except ShellError as e:
        print(e, file=sys.stderr, flush=True)
        state.status.set(Exited(e.exit_code))
        return True
    return dispatch(tokens, state)


def main_loop(state=None):
    """Main shell loop"""
    state = state or ShellState()

    # Ctrl+C at the prompt must not kill the shell
    signal.signal(signal.SIGINT, signal.SIG_IGN)
    init_readline()
    load_history()

    try:
        while True:
            reap_jobs(state)
            try:
                line = input(PROMPT)
            except EOFError:
                print()
                cleanup_jobs(state)
                break

            if not run_line(line, state):
                break
    finally:
        save_history()
    return 0
