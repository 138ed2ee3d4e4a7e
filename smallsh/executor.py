import os
import signal
import sys

from config import CREATE_MODE, NULL_DEVICE
from smallsh.errors import ForkError
from smallsh.status import Signaled, from_wait_status


def _redirect(path, flags, target_fd, label):
    """Open path and move it onto target_fd. Child-side only."""
    try:
        fd = os.open(path, flags, CREATE_MODE)
    except OSError:
        print(f"cannot open {path} for {label}", file=sys.stderr, flush=True)
        os._exit(1)
    if fd != target_fd:
        os.dup2(fd, target_fd)
        os.close(fd)


def _exec_child(request):
    """
    Runs in the forked child: set signal disposition, wire redirection
    and replace the process image. Never returns.
    """
    if request.background:
        signal.signal(signal.SIGINT, signal.SIG_IGN)
    else:
        signal.signal(signal.SIGINT, signal.SIG_DFL)
    # Python ignores SIGPIPE; exec'd programs expect the default
    signal.signal(signal.SIGPIPE, signal.SIG_DFL)

    input_path = request.input_path
    output_path = request.output_path
    if request.background:
        input_path = input_path or NULL_DEVICE
        output_path = output_path or NULL_DEVICE

    if input_path is not None:
        _redirect(input_path, os.O_RDONLY, 0, "input")
    if output_path is not None:
        _redirect(output_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 1, "output")

    try:
        os.execvp(request.argv[0], request.argv)
    except OSError as e:
        print(f"{request.argv[0]}: {e.strerror}", file=sys.stderr, flush=True)
    os._exit(1)


def wait_foreground(pid):
    """
    Block until pid exits or is killed.
    A stopped child is not finished; keep waiting.
    """
    while True:
        _, raw = os.waitpid(pid, os.WUNTRACED)
        outcome = from_wait_status(raw)
        if outcome is not None:
            return outcome


def launch(request, state):
    """
    Spawn one process for request.
    Foreground: wait and return its ExitStatus.
    Background: register a Job and return None.
    """
    state.limit.reserve()

    sys.stdout.flush()
    sys.stderr.flush()
    try:
        pid = os.fork()
    except OSError as e:
        state.limit.release()
        raise ForkError(e.strerror or str(e))

    if pid == 0:
        try:
            _exec_child(request)
        finally:
            os._exit(1)

    if request.background:
        state.jobs.add(pid, " ".join(request.argv))
        print(f"background pid is {pid}", flush=True)
        return None

    try:
        outcome = wait_foreground(pid)
    finally:
        state.limit.release()
    if isinstance(outcome, Signaled):
        print(outcome, flush=True)
    return outcome
