"""Shared fixtures: a fresh shell state whose leftover children get killed."""

import os
import signal
import time

import pytest

from smallsh.job_control import reap_jobs
from smallsh.shell import ShellState


@pytest.fixture
def state():
    st = ShellState()
    yield st
    for job in list(st.jobs):
        try:
            os.kill(job.pid, signal.SIGKILL)
            os.waitpid(job.pid, 0)
        except (ProcessLookupError, ChildProcessError):
            pass


@pytest.fixture
def ignore_sigint():
    """Put the test process in the shell's SIGINT disposition, then restore."""
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    yield
    signal.signal(signal.SIGINT, previous)


@pytest.fixture
def wait_for_reap():
    """Poll the reaper until it reports something or the timeout expires."""
    def _wait(st, timeout=5.0):
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            reaped = reap_jobs(st)
            if reaped:
                return reaped
            time.sleep(0.02)
        return []
    return _wait
