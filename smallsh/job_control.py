import heapq
import os
import signal
import sys
from dataclasses import dataclass

import psutil

from smallsh.errors import ProcessLimitError
from smallsh.status import from_wait_status


@dataclass
class Job:
    pid: int
    slot: int
    command: str = ""


class JobTable:
    """
    Background processes awaiting reap, keyed by pid.
    Freed slots are reused lowest-first; there is no fixed capacity.
    """

    def __init__(self):
        self._jobs = {}
        self._free_slots = []
        self._next_slot = 1

    def add(self, pid, command=""):
        if pid in self._jobs:
            raise ValueError(f"pid {pid} is already tracked")
        if self._free_slots:
            slot = heapq.heappop(self._free_slots)
        else:
            slot = self._next_slot
            self._next_slot += 1
        job = Job(pid, slot, command)
        self._jobs[pid] = job
        return job

    def remove(self, pid):
        job = self._jobs.pop(pid)
        heapq.heappush(self._free_slots, job.slot)
        return job

    def get(self, pid):
        return self._jobs.get(pid)

    def __contains__(self, pid):
        return pid in self._jobs

    def __len__(self):
        return len(self._jobs)

    def __iter__(self):
        return iter(sorted(self._jobs.values(), key=lambda j: j.slot))


class ProcessLimit:
    """Counter of live children, capped at `maximum`."""

    def __init__(self, maximum):
        self.maximum = maximum
        self.live = 0

    def reserve(self):
        if self.live >= self.maximum:
            raise ProcessLimitError(self.maximum)
        self.live += 1

    def release(self):
        if self.live > 0:
            self.live -= 1


def reap_jobs(state):
    """
    Non-blocking check of every tracked background job.
    Finished jobs are announced, recorded in the status register and
    dropped from the table. Returns the list of reaped jobs.
    """
    reaped = []
    for job in list(state.jobs):
        try:
            pid, raw = os.waitpid(job.pid, os.WNOHANG)
        except ChildProcessError:
            # Not our child any more; nothing left to report
            state.jobs.remove(job.pid)
            state.limit.release()
            continue

        if pid == 0:
            continue
        outcome = from_wait_status(raw)
        if outcome is None:
            continue

        print(f"background pid {job.pid} is done: {outcome}", flush=True)
        state.status.set(outcome)
        state.jobs.remove(job.pid)
        state.limit.release()
        reaped.append(job)
    return reaped


def describe_job(job):
    """Current OS-level state of a job's process, via psutil."""
    try:
        return psutil.Process(job.pid).status()
    except psutil.NoSuchProcess:
        return "terminated"
    except psutil.AccessDenied:
        return "unknown"


def show_jobs(state):
    """Print tracked background jobs."""
    for job in state.jobs:
        print(f"[{job.slot}] {job.pid:<8} {describe_job(job):<10} {job.command}")


def cleanup_jobs(state):
    """
    Send SIGTERM to every tracked background job.
    Best effort: the shell does not wait for them to die.
    """
    for job in state.jobs:
        try:
            os.kill(job.pid, signal.SIGTERM)
        except ProcessLookupError:
            pass
        except OSError as e:
            print(f"smallsh: could not terminate job {job.pid}: {e}", file=sys.stderr)
