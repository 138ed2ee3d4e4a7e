import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Exited:
    """Process ran to completion with an exit code."""
    code: int

    def __str__(self):
        return f"exit value {self.code}"


@dataclass(frozen=True)
class Signaled:
    """Process was killed by a signal."""
    signal: int

    def __str__(self):
        return f"terminated by signal {self.signal}"


def from_wait_status(raw):
    """
    Convert a raw waitpid() status into Exited / Signaled.
    Returns None for a non-terminal (stopped / continued) status.
    """
    if os.WIFEXITED(raw):
        return Exited(os.WEXITSTATUS(raw))
    if os.WIFSIGNALED(raw):
        return Signaled(os.WTERMSIG(raw))
    return None


class StatusRegister:
    """Outcome of the last finished foreground or reaped background command."""

    def __init__(self, initial=None):
        self.current = initial if initial is not None else Exited(0)

    def set(self, status):
        self.current = status

    def render(self):
        return str(self.current)
