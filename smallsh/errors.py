"""
Exceptions raised by the shell itself.

Anything derived from ShellError is recoverable: the dispatcher reports it
on stderr, records ``Exited(exit_code)`` and goes back to the prompt.
Failures inside a forked child never show up here; the child reports them
on its own stderr and exits.
"""


class ShellError(Exception):
    """Base class for all recoverable shell errors."""

    def __init__(self, message, exit_code=1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


class CommandSyntaxError(ShellError):
    """The line could not be turned into a command."""

    def __init__(self, details):
        super().__init__(f"smallsh: {details}")
        self.details = details


class DirectoryChangeError(ShellError):
    """cd could not move to the requested directory."""

    def __init__(self, path, reason):
        super().__init__(f"cd: {path}: {reason}")
        self.path = path
        self.reason = reason


class ProcessLimitError(ShellError):
    """Too many live children; the command was rejected before fork."""

    def __init__(self, limit):
        super().__init__(f"smallsh: process limit reached ({limit}), command rejected")
        self.limit = limit


class ForkError(ShellError):
    """fork() itself failed."""

    def __init__(self, reason):
        super().__init__(f"smallsh: fork failed: {reason}")
        self.reason = reason
