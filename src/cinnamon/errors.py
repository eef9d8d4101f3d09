"""Error types for cinnamon.

All errors are fatal to the script being run: there is no recovery and
no retry. They are raised where they are detected and only turned into
messages and exit codes by the Cinnamon facade and the CLI.
"""

from __future__ import annotations

from typing import Optional


class CinnamonError(Exception):
    """Base class for all cinnamon errors."""


class ScriptReadError(CinnamonError):
    """Reading the script file failed. Raised before any parsing."""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"{path}: {reason}")


class ExecError(CinnamonError):
    """The executor failed to spawn or wait for a program.

    Aborts the rest of the tree walk at the point of failure.
    """

    def __init__(self, program: str, cause: Optional[BaseException] = None):
        self.program = program
        self.cause = cause
        if cause is None:
            message = f"{program}: failed to execute"
        elif isinstance(cause, OSError) and cause.strerror:
            message = f"{program}: {cause.strerror}"
        else:
            message = f"{program}: {cause}"
        super().__init__(message)

    @property
    def not_found(self) -> bool:
        """True when the program could not be located at all."""
        return isinstance(self.cause, FileNotFoundError)
