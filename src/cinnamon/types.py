"""Core types for cinnamon.

The interpreter only depends on the two protocols defined here: an
Executor that runs one program to completion, and the Status it
returns, whose sole required capability is a success predicate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence


class Status(Protocol):
    """Opaque result of running one command."""

    def succeeded(self) -> bool:
        """Return True if the command succeeded."""
        ...


class Executor(Protocol):
    """Runs external programs for the interpreter.

    One call spawns one program, waits for it to exit and reports its
    status. Spawn or wait failures are raised as ExecError.
    """

    async def run(self, program: str, args: Sequence[str] = ()) -> Status:
        """Run program with args to completion."""
        ...


@dataclass(frozen=True)
class ProcessStatus:
    """Exit status of a finished process."""

    returncode: int
    """Process return code. Negative values mean killed by that signal."""

    def succeeded(self) -> bool:
        return self.returncode == 0

    @property
    def exit_code(self) -> int:
        """The return code as a shell would report it (0-255)."""
        if self.returncode < 0:
            return min(128 - self.returncode, 255)
        return min(self.returncode, 255)


@dataclass
class RunResult:
    """Outcome of running a whole script."""

    status: Optional[Status]
    """Last observed status, or None if no command produced one."""

    exit_code: int
    """Process-level exit code derived from status or error."""

    commands_run: int = 0
    """Number of commands spawned."""

    error: Optional[str] = None
    """Message for a parse, read or execution failure."""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0
