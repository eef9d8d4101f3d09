"""Executor that spawns real operating system processes."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Optional, Sequence, Union

from ..errors import ExecError
from ..types import ProcessStatus

logger = logging.getLogger(__name__)


class ProcessExecutor:
    """Runs each command as a child process and waits for it to exit.

    The child inherits stdin, stdout and stderr. Only one process is
    alive at a time: the handle is dropped as soon as wait() returns.
    """

    def __init__(self, cwd: Optional[Union[str, os.PathLike]] = None):
        """Initialize the executor.

        Args:
            cwd: Working directory for spawned programs. Defaults to the
                current directory of this process.
        """
        self._cwd = cwd

    @property
    def cwd(self) -> Optional[Union[str, os.PathLike]]:
        return self._cwd

    async def run(self, program: str, args: Sequence[str] = ()) -> ProcessStatus:
        """Spawn program with args and wait for it to finish."""
        logger.debug("spawn %s %s", program, list(args))
        try:
            process = await asyncio.create_subprocess_exec(program, *args, cwd=self._cwd)
        except (OSError, ValueError) as e:
            # ValueError: arguments the OS can't accept, e.g. an embedded NUL
            raise ExecError(program, e) from e

        try:
            returncode = await process.wait()
        except OSError as e:
            raise ExecError(program, e) from e

        logger.debug("%s exited with %d", program, returncode)
        return ProcessStatus(returncode)
