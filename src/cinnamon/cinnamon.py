"""Main Cinnamon class - the primary API for cinnamon.

Example usage:
    from cinnamon import Cinnamon

    # Synchronous usage (for REPL, scripts)
    shell = Cinnamon()
    result = shell.run("echo hello world;")
    print(result.exit_code)  # 0

    # Async usage (for async applications)
    shell = Cinnamon()
    result = await shell.exec("if true {echo yes;} else {echo no;}")

    # Without spawning anything
    executor = ScriptedExecutor({"test": [False]})
    result = Cinnamon(executor=executor).run("test -f x; echo never;")
    print(executor.programs)  # ['test']
"""

import asyncio
import os
from pathlib import Path
from typing import Optional, Union

import nest_asyncio  # type: ignore[import-untyped]

from .ast.types import AST
from .errors import ExecError, ScriptReadError
from .executor import ProcessExecutor
from .interpreter import Interpreter
from .parser import ParseException, parse
from .types import Executor, ProcessStatus, RunResult, Status

PathLike = Union[str, "os.PathLike[str]"]

# Exit codes for failures that never reach a command status
EXIT_PARSE_ERROR = 2
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127


def exit_code_for(status: Optional[Status]) -> int:
    """Translate the aggregate script status into a process exit code.

    No status or a successful one maps to 0. A failed process keeps its
    own return code (signals become 128+N); any other failed status is 1.
    """
    if status is None or status.succeeded():
        return 0
    if isinstance(status, ProcessStatus) and status.exit_code != 0:
        return status.exit_code
    return 1


def read_script(path: PathLike) -> bytes:
    """Read a script file fully before anything is parsed."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise ScriptReadError(str(path), e) from e


class Cinnamon:
    """Parses and runs cinnamon scripts.

    Each run parses the whole script first. A script that fails to parse
    is rejected without running any of it.
    """

    def __init__(
        self,
        *,
        executor: Optional[Executor] = None,
        cwd: Optional[PathLike] = None,
    ):
        """Initialize Cinnamon.

        Args:
            executor: Runs the programs named in scripts. If not provided,
                creates a ProcessExecutor that spawns real processes.
            cwd: Working directory for the default ProcessExecutor.
        """
        if executor is not None:
            self._executor = executor
        else:
            self._executor = ProcessExecutor(cwd=cwd)

    @property
    def executor(self) -> Executor:
        """Get the executor."""
        return self._executor

    def parse(self, script: Union[str, bytes]) -> list[AST]:
        """Parse a script without executing it."""
        return parse(script)

    async def exec(self, script: Union[str, bytes]) -> RunResult:
        """Execute a script.

        Args:
            script: The script text or raw bytes.

        Returns:
            RunResult with the last status and derived exit code.
        """
        try:
            ast = parse(script)
        except ParseException as e:
            return RunResult(status=None, exit_code=EXIT_PARSE_ERROR, error=str(e))

        interpreter = Interpreter(self._executor)
        try:
            status = await interpreter.execute_script(ast)
        except ExecError as e:
            return RunResult(
                status=None,
                exit_code=EXIT_NOT_FOUND if e.not_found else EXIT_NOT_EXECUTABLE,
                commands_run=interpreter.state.command_count,
                error=str(e),
            )

        return RunResult(
            status=status,
            exit_code=exit_code_for(status),
            commands_run=interpreter.state.command_count,
        )

    async def exec_file(self, path: PathLike) -> RunResult:
        """Read a script file and execute it.

        Raises:
            ScriptReadError: If the file cannot be read.
        """
        return await self.exec(read_script(path))

    def run(self, script: Union[str, bytes]) -> RunResult:
        """Execute a script synchronously.

        This is a convenience wrapper around exec() that works in any context,
        including Jupyter notebooks and async frameworks.

        Example:
            >>> shell = Cinnamon()
            >>> result = shell.run("true;")
            >>> result.exit_code
            0
        """
        return _run_sync(self.exec(script))

    def run_file(self, path: PathLike) -> RunResult:
        """Read a script file and execute it synchronously."""
        return _run_sync(self.exec_file(path))


def _run_sync(coro):
    try:
        asyncio.get_running_loop()
        # We're in an existing event loop (Jupyter, async framework, etc.)
        # Apply nest_asyncio to allow nested event loops
        nest_asyncio.apply()
    except RuntimeError:
        # No running event loop, asyncio.run() will work fine
        pass
    return asyncio.run(coro)
