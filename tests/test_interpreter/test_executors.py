"""Tests for the executor implementations."""

import os
import sys

import pytest
from cinnamon import ExecError, Invocation, ProcessExecutor, ProcessStatus, ScriptedExecutor


class TestProcessStatus:
    """Test process exit statuses."""

    def test_zero_succeeds(self):
        assert ProcessStatus(0).succeeded()

    def test_nonzero_fails(self):
        assert not ProcessStatus(1).succeeded()
        assert not ProcessStatus(-9).succeeded()

    def test_exit_code(self):
        assert ProcessStatus(3).exit_code == 3
        assert ProcessStatus(-9).exit_code == 137
        assert ProcessStatus(300).exit_code == 255


class TestScriptedExecutor:
    """Test the scripted test double."""

    @pytest.mark.asyncio
    async def test_default_success(self):
        executor = ScriptedExecutor()
        status = await executor.run("anything", ["x"])
        assert status.succeeded()
        assert executor.calls == [Invocation("anything", ("x",))]

    @pytest.mark.asyncio
    async def test_zero_argument_variant(self):
        executor = ScriptedExecutor()
        await executor.run("true")
        assert executor.calls == [Invocation("true", ())]

    @pytest.mark.asyncio
    async def test_default_failure(self):
        executor = ScriptedExecutor(default=False)
        status = await executor.run("x")
        assert not status.succeeded()

    @pytest.mark.asyncio
    async def test_outcomes_consumed_in_order(self):
        executor = ScriptedExecutor({"p": [True, False]})
        results = [(await executor.run("p")).succeeded() for _ in range(3)]
        assert results == [True, False, True]

    @pytest.mark.asyncio
    async def test_int_outcome(self):
        executor = ScriptedExecutor({"p": [42]})
        assert await executor.run("p") == ProcessStatus(42)

    @pytest.mark.asyncio
    async def test_script_appends(self):
        executor = ScriptedExecutor().script("p", False).script("p", 7)
        assert await executor.run("p") == ProcessStatus(1)
        assert await executor.run("p") == ProcessStatus(7)

    @pytest.mark.asyncio
    async def test_exception_outcome(self):
        cause = FileNotFoundError(2, "No such file or directory")
        executor = ScriptedExecutor({"p": [cause]})
        with pytest.raises(ExecError) as exc_info:
            await executor.run("p")
        assert exc_info.value.cause is cause
        assert executor.count("p") == 1

    @pytest.mark.asyncio
    async def test_exec_error_outcome_raised_as_is(self):
        error = ExecError("q")
        executor = ScriptedExecutor({"p": [error]})
        with pytest.raises(ExecError) as exc_info:
            await executor.run("p")
        assert exc_info.value is error


class TestProcessExecutor:
    """Test spawning real processes."""

    @pytest.mark.asyncio
    async def test_success(self):
        status = await ProcessExecutor().run(sys.executable, ["-c", "pass"])
        assert status == ProcessStatus(0)

    @pytest.mark.asyncio
    async def test_failure_code(self):
        status = await ProcessExecutor().run(sys.executable, ["-c", "raise SystemExit(3)"])
        assert not status.succeeded()
        assert status.returncode == 3

    @pytest.mark.asyncio
    async def test_arguments_passed_verbatim(self):
        code = "import sys; sys.exit(0 if sys.argv[1:] == ['a b', '\\\\n', ''] else 1)"
        status = await ProcessExecutor().run(sys.executable, ["-c", code, "a b", "\\n", ""])
        assert status.succeeded()

    @pytest.mark.asyncio
    async def test_cwd(self, tmp_path):
        code = "import os, sys; sys.exit(0 if os.path.samefile(os.getcwd(), sys.argv[1]) else 1)"
        executor = ProcessExecutor(cwd=tmp_path)
        status = await executor.run(sys.executable, ["-c", code, str(tmp_path)])
        assert status.succeeded()

    @pytest.mark.asyncio
    async def test_embedded_nul_argument(self):
        with pytest.raises(ExecError) as exc_info:
            await ProcessExecutor().run(sys.executable, ["a\x00b"])
        assert isinstance(exc_info.value.cause, ValueError)
        assert not exc_info.value.not_found
        assert exc_info.value.program == sys.executable

    @pytest.mark.asyncio
    async def test_missing_program(self, tmp_path):
        missing = os.path.join(str(tmp_path), "no-such-program")
        with pytest.raises(ExecError) as exc_info:
            await ProcessExecutor().run(missing)
        assert exc_info.value.not_found
        assert exc_info.value.program == missing
