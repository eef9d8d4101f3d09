"""Scripted executor for tests.

Nothing is spawned. Every call is recorded, and each program answers
with the outcomes scripted for it, in order:

    executor = ScriptedExecutor({"true": [True, True, False]})
    await Interpreter(executor).execute_script(parse("while true {echo x;}"))
    assert executor.programs == ["true", "echo", "true", "echo", "true"]

An outcome is a bool (success/failure), an int return code, any Status,
or an exception, which is raised as an ExecError. Programs with no
outcomes left answer with the default outcome.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence, Union

from ..errors import ExecError
from ..types import ProcessStatus, Status

Outcome = Union[bool, int, Status, BaseException]


@dataclass(frozen=True)
class Invocation:
    """One recorded call to the executor."""

    program: str
    args: tuple[str, ...] = ()


class ScriptedExecutor:
    """Test double that records invocations and returns canned outcomes."""

    def __init__(
        self,
        outcomes: Optional[Mapping[str, Iterable[Outcome]]] = None,
        *,
        default: Outcome = True,
    ):
        """Initialize the executor.

        Args:
            outcomes: Per-program queues of outcomes, consumed one per call.
            default: Outcome for programs whose queue is empty or missing.
        """
        self._outcomes: dict[str, deque[Outcome]] = {}
        self.default = default
        self.calls: list[Invocation] = []
        for program, queue in (outcomes or {}).items():
            self.script(program, *queue)

    def script(self, program: str, *outcomes: Outcome) -> "ScriptedExecutor":
        """Append outcomes to a program's queue."""
        self._outcomes.setdefault(program, deque()).extend(outcomes)
        return self

    @property
    def programs(self) -> list[str]:
        """Names of the programs run so far, in call order."""
        return [call.program for call in self.calls]

    def count(self, program: str) -> int:
        """Number of times program was run."""
        return sum(1 for call in self.calls if call.program == program)

    async def run(self, program: str, args: Sequence[str] = ()) -> Status:
        self.calls.append(Invocation(program, tuple(args)))
        queue = self._outcomes.get(program)
        outcome = queue.popleft() if queue else self.default
        return _resolve(program, outcome)


def _resolve(program: str, outcome: Outcome) -> Status:
    if isinstance(outcome, ExecError):
        raise outcome
    if isinstance(outcome, BaseException):
        raise ExecError(program, outcome) from outcome
    # bool before int: bool is an int subclass
    if isinstance(outcome, bool):
        return ProcessStatus(0 if outcome else 1)
    if isinstance(outcome, int):
        return ProcessStatus(outcome)
    return outcome
