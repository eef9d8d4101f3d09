"""Interpreter types for cinnamon."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Awaitable, Callable, Optional

if TYPE_CHECKING:
    from ..ast.types import AST, CommandNode
    from ..types import Status


@dataclass
class InterpreterState:
    """Mutable bookkeeping maintained by the interpreter.

    The AST itself is never part of the state; it is only read.
    """

    command_count: int = 0
    """Total commands handed to the executor."""

    loop_depth: int = 0
    """Current while-loop nesting depth."""


@dataclass
class InterpreterContext:
    """Context provided to control flow helpers."""

    state: InterpreterState
    """Mutable interpreter state."""

    execute_statement: Callable[["AST"], Awaitable[Optional["Status"]]]
    """Function to execute any statement node."""

    execute_command: Callable[["CommandNode"], Awaitable["Status"]]
    """Function to execute a command node."""
