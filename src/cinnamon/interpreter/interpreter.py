"""Interpreter - AST Execution Engine.

Main interpreter class that walks cinnamon AST nodes and runs commands
through an Executor. Compound statements are delegated to
control_flow.py.
"""

import logging
from typing import Iterable, Optional

from ..ast.types import (
    AST,
    BlockNode,
    CommandNode,
    CommentNode,
    ConditionalNode,
    WhileNode,
)
from ..errors import ExecError
from ..types import Executor, Status
from .control_flow import execute_block, execute_if, execute_while
from .types import InterpreterContext, InterpreterState

logger = logging.getLogger(__name__)


class Interpreter:
    """AST interpreter for cinnamon scripts."""

    def __init__(self, executor: Executor, state: Optional[InterpreterState] = None):
        """Initialize the interpreter.

        Args:
            executor: Runs the programs named by commands
            state: Optional initial state (creates default if not provided)
        """
        self._executor = executor
        self._state = state or InterpreterState()

        self._ctx = InterpreterContext(
            state=self._state,
            execute_statement=self.execute_statement,
            execute_command=self.execute_command,
        )

    @property
    def state(self) -> InterpreterState:
        """Get the interpreter state."""
        return self._state

    async def execute_script(self, statements: Iterable[AST]) -> Optional[Status]:
        """Execute the top-level statements of a script.

        The script behaves like one block: execution stops at the first
        statement whose status is unsuccessful.
        """
        return await self.execute_statements(statements)

    async def execute_statements(self, statements: Iterable[AST]) -> Optional[Status]:
        """Execute a sequence of statements with block semantics."""
        return await execute_block(self._ctx, statements)

    async def execute(self, node: AST) -> Optional[Status]:
        """Execute a single AST node."""
        return await self.execute_statement(node)

    async def execute_statement(self, node: AST) -> Optional[Status]:
        """Execute a statement node, dispatching on its type."""
        if isinstance(node, CommentNode):
            return None
        if isinstance(node, CommandNode):
            return await self.execute_command(node)
        if isinstance(node, BlockNode):
            return await execute_block(self._ctx, node.statements)
        if isinstance(node, ConditionalNode):
            return await execute_if(self._ctx, node)
        if isinstance(node, WhileNode):
            return await execute_while(self._ctx, node)
        raise TypeError(f"Unknown node type: {type(node).__name__}")

    async def execute_command(self, node: CommandNode) -> Status:
        """Run a command through the executor and return its status."""
        self._state.command_count += 1
        logger.debug("run %s %s", node.name, list(node.args))
        try:
            return await self._executor.run(node.name, node.args)
        except ExecError:
            raise
        except OSError as e:
            raise ExecError(node.name, e) from e
