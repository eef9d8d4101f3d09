"""Control Flow Execution.

Handles the compound statements:
- blocks (sequencing with short-circuit on failure)
- if/else
- while loops

A result of None means no status was produced (comments, empty blocks,
untaken ifs without else). It counts as neither success nor failure and
never replaces a status seen earlier.
"""

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from ..ast.types import AST, CommandNode, ConditionalNode, WhileNode

if TYPE_CHECKING:
    from ..types import Status
    from .types import InterpreterContext

logger = logging.getLogger(__name__)


async def execute_condition(ctx: "InterpreterContext", predicate: CommandNode) -> "Status":
    """Execute the predicate of an if or while."""
    return await ctx.execute_command(predicate)


async def execute_block(
    ctx: "InterpreterContext", statements: Iterable[AST]
) -> Optional["Status"]:
    """Execute statements in order, stopping at the first failing status."""
    last_status: Optional["Status"] = None

    for stmt in statements:
        status = await ctx.execute_statement(stmt)
        if status is None:
            continue
        last_status = status
        if not status.succeeded():
            break

    return last_status


async def execute_if(ctx: "InterpreterContext", node: ConditionalNode) -> Optional["Status"]:
    """Execute an if statement.

    The predicate runs exactly once and its own status is never returned.
    """
    cond_status = await execute_condition(ctx, node.predicate)

    if cond_status.succeeded():
        return await ctx.execute_statement(node.if_branch)

    if node.else_branch is not None:
        return await ctx.execute_statement(node.else_branch)

    return None


async def execute_while(ctx: "InterpreterContext", node: WhileNode) -> Optional["Status"]:
    """Execute a while loop.

    The predicate is checked before every iteration. A failing predicate
    ends the loop with the last body status. A failing body ends it
    right away, without checking the predicate again.
    """
    last_status: Optional["Status"] = None
    iterations = 0

    ctx.state.loop_depth += 1
    try:
        while True:
            cond_status = await execute_condition(ctx, node.predicate)
            if not cond_status.succeeded():
                break

            iterations += 1
            status = await ctx.execute_statement(node.body)
            if status is None:
                continue
            last_status = status
            if not status.succeeded():
                logger.debug("while %s: body failed on iteration %d", node.predicate.name, iterations)
                break
    finally:
        ctx.state.loop_depth -= 1

    logger.debug("while %s: %d iteration(s)", node.predicate.name, iterations)
    return last_status
