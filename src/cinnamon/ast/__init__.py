"""AST module for cinnamon."""

from .types import (
    AST,
    BlockNode,
    CommandNode,
    CommentNode,
    ConditionalNode,
    WhileNode,
    dump,
)

__all__ = [
    "AST",
    "BlockNode",
    "CommandNode",
    "CommentNode",
    "ConditionalNode",
    "WhileNode",
    "dump",
]
