"""AST node types for cinnamon scripts.

Every node is a frozen dataclass that owns its children. Sequences are
stored as tuples so a parsed tree can't be modified after the parser
hands it over; the interpreter only ever reads it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class CommentNode:
    """A `#` comment. Never executed."""

    text: str
    """Everything after the `#` up to the line terminator, kept literally."""


@dataclass(frozen=True)
class CommandNode:
    """An external program invocation: `name arg1 arg2;`."""

    name: str
    """Program name or path (alphanumerics and `/`)."""

    args: tuple[str, ...] = field(default_factory=tuple)
    """Arguments in order. Duplicates are allowed."""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("command name must not be empty")
        # Accept any sequence but store a tuple
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True)
class ConditionalNode:
    """`if predicate stmt [else stmt]`.

    An else branch that is itself a ConditionalNode is an "else if".
    """

    predicate: CommandNode
    if_branch: "AST"
    else_branch: Optional["AST"] = None


@dataclass(frozen=True)
class BlockNode:
    """`{ stmt* }` - a sequence of statements."""

    statements: tuple["AST", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "statements", tuple(self.statements))


@dataclass(frozen=True)
class WhileNode:
    """`while predicate stmt`."""

    predicate: CommandNode
    body: "AST"


AST = Union[CommentNode, CommandNode, ConditionalNode, BlockNode, WhileNode]


# =============================================================================
# Display
# =============================================================================


def _format_command(node: CommandNode) -> str:
    parts = [node.name] + [repr(arg) for arg in node.args]
    return " ".join(parts)


def _dump_node(node: AST, depth: int, lines: list[str]) -> None:
    pad = "  " * depth
    if isinstance(node, CommentNode):
        lines.append(f"{pad}Comment {node.text!r}")
    elif isinstance(node, CommandNode):
        lines.append(f"{pad}Command {_format_command(node)}")
    elif isinstance(node, BlockNode):
        lines.append(f"{pad}Block")
        for stmt in node.statements:
            _dump_node(stmt, depth + 1, lines)
    elif isinstance(node, ConditionalNode):
        lines.append(f"{pad}If {_format_command(node.predicate)}")
        _dump_node(node.if_branch, depth + 1, lines)
        if node.else_branch is not None:
            lines.append(f"{pad}Else")
            _dump_node(node.else_branch, depth + 1, lines)
    elif isinstance(node, WhileNode):
        lines.append(f"{pad}While {_format_command(node.predicate)}")
        _dump_node(node.body, depth + 1, lines)
    else:
        raise TypeError(f"not an AST node: {node!r}")


def dump(nodes: list[AST]) -> str:
    """Render a parsed script as an indented listing, one node per line.

    Command arguments are shown with repr() so whitespace and escapes
    inside them stay visible.
    """
    lines: list[str] = []
    for node in nodes:
        _dump_node(node, 0, lines)
    return "\n".join(lines) + "\n" if lines else ""
