"""Parser for cinnamon scripts.

Converts raw script text into a list of top-level AST nodes using
scannerless recursive descent: productions read characters directly,
there is no separate tokenizer.

Grammar:
    script       := ws* statement* ws* EOF
    statement    := block | conditional | while_stmt | comment | command_line
    comment      := '#' text-to-eol
    command_line := command ws* ';'
    command      := '(' ws* command ws* ')' | path ws_arg*
    path         := (alnum | '/')+
    ws_arg       := WS+ arg
    arg          := '"' escaped-chars* '"' | bareword
    block        := '{' ws* statement* ws* '}'
    conditional  := 'if' WS+ command ws* statement (ws* 'else' ws* statement)?
    while_stmt   := 'while' WS+ command ws* statement

Statement alternatives are tried in the order above. A failed
alternative rewinds to where it started, so `iffy;` is still a command.
Parsing is all-or-nothing: any mismatch, or any input left over at the
end, rejects the whole script with a ParseException.
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar, Union

from ..ast.types import (
    AST,
    BlockNode,
    CommandNode,
    CommentNode,
    ConditionalNode,
    WhileNode,
)
from ..errors import CinnamonError

T = TypeVar("T")

# Security limits
MAX_INPUT_SIZE = 10_000_000  # 10MB max input

WHITESPACE = frozenset(" \t\r\n")

# Characters that end a bare word. Backslash is handled by the escape
# rule rather than as a plain character.
BAREWORD_STOP = frozenset(' \t\r\n;"{)')


class ParseException(CinnamonError):
    """The script could not be parsed.

    Deliberately carries no position or context: a script either parses
    completely or is rejected as a whole.

    Nesting is bounded by the interpreter's recursion limit. With the
    default limit of 1000, blocks, parentheses or else-if links nested
    more than roughly 190 levels deep are rejected with this exception.
    """

    def __init__(self, message: str = "failed to parse"):
        super().__init__(message)


class _Mismatch(Exception):
    """Raised inside the parser when a production does not match."""


def is_path_char(c: str) -> bool:
    """Check if a character may appear in a command path word."""
    return c == "/" or (c.isascii() and c.isalnum())


class Parser:
    """Recursive descent parser for cinnamon scripts."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    # =========================================================================
    # Primitives
    # =========================================================================

    def peek(self, offset: int = 0) -> str:
        """Look at the character at current position + offset ('' at end)."""
        idx = self.pos + offset
        if idx < len(self.text):
            return self.text[idx]
        return ""

    def advance(self) -> str:
        """Advance one character and return it."""
        c = self.peek()
        if c:
            self.pos += 1
        return c

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def check(self, literal: str) -> bool:
        """Check if the input continues with the given literal."""
        return self.text.startswith(literal, self.pos)

    def match(self, literal: str) -> bool:
        """If the input continues with literal, consume it and return True."""
        if self.check(literal):
            self.pos += len(literal)
            return True
        return False

    def expect(self, literal: str) -> None:
        """Consume literal or fail the current production."""
        if not self.match(literal):
            raise _Mismatch(literal)

    def skip_ws(self) -> int:
        """Skip any run of whitespace. Returns the number of characters skipped."""
        start = self.pos
        while self.peek() in WHITESPACE:
            self.pos += 1
        return self.pos - start

    def expect_ws(self) -> None:
        """Require at least one whitespace character."""
        if not self.skip_ws():
            raise _Mismatch("whitespace")

    def attempt(self, production: Callable[[], T]) -> Optional[T]:
        """Run a production, rewinding and returning None if it fails."""
        saved = self.pos
        try:
            return production()
        except _Mismatch:
            self.pos = saved
            return None

    # =========================================================================
    # Script and statements
    # =========================================================================

    def parse(self) -> list[AST]:
        """Parse the entire script."""
        self.skip_ws()
        statements = self.parse_statements()
        self.skip_ws()
        if not self.at_end():
            raise _Mismatch("end of input")
        return statements

    def parse_statements(self) -> list[AST]:
        """Parse zero or more whitespace-separated statements."""
        statements: list[AST] = []
        while True:
            stmt = self.attempt(self.parse_statement)
            if stmt is None:
                return statements
            statements.append(stmt)
            self.skip_ws()

    def parse_statement(self) -> AST:
        """Parse one top-level statement, trying each alternative in order."""
        alternatives: tuple[Callable[[], AST], ...] = (
            self.parse_block,
            self.parse_conditional,
            self.parse_while,
            self.parse_comment,
            self.parse_command_line,
        )
        for alternative in alternatives:
            node = self.attempt(alternative)
            if node is not None:
                return node
        raise _Mismatch("statement")

    def parse_block(self) -> BlockNode:
        """Parse a brace-delimited block: { stmt* }."""
        self.expect("{")
        self.skip_ws()
        statements = self.parse_statements()
        self.skip_ws()
        self.expect("}")
        return BlockNode(tuple(statements))

    def parse_conditional(self) -> ConditionalNode:
        """Parse if predicate stmt [else stmt]."""
        self.expect("if")
        self.expect_ws()
        predicate = self.parse_command()
        self.skip_ws()
        if_branch = self.parse_statement()
        else_branch = self.attempt(self.parse_else)
        return ConditionalNode(predicate, if_branch, else_branch)

    def parse_else(self) -> AST:
        """Parse the optional else part of a conditional."""
        self.skip_ws()
        self.expect("else")
        self.skip_ws()
        return self.parse_statement()

    def parse_while(self) -> WhileNode:
        """Parse while predicate stmt."""
        self.expect("while")
        self.expect_ws()
        predicate = self.parse_command()
        self.skip_ws()
        body = self.parse_statement()
        return WhileNode(predicate, body)

    def parse_comment(self) -> CommentNode:
        """Parse # text up to the end of the line.

        The line terminator (\\n or \\r\\n) is consumed but not included.
        """
        self.expect("#")
        start = self.pos
        while not self.at_end():
            if self.check("\n") or self.check("\r\n"):
                break
            self.pos += 1
        text = self.text[start:self.pos]
        if not self.match("\n"):
            self.match("\r\n")
        return CommentNode(text)

    # =========================================================================
    # Commands and arguments
    # =========================================================================

    def parse_command_line(self) -> CommandNode:
        """Parse a command terminated by ';'."""
        command = self.parse_command()
        self.skip_ws()
        self.expect(";")
        return command

    def parse_command(self) -> CommandNode:
        """Parse a command, possibly wrapped in balanced parentheses."""
        if self.match("("):
            self.skip_ws()
            command = self.parse_command()
            self.skip_ws()
            self.expect(")")
            return command

        name = self.parse_path()
        args: list[str] = []
        while True:
            arg = self.attempt(self.parse_ws_argument)
            if arg is None:
                break
            args.append(arg)
        return CommandNode(name, tuple(args))

    def parse_path(self) -> str:
        """Parse a command path word: alphanumerics and '/'."""
        start = self.pos
        while is_path_char(self.peek()):
            self.pos += 1
        if self.pos == start:
            raise _Mismatch("path")
        return self.text[start:self.pos]

    def parse_ws_argument(self) -> str:
        """Parse an argument preceded by at least one whitespace character."""
        self.expect_ws()
        return self.parse_argument()

    def parse_argument(self) -> str:
        """Parse a quoted string or a bare word."""
        if self.check('"'):
            return self.parse_quoted()
        return self.parse_bareword()

    def parse_quoted(self) -> str:
        """Parse a double-quoted string. An unterminated quote fails."""
        self.expect('"')
        chars: list[str] = []
        while True:
            c = self.peek()
            if not c:
                raise _Mismatch('"')
            if c == '"':
                self.advance()
                return "".join(chars)
            if c == "\\":
                chars.append(self.parse_escape())
            else:
                chars.append(self.advance())

    def parse_bareword(self) -> str:
        """Parse an unquoted argument."""
        chars: list[str] = []
        while True:
            c = self.peek()
            if not c or c in BAREWORD_STOP:
                break
            if c == "\\":
                chars.append(self.parse_escape())
            else:
                chars.append(self.advance())
        if not chars:
            raise _Mismatch("argument")
        return "".join(chars)

    def parse_escape(self) -> str:
        """Interpret a backslash at the current position.

        \\" yields a quote and consumes both characters. A backslash
        before anything else is literal and leaves the next character
        for normal processing.
        """
        self.expect("\\")
        if self.match('"'):
            return '"'
        return "\\"


def parse(source: Union[bytes, str]) -> list[AST]:
    """Parse a whole script into its top-level statements.

    Args:
        source: Script text, or raw bytes which must be valid UTF-8.

    Returns:
        The top-level statements in source order.

    Raises:
        ParseException: If any part of the input does not match the grammar.
    """
    if len(source) > MAX_INPUT_SIZE:
        raise ParseException()

    if isinstance(source, (bytes, bytearray)):
        try:
            text = bytes(source).decode("utf-8")
        except UnicodeDecodeError:
            raise ParseException() from None
    else:
        text = source

    try:
        return Parser(text).parse()
    except (_Mismatch, RecursionError):
        raise ParseException() from None
