"""cinnamon - a tiny shell-like scripting language.

Scripts are parsed into an AST and run by spawning external programs,
using each program's exit status as its truth value.
"""

from .ast import (
    AST,
    BlockNode,
    CommandNode,
    CommentNode,
    ConditionalNode,
    WhileNode,
    dump,
)
from .cinnamon import Cinnamon, exit_code_for, read_script
from .errors import CinnamonError, ExecError, ScriptReadError
from .executor import Invocation, ProcessExecutor, ScriptedExecutor
from .interpreter import Interpreter
from .parser import ParseException, parse
from .types import Executor, ProcessStatus, RunResult, Status

__version__ = "0.1.0"

__all__ = [
    "AST",
    "BlockNode",
    "Cinnamon",
    "CinnamonError",
    "CommandNode",
    "CommentNode",
    "ConditionalNode",
    "ExecError",
    "Executor",
    "Interpreter",
    "Invocation",
    "ParseException",
    "ProcessExecutor",
    "ProcessStatus",
    "RunResult",
    "ScriptReadError",
    "ScriptedExecutor",
    "Status",
    "WhileNode",
    "dump",
    "exit_code_for",
    "parse",
    "read_script",
    "__version__",
]
