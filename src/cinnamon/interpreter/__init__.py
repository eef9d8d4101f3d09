"""Interpreter module for cinnamon."""

from .interpreter import Interpreter
from .types import InterpreterContext, InterpreterState

__all__ = [
    "Interpreter",
    "InterpreterContext",
    "InterpreterState",
]
