"""Executor implementations for cinnamon."""

from .process import ProcessExecutor
from .scripted import Invocation, Outcome, ScriptedExecutor

__all__ = [
    "ProcessExecutor",
    "ScriptedExecutor",
    "Invocation",
    "Outcome",
]
