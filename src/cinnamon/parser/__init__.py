"""Parser module for cinnamon."""

from .parser import (
    Parser,
    ParseException,
    parse,
    is_path_char,
    MAX_INPUT_SIZE,
)

__all__ = [
    "Parser",
    "ParseException",
    "parse",
    "is_path_char",
    "MAX_INPUT_SIZE",
]
