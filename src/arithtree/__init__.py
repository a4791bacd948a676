"""
arithtree: arithmetic expression trees.

Parses flat infix strings into expression trees, evaluates them with IEEE
754 float semantics, renders them as indented trees or parenthesized
strings, and round-trips them through a whitespace-separated token format.
"""

__version__ = "0.1.0"

from arithtree.expression import (
    ExpressionTree,
    ExpressionError,
    parse,
    load,
    loads,
    dump,
    dumps,
)

__all__ = [
    "__version__",
    "ExpressionTree",
    "ExpressionError",
    "parse",
    "load",
    "loads",
    "dump",
    "dumps",
]
