"""Expression tree representation for arithmetic formulas."""

from arithtree.expression.types import NodeType, OperatorSignature, OPERATOR_SIGNATURES
from arithtree.expression.errors import (
    ExpressionError,
    UnknownOperatorError,
    UnknownTagError,
    MalformedStreamError,
)
from arithtree.expression.nodes import (
    Node,
    ConstantNode,
    BinaryOpNode,
    format_number,
)
from arithtree.expression.parser import parse
from arithtree.expression.serialization import (
    TokenStream,
    LoaderRegistry,
    DEFAULT_REGISTRY,
    register,
    load,
    loads,
    dump,
    dumps,
)
from arithtree.expression.tree import ExpressionTree

__all__ = [
    "NodeType",
    "OperatorSignature",
    "OPERATOR_SIGNATURES",
    "ExpressionError",
    "UnknownOperatorError",
    "UnknownTagError",
    "MalformedStreamError",
    "Node",
    "ConstantNode",
    "BinaryOpNode",
    "format_number",
    "parse",
    "TokenStream",
    "LoaderRegistry",
    "DEFAULT_REGISTRY",
    "register",
    "load",
    "loads",
    "dump",
    "dumps",
    "ExpressionTree",
]
