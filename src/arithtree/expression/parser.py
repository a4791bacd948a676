"""Parser from flat infix strings to expression trees.

The parser does not tokenize. It looks for split operators one tier at a
time (``+ -`` first, then ``* /``, then ``^``) and splits at the rightmost
one: everything left of it is the left operand, everything right of it
the right operand. Repeating that split on the left operand folds the
tier's operands left to right, which is how it is computed here, so a
long ``1+1+...+1`` chain needs no recursion per operator. A string
containing no operator is an integer literal.

Splitting at the rightmost operator makes every tier left-associative,
including ``^``:

    1+2*3-4  ->  (((1)+((2)*(3)))-(4))   = 3
    2^3^2    ->  (((2)^(3))^(2))         = 64

Whitespace, parentheses and signed literals are not supported. An empty
operand (``-3``, ``1+``) is not a literal and raises ValueError.
"""

import logging

from arithtree.expression.nodes import BinaryOpNode, ConstantNode, Node
from arithtree.expression.types import OPERATOR_SIGNATURES, PARSE_TIERS

logger = logging.getLogger(__name__)


def split_operands(text: str, symbols: tuple[str, ...]) -> tuple[list[str], list[str]]:
    """Split text at every character in symbols.

    Returns:
        (operands, operators) with ``len(operands) == len(operators) + 1``
    """
    operands: list[str] = []
    operators: list[str] = []
    start = 0
    for i, char in enumerate(text):
        if char in symbols:
            operands.append(text[start:i])
            operators.append(char)
            start = i + 1
    operands.append(text[start:])
    return operands, operators


def parse_literal(text: str) -> ConstantNode:
    """Parse an ASCII-digit integer literal into a constant node.

    Raises:
        ValueError: If text is not a run of digits 0-9 (including empty),
            or is too large to represent as a float
    """
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"Invalid integer literal: {text!r}")
    try:
        return ConstantNode(value=float(int(text)))
    except OverflowError:
        raise ValueError(f"Integer literal out of range: {text[:20]}... ({len(text)} digits)") from None


def parse(text: str) -> Node:
    """Parse an infix arithmetic string into an expression tree.

    Args:
        text: Digits and ``+ - * / ^`` operators, no spaces or parentheses

    Returns:
        Root node of the parsed tree

    Raises:
        ValueError: If a leaf is not an integer literal
    """
    for tier in PARSE_TIERS:
        operands, operators = split_operands(text, tier)
        if not operators:
            continue
        logger.debug(
            f"Split {text!r} into {len(operands)} operands "
            f"({', '.join(OPERATOR_SIGNATURES[op].name for op in operators)})"
        )
        node = parse(operands[0])
        for operator, operand in zip(operators, operands[1:]):
            node = BinaryOpNode(operator=operator, left=node, right=parse(operand))
        return node
    return parse_literal(text)
