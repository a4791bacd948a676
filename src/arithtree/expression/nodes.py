"""Expression tree nodes for arithmetic expressions.

Implements the two node variants:
- ConstantNode: Numeric literal (e.g., 3, 0.5)
- BinaryOpNode: Operator applied to two children (e.g., 1+2)

Each node evaluates itself, renders itself as an indented tree or as a
fully parenthesized inline string, and writes itself as a pre-order
token stream (see ``arithtree.expression.serialization``).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterator, TextIO
import math
import sys

import numpy as np

from arithtree.expression.errors import UnknownOperatorError
from arithtree.expression.types import (
    NodeType,
    OPERATOR_SIGNATURES,
    OperatorSignature,
)


def format_number(value: float) -> str:
    """Render a float so that ``float(format_number(x)) == x``.

    Integral values print without a fractional part, very large or very
    small magnitudes switch to scientific notation.
    """
    if math.isfinite(value) and value != 0 and not (1e-4 <= abs(value) < 1e16):
        return np.format_float_scientific(value, trim="-")
    return np.format_float_positional(value, trim="-")


@dataclass
class Node(ABC):
    """Abstract base class for expression tree nodes."""

    TAG: ClassVar[str] = ""

    @property
    @abstractmethod
    def node_type(self) -> NodeType:
        """Get the type of this node."""
        pass

    @property
    @abstractmethod
    def children(self) -> tuple["Node", ...]:
        """Get the child nodes, left to right."""
        pass

    @abstractmethod
    def evaluate(self) -> float:
        """Compute the numeric value of this subtree."""
        pass

    @abstractmethod
    def label(self) -> str:
        """Text written for this node on its own tree line."""
        pass

    @abstractmethod
    def pretty_print_inline(self) -> str:
        """Render the subtree as a fully parenthesized string."""
        pass

    @abstractmethod
    def iter_tokens(self) -> Iterator[str]:
        """Yield the serialized tokens of this subtree in pre-order."""
        pass

    @abstractmethod
    def clone(self) -> "Node":
        """Create a deep copy of this node."""
        pass

    def pretty_print_tree(self, indent_level: int = 0, sink: TextIO | None = None) -> None:
        """Write the subtree one node per line, children indented one space deeper.

        Args:
            indent_level: Number of leading spaces for this node's line
            sink: Text stream to write to (defaults to stdout)
        """
        out = sink if sink is not None else sys.stdout
        out.write(" " * indent_level + self.label() + "\n")
        for child in self.children:
            child.pretty_print_tree(indent_level + 1, out)

    def serialize(self, sink: TextIO) -> None:
        """Write the whitespace-separated token stream to sink."""
        sink.write(" ".join(self.iter_tokens()))

    def __str__(self) -> str:
        return self.pretty_print_inline()


@dataclass
class ConstantNode(Node):
    """Leaf node holding a numeric value."""

    TAG: ClassVar[str] = "Constant"

    value: float = 0.0

    def __post_init__(self) -> None:
        self.value = float(self.value)

    @property
    def node_type(self) -> NodeType:
        return NodeType.CONSTANT

    @property
    def children(self) -> tuple[Node, ...]:
        return ()

    def evaluate(self) -> float:
        return self.value

    def label(self) -> str:
        return format_number(self.value)

    def pretty_print_inline(self) -> str:
        return f"({format_number(self.value)})"

    def iter_tokens(self) -> Iterator[str]:
        yield self.TAG
        yield format_number(self.value)

    def clone(self) -> "ConstantNode":
        return ConstantNode(value=self.value)


@dataclass
class BinaryOpNode(Node):
    """Operator node with exactly two children.

    Represents ``left OP right`` for OP in ``+ - * / ^``. The children are
    owned by this node and never shared with another tree.
    """

    TAG: ClassVar[str] = "Op"

    operator: str
    left: Node
    right: Node

    def __post_init__(self) -> None:
        if self.operator not in OPERATOR_SIGNATURES:
            raise UnknownOperatorError(self.operator)

    @property
    def node_type(self) -> NodeType:
        return NodeType.BINARY_OP

    @property
    def children(self) -> tuple[Node, ...]:
        return (self.left, self.right)

    @property
    def signature(self) -> OperatorSignature:
        """Get the operator signature."""
        try:
            return OPERATOR_SIGNATURES[self.operator]
        except KeyError:
            raise UnknownOperatorError(self.operator) from None

    def left_spine(self) -> list["BinaryOpNode"]:
        """Binary ops reached by following left children, starting at self.

        The parser builds each tier as a left-leaning chain, so walking the
        spine keeps long ``a+b+...`` chains off the call stack.
        """
        spine = []
        node: Node = self
        while isinstance(node, BinaryOpNode):
            spine.append(node)
            node = node.left
        return spine

    def evaluate(self) -> float:
        spine = self.left_spine()
        value = spine[-1].left.evaluate()
        for node in reversed(spine):
            value = node.signature.apply(value, node.right.evaluate())
        return value

    def label(self) -> str:
        return self.operator

    def pretty_print_inline(self) -> str:
        spine = self.left_spine()
        parts = ["(" * len(spine), spine[-1].left.pretty_print_inline()]
        for node in reversed(spine):
            parts.append(f"{node.operator}{node.right.pretty_print_inline()})")
        return "".join(parts)

    def iter_tokens(self) -> Iterator[str]:
        spine = self.left_spine()
        for node in spine:
            yield node.TAG
            yield node.operator
        yield from spine[-1].left.iter_tokens()
        for node in reversed(spine):
            yield from node.right.iter_tokens()

    def clone(self) -> "BinaryOpNode":
        return BinaryOpNode(
            operator=self.operator,
            left=self.left.clone(),
            right=self.right.clone(),
        )


def count_nodes(node: Node) -> int:
    """Count total nodes in a subtree."""
    return 1 + sum(count_nodes(c) for c in node.children)


def get_depth(node: Node) -> int:
    """Get the depth of a subtree (a single leaf has depth 1)."""
    if node.children:
        return 1 + max(get_depth(c) for c in node.children)
    return 1


def collect_nodes(node: Node) -> list[Node]:
    """Collect all nodes in a subtree (pre-order traversal)."""
    result = [node]
    for child in node.children:
        result.extend(collect_nodes(child))
    return result
