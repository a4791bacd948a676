"""Expression tree owning a parsed or deserialized arithmetic formula.

An ExpressionTree holds the root node of a formula like ``1+2*3-4`` and
exposes the derived views: value, inline string, indented tree text and
serialized token stream.
"""

from dataclasses import dataclass, field
from typing import Any, TextIO
import hashlib
import io

from arithtree.expression.nodes import (
    BinaryOpNode,
    Node,
    count_nodes,
    get_depth,
    collect_nodes,
)
from arithtree.expression.parser import parse
from arithtree.expression.serialization import (
    LoaderRegistry,
    dumps,
    loads,
)


@dataclass
class ExpressionTree:
    """Expression tree representing an arithmetic formula.

    Attributes:
        root: The root node of the tree
        metadata: Optional metadata (e.g., source text)
    """

    root: Node
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_string(cls, text: str) -> "ExpressionTree":
        """Parse an infix string into a tree."""
        return cls(root=parse(text), metadata={"source": text})

    @classmethod
    def from_serialized(
        cls,
        text: str,
        registry: LoaderRegistry | None = None,
    ) -> "ExpressionTree":
        """Load a tree from its serialized token stream."""
        return cls(root=loads(text, registry))

    @property
    def size(self) -> int:
        """Get total number of nodes."""
        return count_nodes(self.root)

    @property
    def depth(self) -> int:
        """Get tree depth."""
        return get_depth(self.root)

    @property
    def formula(self) -> str:
        """Get the fully parenthesized inline representation."""
        return self.root.pretty_print_inline()

    @property
    def hash(self) -> str:
        """Get a hash of the formula for deduplication."""
        return hashlib.md5(self.formula.encode()).hexdigest()[:12]

    def evaluate(self) -> float:
        return self.root.evaluate()

    def pretty_print_tree(self, sink: TextIO | None = None) -> None:
        self.root.pretty_print_tree(0, sink)

    def render_tree(self) -> str:
        """Get the indented tree view as a string."""
        buffer = io.StringIO()
        self.root.pretty_print_tree(0, buffer)
        return buffer.getvalue()

    def serialize(self) -> str:
        return dumps(self.root)

    def clone(self) -> "ExpressionTree":
        """Create a deep copy of the tree."""
        return ExpressionTree(
            root=self.root.clone(),
            metadata=dict(self.metadata),
        )

    def get_nodes(self) -> list[Node]:
        """Get all nodes in the tree (pre-order)."""
        return collect_nodes(self.root)

    def get_operators(self) -> list[str]:
        """Get list of operator symbols used in tree (pre-order)."""
        return [n.operator for n in self.get_nodes() if isinstance(n, BinaryOpNode)]

    def __str__(self) -> str:
        return self.formula

    def __repr__(self) -> str:
        return f"ExpressionTree({self.formula}, size={self.size}, depth={self.depth})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExpressionTree):
            return False
        return self.formula == other.formula

    def __hash__(self) -> int:
        return hash(self.formula)
