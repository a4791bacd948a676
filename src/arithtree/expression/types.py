"""Operator table for arithmetic expression trees.

Maps each supported binary operator symbol to its numeric implementation
and to the parser tier it is scanned in.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Callable

import numpy as np


class NodeType(Enum):
    """Types of nodes in an expression tree."""

    CONSTANT = auto()    # Numeric literal (leaf)
    BINARY_OP = auto()   # Operator with exactly two children


@dataclass(frozen=True)
class OperatorSignature:
    """Signature of a binary operator.

    Attributes:
        symbol: Single-character operator symbol used in text and streams
        name: Human-readable name
        tier: Parser scan tier (0 is scanned first)
        func: numpy ufunc applied to the evaluated operands
    """

    symbol: str
    name: str
    tier: int
    func: Callable[[np.float64, np.float64], np.float64]

    def __post_init__(self) -> None:
        if len(self.symbol) != 1:
            raise ValueError(f"Operator symbol must be one character: {self.symbol!r}")

    def apply(self, left: float, right: float) -> float:
        """Apply the operator with IEEE 754 semantics.

        Division by zero, invalid powers and overflow produce inf/nan
        instead of raising.
        """
        with np.errstate(all="ignore"):
            return float(self.func(np.float64(left), np.float64(right)))


# Supported operators
OPERATOR_SIGNATURES: dict[str, OperatorSignature] = {
    "+": OperatorSignature("+", "add", 0, np.add),
    "-": OperatorSignature("-", "sub", 0, np.subtract),
    "*": OperatorSignature("*", "mul", 1, np.multiply),
    "/": OperatorSignature("/", "div", 1, np.true_divide),
    "^": OperatorSignature("^", "pow", 2, np.power),
}


def get_parse_tiers() -> list[tuple[str, ...]]:
    """Get operator symbols grouped by tier, in scan order."""
    tiers: dict[int, list[str]] = {}
    for sig in OPERATOR_SIGNATURES.values():
        tiers.setdefault(sig.tier, []).append(sig.symbol)
    return [tuple(tiers[t]) for t in sorted(tiers)]


PARSE_TIERS: list[tuple[str, ...]] = get_parse_tiers()
