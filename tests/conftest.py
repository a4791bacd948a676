"""
Pytest fixtures for arithtree tests.
"""

import pytest

from arithtree.expression.nodes import BinaryOpNode, ConstantNode
from arithtree.expression.serialization import create_default_registry


@pytest.fixture
def sum_node():
    """Tree for 3+4."""
    return BinaryOpNode(
        operator="+",
        left=ConstantNode(value=3),
        right=ConstantNode(value=4),
    )


@pytest.fixture
def nested_node():
    """Tree for (1+(2*3))-4, as produced by parsing 1+2*3-4."""
    return BinaryOpNode(
        operator="-",
        left=BinaryOpNode(
            operator="+",
            left=ConstantNode(value=1),
            right=BinaryOpNode(
                operator="*",
                left=ConstantNode(value=2),
                right=ConstantNode(value=3),
            ),
        ),
        right=ConstantNode(value=4),
    )


@pytest.fixture
def registry():
    """A fresh registry so tests can register loaders without side effects."""
    return create_default_registry()


@pytest.fixture(params=[
    "7",
    "1+2",
    "1+2*3-4",
    "8-2-1",
    "2^3^2",
    "10/4",
    "1/0",
    "0/0",
    "2^0-3*4/5+6",
    "100000000000000000000*3",
])
def expression_text(request):
    """Parser inputs covering every operator and the float edge cases."""
    return request.param
