"""Tests for expression tree nodes."""

import io
import math

import pytest

from arithtree.expression.errors import UnknownOperatorError
from arithtree.expression.nodes import (
    BinaryOpNode,
    ConstantNode,
    collect_nodes,
    count_nodes,
    format_number,
    get_depth,
)
from arithtree.expression.types import NodeType, PARSE_TIERS


def op(symbol, left, right):
    return BinaryOpNode(operator=symbol, left=ConstantNode(value=left), right=ConstantNode(value=right))


class TestFormatNumber:
    """Test number rendering."""

    @pytest.mark.parametrize("value,expected", [
        (3.0, "3"),
        (-4.0, "-4"),
        (0.5, "0.5"),
        (0.1, "0.1"),
        (2.5e-7, "2.5e-07"),
        (1e20, "1e+20"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "nan"),
    ])
    def test_rendering(self, value, expected):
        assert format_number(value) == expected

    @pytest.mark.parametrize("value", [1 / 3, 2.0 ** 0.5, 123456789.125, 1e-300, 6.02214076e23])
    def test_parses_back_exactly(self, value):
        assert float(format_number(value)) == value


class TestConstantNode:
    """Test ConstantNode."""

    def test_value_is_float(self):
        node = ConstantNode(value=3)
        assert isinstance(node.value, float)
        assert node.evaluate() == 3.0
        assert node.node_type == NodeType.CONSTANT
        assert node.children == ()

    def test_inline(self):
        assert ConstantNode(value=3).pretty_print_inline() == "(3)"
        assert ConstantNode(value=0.25).pretty_print_inline() == "(0.25)"

    def test_tokens(self):
        assert list(ConstantNode(value=12).iter_tokens()) == ["Constant", "12"]


class TestBinaryOpNode:
    """Test BinaryOpNode."""

    @pytest.mark.parametrize("symbol,expected", [
        ("+", 8.0),
        ("-", 4.0),
        ("*", 12.0),
        ("/", 3.0),
        ("^", 36.0),
    ])
    def test_evaluate_operators(self, symbol, expected):
        assert op(symbol, 6, 2).evaluate() == expected

    def test_evaluate_nested(self, nested_node):
        assert nested_node.evaluate() == 3.0

    def test_division_by_zero_is_infinite(self):
        assert op("/", 1, 0).evaluate() == math.inf
        assert op("/", -1, 0).evaluate() == -math.inf
        assert math.isnan(op("/", 0, 0).evaluate())

    def test_invalid_power_is_nan(self):
        assert math.isnan(op("^", -8, 1 / 3).evaluate())
        assert op("^", 0, -1).evaluate() == math.inf

    def test_power_overflow_is_infinite(self):
        assert op("^", 10, 400).evaluate() == math.inf

    def test_unknown_operator_rejected_at_construction(self):
        with pytest.raises(UnknownOperatorError) as exc_info:
            op("%", 1, 2)
        assert exc_info.value.operator == "%"

    def test_unknown_operator_rejected_at_evaluation(self):
        node = op("+", 1, 2)
        node.operator = "%"
        with pytest.raises(UnknownOperatorError):
            node.evaluate()

    def test_inline(self, sum_node, nested_node):
        assert sum_node.pretty_print_inline() == "((3)+(4))"
        assert nested_node.pretty_print_inline() == "(((1)+((2)*(3)))-(4))"
        assert str(nested_node) == nested_node.pretty_print_inline()

    def test_inline_has_one_paren_pair_per_node(self, nested_node):
        text = nested_node.pretty_print_inline()
        assert " " not in text
        assert text.count("(") == text.count(")") == count_nodes(nested_node)

    def test_tokens(self, nested_node):
        assert " ".join(nested_node.iter_tokens()) == (
            "Op - Op + Constant 1 Op * Constant 2 Constant 3 Constant 4"
        )

    def test_serialize_to_sink(self, sum_node):
        sink = io.StringIO()
        sum_node.serialize(sink)
        assert sink.getvalue() == "Op + Constant 3 Constant 4"

    def test_clone_is_deep(self, nested_node):
        cloned = nested_node.clone()
        assert cloned == nested_node
        assert cloned.left is not nested_node.left
        assert cloned.left.right is not nested_node.left.right


class TestPrettyPrintTree:
    """Test indented tree printing."""

    def test_layout(self, nested_node):
        sink = io.StringIO()
        nested_node.pretty_print_tree(0, sink)
        assert sink.getvalue() == "-\n +\n  1\n  *\n   2\n   3\n 4\n"

    def test_starting_indent(self, sum_node):
        sink = io.StringIO()
        sum_node.pretty_print_tree(2, sink)
        assert sink.getvalue().splitlines() == ["  +", "   3", "   4"]

    def test_deepest_leaf_indent_matches_depth(self, nested_node):
        sink = io.StringIO()
        nested_node.pretty_print_tree(0, sink)
        lines = sink.getvalue().splitlines()
        indents = [len(line) - len(line.lstrip(" ")) for line in lines]
        assert indents[0] == 0
        assert max(indents) == get_depth(nested_node) - 1

    def test_defaults_to_stdout(self, sum_node, capsys):
        sum_node.pretty_print_tree()
        assert capsys.readouterr().out == "+\n 3\n 4\n"


class TestTreeHelpers:
    """Test subtree helpers."""

    def test_count_and_depth(self, nested_node):
        assert count_nodes(nested_node) == 7
        assert get_depth(nested_node) == 4
        assert get_depth(ConstantNode(value=1)) == 1

    def test_collect_preorder(self, nested_node):
        labels = [n.label() for n in collect_nodes(nested_node)]
        assert labels == ["-", "+", "1", "*", "2", "3", "4"]

    def test_parse_tiers(self):
        assert PARSE_TIERS == [("+", "-"), ("*", "/"), ("^",)]
