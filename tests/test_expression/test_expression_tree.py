"""Tests for ExpressionTree."""

import io

import pytest

from arithtree.expression.errors import UnknownTagError
from arithtree.expression.nodes import ConstantNode
from arithtree.expression.tree import ExpressionTree


class TestExpressionTree:
    """Test ExpressionTree class."""

    def test_create_simple_tree(self):
        tree = ExpressionTree(root=ConstantNode(value=5))

        assert tree.size == 1
        assert tree.depth == 1
        assert tree.formula == "(5)"
        assert tree.evaluate() == 5.0

    def test_from_string(self):
        tree = ExpressionTree.from_string("1+2*3-4")

        assert tree.size == 7
        assert tree.depth == 4
        assert tree.formula == "(((1)+((2)*(3)))-(4))"
        assert tree.evaluate() == 3.0
        assert tree.metadata["source"] == "1+2*3-4"
        assert tree.get_operators() == ["-", "+", "*"]

    def test_from_serialized(self):
        tree = ExpressionTree.from_serialized("Op + Constant 3 Constant 4")

        assert tree.formula == "((3)+(4))"
        assert tree.evaluate() == 7.0

    def test_from_serialized_unknown_tag(self):
        with pytest.raises(UnknownTagError):
            ExpressionTree.from_serialized("Nope 1")

    def test_serialize_roundtrip(self, expression_text):
        tree = ExpressionTree.from_string(expression_text)
        reloaded = ExpressionTree.from_serialized(tree.serialize())

        assert reloaded == tree
        assert reloaded.hash == tree.hash

    def test_render_tree(self):
        tree = ExpressionTree.from_string("1+2")
        assert tree.render_tree() == "+\n 1\n 2\n"

        sink = io.StringIO()
        tree.pretty_print_tree(sink)
        assert sink.getvalue() == tree.render_tree()

    def test_tree_clone(self):
        tree = ExpressionTree.from_string("2^3^2")
        cloned = tree.clone()

        assert tree == cloned
        assert tree.root is not cloned.root  # Different objects
        assert cloned.metadata == tree.metadata

    def test_repr(self):
        tree = ExpressionTree.from_string("1+2")
        assert repr(tree) == "ExpressionTree(((1)+(2)), size=3, depth=2)"
        assert str(tree) == "((1)+(2))"
