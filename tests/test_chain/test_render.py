"""Tests for rendering and traversal."""

import pytest

from exprchain.chain.render import count_nodes, get_depth, leaves, to_string, walk
from exprchain.chain.tree import and_chains, of, or_chains
from exprchain.config import ChainConfig, set_config


class TestToString:
    """Test infix rendering."""

    def test_custom_symbols(self):
        """Test rendering with explicit separators."""
        tree = of("A").and_("B").or_("C")
        assert to_string(tree, " & ", " | ") == "((A & B) | C)"

    def test_formula_ignores_config(self):
        """Test formula always uses the default separators."""
        set_config(ChainConfig(and_symbol=" AND ", or_symbol=" OR "))
        assert of("A").or_("B").and_("C").formula == "((A || B) && C)"

    def test_str_independent_of_environment(self, monkeypatch):
        """Test str() works whatever EXPRCHAIN_* variables hold."""
        monkeypatch.setenv("EXPRCHAIN_LOG_LEVEL", "verbose")
        monkeypatch.setenv("EXPRCHAIN_AND_SYMBOL", " AND ")
        set_config(None)

        tree = of("A").and_("B")

        assert str(tree) == "(A && B)"
        assert repr(tree) == "ExpressionTree((A && B), size=3, depth=2)"

    def test_nested_groups(self):
        """Test each nested group gets its own parentheses."""
        tree = and_chains(or_chains(of(1), of(2)), or_chains(of(3), of(4)))
        assert to_string(tree) == "((1 || 2) && (3 || 4))"


class TestTraversal:
    """Test walk() and derived helpers."""

    @pytest.fixture
    def tree(self):
        # ((A && B) || C)
        return of("A").and_("B").or_("C")

    def test_pre_order(self, tree):
        """Test pre-order walk visits parents first."""
        values = [n.value for n in walk(tree, "pre")]
        assert values == [None, None, "A", "B", "C"]

    def test_post_order(self, tree):
        """Test post-order walk visits children first."""
        values = [n.value for n in walk(tree, "post")]
        assert values == ["A", "B", None, "C", None]

    def test_bfs(self, tree):
        """Test breadth-first walk goes level by level."""
        values = [n.value for n in walk(tree, "bfs")]
        assert values == [None, None, "C", "A", "B"]

    def test_unknown_order(self, tree):
        """Test an unknown order is rejected."""
        with pytest.raises(ValueError, match="Unknown order"):
            list(walk(tree, "sideways"))

    def test_leaves(self, tree):
        """Test leaf values come back left to right."""
        assert leaves(tree) == ["A", "B", "C"]

    def test_counts(self, tree):
        """Test node count and depth."""
        assert count_nodes(tree) == 5
        assert get_depth(tree) == 3
        assert get_depth(of("A")) == 1
