"""Tests for building chains from tokens."""

import pytest

from exprchain.chain.errors import ChainSyntaxError, EmptyInputError
from exprchain.chain.parse import from_text, from_tokens
from exprchain.chain.tree import of


class TestFromTokens:
    """Test left-to-right token folding."""

    def test_single_value(self):
        """Test one token gives a leaf."""
        tree = from_tokens(["A"])
        assert not tree.is_group
        assert tree.value == "A"

    def test_matches_fluent_calls(self):
        """Test tokens fold exactly like chained calls."""
        tree = from_text("A and B or C and D")
        fluent = of("A").and_("B").or_("C").and_("D")
        assert str(tree) == str(fluent) == "(((A && B) || C) && D)"

    def test_symbol_tokens(self):
        """Test symbol spellings of the operators."""
        assert str(from_text("A && B && C")) == "(A && B && C)"
        assert str(from_text("A | B || C")) == "(A || B || C)"

    @pytest.mark.parametrize(
        "text",
        [
            "and A",
            "A B",
            "A and",
            "A and or B",
            "A or B C",
        ],
    )
    def test_syntax_errors(self, text):
        """Test misplaced values and operators are rejected."""
        with pytest.raises(ChainSyntaxError):
            from_text(text)

    def test_empty(self):
        """Test empty input raises EmptyInputError."""
        with pytest.raises(EmptyInputError):
            from_text("")
        with pytest.raises(EmptyInputError):
            from_tokens([])
