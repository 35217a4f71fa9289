"""Tests for mask compilation."""

import pytest
import pandas as pd

from exprchain.chain.compiler import (
    CompiledMask,
    MaskCompiler,
    compile_tree,
    evaluate_tree,
    get_compiler,
)
from exprchain.chain.tree import of, or_operator


class TestMaskCompiler:
    """Test MaskCompiler class."""

    def test_compile_returns_compiled_mask(self):
        """Test compile collects the required columns."""
        tree = of("a").and_("b").or_("c")
        compiled = MaskCompiler().compile(tree)

        assert isinstance(compiled, CompiledMask)
        assert compiled.tree is tree
        assert compiled.required_columns == frozenset({"a", "b", "c"})

    def test_single_column(self, flags_df):
        """Test a leaf evaluates to its column."""
        mask = evaluate_tree(of("a"), flags_df)
        assert mask.tolist() == [True, False, True, True]

    def test_and_group(self, flags_df):
        """Test AND of two columns."""
        mask = evaluate_tree(of("a").and_("b"), flags_df)
        assert mask.tolist() == [True, False, False, True]

    def test_or_of_and(self, flags_df):
        """Test OR of an AND group and a column."""
        mask = evaluate_tree(of("a").and_("b").or_("c"), flags_df)
        assert mask.tolist() == [True, True, False, True]

    def test_flat_or(self, flags_df):
        """Test a flat OR group."""
        mask = evaluate_tree(or_operator("b", "c"), flags_df)
        assert mask.tolist() == [True, True, False, True]

    def test_index_preserved(self, flags_df):
        """Test the mask is aligned to the frame index."""
        frame = flags_df.set_index(pd.Index([10, 20, 30, 40]))
        mask = evaluate_tree(of("a"), frame)
        assert list(mask.index) == [10, 20, 30, 40]
        assert mask.dtype == bool

    def test_numeric_column_coerced(self, flags_df):
        """Test numeric columns are coerced to bool."""
        mask = evaluate_tree(of("x"), flags_df)
        assert mask.tolist() == [False, True, True, True]

    def test_callable_leaf(self, flags_df):
        """Test callable leaves are called with the frame."""
        tree = of(lambda df: df["x"] > 1).and_("a")
        mask = evaluate_tree(tree, flags_df)
        assert mask.tolist() == [False, False, True, True]

    def test_constant_leaf(self, flags_df):
        """Test constant leaves broadcast."""
        mask = evaluate_tree(of(False).or_("c"), flags_df)
        assert mask.tolist() == [False, True, False, False]

    def test_missing_columns(self, flags_df):
        """Test unknown columns are reported before evaluation."""
        with pytest.raises(ValueError, match="Missing columns"):
            evaluate_tree(of("a").and_("nope"), flags_df)

    def test_callable_wrong_shape(self, flags_df):
        """Test callables must return one value per row."""
        with pytest.raises(ValueError, match="shape"):
            evaluate_tree(of(lambda df: [True]), flags_df)

    def test_singleton(self):
        """Test the module-level compiler is shared."""
        assert get_compiler() is get_compiler()
        assert compile_tree(of("a")).required_columns == frozenset({"a"})
