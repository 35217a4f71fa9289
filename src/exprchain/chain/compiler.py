"""Compiler for expression chains to vectorized boolean masks.

Converts an ExpressionTree into a function that evaluates it row-wise over a
pandas DataFrame. Leaves resolve to boolean arrays:

- ``str`` leaves name a column of the frame (coerced with ``astype(bool)``)
- callable leaves are called with the frame
- any other value broadcasts ``bool(value)``

Every child of a group is evaluated; groups reduce their children with
``numpy.logical_and`` / ``numpy.logical_or``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np
import pandas as pd

from exprchain.chain.render import leaves
from exprchain.chain.tree import ExpressionTree

logger = logging.getLogger(__name__)


@dataclass
class CompiledMask:
    """A compiled chain ready for evaluation.

    Attributes:
        tree: Original expression tree
        evaluate: Function that evaluates the mask on data
        required_columns: Columns needed from input DataFrame
    """

    tree: ExpressionTree
    evaluate: Callable[[pd.DataFrame], pd.Series]
    required_columns: frozenset[str]

    def __call__(self, data: pd.DataFrame) -> pd.Series:
        """Evaluate the mask on data."""
        return self.evaluate(data)


class MaskCompiler:
    """Compiles expression chains to boolean mask functions."""

    def compile(self, tree: ExpressionTree) -> CompiledMask:
        """Compile an expression tree to a mask function.

        Args:
            tree: The expression tree to compile

        Returns:
            CompiledMask ready for evaluation
        """
        required_columns = frozenset(v for v in leaves(tree) if isinstance(v, str))

        def evaluate(data: pd.DataFrame) -> pd.Series:
            missing = required_columns - set(data.columns)
            if missing:
                raise ValueError(f"Missing columns: {sorted(missing)}")

            mask = self._evaluate_node(tree, data)
            return pd.Series(mask, index=data.index, dtype=bool)

        return CompiledMask(
            tree=tree,
            evaluate=evaluate,
            required_columns=required_columns,
        )

    def _evaluate_node(self, node: ExpressionTree, data: pd.DataFrame) -> np.ndarray:
        """Recursively evaluate a node to a boolean array."""
        if node.is_group:
            masks = [self._evaluate_node(child, data) for child in node.children]
            if node.is_and:
                return np.logical_and.reduce(masks)
            return np.logical_or.reduce(masks)
        return self._evaluate_leaf(node.value, data)

    def _evaluate_leaf(self, value: object, data: pd.DataFrame) -> np.ndarray:
        if isinstance(value, str):
            return data[value].astype(bool).to_numpy()

        if callable(value):
            result = np.asarray(value(data), dtype=bool)
            if result.shape != (len(data),):
                raise ValueError(
                    f"Leaf {value!r} returned shape {result.shape}, expected ({len(data)},)"
                )
            return result

        return np.full(len(data), bool(value))


_COMPILER: MaskCompiler | None = None


def get_compiler() -> MaskCompiler:
    """Get the singleton compiler instance."""
    global _COMPILER
    if _COMPILER is None:
        _COMPILER = MaskCompiler()
    return _COMPILER


def compile_tree(tree: ExpressionTree) -> CompiledMask:
    """Convenience function to compile a tree using singleton compiler."""
    return get_compiler().compile(tree)


def evaluate_tree(tree: ExpressionTree, data: pd.DataFrame) -> pd.Series:
    """Convenience function to evaluate a tree on data."""
    compiled = compile_tree(tree)
    logger.debug(f"Evaluating {tree.formula} over {len(data)} rows")
    return compiled(data)
