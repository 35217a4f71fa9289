"""
Pytest fixtures for exprchain tests.
"""

import pytest
import pandas as pd

from exprchain.chain.tree import ExpressionTree, of
from exprchain.config import ChainConfig, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Pin rendering symbols so EXPRCHAIN_* variables cannot leak into tests."""
    set_config(ChainConfig())
    yield
    set_config(None)


@pytest.fixture
def and_group() -> ExpressionTree:
    """(A && B && C)"""
    return of("A").and_("B").and_("C")


@pytest.fixture
def or_group() -> ExpressionTree:
    """(A || B)"""
    return of("A").or_("B")


@pytest.fixture
def flags_df() -> pd.DataFrame:
    """Small frame of boolean flag columns."""
    return pd.DataFrame(
        {
            "a": [True, False, True, True],
            "b": [True, True, False, True],
            "c": [False, True, False, False],
            "x": [0, 1, 2, 3],
        }
    )
