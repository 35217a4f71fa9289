"""
exprchain: build AND/OR condition trees one condition at a time.

Trees stay in a canonical shape while they grow:
- runs of the same operator are kept flat: (A && B && C)
- switching operator splits the current node in two: ((A && B) || C)
"""

__version__ = "0.1.0"

from exprchain.chain import (
    Operator,
    ExpressionTree,
    EmptyInputError,
    NullValueError,
    of,
    and_operator,
    and_operator_of,
    or_operator,
    or_operator_of,
    and_chains,
    and_chains_of,
    or_chains,
    or_chains_of,
)

__all__ = [
    "__version__",
    "Operator",
    "ExpressionTree",
    "EmptyInputError",
    "NullValueError",
    "of",
    "and_operator",
    "and_operator_of",
    "or_operator",
    "or_operator_of",
    "and_chains",
    "and_chains_of",
    "or_chains",
    "or_chains_of",
]
