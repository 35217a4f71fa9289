"""Expression chain: fluent AND/OR condition trees."""

from exprchain.chain.types import Operator
from exprchain.chain.errors import (
    ExpressionChainError,
    EmptyInputError,
    NullValueError,
    ChainSyntaxError,
    InvalidTreeError,
)
from exprchain.chain.tree import (
    ExpressionTree,
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
from exprchain.chain.render import to_string, walk, leaves
from exprchain.chain.parse import from_tokens, from_text
from exprchain.chain.schema import to_dict, from_dict, to_json, from_json

__all__ = [
    "Operator",
    "ExpressionChainError",
    "EmptyInputError",
    "NullValueError",
    "ChainSyntaxError",
    "InvalidTreeError",
    "ExpressionTree",
    "of",
    "and_operator",
    "and_operator_of",
    "or_operator",
    "or_operator_of",
    "and_chains",
    "and_chains_of",
    "or_chains",
    "or_chains_of",
    "to_string",
    "walk",
    "leaves",
    "from_tokens",
    "from_text",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
