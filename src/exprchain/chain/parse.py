"""Build expression chains from flat token sequences.

Tokens are folded strictly left to right through ``and_``/``or_``, exactly
as the equivalent fluent calls would be made::

    from_text("A and B or C")  ==  of("A").and_("B").or_("C")  ->  ((A && B) || C)

There is no operator precedence and no grouping syntax.
"""

from __future__ import annotations

import logging
from typing import Iterable

from exprchain.chain.errors import ChainSyntaxError
from exprchain.chain.preconditions import check_no_nulls, check_not_empty
from exprchain.chain.tree import ExpressionTree
from exprchain.chain.types import Operator

logger = logging.getLogger(__name__)


def from_tokens(tokens: Iterable[str]) -> ExpressionTree[str]:
    """Fold ``value (op value)*`` into a tree.

    Raises:
        EmptyInputError: No tokens
        ChainSyntaxError: An operator where a value is expected, or vice versa
    """
    items = check_no_nulls(check_not_empty(tokens, "at least one token required"))

    if Operator.is_token(items[0]):
        raise ChainSyntaxError(f"Expected a value at position 0, got operator {items[0]!r}")
    tree = ExpressionTree.of(items[0])

    pending: Operator | None = None
    for position, token in enumerate(items[1:], start=1):
        if pending is None:
            if not Operator.is_token(token):
                raise ChainSyntaxError(
                    f"Expected an operator at position {position}, got {token!r}"
                )
            pending = Operator.parse(token)
            continue

        if Operator.is_token(token):
            raise ChainSyntaxError(
                f"Expected a value at position {position}, got operator {token!r}"
            )
        if pending is Operator.AND:
            tree.and_(token)
        else:
            tree.or_(token)
        pending = None

    if pending is not None:
        raise ChainSyntaxError(f"Dangling operator {pending.keyword!r} at end of input")

    logger.debug(f"Built {tree.formula} from {len(items)} tokens")
    return tree


def from_text(text: str) -> ExpressionTree[str]:
    """Split ``text`` on whitespace and build a tree from the tokens."""
    return from_tokens(text.split())
