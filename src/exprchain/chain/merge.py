"""Merge rules for attaching a node to an existing expression chain.

The receiver's current operator decides the rewrite:

- same operator: the node is appended as a sibling (the chain stays flat)
- other operator: the receiver is cloned whole, and becomes a two-child group
  ``[clone, node]`` under the new operator

A leaf combined for the first time ends up as a two-child group either way.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from exprchain.chain.preconditions import check_argument, check_not_null
from exprchain.chain.render import walk
from exprchain.chain.types import Operator

if TYPE_CHECKING:
    from exprchain.chain.tree import ExpressionTree

logger = logging.getLogger(__name__)


def combine(root: ExpressionTree, node: ExpressionTree, operator: Operator) -> ExpressionTree:
    """Attach ``node`` to ``root`` under ``operator``, mutating ``root``.

    Args:
        root: Receiver of the combine call
        node: Tree to attach
        operator: Operator of the call (``and_`` or ``or_``)

    Returns:
        ``root``
    """
    check_not_null(root, "root must not be None")
    check_not_null(node, "cannot combine with None")
    check_argument(
        all(n is not root for n in walk(node)),
        "cannot combine a tree with a tree that contains it",
    )

    if operator is root._operator:
        _append(root, node)
    else:
        _demote(root, node, operator)
    return root


def _append(root: ExpressionTree, node: ExpressionTree) -> None:
    if root.is_group:
        logger.debug("append to %s group (%d children)", root._operator.name, len(root._children))
        root._children.append(node)
        return

    # first combine of a leaf
    logger.debug("promote leaf %r to %s group", root._value, root._operator.name)
    old_leaf = root._clone()
    root._value = None
    root._children = [old_leaf, node]


def _demote(root: ExpressionTree, node: ExpressionTree, operator: Operator) -> None:
    logger.debug(
        "demote %s %s under new %s group",
        root._operator.name,
        "group" if root.is_group else "leaf",
        operator.name,
    )
    clone = root._clone()
    root._value = None
    root._operator = operator
    root._children = [clone, node]
