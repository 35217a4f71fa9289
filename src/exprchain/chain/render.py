"""Rendering and traversal helpers for expression chains."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from exprchain.chain.tree import ExpressionTree


def to_string(
    tree: ExpressionTree,
    and_symbol: str = " && ",
    or_symbol: str = " || ",
) -> str:
    """Render a tree as a parenthesized infix string.

    A leaf renders as ``str(value)``; every group is wrapped in parentheses
    with its children joined by the group's operator.

    Args:
        tree: Tree to render
        and_symbol: Separator between children of AND groups
        or_symbol: Separator between children of OR groups

    Returns:
        Rendered formula, e.g. ``"((A && B) || C)"``
    """
    if not tree.is_group:
        return str(tree.value)
    separator = and_symbol if tree.is_and else or_symbol
    parts = [to_string(child, and_symbol, or_symbol) for child in tree.children]
    return f"({separator.join(parts)})"


def walk(tree: ExpressionTree, order: str = "pre") -> Iterator[ExpressionTree]:
    """
    Walk tree nodes in specified order.

    Args:
        tree: Root node to start from
        order: "pre" for pre-order, "post" for post-order, "bfs" for breadth-first
    """
    if order == "pre":
        yield tree
        for child in tree.children:
            yield from walk(child, order)
    elif order == "post":
        for child in tree.children:
            yield from walk(child, order)
        yield tree
    elif order == "bfs":
        queue = [tree]
        while queue:
            current = queue.pop(0)
            yield current
            queue.extend(current.children)
    else:
        raise ValueError(f"Unknown order: {order}")


def leaves(tree: ExpressionTree) -> list[Any]:
    """Leaf values from left to right."""
    return [node.value for node in walk(tree) if not node.is_group]


def count_nodes(tree: ExpressionTree) -> int:
    return sum(1 for _ in walk(tree))


def get_depth(tree: ExpressionTree) -> int:
    if not tree.children:
        return 1
    return 1 + max(get_depth(child) for child in tree.children)
