"""Expression chain: a mutable AND/OR tree grown one condition at a time.

An ExpressionTree is either a leaf holding a value, or a group holding an
ordered list of children joined by a single operator:

    of("A").and_("B").and_("C")              -> (A && B && C)
    of("A").and_("B").or_(of("C").and_("D")) -> ((A && B) || (C && D))

Combine calls mutate the receiver and return it, so calls can be chained.
Runs of the same operator stay flat; switching operator pushes the current
node one level down under a new two-child group.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, TypeVar

from exprchain.chain.merge import combine
from exprchain.chain.preconditions import (
    check_no_nulls,
    check_not_empty,
    check_not_null,
)
from exprchain.chain.types import Operator

T = TypeVar("T")


class ExpressionTree(Generic[T]):
    """A leaf value or an operator group of sub-trees.

    Build instances through the factories (``of``, ``and_operator``,
    ``or_chains`` ...) rather than the constructor.

    Attributes:
        value: Leaf value, None for groups
        operator: Operator joining the children (AND for fresh leaves)
        children: Snapshot of the children, empty for leaves
    """

    __slots__ = ("_value", "_operator", "_children")

    def __init__(
        self,
        value: T | None = None,
        operator: Operator = Operator.AND,
        children: Iterable[ExpressionTree[T]] | None = None,
    ) -> None:
        self._value = value
        self._operator = operator
        self._children: list[ExpressionTree[T]] = list(children) if children else []

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, value: T) -> ExpressionTree[T]:
        """Wrap a single value in a leaf."""
        check_not_null(value, "value must not be None")
        return cls(value=value)

    @classmethod
    def and_operator(cls, *values: T) -> ExpressionTree[T]:
        """Build ``v0 && v1 && ...`` from raw values."""
        return cls._fold(values, Operator.AND)

    @classmethod
    def and_operator_of(cls, values: Iterable[T]) -> ExpressionTree[T]:
        """Same as ``and_operator`` for an iterable of values."""
        return cls._fold(values, Operator.AND)

    @classmethod
    def or_operator(cls, *values: T) -> ExpressionTree[T]:
        """Build ``v0 || v1 || ...`` from raw values."""
        return cls._fold(values, Operator.OR)

    @classmethod
    def or_operator_of(cls, values: Iterable[T]) -> ExpressionTree[T]:
        """Same as ``or_operator`` for an iterable of values."""
        return cls._fold(values, Operator.OR)

    @classmethod
    def and_chains(cls, *trees: ExpressionTree[T]) -> ExpressionTree[T]:
        """Group pre-built trees under AND, without merging them."""
        return cls._group(trees, Operator.AND)

    @classmethod
    def and_chains_of(cls, trees: Iterable[ExpressionTree[T]]) -> ExpressionTree[T]:
        return cls._group(trees, Operator.AND)

    @classmethod
    def or_chains(cls, *trees: ExpressionTree[T]) -> ExpressionTree[T]:
        """Group pre-built trees under OR, without merging them."""
        return cls._group(trees, Operator.OR)

    @classmethod
    def or_chains_of(cls, trees: Iterable[ExpressionTree[T]]) -> ExpressionTree[T]:
        return cls._group(trees, Operator.OR)

    @classmethod
    def _fold(cls, values: Iterable[T], operator: Operator) -> ExpressionTree[T]:
        items = check_no_nulls(check_not_empty(values, "at least one value required"))
        tree = cls(value=items[0], operator=operator)
        for value in items[1:]:
            combine(tree, cls(value=value), operator)
        return tree

    @classmethod
    def _group(cls, trees: Iterable[ExpressionTree[T]], operator: Operator) -> ExpressionTree[T]:
        items = check_no_nulls(check_not_empty(trees, "at least one tree required"))
        for item in items:
            if not isinstance(item, ExpressionTree):
                raise TypeError(f"Expected ExpressionTree, got {type(item).__name__}")
        # a single tree needs no parent operator
        if len(items) == 1:
            return items[0]
        return cls(operator=operator, children=items)

    # ------------------------------------------------------------------
    # Combination
    # ------------------------------------------------------------------

    def and_(self, other: T | ExpressionTree[T]) -> ExpressionTree[T]:
        """Combine ``other`` (a value or a tree) with AND, in place."""
        return combine(self, self._as_tree(other), Operator.AND)

    def or_(self, other: T | ExpressionTree[T]) -> ExpressionTree[T]:
        """Combine ``other`` (a value or a tree) with OR, in place."""
        return combine(self, self._as_tree(other), Operator.OR)

    def and_optional(self, value: T | None) -> ExpressionTree[T]:
        """AND ``value`` in if it is not None; otherwise do nothing."""
        if value is None:
            return self
        return self.and_(value)

    def or_optional(self, value: T | None) -> ExpressionTree[T]:
        """OR ``value`` in if it is not None; otherwise do nothing."""
        if value is None:
            return self
        return self.or_(value)

    def __iand__(self, other: T | ExpressionTree[T]) -> ExpressionTree[T]:
        return self.and_(other)

    def __ior__(self, other: T | ExpressionTree[T]) -> ExpressionTree[T]:
        return self.or_(other)

    def _as_tree(self, other: Any) -> ExpressionTree[T]:
        if isinstance(other, ExpressionTree):
            return other
        return type(self).of(other)

    def _clone(self) -> ExpressionTree[T]:
        """Shallow copy: grandchildren are shared with the original."""
        return type(self)(
            value=self._value,
            operator=self._operator,
            children=list(self._children),
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def value(self) -> T | None:
        return self._value

    @property
    def operator(self) -> Operator:
        return self._operator

    @property
    def children(self) -> tuple[ExpressionTree[T], ...]:
        return tuple(self._children)

    @property
    def is_group(self) -> bool:
        return self._value is None

    @property
    def is_leaf(self) -> bool:
        return self._value is not None

    @property
    def is_and(self) -> bool:
        return self._operator is Operator.AND

    @property
    def is_or(self) -> bool:
        return self._operator is Operator.OR

    @property
    def size(self) -> int:
        """Total number of nodes."""
        from exprchain.chain.render import count_nodes

        return count_nodes(self)

    @property
    def depth(self) -> int:
        """Tree depth (a leaf has depth 1)."""
        from exprchain.chain.render import get_depth

        return get_depth(self)

    @property
    def formula(self) -> str:
        """Infix rendering with the default ``&&`` / ``||`` separators."""
        from exprchain.chain.render import to_string

        return to_string(self)

    def __str__(self) -> str:
        return self.formula

    def __repr__(self) -> str:
        return f"ExpressionTree({self.formula}, size={self.size}, depth={self.depth})"


of = ExpressionTree.of
and_operator = ExpressionTree.and_operator
and_operator_of = ExpressionTree.and_operator_of
or_operator = ExpressionTree.or_operator
or_operator_of = ExpressionTree.or_operator_of
and_chains = ExpressionTree.and_chains
and_chains_of = ExpressionTree.and_chains_of
or_chains = ExpressionTree.or_chains
or_chains_of = ExpressionTree.or_chains_of
