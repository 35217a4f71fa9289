"""Serialized form of expression chains.

A tree is stored as nested documents::

    {"operator": "or", "children": [
        {"operator": "and", "children": [{"value": "A"}, {"value": "B"}]},
        {"value": "C"}
    ]}

Loading rebuilds groups by plain grouping, so the stored shape comes back
exactly as written.
"""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

from exprchain.chain.errors import InvalidTreeError
from exprchain.chain.tree import ExpressionTree
from exprchain.chain.types import Operator


class NodeModel(BaseModel):
    """One node of a serialized tree."""

    value: Any = None
    operator: Literal["and", "or"] = "and"
    children: list[NodeModel] = Field(default_factory=list, validate_default=True)

    @field_validator("children")
    @classmethod
    def check_leaf_or_group(
        cls, children: list[NodeModel], info: ValidationInfo
    ) -> list[NodeModel]:
        value = info.data.get("value")
        if value is not None and children:
            raise ValueError("a node cannot hold both a value and children")
        if value is None and len(children) < 2:
            raise ValueError("a group needs at least two children")
        return children


def from_model(model: NodeModel) -> ExpressionTree:
    operator = Operator(model.operator)
    if model.value is not None:
        return ExpressionTree(value=model.value, operator=operator)
    children = [from_model(child) for child in model.children]
    if operator is Operator.AND:
        return ExpressionTree.and_chains_of(children)
    return ExpressionTree.or_chains_of(children)


def to_dict(tree: ExpressionTree) -> dict:
    """Serialize a tree to plain dicts (leaves omit ``children``)."""
    if not tree.is_group:
        return {"value": tree.value, "operator": tree.operator.keyword}
    return {
        "operator": tree.operator.keyword,
        "children": [to_dict(child) for child in tree.children],
    }


def from_dict(data: dict) -> ExpressionTree:
    """Load a tree from a dict produced by ``to_dict``.

    Raises:
        InvalidTreeError: If the document breaks the leaf/group invariant
    """
    try:
        model = NodeModel.model_validate(data)
    except ValidationError as e:
        raise InvalidTreeError(str(e)) from e
    return from_model(model)


def to_json(tree: ExpressionTree, indent: int | None = None) -> str:
    return json.dumps(to_dict(tree), indent=indent)


def from_json(text: str) -> ExpressionTree:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidTreeError(f"Invalid JSON: {e}") from e
    return from_dict(data)
