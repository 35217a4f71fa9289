"""Argument checks shared by the factories and combine operations.

Each check raises before anything is mutated, so a failed call never leaves
a tree half-modified.
"""

from __future__ import annotations

from typing import Any, Iterable, TypeVar

from exprchain.chain.errors import EmptyInputError, NullValueError

T = TypeVar("T")


def _format(message: Any, args: tuple) -> str | None:
    if message is None:
        return None
    if args:
        return str(message) % args
    return str(message)


def check_not_empty(values: Iterable[T] | None, message: Any = None) -> list[T]:
    """Materialize ``values`` and fail if there is nothing in it.

    Returns:
        The values as a list (generators are consumed exactly once)
    """
    if values is None:
        raise EmptyInputError(_format(message, ()) or "at least one element required")
    items = list(values)
    if not items:
        raise EmptyInputError(_format(message, ()) or "at least one element required")
    return items


def check_not_null(reference: T | None, message: Any = None, *args: Any) -> T:
    """Return ``reference`` unchanged, or raise NullValueError if it is None."""
    if reference is None:
        raise NullValueError(_format(message, args) or "argument must not be None")
    return reference


def check_no_nulls(values: list[T], message: Any = None) -> list[T]:
    """Fail on the first None element of ``values``."""
    for index, value in enumerate(values):
        if value is None:
            raise NullValueError(
                _format(message, ()) or f"element at index {index} must not be None"
            )
    return values


def check_argument(expression: bool, message: Any = None, *args: Any) -> None:
    if not expression:
        raise ValueError(_format(message, args) or "invalid argument")
