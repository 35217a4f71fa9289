"""Exceptions raised while building, parsing or loading expression chains."""


class ExpressionChainError(Exception):
    """Base class for all expression chain errors."""

    pass


class EmptyInputError(ExpressionChainError, ValueError):
    """Raised when a factory receives no values or no trees."""

    pass


class NullValueError(ExpressionChainError, TypeError):
    """Raised when a required value or tree is None."""

    pass


class ChainSyntaxError(ExpressionChainError, ValueError):
    """Raised when a token sequence is not of the form ``value (op value)*``."""

    pass


class InvalidTreeError(ExpressionChainError, ValueError):
    """Raised when a serialized tree breaks the leaf/group invariant."""

    pass
