"""Operator type for expression chain groups."""

from enum import Enum

from exprchain.chain.errors import ChainSyntaxError


class Operator(Enum):
    """Boolean operator joining the children of a group."""

    AND = "and"
    OR = "or"

    @property
    def keyword(self) -> str:
        """Lower-case keyword form ("and" / "or")."""
        return self.value

    @property
    def symbol(self) -> str:
        """Infix symbol used when rendering ("&&" / "||")."""
        return "&&" if self is Operator.AND else "||"

    @property
    def other(self) -> "Operator":
        """The opposite operator."""
        return Operator.OR if self is Operator.AND else Operator.AND

    @classmethod
    def parse(cls, token: str) -> "Operator":
        """Parse an operator token.

        Accepts ``and``/``or`` (any case) and ``&&``/``||``/``&``/``|``.
        """
        normalized = token.strip().lower() if isinstance(token, str) else token
        if normalized in _TOKENS:
            return _TOKENS[normalized]
        raise ChainSyntaxError(f"Unknown operator: {token!r}")

    @classmethod
    def is_token(cls, token: str) -> bool:
        """Check whether ``token`` spells an operator."""
        return isinstance(token, str) and token.strip().lower() in _TOKENS


_TOKENS: dict[str, Operator] = {
    "and": Operator.AND,
    "&&": Operator.AND,
    "&": Operator.AND,
    "or": Operator.OR,
    "||": Operator.OR,
    "|": Operator.OR,
}
