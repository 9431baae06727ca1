"""Parameterized statements with ``$n`` positional placeholders.

``StatementBuilder`` hands out placeholders as values are bound, so the
placeholder numbering always matches the order of the bound values.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class ParameterizedStatement:
    """SQL text paired with its bound values.

    Attributes:
        text: SQL with ``$1``..``$N`` placeholders.
        params: Values for the placeholders; ``params[i]`` binds ``$i+1``.
    """

    text: str
    params: list[Any] = field(default_factory=list)


class StatementBuilder:
    """Accumulates bound values and numbers their placeholders.

    Usage:
        builder = StatementBuilder()
        clause = f"email = {builder.bind('a@b.c')}"   # "email = $1"
        statement = builder.build(f"SELECT * FROM users WHERE {clause}")
    """

    def __init__(self) -> None:
        self._params: list[Any] = []

    def bind(self, value: Any) -> str:  # noqa: ANN401
        """Append a value and return the placeholder that refers to it."""
        self._params.append(value)
        return f"${len(self._params)}"

    def build(self, text: str) -> ParameterizedStatement:
        """Freeze *text* and the bound values into a statement."""
        return ParameterizedStatement(text=text, params=list(self._params))
