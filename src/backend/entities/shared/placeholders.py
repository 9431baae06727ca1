"""Pure-function placeholder rewriting for parameterized SQL.

Statements in this package are written with PostgreSQL-style ``$n``
placeholders. The ODBC driver only understands ``?`` markers bound by
position, so statements are rewritten just before execution.

This module is intentionally free of external dependencies so that it can
be unit-tested without mocking.
"""

import re
from dataclasses import dataclass, field
from typing import Any

_DOLLAR_PARAM_RE: re.Pattern[str] = re.compile(r"\$(\d+)")


@dataclass(frozen=True, slots=True)
class QmarkQuery:
    """A statement rewritten for qmark-style execution.

    Attributes:
        exec_sql: SQL with ``?`` placeholders.
        exec_params: Values in the order their ``?`` markers appear.
    """

    exec_sql: str
    exec_params: list[Any] = field(default_factory=list)


def to_qmark(sql: str, params: list[Any] | None = None) -> QmarkQuery:
    """Rewrite ``$n`` placeholders as ``?`` and reorder values to match.

    Every occurrence of ``$n`` becomes one ``?`` and contributes
    ``params[n - 1]`` to the execution list, so repeated or out-of-order
    placeholders still bind the right value.

    Args:
        sql: SQL text with ``$1``..``$N`` placeholders.
        params: Bound values indexed by placeholder number minus one.

    Returns:
        A ``QmarkQuery`` ready for the ODBC driver.

    Raises:
        ValueError: If a placeholder index has no corresponding value.
    """
    values = list(params or [])
    ordered: list[Any] = []

    def _replace(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index < 1 or index > len(values):
            raise ValueError(
                f"Placeholder ${index} has no bound value ({len(values)} supplied)"
            )
        ordered.append(values[index - 1])
        return "?"

    exec_sql = _DOLLAR_PARAM_RE.sub(_replace, sql)
    return QmarkQuery(exec_sql=exec_sql, exec_params=ordered)
