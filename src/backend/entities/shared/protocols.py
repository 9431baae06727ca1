"""Protocol interfaces for I/O boundaries.

These protocols enable dependency injection for testability.
The production implementation wraps a pooled PostgreSQL connection;
test fakes return canned data with zero network access.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SqlExecutor(Protocol):
    """Executes parameterised SQL against the database.

    Statements use ``$n`` positional placeholders. Returns a dict with
    keys: ``success``, ``columns``, ``rows``, ``row_count``, ``error``.
    """

    async def execute(
        self,
        query: str,
        params: list[Any] | None = None,
    ) -> dict[str, Any]:
        """Execute a SQL statement.

        Args:
            query: SQL statement, optionally with ``$n`` placeholders.
            params: Bind-parameter values in placeholder order (or ``None``).

        Returns:
            Execution result dict with rows, columns, and status.
        """
        ...
