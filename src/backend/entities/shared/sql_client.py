"""
Shared PostgreSQL client for executing queries.

This module provides a reusable async client that executes ``$n``-style
parameterized statements against PostgreSQL through a pooled ODBC
connection.
"""

from __future__ import annotations

import datetime
import logging
from decimal import Decimal
from typing import Any

import aioodbc
from config.settings import Settings, get_settings

from entities.shared.placeholders import to_qmark

logger = logging.getLogger(__name__)


def _json_safe(value: Any) -> Any:  # noqa: ANN401
    """Convert a driver value into a JSON-serializable one."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (datetime.date, datetime.datetime, datetime.time)):
        return value.isoformat()
    return str(value)


def _error_result(error: str) -> dict[str, Any]:
    return {"success": False, "error": error, "columns": [], "rows": [], "row_count": 0}


class PostgresSqlClient:
    """
    Async context manager owning a pool of PostgreSQL connections.

    Satisfies the ``SqlExecutor`` protocol. An existing pool may be passed
    in; otherwise one is created from settings on enter and closed on exit.

    Usage:
        async with PostgresSqlClient() as client:
            result = await client.execute("SELECT * FROM users WHERE id = $1", [1])
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        pool: aioodbc.Pool | None = None,
    ):
        """
        Initialize the SQL client.

        Args:
            settings: Connection and pool settings. Defaults to ``get_settings()``.
            pool: An already-created pool to borrow instead of opening one.
        """
        self.settings = settings or get_settings()
        self._pool: aioodbc.Pool | None = pool
        self._owns_pool = pool is None

    async def __aenter__(self):
        """Create the connection pool unless one was supplied."""
        if self._pool is None:
            logger.info(
                "Opening connection pool to %s:%s/%s (size %d-%d)",
                self.settings.pg_host,
                self.settings.pg_port,
                self.settings.pg_database,
                self.settings.pool_min_size,
                self.settings.pool_max_size,
            )
            self._pool = await aioodbc.create_pool(
                dsn=self.settings.build_connection_string(),
                minsize=self.settings.pool_min_size,
                maxsize=self.settings.pool_max_size,
                autocommit=True,
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Close the pool if this client created it."""
        if self._pool is not None and self._owns_pool:
            self._pool.close()
            await self._pool.wait_closed()
            self._pool = None

    async def execute(self, query: str, params: list[Any] | None = None) -> dict[str, Any]:
        """
        Execute a parameterized SQL statement and return results.

        Args:
            query: The SQL statement with ``$n`` placeholders
            params: Values for the placeholders, ``$1`` first

        Returns:
            A dictionary containing:
            - success: Whether the query executed successfully
            - columns: List of column names in the result
            - rows: List of dictionaries, one per row
            - row_count: Number of rows returned
            - error: Error message if the query failed
        """
        logger.info("Executing SQL query: %s", " ".join(query.split())[:200])
        if self.settings.log_sql_params:
            logger.info("SQL parameters: %s", params)

        if self._pool is None:
            return _error_result(
                "Database connection not established. Use 'async with' context manager."
            )

        try:
            prepared = to_qmark(query, params)
        except ValueError as e:
            logger.error("SQL parameter error: %s", e)
            return _error_result(str(e))

        try:
            async with self._pool.acquire() as connection:
                async with connection.cursor() as cursor:
                    await cursor.execute(prepared.exec_sql, *prepared.exec_params)

                    columns = [column[0] for column in cursor.description] if cursor.description else []
                    raw_rows = await cursor.fetchall() if columns else []

            rows = [
                {col: _json_safe(row[i]) for i, col in enumerate(columns)} for row in raw_rows
            ]
            logger.info("Query executed successfully. Returned %d rows.", len(rows))

            return {
                "success": True,
                "columns": columns,
                "rows": rows,
                "row_count": len(rows),
                "error": None,
            }

        except Exception as e:
            logger.error("SQL execution error: %s", e)
            return _error_result(str(e))
