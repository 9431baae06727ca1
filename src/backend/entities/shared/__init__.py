"""Shared utilities for the data access layer.

``PostgresSqlClient`` lives in ``entities.shared.sql_client`` and is not
imported here, so the pure helpers load without the ODBC driver stack.
"""

from .protocols import SqlExecutor
from .runner import fetch_all, fetch_one
from .statement import ParameterizedStatement, StatementBuilder

__all__ = [
    "ParameterizedStatement",
    "SqlExecutor",
    "StatementBuilder",
    "fetch_all",
    "fetch_one",
]
