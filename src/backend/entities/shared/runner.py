"""
Generic statement runner for the data access layer.

Executes a ``ParameterizedStatement`` through an injected ``SqlExecutor``
and maps the result rows into ``RecordResult`` / ``RecordListResult``.
"""

import logging

from models import RecordListResult, RecordResult

from entities.shared.error_kinds import classify_error
from entities.shared.protocols import SqlExecutor
from entities.shared.statement import ParameterizedStatement

logger = logging.getLogger(__name__)


async def _run(executor: SqlExecutor, statement: ParameterizedStatement) -> dict:
    try:
        return await executor.execute(statement.text, statement.params)
    except Exception as e:
        logger.error("SQL execution error: %s", e)
        return {"success": False, "error": str(e), "columns": [], "rows": [], "row_count": 0}


async def fetch_one(executor: SqlExecutor, statement: ParameterizedStatement) -> RecordResult:
    """
    Execute a statement and return its first row.

    Args:
        executor: The database executor to run the statement on.
        statement: The statement to execute.

    Returns:
        ``found`` with the first row, ``not_found`` when no row came back,
        or ``error`` with the failure message and kind.
    """
    result = await _run(executor, statement)

    if not result.get("success"):
        error = result.get("error") or "Unknown database error"
        logger.warning("Lookup failed: %s", error)
        return RecordResult(status="error", error=error, error_kind=classify_error(error))

    rows = result.get("rows") or []
    if not rows:
        return RecordResult(status="not_found")
    return RecordResult(status="found", record=rows[0])


async def fetch_all(executor: SqlExecutor, statement: ParameterizedStatement) -> RecordListResult:
    """
    Execute a statement and return every row.

    Args:
        executor: The database executor to run the statement on.
        statement: The statement to execute.

    Returns:
        ``success`` with all rows (possibly none), or ``error`` with the
        failure message and kind.
    """
    result = await _run(executor, statement)

    if not result.get("success"):
        error = result.get("error") or "Unknown database error"
        logger.warning("List lookup failed: %s", error)
        return RecordListResult(status="error", error=error, error_kind=classify_error(error))

    return RecordListResult(status="success", records=list(result.get("rows") or []))
