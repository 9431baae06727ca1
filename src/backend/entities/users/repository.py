"""
User lookups and creation.

Emails are compared and stored lower-cased so lookups are
case-insensitive regardless of how the address was typed.
"""

import logging

from models import NewUser, RecordResult

from entities.shared.protocols import SqlExecutor
from entities.shared.runner import fetch_one
from entities.shared.statement import ParameterizedStatement

logger = logging.getLogger(__name__)


async def get_user_with_email(executor: SqlExecutor, email: str) -> RecordResult:
    """
    Get a single user given their email.

    Args:
        executor: The database executor.
        email: The email of the user, in any letter case.

    Returns:
        ``found`` with the user row, ``not_found``, or ``error``.
    """
    statement = ParameterizedStatement(
        text="SELECT * FROM users WHERE email = $1 LIMIT 1",
        params=[email.lower()],
    )
    return await fetch_one(executor, statement)


async def get_user_with_id(executor: SqlExecutor, user_id: int) -> RecordResult:
    """
    Get a single user given their id.

    Args:
        executor: The database executor.
        user_id: The id of the user.

    Returns:
        ``found`` with the user row, ``not_found``, or ``error``.
    """
    statement = ParameterizedStatement(
        text="SELECT * FROM users WHERE id = $1 LIMIT 1",
        params=[user_id],
    )
    return await fetch_one(executor, statement)


async def add_user(executor: SqlExecutor, user: NewUser) -> RecordResult:
    """
    Add a new user to the database.

    Args:
        executor: The database executor.
        user: Name, email and password of the new user.

    Returns:
        ``found`` with the inserted row, or ``error`` (for example
        ``unique_violation`` when the email is taken).
    """
    statement = ParameterizedStatement(
        text="INSERT INTO users (name, email, password) VALUES ($1, $2, $3) RETURNING *",
        params=[user.name, user.email.lower(), user.password],
    )
    result = await fetch_one(executor, statement)
    if result.found:
        logger.info("Created user id=%s", result.record.get("id"))
    return result
