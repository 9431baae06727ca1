"""Reservation lookups for a guest."""

from config.settings import get_settings
from models import RecordListResult

from entities.query_builder import check_limit
from entities.shared.protocols import SqlExecutor
from entities.shared.runner import fetch_all
from entities.shared.statement import ParameterizedStatement

_RESERVATIONS_QUERY = """
SELECT properties.*,
       reservations.*,
       avg(property_reviews.rating) AS average_rating
FROM reservations
JOIN properties ON reservations.property_id = properties.id
JOIN property_reviews ON properties.id = property_reviews.property_id
WHERE reservations.guest_id = $1
GROUP BY properties.id, reservations.id
ORDER BY reservations.start_date
LIMIT $2
""".strip()


async def get_all_reservations(
    executor: SqlExecutor,
    guest_id: int,
    limit: int | None = None,
) -> RecordListResult:
    """
    Get all reservations for a single guest, earliest first.

    Each row carries the reserved property's columns, the reservation's
    columns and the property's average rating. Properties without reviews
    are not returned.

    Args:
        executor: The database executor.
        guest_id: The id of the guest user.
        limit: Maximum number of reservations to return. Defaults to the
            ``default_result_limit`` setting.

    Returns:
        ``success`` with the reservation rows, or ``error``.

    Raises:
        ValueError: If *limit* is not a positive integer.
    """
    if limit is None:
        limit = get_settings().default_result_limit
    check_limit(limit)
    statement = ParameterizedStatement(text=_RESERVATIONS_QUERY, params=[guest_id, limit])
    return await fetch_all(executor, statement)
