"""Property listing query builder.

Turns a ``PropertyFilterOptions`` and a row limit into one parameterized
statement: properties joined with their average review rating, narrowed
by the populated filters, grouped per property, optionally filtered on the
aggregate rating, ordered by price and capped.

Pure: nothing here touches the database.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from models import PropertyFilterOptions

from entities.shared.statement import ParameterizedStatement, StatementBuilder

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10

_BASE_SELECT = (
    "SELECT properties.*, avg(property_reviews.rating) AS average_rating\n"
    "FROM properties\n"
    "LEFT JOIN property_reviews ON properties.id = property_reviews.property_id"
)


def _to_cents(dollars: Decimal) -> int:
    """Convert a dollar amount to whole cents."""
    return int((Decimal(dollars) * 100).to_integral_value(rounding=ROUND_HALF_UP))


def check_limit(limit: int) -> int:
    """Return *limit* if it is a positive integer, else raise ``ValueError``."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    return limit


def build_property_query(
    options: PropertyFilterOptions | None = None,
    limit: int = DEFAULT_LIMIT,
    *,
    case_insensitive_city: bool = False,
) -> ParameterizedStatement:
    """Build the property listing statement.

    Filters are applied in a fixed order (city, owner, minimum price,
    maximum price) so placeholder numbering is stable for a given set of
    populated filters. The rating filter applies after aggregation and
    the limit is always bound last.

    Args:
        options: Filter criteria; ``None`` or all-empty lists everything.
        limit: Maximum number of rows to return.
        case_insensitive_city: Match the city with ILIKE instead of LIKE.

    Returns:
        A ``ParameterizedStatement`` with ``$1``..``$N`` placeholders.

    Raises:
        ValueError: If *limit* is not a positive integer.
    """
    check_limit(limit)

    options = options or PropertyFilterOptions()
    builder = StatementBuilder()
    where_filters: list[str] = []

    if options.city:
        operator = "ILIKE" if case_insensitive_city else "LIKE"
        where_filters.append(f"city {operator} {builder.bind(f'%{options.city}%')}")

    if options.owner_id:
        where_filters.append(f"owner_id = {builder.bind(options.owner_id)}")

    if options.minimum_price_per_night:
        placeholder = builder.bind(_to_cents(options.minimum_price_per_night))
        where_filters.append(f"cost_per_night >= {placeholder}")

    if options.maximum_price_per_night:
        placeholder = builder.bind(_to_cents(options.maximum_price_per_night))
        where_filters.append(f"cost_per_night <= {placeholder}")

    clauses = [_BASE_SELECT]
    if where_filters:
        clauses.append(f"WHERE {' AND '.join(where_filters)}")

    clauses.append("GROUP BY properties.id")

    # Rating is an aggregate, so it filters groups rather than rows
    if options.minimum_rating:
        placeholder = builder.bind(options.minimum_rating)
        clauses.append(f"HAVING avg(property_reviews.rating) >= {placeholder}")

    clauses.append("ORDER BY cost_per_night")
    clauses.append(f"LIMIT {builder.bind(limit)}")

    statement = builder.build("\n".join(clauses))
    logger.debug(
        "Built property query with %d filter(s) and %d parameter(s)",
        len(where_filters) + (1 if options.minimum_rating else 0),
        len(statement.params),
    )
    return statement
