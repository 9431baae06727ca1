"""
Property listing and creation.

Listing delegates statement construction to ``build_property_query``;
creation inserts every column of ``properties`` and returns the new row.
"""

import logging

from config.settings import get_settings
from models import NewProperty, PropertyFilterOptions, RecordListResult, RecordResult

from entities.query_builder import build_property_query
from entities.shared.protocols import SqlExecutor
from entities.shared.runner import fetch_all, fetch_one
from entities.shared.statement import StatementBuilder

logger = logging.getLogger(__name__)

# Insert order; matches the field order of NewProperty
_PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
    "country",
    "street",
    "city",
    "province",
    "post_code",
)


async def get_all_properties(
    executor: SqlExecutor,
    options: PropertyFilterOptions | None = None,
    limit: int | None = None,
    *,
    case_insensitive_city: bool | None = None,
) -> RecordListResult:
    """
    Get properties matching the filter options, cheapest first.

    Args:
        executor: The database executor.
        options: Filter criteria; ``None`` lists all properties.
        limit: Maximum number of properties to return. Defaults to the
            ``default_result_limit`` setting.
        case_insensitive_city: Match the city filter with ILIKE. Defaults to
            the ``city_match_case_insensitive`` setting.

    Returns:
        ``success`` with the property rows (each with ``average_rating``),
        or ``error``.
    """
    settings = get_settings()
    if limit is None:
        limit = settings.default_result_limit
    if case_insensitive_city is None:
        case_insensitive_city = settings.city_match_case_insensitive

    statement = build_property_query(
        options, limit, case_insensitive_city=case_insensitive_city
    )
    return await fetch_all(executor, statement)


async def add_property(executor: SqlExecutor, new_property: NewProperty) -> RecordResult:
    """
    Add a property to the database.

    Args:
        executor: The database executor.
        new_property: All of the property details.

    Returns:
        ``found`` with the inserted row, or ``error`` (for example
        ``foreign_key_violation`` for an unknown owner).
    """
    builder = StatementBuilder()
    values = new_property.model_dump()
    placeholders = [builder.bind(values[column]) for column in _PROPERTY_COLUMNS]
    statement = builder.build(
        f"INSERT INTO properties ({', '.join(_PROPERTY_COLUMNS)})\n"
        f"VALUES ({', '.join(placeholders)})\n"
        "RETURNING *"
    )

    result = await fetch_one(executor, statement)
    if result.found:
        logger.info(
            "Created property id=%s for owner %s",
            result.record.get("id"),
            new_property.owner_id,
        )
    return result
