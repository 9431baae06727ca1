"""Unit tests for get_all_properties() and add_property()."""

import re

import pytest
from entities.properties import add_property, get_all_properties
from entities.query_builder import build_property_query
from models import NewProperty, PropertyFilterOptions

from tests.conftest import FakeSqlExecutor


def _new_property(**overrides: object) -> NewProperty:
    data = {
        "owner_id": 2,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://example.com/thumb.jpg",
        "cover_photo_url": "https://example.com/cover.jpg",
        "cost_per_night": 93061,
        "parking_spaces": 6,
        "number_of_bathrooms": 4,
        "number_of_bedrooms": 8,
        "country": "Canada",
        "street": "536 Namsub Highway",
        "city": "Sotboske",
        "province": "Quebec",
        "post_code": "28142",
    }
    data.update(overrides)
    return NewProperty(**data)


class TestGetAllProperties:
    """Filtered property listing."""

    async def test_executes_builder_statement(self, fake_sql_executor: FakeSqlExecutor) -> None:
        options = PropertyFilterOptions(city="van", minimum_rating=4)

        await get_all_properties(fake_sql_executor, options, 5)

        expected = build_property_query(options, 5)
        assert fake_sql_executor.calls == [(expected.text, expected.params)]

    async def test_returns_rows(self) -> None:
        rows = [{"id": 1, "title": "Cheap", "average_rating": None}]
        executor = FakeSqlExecutor(rows=rows)

        result = await get_all_properties(executor)

        assert result.status == "success"
        assert result.records == rows

    async def test_case_insensitive_city(self, fake_sql_executor: FakeSqlExecutor) -> None:
        await get_all_properties(
            fake_sql_executor, PropertyFilterOptions(city="van"), case_insensitive_city=True
        )

        assert "ILIKE $1" in fake_sql_executor.last_query

    async def test_defaults_from_settings(
        self, fake_sql_executor: FakeSqlExecutor, test_settings, monkeypatch
    ) -> None:
        settings = test_settings.model_copy(
            update={"default_result_limit": 25, "city_match_case_insensitive": True}
        )
        monkeypatch.setattr("entities.properties.repository.get_settings", lambda: settings)

        await get_all_properties(fake_sql_executor, PropertyFilterOptions(city="van"))

        assert "city ILIKE $1" in fake_sql_executor.last_query
        assert fake_sql_executor.last_params == ["%van%", 25]

    async def test_explicit_arguments_override_settings(
        self, fake_sql_executor: FakeSqlExecutor, test_settings, monkeypatch
    ) -> None:
        settings = test_settings.model_copy(update={"city_match_case_insensitive": True})
        monkeypatch.setattr("entities.properties.repository.get_settings", lambda: settings)

        await get_all_properties(
            fake_sql_executor, PropertyFilterOptions(city="van"), 3, case_insensitive_city=False
        )

        assert "city LIKE $1" in fake_sql_executor.last_query
        assert fake_sql_executor.last_params == ["%van%", 3]

    async def test_invalid_limit_raises(self, fake_sql_executor: FakeSqlExecutor) -> None:
        with pytest.raises(ValueError):
            await get_all_properties(fake_sql_executor, None, 0)
        assert fake_sql_executor.calls == []

    async def test_failure(self) -> None:
        executor = FakeSqlExecutor(error="server closed the connection unexpectedly")

        result = await get_all_properties(executor)

        assert result.status == "error"
        assert result.error_kind == "connection"


class TestAddProperty:
    """Property creation."""

    async def test_binds_all_columns_in_order(self, fake_sql_executor: FakeSqlExecutor) -> None:
        prop = _new_property()

        await add_property(fake_sql_executor, prop)

        assert fake_sql_executor.last_params == list(prop.model_dump().values())
        placeholders = re.findall(r"\$(\d+)", fake_sql_executor.last_query)
        assert placeholders == [str(i) for i in range(1, 15)]

    async def test_insert_statement(self, fake_sql_executor: FakeSqlExecutor) -> None:
        await add_property(fake_sql_executor, _new_property())

        query = fake_sql_executor.last_query
        assert query.startswith("INSERT INTO properties (owner_id, title, description,")
        assert query.endswith("RETURNING *")

    async def test_returns_inserted_row(self) -> None:
        executor = FakeSqlExecutor(rows=[{"id": 1001, "owner_id": 2}])

        result = await add_property(executor, _new_property())

        assert result.found
        assert result.record["id"] == 1001

    async def test_unknown_owner(self) -> None:
        executor = FakeSqlExecutor(
            error='violates foreign key constraint "properties_owner_id_fkey"'
        )

        result = await add_property(executor, _new_property(owner_id=99999))

        assert result.status == "error"
        assert result.error_kind == "foreign_key_violation"
