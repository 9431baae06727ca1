"""Shared test fixtures for the LightBnB data access layer."""

import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure src/backend/ is on the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src" / "backend"))

from config.settings import Settings

# ---------------------------------------------------------------------------
# Protocol fakes
# ---------------------------------------------------------------------------


class FakeSqlExecutor:
    """In-memory fake satisfying the ``SqlExecutor`` protocol.

    Returns canned rows/columns or an error, and records every call.
    """

    def __init__(
        self,
        rows: list[dict[str, Any]] | None = None,
        columns: list[str] | None = None,
        error: str | None = None,
    ) -> None:
        self.rows: list[dict[str, Any]] = rows or []
        self.columns: list[str] = columns or []
        self.error: str | None = error
        self.calls: list[tuple[str, list[Any] | None]] = []

    async def execute(
        self,
        query: str,
        params: list[Any] | None = None,
    ) -> dict[str, Any]:
        """Return a success/failure dict mimicking ``PostgresSqlClient.execute``."""
        self.calls.append((query, params))

        if self.error:
            return {
                "success": False,
                "error": self.error,
                "columns": [],
                "rows": [],
                "row_count": 0,
            }

        return {
            "success": True,
            "columns": self.columns,
            "rows": self.rows,
            "row_count": len(self.rows),
            "error": None,
        }

    @property
    def last_query(self) -> str:
        """SQL text of the most recent call."""
        return self.calls[-1][0]

    @property
    def last_params(self) -> list[Any] | None:
        """Bound values of the most recent call."""
        return self.calls[-1][1]


class RaisingSqlExecutor:
    """``SqlExecutor`` whose ``execute`` raises, as a broken driver would."""

    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    async def execute(self, query: str, params: list[Any] | None = None) -> dict[str, Any]:
        raise self.exc


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Return a ``Settings`` instance populated with safe test defaults."""
    return Settings(
        pg_host="db.test.internal",
        pg_port=6543,
        pg_user="tester",
        pg_password="secret",
        pg_database="lightbnb_test",
        pool_min_size=1,
        pool_max_size=3,
    )


@pytest.fixture
def fake_sql_executor() -> FakeSqlExecutor:
    """Return an empty ``FakeSqlExecutor`` instance."""
    return FakeSqlExecutor()
