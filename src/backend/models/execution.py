"""
Query execution result models.

These models separate "the query ran and found nothing" from "the query
failed", which the callers of the data access layer must be able to tell
apart.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

ErrorKind = Literal[
    "unique_violation",
    "foreign_key_violation",
    "connection",
    "syntax",
    "generic",
]


class RecordResult(BaseModel):
    """Outcome of a lookup that yields at most one row."""

    status: Literal["found", "not_found", "error"] = Field(
        description="'found' with a record, 'not_found' for no row, or 'error'"
    )
    record: dict[str, Any] | None = Field(
        default=None, description="The first row, when one was returned"
    )
    error: str | None = Field(default=None, description="Error message if the query failed")
    error_kind: ErrorKind | None = Field(
        default=None, description="Classified failure category"
    )

    @property
    def found(self) -> bool:
        """Whether a row was returned."""
        return self.status == "found"


class RecordListResult(BaseModel):
    """Outcome of a lookup that yields any number of rows."""

    status: Literal["success", "error"] = Field(
        description="'success' (possibly with no rows) or 'error'"
    )
    records: list[dict[str, Any]] = Field(
        default_factory=list, description="Row dictionaries in result order"
    )
    error: str | None = Field(default=None, description="Error message if the query failed")
    error_kind: ErrorKind | None = Field(
        default=None, description="Classified failure category"
    )

    @property
    def row_count(self) -> int:
        """Number of rows returned."""
        return len(self.records)
