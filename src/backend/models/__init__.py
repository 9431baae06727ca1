"""
Shared models for the data access layer.

All models are re-exported here so callers can import from ``models``.
"""

from .execution import ErrorKind, RecordListResult, RecordResult
from .filters import PropertyFilterOptions
from .schema import NewProperty, NewUser

__all__ = [
    # Schema (insert payloads)
    "NewUser",
    "NewProperty",
    # Filters (property listing)
    "PropertyFilterOptions",
    # Execution (query outcomes)
    "ErrorKind",
    "RecordResult",
    "RecordListResult",
]
