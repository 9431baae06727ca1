"""
Entities package.

Each subdirectory groups the operations for one part of the schema:
- users/: user lookups by email or id, and user creation
- reservations/: reservations for a guest
- properties/: filtered property listing and property creation
- query_builder/: builds the property listing statement
- shared/: statements, the SQL client protocol and implementation, runners

Shared models are available from the ``models`` package.
"""

from .properties import add_property, get_all_properties
from .reservations import get_all_reservations
from .users import add_user, get_user_with_email, get_user_with_id

__all__ = [
    "add_property",
    "add_user",
    "get_all_properties",
    "get_all_reservations",
    "get_user_with_email",
    "get_user_with_id",
]
