"""Property listings."""

from .repository import add_property, get_all_properties

__all__ = ["add_property", "get_all_properties"]
