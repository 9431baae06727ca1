"""Query Builder package for the property listing statement."""

from .builder import DEFAULT_LIMIT, build_property_query, check_limit

__all__ = ["DEFAULT_LIMIT", "build_property_query", "check_limit"]
