"""Guest reservation lookups."""

from .repository import get_all_reservations

__all__ = ["get_all_reservations"]
