"""Transports that carry pokes and scries to a ship."""

from .base import NOT_FOUND_STATUS, Transport, is_not_found
from .http import UrbitClient, UrbitHttpError

__all__ = [
    "NOT_FOUND_STATUS",
    "Transport",
    "UrbitClient",
    "UrbitHttpError",
    "is_not_found",
]
