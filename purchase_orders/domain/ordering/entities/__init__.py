"""Entities of the ordering module."""

from .order import Order

__all__ = ["Order"]
