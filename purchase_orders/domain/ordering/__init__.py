"""Ordering bounded context: purchase orders, their lines and events."""
