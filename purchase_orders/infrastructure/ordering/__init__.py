"""Adapters for the ordering ports plus the HTTP surface."""
