"""Purchase order aggregate with a value-based use case layer."""

__version__ = "0.1.0"
