"""
Infrastructure layer.

The infrastructure layer contains implementations of ports defined
in the application layer. It handles all external concerns:

- Persistence (in-memory store, SQLAlchemy)
- Pricing catalog and event bus adapters
- Web framework (FastAPI router)
- Dependency injection container

This layer depends on domain and application layers,
but they do not depend on it.
"""
