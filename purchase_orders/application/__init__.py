"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains the use cases available to external actors.

This layer contains:
- Commands: Input of the write operations
- Use Cases: Orchestrate the aggregate, pricing, persistence and events
- Result / AppError: The value-based outcome channel of every use case
- Protocols: Interfaces for repositories, pricing and the event bus
"""
