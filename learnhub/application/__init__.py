"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains the use cases available to external actors.

This layer contains:
- Use cases: one class per bounded context, one method per operation
- Protocols: ports for repositories and the event publisher
- Unit of Work: transaction boundary that dispatches domain events
"""
