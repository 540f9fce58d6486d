"""
Application common module.

Contains shared building blocks for the application layer:
- Pagination / PaginatedResult: paging of list queries
- UnitOfWork: transaction boundary with post-commit event dispatch
- EventPublisherProtocol: port for the message broker
"""

from .event_publisher import EventPublisherProtocol
from .pagination import PaginatedResult, Pagination
from .unit_of_work import EventHandler, UnitOfWork

__all__ = [
    "EventHandler",
    "EventPublisherProtocol",
    "PaginatedResult",
    "Pagination",
    "UnitOfWork",
]
