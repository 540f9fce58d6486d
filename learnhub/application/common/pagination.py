"""
Pagination types for queries.

Provides standardized pagination for list queries.

Example:
    def search_guides(self, caller: Caller, pagination: Pagination) -> PaginatedResult[Guide]:
        items, total = self.guide_repository.search(criteria, pagination)
        return PaginatedResult(items=items, total=total, pagination=pagination)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from learnhub.domain.common.exceptions import ValidationError

T = TypeVar("T")

# Maximum allowed page size
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Pagination:
    """
    Pagination parameters for list queries.

    Attributes:
        page: Current page number (1-indexed)
        page_size: Number of items per page
    """

    page: int = 1
    page_size: int = 20

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError("Page must be at least 1", field="page", value=self.page)
        if self.page_size < 1:
            raise ValidationError(
                "Page size must be at least 1", field="page_size", value=self.page_size
            )
        if self.page_size > MAX_PAGE_SIZE:
            raise ValidationError(
                f"Page size cannot exceed {MAX_PAGE_SIZE}", field="page_size", value=self.page_size
            )

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Return the limit for database queries."""
        return self.page_size


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    Paginated result containing items and metadata.

    Attributes:
        items: List of items for the current page
        total: Total number of items across all pages
        pagination: The pagination parameters used
    """

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def page(self) -> int:
        return self.pagination.page

    @property
    def page_size(self) -> int:
        return self.pagination.page_size

    @property
    def total_pages(self) -> int:
        """Total number of pages."""
        if self.total == 0:
            return 0
        return (self.total + self.pagination.page_size - 1) // self.pagination.page_size

    @property
    def has_next(self) -> bool:
        return self.pagination.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.pagination.page > 1
