"""
Rules shared by authored content (guides and courses).

Both aggregates carry a title, an optional description and a set of author
ids bounded by a configurable maximum.
"""

from collections.abc import Iterable

from .exceptions import ValidationError
from .value_objects.ids import UserId

MAX_TITLE_LENGTH = 200


def clean_title(title: str | None) -> str:
    """Trim a title and reject blank or over-long values."""
    cleaned = (title or "").strip()
    if not cleaned:
        raise ValidationError("Title cannot be empty", field="title", value=title)
    if len(cleaned) > MAX_TITLE_LENGTH:
        raise ValidationError(
            f"Title cannot exceed {MAX_TITLE_LENGTH} characters", field="title"
        )
    return cleaned


def check_length(value: str | None, max_length: int, field: str) -> None:
    if value is not None and len(value) > max_length:
        raise ValidationError(f"{field} cannot exceed {max_length} characters", field=field)


def validate_author_ids(
    author_ids: Iterable[UserId], max_authors: int | None = None
) -> set[UserId]:
    """
    Validate an author set.

    Args:
        author_ids: Candidate authors
        max_authors: Upper bound, or None to skip the bound (reconstitution)

    Returns:
        The authors as a set

    Raises:
        ValidationError: If the set is empty or larger than max_authors
    """
    authors = set(author_ids)
    if not authors:
        raise ValidationError("At least one author is required", field="author_ids")
    if max_authors is not None and len(authors) > max_authors:
        raise ValidationError(
            f"Cannot have more than {max_authors} authors",
            field="author_ids",
            value=len(authors),
        )
    return authors
