"""Enrollments module domain layer."""

from learnhub.domain.enrollments.entities import Enrollment, EnrollmentStatus
from learnhub.domain.enrollments.exceptions import (
    DuplicateEnrollmentError,
    EnrollmentNotFoundError,
)

__all__ = [
    "DuplicateEnrollmentError",
    "Enrollment",
    "EnrollmentNotFoundError",
    "EnrollmentStatus",
]
