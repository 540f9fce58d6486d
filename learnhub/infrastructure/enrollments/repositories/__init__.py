from .enrollment_repository import EnrollmentRepository

__all__ = ["EnrollmentRepository"]
