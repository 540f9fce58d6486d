from .enrollment import Enrollment, EnrollmentStatus

__all__ = ["Enrollment", "EnrollmentStatus"]
