"""Common value objects shared across all domain modules."""

from .ids import (
    ChallengeId,
    CourseId,
    EnrollmentId,
    GuideId,
    GuideLikeId,
    LearningProgressId,
    PageId,
    TopicId,
    UserId,
)

__all__ = [
    "ChallengeId",
    "CourseId",
    "EnrollmentId",
    "GuideId",
    "GuideLikeId",
    "LearningProgressId",
    "PageId",
    "TopicId",
    "UserId",
]
