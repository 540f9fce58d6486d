"""
Course details aggregation domain service.

Provides the dataclass returned by the course detail view and the rule for
assembling it from a course and its guides.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from learnhub.domain.courses.entities.course import Course
from learnhub.domain.guides.entities.guide import Guide


@dataclass
class CourseDetails:
    """A course with its guides in course order."""

    course: Course
    guides: list[Guide] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return sum(guide.pages_count for guide in self.guides)

    @property
    def guide_count(self) -> int:
        return len(self.guides)


def aggregate_course_details(course: Course, guides: Iterable[Guide]) -> CourseDetails:
    """Order guides as the course lists them; guides no longer available are skipped."""
    by_id = {guide.id: guide for guide in guides}
    ordered = [by_id[guide_id] for guide_id in course.guide_ids if guide_id in by_id]
    return CourseDetails(course=course, guides=ordered)
