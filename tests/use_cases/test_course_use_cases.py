"""Tests for course lifecycle, guide association and course queries."""

from collections.abc import Callable

import pytest

from learnhub.core import Container
from learnhub.domain.common.exceptions import (
    AuthenticationRequiredError,
    AuthorizationError,
    BusinessRuleViolationError,
    ValidationError,
)
from learnhub.domain.common.value_objects.ids import UserId
from learnhub.domain.courses.entities.course import CourseStatus, DifficultyLevel
from learnhub.domain.courses.exceptions import CourseNotFoundError, GuideNotInCourseError
from learnhub.domain.guides.entities.guide import Guide, GuideStatus
from learnhub.domain.guides.exceptions import GuideNotFoundError
from learnhub.domain.identity.caller import Caller


class TestCourseManagement:
    def test_create_course_always_includes_caller(
        self, container: Container, teacher: Caller
    ) -> None:
        course = container.course_management_use_case().create_course(
            teacher,
            title="Python Track",
            difficulty_level="INTERMEDIATE",
            author_ids=["teacher-2"],
        )

        reloaded = container.course_query_use_case().get_course(teacher, course.id.value)
        assert reloaded.author_ids == {UserId("teacher-1"), UserId("teacher-2")}
        assert reloaded.difficulty_level == DifficultyLevel.INTERMEDIATE
        assert reloaded.status == CourseStatus.DRAFT

    def test_students_cannot_create_courses(
        self, container: Container, student: Caller
    ) -> None:
        with pytest.raises(AuthorizationError):
            container.course_management_use_case().create_course(student, title="Track")

    def test_update_course(self, container: Container, teacher: Caller) -> None:
        use_case = container.course_management_use_case()
        course = use_case.create_course(teacher, title="Track", description="Old")

        use_case.update_course(teacher, course.id.value, difficulty_level="ADVANCED")

        reloaded = container.course_query_use_case().get_course(teacher, course.id.value)
        assert reloaded.difficulty_level == DifficultyLevel.ADVANCED
        assert reloaded.description == "Old"

    def test_only_authors_update_courses(
        self, container: Container, teacher: Caller, other_teacher: Caller
    ) -> None:
        use_case = container.course_management_use_case()
        course = use_case.create_course(teacher, title="Track")

        with pytest.raises(AuthorizationError):
            use_case.update_course(other_teacher, course.id.value, title="Taken")

    def test_update_authors_respects_limit(self, container: Container, teacher: Caller) -> None:
        use_case = container.course_management_use_case()
        course = use_case.create_course(teacher, title="Track")

        with pytest.raises(ValidationError):
            use_case.update_authors(teacher, course.id.value, [f"t-{i}" for i in range(6)])

    def test_publish_course(self, container: Container, teacher: Caller, student: Caller) -> None:
        use_case = container.course_management_use_case()
        course = use_case.create_course(teacher, title="Track")

        with pytest.raises(CourseNotFoundError):
            container.course_query_use_case().get_course(student, course.id.value)

        use_case.update_status(teacher, course.id.value, "PUBLISHED")

        visible = container.course_query_use_case().get_course(student, course.id.value)
        assert visible.is_published()


class TestGuideAssociation:
    def test_associate_guide(
        self, container: Container, teacher: Caller, make_published_guide: Callable[..., Guide]
    ) -> None:
        guide = make_published_guide(pages=2)
        course = container.course_management_use_case().create_course(teacher, title="Track")

        course, guide = container.course_management_use_case().associate_guide(
            teacher, course.id.value, guide.id.value
        )

        assert guide.status == GuideStatus.ASSOCIATED_WITH_COURSE
        assert guide.course_id == course.id
        reloaded_course = container.course_query_use_case().get_course(teacher, course.id.value)
        reloaded_guide = container.guide_query_use_case().get_guide(teacher, guide.id.value)
        assert reloaded_course.guide_ids == [guide.id]
        assert reloaded_guide.course_id == course.id
        assert reloaded_guide.status == GuideStatus.ASSOCIATED_WITH_COURSE

    def test_guides_keep_course_order(self, container: Container, teacher: Caller) -> None:
        guides = container.guide_management_use_case()
        first = guides.create_guide(teacher, title="First")
        second = guides.create_guide(teacher, title="Second")
        courses = container.course_management_use_case()
        course = courses.create_course(teacher, title="Track")

        courses.associate_guide(teacher, course.id.value, second.id.value)
        courses.associate_guide(teacher, course.id.value, first.id.value)

        reloaded = container.course_query_use_case().get_course(teacher, course.id.value)
        assert reloaded.guide_ids == [second.id, first.id]

    def test_cannot_associate_invisible_guide(
        self, container: Container, teacher: Caller, other_teacher: Caller
    ) -> None:
        hidden = container.guide_management_use_case().create_guide(other_teacher, title="Draft")
        course = container.course_management_use_case().create_course(teacher, title="Track")

        with pytest.raises(GuideNotFoundError):
            container.course_management_use_case().associate_guide(
                teacher, course.id.value, hidden.id.value
            )

    def test_disassociate_guide_reverts_to_draft(
        self, container: Container, teacher: Caller, make_published_guide: Callable[..., Guide]
    ) -> None:
        guide = make_published_guide()
        courses = container.course_management_use_case()
        course = courses.create_course(teacher, title="Track")
        courses.associate_guide(teacher, course.id.value, guide.id.value)

        course, guide = courses.disassociate_guide(teacher, course.id.value, guide.id.value)

        assert guide.status == GuideStatus.DRAFT
        assert guide.course_id is None
        assert course.guide_ids == []
        reloaded = container.guide_query_use_case().get_guide(teacher, guide.id.value)
        assert reloaded.status == GuideStatus.DRAFT

    def test_disassociate_guide_not_in_course(
        self, container: Container, teacher: Caller
    ) -> None:
        guide = container.guide_management_use_case().create_guide(teacher, title="Loose")
        course = container.course_management_use_case().create_course(teacher, title="Track")

        with pytest.raises(GuideNotInCourseError):
            container.course_management_use_case().disassociate_guide(
                teacher, course.id.value, guide.id.value
            )

    def test_associated_guide_status_cannot_be_changed_directly(
        self, container: Container, teacher: Caller
    ) -> None:
        guide = container.guide_management_use_case().create_guide(teacher, title="Guide")
        course = container.course_management_use_case().create_course(teacher, title="Track")
        container.course_management_use_case().associate_guide(
            teacher, course.id.value, guide.id.value
        )

        with pytest.raises(BusinessRuleViolationError):
            container.guide_management_use_case().update_status(
                teacher, guide.id.value, "PUBLISHED"
            )

    def test_delete_course_releases_guides(self, container: Container, teacher: Caller) -> None:
        guides = container.guide_management_use_case()
        first = guides.create_guide(teacher, title="First")
        second = guides.create_guide(teacher, title="Second")
        courses = container.course_management_use_case()
        course = courses.create_course(teacher, title="Track")
        courses.associate_guide(teacher, course.id.value, first.id.value)
        courses.associate_guide(teacher, course.id.value, second.id.value)

        courses.delete_course(teacher, course.id.value)

        with pytest.raises(CourseNotFoundError):
            container.course_query_use_case().get_course(teacher, course.id.value)
        for guide in (first, second):
            reloaded = container.guide_query_use_case().get_guide(teacher, guide.id.value)
            assert reloaded.status == GuideStatus.DRAFT
            assert reloaded.course_id is None


class TestCourseQueries:
    def test_course_details_sum_pages(
        self, container: Container, teacher: Caller, make_published_guide: Callable[..., Guide]
    ) -> None:
        first = make_published_guide(title="First", pages=2)
        second = make_published_guide(title="Second", pages=3)
        courses = container.course_management_use_case()
        course = courses.create_course(teacher, title="Track")
        courses.associate_guide(teacher, course.id.value, first.id.value)
        courses.associate_guide(teacher, course.id.value, second.id.value)

        details = container.course_query_use_case().get_course_details(teacher, course.id.value)

        assert [guide.title for guide in details.guides] == ["First", "Second"]
        assert details.total_pages == 5
        assert details.guide_count == 2

    def test_search_courses_applies_visibility(
        self, container: Container, teacher: Caller, anonymous: Caller
    ) -> None:
        courses = container.course_management_use_case()
        published = courses.create_course(teacher, title="Public track")
        courses.update_status(teacher, published.id.value, "PUBLISHED")
        courses.create_course(teacher, title="Draft track")
        queries = container.course_query_use_case()

        assert [c.id for c in queries.search_courses(anonymous).items] == [published.id]
        assert queries.search_courses(teacher).total == 2
        assert queries.search_courses(teacher, title="draft").total == 1
        with pytest.raises(AuthenticationRequiredError):
            queries.search_courses(anonymous, status="DRAFT")
