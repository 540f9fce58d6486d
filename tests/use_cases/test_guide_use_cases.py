"""Tests for guide lifecycle, queries, likes and challenges."""

from collections.abc import Callable
from uuid import uuid4

import pytest
from conftest import RecordingEventPublisher
from dependency_injector import providers

from learnhub.application.common.pagination import Pagination
from learnhub.core import Container
from learnhub.domain.common.exceptions import (
    AuthenticationRequiredError,
    AuthorizationError,
    BusinessRuleViolationError,
    ValidationError,
)
from learnhub.domain.common.value_objects.ids import UserId
from learnhub.domain.guides.entities.guide import Guide, GuideStatus
from learnhub.domain.guides.exceptions import (
    ChallengeNotFoundError,
    GuideAlreadyLikedError,
    GuideNotFoundError,
    GuideNotLikedError,
    InvalidGuideStatusTransitionError,
)
from learnhub.domain.identity.caller import Caller

TOPIC = "guides.challenge.added.v1"


class TestGuideManagement:
    def test_create_guide_defaults_author_to_caller(
        self, container: Container, teacher: Caller
    ) -> None:
        guide = container.guide_management_use_case().create_guide(
            teacher, title="Intro to Python", description="Basics"
        )

        reloaded = container.guide_query_use_case().get_guide(teacher, guide.id.value)
        assert reloaded.author_ids == {UserId("teacher-1")}
        assert reloaded.status == GuideStatus.DRAFT
        assert reloaded.pages_count == 0
        assert reloaded.likes_count == 0
        assert reloaded.description == "Basics"

    def test_students_cannot_create_guides(self, container: Container, student: Caller) -> None:
        with pytest.raises(AuthorizationError):
            container.guide_management_use_case().create_guide(student, title="Mine")

    def test_anonymous_cannot_create_guides(
        self, container: Container, anonymous: Caller
    ) -> None:
        with pytest.raises(AuthenticationRequiredError):
            container.guide_management_use_case().create_guide(anonymous, title="Mine")

    def test_update_guide_leaves_missing_fields_untouched(
        self, container: Container, teacher: Caller
    ) -> None:
        use_case = container.guide_management_use_case()
        guide = use_case.create_guide(teacher, title="Intro", description="Basics")

        use_case.update_guide(teacher, guide.id.value, title="Intro, revised")

        reloaded = container.guide_query_use_case().get_guide(teacher, guide.id.value)
        assert reloaded.title == "Intro, revised"
        assert reloaded.description == "Basics"

    def test_update_guide_rejects_blank_title(
        self, container: Container, teacher: Caller
    ) -> None:
        use_case = container.guide_management_use_case()
        guide = use_case.create_guide(teacher, title="Intro")

        with pytest.raises(ValidationError):
            use_case.update_guide(teacher, guide.id.value, title="   ")

    def test_admin_can_update_any_guide(
        self, container: Container, teacher: Caller, admin: Caller
    ) -> None:
        use_case = container.guide_management_use_case()
        guide = use_case.create_guide(teacher, title="Intro")

        updated = use_case.update_guide(admin, guide.id.value, cover_image="cover.png")

        assert updated.cover_image == "cover.png"

    def test_status_transitions(self, container: Container, teacher: Caller) -> None:
        use_case = container.guide_management_use_case()
        guide = use_case.create_guide(teacher, title="Intro")

        assert use_case.update_status(teacher, guide.id.value, "PUBLISHED").is_published()
        drafted = use_case.update_status(teacher, guide.id.value, "DRAFT")
        assert drafted.status == GuideStatus.DRAFT
        with pytest.raises(InvalidGuideStatusTransitionError):
            use_case.update_status(teacher, guide.id.value, GuideStatus.ASSOCIATED_WITH_COURSE)

    def test_unknown_status_is_invalid(self, container: Container, teacher: Caller) -> None:
        use_case = container.guide_management_use_case()
        guide = use_case.create_guide(teacher, title="Intro")

        with pytest.raises(ValidationError):
            use_case.update_status(teacher, guide.id.value, "ARCHIVED")

    def test_update_authors(self, container: Container, teacher: Caller) -> None:
        use_case = container.guide_management_use_case()
        guide = use_case.create_guide(teacher, title="Intro")

        updated = use_case.update_authors(teacher, guide.id.value, ["teacher-1", "teacher-2"])
        assert updated.author_ids == {UserId("teacher-1"), UserId("teacher-2")}

        with pytest.raises(ValidationError):
            use_case.update_authors(teacher, guide.id.value, [])
        with pytest.raises(ValidationError):
            use_case.update_authors(teacher, guide.id.value, [f"t-{i}" for i in range(6)])

    def test_delete_guide_hides_it(self, container: Container, teacher: Caller) -> None:
        use_case = container.guide_management_use_case()
        guide = use_case.create_guide(teacher, title="Intro")

        use_case.delete_guide(teacher, guide.id.value)

        with pytest.raises(GuideNotFoundError):
            container.guide_query_use_case().get_guide(teacher, guide.id.value)
        with pytest.raises(GuideNotFoundError):
            use_case.update_guide(teacher, guide.id.value, title="Back")

    def test_delete_guide_in_course_removes_it_from_course(
        self, container: Container, teacher: Caller
    ) -> None:
        guide = container.guide_management_use_case().create_guide(teacher, title="Intro")
        course = container.course_management_use_case().create_course(teacher, title="Track")
        container.course_management_use_case().associate_guide(
            teacher, course.id.value, guide.id.value
        )

        container.guide_management_use_case().delete_guide(teacher, guide.id.value)

        reloaded = container.course_query_use_case().get_course(teacher, course.id.value)
        assert reloaded.guide_ids == []


class TestGuideQueries:
    def test_drafts_are_hidden_from_other_users(
        self, container: Container, teacher: Caller, student: Caller, anonymous: Caller
    ) -> None:
        guide = container.guide_management_use_case().create_guide(teacher, title="Draft")
        queries = container.guide_query_use_case()

        for caller in (student, anonymous):
            with pytest.raises(GuideNotFoundError):
                queries.get_guide(caller, guide.id.value)
            with pytest.raises(GuideNotFoundError):
                queries.list_pages(caller, guide.id.value)

    def test_search_applies_visibility(
        self,
        container: Container,
        teacher: Caller,
        other_teacher: Caller,
        admin: Caller,
        anonymous: Caller,
        make_published_guide: Callable[..., Guide],
    ) -> None:
        published = make_published_guide(title="Published guide")
        container.guide_management_use_case().create_guide(teacher, title="Teacher draft")
        container.guide_management_use_case().create_guide(other_teacher, title="Other draft")
        queries = container.guide_query_use_case()

        anonymous_titles = {g.title for g in queries.search_guides(anonymous).items}
        teacher_titles = {g.title for g in queries.search_guides(teacher).items}
        admin_result = queries.search_guides(admin)

        assert anonymous_titles == {published.title}
        assert teacher_titles == {"Published guide", "Teacher draft"}
        assert admin_result.total == 3

    def test_anonymous_cannot_filter_by_draft(
        self, container: Container, anonymous: Caller
    ) -> None:
        with pytest.raises(AuthenticationRequiredError):
            container.guide_query_use_case().search_guides(anonymous, status="DRAFT")

    def test_search_filters(
        self,
        container: Container,
        teacher: Caller,
        student: Caller,
        make_published_guide: Callable[..., Guide],
    ) -> None:
        python = make_published_guide(title="Intro to Python")
        make_published_guide(title="Rust ownership")
        container.guide_like_use_case().like_guide(student, python.id.value)
        queries = container.guide_query_use_case()

        by_title = queries.search_guides(student, title="python")
        by_likes = queries.search_guides(student, min_likes=1)
        by_author = queries.search_guides(student, author_ids=["teacher-2"])

        assert [g.title for g in by_title.items] == ["Intro to Python"]
        assert [g.id for g in by_likes.items] == [python.id]
        assert by_author.total == 0

    def test_search_by_topic(self, container: Container, teacher: Caller) -> None:
        topic = container.topic_use_case().create_topic(teacher, "Python")
        use_case = container.guide_management_use_case()
        tagged = use_case.create_guide(teacher, title="Tagged", topic_ids=[topic.id.value])
        use_case.create_guide(teacher, title="Untagged")

        result = container.guide_query_use_case().search_guides(
            teacher, topic_ids=[topic.id.value]
        )

        assert [g.id for g in result.items] == [tagged.id]

    def test_title_search_escapes_wildcards(
        self, container: Container, teacher: Caller, make_published_guide: Callable[..., Guide]
    ) -> None:
        make_published_guide(title="100% Python")
        make_published_guide(title="1000 exercises")

        result = container.guide_query_use_case().search_guides(teacher, title="100%")

        assert [g.title for g in result.items] == ["100% Python"]

    def test_negative_min_likes_is_invalid(self, container: Container, teacher: Caller) -> None:
        with pytest.raises(ValidationError):
            container.guide_query_use_case().search_guides(teacher, min_likes=-1)

    def test_search_is_paginated(
        self, container: Container, teacher: Caller, make_published_guide: Callable[..., Guide]
    ) -> None:
        for i in range(5):
            make_published_guide(title=f"Guide {i}")

        page = container.guide_query_use_case().search_guides(
            teacher, pagination=Pagination(page=2, page_size=2)
        )

        assert page.total == 5
        assert len(page.items) == 2

    def test_guides_by_teacher_lists_published_only(
        self,
        container: Container,
        teacher: Caller,
        make_published_guide: Callable[..., Guide],
    ) -> None:
        published = make_published_guide(title="Public")
        container.guide_management_use_case().create_guide(teacher, title="Private")

        result = container.guide_query_use_case().get_guides_by_teacher("teacher-1")

        assert [g.id for g in result.items] == [published.id]


class TestGuideLikes:
    def test_like_and_unlike(
        self, container: Container, student: Caller, make_published_guide: Callable[..., Guide]
    ) -> None:
        guide = make_published_guide()
        likes = container.guide_like_use_case()

        liked = likes.like_guide(student, guide.id.value)
        assert liked.likes_count == 1
        assert likes.has_liked(student, guide.id.value)
        assert likes.liked_guide_ids(student, [guide.id.value, uuid4()]) == {guide.id}

        unliked = likes.unlike_guide(student, guide.id.value)
        assert unliked.likes_count == 0
        assert not likes.has_liked(student, guide.id.value)

    def test_duplicate_like_conflicts(
        self, container: Container, student: Caller, make_published_guide: Callable[..., Guide]
    ) -> None:
        guide = make_published_guide()
        likes = container.guide_like_use_case()
        likes.like_guide(student, guide.id.value)

        with pytest.raises(GuideAlreadyLikedError):
            likes.like_guide(student, guide.id.value)

        reloaded = container.guide_query_use_case().get_guide(student, guide.id.value)
        assert reloaded.likes_count == 1

    def test_unlike_without_like_conflicts(
        self, container: Container, student: Caller, make_published_guide: Callable[..., Guide]
    ) -> None:
        guide = make_published_guide()

        with pytest.raises(GuideNotLikedError):
            container.guide_like_use_case().unlike_guide(student, guide.id.value)

    def test_anonymous_callers_cannot_like(
        self,
        container: Container,
        anonymous: Caller,
        make_published_guide: Callable[..., Guide],
    ) -> None:
        guide = make_published_guide()
        likes = container.guide_like_use_case()

        with pytest.raises(AuthenticationRequiredError):
            likes.like_guide(anonymous, guide.id.value)
        assert not likes.has_liked(anonymous, guide.id.value)
        assert likes.liked_guide_ids(anonymous, [guide.id.value]) == set()

    def test_cannot_like_invisible_guide(
        self, container: Container, teacher: Caller, student: Caller
    ) -> None:
        guide = container.guide_management_use_case().create_guide(teacher, title="Draft")

        with pytest.raises(GuideNotFoundError):
            container.guide_like_use_case().like_guide(student, guide.id.value)


class TestGuideChallenges:
    def test_adding_challenge_publishes_event_after_commit(
        self, container: Container, teacher: Caller, published_events: RecordingEventPublisher
    ) -> None:
        guide = container.guide_management_use_case().create_guide(teacher, title="Intro")
        challenge_id = uuid4()

        updated = container.guide_challenge_use_case().add_challenge(
            teacher, guide.id.value, challenge_id
        )

        assert {c.value for c in updated.related_challenge_ids} == {challenge_id}
        published = published_events.published
        assert len(published) == 1
        topic, key, payload = published[0]
        assert topic == TOPIC
        assert key == str(guide.id)
        assert payload["challenge_id"] == str(challenge_id)
        assert payload["event_type"] == "GuideChallengeAdded"

    def test_duplicate_challenge_is_rejected_without_event(
        self, container: Container, teacher: Caller, published_events: RecordingEventPublisher
    ) -> None:
        guide = container.guide_management_use_case().create_guide(teacher, title="Intro")
        challenges = container.guide_challenge_use_case()
        challenge_id = uuid4()
        challenges.add_challenge(teacher, guide.id.value, challenge_id)

        with pytest.raises(BusinessRuleViolationError):
            challenges.add_challenge(teacher, guide.id.value, challenge_id)

        assert len(published_events.published) == 1

    def test_remove_challenge(self, container: Container, teacher: Caller) -> None:
        guide = container.guide_management_use_case().create_guide(teacher, title="Intro")
        challenges = container.guide_challenge_use_case()
        challenge_id = uuid4()
        challenges.add_challenge(teacher, guide.id.value, challenge_id)

        updated = challenges.remove_challenge(teacher, guide.id.value, challenge_id)

        assert updated.related_challenge_ids == set()
        with pytest.raises(ChallengeNotFoundError):
            challenges.remove_challenge(teacher, guide.id.value, challenge_id)

    def test_publisher_failure_does_not_fail_the_operation(
        self, container: Container, teacher: Caller
    ) -> None:
        class BrokenPublisher:
            def publish(self, topic: str, key: str, event: dict[str, object]) -> None:
                raise ConnectionError("broker down")

        container.event_publisher.override(providers.Object(BrokenPublisher()))
        guide = container.guide_management_use_case().create_guide(teacher, title="Intro")
        challenge_id = uuid4()

        container.guide_challenge_use_case().add_challenge(teacher, guide.id.value, challenge_id)

        reloaded = container.guide_query_use_case().get_guide(teacher, guide.id.value)
        assert {c.value for c in reloaded.related_challenge_ids} == {challenge_id}
