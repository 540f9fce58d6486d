"""Tests for page ordering within a guide."""

from collections.abc import Callable

import pytest

from learnhub.core import Container
from learnhub.domain.common.exceptions import AuthorizationError, ValidationError
from learnhub.domain.guides.entities.guide import Guide
from learnhub.domain.guides.exceptions import DuplicatePageOrderError, PageNotFoundError
from learnhub.domain.identity.caller import Caller


class TestPageUseCase:
    def test_pages_count_follows_pages(self, container: Container, teacher: Caller) -> None:
        guide = container.guide_management_use_case().create_guide(teacher, title="Intro")
        pages = container.page_use_case()

        pages.create_page(teacher, guide.id.value, "Second", 2)
        pages.create_page(teacher, guide.id.value, "First", 1)

        reloaded = container.guide_query_use_case().get_guide(teacher, guide.id.value)
        assert reloaded.pages_count == 2
        assert [page.content for page in reloaded.pages] == ["First", "Second"]

    def test_duplicate_order_conflicts(self, container: Container, teacher: Caller) -> None:
        guide = container.guide_management_use_case().create_guide(teacher, title="Intro")
        pages = container.page_use_case()
        pages.create_page(teacher, guide.id.value, "First", 1)

        with pytest.raises(DuplicatePageOrderError):
            pages.create_page(teacher, guide.id.value, "Again", 1)

        reloaded = container.guide_query_use_case().get_guide(teacher, guide.id.value)
        assert reloaded.pages_count == 1

    def test_invalid_page_input(self, container: Container, teacher: Caller) -> None:
        guide = container.guide_management_use_case().create_guide(teacher, title="Intro")
        pages = container.page_use_case()

        with pytest.raises(ValidationError):
            pages.create_page(teacher, guide.id.value, "Content", 0)
        with pytest.raises(ValidationError):
            pages.create_page(teacher, guide.id.value, "  ", 1)

    def test_delete_page_preserves_gaps(self, container: Container, teacher: Caller) -> None:
        guide = container.guide_management_use_case().create_guide(teacher, title="Intro")
        pages = container.page_use_case()
        pages.create_page(teacher, guide.id.value, "One", 1)
        second = pages.create_page(teacher, guide.id.value, "Two", 2)
        pages.create_page(teacher, guide.id.value, "Three", 3)

        pages.delete_page(teacher, guide.id.value, second.id.value)

        remaining = container.guide_query_use_case().list_pages(teacher, guide.id.value)
        assert [page.order_number for page in remaining] == [1, 3]
        reloaded = container.guide_query_use_case().get_guide(teacher, guide.id.value)
        assert reloaded.pages_count == 2

    def test_update_page_moves_and_edits(self, container: Container, teacher: Caller) -> None:
        guide = container.guide_management_use_case().create_guide(teacher, title="Intro")
        pages = container.page_use_case()
        first = pages.create_page(teacher, guide.id.value, "One", 1)
        pages.create_page(teacher, guide.id.value, "Two", 2)

        pages.update_page(
            teacher, guide.id.value, first.id.value, content="Last", order_number=4
        )

        listed = container.guide_query_use_case().list_pages(teacher, guide.id.value)
        assert [(page.order_number, page.content) for page in listed] == [
            (2, "Two"),
            (4, "Last"),
        ]

    def test_move_onto_used_order_conflicts(self, container: Container, teacher: Caller) -> None:
        guide = container.guide_management_use_case().create_guide(teacher, title="Intro")
        pages = container.page_use_case()
        first = pages.create_page(teacher, guide.id.value, "One", 1)
        pages.create_page(teacher, guide.id.value, "Two", 2)

        with pytest.raises(DuplicatePageOrderError):
            pages.update_page(teacher, guide.id.value, first.id.value, order_number=2)

    def test_only_authors_manage_pages(
        self, container: Container, teacher: Caller, other_teacher: Caller
    ) -> None:
        guide = container.guide_management_use_case().create_guide(teacher, title="Intro")

        with pytest.raises(AuthorizationError):
            container.page_use_case().create_page(other_teacher, guide.id.value, "Mine", 1)

    def test_page_of_another_guide_is_not_found(
        self, container: Container, teacher: Caller, make_published_guide: Callable[..., Guide]
    ) -> None:
        first = make_published_guide(title="First", pages=1)
        second = make_published_guide(title="Second", pages=1)
        queries = container.guide_query_use_case()
        page_of_second = queries.list_pages(teacher, second.id.value)[0]

        found = queries.get_page(teacher, second.id.value, page_of_second.id.value)
        assert found == page_of_second
        with pytest.raises(PageNotFoundError):
            queries.get_page(teacher, first.id.value, page_of_second.id.value)
