"""Mapper for Guide ORM ↔ Domain conversion, including pages and association rows."""

from learnhub.domain.common.value_objects.ids import (
    ChallengeId,
    CourseId,
    GuideId,
    PageId,
    TopicId,
    UserId,
)
from learnhub.domain.guides.entities.guide import Guide, GuideStatus
from learnhub.domain.guides.entities.page import Page
from learnhub.infrastructure.common.mapping import ensure_utc, ensure_utc_required, sync_rows
from learnhub.models import Guide as GuideORM
from learnhub.models import GuideAuthor as GuideAuthorORM
from learnhub.models import GuideChallenge as GuideChallengeORM
from learnhub.models import GuideTopic as GuideTopicORM
from learnhub.models import Page as PageORM


class PageMapper:
    """Mapper for Page ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: PageORM) -> Page:
        return Page.create_with_id(
            id=PageId(orm_model.id),
            guide_id=GuideId(orm_model.guide_id),
            content=orm_model.content,
            order_number=orm_model.order_number,
            created_at=ensure_utc_required(orm_model.created_at),
            updated_at=ensure_utc_required(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Page, orm_model: PageORM | None = None) -> PageORM:
        if orm_model:
            orm_model.content = domain_entity.content
            orm_model.order_number = domain_entity.order_number
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        return PageORM(
            id=domain_entity.id.value,
            guide_id=domain_entity.guide_id.value,
            content=domain_entity.content,
            order_number=domain_entity.order_number,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )


class GuideMapper:
    """Mapper for Guide ORM ↔ Domain conversion."""

    def __init__(self) -> None:
        self.page_mapper = PageMapper()

    def to_domain(self, orm_model: GuideORM) -> Guide:
        return Guide.create_with_id(
            id=GuideId(orm_model.id),
            title=orm_model.title,
            description=orm_model.description,
            cover_image=orm_model.cover_image,
            status=GuideStatus(orm_model.status),
            author_ids=[UserId(author.user_id) for author in orm_model.authors],
            topic_ids=[TopicId(topic.topic_id) for topic in orm_model.topics],
            pages=[self.page_mapper.to_domain(page) for page in orm_model.pages],
            likes_count=orm_model.likes_count,
            course_id=CourseId(orm_model.course_id) if orm_model.course_id else None,
            related_challenge_ids=[
                ChallengeId(challenge.challenge_id) for challenge in orm_model.challenges
            ],
            created_at=ensure_utc_required(orm_model.created_at),
            updated_at=ensure_utc_required(orm_model.updated_at),
            deleted_at=ensure_utc(orm_model.deleted_at),
        )

    def to_orm(self, domain_entity: Guide, orm_model: GuideORM | None = None) -> GuideORM:
        """
        Convert domain entity to ORM model.

        Child collections are synchronised row by row so unchanged pages and
        association rows keep their identity.
        """
        guide_id = domain_entity.id.value
        if orm_model is None:
            orm_model = GuideORM(id=guide_id, created_at=domain_entity.created_at)

        orm_model.title = domain_entity.title
        orm_model.description = domain_entity.description
        orm_model.cover_image = domain_entity.cover_image
        orm_model.status = domain_entity.status.value
        orm_model.likes_count = domain_entity.likes_count
        orm_model.course_id = domain_entity.course_id.value if domain_entity.course_id else None
        orm_model.updated_at = domain_entity.updated_at
        orm_model.deleted_at = domain_entity.deleted_at

        sync_rows(
            orm_model.authors,
            sorted(author.value for author in domain_entity.author_ids),
            key=lambda row: row.user_id,
            build=lambda user_id: GuideAuthorORM(guide_id=guide_id, user_id=user_id),
        )
        sync_rows(
            orm_model.topics,
            sorted(topic.value for topic in domain_entity.topic_ids),
            key=lambda row: row.topic_id,
            build=lambda topic_id: GuideTopicORM(guide_id=guide_id, topic_id=topic_id),
        )
        sync_rows(
            orm_model.challenges,
            sorted(challenge.value for challenge in domain_entity.related_challenge_ids),
            key=lambda row: row.challenge_id,
            build=lambda challenge_id: GuideChallengeORM(
                guide_id=guide_id, challenge_id=challenge_id
            ),
        )
        self._sync_pages(domain_entity, orm_model)
        return orm_model

    def _sync_pages(self, domain_entity: Guide, orm_model: GuideORM) -> None:
        pages_by_id = {page.id.value: page for page in domain_entity.pages}
        sync_rows(
            orm_model.pages,
            [page.id.value for page in domain_entity.pages],
            key=lambda row: row.id,
            build=lambda page_id: self.page_mapper.to_orm(pages_by_id[page_id]),
        )
        for page_orm in orm_model.pages:
            self.page_mapper.to_orm(pages_by_id[page_orm.id], page_orm)
