"""Mapper for Course ORM ↔ Domain conversion."""

from learnhub.domain.common.value_objects.ids import CourseId, GuideId, TopicId, UserId
from learnhub.domain.courses.entities.course import Course, CourseStatus, DifficultyLevel
from learnhub.infrastructure.common.mapping import ensure_utc, ensure_utc_required, sync_rows
from learnhub.models import Course as CourseORM
from learnhub.models import CourseAuthor as CourseAuthorORM
from learnhub.models import CourseGuide as CourseGuideORM
from learnhub.models import CourseTopic as CourseTopicORM


class CourseMapper:
    """Mapper for Course ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CourseORM) -> Course:
        return Course.create_with_id(
            id=CourseId(orm_model.id),
            title=orm_model.title,
            description=orm_model.description,
            cover_image=orm_model.cover_image,
            status=CourseStatus(orm_model.status),
            author_ids=[UserId(author.user_id) for author in orm_model.authors],
            difficulty_level=DifficultyLevel(orm_model.difficulty_level),
            topic_ids=[TopicId(topic.topic_id) for topic in orm_model.topics],
            guide_ids=[
                GuideId(row.guide_id)
                for row in sorted(orm_model.guides, key=lambda row: row.position)
            ],
            likes_count=orm_model.likes_count,
            created_at=ensure_utc_required(orm_model.created_at),
            updated_at=ensure_utc_required(orm_model.updated_at),
            deleted_at=ensure_utc(orm_model.deleted_at),
        )

    def to_orm(self, domain_entity: Course, orm_model: CourseORM | None = None) -> CourseORM:
        """
        Convert domain entity to ORM model.

        The position of each course_guides row follows the order of guide_ids.
        """
        course_id = domain_entity.id.value
        if orm_model is None:
            orm_model = CourseORM(id=course_id, created_at=domain_entity.created_at)

        orm_model.title = domain_entity.title
        orm_model.description = domain_entity.description
        orm_model.cover_image = domain_entity.cover_image
        orm_model.status = domain_entity.status.value
        orm_model.difficulty_level = domain_entity.difficulty_level.value
        orm_model.likes_count = domain_entity.likes_count
        orm_model.updated_at = domain_entity.updated_at
        orm_model.deleted_at = domain_entity.deleted_at

        sync_rows(
            orm_model.authors,
            sorted(author.value for author in domain_entity.author_ids),
            key=lambda row: row.user_id,
            build=lambda user_id: CourseAuthorORM(course_id=course_id, user_id=user_id),
        )
        sync_rows(
            orm_model.topics,
            sorted(topic.value for topic in domain_entity.topic_ids),
            key=lambda row: row.topic_id,
            build=lambda topic_id: CourseTopicORM(course_id=course_id, topic_id=topic_id),
        )

        positions = {
            guide_id.value: index for index, guide_id in enumerate(domain_entity.guide_ids)
        }
        sync_rows(
            orm_model.guides,
            list(positions),
            key=lambda row: row.guide_id,
            build=lambda guide_id: CourseGuideORM(
                course_id=course_id, guide_id=guide_id, position=positions[guide_id]
            ),
        )
        for row in orm_model.guides:
            row.position = positions[row.guide_id]
        return orm_model
