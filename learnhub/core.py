from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from learnhub.application.courses.use_cases.course_management_use_case import (
    CourseManagementUseCase,
)
from learnhub.application.courses.use_cases.course_query_use_case import CourseQueryUseCase
from learnhub.application.enrollments.use_cases.enrollment_use_case import EnrollmentUseCase
from learnhub.application.guides.use_cases.guide_challenge_use_case import GuideChallengeUseCase
from learnhub.application.guides.use_cases.guide_like_use_case import GuideLikeUseCase
from learnhub.application.guides.use_cases.guide_management_use_case import (
    GuideManagementUseCase,
)
from learnhub.application.guides.use_cases.guide_query_use_case import GuideQueryUseCase
from learnhub.application.guides.use_cases.page_use_case import PageUseCase
from learnhub.application.progress.use_cases.learning_progress_use_case import (
    LearningProgressUseCase,
)
from learnhub.application.topics.use_cases.topic_use_case import TopicUseCase
from learnhub.config import get_settings
from learnhub.infrastructure.common.unit_of_work import SqlAlchemyUnitOfWork
from learnhub.infrastructure.courses.repositories import CourseRepository
from learnhub.infrastructure.enrollments.repositories import EnrollmentRepository
from learnhub.infrastructure.guides.repositories import GuideLikeRepository, GuideRepository
from learnhub.infrastructure.messaging.dispatcher import DomainEventDispatcher
from learnhub.infrastructure.messaging.publishers import build_event_publisher
from learnhub.infrastructure.progress.repositories import LearningProgressRepository
from learnhub.infrastructure.topics.repositories import TopicRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)

    # Messaging
    event_publisher = providers.Singleton(
        build_event_publisher,
        broker_url=settings.provided.EVENT_BROKER_URL,
        timeout_seconds=settings.provided.EVENT_BROKER_TIMEOUT_SECONDS,
    )
    event_dispatcher = providers.Factory(
        DomainEventDispatcher,
        publisher=event_publisher,
        guide_challenge_added_topic=settings.provided.GUIDE_CHALLENGE_ADDED_TOPIC,
    )

    uow = providers.Factory(
        SqlAlchemyUnitOfWork,
        db=db,
        event_handlers=providers.List(event_dispatcher),
    )

    # Repositories
    topic_repository = providers.Factory(TopicRepository, db=db)
    guide_repository = providers.Factory(GuideRepository, db=db)
    guide_like_repository = providers.Factory(GuideLikeRepository, db=db)
    course_repository = providers.Factory(CourseRepository, db=db)
    enrollment_repository = providers.Factory(EnrollmentRepository, db=db)
    learning_progress_repository = providers.Factory(LearningProgressRepository, db=db)

    # Topics
    topic_use_case = providers.Factory(
        TopicUseCase,
        topic_repository=topic_repository,
        uow=uow,
    )

    # Guides
    guide_management_use_case = providers.Factory(
        GuideManagementUseCase,
        guide_repository=guide_repository,
        course_repository=course_repository,
        topic_use_case=topic_use_case,
        uow=uow,
        max_authors=settings.provided.MAX_AUTHORS_PER_GUIDE,
    )
    guide_query_use_case = providers.Factory(
        GuideQueryUseCase,
        guide_repository=guide_repository,
    )
    page_use_case = providers.Factory(
        PageUseCase,
        guide_repository=guide_repository,
        uow=uow,
    )
    guide_like_use_case = providers.Factory(
        GuideLikeUseCase,
        guide_repository=guide_repository,
        guide_like_repository=guide_like_repository,
        uow=uow,
    )
    guide_challenge_use_case = providers.Factory(
        GuideChallengeUseCase,
        guide_repository=guide_repository,
        uow=uow,
    )

    # Courses
    course_management_use_case = providers.Factory(
        CourseManagementUseCase,
        course_repository=course_repository,
        guide_repository=guide_repository,
        topic_use_case=topic_use_case,
        uow=uow,
        max_authors=settings.provided.MAX_AUTHORS_PER_COURSE,
    )
    course_query_use_case = providers.Factory(
        CourseQueryUseCase,
        course_repository=course_repository,
        guide_repository=guide_repository,
    )

    # Enrollments and progress
    enrollment_use_case = providers.Factory(
        EnrollmentUseCase,
        enrollment_repository=enrollment_repository,
        course_repository=course_repository,
        uow=uow,
    )
    learning_progress_use_case = providers.Factory(
        LearningProgressUseCase,
        progress_repository=learning_progress_repository,
        guide_repository=guide_repository,
        course_repository=course_repository,
        uow=uow,
    )


# Initialize container
container = Container()
