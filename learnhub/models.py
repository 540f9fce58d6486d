"""Database models."""

import uuid
from datetime import datetime

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from learnhub.database import Base


class Topic(Base):
    """Topic model used to tag guides and courses."""

    __tablename__ = "topics"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of Topic."""
        return f"<Topic(id={self.id}, name='{self.name}')>"


class Guide(Base):
    """Guide model; pages and association rows are owned by the guide."""

    __tablename__ = "guides"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cover_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    likes_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    course_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("courses.id"), nullable=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )

    authors: Mapped[list["GuideAuthor"]] = relationship(
        cascade="all, delete-orphan", lazy="selectin"
    )
    topics: Mapped[list["GuideTopic"]] = relationship(
        cascade="all, delete-orphan", lazy="selectin"
    )
    challenges: Mapped[list["GuideChallenge"]] = relationship(
        cascade="all, delete-orphan", lazy="selectin"
    )
    pages: Mapped[list["Page"]] = relationship(
        cascade="all, delete-orphan", lazy="selectin", order_by="Page.order_number"
    )

    def __repr__(self) -> str:
        """String representation of Guide."""
        return f"<Guide(id={self.id}, title='{self.title[:50]}', status={self.status})>"


class GuideAuthor(Base):
    __tablename__ = "guide_authors"

    guide_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("guides.id", ondelete="CASCADE"), primary_key=True
    )
    user_id: Mapped[str] = mapped_column(String(255), primary_key=True, index=True)


class GuideTopic(Base):
    __tablename__ = "guide_topics"

    guide_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("guides.id", ondelete="CASCADE"), primary_key=True
    )
    topic_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("topics.id", ondelete="CASCADE"), primary_key=True, index=True
    )


class GuideChallenge(Base):
    __tablename__ = "guide_challenges"

    guide_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("guides.id", ondelete="CASCADE"), primary_key=True
    )
    challenge_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)


class Page(Base):
    """Page model. Order numbers are unique within a guide and may have gaps."""

    __tablename__ = "pages"
    __table_args__ = (
        UniqueConstraint("guide_id", "order_number", name="uq_pages_guide_order"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    guide_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("guides.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    order_number: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        """String representation of Page."""
        return f"<Page(id={self.id}, guide_id={self.guide_id}, order={self.order_number})>"


class GuideLike(Base):
    __tablename__ = "guide_likes"
    __table_args__ = (UniqueConstraint("guide_id", "user_id", name="uq_guide_likes_guide_user"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    guide_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("guides.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class Course(Base):
    """Course model; guide membership is kept in course_guides with a position."""

    __tablename__ = "courses"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cover_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    difficulty_level: Mapped[str] = mapped_column(String(32), nullable=False)
    likes_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )

    authors: Mapped[list["CourseAuthor"]] = relationship(
        cascade="all, delete-orphan", lazy="selectin"
    )
    topics: Mapped[list["CourseTopic"]] = relationship(
        cascade="all, delete-orphan", lazy="selectin"
    )
    guides: Mapped[list["CourseGuide"]] = relationship(
        cascade="all, delete-orphan", lazy="selectin", order_by="CourseGuide.position"
    )

    def __repr__(self) -> str:
        """String representation of Course."""
        return f"<Course(id={self.id}, title='{self.title[:50]}', status={self.status})>"


class CourseAuthor(Base):
    __tablename__ = "course_authors"

    course_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True
    )
    user_id: Mapped[str] = mapped_column(String(255), primary_key=True, index=True)


class CourseTopic(Base):
    __tablename__ = "course_topics"

    course_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True
    )
    topic_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("topics.id", ondelete="CASCADE"), primary_key=True, index=True
    )


class CourseGuide(Base):
    """Membership of a guide in a course; a guide belongs to at most one course."""

    __tablename__ = "course_guides"

    course_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True
    )
    guide_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("guides.id", ondelete="CASCADE"), primary_key=True, unique=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)


class Enrollment(Base):
    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint("user_id", "course_id", name="uq_enrollments_user_course"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    course_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("courses.id"), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    enrolled_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    cancelled_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        """String representation of Enrollment."""
        return f"<Enrollment(user_id='{self.user_id}', course_id={self.course_id})>"


class LearningProgress(Base):
    __tablename__ = "learning_progress"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "entity_type", "entity_id", name="uq_learning_progress_user_entity"
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    entity_type: Mapped[str] = mapped_column(String(16), nullable=False)
    entity_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    total_items: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    completed_items: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    progress_percentage: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_reading_time_seconds: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    started_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
