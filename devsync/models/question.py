from sqlalchemy import Column, Enum, ForeignKey, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from devsync.db.session import Base
from devsync.models.common import StringIdMixin, TimestampMixin
from devsync.models.enums import QuestionStatus
from devsync.models.project import Project
from devsync.models.tag import Tag
from devsync.models.user import User

question_tags = Table(
    "question_tags",
    Base.metadata,
    Column("question_id", String(36), ForeignKey("questions.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", String(36), ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)

class Question(Base, StringIdMixin, TimestampMixin):
    __tablename__ = "questions"
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[QuestionStatus] = mapped_column(
        Enum(QuestionStatus, native_enum=False, length=20), nullable=False, default=QuestionStatus.OPEN, index=True
    )
    author_id: Mapped[str] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    project_id: Mapped[str] = mapped_column(ForeignKey("projects.id"), nullable=False, index=True)

    author: Mapped[User] = relationship(User)
    project: Mapped[Project] = relationship(Project)
    tags: Mapped[list[Tag]] = relationship(Tag, secondary=question_tags)
