from sqlalchemy import Column, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from devsync.db.session import Base
from devsync.models.common import StringIdMixin, TimestampMixin
from devsync.models.project import Project
from devsync.models.tag import Tag
from devsync.models.user import User

note_tags = Table(
    "note_tags",
    Base.metadata,
    Column("note_id", String(36), ForeignKey("notes.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", String(36), ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)

class Note(Base, StringIdMixin, TimestampMixin):
    __tablename__ = "notes"
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    version: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    project_id: Mapped[str] = mapped_column(ForeignKey("projects.id"), nullable=False, index=True)
    author_id: Mapped[str] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)

    project: Mapped[Project] = relationship(Project)
    author: Mapped[User] = relationship(User)
    tags: Mapped[list[Tag]] = relationship(Tag, secondary=note_tags)
