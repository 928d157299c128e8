from sqlalchemy import Boolean, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from devsync.db.session import Base
from devsync.models.common import StringIdMixin, TimestampMixin
from devsync.models.question import Question
from devsync.models.user import User

class Answer(Base, StringIdMixin, TimestampMixin):
    __tablename__ = "answers"
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_accepted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    question_id: Mapped[str] = mapped_column(ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True)
    author_id: Mapped[str] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)

    question: Mapped[Question] = relationship(Question)
    author: Mapped[User] = relationship(User)
