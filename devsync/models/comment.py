from sqlalchemy import Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from devsync.db.session import Base
from devsync.models.common import StringIdMixin, TimestampMixin
from devsync.models.enums import TargetType
from devsync.models.user import User

class Comment(Base, StringIdMixin, TimestampMixin):
    __tablename__ = "comments"
    content: Mapped[str] = mapped_column(Text, nullable=False)
    target_type: Mapped[TargetType] = mapped_column(Enum(TargetType, native_enum=False, length=20), nullable=False, index=True)
    target_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    author_id: Mapped[str] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)

    author: Mapped[User] = relationship(User)
