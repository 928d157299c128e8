from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from devsync.db.session import Base
from devsync.models.common import StringIdMixin, TimestampMixin

class Tag(Base, StringIdMixin, TimestampMixin):
    __tablename__ = "tags"
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    color: Mapped[str | None] = mapped_column(String(30), nullable=True)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    amount_used: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
