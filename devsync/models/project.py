from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from devsync.db.session import Base
from devsync.models.common import StringIdMixin, TimestampMixin
from devsync.models.workspace import Workspace

class Project(Base, StringIdMixin, TimestampMixin):
    __tablename__ = "projects"
    name: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    workspace_id: Mapped[str] = mapped_column(ForeignKey("workspaces.id"), nullable=False, index=True)

    workspace: Mapped[Workspace] = relationship(Workspace)
