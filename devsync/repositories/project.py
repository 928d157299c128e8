from __future__ import annotations

from sqlalchemy import func

from devsync.models.project import Project
from devsync.repositories.repository import Repository
from devsync.services.search.catalog import PROJECT_SEARCH


class ProjectRepository(Repository[Project]):
    search_spec = PROJECT_SEARCH

    def exists_by_workspace_id(self, workspace_id: str) -> bool:
        workspace_id = self._require_id(workspace_id, "Workspace")
        return self.db.query(Project.id).filter(Project.workspace_id == workspace_id).first() is not None

    def count_by_workspace_ids(self, workspace_ids: list[str]) -> dict[str, int]:
        ids = [str(item).strip() for item in workspace_ids or [] if str(item or "").strip()]
        if not ids:
            return {}
        rows = (
            self.db.query(Project.workspace_id, func.count(Project.id))
            .filter(Project.workspace_id.in_(ids))
            .group_by(Project.workspace_id)
            .all()
        )
        return {workspace_id: int(count) for workspace_id, count in rows}
